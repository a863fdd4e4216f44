# docker_engine_mcp/cli.py
"""
Command-Line Interface (CLI)

Typer application for serving the Docker Engine tools over MCP, browsing
the tool catalog and running a single tool straight against the daemon.
"""

import json
from typing import Optional

import typer

from . import get_version
from .log import configure_logging
from .mcp.server import start_mcp_server
from .settings import EngineSettings, settings
from .tools import build_registry, get_all_tool_names

# Create the main Typer application instance
app = typer.Typer(
    name="docker-engine-mcp",
    help="Docker Engine REST API exposed as Model Context Protocol tools.",
    add_completion=False,
    no_args_is_help=True,
)


def _resolve_settings(base_url: Optional[str]) -> EngineSettings:
    if base_url:
        return EngineSettings(BASE_URL=base_url)
    return settings


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Address to bind (default: DOCKER_MCP_SERVER_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on (default: DOCKER_MCP_SERVER_PORT)"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Docker Engine API base URL"),
):
    """
    Start the MCP server exposing every Docker Engine tool.
    """
    start_mcp_server(host=host, port=port, settings=_resolve_settings(base_url))


@app.command()
def tools(
    filter: Optional[str] = typer.Option(None, "--filter", "-f", help="Only show tools whose name contains this text"),
):
    """
    List the available tools with their descriptions.
    """
    registry = build_registry(settings)
    shown = 0
    for tool in registry.get_tools():
        if filter and filter not in tool.name:
            continue
        typer.echo(f"{tool.name:<40} {tool.description}")
        shown += 1
    typer.echo(f"\n{shown} of {len(registry)} tools")


@app.command()
def schema(name: str = typer.Argument(..., help="Tool name, e.g. get_containers_json")):
    """
    Print the MCP definition of one tool.
    """
    registry = build_registry(settings)
    tool = registry.get_tool(name)
    if tool is None:
        typer.echo(f"❌ Unknown tool: {name}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(tool.to_mcp_definition(), indent=2))


@app.command()
def call(
    name: str = typer.Argument(..., help="Tool name, e.g. get_containers_json"),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Docker Engine API base URL"),
):
    """
    Run one tool against the Docker Engine and print the result.

    Example: docker-engine-mcp call get_containers_json --args '{"all": true}'
    """
    engine_settings = _resolve_settings(base_url)
    configure_logging(engine_settings.LOG_LEVEL)

    try:
        arguments = json.loads(args)
    except json.JSONDecodeError as e:
        typer.echo(f"❌ --args is not valid JSON: {e}", err=True)
        raise typer.Exit(code=2)
    if not isinstance(arguments, dict):
        typer.echo("❌ Invalid arguments object", err=True)
        raise typer.Exit(code=2)

    registry = build_registry(engine_settings)
    tool = registry.get_tool(name)
    if tool is None:
        typer.echo(f"❌ Unknown tool: {name}", err=True)
        typer.echo(f"   Run 'docker-engine-mcp tools' to see the {len(get_all_tool_names(registry))} available tools.", err=True)
        raise typer.Exit(code=1)

    result = tool.run(**arguments)
    typer.echo(result.text)
    if result.is_error:
        raise typer.Exit(code=1)


@app.command()
def version():
    """
    Show the version.
    """
    typer.echo(f"docker-engine-mcp {get_version()}")


def main():
    app()


if __name__ == "__main__":
    main()

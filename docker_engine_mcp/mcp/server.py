# docker_engine_mcp/mcp/server.py
"""
MCP (Model Context Protocol) Server

This server exposes the Docker Engine tools as JSON-RPC 2.0 methods over
HTTP. It uses the Werkzeug WSGI server for HTTP handling and the json-rpc
library for the protocol. Besides the MCP methods (initialize, tools/list,
tools/call, ping) every tool is also registered directly as a method named
after the tool, taking its arguments as params.
"""

import json
from typing import Any, Dict, Optional

from jsonrpc import Dispatcher, JSONRPCResponseManager
from jsonrpc.exceptions import JSONRPCDispatchException
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response

from .. import __version__
from ..log import configure_logging, get_logger
from ..settings import EngineSettings
from ..tools import ToolRegistry, build_registry
from ..tools.base import ToolResult

logger = get_logger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "docker-engine-mcp"

# JSON-RPC error code for a method call naming an unknown tool
INVALID_PARAMS = -32602


def execute_tool(registry: ToolRegistry, tool_name: str, arguments: Any) -> Dict[str, Any]:
    """
    Run one tool and return its MCP call result.

    Unexpected exceptions from the tool are reported as error results, so a
    faulty tool never takes the server down.
    """
    if not isinstance(arguments, dict):
        return ToolResult.error("Invalid arguments object").to_mcp()

    tool = registry.get_tool(tool_name)
    if tool is None:
        return ToolResult.error(f"Tool '{tool_name}' not found in registry").to_mcp()

    try:
        result = tool.run(**arguments)
    except Exception as e:
        logger.exception("Tool %s raised", tool_name)
        result = ToolResult.error(f"Tool execution failed: {str(e)}")
    return result.to_mcp()


def create_tool_handler(registry: ToolRegistry, tool_name: str):
    """
    Factory function that creates a JSON-RPC handler for a specific tool.

    The handler receives the tool arguments as keyword params.
    """
    def handler(**kwargs) -> Dict[str, Any]:
        return execute_tool(registry, tool_name, kwargs)

    return handler


def create_dispatcher(registry: ToolRegistry) -> Dispatcher:
    """Build a dispatcher holding the MCP methods and one method per tool."""
    dispatcher = Dispatcher()

    def initialize(**kwargs) -> Dict[str, Any]:
        client = kwargs.get("clientInfo") or {}
        logger.info("Client connected: %s %s", client.get("name", "unknown"), client.get("version", ""))
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {"name": SERVER_NAME, "version": __version__},
        }

    def list_tools(**kwargs) -> Dict[str, Any]:
        return {"tools": [tool.to_mcp_definition() for tool in registry.get_tools()]}

    def call_tool(name: str, arguments: Any = None, **kwargs) -> Dict[str, Any]:
        if name not in registry:
            raise JSONRPCDispatchException(code=INVALID_PARAMS, message=f"Unknown tool: {name}")
        return execute_tool(registry, name, {} if arguments is None else arguments)

    def ping(**kwargs) -> Dict[str, Any]:
        return {}

    dispatcher.add_method(initialize, "initialize")
    dispatcher.add_method(list_tools, "tools/list")
    dispatcher.add_method(call_tool, "tools/call")
    dispatcher.add_method(ping, "ping")

    # Automatically register all tools as JSON-RPC methods
    for tool in registry.get_tools():
        dispatcher.add_method(create_tool_handler(registry, tool.name), tool.name)

    return dispatcher


def create_application(registry: ToolRegistry):
    """
    Create the WSGI application serving the given registry.

    POST requests carry JSON-RPC messages; GET /health reports liveness and
    the number of registered tools.
    """
    dispatcher = create_dispatcher(registry)

    def application(environ, start_response):
        request = Request(environ)

        if request.method == "GET":
            if request.path == "/health":
                body = json.dumps({"status": "ok", "tools": len(registry)})
                return Response(body, mimetype="application/json")(environ, start_response)
            return Response("Not Found", status=404)(environ, start_response)

        # Handle the JSON-RPC request using the dispatcher
        request_body = request.get_data(as_text=True)
        response = JSONRPCResponseManager.handle(request_body, dispatcher)

        # Notifications get no JSON-RPC response
        if response is None:
            return Response(status=204)(environ, start_response)

        wsgi_response = Response(response.json, mimetype="application/json")
        return wsgi_response(environ, start_response)

    return application


def start_mcp_server(host: Optional[str] = None, port: Optional[int] = None,
                     settings: Optional[EngineSettings] = None):
    """
    Start the MCP server.

    This function starts the Werkzeug WSGI server and serves requests until
    stopped.

    Args:
        host (str): The host address to bind to. If None, uses settings.SERVER_HOST.
        port (int): The port to listen on. If None, uses settings.SERVER_PORT.
        settings (EngineSettings): Engine configuration. If None, uses the
            module-level default.
    """
    if settings is None:
        from ..settings import settings
    if host is None:
        host = settings.SERVER_HOST
    if port is None:
        port = settings.SERVER_PORT

    configure_logging(settings.LOG_LEVEL)
    registry = build_registry(settings)

    logger.info("MCP Server running at http://%s:%s", host, port)
    logger.info("Docker Engine API: %s", settings.BASE_URL)
    logger.info("Available tools: %d", len(registry))

    run_simple(
        hostname=host,
        port=port,
        application=create_application(registry),
        use_reloader=False,
        use_debugger=False,
        threaded=True  # Allow multiple requests simultaneously
    )

import json
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from docker_engine_mcp import __version__
from docker_engine_mcp.cli import app

runner = CliRunner()

TRANSPORT = "docker_engine_mcp.tools.adapter.requests.request"


def daemon_response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    response.content = body.encode("utf-8")
    return response


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_tools_lists_catalog():
    result = runner.invoke(app, ["tools"])
    assert result.exit_code == 0
    assert "get_containers_json" in result.output
    assert "post_services_id_update" in result.output


def test_tools_filter():
    result = runner.invoke(app, ["tools", "--filter", "swarm"])
    assert result.exit_code == 0
    assert "post_swarm_join" in result.output
    assert "get_containers_json" not in result.output


def test_schema():
    result = runner.invoke(app, ["schema", "get_images_search"])
    assert result.exit_code == 0
    definition = json.loads(result.output)
    assert definition["name"] == "get_images_search"
    assert definition["inputSchema"]["required"] == ["term"]


def test_schema_unknown_tool():
    result = runner.invoke(app, ["schema", "docker_run_container"])
    assert result.exit_code == 1


@patch(TRANSPORT)
def test_call_prints_result(mock_request):
    mock_request.return_value = daemon_response(200, '{"Volumes": [], "Warnings": null}')

    result = runner.invoke(app, ["call", "get_volumes", "--args", '{"filters": "{}"}', "--base-url", "http://docker:2375/"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"Volumes": [], "Warnings": None}
    args, _ = mock_request.call_args
    assert args == ("GET", "http://docker:2375/volumes?filters={}")


@patch(TRANSPORT)
def test_call_error_result_exits_nonzero(mock_request):
    mock_request.return_value = daemon_response(500, '{"message":"daemon unavailable"}')

    result = runner.invoke(app, ["call", "get_info", "--base-url", "http://docker:2375"])

    assert result.exit_code == 1
    assert 'API error: {"message":"daemon unavailable"}' in result.output


@patch(TRANSPORT)
def test_call_with_bad_json(mock_request):
    result = runner.invoke(app, ["call", "get_info", "--args", "{not json"])
    assert result.exit_code == 2
    mock_request.assert_not_called()


@patch(TRANSPORT)
def test_call_unknown_tool(mock_request):
    result = runner.invoke(app, ["call", "docker_ps"])
    assert result.exit_code == 1
    mock_request.assert_not_called()


@patch("docker_engine_mcp.cli.start_mcp_server")
def test_serve(mock_start):
    result = runner.invoke(app, ["serve", "--port", "9100", "--base-url", "http://docker:2375"])
    assert result.exit_code == 0
    kwargs = mock_start.call_args.kwargs
    assert kwargs["port"] == 9100
    assert kwargs["host"] is None
    assert kwargs["settings"].BASE_URL == "http://docker:2375"

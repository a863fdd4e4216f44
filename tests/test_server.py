import json
import unittest
from unittest.mock import MagicMock, patch

from werkzeug.test import Client

from docker_engine_mcp.mcp.server import create_application, start_mcp_server
from docker_engine_mcp.settings import EngineSettings
from docker_engine_mcp.tools import build_registry
from docker_engine_mcp.tools.base import Tool
from docker_engine_mcp.tools.registry import ToolRegistry

TRANSPORT = "docker_engine_mcp.tools.adapter.requests.request"


class BrokenTool(Tool):
    name = "broken"
    description = "Always raises"
    def get_parameters_schema(self): return {"type": "object", "properties": {}, "required": []}
    def run(self, **kwargs): raise RuntimeError("kaboom")


def rpc(method, params=None, id=1):
    payload = {"jsonrpc": "2.0", "method": method, "id": id}
    if params is not None:
        payload["params"] = params
    return payload


def daemon_response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    response.content = body.encode("utf-8")
    return response


class TestMCPServer(unittest.TestCase):

    def setUp(self):
        self.registry = build_registry(EngineSettings(BASE_URL="http://docker:2375"))
        self.client = Client(create_application(self.registry))

    def call(self, method, params=None):
        response = self.client.post("/", json=rpc(method, params))
        self.assertEqual(response.status_code, 200)
        return response.get_json()

    def test_initialize(self):
        reply = self.call("initialize", {"protocolVersion": "2024-11-05", "capabilities": {},
                                         "clientInfo": {"name": "pytest", "version": "1"}})
        result = reply["result"]
        self.assertEqual(result["serverInfo"]["name"], "docker-engine-mcp")
        self.assertIn("tools", result["capabilities"])
        self.assertEqual(result["protocolVersion"], "2024-11-05")

    def test_tools_list(self):
        tools = self.call("tools/list")["result"]["tools"]
        self.assertEqual(len(tools), len(self.registry))
        first = tools[0]
        self.assertEqual(first["name"], "get_containers_json")
        self.assertEqual(first["inputSchema"]["type"], "object")

    def test_ping(self):
        self.assertEqual(self.call("ping")["result"], {})

    @patch(TRANSPORT)
    def test_tools_call_success(self, mock_request):
        mock_request.return_value = daemon_response(200, '[{"Id": "abc"}]')

        result = self.call("tools/call", {"name": "get_containers_json", "arguments": {"all": True}})["result"]

        self.assertFalse(result["isError"])
        self.assertEqual(result["content"][0]["type"], "text")
        self.assertEqual(json.loads(result["content"][0]["text"]), [{"Id": "abc"}])
        args, _ = mock_request.call_args
        self.assertEqual(args, ("GET", "http://docker:2375/containers/json?all=true"))

    @patch(TRANSPORT)
    def test_tools_call_api_error(self, mock_request):
        mock_request.return_value = daemon_response(404, '{"message":"No such container: nope"}')

        result = self.call("tools/call", {"name": "get_containers_id_json", "arguments": {"id": "nope"}})["result"]

        self.assertTrue(result["isError"])
        self.assertEqual(result["content"][0]["text"], 'API error: {"message":"No such container: nope"}')

    @patch(TRANSPORT)
    def test_tools_call_missing_path_parameter(self, mock_request):
        result = self.call("tools/call", {"name": "get_containers_id_json", "arguments": {}})["result"]

        self.assertTrue(result["isError"])
        self.assertEqual(result["content"][0]["text"], "Missing required path parameter: id")
        mock_request.assert_not_called()

    def test_tools_call_invalid_arguments_object(self):
        result = self.call("tools/call", {"name": "get_containers_json", "arguments": ["all"]})["result"]

        self.assertTrue(result["isError"])
        self.assertEqual(result["content"][0]["text"], "Invalid arguments object")

    def test_tools_call_unknown_tool(self):
        reply = self.call("tools/call", {"name": "docker_run_container", "arguments": {}})

        self.assertIn("error", reply)
        self.assertEqual(reply["error"]["code"], -32602)
        self.assertIn("docker_run_container", reply["error"]["message"])

    @patch(TRANSPORT)
    def test_tool_registered_as_method(self, mock_request):
        mock_request.return_value = daemon_response(200, "OK")

        result = self.call("get_ping", {})["result"]

        self.assertFalse(result["isError"])
        self.assertEqual(result["content"][0]["text"], "OK")

    def test_unknown_method(self):
        reply = self.call("resources/list")
        self.assertEqual(reply["error"]["code"], -32601)

    def test_notification_gets_no_body(self):
        response = self.client.post("/", json={"jsonrpc": "2.0", "method": "ping"})
        self.assertEqual(response.status_code, 204)

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "ok", "tools": len(self.registry)})

    def test_unknown_get_path(self):
        self.assertEqual(self.client.get("/metrics").status_code, 404)


def test_tool_exceptions_become_error_results():
    registry = ToolRegistry()
    registry.register(BrokenTool())
    client = Client(create_application(registry))

    reply = client.post("/", json=rpc("tools/call", {"name": "broken", "arguments": {}})).get_json()

    assert reply["result"]["isError"] is True
    assert reply["result"]["content"][0]["text"] == "Tool execution failed: kaboom"


@patch("docker_engine_mcp.mcp.server.run_simple")
def test_start_mcp_server(mock_run_simple):
    settings = EngineSettings(BASE_URL="http://docker:2375", SERVER_HOST="0.0.0.0", SERVER_PORT=9100)

    start_mcp_server(settings=settings)

    mock_run_simple.assert_called_once()
    kwargs = mock_run_simple.call_args.kwargs
    assert kwargs["hostname"] == "0.0.0.0"
    assert kwargs["port"] == 9100
    assert kwargs["threaded"] is True


@patch("docker_engine_mcp.mcp.server.run_simple")
def test_start_mcp_server_explicit_host_and_port(mock_run_simple):
    start_mcp_server(host="127.0.0.1", port=8181, settings=EngineSettings())

    kwargs = mock_run_simple.call_args.kwargs
    assert kwargs["hostname"] == "127.0.0.1"
    assert kwargs["port"] == 8181

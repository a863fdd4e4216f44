import json
import logging
import unittest
from unittest.mock import MagicMock, PropertyMock, patch

import pytest
import requests

from docker_engine_mcp.settings import EngineSettings
from docker_engine_mcp.tools.adapter import EndpointTool, format_value
from docker_engine_mcp.tools.descriptor import ParamType, ResponseShape
from docker_engine_mcp.tools.endpoints import ALL_ENDPOINTS

BASE_URL = "http://docker:2375"

TRANSPORT = "docker_engine_mcp.tools.adapter.requests.request"

# One valid sample per parameter type, and how it renders in a query string
SAMPLES = {
    ParamType.STRING: ("x1", "x1"),
    ParamType.NUMBER: (5, "5"),
    ParamType.BOOLEAN: (True, "true"),
    ParamType.ARRAY: (["a"], '["a"]'),
    ParamType.OBJECT: ({"k": "v"}, '{"k":"v"}'),
}

# A 200 body of the expected shape for each response shape
SHAPED_BODIES = {
    ResponseShape.OBJECT: '{"Id": "abc123", "Warnings": []}',
    ResponseShape.ARRAY: '[{"Id": "abc123", "Names": ["/web"]}, {"Id": "def456", "Names": ["/db"]}]',
    ResponseShape.MODEL: '{"Name": "x"}',
    ResponseShape.MODEL_LIST: '[{"Name": "x"}, {"Name": "y"}]',
    ResponseShape.STRING: '"done"',
    ResponseShape.ANY: '{"Name": "x"}',
}


def make_response(status_code=200, body=""):
    response = MagicMock()
    response.status_code = status_code
    response.content = body.encode("utf-8")
    return response


def make_tool(descriptor, **overrides):
    return EndpointTool(descriptor, EngineSettings(BASE_URL=BASE_URL, **overrides))


def valid_arguments(descriptor):
    """Required parameters plus every other optional query parameter."""
    arguments = {p.name: "abc" for p in descriptor.path_params}
    optional_index = 0
    for param in descriptor.params:
        if param.location == "path":
            continue
        if param.required:
            arguments[param.name] = SAMPLES[param.type][0]
        elif param.location == "query":
            if optional_index % 2 == 0:
                arguments[param.name] = SAMPLES[param.type][0]
            optional_index += 1
    return arguments


ids = [d.name for d in ALL_ENDPOINTS]


# ---------------------------------------------------------------------------
# Properties that hold for every tool in the catalog
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("descriptor", ALL_ENDPOINTS, ids=ids)
def test_url_has_path_substitution_and_ordered_query(descriptor):
    arguments = valid_arguments(descriptor)
    expected_path = descriptor.path
    for param in descriptor.path_params:
        expected_path = expected_path.replace("{" + param.name + "}", "abc")
    expected_query = "&".join(
        f"{p.name}={SAMPLES[p.type][1]}" for p in descriptor.query_params if p.name in arguments
    )
    expected_url = BASE_URL + expected_path + (f"?{expected_query}" if expected_query else "")

    with patch(TRANSPORT, return_value=make_response(200, "{}")) as mock_request:
        result = make_tool(descriptor).run(**arguments)

    assert not result.is_error, result.text
    mock_request.assert_called_once()
    args, _ = mock_request.call_args
    assert args == (descriptor.method, expected_url)


@pytest.mark.parametrize("descriptor", [d for d in ALL_ENDPOINTS if d.path_params], ids=lambda d: d.name)
def test_missing_path_parameter_makes_no_call(descriptor):
    arguments = valid_arguments(descriptor)
    missing = descriptor.path_params[0].name
    del arguments[missing]

    with patch(TRANSPORT) as mock_request:
        result = make_tool(descriptor).run(**arguments)

    assert result.is_error
    assert result.text == f"Missing required path parameter: {missing}"
    mock_request.assert_not_called()


@pytest.mark.parametrize("descriptor", [d for d in ALL_ENDPOINTS if d.path_params], ids=lambda d: d.name)
def test_mistyped_path_parameter_makes_no_call(descriptor):
    arguments = valid_arguments(descriptor)
    mistyped = descriptor.path_params[0].name
    arguments[mistyped] = 42

    with patch(TRANSPORT) as mock_request:
        result = make_tool(descriptor).run(**arguments)

    assert result.is_error
    assert result.text == f"Invalid path parameter: {mistyped}"
    mock_request.assert_not_called()


@pytest.mark.parametrize("descriptor", ALL_ENDPOINTS, ids=ids)
def test_http_error_carries_raw_body(descriptor):
    body = '{"message":"not found"}'
    with patch(TRANSPORT, return_value=make_response(404, body)):
        result = make_tool(descriptor).run(**valid_arguments(descriptor))

    assert result.is_error
    assert body in result.text


@pytest.mark.parametrize("descriptor", ALL_ENDPOINTS, ids=ids)
def test_success_is_indented_reserialization(descriptor):
    body = SHAPED_BODIES[descriptor.response]
    with patch(TRANSPORT, return_value=make_response(200, body)):
        result = make_tool(descriptor).run(**valid_arguments(descriptor))

    assert not result.is_error
    assert result.text == json.dumps(json.loads(body), indent=2)


@pytest.mark.parametrize("descriptor", ALL_ENDPOINTS, ids=ids)
def test_invalid_json_falls_back_to_raw_text(descriptor):
    body = "<html>definitely not json</html>"
    with patch(TRANSPORT, return_value=make_response(200, body)):
        result = make_tool(descriptor).run(**valid_arguments(descriptor))

    assert not result.is_error
    assert result.text == body


# ---------------------------------------------------------------------------
# Adapter details, on representative endpoints
# ---------------------------------------------------------------------------

def endpoint(name):
    return next(d for d in ALL_ENDPOINTS if d.name == name)


class TestEndpointTool(unittest.TestCase):

    def setUp(self):
        self.settings = EngineSettings(BASE_URL=BASE_URL)

    def tool(self, name, settings=None):
        return EndpointTool(endpoint(name), settings or self.settings)

    @patch(TRANSPORT)
    def test_get_sends_accept_and_no_body(self, mock_request):
        mock_request.return_value = make_response(200, "[]")

        result = self.tool("get_containers_json").run(all=True, limit=10.0)

        self.assertFalse(result.is_error)
        self.assertEqual(result.text, "[]")
        args, kwargs = mock_request.call_args
        self.assertEqual(args[1], f"{BASE_URL}/containers/json?all=true&limit=10")
        self.assertEqual(kwargs["headers"], {"Accept": "application/json"})
        self.assertIsNone(kwargs["data"])
        self.assertTrue(kwargs["verify"])
        self.assertIsNone(kwargs["timeout"])

    @patch(TRANSPORT)
    def test_object_body_excludes_routing_arguments(self, mock_request):
        mock_request.return_value = make_response(201, '{"Id": "abc", "Warnings": []}')

        result = self.tool("post_containers_create").run(
            name="web", Image="nginx:latest", Cmd=["nginx", "-g", "daemon off;"], HostConfig={"Privileged": False}
        )

        self.assertFalse(result.is_error)
        args, kwargs = mock_request.call_args
        self.assertEqual(args, ("POST", f"{BASE_URL}/containers/create?name=web"))
        self.assertEqual(kwargs["headers"]["Content-Type"], "application/json")
        self.assertEqual(json.loads(kwargs["data"]), {
            "Image": "nginx:latest",
            "Cmd": ["nginx", "-g", "daemon off;"],
            "HostConfig": {"Privileged": False},
        })
        self.assertEqual(json.loads(result.text), {"Id": "abc", "Warnings": []})

    @patch(TRANSPORT)
    def test_registry_auth_header_is_forwarded_verbatim(self, mock_request):
        mock_request.return_value = make_response(200, "{}")

        self.tool("post_services_id_update").run(
            **{"id": "svc1", "version": 12, "X-Registry-Auth": "eyJ1c2VyIjoiYm9iIn0=", "Name": "web"}
        )

        args, kwargs = mock_request.call_args
        self.assertEqual(args[1], f"{BASE_URL}/services/svc1/update?version=12")
        self.assertEqual(kwargs["headers"]["X-Registry-Auth"], "eyJ1c2VyIjoiYm9iIn0=")
        self.assertEqual(json.loads(kwargs["data"]), {"Name": "web"})

    @patch(TRANSPORT)
    def test_images_create_sends_no_body(self, mock_request):
        mock_request.return_value = make_response(200, '{"status":"Pulling from library/alpine"}\n{"status":"Done"}')

        result = self.tool("post_images_create").run(fromImage="alpine", tag="3.19")

        args, kwargs = mock_request.call_args
        self.assertEqual(args[1], f"{BASE_URL}/images/create?fromImage=alpine&tag=3.19")
        self.assertIsNone(kwargs["data"])
        self.assertNotIn("Content-Type", kwargs["headers"])
        # Streamed progress is not a single JSON document
        self.assertFalse(result.is_error)
        self.assertIn("Pulling from library/alpine", result.text)

    @patch(TRANSPORT)
    def test_bearer_token_is_sent(self, mock_request):
        mock_request.return_value = make_response(200, "{}")
        settings = EngineSettings(BASE_URL=BASE_URL, API_TOKEN="tkn", VERIFY_SSL=False, REQUEST_TIMEOUT=3)

        self.tool("get_info", settings).run()

        _, kwargs = mock_request.call_args
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer tkn")
        self.assertFalse(kwargs["verify"])
        self.assertEqual(kwargs["timeout"], 3)

    @patch(TRANSPORT)
    def test_model_body_drops_unknown_keys(self, mock_request):
        mock_request.return_value = make_response(201, '{"Id": "sha256:1"}')

        result = self.tool("post_commit").run(
            container="web", repo="me/web", Image="nginx", Env=["A=1"], Bogus="dropped"
        )

        _, kwargs = mock_request.call_args
        self.assertEqual(json.loads(kwargs["data"]), {"Image": "nginx", "Env": ["A=1"]})
        self.assertEqual(json.loads(result.text), {"Id": "sha256:1"})

    @patch(TRANSPORT)
    def test_model_body_type_mismatch_is_reported(self, mock_request):
        result = self.tool("post_commit").run(container="web", Env="A=1", Tty={"no": "bool"})

        self.assertTrue(result.is_error)
        self.assertTrue(result.text.startswith("Failed to convert arguments to request type:"))
        mock_request.assert_not_called()

    @patch(TRANSPORT)
    def test_raw_body_is_the_designated_argument(self, mock_request):
        mock_request.return_value = make_response(204, "")

        result = self.tool("post_plugins_name_set").run(name="vieux/sshfs", body=["DEBUG=1"])

        args, kwargs = mock_request.call_args
        self.assertEqual(args, ("POST", f"{BASE_URL}/plugins/vieux/sshfs/set"))
        self.assertEqual(json.loads(kwargs["data"]), ["DEBUG=1"])
        self.assertFalse(result.is_error)
        self.assertEqual(result.text, "")

    @patch(TRANSPORT)
    def test_missing_required_query_parameter(self, mock_request):
        result = self.tool("get_images_search").run(limit=3)

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Missing required parameter: term")
        mock_request.assert_not_called()

    @patch(TRANSPORT)
    def test_missing_required_body_parameter(self, mock_request):
        result = self.tool("post_networks_create").run(Driver="bridge")

        self.assertEqual(result.text, "Missing required parameter: Name")
        mock_request.assert_not_called()

    @patch(TRANSPORT)
    def test_none_query_values_are_omitted(self, mock_request):
        mock_request.return_value = make_response(200, "[]")

        self.tool("get_containers_json").run(all=None, size=False)

        args, _ = mock_request.call_args
        self.assertEqual(args[1], f"{BASE_URL}/containers/json?size=false")

    @patch(TRANSPORT)
    def test_values_are_not_encoded_by_default(self, mock_request):
        mock_request.return_value = make_response(200, "[]")

        with self.assertLogs("docker_engine_mcp.tools.adapter", level="WARNING") as logs:
            self.tool("get_images_search").run(term="a&b c")

        args, _ = mock_request.call_args
        self.assertEqual(args[1], f"{BASE_URL}/images/search?term=a&b c")
        self.assertIn("term", logs.output[0])

    @patch(TRANSPORT)
    def test_percent_encoding_when_enabled(self, mock_request):
        mock_request.return_value = make_response(200, "{}")
        settings = EngineSettings(BASE_URL=BASE_URL, PERCENT_ENCODE=True)

        self.tool("get_containers_json", settings).run(filters={"status": ["paused"]})
        args, _ = mock_request.call_args
        self.assertEqual(args[1], f"{BASE_URL}/containers/json?filters=%7B%22status%22%3A%5B%22paused%22%5D%7D")

        self.tool("get_images_name_json", settings).run(name="registry:5000/app")
        args, _ = mock_request.call_args
        self.assertEqual(args[1], f"{BASE_URL}/images/registry%3A5000%2Fapp/json")

    @patch(TRANSPORT)
    def test_transport_error(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("connection refused")

        result = self.tool("get_ping").run()

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Request failed: connection refused")

    @patch(TRANSPORT)
    def test_request_creation_error(self, mock_request):
        mock_request.side_effect = requests.exceptions.InvalidURL("bad url")

        result = self.tool("get_ping").run()

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Failed to create request: bad url")

    @patch(TRANSPORT)
    def test_body_read_error(self, mock_request):
        response = MagicMock()
        response.status_code = 200
        type(response).content = PropertyMock(side_effect=requests.exceptions.ChunkedEncodingError("truncated"))
        mock_request.return_value = response

        result = self.tool("get_version").run()

        self.assertTrue(result.is_error)
        self.assertEqual(result.text, "Failed to read response body: truncated")
        response.close.assert_called_once()

    @patch(TRANSPORT)
    def test_unencodable_object_body(self, mock_request):
        result = self.tool("post_volumes_create").run(Name="data", Labels={"set": {1, 2}})

        self.assertTrue(result.is_error)
        self.assertTrue(result.text.startswith("Failed to encode request body:"))
        mock_request.assert_not_called()

    @patch(TRANSPORT)
    def test_ping_plain_text_is_returned_raw(self, mock_request):
        mock_request.return_value = make_response(200, "OK")

        result = self.tool("get_ping").run()

        self.assertFalse(result.is_error)
        self.assertEqual(result.text, "OK")

    @patch(TRANSPORT)
    def test_model_response_keeps_aliases_and_unknown_keys(self, mock_request):
        body = {
            "ID": "n1",
            "Version": {"Index": 9},
            "Spec": {"Role": "manager", "Availability": "active"},
            "Status": {"State": "ready", "Addr": "10.0.0.2"},
            "FutureField": {"x": 1},
        }
        mock_request.return_value = make_response(200, json.dumps(body))

        result = self.tool("get_nodes_id").run(id="n1")

        self.assertFalse(result.is_error)
        self.assertEqual(json.loads(result.text), body)

    @patch(TRANSPORT)
    def test_model_response_keeps_daemon_key_order_and_values(self, mock_request):
        body = (
            '{"Status": {"State": "ready", "Addr": "10.0.0.2"}, "ID": "n1", '
            '"Version": {"Index": 12.0}, "Spec": {"Availability": "active", "Role": "manager"}}'
        )
        mock_request.return_value = make_response(200, body)

        result = self.tool("get_nodes_id").run(id="n1")

        self.assertFalse(result.is_error)
        self.assertEqual(result.text, json.dumps(json.loads(body), indent=2))
        self.assertTrue(result.text.startswith('{\n  "Status"'))
        self.assertIn('"Index": 12.0', result.text)

    def test_response_adapter_is_built_once_per_tool(self):
        tool = self.tool("get_nodes_id")
        adapter = tool.response_adapter
        with patch(TRANSPORT, return_value=make_response(200, '{"ID": "n1"}')):
            tool.run(id="n1")
            tool.run(id="n1")
        self.assertIs(tool.response_adapter, adapter)

    @patch(TRANSPORT)
    def test_shape_mismatch_falls_back_to_raw(self, mock_request):
        mock_request.return_value = make_response(200, '{"not": "a list"}')

        result = self.tool("get_containers_json").run()

        self.assertFalse(result.is_error)
        self.assertEqual(result.text, '{"not": "a list"}')

    def test_parameters_schema_is_descriptor_input_schema(self):
        tool = self.tool("get_containers_id_logs")
        schema = tool.get_parameters_schema()
        self.assertEqual(schema["required"], ["id"])
        self.assertEqual(list(schema["properties"])[:3], ["id", "follow", "stdout"])
        self.assertEqual(tool.to_mcp_definition()["inputSchema"], schema)


def test_format_value():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(10.0) == "10"
    assert format_value(1.5) == "1.5"
    assert format_value(7) == "7"
    assert format_value("running") == "running"
    assert format_value({"status": ["paused"]}) == '{"status":["paused"]}'
    assert format_value(["a", "b"]) == '["a","b"]'


def test_warning_is_logged_for_reserved_path_characters(caplog):
    tool = make_tool(endpoint("get_images_name_json"))
    with patch(TRANSPORT, return_value=make_response(200, "{}")):
        with caplog.at_level(logging.WARNING, logger="docker_engine_mcp.tools.adapter"):
            tool.run(name="app#1")
    assert "sent unencoded" in caplog.text


def test_namespaced_names_are_not_flagged():
    tool = make_tool(endpoint("get_images_name_json"))
    with patch(TRANSPORT, return_value=make_response(200, "{}")) as mock_request:
        with patch("docker_engine_mcp.tools.adapter.logger") as mock_logger:
            tool.run(name="library/nginx")
    mock_logger.warning.assert_not_called()
    args, _ = mock_request.call_args
    assert args[1] == f"{BASE_URL}/images/library/nginx/json"

import re
import pytest
from pydantic import ValidationError

from docker_engine_mcp.models import ContainerConfig, IdResponse
from docker_engine_mcp.tools.descriptor import (
    BodyShape,
    EndpointDescriptor,
    ParamLocation,
    ParamSpec,
    ParamType,
    ResponseShape,
    body,
    derive_tool_name,
    path,
    query,
    registry_auth,
)
from docker_engine_mcp.tools.endpoints import ALL_ENDPOINTS


def by_name(name):
    return next(d for d in ALL_ENDPOINTS if d.name == name)


def test_catalog_size():
    assert len(ALL_ENDPOINTS) >= 90


def test_tool_names_are_unique():
    names = [d.name for d in ALL_ENDPOINTS]
    assert len(names) == len(set(names))


def test_names_follow_method_and_path():
    for descriptor in ALL_ENDPOINTS:
        assert descriptor.name == derive_tool_name(descriptor.method, descriptor.path)
        assert re.fullmatch(r"(get|post|put|delete|head)_[a-z0-9_]+", descriptor.name)


@pytest.mark.parametrize("name", [
    "get_containers_json",
    "post_containers_create",
    "post_services_id_update",
    "get_containers_id_attach_ws",
    "post_commit",
    "get_events",
    "get_volumes",
    "get_images_search",
    "post_images_create",
    "get_services_id",
    "get_services_id_logs",
    "post_swarm_join",
    "post_networks_create",
    "post_containers_id_exec",
    "post_containers_id_update",
    "get_images_json",
    "delete_images_name",
    "get_ping",
    "get_distribution_name_json",
    "post_plugins_name_set",
    "head_containers_id_archive",
])
def test_known_tools_are_present(name):
    assert by_name(name)


def test_every_resource_group_is_covered():
    prefixes = {d.path.split("/")[1] for d in ALL_ENDPOINTS}
    for resource in ("containers", "exec", "images", "build", "commit", "networks", "volumes", "swarm",
                     "nodes", "services", "tasks", "secrets", "configs", "plugins", "auth", "info",
                     "version", "_ping", "events", "system", "distribution"):
        assert resource in prefixes


def test_path_parameters_are_required_strings():
    for descriptor in ALL_ENDPOINTS:
        for param in descriptor.path_params:
            assert param.required
            assert param.type == ParamType.STRING


def test_registry_auth_endpoints():
    with_auth = {d.name for d in ALL_ENDPOINTS if any(p.name == "X-Registry-Auth" for p in d.header_params)}
    assert {"post_images_create", "post_images_name_push", "post_services_create",
            "post_services_id_update", "post_plugins_pull", "get_distribution_name_json"} <= with_auth


def test_input_schema_of_container_list():
    schema = by_name("get_containers_json").input_schema()
    assert schema["type"] == "object"
    assert list(schema["properties"]) == ["all", "limit", "size", "filters"]
    assert schema["properties"]["all"]["type"] == "boolean"
    assert schema["properties"]["limit"]["type"] == "number"
    assert schema["required"] == []


def test_input_schema_lists_array_items():
    schema = by_name("post_containers_id_exec").input_schema()
    assert schema["properties"]["Cmd"] == {
        "type": "array",
        "items": {"type": "string"},
        "description": "Command to run, as a string or array of strings.",
    }
    assert schema["required"] == ["id"]


def test_mcp_definition():
    definition = by_name("get_images_search").to_mcp_definition()
    assert definition["name"] == "get_images_search"
    assert definition["description"] == "Search images"
    assert definition["inputSchema"]["required"] == ["term"]


def test_commit_coerces_into_container_config():
    descriptor = by_name("post_commit")
    assert descriptor.body == BodyShape.MODEL
    assert descriptor.body_model is ContainerConfig
    assert descriptor.response_model is IdResponse


def test_images_create_has_no_body():
    descriptor = by_name("post_images_create")
    assert descriptor.body == BodyShape.NONE
    assert not descriptor.sends_body


def test_derive_tool_name():
    assert derive_tool_name("GET", "/containers/{id}/json") == "get_containers_id_json"
    assert derive_tool_name("delete", "/images/{name}") == "delete_images_name"
    assert derive_tool_name("GET", "/_ping") == "get_ping"
    assert derive_tool_name("POST", "/build/prune") == "post_build_prune"


class TestDescriptorValidation:

    def test_placeholder_without_path_param(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="/containers/{id}/json", description="x")

    def test_path_param_without_placeholder(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="/containers/json", description="x",
                               params=(path("id", "container"),))

    def test_duplicate_parameter_names(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="/containers/json", description="x",
                               params=(query("all", ParamType.BOOLEAN, ""), query("all", ParamType.STRING, "")))

    def test_model_body_needs_model(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="POST", path="/commit", description="x", body=BodyShape.MODEL)

    def test_model_response_needs_model(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="GET", path="/info", description="x", response=ResponseShape.MODEL)

    def test_raw_body_must_name_a_body_param(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="POST", path="/plugins/pull", description="x",
                               params=(body("body", ParamType.ARRAY, ""),),
                               body=BodyShape.RAW, body_param="privileges")

    def test_body_params_need_a_body(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="POST", path="/swarm/join", description="x",
                               params=(body("JoinToken", ParamType.STRING, ""),))

    def test_unknown_method(self):
        with pytest.raises(ValidationError):
            EndpointDescriptor(method="FETCH", path="/info", description="x")

    def test_optional_path_param_is_rejected(self):
        with pytest.raises(ValidationError):
            ParamSpec(name="id", location=ParamLocation.PATH, required=False)

    def test_method_is_normalized_and_name_derived(self):
        descriptor = EndpointDescriptor(method="get", path="/volumes/{name}", description="Inspect a volume",
                                        params=(path("name", "Volume name"),))
        assert descriptor.method == "GET"
        assert descriptor.name == "get_volumes_name"

    def test_explicit_name_is_kept(self):
        descriptor = EndpointDescriptor(method="GET", path="/info", description="x", name="system_info")
        assert descriptor.name == "system_info"

    def test_registry_auth_helper(self):
        param = registry_auth()
        assert param.location == ParamLocation.HEADER
        assert param.name == "X-Registry-Auth"
        assert not param.required

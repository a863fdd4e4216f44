"""Managed plugin endpoints."""

from ...models import Plugin
from ..descriptor import (
    BodyShape,
    EndpointDescriptor,
    ParamType as T,
    ResponseShape,
    body,
    path,
    query,
    registry_auth,
)

PLUGIN_NAME = "The name of the plugin. The `:latest` tag is optional, and is the default if omitted."

PRIVILEGES = "The privileges the plugin requests, as returned by `get_plugins_privileges`, to be accepted."

ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/plugins",
        description="List plugins",
        params=(
            query("filters", T.STRING, "A JSON encoded value of the filters (a `map[string][]string`) to process on the plugin list. Available filters: capability, enable."),
        ),
        response=ResponseShape.MODEL_LIST, response_model=Plugin,
    ),
    EndpointDescriptor(
        method="GET", path="/plugins/privileges",
        description="Get plugin privileges",
        params=(
            query("remote", T.STRING, "The name of the plugin. The `:latest` tag is optional, and is the default if omitted.", required=True),
        ),
        response=ResponseShape.ARRAY,
    ),
    EndpointDescriptor(
        method="POST", path="/plugins/pull",
        description="Install a plugin",
        params=(
            query("remote", T.STRING, "Remote reference for the plugin to install.", required=True),
            query("name", T.STRING, "Local name for the pulled plugin."),
            registry_auth(),
            body("body", T.ARRAY, PRIVILEGES, required=True, items=T.OBJECT),
        ),
        body=BodyShape.RAW, body_param="body",
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="GET", path="/plugins/{name}/json",
        description="Inspect a plugin",
        params=(path("name", PLUGIN_NAME),),
        response=ResponseShape.MODEL, response_model=Plugin,
    ),
    EndpointDescriptor(
        method="DELETE", path="/plugins/{name}",
        description="Remove a plugin",
        params=(
            path("name", PLUGIN_NAME),
            query("force", T.BOOLEAN, "Disable the plugin before removing. This may result in issues if the plugin is in use by a container."),
        ),
        response=ResponseShape.MODEL, response_model=Plugin,
    ),
    EndpointDescriptor(
        method="POST", path="/plugins/{name}/enable",
        description="Enable a plugin",
        params=(
            path("name", PLUGIN_NAME),
            query("timeout", T.NUMBER, "Set the HTTP client timeout (in seconds)"),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/plugins/{name}/disable",
        description="Disable a plugin",
        params=(
            path("name", PLUGIN_NAME),
            query("force", T.BOOLEAN, "Force disable a plugin even if still in use."),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/plugins/{name}/upgrade",
        description="Upgrade a plugin",
        params=(
            path("name", PLUGIN_NAME),
            query("remote", T.STRING, "Remote reference to upgrade to.", required=True),
            registry_auth(),
            body("body", T.ARRAY, PRIVILEGES, required=True, items=T.OBJECT),
        ),
        body=BodyShape.RAW, body_param="body",
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/plugins/{name}/push",
        description="Push a plugin",
        params=(path("name", PLUGIN_NAME),),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/plugins/{name}/set",
        description="Configure a plugin",
        params=(
            path("name", PLUGIN_NAME),
            body("body", T.ARRAY, "Settings to apply, e.g. `[\"DEBUG=1\"]`.", required=True, items=T.STRING),
        ),
        body=BodyShape.RAW, body_param="body",
        response=ResponseShape.ANY,
    ),
]

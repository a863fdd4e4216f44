"""System-wide endpoints and registry distribution lookups."""

from ...models import AuthConfig, SystemInfo, SystemVersion
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

ENDPOINTS = [
    EndpointDescriptor(
        method="POST", path="/auth",
        description="Check auth configuration",
        params=(
            body("username", T.STRING, "Registry username"),
            body("password", T.STRING, "Registry password"),
            body("email", T.STRING, "Email address"),
            body("serveraddress", T.STRING, "Registry server address"),
        ),
        body=BodyShape.MODEL, body_model=AuthConfig,
    ),
    EndpointDescriptor(
        method="GET", path="/info",
        description="Get system information",
        response=ResponseShape.MODEL, response_model=SystemInfo,
    ),
    EndpointDescriptor(
        method="GET", path="/version",
        description="Get version",
        response=ResponseShape.MODEL, response_model=SystemVersion,
    ),
    EndpointDescriptor(
        method="GET", path="/_ping",
        description="Ping",
        response=ResponseShape.STRING,
    ),
    EndpointDescriptor(
        method="GET", path="/events",
        description="Monitor events",
        params=(
            query("since", T.STRING, "Show events created since this timestamp then stream new events."),
            query("until", T.STRING, "Show events created until this timestamp then stop streaming."),
            query("filters", T.STRING, "A JSON encoded value of filters (a `map[string][]string`) to process on the event list. Available filters: config, container, daemon, event, image, label, network, node, plugin, scope, secret, service, type, volume."),
        ),
    ),
    EndpointDescriptor(
        method="GET", path="/system/df",
        description="Get data usage information",
        params=(
            query("type", T.STRING, "Object types, for which to compute and return data (container, image, volume, build-cache)."),
        ),
    ),
]

DISTRIBUTION_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/distribution/{name}/json",
        description="Get image information from the registry",
        params=(
            path("name", "Image name or id"),
            registry_auth(),
        ),
    ),
]

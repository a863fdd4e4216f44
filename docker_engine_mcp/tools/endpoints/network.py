"""Network and volume endpoints."""

from ...models import Network, Volume
from ..descriptor import BodyShape, EndpointDescriptor, ParamType as T, ResponseShape, body, path, query

NETWORK_ID = "Network ID or name"

NETWORK_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/networks",
        description="List networks",
        params=(
            query("filters", T.STRING, "JSON encoded value of the filters (a `map[string][]string`) to process on the networks list. Available filters: dangling, driver, id, label, name, scope, type."),
        ),
        response=ResponseShape.ARRAY,
    ),
    EndpointDescriptor(
        method="GET", path="/networks/{id}",
        description="Inspect a network",
        params=(
            path("id", NETWORK_ID),
            query("verbose", T.BOOLEAN, "Detailed inspect output for troubleshooting"),
            query("scope", T.STRING, "Filter the network by scope (swarm, global, or local)"),
        ),
        response=ResponseShape.MODEL, response_model=Network,
    ),
    EndpointDescriptor(
        method="DELETE", path="/networks/{id}",
        description="Remove a network",
        params=(path("id", NETWORK_ID),),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/networks/create",
        description="Create a network",
        params=(
            body("Name", T.STRING, "The network's name.", required=True),
            body("CheckDuplicate", T.BOOLEAN, "Check for networks with duplicate names."),
            body("Driver", T.STRING, "Name of the network driver plugin to use."),
            body("Internal", T.BOOLEAN, "Restrict external access to the network."),
            body("Attachable", T.BOOLEAN, "Globally scoped network is manually attachable by regular containers from workers in swarm mode."),
            body("Ingress", T.BOOLEAN, "Ingress network is the network which provides the routing-mesh in swarm mode."),
            body("IPAM", T.OBJECT, "Optional custom IP scheme for the network."),
            body("EnableIPv6", T.BOOLEAN, "Enable IPv6 on the network."),
            body("Options", T.OBJECT, "Network specific options to be used by the drivers."),
            body("Labels", T.OBJECT, "User-defined key/value metadata."),
        ),
        body=BodyShape.OBJECT,
    ),
    EndpointDescriptor(
        method="POST", path="/networks/{id}/connect",
        description="Connect a container to a network",
        params=(
            path("id", "Network ID or name"),
            body("Container", T.STRING, "The ID or name of the container to connect to the network."),
            body("EndpointConfig", T.OBJECT, "Configuration for a network endpoint."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/networks/{id}/disconnect",
        description="Disconnect a container from a network",
        params=(
            path("id", "Network ID or name"),
            body("Container", T.STRING, "The ID or name of the container to disconnect from the network."),
            body("Force", T.BOOLEAN, "Force the container to disconnect from the network."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/networks/prune",
        description="Delete unused networks",
        params=(
            query("filters", T.STRING, "Filters to process on the prune list, encoded as JSON (a `map[string][]string`). Available filters: until, label."),
        ),
    ),
]

VOLUME_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/volumes",
        description="List volumes",
        params=(
            query("filters", T.STRING, "JSON encoded value of the filters (a `map[string][]string`) to process on the volumes list. Available filters: dangling, driver, label, name."),
        ),
    ),
    EndpointDescriptor(
        method="POST", path="/volumes/create",
        description="Create a volume",
        params=(
            body("Name", T.STRING, "The new volume's name. If not specified, Docker generates a name."),
            body("Driver", T.STRING, "Name of the volume driver to use."),
            body("DriverOpts", T.OBJECT, "A mapping of driver options and values."),
            body("Labels", T.OBJECT, "User-defined key/value metadata."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.MODEL, response_model=Volume,
    ),
    EndpointDescriptor(
        method="GET", path="/volumes/{name}",
        description="Inspect a volume",
        params=(path("name", "Volume name or ID"),),
        response=ResponseShape.MODEL, response_model=Volume,
    ),
    EndpointDescriptor(
        method="DELETE", path="/volumes/{name}",
        description="Remove a volume",
        params=(
            path("name", "Volume name or ID"),
            query("force", T.BOOLEAN, "Force the removal of the volume"),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/volumes/prune",
        description="Delete unused volumes",
        params=(
            query("filters", T.STRING, "Filters to process on the prune list, encoded as JSON (a `map[string][]string`). Available filters: label."),
        ),
    ),
]

# docker_engine_mcp/tools/endpoints/swarm.py
"""
Swarm-mode endpoints: the swarm itself, nodes, services, tasks, secrets
and configs. All of them require the daemon to be a swarm manager.
"""

from ...models import (
    ConfigSpec,
    IdResponse,
    Node,
    NodeSpec,
    SecretSpec,
    Service,
    ServiceUpdateResponse,
    Swarm,
    SwarmSpec,
    Task,
)
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

OBJECT_VERSION = ("The version number of the object being updated. "
                  "This is required to avoid conflicting writes.")

LOG_QUERY = (
    query("details", T.BOOLEAN, "Show extra details provided to logs."),
    query("follow", T.BOOLEAN, "Keep connection after returning logs."),
    query("stdout", T.BOOLEAN, "Return logs from `stdout`"),
    query("stderr", T.BOOLEAN, "Return logs from `stderr`"),
    query("since", T.NUMBER, "Only return logs since this time, as a UNIX timestamp"),
    query("timestamps", T.BOOLEAN, "Add timestamps to every log line"),
    query("tail", T.STRING, "Only return this number of log lines from the end of the logs. Specify as an integer or `all` to output all log lines."),
)

SERVICE_SPEC_PARAMS = (
    body("Name", T.STRING, "Name of the service."),
    body("Labels", T.OBJECT, "User-defined key/value metadata."),
    body("TaskTemplate", T.OBJECT, "User modifiable task configuration."),
    body("Mode", T.OBJECT, "Scheduling mode for the service."),
    body("UpdateConfig", T.OBJECT, "Specification for the update strategy of the service."),
    body("RollbackConfig", T.OBJECT, "Specification for the rollback strategy of the service."),
    body("Networks", T.ARRAY, "Specifies which networks the service should attach to.", items=T.OBJECT),
    body("EndpointSpec", T.OBJECT, "Properties that can be configured to access and load balance a service."),
)

SWARM_SPEC_PARAMS = (
    body("Name", T.STRING, "Name of the swarm."),
    body("Labels", T.OBJECT, "User-defined key/value metadata."),
    body("Orchestration", T.OBJECT, "Orchestration configuration."),
    body("Raft", T.OBJECT, "Raft configuration."),
    body("Dispatcher", T.OBJECT, "Dispatcher configuration."),
    body("CAConfig", T.OBJECT, "CA configuration."),
    body("EncryptionConfig", T.OBJECT, "Parameters related to encryption-at-rest."),
    body("TaskDefaults", T.OBJECT, "Defaults for creating tasks in this cluster."),
)

SWARM_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/swarm",
        description="Inspect swarm",
        response=ResponseShape.MODEL, response_model=Swarm,
    ),
    EndpointDescriptor(
        method="POST", path="/swarm/init",
        description="Initialize a new swarm",
        params=(
            body("ListenAddr", T.STRING, "Listen address used for inter-manager communication, e.g. `192.168.1.1:4567` or `eth0:4567`."),
            body("AdvertiseAddr", T.STRING, "Externally reachable address advertised to other nodes."),
            body("DataPathAddr", T.STRING, "Address or interface to use for data path traffic."),
            body("DataPathPort", T.NUMBER, "DataPathPort specifies the data path port number for data traffic."),
            body("DefaultAddrPool", T.ARRAY, "Default Address Pool specifies default subnet pools for global scope networks.", items=T.STRING),
            body("ForceNewCluster", T.BOOLEAN, "Force creation of a new swarm."),
            body("SubnetSize", T.NUMBER, "SubnetSize specifies the subnet size of the networks created from the default subnet pool."),
            body("Spec", T.OBJECT, "User modifiable swarm configuration."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.STRING,
    ),
    EndpointDescriptor(
        method="POST", path="/swarm/join",
        description="Join an existing swarm",
        params=(
            body("ListenAddr", T.STRING, "Listen address used for inter-manager communication if the node gets promoted to manager."),
            body("AdvertiseAddr", T.STRING, "Externally reachable address advertised to other nodes."),
            body("DataPathAddr", T.STRING, "Address or interface to use for data path traffic."),
            body("RemoteAddrs", T.ARRAY, "Addresses of manager nodes already participating in the swarm.", items=T.STRING),
            body("JoinToken", T.STRING, "Secret token for joining this swarm."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/swarm/leave",
        description="Leave a swarm",
        params=(
            query("force", T.BOOLEAN, "Force leave swarm, even if this is the last manager or that it will break the cluster."),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/swarm/update",
        description="Update a swarm",
        params=(
            query("version", T.NUMBER, OBJECT_VERSION, required=True),
            query("rotateWorkerToken", T.BOOLEAN, "Rotate the worker join token."),
            query("rotateManagerToken", T.BOOLEAN, "Rotate the manager join token."),
            query("rotateManagerUnlockKey", T.BOOLEAN, "Rotate the manager unlock key."),
        ) + SWARM_SPEC_PARAMS,
        body=BodyShape.MODEL, body_model=SwarmSpec,
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="GET", path="/swarm/unlockkey",
        description="Get the unlock key",
    ),
    EndpointDescriptor(
        method="POST", path="/swarm/unlock",
        description="Unlock a locked manager",
        params=(body("UnlockKey", T.STRING, "The swarm's unlock key."),),
        body=BodyShape.OBJECT,
        response=ResponseShape.ANY,
    ),
]

NODE_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/nodes",
        description="List nodes",
        params=(
            query("filters", T.STRING, "Filters to process on the nodes list, encoded as JSON (a `map[string][]string`). Available filters: id, label, membership, name, node.label, role."),
        ),
        response=ResponseShape.MODEL_LIST, response_model=Node,
    ),
    EndpointDescriptor(
        method="GET", path="/nodes/{id}",
        description="Inspect a node",
        params=(path("id", "The ID or name of the node"),),
        response=ResponseShape.MODEL, response_model=Node,
    ),
    EndpointDescriptor(
        method="DELETE", path="/nodes/{id}",
        description="Delete a node",
        params=(
            path("id", "The ID or name of the node"),
            query("force", T.BOOLEAN, "Force remove a node from the swarm"),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/nodes/{id}/update",
        description="Update a node",
        params=(
            path("id", "The ID of the node"),
            query("version", T.NUMBER, OBJECT_VERSION, required=True),
            body("Name", T.STRING, "Name for the node."),
            body("Labels", T.OBJECT, "User-defined key/value metadata."),
            body("Role", T.STRING, "Role of the node (`worker` or `manager`)."),
            body("Availability", T.STRING, "Availability of the node (`active`, `pause` or `drain`)."),
        ),
        body=BodyShape.MODEL, body_model=NodeSpec,
        response=ResponseShape.ANY,
    ),
]

SERVICE_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/services",
        description="List services",
        params=(
            query("filters", T.STRING, "A JSON encoded value of the filters (a `map[string][]string`) to process on the services list. Available filters: id, label, mode, name."),
            query("status", T.BOOLEAN, "Include service status, with count of running and desired tasks."),
        ),
        response=ResponseShape.MODEL_LIST, response_model=Service,
    ),
    EndpointDescriptor(
        method="POST", path="/services/create",
        description="Create a service",
        params=(registry_auth("A base64url-encoded auth configuration for pulling from private registries."),) + SERVICE_SPEC_PARAMS,
        body=BodyShape.OBJECT,
    ),
    EndpointDescriptor(
        method="GET", path="/services/{id}",
        description="Inspect a service",
        params=(
            path("id", "ID or name of service."),
            query("insertDefaults", T.BOOLEAN, "Fill empty fields with default values."),
        ),
        response=ResponseShape.MODEL, response_model=Service,
    ),
    EndpointDescriptor(
        method="DELETE", path="/services/{id}",
        description="Delete a service",
        params=(path("id", "ID or name of service."),),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/services/{id}/update",
        description="Update a service",
        params=(
            path("id", "ID or name of service."),
            query("version", T.NUMBER, OBJECT_VERSION, required=True),
            query("registryAuthFrom", T.STRING, "If the `X-Registry-Auth` header is not specified, this parameter indicates where to find registry authorization credentials (`spec` or `previous-spec`)."),
            query("rollback", T.STRING, "Set to this parameter to `previous` to cause a server-side rollback to the previous service spec."),
            registry_auth("A base64url-encoded auth configuration for pulling from private registries."),
        ) + SERVICE_SPEC_PARAMS,
        body=BodyShape.OBJECT,
        response=ResponseShape.MODEL, response_model=ServiceUpdateResponse,
    ),
    EndpointDescriptor(
        method="GET", path="/services/{id}/logs",
        description="Get service logs",
        params=(path("id", "ID or name of the service"),) + LOG_QUERY,
        response=ResponseShape.STRING,
    ),
]

TASK_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/tasks",
        description="List tasks",
        params=(
            query("filters", T.STRING, "A JSON encoded value of the filters (a `map[string][]string`) to process on the tasks list. Available filters: desired-state, id, label, name, node, service."),
        ),
        response=ResponseShape.MODEL_LIST, response_model=Task,
    ),
    EndpointDescriptor(
        method="GET", path="/tasks/{id}",
        description="Inspect a task",
        params=(path("id", "ID of the task"),),
        response=ResponseShape.MODEL, response_model=Task,
    ),
    EndpointDescriptor(
        method="GET", path="/tasks/{id}/logs",
        description="Get task logs",
        params=(path("id", "ID of the task"),) + LOG_QUERY,
        response=ResponseShape.STRING,
    ),
]

SECRET_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/secrets",
        description="List secrets",
        params=(
            query("filters", T.STRING, "A JSON encoded value of the filters (a `map[string][]string`) to process on the secrets list. Available filters: id, label, name, names."),
        ),
        response=ResponseShape.ARRAY,
    ),
    EndpointDescriptor(
        method="POST", path="/secrets/create",
        description="Create a secret",
        params=(
            body("Name", T.STRING, "User-defined name of the secret."),
            body("Labels", T.OBJECT, "User-defined key/value metadata."),
            body("Data", T.STRING, "Base64-url-safe-encoded data to store as secret."),
            body("Driver", T.OBJECT, "Name of the secrets driver used to fetch the secret's value from an external secret store."),
            body("Templating", T.OBJECT, "Templating driver, if applicable."),
        ),
        body=BodyShape.MODEL, body_model=SecretSpec,
        response=ResponseShape.MODEL, response_model=IdResponse,
    ),
    EndpointDescriptor(
        method="GET", path="/secrets/{id}",
        description="Inspect a secret",
        params=(path("id", "ID of the secret"),),
    ),
    EndpointDescriptor(
        method="DELETE", path="/secrets/{id}",
        description="Delete a secret",
        params=(path("id", "ID of the secret"),),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/secrets/{id}/update",
        description="Update a Secret",
        params=(
            path("id", "The ID or name of the secret"),
            query("version", T.NUMBER, OBJECT_VERSION, required=True),
            body("Name", T.STRING, "User-defined name of the secret."),
            body("Labels", T.OBJECT, "User-defined key/value metadata. Only the labels can be updated."),
        ),
        body=BodyShape.MODEL, body_model=SecretSpec,
        response=ResponseShape.ANY,
    ),
]

CONFIG_ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/configs",
        description="List configs",
        params=(
            query("filters", T.STRING, "A JSON encoded value of the filters (a `map[string][]string`) to process on the configs list. Available filters: id, label, name, names."),
        ),
        response=ResponseShape.ARRAY,
    ),
    EndpointDescriptor(
        method="POST", path="/configs/create",
        description="Create a config",
        params=(
            body("Name", T.STRING, "User-defined name of the config."),
            body("Labels", T.OBJECT, "User-defined key/value metadata."),
            body("Data", T.STRING, "Base64-url-safe-encoded config data."),
            body("Templating", T.OBJECT, "Templating driver, if applicable."),
        ),
        body=BodyShape.MODEL, body_model=ConfigSpec,
        response=ResponseShape.MODEL, response_model=IdResponse,
    ),
    EndpointDescriptor(
        method="GET", path="/configs/{id}",
        description="Inspect a config",
        params=(path("id", "ID of the config"),),
    ),
    EndpointDescriptor(
        method="DELETE", path="/configs/{id}",
        description="Delete a config",
        params=(path("id", "ID of the config"),),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/configs/{id}/update",
        description="Update a Config",
        params=(
            path("id", "The ID or name of the config"),
            query("version", T.NUMBER, OBJECT_VERSION, required=True),
            body("Name", T.STRING, "User-defined name of the config."),
            body("Labels", T.OBJECT, "User-defined key/value metadata. Only the labels can be updated."),
        ),
        body=BodyShape.MODEL, body_model=ConfigSpec,
        response=ResponseShape.ANY,
    ),
]

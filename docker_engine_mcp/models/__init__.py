# docker_engine_mcp/models/__init__.py
"""
Docker Engine schema catalog.

Pydantic mirrors of the Docker Engine OpenAPI definitions. They serve as
request body targets (a flat tool-argument map is coerced into one of them)
and as typed response shapes.
"""

from .base import DockerModel
from .common import (
    Commit,
    Driver,
    ErrorDetail,
    ErrorResponse,
    IdResponse,
    ObjectVersion,
    Platform,
    ProgressDetail,
    TLSInfo,
)
from .container import (
    ContainerConfig,
    ContainerCreateResponse,
    ContainerUpdateResponse,
    ContainerWaitResponse,
    DeviceMapping,
    HealthConfig,
    HostConfig,
    Mount,
    MountPoint,
    Port,
    PortBinding,
    ProcessConfig,
    Resources,
    RestartPolicy,
    ThrottleDevice,
)
from .image import (
    BuildInfo,
    CreateImageInfo,
    GraphDriverData,
    Image,
    ImageDeleteResponseItem,
    ImageSummary,
    PushImageInfo,
)
from .network import (
    IPAM,
    Address,
    EndpointIPAMConfig,
    EndpointSettings,
    Network,
    NetworkContainer,
    NetworkSettings,
    Volume,
)
from .swarm import (
    ClusterInfo,
    Config,
    ConfigSpec,
    EndpointPortConfig,
    EndpointSpec,
    EngineDescription,
    JoinTokens,
    ManagerStatus,
    Node,
    NodeDescription,
    NodeSpec,
    NodeStatus,
    PeerNode,
    ResourceObject,
    Secret,
    SecretSpec,
    Service,
    ServiceSpec,
    ServiceUpdateResponse,
    Swarm,
    SwarmInfo,
    SwarmSpec,
    Task,
    TaskSpec,
)
from .plugin import (
    Plugin,
    PluginDevice,
    PluginEnv,
    PluginInterfaceType,
    PluginMount,
    PluginPrivilege,
)
from .system import (
    AuthConfig,
    IndexInfo,
    PluginsInfo,
    RegistryServiceConfig,
    Runtime,
    SystemInfo,
    SystemVersion,
)

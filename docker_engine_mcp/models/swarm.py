"""Swarm-mode definitions: swarm, nodes, services, tasks, secrets and configs."""

from typing import Any, Dict, List, Optional
from pydantic import Field

from .base import DockerModel
from .common import Driver, ObjectVersion, Platform, TLSInfo


class SwarmSpec(DockerModel):
    """User modifiable swarm configuration."""
    name: Optional[str] = Field(None, alias="Name")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    orchestration: Optional[Dict[str, Any]] = Field(None, alias="Orchestration")
    raft: Optional[Dict[str, Any]] = Field(None, alias="Raft")
    dispatcher: Optional[Dict[str, Any]] = Field(None, alias="Dispatcher")
    ca_config: Optional[Dict[str, Any]] = Field(None, alias="CAConfig")
    encryption_config: Optional[Dict[str, Any]] = Field(None, alias="EncryptionConfig")
    task_defaults: Optional[Dict[str, Any]] = Field(None, alias="TaskDefaults")


class ClusterInfo(DockerModel):
    """Information about the swarm as returned by the /info endpoint."""
    id: Optional[str] = Field(None, alias="ID")
    version: Optional[ObjectVersion] = Field(None, alias="Version")
    created_at: Optional[str] = Field(None, alias="CreatedAt")
    updated_at: Optional[str] = Field(None, alias="UpdatedAt")
    spec: Optional[SwarmSpec] = Field(None, alias="Spec")
    tls_info: Optional[TLSInfo] = Field(None, alias="TLSInfo")
    root_rotation_in_progress: Optional[bool] = Field(None, alias="RootRotationInProgress")
    data_path_port: Optional[int] = Field(None, alias="DataPathPort")
    default_addr_pool: Optional[List[str]] = Field(None, alias="DefaultAddrPool")
    subnet_size: Optional[int] = Field(None, alias="SubnetSize")


class JoinTokens(DockerModel):
    """The tokens workers and managers need to join the swarm."""
    worker: Optional[str] = Field(None, alias="Worker")
    manager: Optional[str] = Field(None, alias="Manager")


class Swarm(ClusterInfo):
    join_tokens: Optional[JoinTokens] = Field(None, alias="JoinTokens")


class PeerNode(DockerModel):
    node_id: Optional[str] = Field(None, alias="NodeID")
    addr: Optional[str] = Field(None, alias="Addr")


class SwarmInfo(DockerModel):
    """Generic information about swarm, as embedded in /info."""
    node_id: Optional[str] = Field(None, alias="NodeID")
    node_addr: Optional[str] = Field(None, alias="NodeAddr")
    local_node_state: Optional[str] = Field(None, alias="LocalNodeState")
    control_available: Optional[bool] = Field(None, alias="ControlAvailable")
    error: Optional[str] = Field(None, alias="Error")
    remote_managers: Optional[List[PeerNode]] = Field(None, alias="RemoteManagers")
    nodes: Optional[int] = Field(None, alias="Nodes")
    managers: Optional[int] = Field(None, alias="Managers")
    cluster: Optional[ClusterInfo] = Field(None, alias="Cluster")


class NodeSpec(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    role: Optional[str] = Field(None, alias="Role")
    availability: Optional[str] = Field(None, alias="Availability")


class ResourceObject(DockerModel):
    """Resources which can be advertised by a node and requested by a task."""
    nano_cpus: Optional[int] = Field(None, alias="NanoCPUs")
    memory_bytes: Optional[int] = Field(None, alias="MemoryBytes")
    generic_resources: Optional[List[Dict[str, Any]]] = Field(None, alias="GenericResources")


class EngineDescription(DockerModel):
    engine_version: Optional[str] = Field(None, alias="EngineVersion")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    plugins: Optional[List[Dict[str, Any]]] = Field(None, alias="Plugins")


class NodeDescription(DockerModel):
    hostname: Optional[str] = Field(None, alias="Hostname")
    platform: Optional[Platform] = Field(None, alias="Platform")
    resources: Optional[ResourceObject] = Field(None, alias="Resources")
    engine: Optional[EngineDescription] = Field(None, alias="Engine")
    tls_info: Optional[TLSInfo] = Field(None, alias="TLSInfo")


class NodeStatus(DockerModel):
    state: Optional[str] = Field(None, alias="State")
    message: Optional[str] = Field(None, alias="Message")
    addr: Optional[str] = Field(None, alias="Addr")


class ManagerStatus(DockerModel):
    leader: Optional[bool] = Field(None, alias="Leader")
    reachability: Optional[str] = Field(None, alias="Reachability")
    addr: Optional[str] = Field(None, alias="Addr")


class Node(DockerModel):
    id: Optional[str] = Field(None, alias="ID")
    version: Optional[ObjectVersion] = Field(None, alias="Version")
    created_at: Optional[str] = Field(None, alias="CreatedAt")
    updated_at: Optional[str] = Field(None, alias="UpdatedAt")
    spec: Optional[NodeSpec] = Field(None, alias="Spec")
    description: Optional[NodeDescription] = Field(None, alias="Description")
    status: Optional[NodeStatus] = Field(None, alias="Status")
    manager_status: Optional[ManagerStatus] = Field(None, alias="ManagerStatus")


class TaskSpec(DockerModel):
    """User modifiable task configuration."""
    plugin_spec: Optional[Dict[str, Any]] = Field(None, alias="PluginSpec")
    container_spec: Optional[Dict[str, Any]] = Field(None, alias="ContainerSpec")
    network_attachment_spec: Optional[Dict[str, Any]] = Field(None, alias="NetworkAttachmentSpec")
    resources: Optional[Dict[str, Any]] = Field(None, alias="Resources")
    restart_policy: Optional[Dict[str, Any]] = Field(None, alias="RestartPolicy")
    placement: Optional[Dict[str, Any]] = Field(None, alias="Placement")
    force_update: Optional[int] = Field(None, alias="ForceUpdate")
    runtime: Optional[str] = Field(None, alias="Runtime")
    networks: Optional[List[Dict[str, Any]]] = Field(None, alias="Networks")
    log_driver: Optional[Dict[str, Any]] = Field(None, alias="LogDriver")


class EndpointPortConfig(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    protocol: Optional[str] = Field(None, alias="Protocol")
    target_port: Optional[int] = Field(None, alias="TargetPort")
    published_port: Optional[int] = Field(None, alias="PublishedPort")
    publish_mode: Optional[str] = Field(None, alias="PublishMode")


class EndpointSpec(DockerModel):
    """Properties that can be configured to access and load balance a service."""
    mode: Optional[str] = Field(None, alias="Mode")
    ports: Optional[List[EndpointPortConfig]] = Field(None, alias="Ports")


class ServiceSpec(DockerModel):
    """User modifiable configuration for a service."""
    name: Optional[str] = Field(None, alias="Name")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    task_template: Optional[TaskSpec] = Field(None, alias="TaskTemplate")
    mode: Optional[Dict[str, Any]] = Field(None, alias="Mode")
    update_config: Optional[Dict[str, Any]] = Field(None, alias="UpdateConfig")
    rollback_config: Optional[Dict[str, Any]] = Field(None, alias="RollbackConfig")
    networks: Optional[List[Dict[str, Any]]] = Field(None, alias="Networks")
    endpoint_spec: Optional[EndpointSpec] = Field(None, alias="EndpointSpec")


class Service(DockerModel):
    id: Optional[str] = Field(None, alias="ID")
    version: Optional[ObjectVersion] = Field(None, alias="Version")
    created_at: Optional[str] = Field(None, alias="CreatedAt")
    updated_at: Optional[str] = Field(None, alias="UpdatedAt")
    spec: Optional[ServiceSpec] = Field(None, alias="Spec")
    endpoint: Optional[Dict[str, Any]] = Field(None, alias="Endpoint")
    update_status: Optional[Dict[str, Any]] = Field(None, alias="UpdateStatus")
    service_status: Optional[Dict[str, Any]] = Field(None, alias="ServiceStatus")


class ServiceUpdateResponse(DockerModel):
    warnings: Optional[List[str]] = Field(None, alias="Warnings")


class Task(DockerModel):
    id: Optional[str] = Field(None, alias="ID")
    version: Optional[ObjectVersion] = Field(None, alias="Version")
    created_at: Optional[str] = Field(None, alias="CreatedAt")
    updated_at: Optional[str] = Field(None, alias="UpdatedAt")
    name: Optional[str] = Field(None, alias="Name")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    spec: Optional[TaskSpec] = Field(None, alias="Spec")
    service_id: Optional[str] = Field(None, alias="ServiceID")
    slot: Optional[int] = Field(None, alias="Slot")
    node_id: Optional[str] = Field(None, alias="NodeID")
    assigned_generic_resources: Optional[List[Dict[str, Any]]] = Field(None, alias="AssignedGenericResources")
    status: Optional[Dict[str, Any]] = Field(None, alias="Status")
    desired_state: Optional[str] = Field(None, alias="DesiredState")


class SecretSpec(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    data: Optional[str] = Field(None, alias="Data")  # base64-url-safe-encoded, create only
    driver: Optional[Driver] = Field(None, alias="Driver")
    templating: Optional[Driver] = Field(None, alias="Templating")


class Secret(DockerModel):
    id: Optional[str] = Field(None, alias="ID")
    version: Optional[ObjectVersion] = Field(None, alias="Version")
    created_at: Optional[str] = Field(None, alias="CreatedAt")
    updated_at: Optional[str] = Field(None, alias="UpdatedAt")
    spec: Optional[SecretSpec] = Field(None, alias="Spec")


class ConfigSpec(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    data: Optional[str] = Field(None, alias="Data")
    templating: Optional[Driver] = Field(None, alias="Templating")


class Config(DockerModel):
    id: Optional[str] = Field(None, alias="ID")
    version: Optional[ObjectVersion] = Field(None, alias="Version")
    created_at: Optional[str] = Field(None, alias="CreatedAt")
    updated_at: Optional[str] = Field(None, alias="UpdatedAt")
    spec: Optional[ConfigSpec] = Field(None, alias="Spec")

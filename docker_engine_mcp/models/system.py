"""Daemon-wide definitions: system info, version, registry auth."""

from typing import Any, Dict, List, Optional
from pydantic import Field

from .base import DockerModel
from .common import Commit
from .swarm import SwarmInfo


class PluginsInfo(DockerModel):
    """Available plugins per type. Only unmanaged (V1) plugins are listed."""
    volume: Optional[List[str]] = Field(None, alias="Volume")
    network: Optional[List[str]] = Field(None, alias="Network")
    authorization: Optional[List[str]] = Field(None, alias="Authorization")
    log: Optional[List[str]] = Field(None, alias="Log")


class IndexInfo(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    mirrors: Optional[List[str]] = Field(None, alias="Mirrors")
    secure: Optional[bool] = Field(None, alias="Secure")
    official: Optional[bool] = Field(None, alias="Official")


class RegistryServiceConfig(DockerModel):
    allow_nondistributable_artifacts_cidrs: Optional[List[str]] = Field(None, alias="AllowNondistributableArtifactsCIDRs")
    allow_nondistributable_artifacts_hostnames: Optional[List[str]] = Field(None, alias="AllowNondistributableArtifactsHostnames")
    insecure_registry_cidrs: Optional[List[str]] = Field(None, alias="InsecureRegistryCIDRs")
    index_configs: Optional[Dict[str, IndexInfo]] = Field(None, alias="IndexConfigs")
    mirrors: Optional[List[str]] = Field(None, alias="Mirrors")


class Runtime(DockerModel):
    """An OCI compliant runtime configured on the daemon."""
    path: Optional[str] = None
    runtime_args: Optional[List[str]] = Field(None, alias="runtimeArgs")


class SystemInfo(DockerModel):
    id: Optional[str] = Field(None, alias="ID")
    containers: Optional[int] = Field(None, alias="Containers")
    containers_running: Optional[int] = Field(None, alias="ContainersRunning")
    containers_paused: Optional[int] = Field(None, alias="ContainersPaused")
    containers_stopped: Optional[int] = Field(None, alias="ContainersStopped")
    images: Optional[int] = Field(None, alias="Images")
    driver: Optional[str] = Field(None, alias="Driver")
    driver_status: Optional[List[List[str]]] = Field(None, alias="DriverStatus")
    docker_root_dir: Optional[str] = Field(None, alias="DockerRootDir")
    plugins: Optional[PluginsInfo] = Field(None, alias="Plugins")
    memory_limit: Optional[bool] = Field(None, alias="MemoryLimit")
    swap_limit: Optional[bool] = Field(None, alias="SwapLimit")
    kernel_memory: Optional[bool] = Field(None, alias="KernelMemory")
    cpu_cfs_period: Optional[bool] = Field(None, alias="CpuCfsPeriod")
    cpu_cfs_quota: Optional[bool] = Field(None, alias="CpuCfsQuota")
    cpu_shares: Optional[bool] = Field(None, alias="CPUShares")
    cpu_set: Optional[bool] = Field(None, alias="CPUSet")
    oom_kill_disable: Optional[bool] = Field(None, alias="OomKillDisable")
    ipv4_forwarding: Optional[bool] = Field(None, alias="IPv4Forwarding")
    bridge_nf_iptables: Optional[bool] = Field(None, alias="BridgeNfIptables")
    bridge_nf_ip6tables: Optional[bool] = Field(None, alias="BridgeNfIp6tables")
    debug: Optional[bool] = Field(None, alias="Debug")
    n_fd: Optional[int] = Field(None, alias="NFd")
    n_goroutines: Optional[int] = Field(None, alias="NGoroutines")
    system_time: Optional[str] = Field(None, alias="SystemTime")
    logging_driver: Optional[str] = Field(None, alias="LoggingDriver")
    cgroup_driver: Optional[str] = Field(None, alias="CgroupDriver")
    n_events_listener: Optional[int] = Field(None, alias="NEventsListener")
    kernel_version: Optional[str] = Field(None, alias="KernelVersion")
    operating_system: Optional[str] = Field(None, alias="OperatingSystem")
    os_type: Optional[str] = Field(None, alias="OSType")
    architecture: Optional[str] = Field(None, alias="Architecture")
    ncpu: Optional[int] = Field(None, alias="NCPU")
    mem_total: Optional[int] = Field(None, alias="MemTotal")
    index_server_address: Optional[str] = Field(None, alias="IndexServerAddress")
    registry_config: Optional[RegistryServiceConfig] = Field(None, alias="RegistryConfig")
    generic_resources: Optional[List[Dict[str, Any]]] = Field(None, alias="GenericResources")
    http_proxy: Optional[str] = Field(None, alias="HttpProxy")
    https_proxy: Optional[str] = Field(None, alias="HttpsProxy")
    no_proxy: Optional[str] = Field(None, alias="NoProxy")
    name: Optional[str] = Field(None, alias="Name")
    labels: Optional[List[str]] = Field(None, alias="Labels")
    experimental_build: Optional[bool] = Field(None, alias="ExperimentalBuild")
    server_version: Optional[str] = Field(None, alias="ServerVersion")
    cluster_store: Optional[str] = Field(None, alias="ClusterStore")
    cluster_advertise: Optional[str] = Field(None, alias="ClusterAdvertise")
    runtimes: Optional[Dict[str, Runtime]] = Field(None, alias="Runtimes")
    default_runtime: Optional[str] = Field(None, alias="DefaultRuntime")
    swarm: Optional[SwarmInfo] = Field(None, alias="Swarm")
    live_restore_enabled: Optional[bool] = Field(None, alias="LiveRestoreEnabled")
    isolation: Optional[str] = Field(None, alias="Isolation")
    init_binary: Optional[str] = Field(None, alias="InitBinary")
    containerd_commit: Optional[Commit] = Field(None, alias="ContainerdCommit")
    runc_commit: Optional[Commit] = Field(None, alias="RuncCommit")
    init_commit: Optional[Commit] = Field(None, alias="InitCommit")
    security_options: Optional[List[str]] = Field(None, alias="SecurityOptions")
    system_status: Optional[List[List[str]]] = Field(None, alias="SystemStatus")


class SystemVersion(DockerModel):
    """Response of GET /version."""
    platform: Optional[Dict[str, Any]] = Field(None, alias="Platform")
    components: Optional[List[Dict[str, Any]]] = Field(None, alias="Components")
    version: Optional[str] = Field(None, alias="Version")
    api_version: Optional[str] = Field(None, alias="ApiVersion")
    min_api_version: Optional[str] = Field(None, alias="MinAPIVersion")
    git_commit: Optional[str] = Field(None, alias="GitCommit")
    go_version: Optional[str] = Field(None, alias="GoVersion")
    os: Optional[str] = Field(None, alias="Os")
    arch: Optional[str] = Field(None, alias="Arch")
    kernel_version: Optional[str] = Field(None, alias="KernelVersion")
    experimental: Optional[bool] = Field(None, alias="Experimental")
    build_time: Optional[str] = Field(None, alias="BuildTime")


class AuthConfig(DockerModel):
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None
    serveraddress: Optional[str] = None
    identitytoken: Optional[str] = None
    registrytoken: Optional[str] = None

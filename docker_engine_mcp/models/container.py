"""Container configuration, host configuration and related definitions."""

from typing import Any, Dict, List, Optional, Union
from pydantic import Field

from .base import DockerModel


class HealthConfig(DockerModel):
    """A test to perform to check that the container is healthy. Durations are in nanoseconds."""
    test: Optional[List[str]] = Field(None, alias="Test")
    interval: Optional[int] = Field(None, alias="Interval")
    timeout: Optional[int] = Field(None, alias="Timeout")
    retries: Optional[int] = Field(None, alias="Retries")
    start_period: Optional[int] = Field(None, alias="StartPeriod")


class ContainerConfig(DockerModel):
    """Configuration for a container that is portable between hosts."""
    hostname: Optional[str] = Field(None, alias="Hostname")
    domainname: Optional[str] = Field(None, alias="Domainname")
    user: Optional[str] = Field(None, alias="User")
    attach_stdin: Optional[bool] = Field(None, alias="AttachStdin")
    attach_stdout: Optional[bool] = Field(None, alias="AttachStdout")
    attach_stderr: Optional[bool] = Field(None, alias="AttachStderr")
    exposed_ports: Optional[Dict[str, Any]] = Field(None, alias="ExposedPorts")
    tty: Optional[bool] = Field(None, alias="Tty")
    open_stdin: Optional[bool] = Field(None, alias="OpenStdin")
    stdin_once: Optional[bool] = Field(None, alias="StdinOnce")
    env: Optional[List[str]] = Field(None, alias="Env")
    cmd: Optional[Union[str, List[str]]] = Field(None, alias="Cmd")
    healthcheck: Optional[HealthConfig] = Field(None, alias="Healthcheck")
    args_escaped: Optional[bool] = Field(None, alias="ArgsEscaped")
    image: Optional[str] = Field(None, alias="Image")
    volumes: Optional[Dict[str, Any]] = Field(None, alias="Volumes")
    working_dir: Optional[str] = Field(None, alias="WorkingDir")
    entrypoint: Optional[Union[str, List[str]]] = Field(None, alias="Entrypoint")
    network_disabled: Optional[bool] = Field(None, alias="NetworkDisabled")
    mac_address: Optional[str] = Field(None, alias="MacAddress")
    on_build: Optional[List[str]] = Field(None, alias="OnBuild")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    stop_signal: Optional[str] = Field(None, alias="StopSignal")
    stop_timeout: Optional[int] = Field(None, alias="StopTimeout")
    shell: Optional[List[str]] = Field(None, alias="Shell")


class ThrottleDevice(DockerModel):
    path: Optional[str] = Field(None, alias="Path")
    rate: Optional[int] = Field(None, alias="Rate")


class DeviceMapping(DockerModel):
    """A device mapping between the host and container."""
    path_on_host: Optional[str] = Field(None, alias="PathOnHost")
    path_in_container: Optional[str] = Field(None, alias="PathInContainer")
    cgroup_permissions: Optional[str] = Field(None, alias="CgroupPermissions")


class RestartPolicy(DockerModel):
    """
    The behavior to apply when the container exits.

    Name is one of "", "no", "always", "unless-stopped" or "on-failure";
    MaximumRetryCount only applies to "on-failure".
    """
    name: Optional[str] = Field(None, alias="Name")
    maximum_retry_count: Optional[int] = Field(None, alias="MaximumRetryCount")


class Resources(DockerModel):
    """A container's resources (cgroups config, ulimits, etc)."""
    cpu_shares: Optional[int] = Field(None, alias="CpuShares")
    memory: Optional[int] = Field(None, alias="Memory")
    cgroup_parent: Optional[str] = Field(None, alias="CgroupParent")
    blkio_weight: Optional[int] = Field(None, alias="BlkioWeight")
    blkio_weight_device: Optional[List[Dict[str, Any]]] = Field(None, alias="BlkioWeightDevice")
    blkio_device_read_bps: Optional[List[ThrottleDevice]] = Field(None, alias="BlkioDeviceReadBps")
    blkio_device_write_bps: Optional[List[ThrottleDevice]] = Field(None, alias="BlkioDeviceWriteBps")
    blkio_device_read_iops: Optional[List[ThrottleDevice]] = Field(None, alias="BlkioDeviceReadIOps")
    blkio_device_write_iops: Optional[List[ThrottleDevice]] = Field(None, alias="BlkioDeviceWriteIOps")
    cpu_period: Optional[int] = Field(None, alias="CpuPeriod")
    cpu_quota: Optional[int] = Field(None, alias="CpuQuota")
    cpu_realtime_period: Optional[int] = Field(None, alias="CpuRealtimePeriod")
    cpu_realtime_runtime: Optional[int] = Field(None, alias="CpuRealtimeRuntime")
    cpuset_cpus: Optional[str] = Field(None, alias="CpusetCpus")
    cpuset_mems: Optional[str] = Field(None, alias="CpusetMems")
    devices: Optional[List[DeviceMapping]] = Field(None, alias="Devices")
    device_cgroup_rules: Optional[List[str]] = Field(None, alias="DeviceCgroupRules")
    disk_quota: Optional[int] = Field(None, alias="DiskQuota")
    kernel_memory: Optional[int] = Field(None, alias="KernelMemory")
    memory_reservation: Optional[int] = Field(None, alias="MemoryReservation")
    memory_swap: Optional[int] = Field(None, alias="MemorySwap")
    memory_swappiness: Optional[int] = Field(None, alias="MemorySwappiness")
    nano_cpus: Optional[int] = Field(None, alias="NanoCPUs")
    oom_kill_disable: Optional[bool] = Field(None, alias="OomKillDisable")
    pids_limit: Optional[int] = Field(None, alias="PidsLimit")
    ulimits: Optional[List[Dict[str, Any]]] = Field(None, alias="Ulimits")
    cpu_count: Optional[int] = Field(None, alias="CpuCount")
    cpu_percent: Optional[int] = Field(None, alias="CpuPercent")
    io_maximum_iops: Optional[int] = Field(None, alias="IOMaximumIOps")
    io_maximum_bandwidth: Optional[int] = Field(None, alias="IOMaximumBandwidth")


class Mount(DockerModel):
    target: Optional[str] = Field(None, alias="Target")
    source: Optional[str] = Field(None, alias="Source")
    type: Optional[str] = Field(None, alias="Type")
    read_only: Optional[bool] = Field(None, alias="ReadOnly")
    consistency: Optional[str] = Field(None, alias="Consistency")
    bind_options: Optional[Dict[str, Any]] = Field(None, alias="BindOptions")
    volume_options: Optional[Dict[str, Any]] = Field(None, alias="VolumeOptions")
    tmpfs_options: Optional[Dict[str, Any]] = Field(None, alias="TmpfsOptions")


class HostConfig(Resources):
    """Container configuration that depends on the host we are running on."""
    binds: Optional[List[str]] = Field(None, alias="Binds")
    container_id_file: Optional[str] = Field(None, alias="ContainerIDFile")
    log_config: Optional[Dict[str, Any]] = Field(None, alias="LogConfig")
    network_mode: Optional[str] = Field(None, alias="NetworkMode")
    port_bindings: Optional[Dict[str, Any]] = Field(None, alias="PortBindings")
    restart_policy: Optional[RestartPolicy] = Field(None, alias="RestartPolicy")
    auto_remove: Optional[bool] = Field(None, alias="AutoRemove")
    volume_driver: Optional[str] = Field(None, alias="VolumeDriver")
    volumes_from: Optional[List[str]] = Field(None, alias="VolumesFrom")
    mounts: Optional[List[Mount]] = Field(None, alias="Mounts")
    cap_add: Optional[List[str]] = Field(None, alias="CapAdd")
    cap_drop: Optional[List[str]] = Field(None, alias="CapDrop")
    cgroup: Optional[str] = Field(None, alias="Cgroup")
    dns: Optional[List[str]] = Field(None, alias="Dns")
    dns_options: Optional[List[str]] = Field(None, alias="DnsOptions")
    dns_search: Optional[List[str]] = Field(None, alias="DnsSearch")
    extra_hosts: Optional[List[str]] = Field(None, alias="ExtraHosts")
    group_add: Optional[List[str]] = Field(None, alias="GroupAdd")
    ipc_mode: Optional[str] = Field(None, alias="IpcMode")
    links: Optional[List[str]] = Field(None, alias="Links")
    oom_score_adj: Optional[int] = Field(None, alias="OomScoreAdj")
    pid_mode: Optional[str] = Field(None, alias="PidMode")
    privileged: Optional[bool] = Field(None, alias="Privileged")
    publish_all_ports: Optional[bool] = Field(None, alias="PublishAllPorts")
    readonly_rootfs: Optional[bool] = Field(None, alias="ReadonlyRootfs")
    security_opt: Optional[List[str]] = Field(None, alias="SecurityOpt")
    storage_opt: Optional[Dict[str, str]] = Field(None, alias="StorageOpt")
    tmpfs: Optional[Dict[str, str]] = Field(None, alias="Tmpfs")
    uts_mode: Optional[str] = Field(None, alias="UTSMode")
    userns_mode: Optional[str] = Field(None, alias="UsernsMode")
    shm_size: Optional[int] = Field(None, alias="ShmSize")
    sysctls: Optional[Dict[str, str]] = Field(None, alias="Sysctls")
    runtime: Optional[str] = Field(None, alias="Runtime")
    console_size: Optional[List[int]] = Field(None, alias="ConsoleSize")
    isolation: Optional[str] = Field(None, alias="Isolation")


class MountPoint(DockerModel):
    """A mount point configuration inside the container."""
    type: Optional[str] = Field(None, alias="Type")
    name: Optional[str] = Field(None, alias="Name")
    source: Optional[str] = Field(None, alias="Source")
    destination: Optional[str] = Field(None, alias="Destination")
    driver: Optional[str] = Field(None, alias="Driver")
    mode: Optional[str] = Field(None, alias="Mode")
    rw: Optional[bool] = Field(None, alias="RW")
    propagation: Optional[str] = Field(None, alias="Propagation")


class PortBinding(DockerModel):
    host_ip: Optional[str] = Field(None, alias="HostIp")
    host_port: Optional[str] = Field(None, alias="HostPort")


class Port(DockerModel):
    """An open port on a container."""
    ip: Optional[str] = Field(None, alias="IP")
    private_port: Optional[int] = Field(None, alias="PrivatePort")
    public_port: Optional[int] = Field(None, alias="PublicPort")
    type: Optional[str] = Field(None, alias="Type")


class ProcessConfig(DockerModel):
    user: Optional[str] = None
    privileged: Optional[bool] = None
    tty: Optional[bool] = None
    entrypoint: Optional[str] = None
    arguments: Optional[List[str]] = None


class ContainerCreateResponse(DockerModel):
    """OK response to ContainerCreate operation."""
    id: Optional[str] = Field(None, alias="Id")
    warnings: Optional[List[str]] = Field(None, alias="Warnings")


class ContainerUpdateResponse(DockerModel):
    warnings: Optional[List[str]] = Field(None, alias="Warnings")


class ContainerWaitResponse(DockerModel):
    status_code: Optional[int] = Field(None, alias="StatusCode")
    error: Optional[Dict[str, Any]] = Field(None, alias="Error")

# docker_engine_mcp/tools/endpoints/container.py
"""Container endpoints: lifecycle, inspection and housekeeping."""

from ...models import ContainerCreateResponse, ContainerUpdateResponse, ContainerWaitResponse
from ..descriptor import (
    BodyShape,
    EndpointDescriptor,
    ParamType as T,
    ResponseShape,
    body,
    path,
    query,
)

CONTAINER_ID = "ID or name of the container"

CONTAINER_FILTERS = (
    "Filters to process on the container list, encoded as JSON (a `map[string][]string`). "
    "For example, `{\"status\": [\"paused\"]}` will only return paused containers. "
    "Available filters: ancestor, before, expose, exited, health, id, isolation, is-task, "
    "label, name, network, publish, since, status, volume."
)

# Fields of the container configuration accepted by create
CONTAINER_CONFIG_PARAMS = (
    body("Hostname", T.STRING, "The hostname to use for the container, as a valid RFC 1123 hostname."),
    body("Domainname", T.STRING, "The domain name to use for the container."),
    body("User", T.STRING, "The user that commands are run as inside the container."),
    body("AttachStdin", T.BOOLEAN, "Whether to attach to `stdin`."),
    body("AttachStdout", T.BOOLEAN, "Whether to attach to `stdout`."),
    body("AttachStderr", T.BOOLEAN, "Whether to attach to `stderr`."),
    body("ExposedPorts", T.OBJECT, "An object mapping ports to an empty object in the form `{\"<port>/<tcp|udp|sctp>\": {}}`"),
    body("Tty", T.BOOLEAN, "Attach standard streams to a TTY, including `stdin` if it is not closed."),
    body("OpenStdin", T.BOOLEAN, "Open `stdin`"),
    body("StdinOnce", T.BOOLEAN, "Close `stdin` after one attached client disconnects"),
    body("Env", T.ARRAY, "A list of environment variables to set inside the container in the form `[\"VAR=value\", ...]`.", items=T.STRING),
    body("Cmd", T.ARRAY, "Command to run specified as an array of strings.", items=T.STRING),
    body("Healthcheck", T.OBJECT, "A test to perform to check that the container is healthy."),
    body("ArgsEscaped", T.BOOLEAN, "Command is already escaped (Windows only)"),
    body("Image", T.STRING, "The name (or reference) of the image to use when creating the container"),
    body("Volumes", T.OBJECT, "An object mapping mount point paths inside the container to empty objects."),
    body("WorkingDir", T.STRING, "The working directory for commands to run in."),
    body("Entrypoint", T.ARRAY, "The entry point for the container as a string or an array of strings.", items=T.STRING),
    body("NetworkDisabled", T.BOOLEAN, "Disable networking for the container."),
    body("MacAddress", T.STRING, "MAC address of the container."),
    body("OnBuild", T.ARRAY, "`ONBUILD` metadata that were defined in the image's `Dockerfile`.", items=T.STRING),
    body("Labels", T.OBJECT, "User-defined key/value metadata."),
    body("StopSignal", T.STRING, "Signal to stop a container as a string or unsigned integer."),
    body("StopTimeout", T.NUMBER, "Timeout to stop a container in seconds."),
    body("Shell", T.ARRAY, "Shell for when `RUN`, `CMD`, and `ENTRYPOINT` uses a shell.", items=T.STRING),
)

# Resource fields accepted by update
CONTAINER_RESOURCE_PARAMS = (
    body("CpuShares", T.NUMBER, "An integer value representing this container's relative CPU weight versus other containers."),
    body("Memory", T.NUMBER, "Memory limit in bytes."),
    body("CgroupParent", T.STRING, "Path to `cgroups` under which the container's `cgroup` is created."),
    body("BlkioWeight", T.NUMBER, "Block IO weight (relative weight)."),
    body("BlkioWeightDevice", T.ARRAY, "Block IO weight (relative device weight) in the form `[{\"Path\": \"device_path\", \"Weight\": weight}]`.", items=T.OBJECT),
    body("BlkioDeviceReadBps", T.ARRAY, "Limit read rate (bytes per second) from a device.", items=T.OBJECT),
    body("BlkioDeviceWriteBps", T.ARRAY, "Limit write rate (bytes per second) to a device.", items=T.OBJECT),
    body("BlkioDeviceReadIOps", T.ARRAY, "Limit read rate (IO per second) from a device.", items=T.OBJECT),
    body("BlkioDeviceWriteIOps", T.ARRAY, "Limit write rate (IO per second) to a device.", items=T.OBJECT),
    body("CpuPeriod", T.NUMBER, "The length of a CPU period in microseconds."),
    body("CpuQuota", T.NUMBER, "Microseconds of CPU time that the container can get in a CPU period."),
    body("CpuRealtimePeriod", T.NUMBER, "The length of a CPU real-time period in microseconds."),
    body("CpuRealtimeRuntime", T.NUMBER, "The length of a CPU real-time runtime in microseconds."),
    body("CpusetCpus", T.STRING, "CPUs in which to allow execution (e.g., `0-3`, `0,1`)."),
    body("CpusetMems", T.STRING, "Memory nodes (MEMs) in which to allow execution (0-3, 0,1)."),
    body("Devices", T.ARRAY, "A list of devices to add to the container.", items=T.OBJECT),
    body("DeviceCgroupRules", T.ARRAY, "a list of cgroup rules to apply to the container", items=T.STRING),
    body("DiskQuota", T.NUMBER, "Disk limit (in bytes)."),
    body("KernelMemory", T.NUMBER, "Kernel memory limit in bytes."),
    body("MemoryReservation", T.NUMBER, "Memory soft limit in bytes."),
    body("MemorySwap", T.NUMBER, "Total memory limit (memory + swap). Set as `-1` to enable unlimited swap."),
    body("MemorySwappiness", T.NUMBER, "Tune a container's memory swappiness behavior. Accepts an integer between 0 and 100."),
    body("NanoCPUs", T.NUMBER, "CPU quota in units of 10<sup>-9</sup> CPUs."),
    body("OomKillDisable", T.BOOLEAN, "Disable OOM Killer for the container."),
    body("PidsLimit", T.NUMBER, "Tune a container's pids limit. Set -1 for unlimited."),
    body("Ulimits", T.ARRAY, "A list of resource limits to set in the container.", items=T.OBJECT),
    body("CpuCount", T.NUMBER, "The number of usable CPUs (Windows only)."),
    body("CpuPercent", T.NUMBER, "The usable percentage of the available CPUs (Windows only)."),
    body("IOMaximumIOps", T.NUMBER, "Maximum IOps for the container system drive (Windows only)"),
    body("IOMaximumBandwidth", T.NUMBER, "Maximum IO in bytes per second for the container system drive (Windows only)"),
)

ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/containers/json",
        description="List containers",
        params=(
            query("all", T.BOOLEAN, "Return all containers. By default, only running containers are shown"),
            query("limit", T.NUMBER, "Return this number of most recently created containers, including non-running ones."),
            query("size", T.BOOLEAN, "Return the size of container as fields `SizeRw` and `SizeRootFs`."),
            query("filters", T.STRING, CONTAINER_FILTERS),
        ),
        response=ResponseShape.ARRAY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/create",
        description="Create a container",
        params=(
            query("name", T.STRING, "Assign the specified name to the container. Must match `/?[a-zA-Z0-9][a-zA-Z0-9_.-]+`."),
        ) + CONTAINER_CONFIG_PARAMS + (
            body("HostConfig", T.OBJECT, "Container configuration that depends on the host we are running on"),
            body("NetworkingConfig", T.OBJECT, "Configuration for a network used to create a container."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.MODEL, response_model=ContainerCreateResponse,
    ),
    EndpointDescriptor(
        method="GET", path="/containers/{id}/json",
        description="Inspect a container",
        params=(
            path("id", CONTAINER_ID),
            query("size", T.BOOLEAN, "Return the size of container as fields `SizeRw` and `SizeRootFs`"),
        ),
    ),
    EndpointDescriptor(
        method="GET", path="/containers/{id}/top",
        description="List processes running inside a container",
        params=(
            path("id", CONTAINER_ID),
            query("ps_args", T.STRING, "The arguments to pass to `ps`. For example, `aux`"),
        ),
    ),
    EndpointDescriptor(
        method="GET", path="/containers/{id}/logs",
        description="Get container logs",
        params=(
            path("id", CONTAINER_ID),
            query("follow", T.BOOLEAN, "Keep connection after returning logs."),
            query("stdout", T.BOOLEAN, "Return logs from `stdout`"),
            query("stderr", T.BOOLEAN, "Return logs from `stderr`"),
            query("since", T.NUMBER, "Only return logs since this time, as a UNIX timestamp"),
            query("until", T.NUMBER, "Only return logs before this time, as a UNIX timestamp"),
            query("timestamps", T.BOOLEAN, "Add timestamps to every log line"),
            query("tail", T.STRING, "Only return this number of log lines from the end of the logs. Specify as an integer or `all` to output all log lines."),
        ),
        response=ResponseShape.STRING,
    ),
    EndpointDescriptor(
        method="GET", path="/containers/{id}/changes",
        description="Get changes on a container's filesystem",
        params=(path("id", CONTAINER_ID),),
        response=ResponseShape.ARRAY,
    ),
    EndpointDescriptor(
        method="GET", path="/containers/{id}/stats",
        description="Get container stats based on resource usage",
        params=(
            path("id", CONTAINER_ID),
            query("stream", T.BOOLEAN, "Stream the output. If false, the stats will be output once and then it will disconnect."),
            query("one-shot", T.BOOLEAN, "Only get a single stat instead of waiting for 2 cycles. Must be used with `stream=false`."),
        ),
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/resize",
        description="Resize a container TTY",
        params=(
            path("id", CONTAINER_ID),
            query("h", T.NUMBER, "Height of the TTY session in characters"),
            query("w", T.NUMBER, "Width of the TTY session in characters"),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/start",
        description="Start a container",
        params=(
            path("id", CONTAINER_ID),
            query("detachKeys", T.STRING, "Override the key sequence for detaching a container. Format is a single character `[a-Z]` or `ctrl-<value>`."),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/stop",
        description="Stop a container",
        params=(
            path("id", CONTAINER_ID),
            query("signal", T.STRING, "Signal to send to the container as an integer or string (e.g. `SIGINT`)."),
            query("t", T.NUMBER, "Number of seconds to wait before killing the container"),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/restart",
        description="Restart a container",
        params=(
            path("id", CONTAINER_ID),
            query("signal", T.STRING, "Signal to send to the container as an integer or string (e.g. `SIGINT`)."),
            query("t", T.NUMBER, "Number of seconds to wait before killing the container"),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/kill",
        description="Kill a container",
        params=(
            path("id", CONTAINER_ID),
            query("signal", T.STRING, "Signal to send to the container as an integer or string (e.g. `SIGINT`)."),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/update",
        description="Update a container",
        params=(path("id", CONTAINER_ID),) + CONTAINER_RESOURCE_PARAMS + (
            body("RestartPolicy", T.OBJECT, "The behavior to apply when the container exits."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.MODEL, response_model=ContainerUpdateResponse,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/rename",
        description="Rename a container",
        params=(
            path("id", CONTAINER_ID),
            query("name", T.STRING, "New name for the container", required=True),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/pause",
        description="Pause a container",
        params=(path("id", CONTAINER_ID),),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/unpause",
        description="Unpause a container",
        params=(path("id", CONTAINER_ID),),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="GET", path="/containers/{id}/attach/ws",
        description="Attach to a container via a websocket",
        params=(
            path("id", CONTAINER_ID),
            query("detachKeys", T.STRING, "Override the key sequence for detaching a container."),
            query("logs", T.BOOLEAN, "Return logs"),
            query("stream", T.BOOLEAN, "Return stream"),
            query("stdin", T.BOOLEAN, "Attach to `stdin`"),
            query("stdout", T.BOOLEAN, "Attach to `stdout`"),
            query("stderr", T.BOOLEAN, "Attach to `stderr`"),
        ),
    ),
    EndpointDescriptor(
        method="POST", path="/containers/{id}/wait",
        description="Wait for a container",
        params=(
            path("id", CONTAINER_ID),
            query("condition", T.STRING, "Wait until a container state reaches the given condition: `not-running` (default), `next-exit`, or `removed`."),
        ),
        response=ResponseShape.MODEL, response_model=ContainerWaitResponse,
    ),
    EndpointDescriptor(
        method="DELETE", path="/containers/{id}",
        description="Remove a container",
        params=(
            path("id", CONTAINER_ID),
            query("v", T.BOOLEAN, "Remove anonymous volumes associated with the container."),
            query("force", T.BOOLEAN, "If the container is running, kill it before removing it."),
            query("link", T.BOOLEAN, "Remove the specified link associated with the container."),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="HEAD", path="/containers/{id}/archive",
        description="Get information about files in a container",
        params=(
            path("id", CONTAINER_ID),
            query("path", T.STRING, "Resource in the container's filesystem to archive.", required=True),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/containers/prune",
        description="Delete stopped containers",
        params=(
            query("filters", T.STRING, "Filters to process on the prune list, encoded as JSON (a `map[string][]string`). Available filters: `until=<timestamp>`, `label`."),
        ),
    ),
]

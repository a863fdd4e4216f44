# docker_engine_mcp/tools/endpoints/image.py
"""Image endpoints, including commit and build-cache pruning."""

from ...models import ContainerConfig, IdResponse, Image, ImageDeleteResponseItem, ImageSummary
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

IMAGE_NAME = "Image name or ID"

ENDPOINTS = [
    EndpointDescriptor(
        method="GET", path="/images/json",
        description="List Images",
        params=(
            query("all", T.BOOLEAN, "Show all images. Only images from a final layer (no children) are shown by default."),
            query("filters", T.STRING, "A JSON encoded value of the filters (a `map[string][]string`) to process on the images list. Available filters: before, dangling, label, reference, since."),
            query("digests", T.BOOLEAN, "Show digest information as a `RepoDigests` field on each image."),
        ),
        response=ResponseShape.MODEL_LIST, response_model=ImageSummary,
    ),
    EndpointDescriptor(
        method="POST", path="/build/prune",
        description="Delete builder cache",
        params=(
            query("keep-storage", T.NUMBER, "Amount of disk space in bytes to keep for cache"),
            query("all", T.BOOLEAN, "Remove all types of build cache"),
            query("filters", T.STRING, "A JSON encoded value of the filters (a `map[string][]string`) to process on the list of build cache objects."),
        ),
    ),
    EndpointDescriptor(
        method="POST", path="/images/create",
        description="Create an image by either pulling it from a registry or importing it.",
        params=(
            query("fromImage", T.STRING, "Name of the image to pull. The name may include a tag or digest."),
            query("fromSrc", T.STRING, "Source to import. The value may be a URL from which the image can be retrieved or `-` to read the image from the request body."),
            query("repo", T.STRING, "Repository name given to an image when it is imported."),
            query("tag", T.STRING, "Tag or digest. If empty when pulling an image, this causes all tags for the given image to be pulled."),
            query("message", T.STRING, "Set commit message for imported image."),
            query("platform", T.STRING, "Platform in the format os[/arch[/variant]]"),
            registry_auth(),
        ),
        # Progress is streamed as newline-delimited JSON, so the body is usually returned as text
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="GET", path="/images/{name}/json",
        description="Inspect an image",
        params=(path("name", IMAGE_NAME),),
        response=ResponseShape.MODEL, response_model=Image,
    ),
    EndpointDescriptor(
        method="GET", path="/images/{name}/history",
        description="Get the history of an image",
        params=(path("name", IMAGE_NAME),),
        response=ResponseShape.ARRAY,
    ),
    EndpointDescriptor(
        method="POST", path="/images/{name}/push",
        description="Push an image",
        params=(
            path("name", "Image name or ID."),
            query("tag", T.STRING, "The tag to associate with the image on the registry."),
            registry_auth(),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/images/{name}/tag",
        description="Tag an image",
        params=(
            path("name", "Image name or ID to tag."),
            query("repo", T.STRING, "The repository to tag in. For example, `someuser/someimage`."),
            query("tag", T.STRING, "The name of the new tag."),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="DELETE", path="/images/{name}",
        description="Remove an image",
        params=(
            path("name", IMAGE_NAME),
            query("force", T.BOOLEAN, "Remove the image even if it is being used by stopped containers or has other tags"),
            query("noprune", T.BOOLEAN, "Do not delete untagged parent images"),
        ),
        response=ResponseShape.MODEL_LIST, response_model=ImageDeleteResponseItem,
    ),
    EndpointDescriptor(
        method="GET", path="/images/search",
        description="Search images",
        params=(
            query("term", T.STRING, "Term to search", required=True),
            query("limit", T.NUMBER, "Maximum number of results to return"),
            query("filters", T.STRING, "A JSON encoded value of the filters (a `map[string][]string`) to process on the images list. Available filters: is-automated, is-official, stars."),
        ),
        response=ResponseShape.ARRAY,
    ),
    EndpointDescriptor(
        method="POST", path="/images/prune",
        description="Delete unused images",
        params=(
            query("filters", T.STRING, "Filters to process on the prune list, encoded as JSON (a `map[string][]string`). Available filters: dangling, until, label."),
        ),
    ),
    EndpointDescriptor(
        method="POST", path="/commit",
        description="Create a new image from a container",
        params=(
            query("container", T.STRING, "The ID or name of the container to commit"),
            query("repo", T.STRING, "Repository name for the created image"),
            query("tag", T.STRING, "Tag name for the create image"),
            query("comment", T.STRING, "Commit message"),
            query("author", T.STRING, "Author of the image (e.g., `John Hannibal Smith <hannibal@a-team.com>`)"),
            query("pause", T.BOOLEAN, "Whether to pause the container before committing"),
            query("changes", T.STRING, "`Dockerfile` instructions to apply while committing"),
            body("Hostname", T.STRING, "The hostname to use for the container."),
            body("Domainname", T.STRING, "The domain name to use for the container."),
            body("User", T.STRING, "The user that commands are run as inside the container."),
            body("AttachStdin", T.BOOLEAN, "Whether to attach to `stdin`."),
            body("AttachStdout", T.BOOLEAN, "Whether to attach to `stdout`."),
            body("AttachStderr", T.BOOLEAN, "Whether to attach to `stderr`."),
            body("ExposedPorts", T.OBJECT, "An object mapping ports to an empty object."),
            body("Tty", T.BOOLEAN, "Attach standard streams to a TTY."),
            body("OpenStdin", T.BOOLEAN, "Open `stdin`"),
            body("StdinOnce", T.BOOLEAN, "Close `stdin` after one attached client disconnects"),
            body("Env", T.ARRAY, "A list of environment variables in the form `[\"VAR=value\", ...]`.", items=T.STRING),
            body("Cmd", T.ARRAY, "Command to run specified as an array of strings.", items=T.STRING),
            body("Healthcheck", T.OBJECT, "A test to perform to check that the container is healthy."),
            body("ArgsEscaped", T.BOOLEAN, "Command is already escaped (Windows only)"),
            body("Image", T.STRING, "The name of the image to use when creating the container"),
            body("Volumes", T.OBJECT, "An object mapping mount point paths inside the container to empty objects."),
            body("WorkingDir", T.STRING, "The working directory for commands to run in."),
            body("Entrypoint", T.ARRAY, "The entry point for the container.", items=T.STRING),
            body("NetworkDisabled", T.BOOLEAN, "Disable networking for the container."),
            body("MacAddress", T.STRING, "MAC address of the container."),
            body("OnBuild", T.ARRAY, "`ONBUILD` metadata that were defined in the image's `Dockerfile`.", items=T.STRING),
            body("Labels", T.OBJECT, "User-defined key/value metadata."),
            body("StopSignal", T.STRING, "Signal to stop a container as a string or unsigned integer."),
            body("StopTimeout", T.NUMBER, "Timeout to stop a container in seconds."),
            body("Shell", T.ARRAY, "Shell for when `RUN`, `CMD`, and `ENTRYPOINT` uses a shell.", items=T.STRING),
        ),
        body=BodyShape.MODEL, body_model=ContainerConfig,
        response=ResponseShape.MODEL, response_model=IdResponse,
    ),
]

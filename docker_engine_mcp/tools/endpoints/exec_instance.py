"""Exec endpoints: run commands inside running containers."""

from ...models import IdResponse
from ..descriptor import BodyShape, EndpointDescriptor, ParamType as T, ResponseShape, body, path, query

EXEC_ID = "Exec instance ID"

ENDPOINTS = [
    EndpointDescriptor(
        method="POST", path="/containers/{id}/exec",
        description="Create an exec instance",
        params=(
            path("id", "ID or name of container"),
            body("AttachStdin", T.BOOLEAN, "Attach to `stdin` of the exec command."),
            body("AttachStdout", T.BOOLEAN, "Attach to `stdout` of the exec command."),
            body("AttachStderr", T.BOOLEAN, "Attach to `stderr` of the exec command."),
            body("DetachKeys", T.STRING, "Override the key sequence for detaching a container."),
            body("Tty", T.BOOLEAN, "Allocate a pseudo-TTY."),
            body("Env", T.ARRAY, "A list of environment variables in the form `[\"VAR=value\", ...]`.", items=T.STRING),
            body("Cmd", T.ARRAY, "Command to run, as a string or array of strings.", items=T.STRING),
            body("Privileged", T.BOOLEAN, "Runs the exec process with extended privileges."),
            body("User", T.STRING, "The user, and optionally, group to run the exec process inside the container."),
            body("WorkingDir", T.STRING, "The working directory for the exec process inside the container."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.MODEL, response_model=IdResponse,
    ),
    EndpointDescriptor(
        method="POST", path="/exec/{id}/start",
        description="Start an exec instance",
        params=(
            path("id", EXEC_ID),
            body("Detach", T.BOOLEAN, "Detach from the command."),
            body("Tty", T.BOOLEAN, "Allocate a pseudo-TTY."),
        ),
        body=BodyShape.OBJECT,
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="POST", path="/exec/{id}/resize",
        description="Resize an exec instance",
        params=(
            path("id", EXEC_ID),
            query("h", T.NUMBER, "Height of the TTY session in characters"),
            query("w", T.NUMBER, "Width of the TTY session in characters"),
        ),
        response=ResponseShape.ANY,
    ),
    EndpointDescriptor(
        method="GET", path="/exec/{id}/json",
        description="Inspect an exec instance",
        params=(path("id", EXEC_ID),),
    ),
]

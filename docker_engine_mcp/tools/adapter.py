# docker_engine_mcp/tools/adapter.py
"""
Generic Endpoint Tool

One adapter serves every endpoint in the catalog. Given a descriptor and
the engine settings it turns a flat argument mapping into exactly one HTTP
call against the Docker Engine and shapes the reply into a ToolResult.

Every failure (bad arguments, unbuildable request, transport error, HTTP
error status) is reported as an error-flagged result; nothing is retried.
"""

import json
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests
from pydantic import TypeAdapter, ValidationError

from ..log import get_logger
from ..settings import EngineSettings
from .base import InvalidArgumentsError, RequestBuildError, Tool, ToolError, ToolResult
from .descriptor import PLACEHOLDER_PATTERN, BodyShape, EndpointDescriptor, ParamLocation, ResponseShape

logger = get_logger(__name__)

# Characters that change the meaning of a URL when interpolated verbatim.
# "/" is left out of the path set: the daemon routes namespaced names unencoded.
PATH_UNSAFE = set("?#% ")
QUERY_UNSAFE = set("&#+% ")

# Errors requests raises before anything is sent
REQUEST_CREATION_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)


def format_value(value: Any) -> str:
    """
    Render an argument for a query string or a header.

    Booleans become true/false, integral floats lose their fraction
    (JSON numbers arrive as floats), containers become compact JSON.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _is_present(arguments: Dict[str, Any], name: str) -> bool:
    return arguments.get(name) is not None


class EndpointTool(Tool):
    """A Tool backed by one EndpointDescriptor."""

    def __init__(self, descriptor: EndpointDescriptor, settings: EngineSettings):
        self.descriptor = descriptor
        self.settings = settings
        self.name = descriptor.name
        self.description = descriptor.description
        self.response_adapter = response_adapter_for(descriptor)

    def __repr__(self) -> str:
        return f"EndpointTool({self.descriptor.method} {self.descriptor.path})"

    def get_parameters_schema(self) -> Dict[str, Any]:
        return self.descriptor.input_schema()

    def to_mcp_definition(self) -> Dict[str, Any]:
        return self.descriptor.to_mcp_definition()

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def run(self, **arguments) -> ToolResult:
        try:
            method, url, headers, data = self.build_request(arguments)
        except ToolError as e:
            return ToolResult.error(str(e))

        logger.debug("%s: %s %s", self.name, method, url)
        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                data=data,
                verify=self.settings.VERIFY_SSL,
                timeout=self.settings.REQUEST_TIMEOUT,
                stream=True,
            )
        except REQUEST_CREATION_ERRORS as e:
            return ToolResult.error(f"Failed to create request: {e}")
        except requests.RequestException as e:
            logger.warning("%s: request to %s failed: %s", self.name, url, e)
            return ToolResult.error(f"Request failed: {e}")

        try:
            raw = response.content
        except requests.RequestException as e:
            logger.warning("%s: failed to read response from %s: %s", self.name, url, e)
            return ToolResult.error(f"Failed to read response body: {e}")
        finally:
            response.close()

        text = raw.decode("utf-8", errors="replace") if raw else ""
        return self.shape_response(response.status_code, text)

    def build_request(self, arguments: Dict[str, Any]) -> Tuple[str, str, Dict[str, str], Optional[bytes]]:
        """
        Validate the arguments and assemble (method, url, headers, body).

        Raises:
            InvalidArgumentsError: a required argument is missing or a path
                argument is not a string
            RequestBuildError: the body cannot be built or encoded
        """
        self.validate_arguments(arguments)

        url = self.settings.BASE_URL + self.render_path(arguments)
        query_string = self.render_query(arguments)
        if query_string:
            url = f"{url}?{query_string}"

        headers = {"Accept": "application/json"}
        headers.update(self.settings.get_auth_headers())

        data = None
        if self.descriptor.sends_body:
            data = self.render_body(arguments)
            headers["Content-Type"] = "application/json"

        # Caller-supplied headers (registry auth) go out verbatim
        for param in self.descriptor.header_params:
            if _is_present(arguments, param.name):
                headers[param.name] = format_value(arguments[param.name])

        return self.descriptor.method, url, headers, data

    def validate_arguments(self, arguments: Dict[str, Any]) -> None:
        for param in self.descriptor.path_params:
            if param.name not in arguments:
                raise InvalidArgumentsError(f"Missing required path parameter: {param.name}")
            if not isinstance(arguments[param.name], str):
                raise InvalidArgumentsError(f"Invalid path parameter: {param.name}")

        for param in self.descriptor.params:
            if param.required and param.location != ParamLocation.PATH and not _is_present(arguments, param.name):
                raise InvalidArgumentsError(f"Missing required parameter: {param.name}")

    def render_path(self, arguments: Dict[str, Any]) -> str:
        def substitute(match):
            name = match.group(1)
            return self._interpolate(name, arguments[name], PATH_UNSAFE, "path")

        return PLACEHOLDER_PATTERN.sub(substitute, self.descriptor.path)

    def render_query(self, arguments: Dict[str, Any]) -> str:
        parts: List[str] = []
        for param in self.descriptor.query_params:
            if _is_present(arguments, param.name):
                value = self._interpolate(param.name, format_value(arguments[param.name]), QUERY_UNSAFE, "query")
                parts.append(f"{param.name}={value}")
        return "&".join(parts)

    def _interpolate(self, name: str, value: str, unsafe: set, location: str) -> str:
        if self.settings.PERCENT_ENCODE:
            return quote(value, safe="")
        if unsafe.intersection(value):
            logger.warning(
                "%s: %s parameter '%s' contains URL-reserved characters and is sent unencoded: %r",
                self.name, location, name, value,
            )
        return value

    def render_body(self, arguments: Dict[str, Any]) -> bytes:
        descriptor = self.descriptor
        if descriptor.body == BodyShape.RAW:
            payload = arguments.get(descriptor.body_param)
        else:
            consumed = {p.name for p in descriptor.path_params + descriptor.query_params + descriptor.header_params}
            payload = {k: v for k, v in arguments.items() if k not in consumed}
            if descriptor.body == BodyShape.MODEL:
                try:
                    payload = descriptor.body_model.from_arguments(payload).to_json_dict()
                except ValidationError as e:
                    raise RequestBuildError(f"Failed to convert arguments to request type: {e}") from e

        try:
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise RequestBuildError(f"Failed to encode request body: {e}") from e

    # ------------------------------------------------------------------
    # Response shaping
    # ------------------------------------------------------------------

    def shape_response(self, status_code: int, text: str) -> ToolResult:
        if status_code >= 400:
            logger.warning("%s: daemon answered HTTP %s", self.name, status_code)
            return ToolResult.error(f"API error: {text}")

        try:
            self.response_adapter.validate_json(text)
        except ValidationError:
            # Not the expected shape (or not JSON at all): hand back the raw body
            return ToolResult.success(text)

        # The declared type only checks the shape; the daemon's body is what goes back
        try:
            return ToolResult.success(json.dumps(json.loads(text), indent=2, ensure_ascii=False))
        except (TypeError, ValueError) as e:
            return ToolResult.error(f"Failed to format JSON: {e}")


def response_adapter_for(descriptor: EndpointDescriptor) -> TypeAdapter:
    shape = descriptor.response
    if shape == ResponseShape.MODEL:
        return TypeAdapter(descriptor.response_model)
    if shape == ResponseShape.MODEL_LIST:
        return TypeAdapter(List[descriptor.response_model])
    return _SHAPE_ADAPTERS[shape]


_SHAPE_ADAPTERS = {
    ResponseShape.OBJECT: TypeAdapter(Dict[str, Any]),
    ResponseShape.ARRAY: TypeAdapter(List[Dict[str, Any]]),
    ResponseShape.STRING: TypeAdapter(str),
    ResponseShape.ANY: TypeAdapter(Any),
}

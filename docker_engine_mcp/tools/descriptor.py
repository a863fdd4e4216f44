# docker_engine_mcp/tools/descriptor.py
"""
Endpoint Descriptors

Each Docker Engine endpoint is described once, as static data: its HTTP
method, path template, parameters, the shape of its request body and the
shape of its response. The generic adapter in adapter.py reads a descriptor
and does the rest, so adding an endpoint never means writing request code.
"""

import re
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, model_validator

from ..models import DockerModel

# Matches "{id}" style placeholders in a path template
PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD")


class ParamType(str, Enum):
    """Parameter types, named after their JSON Schema counterparts."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class ParamLocation(str, Enum):
    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    BODY = "body"


class BodyShape(str, Enum):
    """How the request body is built from the tool arguments."""
    NONE = "none"      # no body is sent
    OBJECT = "object"  # remaining arguments, sent as a JSON object
    MODEL = "model"    # remaining arguments coerced into a catalog model
    RAW = "raw"        # the value of one designated argument is the whole body


class ResponseShape(str, Enum):
    """What a successful response body is decoded into."""
    OBJECT = "object"          # a JSON object with arbitrary keys
    ARRAY = "array"            # a JSON array of objects
    MODEL = "model"            # one catalog model
    MODEL_LIST = "model_list"  # a JSON array of catalog models
    STRING = "string"          # a JSON string
    ANY = "any"                # any JSON value


class ParamSpec(BaseModel):
    """One tool parameter and where it goes in the HTTP request."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ParamType = ParamType.STRING
    location: ParamLocation = ParamLocation.QUERY
    description: str = ""
    required: bool = False
    items: Optional[ParamType] = None  # element type, arrays only

    @model_validator(mode="after")
    def check_path_param(self) -> "ParamSpec":
        if self.location == ParamLocation.PATH:
            if self.type != ParamType.STRING or not self.required:
                raise ValueError(f"Path parameter '{self.name}' must be a required string")
        if self.items is not None and self.type != ParamType.ARRAY:
            raise ValueError(f"Parameter '{self.name}' declares items but is not an array")
        return self

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type.value}
        if self.items is not None:
            schema["items"] = {"type": self.items.value}
        if self.description:
            schema["description"] = self.description
        return schema


def derive_tool_name(method: str, path: str) -> str:
    """
    Build a tool name from the method and the path template.

    Placeholders are reduced to their name and separators become
    underscores: ("GET", "/containers/{id}/json") -> "get_containers_id_json".
    """
    parts = [method.lower()]
    for segment in path.split("/"):
        segment = PLACEHOLDER_PATTERN.sub(r"\1", segment).strip("_")
        if segment:
            parts.append(re.sub(r"[^A-Za-z0-9]+", "_", segment).lower())
    return "_".join(parts)


class EndpointDescriptor(BaseModel):
    """
    Static description of one Docker Engine endpoint.

    Construction fails with a pydantic ValidationError when the descriptor
    is inconsistent (duplicate parameter names, a placeholder without a path
    parameter, a model shape without a model, ...).
    """

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    description: str
    name: str = ""
    params: Tuple[ParamSpec, ...] = ()
    body: BodyShape = BodyShape.NONE
    body_model: Optional[Type[DockerModel]] = None
    body_param: Optional[str] = None  # RAW bodies only
    response: ResponseShape = ResponseShape.OBJECT
    response_model: Optional[Type[DockerModel]] = None

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if "method" in data:
                data["method"] = str(data["method"]).upper()
            if not data.get("name") and "method" in data and "path" in data:
                data["name"] = derive_tool_name(data["method"], data["path"])
        return data

    @model_validator(mode="after")
    def check_consistency(self) -> "EndpointDescriptor":
        if self.method not in HTTP_METHODS:
            raise ValueError(f"{self.name}: unsupported HTTP method {self.method}")

        names = [p.name for p in self.params]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"{self.name}: duplicate parameters {duplicates}")

        placeholders = set(PLACEHOLDER_PATTERN.findall(self.path))
        path_names = {p.name for p in self.path_params}
        if placeholders != path_names:
            raise ValueError(
                f"{self.name}: path placeholders {sorted(placeholders)} "
                f"do not match path parameters {sorted(path_names)}"
            )

        if self.body == BodyShape.NONE and self.body_params:
            raise ValueError(f"{self.name}: body parameters declared without a body")
        if self.body == BodyShape.MODEL and self.body_model is None:
            raise ValueError(f"{self.name}: model body requires body_model")
        if self.body == BodyShape.RAW:
            if self.body_param not in {p.name for p in self.body_params}:
                raise ValueError(f"{self.name}: raw body must name one of its body parameters")
        if self.response in (ResponseShape.MODEL, ResponseShape.MODEL_LIST) and self.response_model is None:
            raise ValueError(f"{self.name}: model response requires response_model")
        return self

    # Derived views

    def _params_at(self, location: ParamLocation) -> List[ParamSpec]:
        return [p for p in self.params if p.location == location]

    @property
    def path_params(self) -> List[ParamSpec]:
        return self._params_at(ParamLocation.PATH)

    @property
    def query_params(self) -> List[ParamSpec]:
        return self._params_at(ParamLocation.QUERY)

    @property
    def header_params(self) -> List[ParamSpec]:
        return self._params_at(ParamLocation.HEADER)

    @property
    def body_params(self) -> List[ParamSpec]:
        return self._params_at(ParamLocation.BODY)

    @property
    def required_names(self) -> List[str]:
        return [p.name for p in self.params if p.required]

    @property
    def sends_body(self) -> bool:
        return self.body != BodyShape.NONE

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema of the tool input, properties in declaration order."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": self.required_names,
        }

    def to_mcp_definition(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


# Helper constructors used by the endpoint catalog

def path(name: str, description: str) -> ParamSpec:
    return ParamSpec(name=name, type=ParamType.STRING, location=ParamLocation.PATH,
                     description=description, required=True)


def query(name: str, type: ParamType, description: str, required: bool = False) -> ParamSpec:
    return ParamSpec(name=name, type=type, location=ParamLocation.QUERY,
                     description=description, required=required)


def header(name: str, description: str, required: bool = False) -> ParamSpec:
    return ParamSpec(name=name, type=ParamType.STRING, location=ParamLocation.HEADER,
                     description=description, required=required)


def body(name: str, type: ParamType, description: str, required: bool = False,
         items: Optional[ParamType] = None) -> ParamSpec:
    return ParamSpec(name=name, type=type, location=ParamLocation.BODY,
                     description=description, required=required, items=items)


REGISTRY_AUTH = "X-Registry-Auth"


def registry_auth(description: str = "A base64url-encoded auth configuration for the registry") -> ParamSpec:
    return header(REGISTRY_AUTH, description)

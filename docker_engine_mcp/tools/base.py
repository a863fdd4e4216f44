# docker_engine_mcp/tools/base.py
"""
Base class for all Docker Engine tools.

This defines the standard interface every tool implements, the result value
a tool hands back to the server, and the errors raised while a tool builds
its request.
"""

# Import the Abstract Base Class (ABC) module
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of one tool invocation: a text payload and an error flag.

    On success the text is the pretty-printed daemon response (or the raw
    body when it could not be decoded); on failure it is a human-readable
    message.
    """
    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=False)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)

    def to_mcp(self) -> Dict[str, Any]:
        """Render as an MCP tools/call result."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


class ToolError(Exception):
    """Base class for failures detected while preparing a tool call."""


class InvalidArgumentsError(ToolError):
    """The caller's arguments do not satisfy the tool's parameter contract."""


class RequestBuildError(ToolError):
    """The HTTP request could not be assembled from valid arguments."""


class Tool(ABC):
    """
    Abstract base class for all Docker Engine tools.

    Every endpoint we expose must inherit from this class, so the registry
    and the server can treat all tools the same way.
    """

    # These are attributes that subclasses must define
    name: str  # Unique identifier for the tool (e.g., "get_containers_json")
    description: str  # Human-readable description of what the tool does

    @abstractmethod
    def get_parameters_schema(self) -> Dict[str, Any]:
        """
        Return the JSON Schema for this tool's parameters.

        Returns:
            Dict[str, Any]: JSON Schema describing the tool's parameters
        """
        pass  # This method must be implemented by subclasses

    @abstractmethod
    def run(self, **kwargs) -> ToolResult:
        """
        Execute the tool.

        Implementations never raise for expected failures; they report them
        as an error-flagged ToolResult instead.

        Args:
            **kwargs: Arguments supplied by the caller

        Returns:
            ToolResult: Text payload with its error flag
        """
        pass  # This method must be implemented by subclasses

    def to_mcp_definition(self) -> Dict[str, Any]:
        """The MCP tools/list entry for this tool."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.get_parameters_schema(),
        }

# docker_engine_mcp/tools/__init__.py
"""
Tools Registry Module

This module turns the endpoint catalog into tool instances and provides
helpers to get tool schemas (for LLM clients) and find specific tools by
name (for the MCP server).
"""

from typing import List, Optional

from ..settings import EngineSettings
from .adapter import EndpointTool
from .base import Tool, ToolResult
from .endpoints import ALL_ENDPOINTS
from .registry import ToolRegistry


def build_registry(settings: EngineSettings) -> ToolRegistry:
    """
    Create one EndpointTool per catalog entry, all sharing the given settings.

    Args:
        settings (EngineSettings): Immutable engine configuration

    Returns:
        ToolRegistry: Registry holding every tool
    """
    registry = ToolRegistry()
    for descriptor in ALL_ENDPOINTS:
        registry.register(EndpointTool(descriptor, settings))
    return registry


def get_tools_schema(registry: ToolRegistry) -> List[dict]:
    """
    Generate the JSON Schema for all available tools.

    Returns:
        List[dict]: List of tool schemas in the format expected by LLMs
                   Each schema contains name, description, and parameters
    """
    return [
        {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.get_parameters_schema()
        }
        for tool in registry.get_tools()
    ]


def find_tool_by_name(registry: ToolRegistry, name: str) -> Optional[Tool]:
    """
    Find a specific tool by its name.

    Returns:
        Optional[Tool]: The tool instance if found, None if not found
    """
    return registry.get_tool(name)


def get_all_tool_names(registry: ToolRegistry) -> List[str]:
    """Get the names of all available tools, in catalog order."""
    return [tool.name for tool in registry.get_tools()]


def tool_exists(registry: ToolRegistry, name: str) -> bool:
    return find_tool_by_name(registry, name) is not None


__all__ = [
    "EndpointTool",
    "Tool",
    "ToolRegistry",
    "ToolResult",
    "build_registry",
    "find_tool_by_name",
    "get_all_tool_names",
    "get_tools_schema",
    "tool_exists",
]

# docker_engine_mcp/mcp/__init__.py
"""
MCP (Model Context Protocol) Subpackage Initialization

Provides the JSON-RPC server hosting the Docker Engine tools and a client
for calling it.
"""

from .server import create_application, start_mcp_server
from .client import call_tool, call_tool_async, list_tools, test_connection

__all__ = [
    "create_application",
    "start_mcp_server",
    "call_tool",
    "call_tool_async",
    "list_tools",
    "test_connection"
]

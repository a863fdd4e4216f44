# docker_engine_mcp/mcp/client.py
"""
MCP (Model Context Protocol) Client

This client sends JSON-RPC 2.0 requests to the MCP server to execute Docker
Engine tools. It supports both synchronous and asynchronous execution.
Client-side failures never raise; they come back as
{"success": False, "error": ...} dictionaries.
"""

import requests
import httpx
from typing import Any, Dict, Optional

# Configuration
MCP_URL = "http://127.0.0.1:8080"
DEFAULT_TIMEOUT = 30


def _payload(method: str, params: Any) -> Dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1
    }


def _unwrap(result: Dict[str, Any]) -> Dict[str, Any]:
    if "error" in result:
        return {"success": False, "error": result["error"]}
    return result.get("result", {"success": False, "error": "No result returned"})

# -----------------------------------------------------------------------------
# ASYNCHRONOUS IMPLEMENTATION
# -----------------------------------------------------------------------------

async def call_tool_async(tool_name: str, arguments: Dict[str, Any], url: Optional[str] = None) -> Dict[str, Any]:
    """Execute a tool asynchronously using httpx."""
    url = url or MCP_URL
    try:
        async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as client:
            response = await client.post(url, json=_payload("tools/call", {"name": tool_name, "arguments": arguments}))
            response.raise_for_status()
            return _unwrap(response.json())

    except httpx.ConnectError:
        return {
            "success": False,
            "error": f"Cannot connect to MCP server at {url}. Is it running?"
        }
    except httpx.TimeoutException:
        return {"success": False, "error": "Request timed out"}
    except Exception as e:
        return {"success": False, "error": f"Async error: {str(e)}"}

# -----------------------------------------------------------------------------
# SYNCHRONOUS IMPLEMENTATION
# -----------------------------------------------------------------------------

def call_tool(tool_name: str, arguments: Dict[str, Any], url: Optional[str] = None) -> Dict[str, Any]:
    """
    Execute a tool on the server through the MCP tools/call method.

    Returns:
        Dict[str, Any]: The MCP call result ({"content": [...], "isError": bool})
                        or an error dictionary when the call did not go through
    """
    return _sync_call(url or MCP_URL, "tools/call", {"name": tool_name, "arguments": arguments})


def list_tools(url: Optional[str] = None) -> Dict[str, Any]:
    """Fetch the MCP tool definitions from the server."""
    return _sync_call(url or MCP_URL, "tools/list", {})


def _sync_call(url: str, method: str, params: Any) -> Dict[str, Any]:
    """Internal synchronous helper using requests."""
    try:
        response = requests.post(url, json=_payload(method, params), timeout=DEFAULT_TIMEOUT)
        response.raise_for_status()
        return _unwrap(response.json())

    except requests.exceptions.ConnectionError:
        return {"success": False, "error": f"Cannot connect to server at {url}"}
    except Exception as e:
        return {"success": False, "error": f"Error: {str(e)}"}


def test_connection(url: Optional[str] = None) -> bool:
    """Test the MCP server connection."""
    res = _sync_call(url or MCP_URL, "ping", {})
    return "error" not in res

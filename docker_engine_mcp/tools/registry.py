from typing import Dict, List, Optional
from .base import Tool

class ToolRegistry:
    """
    Central registry for all available tools.
    Holds tool instances keyed by their unique name.
    """
    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> Tool:
        """
        Register a tool instance. Names must be unique.
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        return tool

    def get_tools(self) -> List[Tool]:
        """
        Get all registered tools, in registration order.
        """
        return list(self._tools.values())

    def get_tool(self, name: str) -> Optional[Tool]:
        """
        Get a specific tool by name.
        """
        return self._tools.get(name)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

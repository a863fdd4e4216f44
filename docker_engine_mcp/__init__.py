# docker_engine_mcp/__init__.py
"""
Docker Engine MCP Package Initialization

Exposes the Docker Engine REST API as a set of MCP tools. Every tool is a
declarative endpoint descriptor served by one generic request adapter.
"""

# Package metadata
__version__ = "1.0.0"
__description__ = "Docker Engine REST API exposed as Model Context Protocol tools"


def get_version():
    """
    Get the current version of the package.

    Returns:
        str: The version string in format "major.minor.patch"
    """
    return __version__

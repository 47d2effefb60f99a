"""MCP server module for specagent."""

from .config import MCPToolsetConfig
from .server import MCPServer, create_server_from_config

__all__ = ["MCPServer", "MCPToolsetConfig", "create_server_from_config"]

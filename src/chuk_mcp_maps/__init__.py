"""chuk-mcp-maps: Google Maps Platform lookups as MCP tools."""

from .constants import ServerConfig

__version__ = ServerConfig.VERSION

"""MCP tool registration modules for chuk-mcp-maps."""

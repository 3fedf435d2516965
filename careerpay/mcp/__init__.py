"""Career Pay MCP server."""

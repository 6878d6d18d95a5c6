"""MCP server exposing passage scanning to agents."""

from docmark.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]

"""Demo MCP server exposing a single greeting tool."""

from hello_world_mcp.tools import build_tools, hello_world_tool

__all__ = ["build_tools", "hello_world_tool"]

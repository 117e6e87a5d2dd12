"""Shared registry, dispatcher and FastMCP bridge for the MCP adapters."""

from mcp_adapter.errors import ErrorKind, MCPError
from mcp_adapter.server import InvocationResult, MCPServer
from mcp_adapter.tools import ToolDefinition, ToolParameters, text_content

__all__ = [
    "ErrorKind",
    "InvocationResult",
    "MCPError",
    "MCPServer",
    "ToolDefinition",
    "ToolParameters",
    "text_content",
]

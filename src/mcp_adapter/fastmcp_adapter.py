"""Adapters for exposing registered tools via FastMCP."""

from __future__ import annotations

from typing import Any

import anyio.to_thread
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from mcp_adapter.server import MCPServer
from mcp_adapter.tools import ToolDefinition


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition, server: MCPServer) -> None:
        """Create a FastMCP tool wrapper dispatching through ``server``."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            output_schema=None,
            tags=set(),
        )
        self._definition = definition
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Dispatch the call in a worker thread and convert the outcome.

        Handlers make blocking HTTP calls, so they stay off the event loop.
        """
        result = await anyio.to_thread.run_sync(
            self._server.dispatch, self._definition.name, arguments
        )
        if result.error is not None:
            raise ToolError(str(result.error))
        return ToolResult(
            content=[
                TextContent(type="text", text=block["text"])
                for block in result.content
            ]
        )


def to_fastmcp_tools(server: MCPServer) -> list[Tool]:
    """Convert the server's tool definitions into FastMCP-compatible tools."""
    return [ToolDefinitionAdapter(definition, server) for definition in server.tools()]


def build_fastmcp_app(name: str, instructions: str, server: MCPServer) -> FastMCP:
    """Create a FastMCP server instance with every registered tool."""
    app = FastMCP(name=name, instructions=instructions)
    for tool in to_fastmcp_tools(server):
        app.add_tool(tool)
    return app

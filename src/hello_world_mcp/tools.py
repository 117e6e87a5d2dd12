"""Greeting tool for the hello-world MCP server."""

from __future__ import annotations

from pydantic import Field, StrictStr

from mcp_adapter.tools import TextContent, ToolDefinition, ToolParameters, text_content


class HelloWorldParams(ToolParameters):
    """Parameters for the hello_world tool."""

    name: StrictStr = Field(description="Name to greet")


def hello_world_tool() -> ToolDefinition:
    """Create the hello_world tool definition."""

    def handler(params: HelloWorldParams) -> list[TextContent]:
        return text_content(f"Hello, {params.name}! Welcome to the MCP world.")

    return ToolDefinition(
        name="hello_world",
        description="Returns a greeting message",
        parameters_model=HelloWorldParams,
        handler=handler,
    )


def build_tools() -> list[ToolDefinition]:
    """Instantiate all tool definitions."""
    return [hello_world_tool()]

"""Tool registry and dispatcher.

This module contains the transport-free core shared by the adapters: a fixed
registry of :class:`ToolDefinition` objects and a dispatcher that validates
arguments, runs the matching handler, and folds every outcome into an
:class:`InvocationResult`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from mcp_adapter.errors import ErrorKind, MCPError
from mcp_adapter.tools import TextContent, ToolDefinition

logger = logging.getLogger(__name__)


@dataclass
class InvocationResult:
    """Result returned by a tool invocation.

    Exactly one of ``content`` and ``error`` is meaningful: a successful call
    carries text content blocks, a failed one carries the :class:`MCPError`.

    Attributes:
        name: Name of the tool that was invoked.
        content: Ordered text content blocks produced by the tool.
        error: Error raised while dispatching, if any.

    """

    name: str
    content: list[TextContent] = field(default_factory=list)
    error: MCPError | None = None

    @property
    def is_error(self) -> bool:
        """Whether the invocation failed."""
        return self.error is not None

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "".join(block["text"] for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        """Return the protocol envelope for this result."""
        if self.error is not None:
            return dict(self.error.to_dict())
        return {"content": self.content}

    def to_json(self) -> str:
        """Serialize the result envelope to JSON.

        Returns:
            JSON representation of the invocation result.

        """
        return json.dumps(self.to_dict())


class MCPServer:
    """In-memory registry and dispatcher for MCP tools.

    The server tracks registered tools and provides a simple dispatch mechanism. It is
    free of transport details; FastMCP wiring lives in
    :mod:`mcp_adapter.fastmcp_adapter`.
    """

    def __init__(self, tools: Iterable[ToolDefinition] = ()) -> None:
        """Initialize the registry with an optional set of tools."""
        self._tools: dict[str, ToolDefinition] = {}
        self.register_tools(*tools)

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List the names of registered tools.

        Returns:
            Sorted list of tool names.

        """
        return sorted(self._tools)

    def tools(self) -> list[ToolDefinition]:
        """Return the registered tool definitions in registration order."""
        return list(self._tools.values())

    def list_operations(self) -> list[dict[str, Any]]:
        """Describe every registered tool in registration order."""
        return [tool.metadata() for tool in self._tools.values()]

    def to_catalog(self) -> dict[str, dict[str, Any]]:
        """Produce a catalog for discovery.

        Returns:
            Mapping of tool names to their metadata.

        """
        return {name: tool.metadata() for name, tool in self._tools.items()}

    def dispatch(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> InvocationResult:
        """Invoke a registered tool and capture the outcome.

        Args:
            name: Name of the tool to invoke.
            arguments: Raw arguments supplied by the client.

        Returns:
            InvocationResult holding either content or the error. Handler
            exceptions that are not :class:`MCPError` are reported as
            ``InternalError``.

        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("Rejected call to unknown tool %r", name)
            return InvocationResult(
                name=name,
                error=MCPError(ErrorKind.METHOD_NOT_FOUND, f"Unknown tool: {name}"),
            )

        try:
            params = tool.validate({} if arguments is None else arguments)
        except MCPError as error:
            logger.info("Invalid parameters for %s: %s", name, error.message)
            return InvocationResult(name=name, error=error)

        try:
            content = tool.handler(params)
        except MCPError as error:
            logger.error("Tool %s failed: %s", name, error)
            return InvocationResult(name=name, error=error)
        except Exception as exc:
            logger.exception("Unexpected failure in tool %s", name)
            return InvocationResult(
                name=name,
                error=MCPError(
                    ErrorKind.INTERNAL_ERROR,
                    f"Tool '{name}' failed: {exc}",
                    type(exc).__name__,
                ),
            )

        logger.info("Tool %s completed", name)
        return InvocationResult(name=name, content=content)

    def run_tool(
        self, name: str, *, parameters: Mapping[str, Any] | None = None
    ) -> InvocationResult:
        """Execute a registered tool, raising on failure.

        Args:
            name: Name of the registered tool to execute.
            parameters: Optional parameters for the tool.

        Raises:
            MCPError: If dispatch fails for any reason.

        Returns:
            Successful InvocationResult.

        """
        result = self.dispatch(name, parameters)
        if result.error is not None:
            raise result.error
        return result

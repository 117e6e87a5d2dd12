"""Entry point for the hello-world MCP server."""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from hello_world_mcp.tools import build_tools
from mcp_adapter.cli import build_parser, configure_logging, print_catalog, run_app
from mcp_adapter.fastmcp_adapter import build_fastmcp_app as _build_app
from mcp_adapter.server import MCPServer

logger = logging.getLogger(__name__)


def build_fastmcp_app() -> tuple[FastMCP, MCPServer]:
    """Create a FastMCP server instance with the greeting tool registered."""
    server = MCPServer(build_tools())
    app = _build_app("hello-world-mcp", "Greets people by name.", server)
    return app, server


def main(argv: list[str] | None = None) -> int:
    """Register the greeting tool and serve it."""
    args = build_parser("Hello World MCP server").parse_args(argv)
    configure_logging(args.log_level)

    app, server = build_fastmcp_app()
    if args.catalog:
        print_catalog(server)
        return 0

    logger.info("Hello World MCP server running on %s", args.transport)
    run_app(app, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

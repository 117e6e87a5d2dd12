"""Command-line helpers shared by the adapter entry points."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Protocol

from mcp_adapter.server import MCPServer

TRANSPORTS = ("stdio", "http", "sse", "streamable-http")


class RunnableApp(Protocol):
    """Subset of the FastMCP interface used to start a server."""

    def run(self, *, transport: str, **kwargs: object) -> None:
        """Run the transport loop."""


def build_parser(description: str) -> argparse.ArgumentParser:
    """Create the argument parser with the common transport options."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="Transport used to serve MCP requests (default: stdio).",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for HTTP.")
    parser.add_argument("--port", type=int, default=8000, help="Port for HTTP.")
    parser.add_argument("--path", default=None, help="URL path for HTTP transports.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity on stderr.",
    )
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the available tool catalog as JSON and exit.",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def print_catalog(server: MCPServer) -> None:
    """Print the tool descriptors as JSON."""
    print(json.dumps(server.list_operations(), indent=2))


def run_app(app: RunnableApp, args: argparse.Namespace) -> None:
    """Start the app with the transport settings parsed from ``args``."""
    if args.transport == "stdio":
        app.run(transport="stdio")
        return
    run_kwargs: dict[str, object] = {"host": args.host, "port": args.port}
    if args.path:
        run_kwargs["path"] = args.path
    app.run(transport=args.transport, **run_kwargs)

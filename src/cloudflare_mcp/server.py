"""Server assembly for the Cloudflare adapter."""

from __future__ import annotations

from fastmcp import FastMCP

from cloudflare_mcp.client import CloudflareClient
from cloudflare_mcp.config import CloudflareSettings
from cloudflare_mcp.tools import build_tools
from mcp_adapter.fastmcp_adapter import build_fastmcp_app as _build_app
from mcp_adapter.server import MCPServer

SERVER_NAME = "cloudflare-mcp"


def build_server(
    settings: CloudflareSettings, client: CloudflareClient | None
) -> MCPServer:
    """Create the dispatcher with every Cloudflare tool registered."""
    return MCPServer(build_tools(settings, client))


def build_fastmcp_app(
    settings: CloudflareSettings, client: CloudflareClient | None
) -> tuple[FastMCP, MCPServer]:
    """Create a FastMCP server instance with all Cloudflare tools registered."""
    server = build_server(settings, client)
    app = _build_app(
        SERVER_NAME,
        "Cloudflare zone, load balancer and API token utilities.",
        server,
    )
    return app, server

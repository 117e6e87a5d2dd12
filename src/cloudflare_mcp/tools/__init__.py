"""Tool registration helpers for the Cloudflare MCP server."""

from __future__ import annotations

from cloudflare_mcp.client import CloudflareClient
from cloudflare_mcp.config import CloudflareSettings
from cloudflare_mcp.tools.load_balancers import list_load_balancers_tool
from cloudflare_mcp.tools.tokens import get_token_tool, verify_token_tool
from cloudflare_mcp.tools.zones import list_zones_tool
from mcp_adapter.tools import ToolDefinition


def build_tools(
    settings: CloudflareSettings, client: CloudflareClient | None
) -> list[ToolDefinition]:
    """Instantiate all tool definitions.

    Without a client, ``verify_token`` and ``list_load_balancers`` fall back to
    direct REST calls and ``list_zones`` is not offered.
    """
    api_token = settings.api_token.get_secret_value()
    if client is None:
        from cloudflare_mcp.direct import (
            list_load_balancers_direct_tool,
            verify_token_direct_tool,
        )

        return [
            list_load_balancers_direct_tool(settings),
            get_token_tool(api_token),
            verify_token_direct_tool(settings),
        ]
    return [
        list_load_balancers_tool(client),
        get_token_tool(api_token),
        list_zones_tool(client),
        verify_token_tool(client),
    ]

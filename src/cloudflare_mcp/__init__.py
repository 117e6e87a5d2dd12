"""Model Context Protocol server for the Cloudflare management API."""

from cloudflare_mcp.client import CloudflareClient
from cloudflare_mcp.config import CloudflareSettings
from cloudflare_mcp.tools import build_tools

__all__ = ["CloudflareClient", "CloudflareSettings", "build_tools"]

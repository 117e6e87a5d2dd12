"""API token introspection tools."""

from __future__ import annotations

import logging
from typing import Any

from cloudflare_mcp.client import CloudflareClient
from cloudflare_mcp.config import mask_token
from cloudflare_mcp.tools.common import format_remote_errors
from mcp_adapter.errors import ErrorKind, MCPError, raise_mcp_error
from mcp_adapter.tools import TextContent, ToolDefinition, ToolParameters, text_content

logger = logging.getLogger(__name__)


class NoParams(ToolParameters):
    """Tools that take no arguments."""


def summarize_token(result: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a token verification result to status, id and permissions."""
    if not result:
        raise_mcp_error(
            ErrorKind.INTERNAL_ERROR, "Missing result in Cloudflare API response"
        )
    return {
        "status": result.get("status") or "unknown",
        "id": result.get("id") or "unknown",
        "permissions": result.get("permissions") or [],
    }


def get_token_tool(api_token: str | None) -> ToolDefinition:
    """Create the get_token tool definition.

    The token is reported by length and masked form only; no remote call is
    made.
    """

    def handler(_: NoParams) -> list[TextContent]:
        if not api_token:
            raise_mcp_error(
                ErrorKind.INTERNAL_ERROR,
                "Cloudflare API token not found in environment variables",
            )
        return text_content(
            {
                "message": "API token retrieved successfully",
                "token_length": len(api_token),
                "masked_token": mask_token(api_token),
            }
        )

    return ToolDefinition(
        name="get_token",
        description="Get information about the Cloudflare API token being used",
        parameters_model=NoParams,
        handler=handler,
    )


def verify_token_tool(client: CloudflareClient) -> ToolDefinition:
    """Create the verify_token tool definition."""

    def handler(_: NoParams) -> list[TextContent]:
        try:
            logger.info("Verifying API token")
            response = client.user.tokens.verify()
            if not response:
                raise_mcp_error(
                    ErrorKind.INTERNAL_ERROR, "Empty response from Cloudflare API"
                )
            if not response.get("success"):
                raise_mcp_error(
                    ErrorKind.INTERNAL_ERROR,
                    f"API token verification failed: {format_remote_errors(response)}",
                    response.get("errors"),
                )
            summary = summarize_token(response.get("result"))
        except MCPError:
            raise
        except Exception as exc:
            raise_mcp_error(
                ErrorKind.INTERNAL_ERROR, f"Failed to verify API token: {exc}", str(exc)
            )
        return text_content(summary)

    return ToolDefinition(
        name="verify_token",
        description="Verify the Cloudflare API token and report its status",
        parameters_model=NoParams,
        handler=handler,
    )

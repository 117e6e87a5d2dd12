"""Zone listing tool."""

from __future__ import annotations

import logging

from pydantic import Field

from cloudflare_mcp.client import CloudflareClient
from cloudflare_mcp.tools.common import require_success
from mcp_adapter.errors import ErrorKind, MCPError, raise_mcp_error
from mcp_adapter.tools import TextContent, ToolDefinition, ToolParameters, text_content

logger = logging.getLogger(__name__)

ZONE_FILTERS = {"name", "status", "page", "per_page", "order", "direction", "match"}


class ListZonesParams(ToolParameters):
    """Parameters for the list_zones tool."""

    name: str | None = Field(default=None, description="Filter by zone name")
    status: str | None = Field(default=None, description="Filter by zone status")
    page: float | None = Field(
        default=None, description="Page number of paginated results"
    )
    per_page: float | None = Field(
        default=None, description="Number of zones per page"
    )
    order: str | None = Field(default=None, description="Field to order zones by")
    direction: str | None = Field(
        default=None, description="Direction to order zones"
    )
    match: str | None = Field(
        default=None,
        description="Whether to match all search requirements or at least one",
    )


def _whole(value: object) -> object:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def list_zones_tool(client: CloudflareClient) -> ToolDefinition:
    """Create the list_zones tool definition."""

    def handler(params: ListZonesParams) -> list[TextContent]:
        filters = {
            key: _whole(value)
            for key, value in params.model_dump(
                include=ZONE_FILTERS, exclude_none=True
            ).items()
        }
        try:
            logger.info("Listing zones with filters %s", filters)
            envelope = require_success(
                client.zones.list(filters), "Failed to list zones"
            )
        except MCPError:
            raise
        except Exception as exc:
            raise_mcp_error(
                ErrorKind.INTERNAL_ERROR, f"Failed to list zones: {exc}", str(exc)
            )
        return text_content(envelope.get("result"))

    return ToolDefinition(
        name="list_zones",
        description="List Cloudflare zones in your account",
        parameters_model=ListZonesParams,
        handler=handler,
    )

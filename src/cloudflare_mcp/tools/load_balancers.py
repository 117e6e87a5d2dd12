"""Load balancer listing tool with local selection and field projection."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, model_validator

from cloudflare_mcp.client import CloudflareClient
from cloudflare_mcp.tools.common import project_fields, require_success
from mcp_adapter.errors import ErrorKind, MCPError, raise_mcp_error
from mcp_adapter.tools import TextContent, ToolDefinition, ToolParameters, text_content

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "List Cloudflare load balancers for a specific zone. REQUIRES at least one of: "
    "load_balancer_id, load_balancer_name, or limit (with a value > 0) to prevent "
    "generating too large of a response. Use offset with limit for pagination."
)


class ListLoadBalancersParams(ToolParameters):
    """Parameters for the list_load_balancers tool."""

    zone_id: str = Field(
        min_length=1, description="The ID of the zone to list load balancers for"
    )
    load_balancer_id: str | None = Field(
        default=None, description="ID of a specific load balancer to retrieve"
    )
    load_balancer_name: str | None = Field(
        default=None, description="Name of a specific load balancer to retrieve"
    )
    limit: float | None = Field(
        default=None,
        description=(
            "Maximum number of load balancers to return (REQUIRED if "
            "load_balancer_id or load_balancer_name not provided)"
        ),
    )
    offset: float | None = Field(
        default=None,
        description=(
            "Number of load balancers to skip (for pagination, works with limit)"
        ),
    )
    fields: list[str] | None = Field(
        default=None,
        description=(
            "Array of field names to include in the response (default: all fields)"
        ),
    )

    @model_validator(mode="after")
    def require_bound(self) -> ListLoadBalancersParams:
        if (
            not self.load_balancer_id
            and not self.load_balancer_name
            and not (self.limit and self.limit > 0)
        ):
            raise ValueError(
                "At least one of the following parameters is required: "
                "load_balancer_id, load_balancer_name, or limit (with a value > 0)"
            )
        return self


def _find(
    load_balancers: list[dict[str, Any]], key: str, value: str, label: str
) -> dict[str, Any]:
    for load_balancer in load_balancers:
        if load_balancer.get(key) == value:
            return load_balancer
    raise_mcp_error(
        ErrorKind.INVALID_PARAMS, f"Load balancer with {label} {value} not found"
    )


def select_load_balancers(
    load_balancers: list[dict[str, Any]], params: ListLoadBalancersParams
) -> dict[str, Any] | list[dict[str, Any]]:
    """Pick the requested load balancer(s) out of a zone's full list.

    A lookup by id wins over a lookup by name; without either, ``offset`` and
    ``limit`` slice the list. ``fields`` is applied to whatever is returned.
    """
    if params.load_balancer_id:
        match = _find(load_balancers, "id", params.load_balancer_id, "ID")
        return project_fields(match, params.fields)
    if params.load_balancer_name:
        match = _find(load_balancers, "name", params.load_balancer_name, "name")
        return project_fields(match, params.fields)

    offset = max(params.offset or 0, 0)
    end = int(offset + params.limit) if params.limit and params.limit > 0 else None
    selected = load_balancers[int(offset) : end]
    return [project_fields(item, params.fields) for item in selected]


def list_load_balancers_tool(client: CloudflareClient) -> ToolDefinition:
    """Create the list_load_balancers tool definition."""

    def handler(params: ListLoadBalancersParams) -> list[TextContent]:
        try:
            logger.info("Listing load balancers for zone ID: %s", params.zone_id)
            envelope = require_success(
                client.load_balancers.list(params.zone_id),
                "Failed to list load balancers",
            )
            selected = select_load_balancers(envelope.get("result") or [], params)
        except MCPError:
            raise
        except Exception as exc:
            raise_mcp_error(
                ErrorKind.INTERNAL_ERROR,
                f"Failed to list load balancers: {exc}",
                str(exc),
            )
        return text_content(selected)

    return ToolDefinition(
        name="list_load_balancers",
        description=DESCRIPTION,
        parameters_model=ListLoadBalancersParams,
        handler=handler,
    )

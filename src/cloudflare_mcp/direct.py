"""Tools that call the Cloudflare REST API directly with ``requests``.

These replace the client-backed ``verify_token`` and ``list_load_balancers``
tools when the server runs without a :class:`~cloudflare_mcp.client.CloudflareClient`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

import requests

from cloudflare_mcp.config import CloudflareSettings
from cloudflare_mcp.tools.common import format_remote_errors
from cloudflare_mcp.tools.load_balancers import (
    DESCRIPTION as LOAD_BALANCERS_DESCRIPTION,
)
from cloudflare_mcp.tools.load_balancers import (
    ListLoadBalancersParams,
    select_load_balancers,
)
from cloudflare_mcp.tools.tokens import NoParams, summarize_token
from mcp_adapter.errors import ErrorKind, MCPError, raise_mcp_error
from mcp_adapter.tools import TextContent, ToolDefinition, text_content

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


def make_cloudflare_request(
    settings: CloudflareSettings,
    endpoint: str,
    method: HttpMethod = "GET",
    body: dict[str, Any] | None = None,
) -> tuple[int, dict[str, Any]]:
    """Send one request to the Cloudflare API and decode its JSON body.

    Returns:
        The HTTP status code and the decoded envelope.

    Raises:
        MCPError: ``InternalError`` on transport or decoding failures.
    """
    url = f"{settings.api_base_url.rstrip('/')}{endpoint}"
    headers = {
        "Authorization": f"Bearer {settings.api_token.get_secret_value()}",
        "Content-Type": "application/json",
    }
    logger.info("Making %s request to %s", method, url)
    try:
        response = requests.request(
            method,
            url,
            headers=headers,
            data=json.dumps(body) if body is not None else None,
            timeout=settings.request_timeout,
        )
        data = response.json()
    except (requests.RequestException, ValueError) as exc:
        raise_mcp_error(
            ErrorKind.INTERNAL_ERROR,
            f"Failed to make Cloudflare API request: {exc}",
            str(exc),
        )
    logger.debug("Response status %s from %s", response.status_code, url)
    if not isinstance(data, dict):
        raise_mcp_error(
            ErrorKind.INTERNAL_ERROR,
            f"Unexpected response from {endpoint} (HTTP {response.status_code})",
        )
    return response.status_code, data


def _checked_result(
    settings: CloudflareSettings, endpoint: str, failure: str
) -> Any:
    status, data = make_cloudflare_request(settings, endpoint)
    if status != 200 or not data.get("success"):
        raise_mcp_error(
            ErrorKind.INTERNAL_ERROR,
            f"{failure}: {format_remote_errors(data)}",
            {"status": status, "errors": data.get("errors")},
        )
    return data.get("result")


def verify_token_direct_tool(settings: CloudflareSettings) -> ToolDefinition:
    """Create a verify_token tool backed by a direct REST call."""

    def handler(_: NoParams) -> list[TextContent]:
        try:
            result = _checked_result(
                settings, "/user/tokens/verify", "API token verification failed"
            )
        except MCPError:
            raise
        except Exception as exc:
            raise_mcp_error(
                ErrorKind.INTERNAL_ERROR, f"Failed to verify API token: {exc}", str(exc)
            )
        return text_content(summarize_token(result))

    return ToolDefinition(
        name="verify_token",
        description="Verify the Cloudflare API token and report its status",
        parameters_model=NoParams,
        handler=handler,
    )


def list_load_balancers_direct_tool(settings: CloudflareSettings) -> ToolDefinition:
    """Create a list_load_balancers tool backed by a direct REST call."""

    def handler(params: ListLoadBalancersParams) -> list[TextContent]:
        try:
            result = _checked_result(
                settings,
                f"/zones/{params.zone_id}/load_balancers",
                "Failed to list load balancers",
            )
            selected = select_load_balancers(result or [], params)
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
        description=LOAD_BALANCERS_DESCRIPTION,
        parameters_model=ListLoadBalancersParams,
        handler=handler,
    )

"""Cloudflare SDK wrapper returning raw response envelopes.

Each resource method makes one SDK call and reshapes the outcome into the
Cloudflare envelope (``success``, ``result``, ``errors``). Status errors
reported by the API become ``success: False`` envelopes; transport failures
propagate to the tool handlers.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from cloudflare import APIStatusError, Cloudflare

from cloudflare_mcp.config import DEFAULT_API_BASE_URL, CloudflareSettings

logger = logging.getLogger(__name__)

Envelope = dict[str, Any]


def _to_plain(value: Any) -> Any:
    """Convert SDK pages and models into JSON-friendly values."""
    if value is None:
        return None
    items = getattr(value, "result", None)
    if isinstance(items, list):
        return [_to_plain(item) for item in items]
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", exclude_unset=True)
    return value


def _status_errors(error: APIStatusError) -> list[dict[str, Any]]:
    body = error.body
    if isinstance(body, dict):
        body = body.get("errors")
    errors: list[dict[str, Any]] = []
    if isinstance(body, list):
        errors = [item for item in body if isinstance(item, dict)]
    return errors or [{"code": error.status_code, "message": str(error)}]


def _envelope(call: Callable[[], Any]) -> Envelope:
    try:
        result = call()
    except APIStatusError as error:
        logger.debug("Cloudflare API returned HTTP %s", error.status_code)
        return {"success": False, "result": None, "errors": _status_errors(error)}
    return {"success": True, "result": _to_plain(result), "errors": []}


class _Resource:
    def __init__(self, sdk: Cloudflare) -> None:
        self._sdk = sdk


class ZonesResource(_Resource):
    """Zone listing."""

    def list(self, filters: dict[str, Any] | None = None) -> Envelope:
        """List zones matching the given query filters."""
        return _envelope(lambda: self._sdk.zones.list(**(filters or {})))


class LoadBalancersResource(_Resource):
    """Load balancers of a zone."""

    def list(self, zone_id: str) -> Envelope:
        """List every load balancer configured on a zone."""
        return _envelope(lambda: self._sdk.load_balancers.list(zone_id=zone_id))


class TokensResource(_Resource):
    """User API tokens."""

    def verify(self) -> Envelope:
        """Verify the token the client authenticates with."""
        return _envelope(self._sdk.user.tokens.verify)


class UserResource(_Resource):
    """User sub-resources."""

    def __init__(self, sdk: Cloudflare) -> None:
        super().__init__(sdk)
        self.tokens = TokensResource(sdk)


class CloudflareClient:
    """Bearer-authenticated Cloudflare API client backed by the official SDK."""

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 30.0,
        sdk: Cloudflare | None = None,
    ) -> None:
        self.sdk = sdk or Cloudflare(
            api_token=api_token, base_url=base_url, timeout=timeout, max_retries=0
        )
        self.zones = ZonesResource(self.sdk)
        self.load_balancers = LoadBalancersResource(self.sdk)
        self.user = UserResource(self.sdk)

    @classmethod
    def from_settings(
        cls, settings: CloudflareSettings, sdk: Cloudflare | None = None
    ) -> CloudflareClient:
        """Build a client from loaded settings."""
        return cls(
            settings.api_token.get_secret_value(),
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
            sdk=sdk,
        )

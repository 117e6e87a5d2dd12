"""Shared helpers for Cloudflare tools."""

from __future__ import annotations

from typing import Any

from mcp_adapter.errors import ErrorKind, raise_mcp_error


def format_remote_errors(envelope: dict[str, Any]) -> str:
    """Join the ``code: message`` pairs of a Cloudflare error envelope."""
    errors = envelope.get("errors") or []
    if not errors:
        return "Unknown error"
    return ", ".join(
        f"{error.get('code')}: {error.get('message')}"
        if isinstance(error, dict)
        else str(error)
        for error in errors
    )


def require_success(envelope: dict[str, Any] | None, failure: str) -> dict[str, Any]:
    """Return the envelope or raise ``InternalError`` if it reports failure."""
    if not envelope:
        raise_mcp_error(ErrorKind.INTERNAL_ERROR, "Empty response from Cloudflare API")
    if not envelope.get("success"):
        raise_mcp_error(
            ErrorKind.INTERNAL_ERROR,
            f"{failure}: {format_remote_errors(envelope)}",
            envelope.get("errors"),
        )
    return envelope


def project_fields(item: dict[str, Any], fields: list[str] | None) -> dict[str, Any]:
    """Reduce ``item`` to the requested fields that it actually has."""
    if not fields:
        return item
    return {name: item[name] for name in fields if name in item}

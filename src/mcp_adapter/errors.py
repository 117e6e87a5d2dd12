"""Error kinds shared by the MCP adapters."""

from __future__ import annotations

from enum import Enum
from typing import NoReturn, TypedDict


class ErrorKind(str, Enum):
    """Failure categories reported back to MCP clients."""

    INVALID_PARAMS = "InvalidParams"
    METHOD_NOT_FOUND = "MethodNotFound"
    INTERNAL_ERROR = "InternalError"


class MCPErrorPayload(TypedDict):
    """Structured JSON payload for MCP errors."""

    error: dict[str, object | None]


class MCPError(Exception):
    """Structured MCP error containing a JSON-friendly payload."""

    def __init__(
        self, error_type: ErrorKind | str, message: str, details: object | None = None
    ) -> None:
        """Create a structured MCP error payload."""
        super().__init__(message)
        self.error_type = ErrorKind(error_type)
        self.message = message
        self.error: MCPErrorPayload = {
            "error": {
                "type": self.error_type.value,
                "message": message,
                "details": details,
            }
        }

    def to_dict(self) -> MCPErrorPayload:
        """Return the structured error payload."""
        return self.error

    def __str__(self) -> str:
        return f"{self.error_type.value}: {self.message}"


def raise_mcp_error(
    error_type: ErrorKind | str, message: str, details: object | None = None
) -> NoReturn:
    """Raise an :class:`MCPError` with a structured payload."""
    raise MCPError(error_type=error_type, message=message, details=details)

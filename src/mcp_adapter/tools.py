"""Tool definitions shared by the MCP adapters."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from pydantic import BaseModel, ConfigDict, ValidationError

from mcp_adapter.errors import ErrorKind, raise_mcp_error

TextContent = Dict[str, str]


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Unknown fields are kept on the model (``model_extra``) so handlers see
    them unchanged.
    """

    model_config = ConfigDict(extra="allow")


def text_content(payload: Any) -> List[TextContent]:
    """Wrap a payload as a single text content block.

    Strings are passed through; anything else is rendered as indented JSON.
    """

    text = payload if isinstance(payload, str) else json.dumps(payload, indent=2)
    return [{"type": "text", "text": text}]


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(item) for item in detail["loc"])
        message = detail["msg"].removeprefix("Value error, ")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


@dataclass(frozen=True)
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Callable that executes the tool logic on validated parameters
            and returns text content blocks.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: Callable[[Any], List[TextContent]]

    def validate(self, parameters: object) -> ToolParameters:
        """Validate incoming tool parameters.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            MCPError: ``InvalidParams`` if the parameters are not an object or
                fail schema validation.

        Returns:
            Validated parameter model.
        """

        if not isinstance(parameters, Mapping):
            raise_mcp_error(
                ErrorKind.INVALID_PARAMS, "Invalid arguments: expected an object"
            )
        try:
            return self.parameters_model.model_validate(dict(parameters))
        except ValidationError as error:
            raise_mcp_error(
                ErrorKind.INVALID_PARAMS,
                f"Invalid parameters for tool '{self.name}': "
                f"{_describe_validation_error(error)}",
                error.errors(include_url=False, include_context=False),
            )

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON schema of the tool parameters."""

        schema = self.parameters_model.model_json_schema()
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema(),
        }

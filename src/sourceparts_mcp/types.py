"""
Type definitions for the Source Parts MCP Server.

This module provides:
- ToolDefinition: a tool descriptor (name, description, input schema) bound
  to the request builder that implements it
- ApiRequest / ApiEnvelope: one outbound call and its normalized outcome
- ToolCallResult: the single-text-block result handed back to the transport
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal


# =============================================================================
# Outbound Call Types
# =============================================================================


@dataclass(frozen=True)
class ApiRequest:
    """A single outbound request against the marketplace API."""

    endpoint: str
    method: Literal["GET", "POST"] = "GET"
    params: dict[str, Any] | None = None
    body: Any = None


@dataclass
class ApiEnvelope:
    """Uniform outcome of one outbound call."""

    success: bool
    data: Any = None
    error: str | None = None


# =============================================================================
# Tool Types
# =============================================================================


@dataclass(frozen=True)
class ToolDefinition:
    """
    A tool exposed to the MCP client.

    Attributes:
        name: Tool identifier, unique within its toolset
        description: Natural-language purpose shown to the LLM
        input_schema: JSON schema of the tool arguments
        action: Gerund phrase used in error text ("fetching pricing")
        build_request: Maps the (defaulted) arguments to one ApiRequest
    """

    name: str
    description: str
    input_schema: dict[str, Any]
    action: str
    build_request: Callable[[Mapping[str, Any]], ApiRequest] = field(repr=False)

    @property
    def defaults(self) -> dict[str, Any]:
        """Default values declared by the input schema."""
        properties = self.input_schema.get("properties", {})
        return {
            key: prop["default"]
            for key, prop in properties.items()
            if "default" in prop
        }

    def apply_defaults(self, arguments: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return a copy of arguments with declared defaults filled in."""
        merged = self.defaults
        merged.update(arguments or {})
        return merged


@dataclass
class ToolCallResult:
    """Result of one tool call: always exactly one text block."""

    text: str
    is_error: bool = False

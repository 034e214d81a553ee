"""
Argument helpers shared by the request builders.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from sourceparts_mcp.errors import ToolArgumentError


def require(arguments: Mapping[str, Any], name: str) -> Any:
    """Return a required argument, rejecting missing or empty values."""
    value = arguments.get(name)
    if value is None or value == "":
        raise ToolArgumentError(f"{name} is required")
    return value


def path_id(arguments: Mapping[str, Any], name: str) -> str:
    """Return a required identifier encoded for use as a single path segment."""
    return quote(str(require(arguments, name)), safe="")


def pagination_params(arguments: Mapping[str, Any]) -> dict[str, Any]:
    return {"limit": arguments.get("limit"), "offset": arguments.get("offset")}


def limit_property(description: str, default: int) -> dict[str, Any]:
    return {"type": "number", "description": description, "default": default}


def offset_property() -> dict[str, Any]:
    return {"type": "number", "description": "Pagination offset (default: 0)", "default": 0}

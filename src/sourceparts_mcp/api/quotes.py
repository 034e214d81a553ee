"""
Marketplace quotes API module.

Provides MCP tools for quote management:
- quotes - List quotes
- quotes/{id} - Quote details
- quotes (POST) - Request a new quote
"""

from collections.abc import Mapping
from typing import Any

from sourceparts_mcp.api.common import (
    limit_property,
    offset_property,
    pagination_params,
    path_id,
    require,
)
from sourceparts_mcp.types import ApiRequest, ToolDefinition

QUOTE_STATUSES = ["draft", "pending", "approved", "rejected", "expired", "converted"]


def list_quotes(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        "/quotes",
        params={"status": args.get("status") or None, **pagination_params(args)},
    )


def get_quote(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(f"/quotes/{path_id(args, 'quoteId')}")


def create_quote(args: Mapping[str, Any]) -> ApiRequest:
    body: dict[str, Any] = {"items": require(args, "items")}
    if args.get("notes"):
        body["notes"] = args["notes"]
    return ApiRequest("/quotes", method="POST", body=body)


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list_quotes",
        description="List your quotes, optionally filtered by status.",
        input_schema={
            "type": "object",
            "properties": {
                "status": {
                    "type": "string",
                    "enum": QUOTE_STATUSES,
                    "description": "Optional quote status filter",
                },
                "limit": limit_property("Maximum number of results (default: 20)", 20),
                "offset": offset_property(),
            },
        },
        action="listing quotes",
        build_request=list_quotes,
    ),
    ToolDefinition(
        name="get_quote",
        description="Get a quote with its line items, unit prices, totals and expiry.",
        input_schema={
            "type": "object",
            "properties": {
                "quoteId": {"type": "string", "description": "The quote ID"},
            },
            "required": ["quoteId"],
        },
        action="fetching quote",
        build_request=get_quote,
    ),
    ToolDefinition(
        name="create_quote",
        description="Request a quote for a list of products and quantities.",
        input_schema={
            "type": "object",
            "properties": {
                "items": {
                    "type": "array",
                    "description": "Line items to quote",
                    "items": {
                        "type": "object",
                        "properties": {
                            "sku": {"type": "string", "description": "Product SKU"},
                            "quantity": {"type": "number", "description": "Quantity to quote"},
                        },
                        "required": ["sku", "quantity"],
                    },
                },
                "notes": {
                    "type": "string",
                    "description": "Optional notes for the sales team",
                },
            },
            "required": ["items"],
        },
        action="creating quote",
        build_request=create_quote,
    ),
)

"""
Marketplace orders API module.

Provides MCP tools for order tracking:
- orders - List orders
- orders/{id} - Order details
- orders/{id}/tracking - Shipment tracking
"""

from collections.abc import Mapping
from typing import Any

from sourceparts_mcp.api.common import limit_property, offset_property, pagination_params, path_id
from sourceparts_mcp.types import ApiRequest, ToolDefinition

ORDER_STATUSES = ["pending", "processing", "shipped", "delivered", "cancelled"]


def list_orders(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        "/orders",
        params={"status": args.get("status") or None, **pagination_params(args)},
    )


def get_order(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(f"/orders/{path_id(args, 'orderId')}")


def get_order_tracking(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(f"/orders/{path_id(args, 'orderId')}/tracking")


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list_orders",
        description="List your orders, optionally filtered by status.",
        input_schema={
            "type": "object",
            "properties": {
                "status": {
                    "type": "string",
                    "enum": ORDER_STATUSES,
                    "description": "Optional order status filter",
                },
                "limit": limit_property("Maximum number of results (default: 20)", 20),
                "offset": offset_property(),
            },
        },
        action="listing orders",
        build_request=list_orders,
    ),
    ToolDefinition(
        name="get_order",
        description="Get an order with its line items, totals and current status.",
        input_schema={
            "type": "object",
            "properties": {
                "orderId": {"type": "string", "description": "The order ID"},
            },
            "required": ["orderId"],
        },
        action="fetching order",
        build_request=get_order,
    ),
    ToolDefinition(
        name="get_order_tracking",
        description="Get carrier, tracking number and shipment events for an order.",
        input_schema={
            "type": "object",
            "properties": {
                "orderId": {"type": "string", "description": "The order ID"},
            },
            "required": ["orderId"],
        },
        action="fetching order tracking",
        build_request=get_order_tracking,
    ),
)

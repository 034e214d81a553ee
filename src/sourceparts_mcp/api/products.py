"""
Marketplace products API module.

Provides MCP tools for product discovery through the SDK backend:
- products/search - Keyword search with category/manufacturer/stock filters
- products/{sku} - Product details by SKU
- categories - Category tree
- manufacturers - Manufacturer directory
"""

from collections.abc import Mapping
from typing import Any

from sourceparts_mcp.api.common import (
    limit_property,
    offset_property,
    pagination_params,
    path_id,
)
from sourceparts_mcp.types import ApiRequest, ToolDefinition


def search_products(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        "/products/search",
        params={
            "q": args.get("query"),
            "category": args.get("category") or None,
            "manufacturer": args.get("manufacturer") or None,
            "in_stock": args.get("inStock"),
            **pagination_params(args),
        },
    )


def get_product_details(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(f"/products/{path_id(args, 'sku')}")


def get_categories(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest("/categories", params={"parent_id": args.get("parentId") or None})


def get_manufacturers(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        "/manufacturers",
        params={"q": args.get("query") or None, "limit": args.get("limit")},
    )


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="search_products",
        description=(
            "Search the Source Parts marketplace for electronic components by keyword, "
            "part number or description. Results can be narrowed by category, manufacturer "
            "and stock availability."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query (keywords, part numbers, descriptions)",
                },
                "category": {
                    "type": "string",
                    "description": "Optional category filter (e.g., 'resistors', 'capacitors')",
                },
                "manufacturer": {
                    "type": "string",
                    "description": "Optional manufacturer filter (e.g., 'Texas Instruments')",
                },
                "inStock": {
                    "type": "boolean",
                    "description": "Only return products currently in stock",
                },
                "limit": limit_property("Maximum number of results (default: 20, max: 100)", 20),
                "offset": offset_property(),
            },
            "required": ["query"],
        },
        action="searching products",
        build_request=search_products,
    ),
    ToolDefinition(
        name="get_product_details",
        description=(
            "Get detailed information about a product by its SKU, including specifications, "
            "price breaks, stock and datasheets."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "sku": {"type": "string", "description": "The product SKU"},
            },
            "required": ["sku"],
        },
        action="fetching product details",
        build_request=get_product_details,
    ),
    ToolDefinition(
        name="get_categories",
        description="List product categories. Pass a parent ID to list its subcategories.",
        input_schema={
            "type": "object",
            "properties": {
                "parentId": {
                    "type": "string",
                    "description": "Optional parent category ID",
                },
            },
        },
        action="fetching categories",
        build_request=get_categories,
    ),
    ToolDefinition(
        name="get_manufacturers",
        description="List manufacturers represented in the marketplace, optionally filtered by name.",
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Optional manufacturer name filter",
                },
                "limit": limit_property("Maximum number of results (default: 50)", 50),
            },
        },
        action="fetching manufacturers",
        build_request=get_manufacturers,
    ),
)

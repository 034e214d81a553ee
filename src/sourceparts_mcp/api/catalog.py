"""
Catalog toolset (direct HTTP backend).

Provides MCP tools for product discovery:
- products/search - Keyword search with category filter
- products/{id} - Product details
- products/stock - Multi-supplier stock check
- products/{id}/pricing - Quantity price breaks
- products/search/specs - Parametric search
- products/{id}/datasheets - Datasheet URLs
- products/compare - Side-by-side comparison
- products/categories - Category tree
"""

from collections.abc import Mapping
from typing import Any

from sourceparts_mcp.api.common import limit_property, offset_property, path_id, require
from sourceparts_mcp.types import ApiRequest, ToolDefinition


# =============================================================================
# Request Builders
# =============================================================================


def search_products(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        "/products/search",
        params={
            "q": args.get("query"),
            "category": args.get("category") or None,
            "limit": args.get("limit"),
            "offset": args.get("offset"),
        },
    )


def get_product_details(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(f"/products/{path_id(args, 'productId')}")


def check_stock(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        "/products/stock",
        method="POST",
        body={"productIds": require(args, "productIds")},
    )


def get_pricing(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        f"/products/{path_id(args, 'productId')}/pricing",
        params={"quantity": args.get("quantity")},
    )


def search_by_specs(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        "/products/search/specs",
        method="POST",
        body={
            "category": require(args, "category"),
            "specs": require(args, "specs"),
            "limit": args.get("limit"),
        },
    )


def get_datasheets(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(f"/products/{path_id(args, 'productId')}/datasheets")


def compare_products(args: Mapping[str, Any]) -> ApiRequest:
    # 2-5 ids is advisory only; whatever arrives is forwarded
    return ApiRequest(
        "/products/compare",
        method="POST",
        body={"productIds": require(args, "productIds")},
    )


def get_categories(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        "/products/categories",
        params={"parent": args.get("parentCategory") or None},
    )


# =============================================================================
# Tool Definitions
# =============================================================================


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="search_products",
        description=(
            "Search for electronic components and products in the Source Parts marketplace. "
            "Supports keyword search, category filtering, and pagination."
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
                    "description": "Optional category filter (e.g., 'resistors', 'capacitors', 'ics')",
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
            "Get detailed information about a specific product by its ID, including "
            "specifications, pricing, availability, and datasheets."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "productId": {"type": "string", "description": "The unique product ID"},
            },
            "required": ["productId"],
        },
        action="fetching product details",
        build_request=get_product_details,
    ),
    ToolDefinition(
        name="check_stock",
        description=(
            "Check real-time stock availability for one or more products across multiple suppliers."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "productIds": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Array of product IDs to check",
                },
            },
            "required": ["productIds"],
        },
        action="checking stock",
        build_request=check_stock,
    ),
    ToolDefinition(
        name="get_pricing",
        description="Get detailed pricing information including quantity breaks and volume discounts.",
        input_schema={
            "type": "object",
            "properties": {
                "productId": {"type": "string", "description": "The product ID"},
                "quantity": {"type": "number", "description": "Desired quantity", "default": 1},
            },
            "required": ["productId"],
        },
        action="fetching pricing",
        build_request=get_pricing,
    ),
    ToolDefinition(
        name="search_by_specs",
        description=(
            "Search for components by technical specifications (parametric search). "
            "Useful for finding alternatives or specific components."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": "Component category (required for spec search)",
                },
                "specs": {
                    "type": "object",
                    "description": (
                        'Key-value pairs of specifications (e.g., {"resistance": "10k", "tolerance": "1%"})'
                    ),
                    "additionalProperties": True,
                },
                "limit": limit_property("Maximum results (default: 20)", 20),
            },
            "required": ["category", "specs"],
        },
        action="searching by specs",
        build_request=search_by_specs,
    ),
    ToolDefinition(
        name="get_datasheets",
        description="Get datasheet URLs and documentation for a product.",
        input_schema={
            "type": "object",
            "properties": {
                "productId": {"type": "string", "description": "The product ID"},
            },
            "required": ["productId"],
        },
        action="fetching datasheets",
        build_request=get_datasheets,
    ),
    ToolDefinition(
        name="compare_products",
        description="Compare specifications and pricing across multiple products.",
        input_schema={
            "type": "object",
            "properties": {
                "productIds": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Array of product IDs to compare (2-5 products)",
                    "minItems": 2,
                    "maxItems": 5,
                },
            },
            "required": ["productIds"],
        },
        action="comparing products",
        build_request=compare_products,
    ),
    ToolDefinition(
        name="get_categories",
        description="Get the list of available product categories and their hierarchical structure.",
        input_schema={
            "type": "object",
            "properties": {
                "parentCategory": {
                    "type": "string",
                    "description": "Optional parent category to get subcategories",
                },
            },
        },
        action="fetching categories",
        build_request=get_categories,
    ),
)

"""
Marketplace BOM API module.

Provides MCP tools for bills of materials:
- boms - List BOMs
- boms/{id} - BOM line items
- boms/{id}/pricing - Cost of building a quantity of the assembly
"""

from collections.abc import Mapping
from typing import Any

from sourceparts_mcp.api.common import limit_property, offset_property, pagination_params, path_id
from sourceparts_mcp.types import ApiRequest, ToolDefinition


def list_boms(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest("/boms", params=pagination_params(args))


def get_bom(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(f"/boms/{path_id(args, 'bomId')}")


def get_bom_pricing(args: Mapping[str, Any]) -> ApiRequest:
    return ApiRequest(
        f"/boms/{path_id(args, 'bomId')}/pricing",
        params={"quantity": args.get("quantity")},
    )


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list_boms",
        description="List your saved bills of materials (BOMs).",
        input_schema={
            "type": "object",
            "properties": {
                "limit": limit_property("Maximum number of results (default: 20)", 20),
                "offset": offset_property(),
            },
        },
        action="listing BOMs",
        build_request=list_boms,
    ),
    ToolDefinition(
        name="get_bom",
        description="Get a bill of materials with its line items and quantities.",
        input_schema={
            "type": "object",
            "properties": {
                "bomId": {"type": "string", "description": "The BOM ID"},
            },
            "required": ["bomId"],
        },
        action="fetching BOM",
        build_request=get_bom,
    ),
    ToolDefinition(
        name="get_bom_pricing",
        description=(
            "Price a bill of materials for a number of assemblies, including per-line "
            "price breaks and availability."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "bomId": {"type": "string", "description": "The BOM ID"},
                "quantity": {
                    "type": "number",
                    "description": "Number of assemblies to build (default: 1)",
                    "default": 1,
                },
            },
            "required": ["bomId"],
        },
        action="fetching BOM pricing",
        build_request=get_bom_pricing,
    ),
)

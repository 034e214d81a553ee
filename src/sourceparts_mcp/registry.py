"""
Tool registry.

Each toolset is a fixed, ordered tuple of ToolDefinitions built at import
time. The two toolsets are kept distinct: they name the product identifier
differently (productId vs sku) and clients depend on either schema.
"""

from sourceparts_mcp.api import boms, catalog, orders, products, quotes
from sourceparts_mcp.types import ToolDefinition

CATALOG_TOOLS: tuple[ToolDefinition, ...] = catalog.TOOLS

MARKETPLACE_TOOLS: tuple[ToolDefinition, ...] = (
    *products.TOOLS,
    *quotes.TOOLS,
    *boms.TOOLS,
    *orders.TOOLS,
)

TOOLSETS: dict[str, tuple[ToolDefinition, ...]] = {
    "catalog": CATALOG_TOOLS,
    "marketplace": MARKETPLACE_TOOLS,
}


def get_toolset(name: str) -> tuple[ToolDefinition, ...]:
    """
    Return the tool definitions of a toolset.

    Raises:
        ValueError: if the toolset name is unknown
    """
    try:
        return TOOLSETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown toolset: {name} (expected one of {', '.join(TOOLSETS)})"
        ) from None

"""
Source Parts API modules.

catalog holds the HTTP-backed toolset; products, quotes, boms and orders
make up the SDK-backed marketplace toolset.
"""

from sourceparts_mcp.api import boms, catalog, orders, products, quotes

__all__ = ["catalog", "products", "quotes", "boms", "orders"]

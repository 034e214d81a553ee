"""
Source Parts MCP Server - Main Entry Point

This module builds the FastMCP server for the configured toolset. Every tool
in the registry is registered with its declared JSON schema as-is, and every
call is forwarded to a ToolServer bound to the matching backend:

- catalog: HttpApiClient (direct HTTP, X-API-Key)
- marketplace: SdkBackend over SourcePartsClient (API key and bearer token)

Logging goes to stderr; stdout carries the MCP stdio transport.
"""

import argparse
import asyncio
import copy
import logging
import sys
from collections.abc import Callable
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from sourceparts_mcp.client import ApiBackend, HttpApiClient
from sourceparts_mcp.config import TOOLSETS, Settings, load_env_files, load_settings
from sourceparts_mcp.dispatch import ToolServer
from sourceparts_mcp.registry import get_toolset
from sourceparts_mcp.sdk import SdkBackend, SourcePartsClient
from sourceparts_mcp.types import ToolCallResult

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

INSTRUCTIONS = """
Source Parts MCP Server provides tools for the Source Parts electronic-component
marketplace.

## Tools

- **Catalog** toolset: search products, product details, stock checks, pricing
  breaks, parametric search by specs, datasheets, product comparison, categories
- **Marketplace** toolset: product search and details by SKU, categories,
  manufacturers, quotes, BOMs (Bills of Materials) with pricing, orders and
  shipment tracking

Every tool returns the marketplace response as pretty-printed JSON, or a line
starting with "Error" describing what went wrong.
"""


# =============================================================================
# FastMCP Binding
# =============================================================================


class DispatchedTool(Tool):
    """A FastMCP tool whose schema comes from the registry and whose calls go to a ToolServer."""

    dispatch: Callable[[str, dict[str, Any]], ToolCallResult] = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        # requests is blocking; run it off the event loop
        result = await asyncio.to_thread(self.dispatch, self.name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return ToolResult(content=[TextContent(type="text", text=result.text)])


def create_backend(settings: Settings) -> ApiBackend:
    """Return the backend the configured toolset talks through."""
    if settings.toolset == "marketplace":
        return SdkBackend(SourcePartsClient.from_settings(settings))
    return HttpApiClient(settings)


def create_tool_server(settings: Settings, backend: ApiBackend | None = None) -> ToolServer:
    return ToolServer(get_toolset(settings.toolset), backend or create_backend(settings))


def create_server(settings: Settings, backend: ApiBackend | None = None) -> FastMCP:
    """
    Build the FastMCP server for a toolset.

    Args:
        settings: Resolved configuration
        backend: Optional backend override (defaults to the toolset's own)
    """
    tool_server = create_tool_server(settings, backend)

    mcp = FastMCP(
        name="Source Parts MCP Server",
        instructions=INSTRUCTIONS,
        mask_error_details=settings.mask_errors,
        on_duplicate_tools="error",
    )
    for tool in tool_server.list_tools():
        mcp.add_tool(
            DispatchedTool(
                name=tool.name,
                description=tool.description,
                parameters=copy.deepcopy(tool.input_schema),
                dispatch=tool_server.call_tool,
            )
        )

    logger.debug(
        "Registered %d %s tools against %s",
        len(tool_server.tool_names),
        settings.toolset,
        settings.base_url,
    )
    return mcp


# =============================================================================
# Main Entry Point
# =============================================================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Source Parts MCP Server on stdio")
    parser.add_argument(
        "--toolset",
        choices=TOOLSETS,
        default=None,
        help="Tool surface to expose (overrides SOURCE_PARTS_TOOLSET)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the Source Parts MCP Server."""
    args = parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING, format=LOG_FORMAT)

    try:
        load_env_files()
        settings = load_settings(toolset=args.toolset)
        logging.getLogger().setLevel(settings.log_level)

        mcp = create_server(settings)
        if not settings.api_key and not settings.access_token:
            logger.warning("No Source Parts credentials configured; requests are unauthenticated")
        logger.info("Source Parts MCP Server (%s) running on stdio", settings.toolset)
        mcp.run()
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()

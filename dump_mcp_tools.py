#!/usr/bin/env python3
"""Dump MCP tools/list output in a readable format.

This script lists the tools registered with the Source Parts MCP server for
one toolset and formats them as text, JSON or Markdown.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from sourceparts_mcp.config import TOOLSETS, Settings
from sourceparts_mcp.server import create_server

# Default output directory
DEFAULT_OUTPUT_DIR = Path(__file__).parent / "test-output"


def dump_tool(tool: Any, index: int) -> str:
    """Format a single tool for display."""
    lines = ["=" * 80, f"TOOL #{index + 1}: {tool.name}", "=" * 80, ""]
    lines.append(f"name: {tool.name}")
    lines.append("")
    lines.append("description: |")
    lines.extend(f"    {line}" for line in (tool.description or "").split("\n"))
    lines.append("")
    lines.append("parameters (inputSchema): |")
    lines.extend(f"    {line}" for line in json.dumps(tool.parameters, indent=4).split("\n"))
    lines.append("")
    return "\n".join(lines)


def dump_tool_markdown(tool: Any, index: int) -> str:
    """Format a single tool as markdown, with a parameter table."""
    lines = [f"## {index + 1}. `{tool.name}`", "", tool.description or "", ""]

    properties = tool.parameters.get("properties", {})
    required = set(tool.parameters.get("required", []))
    if properties:
        lines.append("| Parameter | Type | Required | Default | Description |")
        lines.append("|---|---|---|---|---|")
        for key, prop in properties.items():
            default = f"`{json.dumps(prop['default'])}`" if "default" in prop else ""
            lines.append(
                f"| `{key}` | {prop.get('type', '')} | {'yes' if key in required else 'no'} "
                f"| {default} | {prop.get('description', '')} |"
            )
    else:
        lines.append("_No parameters._")
    lines.append("")

    lines.append("```json")
    lines.append(json.dumps(tool.parameters, indent=2))
    lines.append("```")
    lines.append("")
    lines.append("---")
    lines.append("")
    return "\n".join(lines)


def render(tools: list[Any], toolset: str, fmt: str) -> str:
    """Render tools as 'text', 'json' or 'markdown'."""
    if fmt == "json":
        return json.dumps(
            [
                {"name": t.name, "description": t.description, "inputSchema": t.parameters}
                for t in tools
            ],
            indent=2,
        )
    if fmt == "markdown":
        lines = [
            f"# Source Parts MCP Tools Reference ({toolset})",
            "",
            f"This document describes the {len(tools)} tools available in the {toolset} toolset.",
            "",
            "## Table of Contents",
            "",
        ]
        for i, tool in enumerate(tools):
            lines.append(f"{i + 1}. [`{tool.name}`](#{i + 1}-{tool.name.replace('_', '-')})")
        lines.extend(["", "---", ""])
        lines.extend(dump_tool_markdown(tool, i) for i, tool in enumerate(tools))
        return "\n".join(lines)

    lines = ["# MCP Tools List", f"# Toolset: {toolset}", f"# Total tools: {len(tools)}", ""]
    lines.extend(dump_tool(tool, i) for i, tool in enumerate(tools))
    return "\n".join(lines)


async def get_tools(toolset: str) -> dict[str, Any]:
    """Fetch tools from the MCP server."""
    mcp = create_server(Settings(toolset=toolset))
    return await mcp.get_tools()


def main() -> None:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Dump MCP tools/list output in a readable format"
    )
    parser.add_argument("--toolset", choices=TOOLSETS, default="catalog")
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: test-output/mcp_tools_<toolset>.txt, .json or .md)",
        default=None,
    )
    parser.add_argument("--stdout", action="store_true", help="Write to stdout instead of file")
    parser.add_argument("-t", "--tool", help="Filter to a specific tool by name", default=None)
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--json", action="store_true", help="Output as JSON")
    group.add_argument("--markdown", "--md", action="store_true", help="Output as Markdown")

    args = parser.parse_args()

    tools_dict = asyncio.run(get_tools(args.toolset))
    tools = list(tools_dict.values())

    if args.tool:
        if args.tool not in tools_dict:
            print(f"Error: Tool '{args.tool}' not found", file=sys.stderr)
            print(f"Available tools: {', '.join(sorted(tools_dict))}", file=sys.stderr)
            sys.exit(1)
        tools = [tools_dict[args.tool]]

    fmt = "json" if args.json else "markdown" if args.markdown else "text"
    output = render(tools, args.toolset, fmt)

    if args.stdout:
        print(output)
        return

    ext = {"json": ".json", "markdown": ".md", "text": ".txt"}[fmt]
    output_path = (
        Path(args.output) if args.output
        else DEFAULT_OUTPUT_DIR / f"mcp_tools_{args.toolset}{ext}"
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output)
    print(f"Output written to {output_path}")


if __name__ == "__main__":
    main()

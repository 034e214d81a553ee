"""
Source Parts MCP Server

A Model Context Protocol (MCP) server for the Source Parts marketplace API.
Run with --toolset catalog or --toolset marketplace.
"""

from sourceparts_mcp.server import main

if __name__ == "__main__":
    main()

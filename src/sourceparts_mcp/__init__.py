"""
Source Parts MCP Server

A Model Context Protocol (MCP) server for the Source Parts marketplace API.
Lets AI assistants search electronic components, request quotes, price
bills of materials and track orders.
"""

__version__ = "0.1.0"

"""
Tool dispatch.

invoke_and_envelope is the error boundary of every tool handler: it applies
schema defaults, builds the request, calls the backend and renders either
pretty-printed JSON or an "Error <action>: <message>" string.

ToolServer binds a toolset to a backend and routes calls by tool name,
wrapping anything that still escapes a handler into an error result.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sourceparts_mcp.client import ApiBackend
from sourceparts_mcp.errors import ToolArgumentError
from sourceparts_mcp.types import ApiEnvelope, ToolCallResult, ToolDefinition

logger = logging.getLogger(__name__)


def format_envelope(tool: ToolDefinition, envelope: ApiEnvelope) -> str:
    if not envelope.success:
        return f"Error {tool.action}: {envelope.error}"
    return json.dumps(envelope.data, indent=2, ensure_ascii=False)


def invoke_and_envelope(
    tool: ToolDefinition,
    backend: ApiBackend,
    arguments: Mapping[str, Any] | None,
) -> str:
    """Run one tool call against the backend and render its text result."""
    try:
        request = tool.build_request(tool.apply_defaults(arguments))
    except ToolArgumentError as e:
        return format_envelope(tool, ApiEnvelope(success=False, error=str(e)))

    envelope = backend.request(
        request.endpoint,
        method=request.method,
        body=request.body,
        params=request.params,
    )
    return format_envelope(tool, envelope)


class ToolServer:
    """Routes tool calls to the handlers of one toolset."""

    def __init__(self, tools: Iterable[ToolDefinition], backend: ApiBackend):
        self._tools = tuple(tools)
        self._backend = backend
        self._handlers: dict[str, ToolDefinition] = {}
        for tool in self._tools:
            if tool.name in self._handlers:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._handlers[tool.name] = tool

    @property
    def tool_names(self) -> list[str]:
        """Names in the dispatch table."""
        return list(self._handlers)

    def list_tools(self) -> tuple[ToolDefinition, ...]:
        return self._tools

    def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolCallResult:
        """
        Call a tool by exact name.

        Returns:
            ToolCallResult holding a single text block. is_error is set for an
            unknown tool or an exception escaping the handler; upstream and
            argument failures are reported as ordinary text.
        """
        tool = self._handlers.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: %s", name)
            return ToolCallResult(text=f"Unknown tool: {name}", is_error=True)

        logger.debug("Calling tool %s with %s", name, arguments)
        try:
            text = invoke_and_envelope(tool, self._backend, arguments)
        except Exception as e:
            logger.exception("Tool %s failed", name)
            return ToolCallResult(text=f"Error: {e}", is_error=True)
        return ToolCallResult(text=text)

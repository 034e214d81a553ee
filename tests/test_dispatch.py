"""
Unit tests for the tool registry and dispatch server.

Tests cover:
- Registry/dispatch table agreement for both toolsets
- Unknown tool handling
- Handler error boundary and the dispatcher's second boundary
- Schema defaults
"""

import json

import pytest

from sourceparts_mcp.api.common import path_id, require
from sourceparts_mcp.dispatch import ToolServer, invoke_and_envelope
from sourceparts_mcp.errors import ToolArgumentError
from sourceparts_mcp.registry import (
    CATALOG_TOOLS,
    MARKETPLACE_TOOLS,
    TOOLSETS,
    get_toolset,
)
from sourceparts_mcp.types import ApiEnvelope, ApiRequest, ToolCallResult, ToolDefinition

CATALOG_NAMES = [
    "search_products",
    "get_product_details",
    "check_stock",
    "get_pricing",
    "search_by_specs",
    "get_datasheets",
    "compare_products",
    "get_categories",
]

MARKETPLACE_NAMES = [
    "search_products",
    "get_product_details",
    "get_categories",
    "get_manufacturers",
    "list_quotes",
    "get_quote",
    "create_quote",
    "list_boms",
    "get_bom",
    "get_bom_pricing",
    "list_orders",
    "get_order",
    "get_order_tracking",
]


class RecordingBackend:
    """Backend stub returning a fixed envelope and recording requests."""

    def __init__(self, envelope: ApiEnvelope | None = None):
        self.envelope = envelope or ApiEnvelope(success=True, data={"ok": True})
        self.requests: list[dict] = []

    def request(self, endpoint, method="GET", body=None, params=None):
        self.requests.append(
            {"endpoint": endpoint, "method": method, "body": body, "params": params}
        )
        return self.envelope


class ExplodingBackend:
    """Backend stub that violates the never-raise contract."""

    def request(self, endpoint, method="GET", body=None, params=None):
        raise RuntimeError("backend exploded")


# =============================================================================
# Registry
# =============================================================================


class TestRegistry:
    """Tests for the tool registry."""

    def test_catalog_names_in_order(self):
        """The catalog toolset exposes its eight tools in declaration order."""
        assert [t.name for t in CATALOG_TOOLS] == CATALOG_NAMES

    def test_marketplace_names_in_order(self):
        """The marketplace toolset exposes its thirteen tools in declaration order."""
        assert [t.name for t in MARKETPLACE_TOOLS] == MARKETPLACE_NAMES

    @pytest.mark.parametrize("toolset", list(TOOLSETS))
    def test_names_unique(self, toolset):
        """Tool names are unique within a toolset."""
        names = [t.name for t in get_toolset(toolset)]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("toolset", list(TOOLSETS))
    def test_schemas_well_formed(self, toolset):
        """Every schema is an object whose required fields are declared properties."""
        for tool in get_toolset(toolset):
            schema = tool.input_schema
            assert schema["type"] == "object"
            assert set(schema.get("required", [])) <= set(schema["properties"])
            assert tool.description
            assert tool.action

    def test_product_identifier_differs_between_toolsets(self):
        """catalog keys products by productId, marketplace by sku."""
        catalog = {t.name: t for t in CATALOG_TOOLS}["get_product_details"]
        marketplace = {t.name: t for t in MARKETPLACE_TOOLS}["get_product_details"]

        assert catalog.input_schema["required"] == ["productId"]
        assert marketplace.input_schema["required"] == ["sku"]

    def test_compare_products_bounds_declared(self):
        """The 2-5 bound is declared in the schema for clients."""
        compare = {t.name: t for t in CATALOG_TOOLS}["compare_products"]
        product_ids = compare.input_schema["properties"]["productIds"]

        assert product_ids["minItems"] == 2
        assert product_ids["maxItems"] == 5

    def test_unknown_toolset(self):
        """get_toolset rejects unknown names."""
        with pytest.raises(ValueError, match="Unknown toolset: inventory"):
            get_toolset("inventory")


# =============================================================================
# Tool Definitions
# =============================================================================


class TestToolDefinition:
    """Tests for ToolDefinition helpers."""

    def test_defaults_from_schema(self):
        """Declared defaults are collected from the schema."""
        search = {t.name: t for t in CATALOG_TOOLS}["search_products"]

        assert search.defaults == {"limit": 20, "offset": 0}

    def test_apply_defaults_keeps_given_values(self):
        """Caller values win over defaults, and the input is not mutated."""
        search = {t.name: t for t in CATALOG_TOOLS}["search_products"]
        arguments = {"query": "x", "limit": 5}

        merged = search.apply_defaults(arguments)

        assert merged == {"query": "x", "limit": 5, "offset": 0}
        assert arguments == {"query": "x", "limit": 5}

    def test_apply_defaults_none(self):
        """None arguments are treated as empty."""
        pricing = {t.name: t for t in CATALOG_TOOLS}["get_pricing"]

        assert pricing.apply_defaults(None) == {"quantity": 1}


class TestArgumentHelpers:
    """Tests for require and path_id."""

    @pytest.mark.parametrize("arguments", [{}, {"id": None}, {"id": ""}])
    def test_require_rejects_missing(self, arguments):
        with pytest.raises(ToolArgumentError, match="id is required"):
            require(arguments, "id")

    def test_require_accepts_falsy_non_empty(self):
        """Zero and empty collections are forwarded, not rejected."""
        assert require({"n": 0}, "n") == 0
        assert require({"ids": []}, "ids") == []

    def test_path_id_encodes(self):
        assert path_id({"id": "a/b?c"}, "id") == "a%2Fb%3Fc"


# =============================================================================
# Handler Boundary
# =============================================================================


class TestInvokeAndEnvelope:
    """Tests for the shared handler wrapper."""

    def test_success_pretty_prints(self):
        """Success data is rendered with two-space indentation."""
        backend = RecordingBackend(ApiEnvelope(success=True, data={"a": [1, 2]}))
        tool = {t.name: t for t in CATALOG_TOOLS}["get_datasheets"]

        text = invoke_and_envelope(tool, backend, {"productId": "p1"})

        assert text == json.dumps({"a": [1, 2]}, indent=2)
        assert backend.requests == [
            {"endpoint": "/products/p1/datasheets", "method": "GET", "body": None, "params": None}
        ]

    def test_failure_formats_action(self):
        """Failure envelopes become 'Error <action>: <message>'."""
        backend = RecordingBackend(ApiEnvelope(success=False, error="boom"))
        tool = {t.name: t for t in CATALOG_TOOLS}["check_stock"]

        text = invoke_and_envelope(tool, backend, {"productIds": ["p"]})

        assert text == "Error checking stock: boom"

    def test_argument_error_skips_backend(self):
        """Argument errors are reported without calling the backend."""
        backend = RecordingBackend()
        tool = {t.name: t for t in MARKETPLACE_TOOLS}["get_quote"]

        text = invoke_and_envelope(tool, backend, {})

        assert text == "Error fetching quote: quoteId is required"
        assert backend.requests == []

    def test_non_ascii_preserved(self):
        """Non-ASCII text is emitted as-is."""
        backend = RecordingBackend(ApiEnvelope(success=True, data={"name": "10kΩ"}))
        tool = {t.name: t for t in CATALOG_TOOLS}["get_product_details"]

        assert "10kΩ" in invoke_and_envelope(tool, backend, {"productId": "p"})


# =============================================================================
# Dispatch Server
# =============================================================================


class TestToolServer:
    """Tests for ToolServer."""

    @pytest.mark.parametrize("toolset", list(TOOLSETS))
    def test_list_matches_dispatch_table(self, toolset):
        """Every listed tool has a handler and every handler is listed."""
        server = ToolServer(get_toolset(toolset), RecordingBackend())

        assert [t.name for t in server.list_tools()] == server.tool_names

    def test_list_tools_is_registry(self):
        """list_tools returns the registry verbatim."""
        server = ToolServer(CATALOG_TOOLS, RecordingBackend())

        assert server.list_tools() == CATALOG_TOOLS

    @pytest.mark.parametrize("name", ["delete_everything", "", "Search_Products"])
    def test_unknown_tool(self, name):
        """Unknown names give an error result naming the tool."""
        backend = RecordingBackend()
        server = ToolServer(CATALOG_TOOLS, backend)

        result = server.call_tool(name, {})

        assert result.is_error is True
        assert result.text == f"Unknown tool: {name}"
        assert backend.requests == []

    def test_tool_from_other_toolset_is_unknown(self):
        """Tools are only dispatched within their own toolset."""
        server = ToolServer(CATALOG_TOOLS, RecordingBackend())

        result = server.call_tool("get_order_tracking", {"orderId": "o"})

        assert result.is_error is True
        assert "get_order_tracking" in result.text

    def test_success_result(self):
        """Successful calls return one text block without the error flag."""
        server = ToolServer(CATALOG_TOOLS, RecordingBackend())

        result = server.call_tool("get_categories", None)

        assert result == ToolCallResult(text=json.dumps({"ok": True}, indent=2))

    def test_upstream_failure_is_not_flagged(self):
        """Upstream errors are ordinary text, not protocol errors."""
        server = ToolServer(
            CATALOG_TOOLS, RecordingBackend(ApiEnvelope(success=False, error="API request failed: 500 "))
        )

        result = server.call_tool("get_categories", {})

        assert result.is_error is False
        assert result.text.startswith("Error fetching categories:")

    def test_escaping_exception_is_caught(self):
        """An exception escaping a handler becomes an error result."""
        server = ToolServer(CATALOG_TOOLS, ExplodingBackend())

        result = server.call_tool("get_categories", {})

        assert result.is_error is True
        assert result.text == "Error: backend exploded"

    def test_malformed_arguments_are_caught(self):
        """Non-mapping arguments are caught by the dispatcher boundary."""
        server = ToolServer(CATALOG_TOOLS, RecordingBackend())

        result = server.call_tool("get_categories", ["not", "a", "mapping"])  # type: ignore[arg-type]

        assert result.is_error is True
        assert result.text.startswith("Error:")

    def test_duplicate_names_rejected(self):
        """A toolset with duplicate names cannot be served."""
        tool = ToolDefinition(
            name="dup",
            description="d",
            input_schema={"type": "object", "properties": {}},
            action="doing",
            build_request=lambda args: ApiRequest("/x"),
        )

        with pytest.raises(ValueError, match="Duplicate tool name: dup"):
            ToolServer([tool, tool], RecordingBackend())

    def test_calls_are_independent(self):
        """Repeated identical calls produce identical text."""
        server = ToolServer(MARKETPLACE_TOOLS, RecordingBackend())

        first = server.call_tool("list_boms", {})
        second = server.call_tool("list_boms", {})

        assert first == second

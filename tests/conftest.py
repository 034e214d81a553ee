"""
Pytest configuration and fixtures for Source Parts MCP Server tests.
"""

import pytest

from sourceparts_mcp.client import HttpApiClient
from sourceparts_mcp.config import Settings
from sourceparts_mcp.dispatch import ToolServer
from sourceparts_mcp.registry import CATALOG_TOOLS, MARKETPLACE_TOOLS
from sourceparts_mcp.sdk import SdkBackend, SourcePartsClient
from tests.fake_sourceparts import FakeSourcePartsAPI


@pytest.fixture
def settings():
    """Settings with credentials against the default base URL."""
    return Settings(api_key="test-key", access_token="test-token")


@pytest.fixture
def fake_api():
    """
    Provide a fake Source Parts API context manager.

    Usage:
        def test_something(fake_api):
            with fake_api:
                # API calls will be mocked
                ...
    """
    return FakeSourcePartsAPI()


@pytest.fixture
def fake_api_active(fake_api):
    """
    Provide an already-activated fake Source Parts API.

    The mock is automatically started and stopped.
    """
    with fake_api:
        yield fake_api


@pytest.fixture
def catalog_server(settings):
    """ToolServer for the HTTP-backed catalog toolset."""
    return ToolServer(CATALOG_TOOLS, HttpApiClient(settings))


@pytest.fixture
def marketplace_server(settings):
    """ToolServer for the SDK-backed marketplace toolset."""
    client = SourcePartsClient.from_settings(settings)
    return ToolServer(MARKETPLACE_TOOLS, SdkBackend(client))

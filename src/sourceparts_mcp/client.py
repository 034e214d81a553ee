"""
Source Parts API client.

This module provides:
- ApiBackend: the interface every backend offers to the tool handlers
- HttpApiClient: direct HTTP backend that never raises, reporting every
  outcome as an ApiEnvelope
"""

import logging
from typing import Any, Protocol

import requests

from sourceparts_mcp.config import Settings
from sourceparts_mcp.types import ApiEnvelope

logger = logging.getLogger(__name__)


class ApiBackend(Protocol):
    """Anything able to perform one marketplace request."""

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> ApiEnvelope: ...


def build_url(base_url: str, endpoint: str) -> str:
    """Join the configured base URL and an endpoint path."""
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Drop unset query parameters and render booleans the way URLs expect."""
    if not params:
        return None
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned or None


# =============================================================================
# HTTP Backend
# =============================================================================


class HttpApiClient:
    """HTTP client for the Source Parts API."""

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self._base_url = settings.base_url
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        if settings.api_key:
            self._session.headers["X-API-Key"] = settings.api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> ApiEnvelope:
        """
        Make a request to the Source Parts API.

        Returns:
            ApiEnvelope with the decoded JSON body on a 2xx response,
            otherwise a failure envelope describing the status or exception.
        """
        url = build_url(self._base_url, endpoint)
        logger.debug("%s %s params=%s", method, url, params)
        try:
            response = self._session.request(
                method,
                url,
                params=clean_params(params),
                json=body,
            )
            if not response.ok:
                logger.warning(
                    "%s %s returned %s %s", method, url, response.status_code, response.reason
                )
                return ApiEnvelope(
                    success=False,
                    error=f"API request failed: {response.status_code} {response.reason}",
                )
            return ApiEnvelope(success=True, data=response.json())
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            return ApiEnvelope(success=False, error=str(e) or type(e).__name__)

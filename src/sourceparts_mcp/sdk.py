"""
Source Parts SDK client.

SourcePartsClient is a thin typed client for the marketplace API. Unlike
HttpApiClient it raises on failure (SourcePartsError subclasses), the way a
vendor SDK does. SdkBackend adapts it to the ApiBackend interface by turning
those exceptions into failure envelopes.
"""

import logging
from typing import Any

import requests

from sourceparts_mcp.client import build_url, clean_params
from sourceparts_mcp.config import Settings
from sourceparts_mcp.errors import (
    SourcePartsAPIError,
    SourcePartsConnectionError,
    SourcePartsError,
)
from sourceparts_mcp.types import ApiEnvelope

logger = logging.getLogger(__name__)


def _error_detail(response: requests.Response) -> str | None:
    """Pull a human-readable message out of an error response body."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        for key in ("error", "message", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return None


class SourcePartsClient:
    """
    SDK client for the Source Parts marketplace.

    Authentication uses the API key (X-API-Key) and, when configured,
    an OAuth access token sent as a bearer token.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        access_token: str = "",
        session: requests.Session | None = None,
    ):
        self._base_url = base_url
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        if api_key:
            self._session.headers["X-API-Key"] = api_key
        if access_token:
            self._session.headers["Authorization"] = f"Bearer {access_token}"

    @classmethod
    def from_settings(cls, settings: Settings) -> "SourcePartsClient":
        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key,
            access_token=settings.access_token,
        )

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Perform a request and return the decoded JSON body.

        Raises:
            SourcePartsAPIError: on a non-2xx response
            SourcePartsConnectionError: on network failure or an undecodable body
        """
        url = build_url(self._base_url, path)
        logger.debug("SDK %s %s params=%s", method, url, params)
        try:
            response = self._session.request(
                method,
                url,
                params=clean_params(params),
                json=json,
            )
        except requests.RequestException as e:
            raise SourcePartsConnectionError(str(e) or type(e).__name__) from e

        if not response.ok:
            raise SourcePartsAPIError(
                response.status_code, response.reason or "", _error_detail(response)
            )

        try:
            return response.json()
        except ValueError as e:
            raise SourcePartsConnectionError(f"Invalid JSON in response: {e}") from e

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)


class SdkBackend:
    """ApiBackend over a SourcePartsClient."""

    def __init__(self, client: SourcePartsClient):
        self._client = client

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> ApiEnvelope:
        try:
            data = self._client.request(method, endpoint, params=params, json=body)
        except SourcePartsError as e:
            logger.warning("SDK %s %s failed: %s", method, endpoint, e)
            return ApiEnvelope(success=False, error=str(e))
        return ApiEnvelope(success=True, data=data)

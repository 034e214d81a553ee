"""
Exception types for the Source Parts MCP Server.
"""


class ConfigurationError(ValueError):
    """Raised at startup when the environment holds an unusable setting."""


class ToolArgumentError(ValueError):
    """Raised by a request builder when a tool call lacks a required argument."""


class SourcePartsError(Exception):
    """Base class for errors raised by the SourcePartsClient SDK."""


class SourcePartsAPIError(SourcePartsError):
    """The marketplace API answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, detail: str | None = None):
        self.status_code = status_code
        self.reason = reason
        self.detail = detail
        message = f"{status_code} {reason}".rstrip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class SourcePartsConnectionError(SourcePartsError):
    """The request never produced a usable response (network or decode failure)."""

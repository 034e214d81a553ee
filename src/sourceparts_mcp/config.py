"""
Configuration for the Source Parts MCP Server.

Settings are resolved once at startup and passed explicitly to the API
clients and the server. Missing credentials are allowed: requests are then
sent unauthenticated.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from sourceparts_mcp.errors import ConfigurationError

DEFAULT_BASE_URL = "https://source.parts/api"
DEFAULT_TOOLSET = "catalog"
TOOLSETS = ("catalog", "marketplace")

_TRUE_VALUES = ("true", "1", "yes")

# Searched in order; the first file found wins
ENV_PATHS = [
    Path.cwd() / ".env",
    Path(__file__).parent.parent.parent / ".env",  # workspace/.env
    Path.home() / ".sourceparts" / ".env",
]


@dataclass(frozen=True)
class Settings:
    """Immutable process-wide configuration."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    access_token: str = ""
    toolset: str = DEFAULT_TOOLSET
    mask_errors: bool = False
    log_level: str = "WARNING"


def load_env_files(paths: list[Path] | None = None) -> Path | None:
    """
    Load variables from the first .env file found.

    Existing environment variables are never overridden.

    Returns:
        The path that was loaded, or None when the default
        load_dotenv() discovery was used instead.
    """
    for env_path in paths if paths is not None else ENV_PATHS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    load_dotenv()
    return None


def load_settings(
    environ: Mapping[str, str] | None = None,
    toolset: str | None = None,
) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)
        toolset: Toolset chosen on the command line; takes precedence
            over SOURCE_PARTS_TOOLSET, which is then not read at all

    Raises:
        ConfigurationError: for an unknown toolset
    """
    env = os.environ if environ is None else environ

    if toolset is None:
        toolset = env.get("SOURCE_PARTS_TOOLSET", DEFAULT_TOOLSET)
    toolset = toolset.strip().lower()
    if toolset not in TOOLSETS:
        raise ConfigurationError(
            f"SOURCE_PARTS_TOOLSET must be one of {', '.join(TOOLSETS)}, got '{toolset}'"
        )

    return Settings(
        base_url=env.get("SOURCE_PARTS_API_URL") or DEFAULT_BASE_URL,
        api_key=env.get("SOURCE_PARTS_API_KEY", ""),
        access_token=env.get("SOURCE_PARTS_ACCESS_TOKEN", ""),
        toolset=toolset,
        mask_errors=env.get("SOURCE_PARTS_MCP_MASK_ERRORS", "false").lower() in _TRUE_VALUES,
        log_level=env.get("SOURCE_PARTS_LOG_LEVEL", "WARNING").upper(),
    )

"""
Configuration for the Raindrop MCP server.

All settings come from the environment (optionally seeded from a ``.env``
file by the CLI). The result is a frozen ``Config`` built once at startup and
handed to the API client.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

RAINDROP_API_URL = "https://api.raindrop.io/rest/v1"

TOKEN_ENV_VAR = "RAINDROP_ACCESS_TOKEN"
TIMEOUT_ENV_VAR = "RAINDROP_TIMEOUT"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


class ConfigError(RuntimeError):
    """Raised when the environment does not describe a usable configuration."""


@dataclass(frozen=True)
class Config:
    """Immutable runtime settings."""

    access_token: str = field(repr=False)
    base_url: str = RAINDROP_API_URL
    timeout: Optional[float] = None
    log_level: str = "INFO"


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build a Config from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Raises:
        ConfigError: If the access token is missing or a value is malformed
    """
    if environ is None:
        environ = os.environ

    token = (environ.get(TOKEN_ENV_VAR) or "").strip()
    if not token:
        raise ConfigError(f"{TOKEN_ENV_VAR} environment variable not set")

    timeout = None
    raw_timeout = environ.get(TIMEOUT_ENV_VAR)
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(
                f"Invalid {TIMEOUT_ENV_VAR} value: {raw_timeout!r} (expected seconds)"
            )
        if timeout <= 0:
            raise ConfigError(f"{TIMEOUT_ENV_VAR} must be positive, got {raw_timeout}")

    log_level = (environ.get(LOG_LEVEL_ENV_VAR) or "INFO").upper()

    return Config(access_token=token, timeout=timeout, log_level=log_level)

"""
Raindrop.io API client helpers.
"""

import logging
from typing import Optional

from raindrop_mcp.clients.raindrop import RaindropClient
from raindrop_mcp.config import Config, load_config

logger = logging.getLogger(__name__)

# --- Singleton client ---
_client_singleton: Optional[RaindropClient] = None


def configure(config: Config) -> RaindropClient:
    """Create the process-wide client from a resolved configuration."""
    global _client_singleton

    if _client_singleton is not None:
        _client_singleton.close()
    _client_singleton = RaindropClient(config)
    logger.debug("Raindrop client configured for %s", config.base_url)
    return _client_singleton


def get_client() -> RaindropClient:
    """
    Get the Raindrop.io API client.

    The CLI configures the client at startup. When the server is loaded some
    other way (e.g. ``mcp dev``), the client is built from the environment on
    first use.

    Raises:
        ConfigError: If no client was configured and the environment lacks a token
    """
    if _client_singleton is not None:
        return _client_singleton
    return configure(load_config())

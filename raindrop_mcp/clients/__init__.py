"""
Raindrop.io transport.

Provides the REST client implementation.
"""

from raindrop_mcp.clients.raindrop import (  # noqa: F401
    RaindropClient,
    RaindropError,
    RemoteApiError,
)

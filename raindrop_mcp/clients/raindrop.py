"""
Raindrop.io REST client.

A thin gateway over ``https://api.raindrop.io/rest/v1``: every request carries
the bearer token and a JSON content type, and any non-2xx response raises
``RemoteApiError``. Requests are never retried.
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from raindrop_mcp.config import Config

logger = logging.getLogger(__name__)


class RaindropError(RuntimeError):
    """Base error for failures talking to Raindrop.io."""


class RemoteApiError(RaindropError):
    """The API answered with a non-success status."""

    def __init__(self, status: int, reason: str = ""):
        self.status = status
        self.reason = reason
        super().__init__(f"API Error: {status} {reason}".rstrip())


class RaindropClient:
    """Client for the Raindrop.io REST API."""

    def __init__(self, config: Config):
        self.config = config

        # Connection pooling only; max_retries=0 so failures surface immediately
        self._session = requests.Session()
        adapter = HTTPAdapter(max_retries=0, pool_connections=10, pool_maxsize=10)
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.config.access_token}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    def fetch(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Issue a request against the API and return the parsed JSON body.

        Args:
            path: Endpoint path relative to the base URL, including any query string
            method: HTTP method
            body: JSON-serializable request body
            headers: Extra headers merged over the defaults

        Raises:
            RemoteApiError: If the response status is not 2xx
            RaindropError: On network failure
        """
        url = f"{self.config.base_url}{path}"
        logger.debug("%s %s", method, path)

        try:
            response = self._session.request(
                method,
                url,
                headers=self._headers(headers),
                json=body,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise RaindropError(f"Network error during {method} {path}: {e}") from e

        if not response.ok:
            logger.warning("%s %s failed: %s %s", method, path, response.status_code, response.reason)
            raise RemoteApiError(response.status_code, response.reason or "")

        return response.json()

    def close(self) -> None:
        self._session.close()

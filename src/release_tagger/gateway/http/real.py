"""Production HTTP client for the GitHub REST API using httpx."""

import logging
from typing import Any

import httpx

from release_tagger.gateway.http.abc import HttpClient

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
REQUEST_TIMEOUT_SECONDS = 30.0


class RealHttpClient(HttpClient):
    """Production implementation backed by a single httpx.Client.

    The token is bound at construction. An empty token is accepted here;
    requests that need authentication then fail with the server's response.
    Errors are not retried: non-2xx responses raise httpx.HTTPStatusError
    and network failures raise httpx.RequestError.
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_API_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create the underlying httpx.Client.

        Args:
            token: GitHub token sent as a Bearer credential (omitted when empty)
            base_url: API root, e.g. "https://github.example.com/api/v3"
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url.rstrip("/") + "/",
            headers=headers,
            timeout=REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )

    def get(self, endpoint: str) -> Any:
        logger.debug("GET %s", endpoint)
        response = self._client.get(endpoint.lstrip("/"))
        response.raise_for_status()
        return response.json()

    def post(self, endpoint: str, *, data: dict[str, Any]) -> Any:
        logger.debug("POST %s", endpoint)
        response = self._client.post(endpoint.lstrip("/"), json=data)
        response.raise_for_status()
        return response.json()

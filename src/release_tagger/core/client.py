"""Process-wide GitHub REST client.

The client is built lazily on first use and reused for the lifetime of the
process. It is never rebuilt: if the token becomes invalid, every later
request fails.
"""

import logging
import os
import threading
from collections.abc import Callable

from release_tagger.core.config import load_api_url, load_token
from release_tagger.gateway.http.real import DEFAULT_API_URL, RealHttpClient
from release_tagger.github.rest.abc import GitHubRestClient
from release_tagger.github.rest.real import RealGitHubRestClient

logger = logging.getLogger(__name__)


def create_github_client(*, token: str, api_url: str = DEFAULT_API_URL) -> GitHubRestClient:
    """Build a production client bound to a token and API URL.

    No validation happens here; an empty token fails on the first request.
    """
    return RealGitHubRestClient(RealHttpClient(token=token, base_url=api_url))


class GitHubClientAccessor:
    """Builds a client with the given factory at most once.

    Construction is guarded by a lock, so concurrent first calls still
    produce a single instance.
    """

    def __init__(self, factory: Callable[[], GitHubRestClient]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._client: GitHubRestClient | None = None

    def get(self) -> GitHubRestClient:
        client = self._client
        if client is not None:
            return client
        with self._lock:
            if self._client is None:
                logger.debug("Creating GitHub REST client")
                self._client = self._factory()
            return self._client


def _create_client_from_environment() -> GitHubRestClient:
    return create_github_client(
        token=load_token(os.environ),
        api_url=load_api_url(os.environ),
    )


_process_client = GitHubClientAccessor(_create_client_from_environment)


def get_client() -> GitHubRestClient:
    """Return the process-wide client, creating it on first call.

    The token is read from the environment only on the first call.
    """
    return _process_client.get()

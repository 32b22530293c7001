"""Abstract base class for HTTP access to the GitHub REST API."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HttpRequest:
    """A request recorded by the fake HTTP client."""

    method: str  # "GET" or "POST"
    endpoint: str  # relative to the API base URL, e.g. "repos/o/r/tags"
    data: dict[str, Any] | None


class HttpClient(ABC):
    """Abstract interface for authenticated GitHub REST calls.

    Endpoints are relative to the API base URL (no leading slash required).
    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get(self, endpoint: str) -> Any:
        """Issue a GET request and return the decoded JSON body.

        Args:
            endpoint: API path, optionally with a query string
                (e.g. "repos/octocat/hello/tags?per_page=100&page=1")

        Raises:
            Transport-specific errors on non-2xx responses or network failure
        """
        ...

    @abstractmethod
    def post(self, endpoint: str, *, data: dict[str, Any]) -> Any:
        """Issue a POST request with a JSON body and return the decoded JSON body.

        Raises:
            Transport-specific errors on non-2xx responses or network failure
        """
        ...

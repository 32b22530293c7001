"""Fake HTTP client for testing."""

from typing import Any

import httpx

from release_tagger.gateway.http.abc import HttpClient, HttpRequest
from release_tagger.gateway.http.real import DEFAULT_API_URL


def http_status_error(
    method: str, endpoint: str, status_code: int, message: str
) -> httpx.HTTPStatusError:
    """Build the error RealHttpClient raises for a non-2xx GitHub response.

    The response body carries GitHub's {"message": ...} error shape.
    """
    request = httpx.Request(method, f"{DEFAULT_API_URL}/{endpoint.lstrip('/')}")
    response = httpx.Response(status_code, json={"message": message}, request=request)
    return httpx.HTTPStatusError(message, request=request, response=response)


class FakeHttpClient(HttpClient):
    """In-memory fake implementation of HttpClient.

    Responses are keyed by endpoint via set_response(). Requests to an
    endpoint with no configured response raise a 404 httpx.HTTPStatusError,
    as the real client would. Every request is recorded, including failed ones.
    """

    def __init__(self) -> None:
        self._responses: dict[str, Any] = {}
        self._errors: dict[str, Exception] = {}
        self._requests: list[HttpRequest] = []

    def set_response(self, endpoint: str, *, response: Any) -> None:
        """Configure the decoded JSON body returned for an endpoint."""
        self._responses[endpoint] = response

    def set_error(self, endpoint: str, *, error: Exception) -> None:
        """Configure an exception raised when an endpoint is requested."""
        self._errors[endpoint] = error

    def get(self, endpoint: str) -> Any:
        self._requests.append(HttpRequest(method="GET", endpoint=endpoint, data=None))
        return self._respond("GET", endpoint)

    def post(self, endpoint: str, *, data: dict[str, Any]) -> Any:
        self._requests.append(HttpRequest(method="POST", endpoint=endpoint, data=data))
        return self._respond("POST", endpoint)

    def _respond(self, method: str, endpoint: str) -> Any:
        if endpoint in self._errors:
            raise self._errors[endpoint]
        if endpoint not in self._responses:
            raise http_status_error(method, endpoint, 404, f"No response configured for {endpoint}")
        return self._responses[endpoint]

    @property
    def requests(self) -> list[HttpRequest]:
        """Get the list of requests that were made, in order."""
        return self._requests

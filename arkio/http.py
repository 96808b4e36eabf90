"""Plain HTTP GET client used to query network peers."""

from __future__ import annotations

import http.client

_DEFAULT_TIMEOUT = 30.0


class HttpError(RuntimeError):
    """Raised when a peer answers with anything other than 200 OK."""


class HttpClient:
    """Sends HTTP/1.1 GET requests to a peer and returns the response body."""

    def __init__(self, timeout: float = _DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def get(self, peer: str, port: int, request: str) -> str:
        """Fetch request from peer:port and return the body as text.

        Connection failures propagate as OSError; a status other than
        200 raises HttpError.
        """
        connection = http.client.HTTPConnection(peer, port, timeout=self.timeout)
        try:
            connection.request("GET", request)
            response = connection.getresponse()
            body = response.read()
            if response.status == http.client.OK:
                return body.decode("utf-8", errors="replace")
        finally:
            connection.close()
        raise HttpError("Error: Connection to Peer could not be established")


def make_http() -> HttpClient:
    """Create the default HTTP client."""
    return HttpClient()
"""Error types raised by the fetch gateway.

Every failure of a page request is reported as one of the
``NetworkError`` subclasses below. The controller catches them and turns
them into a generic user-facing message, but keeps the typed error on its
state so callers can still log or inspect it.
"""

from typing import Optional


class NetworkError(Exception):
    """Base class for page fetch failures."""


class InvalidRequest(NetworkError):
    """There is no usable URL to request (absent or malformed link)."""

    def __init__(self, target: Optional[str] = None) -> None:
        self.target = target
        if target is None:
            super().__init__("No URL to request")
        else:
            super().__init__(f"Cannot request malformed URL: {target!r}")


class BadResponse(NetworkError):
    """The transport produced no interpretable response."""


class HttpError(NetworkError):
    """The server answered with a status code outside of 2xx.

    Attributes:
        status_code: The HTTP status code returned by the server.
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP request failed with status {status_code}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpError):
            return NotImplemented
        return self.status_code == other.status_code

    def __hash__(self) -> int:
        return hash((HttpError, self.status_code))


class DecodingError(NetworkError):
    """A 2xx response body could not be decoded into a page envelope."""

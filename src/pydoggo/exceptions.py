"""Custom exception hierarchy for pydoggo."""

from __future__ import annotations


class PydoggoError(Exception):
    """Base exception for all pydoggo errors."""


class PydoggoClientError(PydoggoError):
    """Client used outside of its ``async with`` block."""


class FetchError(PydoggoError):
    """A single fetch did not produce a resource."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class FetchTransportError(FetchError):
    """Network-level failure (timeout, DNS, connection refused)."""


class FetchHttpStatusError(FetchError):
    """Server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str = "",
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(message, endpoint=endpoint)


class FetchDecodeError(FetchError):
    """Response body is not JSON or does not match the expected shape."""

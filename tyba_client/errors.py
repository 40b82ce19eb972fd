"""Exceptions raised when a Tyba API response cannot be turned into a value."""

from __future__ import annotations

from typing import Optional


class TybaAPIError(Exception):
    """Base class for failures reported by the response decoder."""


class RequestFailedError(TybaAPIError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, body: Optional[str] = None) -> None:
        super().__init__(f"Request failed with code: {status_code}, message: {reason}")
        self.status_code = status_code
        self.reason = reason
        self.body = body


class EmptyResponseError(TybaAPIError):
    """The server answered 2xx but sent no body."""

    def __init__(self, message: str = "Empty response body") -> None:
        super().__init__(message)


class ResponseDecodeError(TybaAPIError):
    """The body is present but does not match the expected shape."""


__all__ = [
    "TybaAPIError",
    "RequestFailedError",
    "EmptyResponseError",
    "ResponseDecodeError",
]

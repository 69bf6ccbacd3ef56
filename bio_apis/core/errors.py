"""
Request error types.

Every failure raised by this package derives from ReqError, split by cause:
the network (TransportError), the response shape (DecodeError), or local
processing of the body or the identifier (LocalIOError).
"""

from __future__ import annotations

from typing import Optional


class ReqError(Exception):
    """Base exception for all request errors."""

    def __init__(self, message: str, url: Optional[str] = None, cause: Optional[BaseException] = None):
        self.message = message
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.url:
            parts.append(f"[{self.url}]")
        if self.cause is not None:
            parts.append(f"({type(self.cause).__name__}: {self.cause})")
        return " ".join(parts)


class TransportError(ReqError):
    """Raised when the request never produced a response, or the resource is unavailable."""


class DecodeError(ReqError):
    """Raised when a response body is not the JSON shape we expect."""


class LocalIOError(ReqError):
    """Raised on decompression or text decoding failure, or an unusable identifier."""

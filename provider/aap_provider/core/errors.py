"""Error types raised by the provider core."""
from __future__ import annotations

from typing import Optional


class AAPProviderError(RuntimeError):
    """Base exception for all provider core failures."""


class PreconditionViolation(AAPProviderError):
    """Raised when a caller hands over state that is not ready for apply.

    Typically an attribute is still unknown, or a required attribute is
    missing. Never retried; the caller must fix its input.
    """


class MalformedInput(AAPProviderError):
    """Raised when caller-supplied data cannot be turned into a request body."""

    def __init__(self, attribute: str, message: str):
        super().__init__(f"Invalid value for '{attribute}': {message}")
        self.attribute = attribute
        self.message = message


class TransportError(AAPProviderError):
    """Raised for network level failures, including timeouts."""

    def __init__(self, method: str, path: str, message: str):
        super().__init__(f"{method} {path} failed: {message}")
        self.method = method
        self.path = path
        self.message = message


class RemoteRejection(AAPProviderError):
    """Raised when the remote API answers with an unexpected status code."""

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        body: bytes = b"",
        expected: Optional[tuple[int, ...]] = None,
    ):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body or b""
        self.expected = expected or ()
        message = (
            f"Unexpected HTTP status code received for {method} request to path "
            f"{path}: {status_code}"
        )
        if self.expected:
            message = f"{message} (expected {', '.join(str(code) for code in self.expected)})"
        preview = self.body_text.strip()
        if preview:
            message = f"{message}. Response body: {preview[:500]}"
        super().__init__(message)

    @property
    def body_text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class NotFoundError(RemoteRejection):
    """The remote API has no resource at the requested path."""


class MethodNotAllowedError(RemoteRejection):
    """The remote resource exists but does not accept the HTTP verb."""


class ResponseParseError(AAPProviderError):
    """Raised when a successful response body cannot be reconciled into state."""


__all__ = [
    "AAPProviderError",
    "MalformedInput",
    "MethodNotAllowedError",
    "NotFoundError",
    "PreconditionViolation",
    "RemoteRejection",
    "ResponseParseError",
    "TransportError",
]

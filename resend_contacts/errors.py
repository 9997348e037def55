"""Exceptions raised by the Resend contacts client."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .types import APIError


class ResendError(Exception):
    """Base exception for all errors raised by this package."""


class ResendHTTPError(ResendError):
    """HTTP error raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, error: "APIError", method: str, path: str) -> None:
        self.status_code = status_code
        self.error = error
        self.method = method
        self.path = path
        super().__init__(self.__str__())

    @property
    def code(self) -> str:
        # Resend reports the error kind as ``name``; older payloads use ``code``.
        return str(self.error.get("name") or self.error.get("code") or "UNKNOWN_ERROR")

    @property
    def message(self) -> str:
        return str(self.error.get("message", ""))

    def __str__(self) -> str:
        return f"{self.method} {self.path} -> {self.status_code} {self.code}: {self.message}"


class ResendDecodeError(ResendError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str, payload: Any = None) -> None:
        self.payload = payload
        super().__init__(message)

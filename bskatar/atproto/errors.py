"""
XRPC client errors.
"""

from __future__ import annotations

from typing import Optional


class XrpcUnavailable(Exception):
    """The PDS could not be reached (DNS, connect, timeout)."""


class XrpcError(Exception):
    """The PDS answered with an XRPC error body or an HTTP error status."""

    def __init__(self, status: int, error: Optional[str] = None, message: Optional[str] = None):
        self.status = status
        self.error = error or ""
        self.message = message or ""
        super().__init__(self.describe())

    def describe(self) -> str:
        detail = self.message or self.error or "request failed"
        return f"{detail} (HTTP {self.status})"

    @property
    def is_not_found(self) -> bool:
        """True when the error says the requested record does not exist."""
        if self.error == "RecordNotFound" or self.status == 404:
            return True
        text = f"{self.error} {self.message}".lower()
        return "not found" in text or "could not locate record" in text

    @property
    def is_auth_failure(self) -> bool:
        return self.status == 401 or self.error in ("AuthenticationRequired", "ExpiredToken", "InvalidToken")


class NotAuthenticated(Exception):
    """A store operation was requested without a logged-in identity."""

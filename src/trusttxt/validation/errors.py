"""
Error taxonomy for trust.txt validation.

Every error here is recovered locally into the status of a ValidationResult;
none of them propagate out of ``TrustTxtValidator.validate``.
"""

from __future__ import annotations

from typing import Optional


class TrustTxtError(Exception):
    """Base class for validation errors."""


class TransportError(TrustTxtError):
    """DNS, TLS, connect or timeout failure while fetching a URL."""

    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"{url}: {detail}")


class NotFoundStatus(TrustTxtError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, url: str, status_code: int, reason: Optional[str] = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason or ""
        super().__init__(f"{url}: HTTP {status_code} {self.reason}".rstrip())


class MalformedEntry(TrustTxtError):
    """An entry value failed its type-specific syntax check."""


class ConflictDetected(TrustTxtError):
    """A semantic rule was violated (duplicate controlledby, consent flip)."""


class AmbiguousResult(TrustTxtError):
    """An authentication wall prevented a definitive verdict."""

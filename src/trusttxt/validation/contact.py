"""
ContactValidator - validates contact entries by URI scheme.
"""

from __future__ import annotations

import logging
import re

from trusttxt.config.defaults import PHONE_MIN_DIGITS

from .base import EntryValidator
from .constants import EMAIL_PATTERN, MAILTO_SCHEME, TEL_SCHEME, WEB_SCHEMES
from .domain import normalize_domain
from .errors import MalformedEntry
from .models import Entry, Status, ValidationResult

logger = logging.getLogger(__name__)


def is_valid_email(value: str) -> bool:
    """Syntactic email check. Any ``?subject=...`` query is ignored."""
    address = value.split("?", 1)[0].strip()
    return bool(EMAIL_PATTERN.match(address))


def is_valid_phone(value: str) -> bool:
    """At least PHONE_MIN_DIGITS digits once everything else is removed."""
    return len(re.sub(r"\D", "", value)) >= PHONE_MIN_DIGITS


def split_scheme(value: str) -> tuple[str, str]:
    """Return (scheme, rest). Scheme is lower-case with its colon, or ''."""
    lowered = value.lower()
    for scheme in (MAILTO_SCHEME, TEL_SCHEME, *WEB_SCHEMES):
        if lowered.startswith(scheme):
            return scheme, value[len(scheme):]
    return "", value


class ContactValidator(EntryValidator):

    async def check(self, entry: Entry) -> ValidationResult:
        value = entry.raw_value
        scheme, rest = split_scheme(value)

        if scheme in WEB_SCHEMES:
            return await self._check_page(entry)

        try:
            kind = self._classify(scheme, rest)
        except MalformedEntry as e:
            return self.result(entry, Status.ERROR, str(e))
        return self.result(entry, Status.FOUND, f"Valid {kind} contact {value}")

    async def _check_page(self, entry: Entry) -> ValidationResult:
        url = entry.raw_value
        outcome = await self.fetcher.get(url)
        domain = normalize_domain(url) or self.domain
        if outcome.found:
            return self.result(entry, Status.FOUND, f"Contact page {url} is reachable", domain=domain)
        return self.result(
            entry,
            Status.NOT_FOUND,
            f"Contact page {url} could not be retrieved ({outcome.diagnostic})",
            domain=domain,
        )

    @staticmethod
    def _classify(scheme: str, rest: str) -> str:
        if scheme == MAILTO_SCHEME:
            if is_valid_email(rest):
                return "email"
            raise MalformedEntry(f"Invalid email address {rest!r}")
        if scheme == TEL_SCHEME:
            if is_valid_phone(rest):
                return "phone"
            raise MalformedEntry(
                f"Invalid phone number {rest!r} (fewer than {PHONE_MIN_DIGITS} digits)"
            )
        # No scheme: infer email first, then phone
        if is_valid_email(rest):
            return "email"
        if is_valid_phone(rest):
            return "phone"
        raise MalformedEntry(f"Unknown scheme for contact {rest!r}")

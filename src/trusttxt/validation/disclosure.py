"""
DisclosureValidator - confirms disclosure pages are reachable.
"""

from __future__ import annotations

from .base import EntryValidator
from .domain import normalize_domain
from .models import Entry, Status, ValidationResult


class DisclosureValidator(EntryValidator):
    """Fetch each disclosure URL; no content inspection."""

    async def check(self, entry: Entry) -> ValidationResult:
        url = entry.raw_value
        domain = normalize_domain(url) or self.domain
        outcome = await self.fetcher.get(url)
        if outcome.found:
            return self.result(entry, Status.FOUND, f"Disclosure {url} is reachable", domain=domain)
        return self.result(
            entry,
            Status.ERROR,
            f"Disclosure {url} could not be retrieved ({outcome.diagnostic})",
            domain=domain,
        )

"""
ReciprocityValidator - checks that relationships are declared both ways.

A ``member=B`` line in A's trust.txt is only confirmed when B's trust.txt
carries ``belongto=A``. Likewise control/controlledby and vendor/customer.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .base import EntryValidator
from .domain import extract_host, force_https, same_domain
from .models import Attribute, Entry, Status, ValidationResult
from .parser import parse

logger = logging.getLogger(__name__)


def has_reverse(entries: Sequence[Entry], reverse: Attribute, domain: str) -> bool:
    """True if any entry with the ``reverse`` attribute points at ``domain``."""
    return any(
        e.attribute == reverse and same_domain(e.raw_value, domain)
        for e in entries
    )


class ReciprocityValidator(EntryValidator):
    """Fetch each referenced domain's trust.txt and look for the reverse entry."""

    async def check(self, entry: Entry) -> ValidationResult:
        reverse = entry.attribute.reverse
        if reverse is None:
            raise ValueError(f"{entry.attribute.value} has no reverse attribute")

        reference_url = force_https(entry.raw_value)
        reference_domain = extract_host(reference_url)
        if not reference_domain:
            return self.result(
                entry,
                Status.ERROR,
                f"Could not determine a domain from {entry.raw_value!r}",
                domain=self.domain,
            )

        outcome = await self.fetcher.fetch(reference_domain)
        if not outcome.found:
            return self.result(
                entry,
                Status.ERROR,
                f"A trust.txt file was not found at {reference_url} ({outcome.diagnostic})",
                domain=reference_domain,
            )

        expected = f'"{reverse.value}=https://www.{self.domain}/"'
        if has_reverse(parse(outcome.content), reverse, self.domain):
            logger.debug(f"{entry.attribute.value}={reference_domain} reciprocated")
            return self.result(
                entry,
                Status.FOUND,
                f"Corresponding {expected} found at {reference_url}",
                domain=reference_domain,
            )

        return self.result(
            entry,
            Status.NOT_FOUND,
            f"Corresponding {expected} not found at {reference_url}",
            domain=reference_domain,
        )

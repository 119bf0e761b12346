"""
SocialProofValidator - looks for the trust URI on social profile pages.

A profile proves its association with a domain by showing the token
``trust://<domain>!`` somewhere on the page. Many platforms only render
profiles to signed-in users, so an absent token on a login wall is reported
as Unknown rather than NotFound.
"""

from __future__ import annotations

import logging

from .base import EntryValidator
from .constants import (
    AUTH_GATE_PATTERNS,
    AUTH_REQUIRED_PLATFORMS,
    TRUST_URI_TEMPLATE,
)
from .domain import normalize_domain
from .models import Entry, Status, ValidationResult

logger = logging.getLogger(__name__)


def trust_uri(domain: str) -> str:
    return TRUST_URI_TEMPLATE.format(domain=domain)


def requires_auth_platform(url: str) -> bool:
    """True if ``url`` is hosted on (a subdomain of) a login-walled platform."""
    host = normalize_domain(url)
    return any(host == p or host.endswith("." + p) for p in AUTH_REQUIRED_PLATFORMS)


def looks_auth_gated(url: str, body: str) -> bool:
    if requires_auth_platform(url):
        return True
    return any(pattern.search(body) for pattern in AUTH_GATE_PATTERNS)


class SocialProofValidator(EntryValidator):

    async def check(self, entry: Entry) -> ValidationResult:
        url = entry.raw_value
        token = trust_uri(self.domain)
        host = normalize_domain(url) or self.domain

        outcome = await self.fetcher.get(url)
        if not outcome.found:
            return self.result(
                entry,
                Status.ERROR,
                f"Could not retrieve the social network account page {url} ({outcome.diagnostic})",
                domain=host,
            )

        if token in outcome.content:
            return self.result(
                entry,
                Status.FOUND,
                f"Trust URI {token} found on social network account page {url}",
                domain=host,
            )

        if looks_auth_gated(url, outcome.content):
            logger.debug(f"Login wall on {url}")
            return self.result(
                entry,
                Status.UNKNOWN,
                f"Sign in required for social network account page {url}",
                domain=host,
            )

        return self.result(
            entry,
            Status.NOT_FOUND,
            f"Trust URI {token} not found on social network account page {url}",
            domain=host,
        )


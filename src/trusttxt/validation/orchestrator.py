"""
TrustTxtValidator - single entry point for validating a trust.txt document.

Coordinates: fetch → parse → {reciprocity, social, contact, disclosure,
consent, structure} → merge.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import replace
from itertools import chain
from typing import List, Optional

import httpx

from trusttxt.timeout_config import FetchConfig

from .consent import check_consent
from .constants import SUMMARY_EXCLUDED
from .contact import ContactValidator
from .disclosure import DisclosureValidator
from .domain import extract_host, force_https
from .fetcher import DocumentFetcher
from .models import Attribute, Status, ValidationReport, ValidationResult
from .parser import parse, relationships, select
from .reciprocity import ReciprocityValidator
from .social import SocialProofValidator
from .structure import check_cardinality, check_self_references

logger = logging.getLogger(__name__)


class TrustTxtValidator:
    """
    Validate the trust.txt declaration of a site.

    Each call is independent: a fresh fetcher (and httpx client, unless one
    was injected) is opened for the call and closed afterwards.
    """

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.client = client

    async def validate(self, url: str, full: bool = False) -> List[ValidationResult]:
        """Validate ``url`` and return the merged results."""
        report = await self.validate_report(url, full=full)
        return report.results

    async def validate_report(self, url: str, full: bool = False) -> ValidationReport:
        """
        Validate ``url`` and return the full report.

        Args:
            url: Any URL on the site; only its host is used.
            full: Also check member/customer reciprocity, social, contact,
                disclosure and consent entries, and keep line numbers.

        Returns:
            ValidationReport. When the document cannot be fetched at all the
            report holds a single Error result.
        """
        start = time.monotonic()
        url = force_https(url)
        domain = extract_host(url)
        logger.info(f"Validating trust.txt for {domain} ({'full' if full else 'summary'})")

        async with DocumentFetcher(client=self.client, config=self.config) as fetcher:
            outcome = await fetcher.fetch(domain)
            report = ValidationReport(url=url, domain=domain, full=full, fetch=outcome)

            if not outcome.found:
                logger.warning(f"No trust.txt for {domain}: {outcome.diagnostic}")
                report.results = [
                    ValidationResult(
                        status=Status.ERROR,
                        domain=domain,
                        message=f"A trust.txt file was not found at {url} ({outcome.diagnostic})",
                    )
                ]
                return report

            report.entries = parse(outcome.content)
            report.results = await self._run_checks(fetcher, report)

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            f"Validated {domain}: {len(report.entries)} entries, "
            f"{len(report.results)} results in {duration_ms:.0f}ms"
        )
        return report

    async def _run_checks(
        self, fetcher: DocumentFetcher, report: ValidationReport
    ) -> List[ValidationResult]:
        entries = report.entries
        domain = report.domain

        relationship_entries = relationships(entries)
        if not report.full:
            relationship_entries = [
                e for e in relationship_entries if e.attribute not in SUMMARY_EXCLUDED
            ]

        network_checks = [
            ReciprocityValidator(fetcher, domain).validate(relationship_entries),
        ]
        if report.full:
            network_checks += [
                SocialProofValidator(fetcher, domain).validate(select(entries, Attribute.SOCIAL)),
                ContactValidator(fetcher, domain).validate(select(entries, Attribute.CONTACT)),
                DisclosureValidator(fetcher, domain).validate(select(entries, Attribute.DISCLOSURE)),
            ]
        network_results = await asyncio.gather(*network_checks)

        local_results = [
            check_self_references(entries, domain),
            check_cardinality(entries, domain),
        ]
        if report.full:
            local_results.append(check_consent(entries, domain))

        # Stable sort keeps validator order for results on the same line
        merged = sorted(
            chain(*network_results, *local_results),
            key=lambda r: r.line_number or 0,
        )
        if not report.full:
            merged = [replace(r, line_number=None) for r in merged]
        return merged


async def validate(
    url: str,
    full: bool = False,
    config: Optional[FetchConfig] = None,
) -> List[ValidationResult]:
    """Validate the trust.txt declaration of the site at ``url``."""
    return await TrustTxtValidator(config=config).validate(url, full=full)

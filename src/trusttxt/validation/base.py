"""
Common batch machinery for per-entry validators.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List, Sequence

from .fetcher import DocumentFetcher
from .models import Entry, Status, ValidationResult

logger = logging.getLogger(__name__)


class EntryValidator(ABC):
    """
    Runs one async check per entry, concurrently.

    Subclasses implement ``check``; an unexpected exception from a single
    check becomes an Error result for that entry instead of failing the batch.
    """

    def __init__(self, fetcher: DocumentFetcher, domain: str):
        self.fetcher = fetcher
        self.domain = domain

    @abstractmethod
    async def check(self, entry: Entry) -> ValidationResult:
        """Validate a single entry."""

    async def validate(self, entries: Sequence[Entry]) -> List[ValidationResult]:
        """Validate entries in parallel, preserving input order."""
        if not entries:
            return []
        results = await asyncio.gather(
            *(self.check(e) for e in entries), return_exceptions=True
        )

        processed: List[ValidationResult] = []
        for entry, result in zip(entries, results):
            if isinstance(result, Exception):
                logger.error(
                    f"{type(self).__name__} failed on line {entry.line_number}: {result}"
                )
                processed.append(
                    self.result(entry, Status.ERROR, f"Validation error: {result}")
                )
            else:
                processed.append(result)  # type: ignore[arg-type]
        return processed

    def result(
        self,
        entry: Entry,
        status: Status,
        message: str,
        domain: str = "",
    ) -> ValidationResult:
        return ValidationResult(
            status=status,
            domain=domain or self.domain,
            message=message,
            line_number=entry.line_number,
            attribute=entry.attribute,
        )

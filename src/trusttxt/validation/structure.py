"""
Structural checks: self-referencing relationships and singleton attributes.
"""

from __future__ import annotations

from typing import List, Sequence

from .domain import extract_host, same_domain
from .errors import ConflictDetected
from .models import Attribute, Entry, Status, ValidationResult


def find_self_references(entries: Sequence[Entry], domain: str) -> List[Entry]:
    """Relationship entries that point back at ``domain``."""
    return [
        e for e in entries
        if e.attribute.is_relationship and same_domain(e.raw_value, domain)
    ]


def check_self_references(entries: Sequence[Entry], domain: str) -> List[ValidationResult]:
    return [
        ValidationResult(
            status=Status.WARNING,
            domain=extract_host(e.raw_value) or domain,
            message=f"Self-referencing entry {e.attribute.value}={e.raw_value}",
            line_number=e.line_number,
            attribute=e.attribute,
        )
        for e in find_self_references(entries, domain)
    ]


def check_cardinality(entries: Sequence[Entry], domain: str) -> List[ValidationResult]:
    """Every controlledby entry after the first is an error."""
    results: List[ValidationResult] = []
    seen = 0
    for e in entries:
        if e.attribute != Attribute.CONTROLLED_BY:
            continue
        seen += 1
        if seen == 1:
            continue
        error = ConflictDetected(
            f"Multiple controlledby entries (occurrence {seen}: {e.raw_value})"
        )
        results.append(
            ValidationResult(
                status=Status.ERROR,
                domain=domain,
                message=str(error),
                line_number=e.line_number,
                attribute=e.attribute,
            )
        )
    return results

"""
Consent checks for ``datatrainingallowed`` entries.

Only transitions are reported: the first valid value is Found, each later
valid value that differs from the current one is a conflict (and becomes the
new current value), and an exact repeat of the current value yields nothing.
So ``yes, no, yes`` reports two conflicts.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from trusttxt.config.defaults import CONSENT_VALUES

from .errors import ConflictDetected, MalformedEntry
from .models import Attribute, Entry, Status, ValidationResult

logger = logging.getLogger(__name__)


def _parse_value(entry: Entry) -> str:
    if entry.raw_value not in CONSENT_VALUES:
        raise MalformedEntry(
            f"Invalid entry datatrainingallowed={entry.raw_value} (expected yes or no)"
        )
    return entry.raw_value


def _result(entry: Entry, status: Status, domain: str, message: str) -> ValidationResult:
    return ValidationResult(
        status=status,
        domain=domain,
        message=message,
        line_number=entry.line_number,
        attribute=entry.attribute,
    )


def check_consent(entries: Sequence[Entry], domain: str) -> List[ValidationResult]:
    """
    Validate the datatrainingallowed entries of one document.

    Args:
        entries: Parsed entries (other attributes are ignored).
        domain: Domain of the document under validation.

    Returns:
        One result per valid transition or invalid entry, in document order.
    """
    results: List[ValidationResult] = []
    current: Optional[str] = None

    for entry in entries:
        if entry.attribute != Attribute.DATA_TRAINING_ALLOWED:
            continue
        try:
            value = _parse_value(entry)
            if current is None:
                current = value
                results.append(
                    _result(entry, Status.FOUND, domain, f"datatrainingallowed={value}")
                )
            elif value != current:
                previous, current = current, value
                raise ConflictDetected(
                    f"Conflicting entries datatrainingallowed={value} "
                    f"after datatrainingallowed={previous}"
                )
        except (MalformedEntry, ConflictDetected) as e:
            logger.debug(f"Consent check line {entry.line_number}: {e}")
            results.append(_result(entry, Status.ERROR, domain, str(e)))

    return results

"""
Manifest parser - turns trust.txt text into typed entries.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .constants import PARSE_ORDER
from .models import Attribute, Entry

logger = logging.getLogger(__name__)


def match_attribute(line: str) -> Optional[Attribute]:
    """First attribute whose prefix starts ``line``, or None."""
    for attribute in PARSE_ORDER:
        if line.startswith(attribute.prefix):
            return attribute
    return None


def parse(content: str) -> List[Entry]:
    """
    Parse a trust.txt document.

    Lines that match no recognized prefix (comments, blank lines, future
    attributes) are skipped. The stored value excludes the prefix and is
    whitespace-trimmed.

    Args:
        content: Raw document text.

    Returns:
        Entries in document order.
    """
    entries: List[Entry] = []
    skipped = 0
    for line_number, line in enumerate(content.splitlines(), start=1):
        attribute = match_attribute(line)
        if attribute is None:
            skipped += 1
            continue
        value = line[len(attribute.prefix):].strip()
        entries.append(Entry(line_number=line_number, attribute=attribute, raw_value=value))

    logger.debug(f"Parsed {len(entries)} entries ({skipped} lines skipped)")
    return entries


def select(entries: Iterable[Entry], *attributes: Attribute) -> List[Entry]:
    """Entries whose attribute is one of ``attributes``, in order."""
    wanted = set(attributes)
    return [e for e in entries if e.attribute in wanted]


def relationships(entries: Iterable[Entry]) -> List[Entry]:
    return [e for e in entries if e.attribute.is_relationship]

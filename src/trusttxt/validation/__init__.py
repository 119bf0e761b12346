"""
trust.txt validation engine.

Fetches a site's trust.txt, parses it into typed entries and verifies each
entry: reciprocal relationships on the referenced site, trust URIs on social
profiles, contact syntax, disclosure reachability and consent consistency.
"""

from __future__ import annotations

from .consent import check_consent
from .contact import ContactValidator
from .disclosure import DisclosureValidator
from .domain import extract_host, force_https, normalize_domain, same_domain
from .errors import (
    AmbiguousResult,
    ConflictDetected,
    MalformedEntry,
    NotFoundStatus,
    TransportError,
    TrustTxtError,
)
from .fetcher import DocumentFetcher
from .models import (
    RELATIONSHIP_PAIRS,
    Attribute,
    Entry,
    FetchOutcome,
    Status,
    ValidationReport,
    ValidationResult,
)
from .orchestrator import TrustTxtValidator, validate
from .parser import parse
from .reciprocity import ReciprocityValidator
from .social import SocialProofValidator
from .structure import check_cardinality, check_self_references

__all__ = [
    "TrustTxtValidator",
    "validate",
    "DocumentFetcher",
    "parse",
    "ReciprocityValidator",
    "SocialProofValidator",
    "ContactValidator",
    "DisclosureValidator",
    "check_consent",
    "check_self_references",
    "check_cardinality",
    "extract_host",
    "force_https",
    "normalize_domain",
    "same_domain",
    "Attribute",
    "Entry",
    "FetchOutcome",
    "Status",
    "ValidationReport",
    "ValidationResult",
    "RELATIONSHIP_PAIRS",
    "TrustTxtError",
    "TransportError",
    "NotFoundStatus",
    "MalformedEntry",
    "ConflictDetected",
    "AmbiguousResult",
]

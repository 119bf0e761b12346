"""
Shared dataclasses for trust.txt validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Attribute(str, Enum):
    """Recognized trust.txt attributes. The value is the on-disk key."""
    BELONGS_TO = "belongto"
    CONTROL = "control"
    CONTROLLED_BY = "controlledby"
    CUSTOMER = "customer"
    MEMBER = "member"
    VENDOR = "vendor"
    SOCIAL = "social"
    CONTACT = "contact"
    DISCLOSURE = "disclosure"
    DATA_TRAINING_ALLOWED = "datatrainingallowed"

    @property
    def prefix(self) -> str:
        return f"{self.value}="

    @property
    def is_relationship(self) -> bool:
        return self in RELATIONSHIP_PAIRS

    @property
    def reverse(self) -> Optional["Attribute"]:
        """Expected reverse attribute on the referenced domain, if any."""
        return RELATIONSHIP_PAIRS.get(self)


RELATIONSHIP_PAIRS: Dict[Attribute, Attribute] = {
    Attribute.BELONGS_TO: Attribute.MEMBER,
    Attribute.MEMBER: Attribute.BELONGS_TO,
    Attribute.CONTROL: Attribute.CONTROLLED_BY,
    Attribute.CONTROLLED_BY: Attribute.CONTROL,
    Attribute.VENDOR: Attribute.CUSTOMER,
    Attribute.CUSTOMER: Attribute.VENDOR,
}


class Status(str, Enum):
    """Terminal status of a single check."""
    FOUND = "found"
    NOT_FOUND = "not found"
    ERROR = "error"
    UNKNOWN = "unknown"
    WARNING = "warning"


@dataclass(frozen=True)
class Entry:
    """One recognized line of a trust.txt document."""
    line_number: int
    attribute: Attribute
    raw_value: str

    def __post_init__(self):
        if self.line_number < 1:
            raise ValueError(f"line_number must be positive, got {self.line_number}")


@dataclass(frozen=True)
class ValidationResult:
    status: Status
    domain: str
    message: str
    line_number: Optional[int] = None
    attribute: Optional[Attribute] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {}
        if self.line_number is not None:
            data["line_number"] = self.line_number
        if self.attribute is not None:
            data["attribute"] = self.attribute.value
        data["status"] = self.status.value
        data["domain"] = self.domain
        data["message"] = self.message
        return data


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one fetch attempt (or of a fallback strategy)."""
    url: str
    found: bool
    content: str = ""
    status_code: Optional[int] = None
    reason: str = ""
    error: Optional[str] = None

    @property
    def diagnostic(self) -> str:
        """Human readable failure detail for message text."""
        if self.error:
            return self.error
        if self.status_code is None:
            return "no response"
        return f"HTTP {self.status_code} {self.reason}".rstrip()


@dataclass
class ValidationReport:
    """Everything produced by one validation call."""
    url: str
    domain: str
    full: bool
    fetch: FetchOutcome
    entries: List[Entry] = field(default_factory=list)
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.fetch.found

    def grouped(self) -> Dict[str, List[str]]:
        """Raw values per attribute key, omitting attributes with no entries."""
        groups: Dict[str, List[str]] = {}
        for entry in self.entries:
            groups.setdefault(entry.attribute.value, []).append(entry.raw_value)
        return groups

    def self_references(self) -> List[str]:
        # Imported lazily, structure imports models
        from .structure import find_self_references

        return [entry.raw_value for entry in find_self_references(self.entries, self.domain)]

    def count(self, status: Status) -> int:
        return sum(1 for r in self.results if r.status == status)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {
            "url": self.url,
            "domain": self.domain,
            "full": self.full,
            "found": self.found,
            "status_code": self.fetch.status_code,
            "fetched_from": self.fetch.url,
        }
        if self.fetch.error:
            data["error"] = self.fetch.error
        data.update(self.grouped())
        self_refs = self.self_references()
        if self_refs:
            data["self_reference"] = self_refs
        data["results"] = [r.to_dict() for r in self.results]
        return data

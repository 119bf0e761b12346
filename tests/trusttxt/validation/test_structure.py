"""Tests for self-reference and cardinality checks."""

from trusttxt.validation.models import Attribute, Entry, Status
from trusttxt.validation.parser import parse
from trusttxt.validation.structure import (
    check_cardinality,
    check_self_references,
    find_self_references,
)


def test_self_reference_warning():
    entries = parse("belongto=https://www.a.com/\nmember=https://www.b.com/\n")

    [result] = check_self_references(entries, "a.com")

    assert result.status == Status.WARNING
    assert result.domain == "a.com"
    assert result.line_number == 1
    assert result.attribute == Attribute.BELONGS_TO


def test_self_reference_is_case_insensitive():
    entries = parse("vendor=http://WWW.A.com\n")

    assert len(check_self_references(entries, "a.com")) == 1


def test_non_relationship_entries_never_self_reference():
    entries = parse("social=https://www.a.com/\ndisclosure=https://www.a.com/x\n")

    assert find_self_references(entries, "a.com") == []


def test_single_controlledby_is_fine():
    entries = parse("controlledby=https://www.parent.com/\n")

    assert check_cardinality(entries, "a.com") == []


def test_second_controlledby_is_error():
    entries = parse(
        "controlledby=https://www.parent.com/\n"
        "control=https://www.child.com/\n"
        "controlledby=https://www.other.com/\n"
    )

    [result] = check_cardinality(entries, "a.com")

    assert result.status == Status.ERROR
    assert result.line_number == 3
    assert "multiple controlledby entries" in result.message.lower()


def test_every_extra_controlledby_is_reported():
    entries = [Entry(i, Attribute.CONTROLLED_BY, f"https://p{i}.com/") for i in range(1, 5)]

    results = check_cardinality(entries, "a.com")

    assert [r.line_number for r in results] == [2, 3, 4]


def test_unparseable_relationship_value_is_not_a_self_reference():
    entries = [Entry(1, Attribute.BELONGS_TO, "https://[broken/")]

    assert check_self_references(entries, "a.com") == []

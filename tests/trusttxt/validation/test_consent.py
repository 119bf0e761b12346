"""Tests for the datatrainingallowed consent checks."""

from trusttxt.validation.consent import check_consent
from trusttxt.validation.models import Attribute, Entry, Status


def consent_entries(*values):
    return [
        Entry(i, Attribute.DATA_TRAINING_ALLOWED, v)
        for i, v in enumerate(values, start=1)
    ]


def test_single_value_found():
    [result] = check_consent(consent_entries("no"), "a.com")

    assert result.status == Status.FOUND
    assert result.domain == "a.com"


def test_only_transitions_are_reported():
    results = check_consent(consent_entries("yes", "yes", "no", "no", "yes"), "a.com")

    assert [(r.line_number, r.status) for r in results] == [
        (1, Status.FOUND),
        (3, Status.ERROR),
        (5, Status.ERROR),
    ]
    assert all("onflicting entries" in r.message for r in results[1:])


def test_each_flip_is_a_conflict():
    results = check_consent(consent_entries("yes", "no", "yes"), "a.com")

    assert [r.status for r in results] == [Status.FOUND, Status.ERROR, Status.ERROR]


def test_invalid_value_is_error_and_keeps_state():
    results = check_consent(consent_entries("maybe", "yes", "Yes", "yes"), "a.com")

    assert [(r.line_number, r.status) for r in results] == [
        (1, Status.ERROR),
        (2, Status.FOUND),
        (3, Status.ERROR),
    ]
    assert "Invalid entry" in results[0].message


def test_other_attributes_ignored():
    entries = [
        Entry(1, Attribute.MEMBER, "https://b.com/"),
        Entry(2, Attribute.DATA_TRAINING_ALLOWED, "yes"),
    ]

    [result] = check_consent(entries, "a.com")

    assert result.line_number == 2


def test_no_consent_entries():
    assert check_consent([], "a.com") == []

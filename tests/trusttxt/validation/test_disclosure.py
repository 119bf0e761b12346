"""Tests for DisclosureValidator."""

import pytest

from trusttxt.validation.disclosure import DisclosureValidator
from trusttxt.validation.models import Attribute, Entry, Status


@pytest.mark.asyncio
async def test_reachable_disclosure_is_found(stub_fetcher):
    url = "https://www.a.com/ethics-policy"
    fetcher = stub_fetcher({url: "Our ethics policy"})

    [result] = await DisclosureValidator(fetcher, "a.com").validate(
        [Entry(7, Attribute.DISCLOSURE, url)]
    )

    assert result.status == Status.FOUND
    assert result.line_number == 7
    assert result.domain == "a.com"


@pytest.mark.asyncio
async def test_unreachable_disclosure_is_error(stub_fetcher):
    url = "https://www.a.com/missing"

    [result] = await DisclosureValidator(stub_fetcher({}), "a.com").validate(
        [Entry(7, Attribute.DISCLOSURE, url)]
    )

    assert result.status == Status.ERROR
    assert "404" in result.message


@pytest.mark.asyncio
async def test_no_entries(stub_fetcher):
    assert await DisclosureValidator(stub_fetcher({}), "a.com").validate([]) == []

"""Shared fixtures for validation tests."""

from typing import Dict, List, Union

import pytest

from trusttxt.timeout_config import FetchConfig
from trusttxt.validation.fetcher import DocumentFetcher
from trusttxt.validation.models import FetchOutcome

Page = Union[str, int]


class StubFetcher(DocumentFetcher):
    """DocumentFetcher serving canned pages instead of the network.

    A ``str`` page is served with HTTP 200, an ``int`` page is returned as
    that status code, and unknown URLs are 404.
    """

    def __init__(self, pages: Dict[str, Page]):
        super().__init__(config=FetchConfig())
        self.pages = pages
        self.requested: List[str] = []

    async def get(self, url: str) -> FetchOutcome:
        self.requested.append(url)
        page = self.pages.get(url, 404)
        if isinstance(page, int):
            return FetchOutcome(url=url, found=False, status_code=page, reason="Not Found")
        return FetchOutcome(url=url, found=True, content=page, status_code=200, reason="OK")


@pytest.fixture
def stub_fetcher():
    """Factory for StubFetcher instances."""
    return StubFetcher

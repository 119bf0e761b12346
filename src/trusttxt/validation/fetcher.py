"""
DocumentFetcher - retrieves trust.txt documents and referenced pages.

A fetch is a single GET with a finite deadline. Transport failures and
non-200 statuses both come back as a FetchOutcome with ``found=False``; they
differ only in the diagnostic text.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import httpx

from trusttxt.config.defaults import (
    FETCH_HOST_PREFIX,
    FETCH_SCHEME,
    FETCH_SUCCESS_STATUS,
    TRUST_TXT_FILENAME,
    WELL_KNOWN_DIR,
)
from trusttxt.timeout_config import FetchConfig, get_fetch_config

from .errors import NotFoundStatus, TransportError
from .models import FetchOutcome

logger = logging.getLogger(__name__)


def candidate_urls(domain: str) -> List[str]:
    """Locations tried for ``domain``, primary first."""
    base = f"{FETCH_SCHEME}://{FETCH_HOST_PREFIX}{domain.rstrip('/')}"
    return [
        f"{base}/{TRUST_TXT_FILENAME}",
        f"{base}/{WELL_KNOWN_DIR}/{TRUST_TXT_FILENAME}",
    ]


class DocumentFetcher:
    """
    Fetch pages over a shared httpx.AsyncClient.

    Use as an async context manager, or pass an existing client (which the
    fetcher will then not close).
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[FetchConfig] = None,
    ):
        self.config = config or get_fetch_config()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "DocumentFetcher":
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.httpx_timeout(),
                follow_redirects=True,
                max_redirects=self.config.max_redirects,
                headers={"User-Agent": self.config.user_agent},
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, url: str) -> FetchOutcome:
        """
        Fetch a single URL.

        Args:
            url: Absolute URL to retrieve.

        Returns:
            FetchOutcome; ``found`` is True only for HTTP 200.
        """
        try:
            response = await self._request(url)
        except TransportError as e:
            logger.debug(f"Fetch failed for {url}: {e.detail}")
            return FetchOutcome(url=url, found=False, error=e.detail)

        try:
            self._check_status(url, response)
        except NotFoundStatus as e:
            logger.debug(f"Fetch of {url} returned {e.status_code}")
            return FetchOutcome(
                url=url,
                found=False,
                status_code=e.status_code,
                reason=e.reason,
            )

        return FetchOutcome(
            url=url,
            found=True,
            content=response.text,
            status_code=response.status_code,
            reason=response.reason_phrase,
        )

    async def fetch(self, domain: str) -> FetchOutcome:
        """
        Fetch the trust.txt document for ``domain``.

        Tries the root location, then ``.well-known``. If both fail the
        primary attempt's outcome is returned since it is the more
        informative failure.
        """
        primary_url, *fallback_urls = candidate_urls(domain)
        primary = await self.get(primary_url)
        if primary.found:
            logger.debug(f"trust.txt for {domain} found at {primary_url}")
            return primary

        for url in fallback_urls:
            outcome = await self.get(url)
            if outcome.found:
                logger.debug(f"trust.txt for {domain} found at {url}")
                return outcome

        logger.debug(f"No trust.txt for {domain}: {primary.diagnostic}")
        return primary

    async def _request(self, url: str) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("DocumentFetcher used outside of 'async with'")
        try:
            return await asyncio.wait_for(
                self._client.get(url), timeout=self.config.total_timeout
            )
        except asyncio.TimeoutError:
            raise TransportError(url, f"Timed out after {self.config.total_timeout:g}s")
        except httpx.TimeoutException as e:
            raise TransportError(url, f"Timed out: {str(e) or type(e).__name__}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(url, str(e) or type(e).__name__)

    @staticmethod
    def _check_status(url: str, response: httpx.Response) -> None:
        if response.status_code != FETCH_SUCCESS_STATUS:
            raise NotFoundStatus(url, response.status_code, response.reason_phrase)

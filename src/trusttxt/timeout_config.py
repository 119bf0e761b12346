"""Fetch configuration for trust.txt validation.

Provides configurable timeouts and client identity for every outbound
request made while validating a document.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

from trusttxt.config.defaults import (
    FETCH_CONNECT_TIMEOUT,
    FETCH_MAX_REDIRECTS,
    FETCH_READ_TIMEOUT,
    FETCH_TOTAL_TIMEOUT,
    FETCH_USER_AGENT,
)


@dataclass
class FetchConfig:
    """Configuration for outbound fetches."""

    # Timeouts in seconds
    connect_timeout: float = FETCH_CONNECT_TIMEOUT
    read_timeout: float = FETCH_READ_TIMEOUT
    total_timeout: float = FETCH_TOTAL_TIMEOUT

    max_redirects: int = FETCH_MAX_REDIRECTS
    user_agent: str = FETCH_USER_AGENT

    def __post_init__(self):
        for name in ("connect_timeout", "read_timeout", "total_timeout"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_env(cls) -> "FetchConfig":
        """Create config from environment variables."""
        return cls(
            connect_timeout=float(os.environ.get("TRUSTTXT_CONNECT_TIMEOUT", str(FETCH_CONNECT_TIMEOUT))),
            read_timeout=float(os.environ.get("TRUSTTXT_READ_TIMEOUT", str(FETCH_READ_TIMEOUT))),
            total_timeout=float(os.environ.get("TRUSTTXT_TOTAL_TIMEOUT", str(FETCH_TOTAL_TIMEOUT))),
            user_agent=os.environ.get("TRUSTTXT_USER_AGENT", FETCH_USER_AGENT),
        )

    def httpx_timeout(self) -> httpx.Timeout:
        """Build the per-phase httpx timeout."""
        return httpx.Timeout(self.read_timeout, connect=self.connect_timeout)


# Global config instance
_config: Optional[FetchConfig] = None


def get_fetch_config() -> FetchConfig:
    """Get global fetch config."""
    global _config
    if _config is None:
        _config = FetchConfig.from_env()
    return _config


def set_fetch_config(config: Optional[FetchConfig]) -> None:
    """Set global fetch config. Passing None re-reads the environment on next use."""
    global _config
    _config = config

"""Default configuration values for trusttxt.

This module centralizes the hard-coded values (file locations, timeouts,
thresholds) used by the validation engine. All modules should import these
constants instead of hard-coding values.

Usage:
    from trusttxt.config.defaults import (
        TRUST_TXT_FILENAME,
        FETCH_TOTAL_TIMEOUT,
    )
"""

from __future__ import annotations

# =============================================================================
# Document Locations
# =============================================================================

TRUST_TXT_FILENAME = "trust.txt"
WELL_KNOWN_DIR = ".well-known"

# Every fetch forces the secure scheme and the www. host label
FETCH_SCHEME = "https"
FETCH_HOST_PREFIX = "www."


# =============================================================================
# Fetch Defaults
# =============================================================================

FETCH_CONNECT_TIMEOUT = 10.0  # seconds
FETCH_READ_TIMEOUT = 15.0  # seconds
FETCH_TOTAL_TIMEOUT = 30.0  # seconds, hard ceiling per request
FETCH_MAX_REDIRECTS = 5
FETCH_SUCCESS_STATUS = 200
FETCH_USER_AGENT = "trusttxt-validator/1.4"


# =============================================================================
# Entry Validation
# =============================================================================

PHONE_MIN_DIGITS = 10
CONSENT_VALUES = ("yes", "no")

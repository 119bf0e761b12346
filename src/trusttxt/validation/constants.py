"""
Internal constants for trust.txt validation.
"""

from __future__ import annotations

import re

from .models import Attribute

# Prefix match order. "controlledby=" and "control=" never collide because the
# separator is part of the prefix, but the order is fixed so the first match
# always wins.
PARSE_ORDER = (
    Attribute.BELONGS_TO,
    Attribute.CONTROL,
    Attribute.CONTROLLED_BY,
    Attribute.CUSTOMER,
    Attribute.MEMBER,
    Attribute.VENDOR,
    Attribute.SOCIAL,
    Attribute.CONTACT,
    Attribute.DISCLOSURE,
    Attribute.DATA_TRAINING_ALLOWED,
)

# Checks skipped in summary mode
SUMMARY_EXCLUDED = frozenset({Attribute.MEMBER, Attribute.CUSTOMER})

TRUST_URI_TEMPLATE = "trust://{domain}!"

# === Social login-wall heuristic ===
AUTH_GATE_PATTERNS = (
    re.compile(r"\bsign[\s-]?(?:in|up)\b", re.IGNORECASE),
    re.compile(r"\blog[\s-]?(?:in|on)\b", re.IGNORECASE),
)

# Platforms whose profile pages are not readable without an account
AUTH_REQUIRED_PLATFORMS = frozenset({
    "facebook.com",
    "instagram.com",
    "linkedin.com",
    "threads.net",
    "tiktok.com",
    "twitter.com",
    "x.com",
})

# === Contact schemes ===
MAILTO_SCHEME = "mailto:"
TEL_SCHEME = "tel:"
WEB_SCHEMES = ("http:", "https:")

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

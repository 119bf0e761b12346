"""
Domain normalization.

Reciprocity is always decided on domains, never on raw URLs: the scheme is
forced to https, the host is extracted, and a leading ``www.`` label is
dropped.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from trusttxt.config.defaults import FETCH_HOST_PREFIX, FETCH_SCHEME


def force_https(url: str) -> str:
    """Rewrite an ``http:`` URL to ``https:``; bare hosts gain the scheme."""
    url = url.strip()
    if url[:5].lower() == "http:":
        return f"{FETCH_SCHEME}:{url[5:]}"
    if "://" not in url:
        return f"{FETCH_SCHEME}://{url.lstrip('/')}"
    return url


def extract_host(url: str) -> str:
    """
    Host of ``url`` with any leading ``www.`` removed, case preserved.

    Returns an empty string when no host can be found.
    """
    try:
        netloc = urlsplit(force_https(url)).netloc
    except ValueError:
        # Unbalanced IPv6 brackets and the like
        return ""
    # Drop credentials and port
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host.partition("]")[0] + "]"
    else:
        host = host.partition(":")[0]
    host = host.rstrip(".")
    if host[: len(FETCH_HOST_PREFIX)].lower() == FETCH_HOST_PREFIX:
        host = host[len(FETCH_HOST_PREFIX):]
    return host


def normalize_domain(url: str) -> str:
    """Normalized (lower-case, www-stripped) domain of ``url``. Idempotent."""
    return extract_host(url).lower()


def same_domain(a: str, b: str) -> bool:
    """True when two URLs or hosts normalize to the same domain."""
    na, nb = normalize_domain(a), normalize_domain(b)
    return bool(na) and na == nb

"""Tests for domain normalization."""

import pytest

from trusttxt.validation.domain import (
    extract_host,
    force_https,
    normalize_domain,
    same_domain,
)


class TestForceHttps:

    def test_http_rewritten(self):
        assert force_https("http://www.a.com/") == "https://www.a.com/"

    def test_uppercase_scheme_rewritten(self):
        assert force_https("HTTP://a.com") == "https://a.com"

    def test_https_untouched(self):
        assert force_https("https://a.com/x") == "https://a.com/x"

    def test_bare_host_gains_scheme(self):
        assert force_https("a.com") == "https://a.com"


class TestNormalizeDomain:

    @pytest.mark.parametrize("url", [
        "https://www.example.com/",
        "http://example.com/trust.txt",
        "www.Example.com",
        "example.com",
        "https://user@www.example.com:8443/path",
    ])
    def test_variants_normalize_to_same_domain(self, url):
        assert normalize_domain(url) == "example.com"

    def test_idempotent(self):
        once = normalize_domain("https://www.Example.COM/")
        assert normalize_domain(once) == once

    def test_only_leading_www_stripped(self):
        assert normalize_domain("https://news.www.example.com/") == "news.www.example.com"

    def test_extract_host_preserves_case(self):
        assert extract_host("https://www.Example.com/") == "Example.com"

    def test_no_host(self):
        assert extract_host("https:///trust.txt") == ""


class TestSameDomain:

    def test_case_insensitive(self):
        assert same_domain("https://www.A.com/", "a.com")

    def test_different_domains(self):
        assert not same_domain("https://a.com/", "https://b.com/")

    def test_empty_never_matches(self):
        assert not same_domain("", "")


class TestUnparseableValues:

    def test_unbalanced_bracket_has_no_host(self):
        assert extract_host("https://[x") == ""
        assert normalize_domain("belongs-nowhere://[broken/") == ""

    def test_unbalanced_bracket_never_matches(self):
        assert not same_domain("https://[broken/", "a.com")

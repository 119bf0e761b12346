"""Tests for SocialProofValidator."""

import pytest

from trusttxt.validation.models import Attribute, Entry, Status
from trusttxt.validation.social import (
    SocialProofValidator,
    looks_auth_gated,
    requires_auth_platform,
    trust_uri,
)

PROFILE = "https://social.example/@a"


def social(url=PROFILE, line=1):
    return Entry(line, Attribute.SOCIAL, url)


def test_trust_uri_format():
    assert trust_uri("Example.com") == "trust://Example.com!"


@pytest.mark.asyncio
async def test_token_present_is_found(stub_fetcher):
    fetcher = stub_fetcher({PROFILE: "<p>Official account trust://a.com! </p>"})

    [result] = await SocialProofValidator(fetcher, "a.com").validate([social()])

    assert result.status == Status.FOUND
    assert result.domain == "social.example"
    assert "trust://a.com!" in result.message


@pytest.mark.asyncio
async def test_token_uses_case_preserved_domain(stub_fetcher):
    fetcher = stub_fetcher({PROFILE: "trust://example.com!"})

    [result] = await SocialProofValidator(fetcher, "Example.com").validate([social()])

    assert result.status == Status.NOT_FOUND


@pytest.mark.asyncio
async def test_token_absent_is_not_found(stub_fetcher):
    fetcher = stub_fetcher({PROFILE: "<p>Just a profile</p>"})

    [result] = await SocialProofValidator(fetcher, "a.com").validate([social()])

    assert result.status == Status.NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    "Please Sign in to continue",
    "SIGN UP now",
    "<a href='/login'>Login</a>",
    "You must log in to see this",
])
async def test_login_wall_is_unknown(stub_fetcher, body):
    fetcher = stub_fetcher({PROFILE: body})

    [result] = await SocialProofValidator(fetcher, "a.com").validate([social()])

    assert result.status == Status.UNKNOWN
    assert "Sign in required" in result.message


@pytest.mark.asyncio
async def test_known_platform_is_unknown(stub_fetcher):
    url = "https://www.instagram.com/a_com/"
    fetcher = stub_fetcher({url: "<html>profile</html>"})

    [result] = await SocialProofValidator(fetcher, "a.com").validate([social(url)])

    assert result.status == Status.UNKNOWN
    assert result.domain == "instagram.com"


@pytest.mark.asyncio
async def test_known_platform_with_token_is_found(stub_fetcher):
    url = "https://x.com/a_com"
    fetcher = stub_fetcher({url: "bio: trust://a.com!"})

    [result] = await SocialProofValidator(fetcher, "a.com").validate([social(url)])

    assert result.status == Status.FOUND


@pytest.mark.asyncio
async def test_unreachable_page_is_error(stub_fetcher):
    fetcher = stub_fetcher({PROFILE: 500})

    [result] = await SocialProofValidator(fetcher, "a.com").validate([social()])

    assert result.status == Status.ERROR
    assert "Could not retrieve" in result.message


def test_requires_auth_platform_subdomains():
    assert requires_auth_platform("https://m.facebook.com/a")
    assert requires_auth_platform("https://www.linkedin.com/company/a")
    assert not requires_auth_platform("https://notfacebook.com/a")


def test_looks_auth_gated_ignores_unrelated_words():
    assert not looks_auth_gated(PROFILE, "designing logos")

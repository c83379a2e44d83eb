"""
Tests for domain cleanup and hostname validation.
"""

from __future__ import annotations

import pytest

from core.domain import clean_domain, is_valid_domain, normalize_and_validate
from core.models import InvalidDomain, NormalizedDomain


@pytest.mark.parametrize(
    "raw",
    [
        "google.com",
        "https://google.com",
        "http://google.com",
        "google.com/path",
        "google.com?x=1",
        "https://google.com/path?x=1",
        "HTTPS://google.com/",
        "  http://google.com/a/b?c=d  ",
    ],
)
def test_scheme_path_and_query_are_stripped(raw: str) -> None:
    assert normalize_and_validate(raw) == NormalizedDomain("google.com")


def test_only_one_scheme_prefix_is_removed() -> None:
    assert clean_domain("https://http://google.com") == "http:"


def test_query_before_path_is_cut() -> None:
    assert clean_domain("example.com?next=/login") == "example.com"


def test_casing_is_preserved() -> None:
    out = normalize_and_validate("https://GitHub.COM/about")
    assert isinstance(out, NormalizedDomain)
    assert out.value == "GitHub.COM"
    assert str(out) == "GitHub.COM"


def test_subdomains_and_hyphens_are_valid() -> None:
    assert is_valid_domain("docs.my-site.example.org")
    assert is_valid_domain("a1.b2.io")


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not a domain",
        "localhost",
        "example.c",
        "example.123",
        "-bad.com",
        "bad-.com",
        "under_score.com",
        "a" * 64 + ".com",
        "google.com\n",
        "goo\u212ale.com",
        "example.\u017fite",
        "\u0131nfo.com",
        "example.co\u212a",
    ],
)
def test_invalid_hostnames(value: str) -> None:
    assert not is_valid_domain(value)


def test_label_of_63_characters_is_accepted() -> None:
    assert is_valid_domain("a" * 63 + ".com")


def test_invalid_input_returns_cleaned_string() -> None:
    out = normalize_and_validate("not a domain")
    assert out == InvalidDomain(domain="not a domain")
    assert out.to_payload() == {"error": "Invalid domain format", "domain": "not a domain"}


def test_whitespace_only_input_does_not_raise() -> None:
    out = normalize_and_validate("   \t ")
    assert isinstance(out, InvalidDomain)
    assert out.domain == ""


def test_invalid_input_reports_post_cleanup_value() -> None:
    out = normalize_and_validate("https://bad_host.com/path")
    assert isinstance(out, InvalidDomain)
    assert out.domain == "bad_host.com"


def test_unicode_lookalike_letters_are_rejected() -> None:
    out = normalize_and_validate("https://goo\u212ale.com/")
    assert out == InvalidDomain(domain="goo\u212ale.com")


def test_unicode_lookalike_scheme_is_not_stripped() -> None:
    assert clean_domain("http\u017f://google.com") == "http\u017f:"

"""
Tests for the generator and search link builders.
"""

from __future__ import annotations

from core.config import FaviconConfig
from core.links import GENERATOR_FEATURES, generator_url, search_url

BASE = "https://favicon.test"
CONFIG = FaviconConfig(base_url=BASE)


def test_generator_url_defaults_to_english() -> None:
    link = generator_url(CONFIG)
    assert link.url == f"{BASE}/en/generator"


def test_generator_url_with_locale() -> None:
    assert generator_url(CONFIG, "zh").url.endswith("/zh/generator")


def test_generator_url_empty_locale_is_default() -> None:
    assert generator_url(CONFIG, "").url == f"{BASE}/en/generator"


def test_generator_payload_shape() -> None:
    payload = generator_url(CONFIG, "ja").to_payload()
    assert list(payload) == ["url", "description", "features"]
    assert payload["description"].startswith("Favicon Generator")
    assert payload["features"] == list(GENERATOR_FEATURES)
    assert len(payload["features"]) == 9


def test_search_url_with_query_and_locale() -> None:
    link = search_url(CONFIG, "acme.com", "ja")
    assert link.url == f"{BASE}/ja/search?q=acme.com"


def test_search_url_without_query() -> None:
    assert search_url(CONFIG).url == f"{BASE}/en/search"
    assert search_url(CONFIG, "").url == f"{BASE}/en/search"


def test_search_query_is_percent_encoded() -> None:
    link = search_url(CONFIG, "red & blue/icons?")
    assert link.url == f"{BASE}/en/search?q=red%20%26%20blue%2Ficons%3F"


def test_search_payload_shape() -> None:
    payload = search_url(CONFIG, "x.com").to_payload()
    assert list(payload) == ["url", "description"]
    assert payload["description"].startswith("Favicon Search")

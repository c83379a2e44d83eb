# =============================================================================
# core/links.py  -  Static Favicon.so Links (generator page, search page)
# =============================================================================
#
# Two tiny URL builders.  No network, no validation, no failure modes: the
# agent gets a link plus a description it can relay to the user.
#
# Locale handling is identical in both: None or "" → "en".  Locales are
# inserted as-is; Favicon.so serves its own 404 for unknown ones.
# =============================================================================

from typing import Optional

from core.config import FaviconConfig
from core.favicon import encode_component
from core.models import GeneratorLink, SearchLink


DEFAULT_LOCALE = "en"

GENERATOR_DESCRIPTION = (
    "Favicon Generator - Create custom favicons from text or SVG icons. "
    "Choose 1-2 characters, shape, font, and colors. Download all sizes "
    "(favicon.ico, apple-touch-icon, android-chrome, etc.) and HTML link tags."
)

GENERATOR_FEATURES = (
    "Text to favicon (letters, emoji)",
    "SVG icon to favicon",
    "Multiple shapes (square, circle, rounded)",
    "Custom fonts (Google Fonts)",
    "Custom colors (text and background)",
    "Transparent background support",
    "All standard favicon sizes generated",
    "ZIP download with all assets",
    "HTML link tags for easy integration",
)

SEARCH_DESCRIPTION = (
    "Favicon Search - Search and browse favicons by domain. "
    "Preview favicons at different sizes and download them."
)


def _locale_or_default(locale: Optional[str]) -> str:
    return locale or DEFAULT_LOCALE


def generator_url(config: FaviconConfig, locale: Optional[str] = None) -> GeneratorLink:
    """Link to the favicon generator page for the given locale."""
    lang = _locale_or_default(locale)
    return GeneratorLink(
        url=f"{config.base_url}/{lang}/generator",
        description=GENERATOR_DESCRIPTION,
        features=list(GENERATOR_FEATURES),
    )


def search_url(
    config: FaviconConfig,
    query: Optional[str] = None,
    locale: Optional[str] = None,
) -> SearchLink:
    """Link to the favicon search page, pre-filled with ``query`` if given."""
    url = f"{config.base_url}/{_locale_or_default(locale)}/search"
    if query:
        url += f"?q={encode_component(query)}"
    return SearchLink(url=url, description=SEARCH_DESCRIPTION)

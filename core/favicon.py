# =============================================================================
# core/favicon.py  -  Favicon Lookup (the only tool that touches the network)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Looks up a domain's favicon through the Favicon.so API and reshapes the
#   answer into a FaviconResult.
#
# THE FLOW:
#   1. normalize + validate the domain       (core/domain.py)
#        invalid → return InvalidDomain, no request is made
#   2. GET {base}/api/favicon?url=<domain>&raw=true
#        raw=true asks for JSON instead of a redirect to the image
#        redirects are followed; the final response is what counts
#   3. non-2xx → FaviconApiError
#   4. parse JSON, apply defaults           (core/models.py)
#   5. attach embedUrl / shortUrl            (pure URL templates)
#
#   Steps 2-4 share one except clause: a dead network, a 500, and a garbage
#   body all come back to the agent as the same FetchFailure.
#
# WHAT IT DOES NOT DO:
#   No caching, no retries, no custom timeout.  One call to lookup_favicon
#   is one HTTP request (or zero, if the domain is invalid).
# =============================================================================

from typing import Optional
from urllib.parse import quote

import httpx

from core.config import FaviconConfig
from core.domain import normalize_and_validate
from core.models import (
    FaviconApiResponse,
    FaviconResult,
    FetchFailure,
    InvalidDomain,
    LookupOutcome,
    UNKNOWN_FORMAT,
)


# Characters JavaScript's encodeURIComponent leaves alone (besides A-Z a-z 0-9)
_URI_COMPONENT_SAFE = "-_.!~*'()"


class FaviconApiError(Exception):
    """The API answered, but not with something we can use."""


def encode_component(value: str) -> str:
    """Percent-encode a single query-string or path component."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


# =============================================================================
# URL templates
# =============================================================================
def embed_url(config: FaviconConfig, domain: str) -> str:
    """Image URL for the domain's favicon (the API redirects to the icon)."""
    return f"{config.base_url}/api/favicon?url={encode_component(domain)}"


def api_url(config: FaviconConfig, domain: str) -> str:
    """JSON variant of embed_url, used for the actual lookup."""
    return f"{embed_url(config, domain)}&raw=true"


def short_url(config: FaviconConfig, domain: str) -> str:
    """Human-facing Favicon.so page for the domain."""
    return f"{config.base_url}/en/{encode_component(domain)}"


# =============================================================================
# Lookup
# =============================================================================
async def _fetch_favicon_json(
    config: FaviconConfig, domain: str, client: httpx.AsyncClient
) -> FaviconApiResponse:
    response = await client.get(
        api_url(config, domain),
        headers={"User-Agent": config.user_agent},
        follow_redirects=True,
    )
    if not response.is_success:
        raise FaviconApiError(f"API returned {response.status_code}")

    data = response.json()
    if not isinstance(data, dict):
        raise FaviconApiError(f"API returned unexpected payload type {type(data).__name__}")
    return FaviconApiResponse.from_json(data)


async def lookup_favicon(
    domain_input: str,
    config: FaviconConfig,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> LookupOutcome:
    """Find the favicon for a domain.

    Args:
        domain_input: Raw domain from the agent ("github.com",
                      "https://github.com/about", ...).
        config: Where the API lives and how we identify ourselves.
        client: Optional shared httpx.AsyncClient.  When omitted a client is
                opened for this one request and closed afterwards.

    Returns:
        FaviconResult on success, InvalidDomain if the input is not a
        hostname, FetchFailure if the API could not be reached or answered
        with an error or an unreadable body.
    """
    checked = normalize_and_validate(domain_input)
    if isinstance(checked, InvalidDomain):
        return checked
    domain = checked.value

    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                api_response = await _fetch_favicon_json(config, domain, own_client)
        else:
            api_response = await _fetch_favicon_json(config, domain, client)
    except (httpx.HTTPError, httpx.InvalidURL, FaviconApiError, ValueError) as exc:
        # ValueError covers json.JSONDecodeError and undecodable bodies
        return FetchFailure(domain=domain, message=str(exc) or type(exc).__name__)

    return FaviconResult(
        domain=domain,
        favicon_url=api_response.url,
        format=api_response.format or UNKNOWN_FORMAT,
        is_default=api_response.is_default,
        embed_url=embed_url(config, domain),
        short_url=short_url(config, domain),
    )

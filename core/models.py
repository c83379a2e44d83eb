# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every value that flows through a tool
# call.  Nothing here is persisted: each object is built for one invocation,
# serialized to JSON for the agent, and thrown away.
#
# TAGGED RESULTS:
#   get_favicon can end three ways, and each has its own class:
#     - FaviconResult   →  success
#     - InvalidDomain   →  the input failed the hostname grammar
#     - FetchFailure    →  network error, non-2xx status, or bad JSON body
#   LookupOutcome is the union of the three.  Callers branch on the type
#   (or just call .to_payload(), which every variant implements).
#
# WIRE FORMAT:
#   The agent-facing JSON uses camelCase keys (faviconUrl, isDefault, ...).
#   Python attributes stay snake_case; to_payload() does the renaming and
#   fixes the key order.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union


INVALID_DOMAIN_ERROR = "Invalid domain format"
FETCH_FAILED_ERROR = "Failed to fetch favicon"

# Substituted when the API response has no usable "format"
UNKNOWN_FORMAT = "unknown"


# -----------------------------------------------------------------------------
# NormalizedDomain - a cleaned domain that passed validation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class NormalizedDomain:
    """A hostname with scheme, path and query removed, known to be valid."""

    value: str                         # "google.com" (caller's casing kept)

    def __str__(self) -> str:
        return self.value


# -----------------------------------------------------------------------------
# InvalidDomain - validation failure (also a get_favicon outcome)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class InvalidDomain:
    """The cleaned input did not match the hostname grammar."""

    domain: str                        # The post-cleanup string that was rejected
    error: str = INVALID_DOMAIN_ERROR

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "domain": self.domain}


# -----------------------------------------------------------------------------
# FaviconApiResponse - what the remote API told us (untrusted)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FaviconApiResponse:
    """Parsed body of GET /api/favicon?raw=true.

    Every field is optional.  A missing or empty url/format is stored as
    None; a missing isDefault reads as False.
    """

    url: Optional[str] = None
    format: Optional[str] = None
    is_default: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "FaviconApiResponse":
        return cls(
            url=data.get("url") or None,
            format=data.get("format") or None,
            is_default=bool(data.get("isDefault")),
        )


# -----------------------------------------------------------------------------
# FaviconResult - successful get_favicon output
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FaviconResult:
    """Favicon details for one domain, ready to hand to the agent."""

    domain: str                        # The normalized domain
    favicon_url: Optional[str]         # Direct icon URL, or None if the API had none
    format: str                        # "png", "ico", "svg" ... or "unknown"
    is_default: bool                   # True when the API fell back to a generic icon
    embed_url: str                     # Usable as <img src> / <link rel="icon">
    short_url: str                     # Human-facing page for the domain

    def to_payload(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "faviconUrl": self.favicon_url,
            "format": self.format,
            "isDefault": self.is_default,
            "embedUrl": self.embed_url,
            "shortUrl": self.short_url,
        }


# -----------------------------------------------------------------------------
# FetchFailure - the remote call did not produce a usable answer
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FetchFailure:
    """Transport error, non-2xx status, or malformed body, collapsed into one."""

    domain: str
    message: str                       # Short human-readable cause, never empty
    error: str = FETCH_FAILED_ERROR

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.message, "domain": self.domain}


LookupOutcome = Union[FaviconResult, InvalidDomain, FetchFailure]


# -----------------------------------------------------------------------------
# Static link results
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GeneratorLink:
    """Where to send a user who wants to build their own favicon."""

    url: str
    description: str
    features: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "description": self.description,
            "features": list(self.features),
        }


@dataclass(frozen=True)
class SearchLink:
    """Where to send a user who wants to browse favicons."""

    url: str
    description: str

    def to_payload(self) -> dict[str, Any]:
        return {"url": self.url, "description": self.description}

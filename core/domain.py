# =============================================================================
# core/domain.py  -  Domain Normalization & Validation
# =============================================================================
#
# Agents pass domains in every shape imaginable: "google.com",
# "https://google.com/", "HTTP://Google.com/search?q=x", "  github.com  ".
# This module turns all of them into a bare hostname and checks it.
#
# CLEANUP (order matters):
#   1. strip surrounding whitespace
#   2. drop ONE leading "http://" or "https://" (any case)
#   3. cut at the first "/"
#   4. cut what is left at the first "?"
#
# VALIDATION:
#   Dot-separated labels of letters, digits and interior hyphens, each at
#   most 63 characters, ending in an alphabetic TLD of 2+ letters.  Matching
#   is case-insensitive over ASCII only (no Unicode folding, so the Kelvin
#   sign is not a "k"); the cleaned string keeps the caller's casing.
#
# Invalid input is a normal result (InvalidDomain), never an exception.
# =============================================================================

import re
from typing import Union

from core.models import InvalidDomain, NormalizedDomain


_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE | re.ASCII)

_HOSTNAME_RE = re.compile(
    r"^([a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,}$",
    re.IGNORECASE | re.ASCII,
)


def clean_domain(raw: str) -> str:
    """Strip whitespace, scheme, path and query from a raw domain string."""
    cleaned = _SCHEME_RE.sub("", raw.strip(), count=1)
    cleaned = cleaned.split("/", 1)[0]
    return cleaned.split("?", 1)[0]


def is_valid_domain(value: str) -> bool:
    """Check an already-cleaned string against the hostname grammar."""
    # fullmatch: "$" alone would accept a trailing newline
    return _HOSTNAME_RE.fullmatch(value) is not None


def normalize_and_validate(raw: str) -> Union[NormalizedDomain, InvalidDomain]:
    """Clean a caller-supplied domain and validate the result.

    Args:
        raw: Whatever the agent passed, e.g. "https://google.com/path?x=1".

    Returns:
        NormalizedDomain("google.com") on success, or InvalidDomain carrying
        the cleaned string that failed the grammar.
    """
    cleaned = clean_domain(raw)
    if not is_valid_domain(cleaned):
        return InvalidDomain(domain=cleaned)
    return NormalizedDomain(cleaned)

# =============================================================================
# core/config.py  -  Server Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the one piece of configuration the favicon tools need: where the
#   Favicon.so API lives, plus the client header we send with every request.
#
# ENVIRONMENT:
#   FAVICON_API_BASE   Base URL of the Favicon.so deployment
#                      (default: https://favicon.so)
#
#   main.py loads a local .env file (python-dotenv) before calling
#   FaviconConfig.from_env(), so the override can live there too.
#
# The config object is frozen and passed explicitly into every core function
# and into the server factory.  Nothing in core/ reads os.environ on its own.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_API_BASE = "https://favicon.so"
DEFAULT_USER_AGENT = "favicon-mcp-server/1.0"

# Environment variable that overrides DEFAULT_API_BASE
API_BASE_ENV_VAR = "FAVICON_API_BASE"


@dataclass(frozen=True)
class FaviconConfig:
    """Read-only settings shared by every tool invocation."""

    base_url: str = DEFAULT_API_BASE
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        # "https://favicon.so/" and "https://favicon.so" build the same URLs
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FaviconConfig":
        """Build a config from the process environment.

        An unset or empty FAVICON_API_BASE falls back to the production host.

        Args:
            environ: Mapping to read from.  Defaults to os.environ; tests pass
                     a plain dict instead of patching the real environment.
        """
        env = os.environ if environ is None else environ
        base_url = env.get(API_BASE_ENV_VAR, "").strip() or DEFAULT_API_BASE
        return cls(base_url=base_url)

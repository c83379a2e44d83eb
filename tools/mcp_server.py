# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the three Favicon.so tools with a FastMCP server.  Each tool is
#   a thin wrapper around a core/ function: it logs the call, runs the core
#   logic, and turns the result into the text block the agent receives.
#
# HOW IT WORKS (the flow):
#   1. The agent decides it needs a favicon (or a generator/search link)
#   2. It calls a tool by name via MCP (e.g., "get_favicon")
#   3. FastMCP routes the call to the decorated function below
#   4. The function calls core/, serializes the result, and returns it
#
# TOOLS:
#   - get_favicon                → favicon URL, format, embed/short URLs
#   - get_favicon_generator_url  → link to the favicon generator
#   - search_favicons            → link to the favicon search page
#
# OUTPUT CONTRACT:
#   Every tool returns ONE text block holding pretty-printed JSON (2-space
#   indent).  Errors from get_favicon use the same channel:
#     {"error": "Invalid domain format", "domain": ...}
#     {"error": "Failed to fetch favicon", "message": ..., "domain": ...}
#
# RUNNING THIS SERVER:
#   python main.py           (loads .env, then serves over stdio)
# =============================================================================

import json
import logging
import sys
from typing import Any, Optional

from fastmcp import FastMCP

from core.config import FaviconConfig
from core.favicon import lookup_favicon
from core.links import generator_url, search_url
from core.models import FaviconResult, FetchFailure, InvalidDomain

SERVER_NAME = "favicon-so"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# Anything we print to stdout would corrupt the JSON-RPC stream.
#
# Colors: CYAN = incoming call, YELLOW = progress, GREEN = response.
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, payload: dict[str, Any]) -> str:
    """Log the payload as compact JSON in GREEN, return it pretty-printed."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(payload, separators=(',', ':'))}{_RESET}")
    return to_text(payload)


def to_text(payload: dict[str, Any]) -> str:
    """Serialize a tool payload the way agents receive it."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


# =============================================================================
# Server factory
# =============================================================================
# The config is captured once, here, and shared read-only by every call.
# Tests build their own server with a fake base URL; main.py builds the real
# one from the environment.
# =============================================================================
def create_server(config: FaviconConfig) -> FastMCP:
    """Build a FastMCP server exposing the Favicon.so tools."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    # =========================================================================
    # TOOL 1: get_favicon
    # =========================================================================
    @mcp.tool()
    async def get_favicon(domain: str) -> str:
        """Get the favicon for any website domain. Returns the favicon URL, format, and an embed URL that can be used directly in HTML img tags or link rel='icon'.

        Args:
            domain: The domain to fetch the favicon for (e.g. 'google.com', 'github.com')
        """
        _log_request("get_favicon", domain=domain)

        outcome = await lookup_favicon(domain, config)
        if isinstance(outcome, InvalidDomain):
            _log_status(f"Rejected {outcome.domain!r}: not a valid domain")
        elif isinstance(outcome, FetchFailure):
            _log_status(f"API lookup for {outcome.domain} failed: {outcome.message}")
        elif isinstance(outcome, FaviconResult):
            _log_status(f"Found {outcome.format} favicon for {outcome.domain} "
                        f"(default={outcome.is_default})")
        return _log_response("get_favicon", outcome.to_payload())

    # =========================================================================
    # TOOL 2: get_favicon_generator_url
    # =========================================================================
    @mcp.tool()
    async def get_favicon_generator_url(locale: Optional[str] = None) -> str:
        """Get the URL to the Favicon.so favicon generator. Use this when the user wants to create a custom favicon from text or SVG icons. The generator allows choosing characters, shapes, fonts, and colors to create favicon packages.

        Args:
            locale: Optional locale code for the generator page (e.g. 'en', 'zh', 'ja'). Defaults to 'en'.
        """
        _log_request("get_favicon_generator_url", locale=locale)
        link = generator_url(config, locale)
        return _log_response("get_favicon_generator_url", link.to_payload())

    # =========================================================================
    # TOOL 3: search_favicons
    # =========================================================================
    @mcp.tool()
    async def search_favicons(query: Optional[str] = None, locale: Optional[str] = None) -> str:
        """Get the URL to search and browse favicons on Favicon.so. Useful when the user wants to explore favicons from popular websites.

        Args:
            query: Optional search query (domain name)
            locale: Optional locale code (e.g. 'en', 'zh'). Defaults to 'en'.
        """
        _log_request("search_favicons", query=query, locale=locale)
        link = search_url(config, query, locale)
        return _log_response("search_favicons", link.to_payload())

    return mcp

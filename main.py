# =============================================================================
# main.py  -  Entry Point for the Favicon.so MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#   (or, once installed:  favicon-so-mcp)
#
# WHAT HAPPENS:
#   1. Loads a local .env file, if any (FAVICON_API_BASE can live there)
#   2. Builds the immutable FaviconConfig from the environment
#   3. Creates the FastMCP server with the three favicon tools
#   4. Serves MCP over stdin/stdout until the client disconnects
#
# CONNECTING AN MCP CLIENT:
#   Point the client at this script with stdio transport, e.g.
#     {"command": "uv", "args": ["run", "python", "/path/to/main.py"]}
#
# FAILURE:
#   Anything that goes wrong before or while setting up the transport is
#   logged to stderr and the process exits with status 1.  Errors inside a
#   tool call never reach this level: get_favicon turns them into JSON.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

from core.config import FaviconConfig
from tools.mcp_server import create_server


def main() -> None:
    """Load configuration, then run the MCP server on stdio."""
    # Must happen BEFORE FaviconConfig.from_env() reads os.environ
    load_dotenv()

    try:
        config = FaviconConfig.from_env()
        server = create_server(config)
        logging.info("Favicon.so MCP Server starting on stdio")
        server.run(transport="stdio")
    except Exception as e:
        logging.error(f"Fatal error in main(): {e}")
        sys.exit(1)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()

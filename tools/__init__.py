# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  Each tool:
#     1. Calls a function from core/
#     2. Logs the call and its outcome to stderr
#     3. Serializes the result to the pretty-printed JSON text the agent reads
#
#   The tool docstrings double as the descriptions the agent sees, so they
#   say WHEN to call each tool, not how it works.
# =============================================================================

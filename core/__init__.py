# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the favicon logic: domain cleanup, the API
# lookup, and the static link builders.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  The tools/ layer wraps these
#   functions as MCP tools; everything here can be called (and tested)
#   directly with a FaviconConfig.
# =============================================================================

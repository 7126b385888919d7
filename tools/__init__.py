# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the request boundary of the shopping engine.
#
#   schemas.py     pydantic validation of requests and catalog rows
#   commerce.py    action dispatch + wire serialization (no FastMCP)
#   mcp_server.py  the FastMCP server exposing the `commerce` tool
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT search, score or estimate anything (that's core/)
#   - They do NOT know about Google ADK (that's agent/)
# =============================================================================

# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# The agent decides WHICH commerce action to call and explains the answer
# to the user.  It holds no search, scoring or emission logic: that lives
# in core/, reached through the MCP server in tools/.
# =============================================================================

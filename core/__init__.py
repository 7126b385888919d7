# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL decision logic for the shopping assistant:
# catalog store, search filter, budget scorer, ranker, emission estimator.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, pydantic, Google ADK or any
#   other framework.  Every module here is plain Python and can be used
#   from a bare REPL with no network access.
#
#   Request validation lives in tools/schemas.py; by the time data reaches
#   core/ it is already well-typed.
# =============================================================================

# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server for the shopping engine
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the engine as ONE MCP tool, `commerce`, with an `action`
#   discriminator, plus a `status://health` resource.
#
# HOW IT WORKS (the flow):
#   1. At startup the catalog is loaded and validated once (build_engine).
#   2. A client calls `commerce` with {"action": "...", ...}.
#   3. The arguments are forwarded to tools/commerce.dispatch, which
#      validates them, calls the engine and serializes the result.
#   4. Errors come back as {"error": "..."} inside a normal response.
#
# RUNNING THIS SERVER (from the project root):
#     python -m tools.mcp_server
#   The agent in agent/shopping_agent.py starts it the same way over stdio.
#
# PARAMETER NAMES:
#   The tool parameters keep their camelCase wire names (productId,
#   budgetMaxINR, ...) because they ARE the public contract.
# =============================================================================

import json
import logging
import os
import sys
from typing import Any, Optional, Union

from dotenv import load_dotenv
from fastmcp import FastMCP

from tools.commerce import build_engine, dispatch

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP transport, so every log line goes to STDERR.
#   - CYAN for incoming requests
#   - GREEN for responses
#   - YELLOW for status messages
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=os.environ.get("COMMERCE_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result):
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


# =============================================================================
# Server + engine
# =============================================================================
mcp = FastMCP("agentic-shopping-mcp")
engine = build_engine()
_log_status(f"Catalog loaded with {len(engine.catalog.products)} products")


@mcp.resource("status://health")
def health() -> str:
    """Liveness probe."""
    return "OK: server alive"


# =============================================================================
# TOOL: commerce
# =============================================================================
@mcp.tool()
def commerce(
    action: str,
    message: Optional[str] = None,
    query: Optional[str] = None,
    filters: Optional[dict[str, Any]] = None,
    productId: Optional[str] = None,
    limit: Optional[int] = None,
    budgetMaxINR: Optional[float] = None,
    featurePref: Optional[str] = None,
    topK: Optional[int] = None,
    weightKg: Optional[float] = None,
    distanceKm: Optional[float] = None,
    transport: Optional[str] = None,
    packaging: Optional[str] = None,
    packagingWeightKg: Optional[float] = None,
) -> Union[dict[str, Any], list[dict[str, Any]]]:
    """Unified shopping tool: search the catalog, rank products under a budget,
    and estimate the delivery carbon footprint.

    Actions and their arguments:
      - ping: health check, returns "pong".
      - echo(message): returns the message back.
      - search(query, filters): filters = {category, brand, budgetMaxINR,
        minRating}.  Results are ordered by rating (best first), then price
        (cheapest first).
      - details(productId): one product with reviewCount and avgReviewRating.
      - reviews(productId, limit=10): the product's reviews.
      - budget_top(query, budgetMaxINR, featurePref, topK=3, filters):
        the best products within budget.  featurePref is one of camera,
        battery, display, performance.  topK is capped at 10.  Each result
        has a score and a human-readable reason.
      - sustainability(weightKg=0.5, distanceKm=800, transport="road",
        packaging="cardboard", packagingWeightKg=0.2): CO2e estimate in
        grams and kilograms.  transport is air, road, rail or sea; packaging
        is plastic, paper, cardboard or mixed.

    Returns:
        The action's JSON payload, {"error": "..."} when the request is
        invalid or the product is unknown, or {"message": "unknown action"}.
    """
    arguments = {
        "action": action,
        "message": message,
        "query": query,
        "filters": filters,
        "productId": productId,
        "limit": limit,
        "budgetMaxINR": budgetMaxINR,
        "featurePref": featurePref,
        "topK": topK,
        "weightKg": weightKg,
        "distanceKm": distanceKm,
        "transport": transport,
        "packaging": packaging,
        "packagingWeightKg": packagingWeightKg,
    }
    arguments = {k: v for k, v in arguments.items() if v is not None}
    _log_request("commerce", **arguments)

    result = dispatch(engine, arguments)
    if isinstance(result, dict) and "error" in result:
        _log_status(f"Request failed: {result['error']}")
    return _log_response("commerce", result)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()

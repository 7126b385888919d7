# =============================================================================
# tools/commerce.py  —  Action dispatch for the `commerce` tool
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Turns one JSON-shaped request {"action": ..., ...} into one JSON-shaped
#   response.  It is the only place that knows the wire format:
#
#     ping            → {"message": "pong"}
#     echo            → {"message": "echo: <message>"}
#     search          → {"total", "products"}
#     details         → product + {"reviewCount", "avgReviewRating"}
#     reviews         → [review, ...]
#     budget_top      → {"request", "results"}
#     sustainability  → {"meta", "inputs", "factors", "breakdown", "totals", "notes"}
#     anything else   → {"message": "unknown action", "action": ...}
#
# ERRORS:
#   CommerceError (not found, invalid request) becomes {"error": "..."}.
#   The server process never crashes on a bad request.
#
# This module has no FastMCP dependency so it can be tested directly.
# =============================================================================

import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional, Union

from core import catalog as catalog_store
from core import sustainability
from core.engine import CommerceEngine, CommerceProvider, DEFAULT_REVIEW_LIMIT
from core.errors import CommerceError, RequestValidationError
from core.models import FootprintReport, Product, RankedResult, Review
from core.ranking import clamp_top_k
from tools.schemas import CommerceRequest, build_catalog, parse_request

logger = logging.getLogger(__name__)

Response = Union[dict[str, Any], list[dict[str, Any]]]


def build_engine(data_dir: Optional[Path] = None) -> CommerceEngine:
    """Load, validate and wrap the catalog.  Called once per process."""
    raw_products, raw_reviews = catalog_store.load(data_dir)
    catalog = build_catalog(raw_products, raw_reviews)
    logger.info(
        "Catalog ready: %d products, reviews for %d products",
        len(catalog.products), len(catalog.reviews_by_product_id),
    )
    return CommerceEngine(catalog)


# -----------------------------------------------------------------------------
# Serialization (dataclass → wire dict)
# -----------------------------------------------------------------------------
def product_to_wire(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "title": product.title,
        "brand": product.brand,
        "category": product.category,
        "priceINR": product.price_inr,
        "rating": product.rating,
        "ratingCount": product.rating_count,
        "specs": dict(product.specs),
        "images": list(product.images),
        "url": product.url,
    }


def review_to_wire(review: Review) -> dict[str, Any]:
    return {
        "productId": review.product_id,
        "stars": review.stars,
        "title": review.title,
        "text": review.text,
        "aspect": review.aspect,
    }


def ranked_to_wire(result: RankedResult) -> dict[str, Any]:
    p = result.product
    return {
        "id": p.id,
        "title": p.title,
        "brand": p.brand,
        "priceINR": p.price_inr,
        "rating": p.rating,
        "url": p.url,
        "images": list(p.images),
        "score": round(result.score, 3),
        "reason": result.reason,
    }


def footprint_to_wire(report: FootprintReport) -> dict[str, Any]:
    meta = {}
    conn_id = os.environ.get("COMMERCE_CONN_ID")
    if conn_id:
        meta["connId"] = conn_id

    return {
        "meta": meta,
        "inputs": {
            "weightKg": report.weight_kg,
            "distanceKm": report.distance_km,
            "transport": report.transport,
            "packaging": report.packaging,
            "packagingWeightKg": report.packaging_weight_kg,
        },
        "factors": {
            "transport_gCO2e_per_tkm": report.shipping.factor_g_per_tkm,
            "packaging_gCO2e_per_kg": report.packaging_estimate.factor_g_per_kg,
            "tonneKm": report.shipping.tonne_km,
        },
        "breakdown": {
            "shipping_gCO2e": sustainability.round_half_up(report.shipping.grams_co2e),
            "packaging_gCO2e": sustainability.round_half_up(report.packaging_estimate.grams_co2e),
        },
        "totals": {
            "total_gCO2e": report.total_g_co2e,
            "total_kgCO2e": report.total_kg_co2e,
        },
        "notes": report.notes,
    }


# -----------------------------------------------------------------------------
# Action handlers
# -----------------------------------------------------------------------------
def _require_product_id(request: CommerceRequest) -> str:
    if not request.product_id:
        raise RequestValidationError(f"productId is required for {request.action}")
    return request.product_id


def _ping(engine: CommerceProvider, request: CommerceRequest) -> Response:
    return {"message": "pong"}


def _echo(engine: CommerceProvider, request: CommerceRequest) -> Response:
    return {"message": f"echo: {request.message or ''}"}


def _search(engine: CommerceProvider, request: CommerceRequest) -> Response:
    filters = request.filters.to_filters() if request.filters else None
    result = engine.search(request.query or "", filters)
    return {
        "total": result.total,
        "products": [product_to_wire(p) for p in result.products],
    }


def _details(engine: CommerceProvider, request: CommerceRequest) -> Response:
    details = engine.details(_require_product_id(request))
    payload = product_to_wire(details.product)
    payload["reviewCount"] = details.review_count
    payload["avgReviewRating"] = details.avg_review_rating
    return payload


def _reviews(engine: CommerceProvider, request: CommerceRequest) -> Response:
    product_id = _require_product_id(request)
    limit = request.limit if request.limit is not None else DEFAULT_REVIEW_LIMIT
    return [review_to_wire(r) for r in engine.reviews(product_id, limit)]


def _budget_top(engine: CommerceProvider, request: CommerceRequest) -> Response:
    filters = request.filters.to_filters() if request.filters else None
    budget = request.budget_max_inr
    if budget is None and filters is not None:
        budget = filters.budget_max_inr
    top_k = clamp_top_k(request.top_k)
    query = request.query or ""

    results = engine.budget_top(
        query=query,
        budget_max_inr=budget,
        feature_pref=request.feature_pref,
        top_k=top_k,
        filters=filters,
    )
    return {
        "request": {
            "query": query,
            "budgetMaxINR": budget,
            "featurePref": request.feature_pref,
            "topK": top_k,
            "minRating": filters.min_rating if filters else None,
        },
        "results": [ranked_to_wire(r) for r in results],
    }


def _sustainability(engine: CommerceProvider, request: CommerceRequest) -> Response:
    def pick(value, default):
        return default if value is None else value

    report = engine.sustainability(
        weight_kg=pick(request.weight_kg, sustainability.DEFAULT_WEIGHT_KG),
        distance_km=pick(request.distance_km, sustainability.DEFAULT_DISTANCE_KM),
        transport=pick(request.transport, sustainability.DEFAULT_TRANSPORT),
        packaging=pick(request.packaging, sustainability.DEFAULT_PACKAGING),
        packaging_weight_kg=pick(request.packaging_weight_kg, sustainability.DEFAULT_PACKAGING_WEIGHT_KG),
    )
    return footprint_to_wire(report)


_HANDLERS: dict[str, Callable[[CommerceProvider, CommerceRequest], Response]] = {
    "ping": _ping,
    "echo": _echo,
    "search": _search,
    "details": _details,
    "reviews": _reviews,
    "budget_top": _budget_top,
    "sustainability": _sustainability,
}

ACTIONS: tuple[str, ...] = tuple(_HANDLERS)


def dispatch(engine: CommerceProvider, arguments: Any) -> Response:
    """Run one commerce action and return its JSON-shaped response."""
    try:
        request = parse_request(arguments)
        handler = _HANDLERS.get(request.action)
        if handler is None:
            return {"message": "unknown action", "action": request.action}
        return handler(engine, request)
    except CommerceError as exc:
        logger.info("commerce request rejected: %s", exc)
        return {"error": str(exc)}

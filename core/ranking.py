# =============================================================================
# core/ranking.py  —  Recommendation Ranker (budget_top)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Composes the Search Filter and the Budget Scorer:
#     1. Merge the explicit budget into the filters (explicit wins).
#     2. Search with those effective filters → candidates.
#     3. Score every candidate, sort by score descending.  Python's sort is
#        stable, so exact ties keep the search order.
#     4. Keep the first top_k (clamped to 1..10, default 3).
#
#   Because the search already drops over-budget items, the price penalty
#   is normally zero here.  The scorer still handles it for direct callers.
# =============================================================================

from dataclasses import replace
from typing import Optional

from core.catalog import Catalog
from core.models import FeaturePreference, Filters, Product, RankedResult, ScoreBreakdown
from core.scoring import score_product_for_budget
from core.search import search

DEFAULT_TOP_K = 3
MAX_TOP_K = 10


def clamp_top_k(top_k: Optional[int]) -> int:
    """Missing or non-positive → 3; anything above 10 → 10."""
    if top_k is None or top_k <= 0:
        return DEFAULT_TOP_K
    return min(int(top_k), MAX_TOP_K)


def effective_filters(filters: Optional[Filters], budget_max_inr: Optional[float]) -> Filters:
    filters = filters or Filters()
    if budget_max_inr is None:
        return replace(filters)
    return replace(filters, budget_max_inr=budget_max_inr)


def format_number(value: float) -> str:
    """Render 13999.0 as "13999" and 4.3 as "4.3"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def build_reason(product: Product, breakdown: ScoreBreakdown) -> str:
    parts = [
        f"rating={format_number(breakdown.rating)}",
        f"price={format_number(product.price_inr)}",
    ]
    if breakdown.feature_bonus > 0:
        parts.append(f"featureMatch=+{breakdown.feature_bonus:.2f}")
    if breakdown.price_penalty > 0:
        parts.append(f"pricePenalty=-{breakdown.price_penalty:.2f}")
    return ", ".join(parts)


def budget_top(
    catalog: Catalog,
    query: str = "",
    budget_max_inr: Optional[float] = None,
    feature_pref: Optional[FeaturePreference] = None,
    top_k: Optional[int] = DEFAULT_TOP_K,
    filters: Optional[Filters] = None,
) -> list[RankedResult]:
    """Rank the best products under a budget.

    Args:
        catalog: The store to rank from.
        query: Free-text query passed to search.
        budget_max_inr: Explicit ceiling; overrides filters.budget_max_inr.
        feature_pref: Optional feature to bias towards.
        top_k: Number of results wanted (clamped to 1..10).
        filters: Extra structured filters.

    Returns:
        Up to top_k RankedResults, best first.
    """
    k = clamp_top_k(top_k)
    merged = effective_filters(filters, budget_max_inr)
    candidates = search(catalog, query, merged).products

    ranked = []
    for product in candidates:
        breakdown = score_product_for_budget(product, feature_pref, merged.budget_max_inr)
        ranked.append(RankedResult(
            product=product,
            breakdown=breakdown,
            reason=build_reason(product, breakdown),
        ))

    ranked.sort(key=lambda r: r.score, reverse=True)
    return ranked[:k]

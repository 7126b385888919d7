# =============================================================================
# core/scoring.py  —  Budget Scorer
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Computes a composite ranking score for ONE product given an optional
#   feature preference and an optional budget ceiling:
#
#       score = rating + feature_bonus - price_penalty
#
#   rating          0 – 5, taken verbatim (the dominant term)
#   feature_bonus   0 – 0.8
#                     +0.6 if the preference keyword appears in the haystack
#                     +0.2 if a preference-specific hint pattern matches
#   price_penalty   0 – 1.5
#                     0 when no budget or price <= budget, otherwise
#                     min(1.5, (price - budget) / max(1, budget) * 2)
#
# THE HAYSTACK:
#   The first non-empty of the camera / battery / display specs, prefixed
#   with its spec name, followed by the title, all lower-cased.  A phone
#   whose leading spec is its camera therefore matches the "camera"
#   keyword even when the spec text itself never says "camera".
#
# The score is unbounded and only meaningful relative to other scores in
# the same request.  This is a pure function: same inputs, same output.
# =============================================================================

import re
from typing import Optional

from core.models import FeaturePreference, Product, ScoreBreakdown

KEYWORD_BONUS = 0.6
HINT_BONUS = 0.2
MAX_PRICE_PENALTY = 1.5

_HAYSTACK_SPECS = ("camera", "battery", "display")

_HINT_PATTERNS: dict[str, re.Pattern] = {
    "camera": re.compile(r"ois|mp|ultra-wide|telephoto"),
    "battery": re.compile(r"5000|6000|mah|fast\s*charge"),
    "display": re.compile(r"amoled|oled|120hz|90hz|hdr"),
    "performance": re.compile(r"snapdragon|dimensity|8gb|12gb"),
}


def feature_haystack(product: Product) -> str:
    lead = ""
    for name in _HAYSTACK_SPECS:
        value = product.specs.get(name)
        if value:
            lead = f"{name} {value}"
            break
    return f"{lead} {product.title or ''}".lower()


def feature_bonus(product: Product, feature_pref: Optional[FeaturePreference]) -> float:
    if not feature_pref:
        return 0.0

    pref = feature_pref.lower()
    haystack = feature_haystack(product)

    bonus = 0.0
    if pref in haystack:
        bonus += KEYWORD_BONUS
    pattern = _HINT_PATTERNS.get(pref)
    if pattern is not None and pattern.search(haystack):
        bonus += HINT_BONUS
    # Snap to two decimals so 0.6 + 0.2 compares equal to 0.8
    return round(bonus, 2)


def price_penalty(price_inr: float, budget_max_inr: Optional[float]) -> float:
    if budget_max_inr is None or price_inr <= budget_max_inr:
        return 0.0
    over = price_inr - budget_max_inr
    return min(MAX_PRICE_PENALTY, over / max(1.0, budget_max_inr) * 2)


def score_product_for_budget(
    product: Product,
    feature_pref: Optional[FeaturePreference] = None,
    budget_max_inr: Optional[float] = None,
) -> ScoreBreakdown:
    """Score one product for a budget_top request.

    Args:
        product: The candidate.
        feature_pref: camera / battery / display / performance, or None.
        budget_max_inr: Price ceiling, or None for "no budget".

    Returns:
        ScoreBreakdown with every term and the final score.
    """
    rating = float(product.rating or 0.0)
    bonus = feature_bonus(product, feature_pref)
    penalty = price_penalty(product.price_inr, budget_max_inr)
    return ScoreBreakdown(
        rating=rating,
        feature_bonus=bonus,
        price_penalty=penalty,
        score=rating + bonus - penalty,
    )

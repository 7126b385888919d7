# =============================================================================
# core/search.py  —  Search Filter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Applies a free-text query plus structured filters to the catalog.
#
#   Text match:  the trimmed, lower-cased query must be a substring of
#                "<title> <brand> <spec values...>" (lower-cased).
#                An empty query matches everything.
#   Filters:     category / brand (case-insensitive equality), price
#                ceiling, rating floor.  All AND-ed; unset means no constraint.
#   Ordering:    rating desc, then price asc, then id asc — a strict total
#                order, so identical inputs always give identical output.
#
# No pagination here: budget_top truncates after scoring.
# =============================================================================

from typing import Optional

from core.catalog import Catalog
from core.models import Filters, Product, SearchResult


def _haystack(product: Product) -> str:
    parts = [product.title or "", product.brand or "", " ".join(product.specs.values())]
    return " ".join(parts).lower()


def matches_filters(product: Product, filters: Filters) -> bool:
    """True when `product` satisfies every active constraint in `filters`."""
    if filters.category and (product.category or "").lower() != filters.category.lower():
        return False
    if filters.brand and (product.brand or "").lower() != filters.brand.lower():
        return False
    if filters.budget_max_inr is not None and product.price_inr > filters.budget_max_inr:
        return False
    if filters.min_rating is not None and product.rating < filters.min_rating:
        return False
    return True


def sort_key(product: Product) -> tuple[float, float, str]:
    return (-product.rating, product.price_inr, product.id)


def search(catalog: Catalog, query: str = "", filters: Optional[Filters] = None) -> SearchResult:
    """Filter and order the catalog.

    Args:
        catalog: The store to search.
        query: Free text; trimmed and lower-cased before matching.
        filters: Optional structured constraints.

    Returns:
        SearchResult with the total match count and the ordered products.
    """
    filters = filters or Filters()
    q = (query or "").strip().lower()

    matched = [
        p for p in catalog.products
        if (not q or q in _haystack(p)) and matches_filters(p, filters)
    ]
    matched.sort(key=sort_key)
    return SearchResult(total=len(matched), products=matched)

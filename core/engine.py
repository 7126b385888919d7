# =============================================================================
# core/engine.py  —  CommerceEngine: the single capability interface
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Bundles search, details, reviews, budget_top and sustainability behind
#   one object that owns an injected, read-only Catalog.
#
#   Callers (the MCP tool, tests, scripts) depend on the CommerceProvider
#   protocol, not on this class, so a test double or another catalog
#   backend can be dropped in without touching them.
#
#   The engine holds no mutable state after construction.  Concurrent
#   requests can share one instance without locking.
# =============================================================================

from typing import Optional, Protocol

from core import ranking, search as search_module, sustainability as emissions
from core.catalog import Catalog
from core.errors import ProductNotFoundError
from core.models import (
    FeaturePreference,
    Filters,
    FootprintReport,
    ProductDetails,
    RankedResult,
    Review,
    SearchResult,
)

DEFAULT_REVIEW_LIMIT = 10


class CommerceProvider(Protocol):
    def search(self, query: str = "", filters: Optional[Filters] = None) -> SearchResult: ...

    def details(self, product_id: str) -> ProductDetails: ...

    def reviews(self, product_id: str, limit: int = DEFAULT_REVIEW_LIMIT) -> list[Review]: ...

    def budget_top(
        self,
        query: str = "",
        budget_max_inr: Optional[float] = None,
        feature_pref: Optional[FeaturePreference] = None,
        top_k: Optional[int] = ranking.DEFAULT_TOP_K,
        filters: Optional[Filters] = None,
    ) -> list[RankedResult]: ...

    def sustainability(
        self,
        weight_kg: float = emissions.DEFAULT_WEIGHT_KG,
        distance_km: float = emissions.DEFAULT_DISTANCE_KM,
        transport: str = emissions.DEFAULT_TRANSPORT,
        packaging: str = emissions.DEFAULT_PACKAGING,
        packaging_weight_kg: float = emissions.DEFAULT_PACKAGING_WEIGHT_KG,
    ) -> FootprintReport: ...


class CommerceEngine:
    """Ranking and estimation engine over one in-memory catalog."""

    def __init__(self, catalog: Catalog):
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def search(self, query: str = "", filters: Optional[Filters] = None) -> SearchResult:
        return search_module.search(self._catalog, query, filters)

    def details(self, product_id: str) -> ProductDetails:
        """Return the product plus review count and average stars.

        Raises:
            ProductNotFoundError: when product_id is not in the catalog.
        """
        product = self._catalog.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        revs = self._catalog.reviews_for(product_id)
        avg = sum(r.stars for r in revs) / len(revs) if revs else None
        return ProductDetails(product=product, review_count=len(revs), avg_review_rating=avg)

    def reviews(self, product_id: str, limit: int = DEFAULT_REVIEW_LIMIT) -> list[Review]:
        """Return at most max(0, limit) reviews in stored order.

        Reviews whose product is missing from the catalog are still served.

        Raises:
            ProductNotFoundError: when the id is unknown to both the catalog
                and the review index.
        """
        if self._catalog.get_product(product_id) is None and not self._catalog.has_reviews_for(product_id):
            raise ProductNotFoundError(product_id)
        return list(self._catalog.reviews_for(product_id)[:max(0, limit)])

    def budget_top(
        self,
        query: str = "",
        budget_max_inr: Optional[float] = None,
        feature_pref: Optional[FeaturePreference] = None,
        top_k: Optional[int] = ranking.DEFAULT_TOP_K,
        filters: Optional[Filters] = None,
    ) -> list[RankedResult]:
        return ranking.budget_top(
            self._catalog,
            query=query,
            budget_max_inr=budget_max_inr,
            feature_pref=feature_pref,
            top_k=top_k,
            filters=filters,
        )

    def sustainability(
        self,
        weight_kg: float = emissions.DEFAULT_WEIGHT_KG,
        distance_km: float = emissions.DEFAULT_DISTANCE_KM,
        transport: str = emissions.DEFAULT_TRANSPORT,
        packaging: str = emissions.DEFAULT_PACKAGING,
        packaging_weight_kg: float = emissions.DEFAULT_PACKAGING_WEIGHT_KG,
    ) -> FootprintReport:
        return emissions.estimate_footprint(
            weight_kg=weight_kg,
            distance_km=distance_km,
            transport=transport,
            packaging=packaging,
            packaging_weight_kg=packaging_weight_kg,
        )

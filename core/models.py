# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the shopping engine)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through the
# engine.  They carry no behavior beyond tiny convenience helpers.
#
# TWO LIFETIMES:
#   - Product and Review are loaded once at startup and never change.
#     They are frozen so nothing downstream can mutate the catalog.
#   - Everything else (Filters, ScoreBreakdown, RankedResult, the emission
#     estimates) is computed fresh per request and thrown away.
#
# NAMING:
#   Python fields are snake_case.  The camelCase wire names (priceINR,
#   ratingCount, ...) only exist at the tools/ boundary.
# =============================================================================

from dataclasses import dataclass, field
from typing import Literal, Optional


FeaturePreference = Literal["camera", "battery", "display", "performance"]
TransportMode = Literal["air", "road", "rail", "sea"]
PackagingType = Literal["plastic", "paper", "cardboard", "mixed"]
Category = Literal["mobiles", "skincare", "other"]


# -----------------------------------------------------------------------------
# Product — one catalog entry
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Product:
    """A purchasable item in the catalog.

    `id` is unique across the catalog and `rating` is always within [0, 5]
    (clamped when the catalog is validated).
    """

    id: str
    title: str
    price_inr: float                   # Non-negative, Indian rupees
    url: str
    brand: Optional[str] = None
    category: str = "other"            # mobiles / skincare / other
    rating: float = 0.0                # 0.0 – 5.0
    rating_count: int = 0
    specs: dict[str, str] = field(default_factory=dict)
    # e.g. {"camera": "50MP OIS main", "battery": "5000 mAh", ...}
    images: tuple[str, ...] = ()


# -----------------------------------------------------------------------------
# Review — one customer review, read-only from the engine's point of view
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Review:
    """A single review.  `product_id` may point at a product that is not in
    the catalog; orphaned reviews are tolerated."""

    product_id: str
    stars: int                         # 1 – 5
    title: str = ""
    text: str = ""
    aspect: Optional[str] = None       # camera / battery / display / performance / freeform


# -----------------------------------------------------------------------------
# Filters — optional structured constraints for search
# -----------------------------------------------------------------------------
@dataclass
class Filters:
    """Every field is optional; None (or an empty string) means "no constraint"."""

    category: Optional[str] = None
    brand: Optional[str] = None
    budget_max_inr: Optional[float] = None   # Inclusive ceiling
    min_rating: Optional[float] = None       # Inclusive floor


@dataclass
class SearchResult:
    total: int
    products: list[Product] = field(default_factory=list)


@dataclass
class ProductDetails:
    """A product enriched with review statistics."""

    product: Product
    review_count: int
    avg_review_rating: Optional[float]     # None when there are no reviews


# -----------------------------------------------------------------------------
# ScoreBreakdown — the Budget Scorer's output for one product
# -----------------------------------------------------------------------------
@dataclass
class ScoreBreakdown:
    rating: float
    feature_bonus: float
    price_penalty: float
    score: float                       # rating + feature_bonus - price_penalty


@dataclass
class RankedResult:
    """One entry of a budget_top answer.

    `score` is the unrounded value used for ranking; rounding happens only
    when the result is serialized.
    """

    product: Product
    breakdown: ScoreBreakdown
    reason: str

    @property
    def score(self) -> float:
        return self.breakdown.score


# -----------------------------------------------------------------------------
# Emission estimates
# -----------------------------------------------------------------------------
@dataclass
class ShippingEstimate:
    grams_co2e: float
    tonne_km: float
    factor_g_per_tkm: float


@dataclass
class PackagingEstimate:
    grams_co2e: float
    packaging_weight_kg: float
    factor_g_per_kg: float


@dataclass
class FootprintReport:
    """Shipping + packaging footprint for one parcel."""

    weight_kg: float
    distance_km: float
    transport: str
    packaging: str
    packaging_weight_kg: float
    shipping: ShippingEstimate
    packaging_estimate: PackagingEstimate
    total_g_co2e: int                  # Rounded to the nearest gram
    total_kg_co2e: float               # Three decimal places
    notes: str

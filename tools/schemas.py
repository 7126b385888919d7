# =============================================================================
# tools/schemas.py  —  Boundary validation (pydantic)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Everything that crosses into the engine is validated here, once:
#
#     - CommerceRequest:  the arguments of one `commerce` tool call.
#     - ProductSchema / ReviewSchema:  rows of the raw catalog documents.
#
#   Each schema converts itself into the plain core/ dataclasses, so the
#   engine only ever sees well-typed values.
#
# WIRE NAMES:
#   Fields are snake_case in Python and camelCase on the wire (aliases).
#   Both spellings are accepted on input.
# =============================================================================

import logging
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from core.catalog import Catalog
from core.errors import RequestValidationError
from core.models import (
    Category,
    FeaturePreference,
    Filters,
    PackagingType,
    Product,
    Review,
    TransportMode,
)

logger = logging.getLogger(__name__)

_HTTP_URL = TypeAdapter(HttpUrl)


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# -----------------------------------------------------------------------------
# Request side
# -----------------------------------------------------------------------------
class FiltersSchema(_WireModel):
    category: Optional[str] = None
    brand: Optional[str] = None
    budget_max_inr: Optional[float] = Field(default=None, alias="budgetMaxINR")
    min_rating: Optional[float] = Field(default=None, alias="minRating", ge=0, le=5)

    def to_filters(self) -> Filters:
        return Filters(
            category=self.category,
            brand=self.brand,
            budget_max_inr=self.budget_max_inr,
            min_rating=self.min_rating,
        )


class CommerceRequest(_WireModel):
    """Arguments of one `commerce` call.  Only `action` is required."""

    action: str
    message: Optional[str] = None

    # search
    query: Optional[str] = None
    filters: Optional[FiltersSchema] = None

    # details / reviews
    product_id: Optional[str] = Field(default=None, alias="productId")
    limit: Optional[int] = None

    # budget_top
    budget_max_inr: Optional[float] = Field(default=None, alias="budgetMaxINR")
    feature_pref: Optional[FeaturePreference] = Field(default=None, alias="featurePref")
    top_k: Optional[int] = Field(default=None, alias="topK")

    # sustainability
    weight_kg: Optional[float] = Field(default=None, alias="weightKg")
    distance_km: Optional[float] = Field(default=None, alias="distanceKm")
    transport: Optional[TransportMode] = None
    packaging: Optional[PackagingType] = None
    packaging_weight_kg: Optional[float] = Field(default=None, alias="packagingWeightKg")


def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "request"
        problems.append(f"{loc}: {err['msg']}")
    return "; ".join(problems)


def parse_request(arguments: Any) -> CommerceRequest:
    """Validate raw tool arguments.

    Raises:
        RequestValidationError: if the arguments do not fit CommerceRequest.
    """
    try:
        return CommerceRequest.model_validate(arguments)
    except ValidationError as exc:
        raise RequestValidationError(f"Invalid request: {_describe(exc)}") from exc


# -----------------------------------------------------------------------------
# Catalog side
# -----------------------------------------------------------------------------
class ProductSchema(_WireModel):
    id: str = Field(min_length=1)
    title: str
    brand: Optional[str] = None
    category: Category = "other"
    price_inr: float = Field(alias="priceINR", ge=0)
    rating: float = 0.0
    rating_count: int = Field(default=0, alias="ratingCount", ge=0)
    specs: dict[str, Any] = Field(default_factory=dict)
    images: list[str] = Field(default_factory=list)
    url: str

    @field_validator("rating", mode="before")
    @classmethod
    def default_rating(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("rating")
    @classmethod
    def clamp_rating(cls, value: float) -> float:
        # Runs on the coerced float, so numeric strings are clamped too
        return min(5.0, max(0.0, value))

    @field_validator("specs", mode="before")
    @classmethod
    def default_specs(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        # Checked as a URL, stored exactly as written
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError:
            raise ValueError(f"invalid URL {value!r}") from None
        return value

    def to_product(self) -> Product:
        specs: dict[str, str] = {}
        for name, value in self.specs.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                value = ", ".join(str(v) for v in value)
            specs[name] = str(value)

        return Product(
            id=self.id,
            title=self.title,
            brand=self.brand,
            category=self.category,
            price_inr=self.price_inr,
            rating=self.rating,
            rating_count=self.rating_count,
            specs=specs,
            images=tuple(self.images),
            url=self.url,
        )


class ReviewSchema(_WireModel):
    product_id: Optional[str] = Field(default=None, alias="productId")
    stars: int = Field(ge=1, le=5)
    title: str = ""
    text: str = ""
    aspect: Optional[str] = None

    def to_review(self, default_product_id: str) -> Review:
        return Review(
            product_id=self.product_id or default_product_id,
            stars=self.stars,
            title=self.title,
            text=self.text,
            aspect=self.aspect,
        )


def build_catalog(raw_products: list[Any], raw_reviews: dict[str, Any]) -> Catalog:
    """Validate the raw JSON catalog into an immutable Catalog.

    Invalid rows are skipped with a warning.  When two products share an
    id, the first one wins.
    """
    products: list[Product] = []
    seen: set[str] = set()
    for index, row in enumerate(raw_products):
        try:
            product = ProductSchema.model_validate(row).to_product()
        except ValidationError as exc:
            logger.warning("Skipping catalog row %d: %s", index, _describe(exc))
            continue
        if product.id in seen:
            logger.warning("Skipping catalog row %d: duplicate id %r", index, product.id)
            continue
        seen.add(product.id)
        products.append(product)

    reviews: dict[str, list[Review]] = {}
    for product_id, rows in raw_reviews.items():
        if not isinstance(rows, list):
            logger.warning("Skipping reviews for %r: expected a list", product_id)
            continue
        bucket = reviews.setdefault(product_id, [])
        for index, row in enumerate(rows):
            try:
                bucket.append(ReviewSchema.model_validate(row).to_review(product_id))
            except ValidationError as exc:
                logger.warning("Skipping review %d of %r: %s", index, product_id, _describe(exc))

    return Catalog.from_records(products, reviews)

# =============================================================================
# core/catalog.py  —  Catalog Store (products + review index)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   1. load() reads two JSON documents from the data directory:
#        - catalog.sample.json  → a list of product objects
#        - reviews.sample.json  → {productId: [review, ...]}
#      If either file is missing, unreadable or not the expected JSON shape,
#      the built-in fallback for THAT source is used instead.  The two
#      sources fail independently.  load() never raises.
#
#   2. Catalog is the immutable, process-lifetime value built from that raw
#      data (after validation in tools/schemas.py).  It is injected into the
#      engine; there is no module-level catalog global.
#
# DATA LOCATION:
#   COMMERCE_DATA_DIR overrides the default <project root>/data directory.
# =============================================================================

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from core.models import Product, Review

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "catalog.sample.json"
REVIEWS_FILENAME = "reviews.sample.json"

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


# -----------------------------------------------------------------------------
# Fallback dataset: one product, two reviews
# -----------------------------------------------------------------------------
# Stored in the same (camelCase) shape as the JSON files so it goes through
# exactly the same validation path.
# -----------------------------------------------------------------------------
FALLBACK_CATALOG: list[dict[str, Any]] = [
    {
        "id": "B00PHONE001",
        "title": "CamX Pro 5G Smartphone",
        "brand": "CamX",
        "category": "mobiles",
        "priceINR": 13999,
        "rating": 4.3,
        "ratingCount": 12453,
        "specs": {
            "camera": "50MP OIS main + 8MP ultra-wide",
            "battery": "5000 mAh",
            "display": '6.5" AMOLED 120Hz',
            "storage": "128GB",
            "ram": "6GB",
        },
        "images": [
            "https://example.com/img/camxpro-front.jpg",
            "https://example.com/img/camxpro-back.jpg",
        ],
        "url": "https://www.amazon.in/dp/B00PHONE001",
    },
]

FALLBACK_REVIEWS: dict[str, list[dict[str, Any]]] = {
    "B00PHONE001": [
        {
            "productId": "B00PHONE001",
            "stars": 5,
            "title": "Great camera!",
            "text": "OIS helps a lot in night photos.",
            "aspect": "camera",
        },
        {
            "productId": "B00PHONE001",
            "stars": 4,
            "title": "Good display",
            "text": "120Hz feels smooth.",
            "aspect": "display",
        },
    ],
}


def default_data_dir() -> Path:
    """Resolve the data directory (COMMERCE_DATA_DIR or <project root>/data)."""
    override = os.environ.get("COMMERCE_DATA_DIR")
    if override:
        return Path(override)
    return _PROJECT_ROOT / "data"


def _read_json(path: Path, expected_type: type, fallback: Any) -> Any:
    """Read one JSON document, returning a deep copy of `fallback` on failure."""
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s (%s); using built-in fallback data", path, exc)
        return copy.deepcopy(fallback)

    if not isinstance(data, expected_type):
        logger.warning(
            "%s holds a %s, expected a %s; using built-in fallback data",
            path, type(data).__name__, expected_type.__name__,
        )
        return copy.deepcopy(fallback)
    return data


def load(
    data_dir: Optional[Path] = None,
) -> tuple[list[dict[str, Any]], dict[str, list[dict[str, Any]]]]:
    """Load the raw catalog and review index.

    Only structural JSON parsing happens here; schema conformance is checked
    by the caller (tools/schemas.build_catalog).

    Returns:
        (products, reviews_by_product_id) as plain JSON data.
    """
    data_dir = Path(data_dir) if data_dir is not None else default_data_dir()
    products = _read_json(data_dir / CATALOG_FILENAME, list, FALLBACK_CATALOG)
    reviews = _read_json(data_dir / REVIEWS_FILENAME, dict, FALLBACK_REVIEWS)
    return products, reviews


# -----------------------------------------------------------------------------
# Catalog — the validated, read-only store
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Catalog:
    """Read-only products plus productId → product and productId → reviews
    indexes.  Product ids must be unique.

    Build it once per process (or per test) and hand it to the engine.
    """

    products: tuple[Product, ...] = ()
    reviews_by_product_id: Mapping[str, tuple[Review, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    products_by_id: Mapping[str, Product] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index: dict[str, Product] = {}
        for product in self.products:
            if product.id in index:
                raise ValueError(f"Duplicate product id in catalog: {product.id!r}")
            index[product.id] = product
        object.__setattr__(self, "products_by_id", MappingProxyType(index))

    @classmethod
    def from_records(
        cls,
        products: list[Product],
        reviews_by_product_id: Mapping[str, list[Review]],
    ) -> "Catalog":
        index = {pid: tuple(revs) for pid, revs in reviews_by_product_id.items()}
        return cls(products=tuple(products), reviews_by_product_id=MappingProxyType(index))

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.products_by_id.get(product_id)

    def reviews_for(self, product_id: str) -> tuple[Review, ...]:
        return self.reviews_by_product_id.get(product_id, ())

    def has_reviews_for(self, product_id: str) -> bool:
        return product_id in self.reviews_by_product_id

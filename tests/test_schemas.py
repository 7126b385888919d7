import pytest

from core.catalog import FALLBACK_CATALOG, FALLBACK_REVIEWS
from core.errors import RequestValidationError
from tools.schemas import ProductSchema, build_catalog, parse_request


def _row(**overrides):
    row = {
        "id": "A1",
        "title": "Alpha Phone",
        "priceINR": 9999,
        "rating": 4.0,
        "url": "https://www.amazon.in/dp/A1",
    }
    row.update(overrides)
    return row


def test_fallback_dataset_validates():
    catalog = build_catalog(FALLBACK_CATALOG, FALLBACK_REVIEWS)
    assert len(catalog.products) == 1
    product = catalog.products[0]
    assert product.price_inr == 13999
    assert product.category == "mobiles"
    assert product.specs["camera"] == "50MP OIS main + 8MP ultra-wide"
    assert product.images == (
        "https://example.com/img/camxpro-front.jpg",
        "https://example.com/img/camxpro-back.jpg",
    )
    assert [r.stars for r in catalog.reviews_for("B00PHONE001")] == [5, 4]


def test_defaults_applied():
    product = ProductSchema.model_validate(
        {"id": "A1", "title": "Alpha", "priceINR": 1, "url": "https://example.com/a"}
    ).to_product()
    assert product.category == "other"
    assert product.rating == 0
    assert product.rating_count == 0
    assert product.specs == {}
    assert product.images == ()
    assert product.brand is None


@pytest.mark.parametrize(
    "raw, expected",
    [(7.5, 5.0), (-1, 0.0), (3.2, 3.2), (None, 0.0), ("7.5", 5.0), ("-2", 0.0), ("4.1", 4.1)],
)
def test_rating_is_clamped(raw, expected):
    assert ProductSchema.model_validate(_row(rating=raw)).rating == expected


def test_string_rating_cannot_outrank_catalog():
    catalog = build_catalog([_row(id="A1", rating="7.5"), _row(id="A2", rating=4.9)], {})
    assert [p.rating for p in catalog.products] == [5.0, 4.9]


def test_url_kept_verbatim():
    product = ProductSchema.model_validate(_row(url="https://example.com")).to_product()
    assert product.url == "https://example.com"


def test_list_specs_are_joined():
    row = _row(specs={"ingredients": ["niacinamide", "zinc"], "skinType": "oily", "notes": None})
    product = ProductSchema.model_validate(row).to_product()
    assert product.specs == {"ingredients": "niacinamide, zinc", "skinType": "oily"}


def test_invalid_rows_are_skipped():
    rows = [
        _row(id="OK1"),
        _row(id="BAD1", priceINR=-5),
        _row(id="BAD2", url="not a url"),
        _row(id="BAD3", category="furniture"),
        {"id": "BAD4", "title": "No price"},
        "not even an object",
        _row(id="OK2"),
    ]
    catalog = build_catalog(rows, {})
    assert [p.id for p in catalog.products] == ["OK1", "OK2"]


def test_duplicate_ids_keep_first():
    catalog = build_catalog([_row(title="First"), _row(title="Second")], {})
    assert len(catalog.products) == 1
    assert catalog.products[0].title == "First"


def test_reviews_default_product_id_and_skip_invalid():
    raw_reviews = {
        "A1": [
            {"stars": 5, "title": "Love it", "text": "Great"},
            {"stars": 9, "title": "Too many stars", "text": "?"},
        ],
        "A2": "not a list",
    }
    catalog = build_catalog([_row()], raw_reviews)
    reviews = catalog.reviews_for("A1")
    assert len(reviews) == 1
    assert reviews[0].product_id == "A1"
    assert not catalog.has_reviews_for("A2")


def test_parse_request_accepts_wire_names():
    request = parse_request({
        "action": "budget_top",
        "budgetMaxINR": 15000,
        "featurePref": "camera",
        "topK": 5,
        "filters": {"minRating": 4, "brand": "CamX"},
    })
    assert request.budget_max_inr == 15000
    assert request.feature_pref == "camera"
    assert request.top_k == 5
    assert request.filters.to_filters().min_rating == 4
    assert request.filters.to_filters().brand == "CamX"


def test_parse_request_requires_action():
    with pytest.raises(RequestValidationError, match="action"):
        parse_request({"query": "phone"})


@pytest.mark.parametrize(
    "arguments",
    [
        {"action": "budget_top", "featurePref": "price"},
        {"action": "sustainability", "transport": "teleport"},
        {"action": "sustainability", "packaging": "styrofoam"},
        {"action": "search", "filters": {"minRating": 9}},
        {"action": "reviews", "productId": "A1", "limit": "many"},
    ],
)
def test_parse_request_rejects_bad_values(arguments):
    with pytest.raises(RequestValidationError):
        parse_request(arguments)


def test_parse_request_rejects_non_mapping():
    with pytest.raises(RequestValidationError):
        parse_request(["search"])

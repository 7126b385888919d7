import itertools

from core.catalog import Catalog
from core.models import Filters
from core.search import matches_filters, search


def _ids(result):
    return [p.id for p in result.products]


def test_empty_query_matches_everything(catalog):
    result = search(catalog, "")
    assert result.total == len(catalog.products)
    assert len(result.products) == result.total


def test_query_is_trimmed_and_case_insensitive(catalog):
    assert _ids(search(catalog, "  VOLTMAX  ")) == ["B00PHONE002"]


def test_query_matches_title_brand_and_spec_values(catalog):
    assert "B00PHONE001" in _ids(search(catalog, "amoled"))
    assert "B00PHONE004" in _ids(search(catalog, "snapdragon"))
    assert set(_ids(search(catalog, "camx"))) == {"B00PHONE001", "B00PHONE005"}
    assert _ids(search(catalog, "niacinamide")) == ["B00SKIN001"]


def test_query_without_match_returns_nothing(catalog):
    result = search(catalog, "washing machine")
    assert result.total == 0
    assert result.products == []


def test_category_filter_is_case_insensitive(catalog):
    result = search(catalog, "", Filters(category="SKINCARE"))
    assert _ids(result) == ["B00SKIN001"]


def test_brand_filter_is_exact(catalog):
    assert set(_ids(search(catalog, "", Filters(brand="camx")))) == {"B00PHONE001", "B00PHONE005"}
    assert search(catalog, "", Filters(brand="cam")).total == 0


def test_budget_and_rating_bounds_are_inclusive(catalog):
    assert "B00PHONE001" in _ids(search(catalog, "", Filters(budget_max_inr=13999)))
    assert "B00PHONE001" not in _ids(search(catalog, "", Filters(budget_max_inr=13998)))
    assert "B00PHONE001" in _ids(search(catalog, "", Filters(min_rating=4.3)))
    assert "B00PHONE001" not in _ids(search(catalog, "", Filters(min_rating=4.31)))


def test_empty_string_filters_impose_no_constraint(catalog):
    assert search(catalog, "", Filters(category="", brand="")).total == len(catalog.products)


def test_min_rating_zero_is_still_an_active_filter(make_product):
    unrated = make_product("X1", "Unrated Phone", 100, 0.0)
    catalog = Catalog.from_records([unrated], {})
    assert search(catalog, "", Filters(min_rating=0)).total == 1


def test_ordering_rating_desc_then_price_asc_then_id(catalog):
    products = search(catalog, "").products
    for a, b in zip(products, products[1:]):
        assert a.rating >= b.rating
        if a.rating == b.rating:
            assert a.price_inr <= b.price_inr
            if a.price_inr == b.price_inr:
                assert a.id < b.id


def test_id_breaks_full_ties(catalog):
    ids = _ids(search(catalog, "budget phone"))
    assert ids == ["B00PHONE006", "B00PHONE007"]


def test_search_does_not_depend_on_catalog_order(products, reviews):
    forward = Catalog.from_records(products, reviews)
    backward = Catalog.from_records(list(reversed(products)), reviews)
    assert _ids(search(forward, "phone")) == _ids(search(backward, "phone"))


def test_results_satisfy_every_active_filter(catalog):
    options = {
        "category": [None, "mobiles", "skincare"],
        "brand": [None, "CamX", "Generic"],
        "budget_max_inr": [None, 600, 12000, 20000],
        "min_rating": [None, 4.0, 4.3],
    }
    for values in itertools.product(*options.values()):
        filters = Filters(**dict(zip(options, values)))
        for product in search(catalog, "", filters).products:
            assert matches_filters(product, filters)


def test_dropping_a_filter_never_removes_results(catalog):
    full = Filters(category="mobiles", brand="CamX", budget_max_inr=20000, min_rating=3.5)
    constrained = set(_ids(search(catalog, "phone", full)))
    for field_name in ("category", "brand", "budget_max_inr", "min_rating"):
        relaxed = Filters(**{**full.__dict__, field_name: None})
        assert constrained <= set(_ids(search(catalog, "phone", relaxed)))


def test_phone_under_budget_with_min_rating(camx_pro):
    catalog = Catalog.from_records([camx_pro], {})
    result = search(catalog, "phone", Filters(budget_max_inr=20000, min_rating=3.5))
    assert result.total >= 1
    assert result.products[0].title == "CamX Pro 5G Smartphone"

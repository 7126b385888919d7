import pytest

from core.catalog import Catalog
from core.models import Filters, ScoreBreakdown
from core.ranking import budget_top, build_reason, clamp_top_k, effective_filters, format_number


@pytest.mark.parametrize(
    "requested, expected",
    [(None, 3), (0, 3), (-4, 3), (1, 1), (3, 3), (10, 10), (11, 10), (500, 10)],
)
def test_clamp_top_k(requested, expected):
    assert clamp_top_k(requested) == expected


def test_explicit_budget_overrides_filter_budget():
    merged = effective_filters(Filters(budget_max_inr=5000, brand="CamX"), 15000)
    assert merged.budget_max_inr == 15000
    assert merged.brand == "CamX"


def test_filter_budget_kept_when_no_explicit_budget():
    original = Filters(budget_max_inr=5000)
    merged = effective_filters(original, None)
    assert merged.budget_max_inr == 5000
    assert merged is not original


def test_camera_phone_ranked_with_reason(camx_pro):
    catalog = Catalog.from_records([camx_pro], {})
    results = budget_top(catalog, "phone", 15000, "camera", 3)

    assert len(results) == 1
    top = results[0]
    assert top.breakdown.feature_bonus == 0.8
    assert top.breakdown.price_penalty == 0
    assert top.score == pytest.approx(5.1)
    assert top.reason == "rating=4.3, price=13999, featureMatch=+0.80"


def test_budget_excludes_over_budget_candidates(catalog):
    results = budget_top(catalog, "", 12000, None, 10)
    assert results
    assert all(r.product.price_inr <= 12000 for r in results)
    assert all(r.breakdown.price_penalty == 0 for r in results)


def test_results_sorted_by_score_and_truncated(catalog):
    results = budget_top(catalog, "phone", None, "battery", 4)
    assert len(results) == 4
    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True)


def test_length_never_exceeds_clamped_top_k(catalog):
    for requested in (None, -1, 0, 1, 2, 5, 10, 25):
        results = budget_top(catalog, "", None, None, requested)
        assert 0 <= len(results) <= min(clamp_top_k(requested), 10)


def test_feature_preference_can_reorder_results(catalog):
    plain = budget_top(catalog, "phone", 20000, None, 10)
    camera = budget_top(catalog, "phone", 20000, "camera", 10)
    assert plain[0].product.id == "B00PHONE003"
    assert camera[0].product.id == "B00PHONE001"


def test_exact_ties_keep_search_order(catalog):
    results = budget_top(catalog, "budget phone", None, None, 10)
    assert [r.product.id for r in results] == ["B00PHONE006", "B00PHONE007"]


def test_no_candidates_gives_empty_list(catalog):
    assert budget_top(catalog, "phone", 100, None, 3) == []


def test_reason_lists_penalty_only_when_positive(camx_pro):
    with_penalty = ScoreBreakdown(rating=4.3, feature_bonus=0.0, price_penalty=0.7998, score=3.5002)
    assert build_reason(camx_pro, with_penalty) == "rating=4.3, price=13999, pricePenalty=-0.80"

    plain = ScoreBreakdown(rating=4.3, feature_bonus=0.0, price_penalty=0.0, score=4.3)
    assert build_reason(camx_pro, plain) == "rating=4.3, price=13999"


def test_format_number():
    assert format_number(13999.0) == "13999"
    assert format_number(4.3) == "4.3"
    assert format_number(5) == "5"

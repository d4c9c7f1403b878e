import pytest

from common.datasets import CO_PURCHASES, TOTAL_PURCHASES
from recommenders import (
    compute_similarities,
    load_recommendation_context,
    rank_similarities,
    top_recommendations,
)


def test_laptop_similarities_are_exact_ratios():
    similarities = compute_similarities(CO_PURCHASES["Laptop"], TOTAL_PURCHASES["Laptop"])

    assert list(similarities) == ["Mouse", "Keyboard", "USB Cable", "Monitor", "Phone Case"]
    assert similarities["Mouse"] == {"item_name": "Mouse", "count": 45, "total": 165, "score": 45 / 165}
    assert similarities["Mouse"]["score"] == pytest.approx(0.2727, abs=1e-4)
    assert similarities["Keyboard"]["score"] == pytest.approx(0.2242, abs=1e-4)


@pytest.mark.parametrize("product", list(CO_PURCHASES))
def test_scores_are_in_unit_interval(product):
    similarities = compute_similarities(CO_PURCHASES[product], TOTAL_PURCHASES[product])

    for entry in similarities.values():
        assert 0 < entry["score"] <= 1


def test_zero_total_raises():
    with pytest.raises(ZeroDivisionError):
        compute_similarities({"Gadget": 3}, 0)


def test_rank_is_descending_and_stable_on_ties():
    similarities = compute_similarities({"Stylus": 10, "Case": 30, "Charger": 30, "Keyboard": 10}, 60)

    ranked = rank_similarities(similarities)

    assert [entry["item_name"] for entry in ranked] == ["Case", "Charger", "Stylus", "Keyboard"]


def test_dataset_ties_keep_row_order():
    ranked = rank_similarities(compute_similarities(CO_PURCHASES["Headphones"], TOTAL_PURCHASES["Headphones"]))

    assert [entry["item_name"] for entry in ranked][:2] == ["Charger", "Smartphone"]


def test_rank_empty_row():
    assert rank_similarities({}) == []


def test_top_recommendations_handles_short_lists():
    ranked = rank_similarities(compute_similarities({"Only": 4}, 8))

    assert [entry["item_name"] for entry in top_recommendations(ranked)] == ["Only"]
    assert top_recommendations([]) == []


def test_context_requires_totals_for_every_product():
    with pytest.raises(ValueError, match="Phone"):
        load_recommendation_context(co_purchases={"Phone": {"Case": 1}}, total_purchases={})


def test_static_dataset_is_read_only():
    with pytest.raises(TypeError):
        CO_PURCHASES["Laptop"]["Mouse"] = 1

import pytest

from debuggers import (
    AlreadyCompleteError,
    DivisionByZeroError,
    InvalidInputError,
    NotActiveError,
    RecommendationStepEngine,
    UnknownProductError,
)


def run_to_end(engine):
    snapshots = []
    while not engine.is_complete():
        snapshots.append(engine.advance())
    return snapshots


def test_initialize_runs_capture_step(recommendation_engine):
    snapshot = recommendation_engine.initialize("Laptop")

    assert snapshot["current_step"] == 1
    assert snapshot["max_steps"] == 6
    assert snapshot["completed"] is False
    assert snapshot["active"] is True
    assert snapshot["selected_product"] == "Laptop"
    assert snapshot["total_purchases"] == 165
    assert snapshot["step_title"] == "Capture selected product"
    assert "co_items" not in snapshot
    assert "similarities" not in snapshot


def test_laptop_scenario(recommendation_engine):
    recommendation_engine.initialize("Laptop")

    step_2 = recommendation_engine.advance()
    assert step_2["co_items"] == {"Mouse": 45, "Keyboard": 37, "USB Cable": 28, "Monitor": 22, "Phone Case": 5}

    step_3 = recommendation_engine.advance()
    assert step_3["similarities"]["Mouse"]["score"] == pytest.approx(0.2727, abs=1e-4)
    assert step_3["similarities"]["Mouse"]["score"] == 45 / 165

    step_4 = recommendation_engine.advance()
    assert step_4["similarities"] == step_3["similarities"]
    assert "ranked" not in step_4

    step_5 = recommendation_engine.advance()
    assert [entry["item_name"] for entry in step_5["ranked"]] == [
        "Mouse",
        "Keyboard",
        "USB Cable",
        "Monitor",
        "Phone Case",
    ]

    step_6 = recommendation_engine.advance()
    top = step_6["top_recommendations"]
    assert [entry["item_name"] for entry in top] == ["Mouse", "Keyboard"]
    assert top[0]["score"] == pytest.approx(0.2727, abs=1e-4)
    assert top[1]["score"] == pytest.approx(0.2242, abs=1e-4)
    assert step_6["completed"] is True
    assert [entry["step"] for entry in step_6["step_log"]] == [1, 2, 3, 4, 5, 6]


def test_step_progression_is_monotonic(recommendation_engine):
    recommendation_engine.initialize("Smartphone")

    for k in range(1, 6):
        assert recommendation_engine.advance()["current_step"] == min(1 + k, 6)

    before = recommendation_engine.snapshot()
    with pytest.raises(AlreadyCompleteError):
        recommendation_engine.advance()
    assert recommendation_engine.snapshot() == before


def test_advance_before_initialize(recommendation_engine):
    with pytest.raises(NotActiveError):
        recommendation_engine.advance()


@pytest.mark.parametrize("value", [None, "", "   "])
def test_empty_input_is_rejected(recommendation_engine, value):
    with pytest.raises(InvalidInputError):
        recommendation_engine.initialize(value)

    assert recommendation_engine.is_active is False
    assert recommendation_engine.snapshot()["current_step"] == 0


def test_unknown_product_keeps_previous_trace(recommendation_engine):
    recommendation_engine.initialize("Laptop")
    recommendation_engine.advance()
    before = recommendation_engine.snapshot()

    with pytest.raises(UnknownProductError):
        recommendation_engine.initialize("Toaster")

    assert recommendation_engine.snapshot() == before


def test_unknown_product_is_invalid_input(recommendation_engine):
    with pytest.raises(InvalidInputError):
        recommendation_engine.initialize("Toaster")
    assert recommendation_engine.is_active is False


def test_initialize_is_idempotent(recommendation_engine):
    once = recommendation_engine.initialize("Laptop")
    twice = recommendation_engine.initialize("Laptop")

    assert once == twice


def test_initialize_same_product_mid_run_keeps_progress(recommendation_engine):
    recommendation_engine.initialize("Laptop")
    recommendation_engine.advance()
    advanced = recommendation_engine.snapshot()

    assert recommendation_engine.initialize("Laptop") == advanced


def test_new_product_starts_fresh(recommendation_engine):
    recommendation_engine.initialize("Laptop")
    run_to_end(recommendation_engine)

    snapshot = recommendation_engine.initialize("Monitor")

    assert snapshot["current_step"] == 1
    assert snapshot["selected_product"] == "Monitor"
    assert "top_recommendations" not in snapshot
    assert len(snapshot["step_log"]) == 1


def test_runs_are_deterministic(recommendation_engine):
    first = [recommendation_engine.initialize("Headphones")] + run_to_end(recommendation_engine)
    recommendation_engine.reset()
    second = [recommendation_engine.initialize("Headphones")] + run_to_end(recommendation_engine)

    assert first == second


def test_reset_clears_trace(recommendation_engine):
    recommendation_engine.initialize("Laptop")
    recommendation_engine.advance()

    recommendation_engine.reset()
    snapshot = recommendation_engine.snapshot()

    assert snapshot["current_step"] == 0
    assert snapshot["active"] is False
    assert snapshot["completed"] is False
    assert snapshot["step_log"] == []
    assert "selected_product" not in snapshot
    with pytest.raises(NotActiveError):
        recommendation_engine.advance()


def test_snapshot_is_a_copy(recommendation_engine):
    recommendation_engine.initialize("Laptop")
    snapshot = recommendation_engine.advance()

    snapshot["co_items"]["Mouse"] = 0

    assert recommendation_engine.snapshot()["co_items"]["Mouse"] == 45


def test_ranking_preserves_dataset_order_on_ties(tie_context):
    engine = RecommendationStepEngine(tie_context)
    engine.initialize("Tablet")
    snapshots = run_to_end(engine)

    assert [entry["item_name"] for entry in snapshots[-1]["ranked"]] == ["Case", "Charger", "Stylus", "Keyboard"]
    assert [entry["item_name"] for entry in snapshots[-1]["top_recommendations"]] == ["Case", "Charger"]


def test_product_without_co_purchases_completes(recommendation_engine):
    recommendation_engine.initialize("Gift Card")
    final = run_to_end(recommendation_engine)[-1]

    assert final["completed"] is True
    assert final["co_items"] == {}
    assert final["ranked"] == []
    assert final["top_recommendations"] == []


def test_zero_total_fails_without_corrupting_trace(degenerate_context):
    engine = RecommendationStepEngine(degenerate_context)
    engine.initialize("Widget")
    engine.advance()
    before = engine.snapshot()

    with pytest.raises(DivisionByZeroError):
        engine.advance()

    assert engine.snapshot() == before
    assert engine.current_step == 2

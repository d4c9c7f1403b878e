"""Shared fixtures for debugger tests."""

import sys
from pathlib import Path

import pytest


def ensure_root_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


ensure_root_on_path()

from debuggers import RecommendationStepEngine, ReviewStepEngine
from recommenders import load_recommendation_context


@pytest.fixture
def recommendation_engine():
    return RecommendationStepEngine()


@pytest.fixture
def review_engine():
    return ReviewStepEngine()


@pytest.fixture
def tie_context():
    return load_recommendation_context(
        co_purchases={"Tablet": {"Stylus": 10, "Case": 30, "Charger": 30, "Keyboard": 10}},
        total_purchases={"Tablet": 60},
    )


@pytest.fixture
def degenerate_context():
    return load_recommendation_context(
        co_purchases={"Widget": {"Gadget": 3}, "Empty": {}},
        total_purchases={"Widget": 0, "Empty": 12},
    )

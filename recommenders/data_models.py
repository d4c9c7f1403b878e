"""
Type definitions for the collaborative filtering debugger.
Using TypedDicts for structured data with type hints.
"""

from typing import Dict, List, Mapping, TypedDict


class RecommendationContext(TypedDict):
    """
    World state - the static tables needed to trace a recommendation.
    Load once at startup, passed to all step functions.
    """
    co_purchases: Mapping[str, Mapping[str, int]]  # product -> co-purchased item -> count
    total_purchases: Mapping[str, int]  # product -> similarity denominator


class SimilarityEntry(TypedDict):
    item_name: str
    count: int
    total: int
    score: float  # count / total, full precision


class RecommendationTrace(TypedDict, total=False):
    """Accumulated state of one run. Keys appear as their step is executed."""
    selected_product: str
    total_purchases: int
    co_items: Dict[str, int]
    similarities: Dict[str, SimilarityEntry]
    ranked: List[SimilarityEntry]
    top_recommendations: List[SimilarityEntry]

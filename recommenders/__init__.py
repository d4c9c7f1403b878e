"""
Recommendation system components.
Pure functions with TypedDicts.
"""

from .data_models import (
    RecommendationContext,
    RecommendationTrace,
    SimilarityEntry,
)
from .collaborative import (
    compute_similarities,
    load_recommendation_context,
    rank_similarities,
    top_recommendations,
)

__all__ = [
    "RecommendationContext",
    "RecommendationTrace",
    "SimilarityEntry",
    "compute_similarities",
    "load_recommendation_context",
    "rank_similarities",
    "top_recommendations",
]

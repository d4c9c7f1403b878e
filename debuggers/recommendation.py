"""
Six-step trace of item-to-item collaborative filtering for one product.
"""

from typing import Optional

from common.constants import PATHS, RECOMMEND
from common.logging import log_recommendation_trace
from common.utils import setup_logging
from recommenders import (
    RecommendationContext,
    RecommendationTrace,
    compute_similarities,
    load_recommendation_context,
    rank_similarities,
    top_recommendations,
)

from .base import StepEngine
from .errors import DivisionByZeroError, UnknownProductError

logger = setup_logging(__name__, PATHS["app_log_file"])


def capture_product(trace: RecommendationTrace, context: RecommendationContext):
    product = trace["selected_product"]
    if product not in context["co_purchases"] or product not in context["total_purchases"]:
        raise UnknownProductError(f"Unknown product: {product!r}")
    trace["total_purchases"] = context["total_purchases"][product]
    return trace, f"Selected {product} ({trace['total_purchases']} total purchases)"


def retrieve_co_purchases(trace: RecommendationTrace, context: RecommendationContext):
    trace["co_items"] = dict(context["co_purchases"][trace["selected_product"]])
    return trace, f"Found {len(trace['co_items'])} co-purchased items"


def compute_similarity(trace: RecommendationTrace, context: RecommendationContext):
    try:
        trace["similarities"] = compute_similarities(trace["co_items"], trace["total_purchases"])
    except ZeroDivisionError as e:
        raise DivisionByZeroError(f"Cannot score {trace['selected_product']!r}: {e}") from e
    return trace, f"similarity = co-purchases / {trace['total_purchases']}"


def show_similarity_scores(trace: RecommendationTrace, context: RecommendationContext):
    # Re-surfaces step 3 results; nothing is recomputed
    scores = ", ".join(f"{name}: {entry['score']:.4f}" for name, entry in trace["similarities"].items())
    return trace, scores or "No co-purchased items"


def rank_items(trace: RecommendationTrace, context: RecommendationContext):
    trace["ranked"] = rank_similarities(trace["similarities"])
    return trace, " > ".join(entry["item_name"] for entry in trace["ranked"]) or "Nothing to rank"


def recommend_top_items(trace: RecommendationTrace, context: RecommendationContext):
    trace["top_recommendations"] = top_recommendations(trace["ranked"], RECOMMEND["top_k"])
    names = [entry["item_name"] for entry in trace["top_recommendations"]]
    return trace, f"Recommend: {', '.join(names)}" if names else "No recommendations available"


class RecommendationStepEngine(StepEngine):
    """Collaborative filtering debugger: one selected product, six steps."""

    name = "recommendation"
    max_steps = RECOMMEND["max_steps"]
    input_field = "selected_product"
    step_titles = RECOMMEND["step_titles"]
    steps = (
        capture_product,
        retrieve_co_purchases,
        compute_similarity,
        show_similarity_scores,
        rank_items,
        recommend_top_items,
    )

    def __init__(self, context: Optional[RecommendationContext] = None):
        super().__init__(context if context is not None else load_recommendation_context())

    def advance(self):
        snapshot = super().advance()
        if self.is_complete():
            log_recommendation_trace(logger, snapshot)
        return snapshot

"""
Item-to-item collaborative filtering over a co-purchase table.
Similarity is the conditional co-occurrence ratio count / total purchases.
"""

import logging
from typing import Dict, List, Mapping, Optional

import numpy as np

from common.constants import PATHS, RECOMMEND
from common.datasets import CO_PURCHASES, TOTAL_PURCHASES
from common.utils import setup_logging

from .data_models import RecommendationContext, SimilarityEntry

logger = setup_logging(__name__, PATHS["app_log_file"], logging.DEBUG)


def load_recommendation_context(
    co_purchases: Optional[Mapping[str, Mapping[str, int]]] = None,
    total_purchases: Optional[Mapping[str, int]] = None,
) -> RecommendationContext:
    """Build the read-only context, defaulting to the static dataset."""
    co_purchases = CO_PURCHASES if co_purchases is None else co_purchases
    total_purchases = TOTAL_PURCHASES if total_purchases is None else total_purchases

    missing = [product for product in co_purchases if product not in total_purchases]
    if missing:
        raise ValueError(f"Products without total purchases: {missing}")

    logger.info(f"Loaded co-purchase table: {len(co_purchases)} products")
    return {"co_purchases": co_purchases, "total_purchases": total_purchases}


def compute_similarities(co_items: Mapping[str, int], total_purchases: int) -> Dict[str, SimilarityEntry]:
    """Score every co-purchased item as count / total_purchases, keeping row order."""
    if total_purchases <= 0:
        raise ZeroDivisionError(f"Total purchases must be positive, got {total_purchases}")

    similarities = {}
    for item_name, count in co_items.items():
        similarities[item_name] = {
            "item_name": item_name,
            "count": count,
            "total": total_purchases,
            "score": count / total_purchases,
        }
        logger.debug(f"[CF] {item_name}: {count}/{total_purchases} = {count / total_purchases:.6f}")

    return similarities


def rank_similarities(similarities: Mapping[str, SimilarityEntry]) -> List[SimilarityEntry]:
    """Sort entries by score descending. Ties keep their original row order."""
    entries = list(similarities.values())
    if not entries:
        return []

    scores = np.array([entry["score"] for entry in entries], dtype=np.float64)
    order = np.argsort(-scores, kind="stable")
    return [dict(entries[i]) for i in order]


def top_recommendations(ranked: List[SimilarityEntry], k: int = RECOMMEND["top_k"]) -> List[SimilarityEntry]:
    """First k ranked entries, or fewer when the row is short."""
    return [dict(entry) for entry in ranked[:k]]

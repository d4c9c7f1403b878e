"""
Review analysis components: text cleanup, lexicon sentiment and aspects.
"""

from .data_models import Classification, ReviewContext, ReviewTrace
from .sentiment import (
    classify,
    detect_aspects,
    generate_insight,
    load_review_context,
    score_sentiment,
    split_aspects_by_sentiment,
)
from .text_processing import lowercase_text, remove_punctuation, remove_stopwords, split_tokens

__all__ = [
    "Classification",
    "ReviewContext",
    "ReviewTrace",
    "classify",
    "detect_aspects",
    "generate_insight",
    "load_review_context",
    "score_sentiment",
    "split_aspects_by_sentiment",
    "lowercase_text",
    "remove_punctuation",
    "remove_stopwords",
    "split_tokens",
]

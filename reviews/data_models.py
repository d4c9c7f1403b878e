"""
Type definitions for the review (NLP) debugger.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Mapping, Sequence, TypedDict


class Classification(str, Enum):
    """Overall review sentiment."""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class SentimentLexicon(TypedDict):
    positive: FrozenSet[str]
    negative: FrozenSet[str]


class ReviewContext(TypedDict):
    """Static word lists, loaded once and shared read-only."""
    stopwords: FrozenSet[str]
    lexicon: SentimentLexicon
    aspect_keywords: Mapping[str, Sequence[str]]  # aspect -> ordered keywords


class ReviewTrace(TypedDict, total=False):
    """Accumulated state of one run. Keys appear as their step is executed."""
    original_text: str
    text_length: int
    lowercased: str
    depunctuated: str
    raw_tokens: List[str]
    filtered_tokens: List[str]
    removed_stopwords: List[str]
    tokens: List[str]
    sentiment_score: int
    positive_words: List[str]
    negative_words: List[str]
    detected_aspects: Dict[str, List[str]]
    classification: Classification
    positive_aspects: List[str]
    negative_aspects: List[str]
    insight: str

"""
Lexicon-based sentiment scoring and keyword aspect detection.
Every token occurrence counts: duplicates in the text are scored once each.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from common.constants import PATHS
from common.datasets import ASPECT_KEYWORDS, SENTIMENT_LEXICON, STOPWORDS
from common.utils import setup_logging

from .data_models import Classification, ReviewContext, SentimentLexicon

logger = setup_logging(__name__, PATHS["app_log_file"], logging.DEBUG)


def load_review_context(
    stopwords=None,
    lexicon: Optional[Mapping[str, frozenset]] = None,
    aspect_keywords: Optional[Mapping[str, Sequence[str]]] = None,
) -> ReviewContext:
    """Build the read-only context, defaulting to the static word lists."""
    stopwords = STOPWORDS if stopwords is None else frozenset(stopwords)
    lexicon = SENTIMENT_LEXICON if lexicon is None else lexicon
    aspect_keywords = ASPECT_KEYWORDS if aspect_keywords is None else aspect_keywords

    sentiment_lexicon: SentimentLexicon = {
        "positive": frozenset(lexicon["positive"]),
        "negative": frozenset(lexicon["negative"]),
    }
    overlap = sentiment_lexicon["positive"] & sentiment_lexicon["negative"]
    if overlap:
        logger.warning(f"Words in both sentiment lists, weighting is undefined: {sorted(overlap)}")

    logger.info(
        f"Loaded review context: {len(stopwords)} stopwords, "
        f"{len(sentiment_lexicon['positive']) + len(sentiment_lexicon['negative'])} sentiment words, "
        f"{len(aspect_keywords)} aspects"
    )
    return {
        "stopwords": stopwords,
        "lexicon": sentiment_lexicon,
        "aspect_keywords": aspect_keywords,
    }


def score_sentiment(tokens: Sequence[str], lexicon: SentimentLexicon) -> Tuple[int, List[str], List[str]]:
    """Return (score, positive_words, negative_words) with +1/-1 per occurrence."""
    score = 0
    positive_words, negative_words = [], []
    for token in tokens:
        if token in lexicon["positive"]:
            score += 1
            positive_words.append(token)
        elif token in lexicon["negative"]:
            score -= 1
            negative_words.append(token)
    return score, positive_words, negative_words


def detect_aspects(tokens: Sequence[str], aspect_keywords: Mapping[str, Sequence[str]]) -> Dict[str, List[str]]:
    """
    Match tokens against each aspect's keywords.
    Matches are listed in the aspect's keyword order, not token order, repeated
    once per occurrence in the text: "fast delivery" yields
    Delivery: [delivery, fast], the result the review walkthrough expects.
    Aspects without any match are left out.
    """
    detected = {}
    for aspect, keywords in aspect_keywords.items():
        found = []
        for keyword in keywords:
            found.extend([keyword] * tokens.count(keyword))
        if found:
            detected[aspect] = found
            logger.debug(f"[NLP] Aspect {aspect}: {found}")
    return detected


def classify(score: int) -> Classification:
    if score > 0:
        return Classification.POSITIVE
    if score < 0:
        return Classification.NEGATIVE
    return Classification.NEUTRAL


def split_aspects_by_sentiment(
    detected_aspects: Mapping[str, Sequence[str]], lexicon: SentimentLexicon
) -> Tuple[List[str], List[str]]:
    """Score each aspect on its own keywords; return (positive_aspects, negative_aspects)."""
    positive_aspects, negative_aspects = [], []
    for aspect, keywords in detected_aspects.items():
        local_score, _, _ = score_sentiment(keywords, lexicon)
        if local_score > 0:
            positive_aspects.append(aspect)
        elif local_score < 0:
            negative_aspects.append(aspect)
    return positive_aspects, negative_aspects


def _join_names(names: Sequence[str]) -> str:
    names = [name.lower() for name in names]
    if len(names) <= 2:
        return " and ".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


def generate_insight(
    classification: Classification,
    detected_aspects: Mapping[str, Sequence[str]],
    positive_aspects: Sequence[str],
    negative_aspects: Sequence[str],
) -> str:
    """Template a one or two sentence summary of the review."""
    if not detected_aspects:
        return f"Overall sentiment is {classification.value.lower()}."

    sentences = []
    if positive_aspects:
        sentences.append(f"Customers appreciate {_join_names(positive_aspects)}.")
    if negative_aspects:
        sentences.append(f"Some concerns about {_join_names(negative_aspects)}.")
    if not sentences:
        sentences.append(f"Customers mention {_join_names(list(detected_aspects))} without strong sentiment.")
    return " ".join(sentences)

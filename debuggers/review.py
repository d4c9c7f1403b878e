"""
Eight-step trace of the lexicon sentiment and aspect pipeline for one review.
"""

from typing import Optional

from common.constants import PATHS, REVIEW
from common.logging import log_review_trace
from common.utils import setup_logging
from reviews import (
    ReviewContext,
    ReviewTrace,
    classify,
    detect_aspects,
    generate_insight,
    load_review_context,
    lowercase_text,
    remove_punctuation,
    remove_stopwords,
    score_sentiment,
    split_aspects_by_sentiment,
    split_tokens,
)

from .base import StepEngine

logger = setup_logging(__name__, PATHS["app_log_file"])


def capture_text(trace: ReviewTrace, context: ReviewContext):
    trace["text_length"] = len(trace["original_text"])
    return trace, f"Captured {trace['text_length']} characters"


def lowercase(trace: ReviewTrace, context: ReviewContext):
    trace["lowercased"] = lowercase_text(trace["original_text"])
    return trace, trace["lowercased"]


def depunctuate(trace: ReviewTrace, context: ReviewContext):
    trace["depunctuated"] = remove_punctuation(trace["lowercased"])
    removed = len(trace["lowercased"]) - len(trace["depunctuated"])
    return trace, f"Removed {removed} punctuation characters"


def drop_stopwords(trace: ReviewTrace, context: ReviewContext):
    trace["raw_tokens"] = split_tokens(trace["depunctuated"])
    trace["filtered_tokens"], trace["removed_stopwords"] = remove_stopwords(
        trace["raw_tokens"], context["stopwords"]
    )
    return trace, f"Removed {len(trace['removed_stopwords'])} stopwords: {', '.join(trace['removed_stopwords'])}"


def tokenize(trace: ReviewTrace, context: ReviewContext):
    trace["tokens"] = list(trace["filtered_tokens"])
    return trace, f"{len(trace['tokens'])} tokens"


def score(trace: ReviewTrace, context: ReviewContext):
    trace["sentiment_score"], trace["positive_words"], trace["negative_words"] = score_sentiment(
        trace["filtered_tokens"], context["lexicon"]
    )
    return trace, (
        f"Score {trace['sentiment_score']:+d} "
        f"({len(trace['positive_words'])} positive, {len(trace['negative_words'])} negative)"
    )


def find_aspects(trace: ReviewTrace, context: ReviewContext):
    trace["detected_aspects"] = detect_aspects(trace["filtered_tokens"], context["aspect_keywords"])
    return trace, ", ".join(trace["detected_aspects"]) or "No aspects detected"


def build_insight(trace: ReviewTrace, context: ReviewContext):
    trace["classification"] = classify(trace["sentiment_score"])
    trace["positive_aspects"], trace["negative_aspects"] = split_aspects_by_sentiment(
        trace["detected_aspects"], context["lexicon"]
    )
    trace["insight"] = generate_insight(
        trace["classification"],
        trace["detected_aspects"],
        trace["positive_aspects"],
        trace["negative_aspects"],
    )
    return trace, f"{trace['classification'].value}: {trace['insight']}"


class ReviewStepEngine(StepEngine):
    """NLP debugger: one review text, eight steps."""

    name = "review"
    max_steps = REVIEW["max_steps"]
    input_field = "original_text"
    step_titles = REVIEW["step_titles"]
    steps = (
        capture_text,
        lowercase,
        depunctuate,
        drop_stopwords,
        tokenize,
        score,
        find_aspects,
        build_insight,
    )

    def __init__(self, context: Optional[ReviewContext] = None):
        super().__init__(context if context is not None else load_review_context())

    def advance(self):
        snapshot = super().advance()
        if self.is_complete():
            log_review_trace(logger, snapshot)
        return snapshot

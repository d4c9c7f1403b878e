from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from common.constants import SERVER
from reviews import Classification


class SessionRequest(BaseModel):
    session_id: str = Field(default=SERVER["default_session"], min_length=1)


class RecommendationInitRequest(SessionRequest):
    """
    Start a recommendation trace.

    product: key of the co-purchase table; empty or unknown names are rejected by the engine
    """
    product: Optional[str] = None


class ReviewInitRequest(SessionRequest):
    """
    Start a review trace.

    text: raw review text, kept verbatim for step 1
    """
    text: Optional[str] = None


class StepLogEntry(BaseModel):
    step: int
    title: str
    detail: str


class SnapshotBase(BaseModel):
    current_step: int
    max_steps: int
    completed: bool
    active: bool
    step_title: Optional[str] = None
    step_log: List[StepLogEntry] = []


class SimilarityEntry(BaseModel):
    item_name: str
    count: int
    total: int
    score: float


class RecommendationSnapshot(SnapshotBase):
    """
    Engine state after a transition.

    Fields of steps not yet executed are left unset and excluded from the response.
    """
    selected_product: Optional[str] = None
    total_purchases: Optional[int] = None
    co_items: Optional[Dict[str, int]] = None
    similarities: Optional[Dict[str, SimilarityEntry]] = None
    ranked: Optional[List[SimilarityEntry]] = None
    top_recommendations: Optional[List[SimilarityEntry]] = None


class ReviewSnapshot(SnapshotBase):
    original_text: Optional[str] = None
    text_length: Optional[int] = None
    lowercased: Optional[str] = None
    depunctuated: Optional[str] = None
    raw_tokens: Optional[List[str]] = None
    filtered_tokens: Optional[List[str]] = None
    removed_stopwords: Optional[List[str]] = None
    tokens: Optional[List[str]] = None
    sentiment_score: Optional[int] = None
    positive_words: Optional[List[str]] = None
    negative_words: Optional[List[str]] = None
    detected_aspects: Optional[Dict[str, List[str]]] = None
    classification: Optional[Classification] = None
    positive_aspects: Optional[List[str]] = None
    negative_aspects: Optional[List[str]] = None
    insight: Optional[str] = None


class ProductRow(BaseModel):
    product: str
    total_purchases: int
    co_purchases: Dict[str, int]


class LexiconResponse(BaseModel):
    stopwords: List[str]
    positive: List[str]
    negative: List[str]
    aspect_keywords: Dict[str, List[str]]

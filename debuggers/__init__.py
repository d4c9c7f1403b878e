"""
Step debuggers - manually paced, resumable traces of the toy algorithms.
"""

from debuggers.base import StepEngine
from debuggers.errors import (
    AlreadyCompleteError,
    DivisionByZeroError,
    InvalidInputError,
    NotActiveError,
    StepEngineError,
    UnknownProductError,
)
from debuggers.recommendation import RecommendationStepEngine
from debuggers.review import ReviewStepEngine

__all__ = [
    "StepEngine",
    "RecommendationStepEngine",
    "ReviewStepEngine",
    "StepEngineError",
    "InvalidInputError",
    "UnknownProductError",
    "DivisionByZeroError",
    "NotActiveError",
    "AlreadyCompleteError",
]

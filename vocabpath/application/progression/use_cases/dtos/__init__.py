"""DTOs for progression use cases."""

from .progression_dtos import (
    AttemptOutcome,
    AttemptReview,
    LearningPathView,
    SectionDetail,
    SubmittedAnswerInput,
)

__all__ = [
    "AttemptOutcome",
    "AttemptReview",
    "LearningPathView",
    "SectionDetail",
    "SubmittedAnswerInput",
]

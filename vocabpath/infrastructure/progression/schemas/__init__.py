"""Progression API schemas."""

from .attempt_schemas import (
    AnswerSubmission,
    AttemptSubmitRequest,
    AttemptSubmitResponse,
    GradedAnswerSchema,
    ModuleCompletionRequest,
    ReviewedAttempt,
    ReviewedQuestion,
    SectionProgressResponse,
    SectionReviewResponse,
)

__all__ = [
    "AnswerSubmission",
    "AttemptSubmitRequest",
    "AttemptSubmitResponse",
    "GradedAnswerSchema",
    "ModuleCompletionRequest",
    "ReviewedAttempt",
    "ReviewedQuestion",
    "SectionProgressResponse",
    "SectionReviewResponse",
]

"""Pydantic schemas for attempt submission, progress and test review."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from vocabpath.constants import MAX_ANSWER_TEXT_LENGTH
from vocabpath.infrastructure.curriculum.schemas import SectionProgressSchema


class AnswerSubmission(BaseModel):
    """One answer: an option for choice questions, text for fill-blank, pairs for matching."""

    question_id: int = Field(..., ge=1)
    selected_option_id: int | None = Field(None, ge=1)
    answer_text: str | None = Field(None, max_length=MAX_ANSWER_TEXT_LENGTH)
    pairs: dict[str, str] | None = Field(None, description="Term to definition mapping")


class AttemptSubmitRequest(BaseModel):
    """Schema for submitting a practice or test module."""

    module_id: int = Field(..., ge=1)
    answers: list[AnswerSubmission] = Field(default_factory=list)


class GradedAnswerSchema(BaseModel):
    question_id: int
    is_correct: bool


class AttemptSubmitResponse(BaseModel):
    """Schema for the graded result of a submission."""

    attempt_id: int
    module_id: int
    module_type: str
    score: float = Field(..., ge=0, le=100)
    passed: bool
    correct_count: int
    total_count: int
    unlocked_section_id: int | None = Field(
        None, description="Section unlocked by passing this test, if any"
    )
    answers: list[GradedAnswerSchema]


class ModuleCompletionRequest(BaseModel):
    """Schema for marking a stage of a section as done."""

    module_type: Literal["introduction", "practice"]


class SectionProgressResponse(SectionProgressSchema):
    """Schema for a section's progress after an update."""

    section_id: int
    state: str


class ReviewedQuestion(BaseModel):
    """A test question with the learner's answer and the expected one."""

    question_id: int
    type: str
    prompt: str
    learner_answer: str | dict[str, str] | None = None
    expected_answer: str | dict[str, str] | None = None
    is_correct: bool


class ReviewedAttempt(BaseModel):
    attempt_id: int
    module_id: int
    score: float | None
    passed: bool | None
    completed_at: datetime | None
    questions: list[ReviewedQuestion]


class SectionReviewResponse(BaseModel):
    """Schema for the latest test attempt of a section."""

    attempt: ReviewedAttempt | None = None

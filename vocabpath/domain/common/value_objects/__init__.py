"""Common value objects shared across all domain modules."""

from .ids import (
    AnswerId,
    AreaId,
    AttemptId,
    ModuleId,
    OptionId,
    OrganizationId,
    PaymentId,
    QuestionId,
    SectionId,
    SectionProgressId,
    UserId,
    VocabularyId,
)

__all__ = [
    "AnswerId",
    "AreaId",
    "AttemptId",
    "ModuleId",
    "OptionId",
    "OrganizationId",
    "PaymentId",
    "QuestionId",
    "SectionId",
    "SectionProgressId",
    "UserId",
    "VocabularyId",
]

"""Pydantic schemas for learning path and section detail responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class SectionProgressSchema(BaseModel):
    """A learner's progress flags for one section."""

    unlocked: bool
    unlocked_at: datetime | None = None
    intro_completed: bool = False
    practice_completed: bool = False
    test_score: float | None = None
    test_passed: bool = False


class LearningPathSection(BaseModel):
    """One visible section of the learner's path."""

    section_id: int
    title: str
    description: str | None = None
    area_id: int
    area_name: str
    area_sort_order: int = Field(..., description="Effective area order for the learner's tenant")
    sort_order: int = Field(..., description="Effective section order within its area")
    state: str = Field(..., description="locked, unlocked_incomplete or unlocked_complete")
    progress: SectionProgressSchema


class LearningPathResponse(BaseModel):
    """Schema for the ordered learning path of a learner."""

    learner_id: int
    organization_id: int | None
    sections: list[LearningPathSection] = Field(..., description="Sections in path order")


class QuestionOptionSchema(BaseModel):
    """Selectable option. Correctness is never exposed."""

    id: int
    option_text: str
    sort_order: int


class QuestionSchema(BaseModel):
    """Question as shown to a learner."""

    id: int
    type: str
    prompt: str
    sort_order: int
    options: list[QuestionOptionSchema] = Field(default_factory=list)
    terms: list[str] | None = Field(None, description="Terms to match (matching questions)")
    definitions: list[str] | None = Field(
        None, description="Definitions to choose from, alphabetical (matching questions)"
    )


class ModuleSchema(BaseModel):
    """Module of a section."""

    id: int
    type: str
    content: dict[str, Any] | None = None
    questions: list[QuestionSchema] = Field(default_factory=list)


class VocabularySchema(BaseModel):
    """Word taught by a section."""

    id: int
    word: str
    definition: str
    translation: str | None = None
    example: str | None = None


class SectionDetailResponse(BaseModel):
    """Schema for the full payload of an unlocked section."""

    section_id: int
    title: str
    description: str | None = None
    area_id: int
    area_name: str
    state: str
    progress: SectionProgressSchema
    modules: list[ModuleSchema]
    vocabulary: list[VocabularySchema]

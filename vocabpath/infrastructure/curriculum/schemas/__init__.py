"""Curriculum API schemas."""

from .area_schemas import AreaCatalogResponse, AreaSummarySchema
from .learning_path_schemas import (
    LearningPathResponse,
    LearningPathSection,
    ModuleSchema,
    QuestionOptionSchema,
    QuestionSchema,
    SectionDetailResponse,
    SectionProgressSchema,
    VocabularySchema,
)

__all__ = [
    "AreaCatalogResponse",
    "AreaSummarySchema",
    "LearningPathResponse",
    "LearningPathSection",
    "ModuleSchema",
    "QuestionOptionSchema",
    "QuestionSchema",
    "SectionDetailResponse",
    "SectionProgressSchema",
    "VocabularySchema",
]

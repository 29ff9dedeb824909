"""Curriculum entities."""

from .area import Area, ScopeType, Section
from .content_override import ContentOverride, EffectivePlacement
from .learning_path import LearningPath, PathEntry
from .module import (
    MatchingPair,
    Module,
    ModuleType,
    Question,
    QuestionOption,
    QuestionType,
    VocabularyEntry,
)
from .organization import Organization

__all__ = [
    "Area",
    "ContentOverride",
    "EffectivePlacement",
    "LearningPath",
    "MatchingPair",
    "Module",
    "ModuleType",
    "Organization",
    "PathEntry",
    "Question",
    "QuestionOption",
    "QuestionType",
    "ScopeType",
    "Section",
    "VocabularyEntry",
]

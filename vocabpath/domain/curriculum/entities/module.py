"""
Module, question and vocabulary entities.

A section has exactly one module of each type. Practice and test
modules carry questions; the introduction carries a reading payload.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Literal

from vocabpath.domain.common.entity import Entity
from vocabpath.domain.common.exceptions import InvariantViolationError
from vocabpath.domain.common.value_object import ValueObject
from vocabpath.domain.common.value_objects import (
    ModuleId,
    OptionId,
    QuestionId,
    SectionId,
    VocabularyId,
)

ModuleType = Literal["introduction", "practice", "test"]
QuestionType = Literal["multiple_choice", "fill_blank", "phonetics", "matching"]

MODULE_TYPES: tuple[ModuleType, ...] = ("introduction", "practice", "test")
CHOICE_QUESTION_TYPES: frozenset[str] = frozenset({"multiple_choice", "phonetics"})


@dataclass(frozen=True)
class MatchingPair(ValueObject):
    """One canonical term/definition pair of a matching question."""

    term: str
    definition: str
    translation: str | None = None


@dataclass
class QuestionOption(Entity[OptionId]):
    """Selectable answer for choice-style questions."""

    id: OptionId
    question_id: QuestionId
    option_text: str
    is_correct: bool = False
    sort_order: int = 0


@dataclass
class Question(Entity[QuestionId]):
    """
    A gradable question within a practice or test module.

    correct_answer holds the literal answer for fill_blank questions and a
    JSON list of {term, definition, translation} objects for matching ones.
    """

    id: QuestionId
    module_id: ModuleId
    type: QuestionType
    prompt: str
    correct_answer: str | None = None
    options: list[QuestionOption] = field(default_factory=list)
    sort_order: int = 0

    def is_choice(self) -> bool:
        """Check if the question is answered by picking an option."""
        return self.type in CHOICE_QUESTION_TYPES

    def find_option(self, option_id: OptionId) -> QuestionOption | None:
        """Return the option with the given id if it belongs to this question."""
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def correct_option(self) -> QuestionOption | None:
        """Return the option flagged as correct, if any."""
        for option in self.options:
            if option.is_correct:
                return option
        return None

    def matching_pairs(self) -> list[MatchingPair]:
        """
        Parse the canonical pair set of a matching question.

        The original authoring tool wrote the term under "word", so both
        keys are accepted.

        Raises:
            InvariantViolationError: If the stored answer is not a list of pairs
        """
        try:
            raw: Any = json.loads(self.correct_answer or "[]")
        except json.JSONDecodeError as e:
            raise InvariantViolationError(
                "Question", f"matching question {self.id} has unparseable pairs"
            ) from e
        if not isinstance(raw, list):
            raise InvariantViolationError(
                "Question", f"matching question {self.id} pairs must be a list"
            )

        pairs = []
        for item in raw:
            if not isinstance(item, dict):
                raise InvariantViolationError(
                    "Question", f"matching question {self.id} has a malformed pair"
                )
            term = item.get("term", item.get("word"))
            definition = item.get("definition")
            if not isinstance(term, str) or not isinstance(definition, str):
                raise InvariantViolationError(
                    "Question", f"matching question {self.id} has a malformed pair"
                )
            pairs.append(
                MatchingPair(term=term, definition=definition, translation=item.get("translation"))
            )
        return pairs


@dataclass
class Module(Entity[ModuleId]):
    """One of the three fixed stages of a section."""

    id: ModuleId
    section_id: SectionId
    type: ModuleType
    content: dict[str, Any] | None = None
    questions: list[Question] = field(default_factory=list)

    def is_graded(self) -> bool:
        """Practice and test modules take answers."""
        return self.type != "introduction"

    def find_question(self, question_id: QuestionId) -> Question | None:
        """Return the question with the given id if it belongs to this module."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


@dataclass
class VocabularyEntry(Entity[VocabularyId]):
    """A word taught by a section, in the section's display order."""

    id: VocabularyId
    word: str
    definition: str
    translation: str | None = None
    example: str | None = None
    sort_order: int = 0

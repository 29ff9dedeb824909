"""DTOs for progression use cases."""

from collections.abc import Mapping
from dataclasses import dataclass

from vocabpath.application.common.learner_context import LearnerContext
from vocabpath.domain.common.value_objects import QuestionId, SectionId
from vocabpath.domain.curriculum.entities.learning_path import PathEntry
from vocabpath.domain.curriculum.entities.module import Module, VocabularyEntry
from vocabpath.domain.progression.entities.attempt import LearnerAnswer, LearnerAttempt
from vocabpath.domain.progression.entities.section_progress import (
    LearnerSectionProgress,
    SectionState,
)
from vocabpath.domain.progression.services.progression_state_machine import SectionStatus


@dataclass
class SubmittedAnswerInput:
    """One answer as received from the caller, with primitive ids."""

    question_id: int
    selected_option_id: int | None = None
    answer_text: str | None = None
    pairs: Mapping[str, str] | None = None


@dataclass
class LearningPathView:
    """A learner's resolved path annotated with unlock/completion state."""

    context: LearnerContext
    sections: list[SectionStatus]


@dataclass
class SectionDetail:
    """Full payload of an unlocked section."""

    entry: PathEntry
    state: SectionState
    progress: LearnerSectionProgress | None
    modules: list[Module]
    vocabulary: list[VocabularyEntry]


@dataclass
class AttemptOutcome:
    """Result of grading and storing one submission."""

    attempt: LearnerAttempt
    module: Module
    correct_count: int
    total_count: int
    progress: LearnerSectionProgress
    unlocked_section_id: SectionId | None = None


@dataclass
class AttemptReview:
    """Latest completed test attempt of a section, with the module it was taken on."""

    module: Module
    attempt: LearnerAttempt

    def answer_for(self, question_id: QuestionId) -> LearnerAnswer | None:
        """Return the stored answer to a question, None if it was left unanswered."""
        for answer in self.attempt.answers:
            if answer.question_id == question_id:
                return answer
        return None

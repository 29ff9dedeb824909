"""
LearnerAttempt entity and its answers.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from vocabpath.domain.common.entity import Entity
from vocabpath.domain.common.value_objects import (
    AnswerId,
    AttemptId,
    ModuleId,
    OptionId,
    QuestionId,
    UserId,
)
from vocabpath.domain.progression.exceptions import AttemptAlreadyCompletedError


@dataclass
class LearnerAnswer(Entity[AnswerId]):
    """One answered question within an attempt, graded at submission time.

    attempt_id stays None until the owning attempt is stored.
    """

    id: AnswerId
    question_id: QuestionId
    is_correct: bool
    attempt_id: AttemptId | None = None
    selected_option_id: OptionId | None = None
    answer_text: str | None = None


@dataclass
class LearnerAttempt(Entity[AttemptId]):
    """
    One graded submission of a module.

    Business Rules:
    - Immutable once completed
    - Every submission is a new attempt, retakes are unlimited
    """

    id: AttemptId
    user_id: UserId
    module_id: ModuleId
    started_at: datetime
    completed_at: datetime | None = None
    score: float | None = None
    passed: bool | None = None
    answers: list[LearnerAnswer] = field(default_factory=list)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def complete(
        self,
        score: float,
        passed: bool,
        answers: list[LearnerAnswer],
        now: datetime | None = None,
    ) -> None:
        """
        Seal the attempt with its grade.

        Raises:
            AttemptAlreadyCompletedError: If the attempt was already completed
        """
        if self.is_completed:
            raise AttemptAlreadyCompletedError(self.id.value)
        self.score = score
        self.passed = passed
        self.answers = answers
        self.completed_at = now or datetime.now(UTC)

    @classmethod
    def start(
        cls, user_id: UserId, module_id: ModuleId, now: datetime | None = None
    ) -> "LearnerAttempt":
        """Start a new attempt (ID will be 0 until persisted)."""
        return cls(
            id=AttemptId.generate(),
            user_id=user_id,
            module_id=module_id,
            started_at=now or datetime.now(UTC),
        )

"""
LearnerSectionProgress aggregate root.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

from vocabpath.domain.common.aggregate_root import AggregateRoot
from vocabpath.domain.common.exceptions import ValidationError
from vocabpath.domain.common.value_objects import SectionId, SectionProgressId, UserId
from vocabpath.domain.progression.events import (
    SectionTestFailed,
    SectionTestPassed,
    SectionUnlocked,
)

SectionState = Literal["locked", "unlocked_incomplete", "unlocked_complete"]


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass
class LearnerSectionProgress(AggregateRoot[SectionProgressId]):
    """
    One learner's progress through one section.

    Business Rules:
    - Once unlocked, a section never locks again
    - Completing the introduction or practice is idempotent
    - The latest test result overwrites the previous one, a later
      failing retake clears an earlier pass
    """

    id: SectionProgressId
    user_id: UserId
    section_id: SectionId
    unlocked: bool = False
    unlocked_at: datetime | None = None
    intro_completed: bool = False
    practice_completed: bool = False
    test_score: float | None = None
    test_passed: bool = False
    updated_at: datetime = field(default_factory=_now)

    @property
    def state(self) -> SectionState:
        if not self.unlocked:
            return "locked"
        if self.test_passed:
            return "unlocked_complete"
        return "unlocked_incomplete"

    def unlock(self, now: datetime | None = None) -> None:
        """Make the section reachable. Repeated unlocks keep the first unlock time."""
        now = now or _now()
        self.updated_at = now
        if self.unlocked:
            return
        self.unlocked = True
        self.unlocked_at = now
        self._record_event(SectionUnlocked(user_id=self.user_id.value, section_id=self.section_id.value))

    def complete_introduction(self, now: datetime | None = None) -> None:
        """Mark the introduction module as read."""
        self.intro_completed = True
        self.updated_at = now or _now()

    def complete_practice(self, now: datetime | None = None) -> None:
        """Mark practice as done. Practice has no pass threshold."""
        self.practice_completed = True
        self.updated_at = now or _now()

    def absorb(self, stored: "LearnerSectionProgress") -> None:
        """
        Fold in a row for the same section that another request stored first.

        Unlock and stage flags are kept from both, the earliest unlock time
        wins, and a test result recorded here replaces the stored one.
        """
        if stored.unlocked:
            self.unlocked = True
            if stored.unlocked_at is not None and (
                self.unlocked_at is None or stored.unlocked_at < self.unlocked_at
            ):
                self.unlocked_at = stored.unlocked_at
        self.intro_completed = self.intro_completed or stored.intro_completed
        self.practice_completed = self.practice_completed or stored.practice_completed
        if self.test_score is None:
            self.test_score = stored.test_score
            self.test_passed = stored.test_passed

    def record_test_result(self, score: float, passed: bool, now: datetime | None = None) -> None:
        """
        Store the outcome of the newest test attempt.

        Raises:
            ValidationError: If score is outside 0..100
        """
        if score < 0 or score > 100:
            raise ValidationError("Test score must be between 0 and 100", field="score", value=score)
        self.test_score = score
        self.test_passed = passed
        self.updated_at = now or _now()
        event_type = SectionTestPassed if passed else SectionTestFailed
        self._record_event(
            event_type(user_id=self.user_id.value, section_id=self.section_id.value, score=score)
        )

    @classmethod
    def create(cls, user_id: UserId, section_id: SectionId) -> "LearnerSectionProgress":
        """Create a locked progress row (ID will be 0 until persisted)."""
        return cls(id=SectionProgressId.generate(), user_id=user_id, section_id=section_id)

    @classmethod
    def create_unlocked(
        cls, user_id: UserId, section_id: SectionId, now: datetime | None = None
    ) -> "LearnerSectionProgress":
        """Create a progress row for a section the learner just reached."""
        progress = cls.create(user_id, section_id)
        progress.unlock(now)
        return progress

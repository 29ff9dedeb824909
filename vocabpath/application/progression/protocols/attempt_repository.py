"""Protocol for LearnerAttempt repository."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from vocabpath.domain.common.value_objects import ModuleId, SectionId, UserId
from vocabpath.domain.progression.entities.attempt import LearnerAttempt


class AttemptRepositoryProtocol(Protocol):
    """Protocol for attempt operations. Attempts are only ever added."""

    def add(self, attempt: LearnerAttempt) -> LearnerAttempt:
        """
        Store a completed attempt together with its answers.

        Returns:
            Saved attempt with database IDs for the attempt and its answers
        """
        ...

    def find_latest_completed(self, user_id: UserId, module_id: ModuleId) -> LearnerAttempt | None:
        """Get the newest completed attempt of a learner for a module."""
        ...

    def count_by_module(self, user_id: UserId, module_id: ModuleId) -> int:
        ...

    def count_recent_passes(
        self, section_ids: Sequence[SectionId], since: datetime
    ) -> dict[SectionId, int]:
        """Count passed attempts per section, by any learner, completed at or after `since`."""
        ...

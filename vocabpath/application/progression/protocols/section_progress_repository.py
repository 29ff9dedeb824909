"""Protocol for LearnerSectionProgress repository."""

from typing import Protocol

from vocabpath.domain.common.value_objects import SectionId, UserId
from vocabpath.domain.progression.entities.section_progress import LearnerSectionProgress


class SectionProgressRepositoryProtocol(Protocol):
    """Protocol for section progress operations."""

    def find_one(self, user_id: UserId, section_id: SectionId) -> LearnerSectionProgress | None:
        """
        Find the progress row of one learner for one section.

        Returns:
            Progress entity if the learner ever reached the section, None otherwise
        """
        ...

    def find_by_user(self, user_id: UserId) -> dict[SectionId, LearnerSectionProgress]:
        """Get every progress row of a learner keyed by section."""
        ...

    def save(self, progress: LearnerSectionProgress) -> LearnerSectionProgress:
        """
        Insert or update a progress row, keyed by (user, section).

        Args:
            progress: The progress entity to save

        Returns:
            Saved progress entity with database-generated values
        """
        ...

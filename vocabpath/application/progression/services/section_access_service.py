"""Application service checking that a learner may work in a section."""

from dataclasses import dataclass

from vocabpath.application.common.learner_context import LearnerContext
from vocabpath.application.curriculum.services.learning_path_service import LearningPathService
from vocabpath.application.progression.protocols.section_progress_repository import (
    SectionProgressRepositoryProtocol,
)
from vocabpath.domain.curriculum.entities.learning_path import LearningPath, PathEntry
from vocabpath.domain.progression.entities.section_progress import (
    LearnerSectionProgress,
    SectionState,
)
from vocabpath.domain.progression.services.progression_state_machine import (
    ProgressionStateMachine,
)
from vocabpath.exceptions import AccessDeniedError, SectionNotFoundError


@dataclass(frozen=True)
class UnlockedSection:
    """A section the learner may open, with the path it was resolved against."""

    path: LearningPath
    entry: PathEntry
    state: SectionState
    progress: LearnerSectionProgress | None


class SectionAccessService:
    """Resolves the path and refuses sections that are out of scope or locked."""

    def __init__(
        self,
        learning_path_service: LearningPathService,
        progress_repository: SectionProgressRepositoryProtocol,
        state_machine: ProgressionStateMachine,
    ) -> None:
        self.learning_path_service = learning_path_service
        self.progress_repository = progress_repository
        self.state_machine = state_machine

    def require_unlocked(self, context: LearnerContext, section_id: int) -> UnlockedSection:
        """
        Check that a section is visible and unlocked for the learner.

        Args:
            context: The learner's context
            section_id: The section to open

        Returns:
            The section's path entry, state and progress row

        Raises:
            SectionNotFoundError: If the section does not exist or is outside the tenant's scope
            AccessDeniedError: With reason section_locked if the section is hidden or not unlocked
        """
        if self.learning_path_service.find_in_scope(context, section_id) is None:
            raise SectionNotFoundError(section_id)

        path = self.learning_path_service.resolve(context)
        entry = next((e for e in path if e.section.id.value == section_id), None)
        if entry is None:
            raise AccessDeniedError("section_locked")

        progress = self.progress_repository.find_one(context.learner_id, entry.section.id)
        if not self.state_machine.is_unlocked(path, entry.section.id, progress):
            raise AccessDeniedError("section_locked")

        return UnlockedSection(
            path=path,
            entry=entry,
            state=self.state_machine.state_of(path, entry.section.id, progress),
            progress=progress,
        )

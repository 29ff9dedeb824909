"""Use case for reading a learner's learning path."""

from datetime import datetime

from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.curriculum.services.learning_path_service import LearningPathService
from vocabpath.application.progression.protocols.section_progress_repository import (
    SectionProgressRepositoryProtocol,
)
from vocabpath.application.progression.use_cases.dtos import LearningPathView
from vocabpath.domain.progression.services.progression_state_machine import (
    ProgressionStateMachine,
)


class GetLearningPathUseCase:
    """Use case for reading a learner's learning path."""

    def __init__(
        self,
        learner_access_service: LearnerAccessService,
        learning_path_service: LearningPathService,
        progress_repository: SectionProgressRepositoryProtocol,
        state_machine: ProgressionStateMachine,
    ) -> None:
        """Initialize use case with services and repository protocols."""
        self.learner_access_service = learner_access_service
        self.learning_path_service = learning_path_service
        self.progress_repository = progress_repository
        self.state_machine = state_machine

    def get_learning_path(
        self, learner_id: int, now: datetime | None = None, area_id: int | None = None
    ) -> LearningPathView:
        """
        Get the ordered visible sections with the learner's state for each.

        Args:
            learner_id: ID of the learner
            now: Current time, used by the access gate
            area_id: Only return sections of this area; unlock state is still
                computed over the whole path

        Returns:
            LearningPathView (empty when the learner's tenant is inactive)

        Raises:
            LearnerNotFoundError: If the learner does not exist
            AccessDeniedError: If the access gate blocks the learner
        """
        context = self.learner_access_service.authorize(learner_id, now)
        path = self.learning_path_service.resolve(context)
        progress = self.progress_repository.find_by_user(context.learner_id) if len(path) else {}
        sections = self.state_machine.statuses(path, progress)
        if area_id is not None:
            sections = [item for item in sections if item.entry.area.id.value == area_id]
        return LearningPathView(context=context, sections=sections)

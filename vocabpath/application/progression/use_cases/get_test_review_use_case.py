"""Use case for reviewing the latest test attempt of a section."""

from datetime import datetime

from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.curriculum.protocols.module_repository import ModuleRepositoryProtocol
from vocabpath.application.progression.protocols.attempt_repository import (
    AttemptRepositoryProtocol,
)
from vocabpath.application.progression.services.section_access_service import (
    SectionAccessService,
)
from vocabpath.application.progression.use_cases.dtos import AttemptReview


class GetTestReviewUseCase:
    """Use case for reviewing the latest test attempt of a section."""

    def __init__(
        self,
        learner_access_service: LearnerAccessService,
        section_access_service: SectionAccessService,
        module_repository: ModuleRepositoryProtocol,
        attempt_repository: AttemptRepositoryProtocol,
    ) -> None:
        self.learner_access_service = learner_access_service
        self.section_access_service = section_access_service
        self.module_repository = module_repository
        self.attempt_repository = attempt_repository

    def get_review(
        self, learner_id: int, section_id: int, now: datetime | None = None
    ) -> AttemptReview | None:
        """
        Get the learner's newest completed test attempt for a section.

        Returns:
            AttemptReview, or None if the section has no test or it was never taken

        Raises:
            LearnerNotFoundError: If the learner does not exist
            SectionNotFoundError: If the section is outside the learner's scope
            AccessDeniedError: If the learner is blocked or the section is locked
        """
        context = self.learner_access_service.authorize(learner_id, now)
        unlocked = self.section_access_service.require_unlocked(context, section_id)

        module = self.module_repository.find_by_section_and_type(unlocked.entry.section.id, "test")
        if module is None:
            return None

        attempt = self.attempt_repository.find_latest_completed(context.learner_id, module.id)
        if attempt is None:
            return None
        return AttemptReview(module=module, attempt=attempt)

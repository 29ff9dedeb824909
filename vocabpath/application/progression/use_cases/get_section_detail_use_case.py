"""Use case for opening an unlocked section."""

from datetime import datetime

from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.curriculum.protocols.module_repository import ModuleRepositoryProtocol
from vocabpath.application.progression.services.section_access_service import (
    SectionAccessService,
)
from vocabpath.application.progression.use_cases.dtos import SectionDetail


class GetSectionDetailUseCase:
    """Use case for opening an unlocked section."""

    def __init__(
        self,
        learner_access_service: LearnerAccessService,
        section_access_service: SectionAccessService,
        module_repository: ModuleRepositoryProtocol,
    ) -> None:
        self.learner_access_service = learner_access_service
        self.section_access_service = section_access_service
        self.module_repository = module_repository

    def get_section(self, learner_id: int, section_id: int, now: datetime | None = None) -> SectionDetail:
        """
        Get modules, questions and vocabulary of a section.

        Raises:
            LearnerNotFoundError: If the learner does not exist
            SectionNotFoundError: If the section is outside the learner's scope
            AccessDeniedError: If the learner is blocked or the section is locked
        """
        context = self.learner_access_service.authorize(learner_id, now)
        unlocked = self.section_access_service.require_unlocked(context, section_id)
        section = unlocked.entry.section

        return SectionDetail(
            entry=unlocked.entry,
            state=unlocked.state,
            progress=unlocked.progress,
            modules=self.module_repository.find_by_section(section.id),
            vocabulary=self.module_repository.find_vocabulary(section.id),
        )

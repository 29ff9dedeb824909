"""Use case for marking the introduction or practice stage of a section as done."""

from datetime import UTC, datetime
from typing import Literal

import structlog

from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.common.unit_of_work import UnitOfWork
from vocabpath.application.progression.protocols.section_progress_repository import (
    SectionProgressRepositoryProtocol,
)
from vocabpath.application.progression.services.section_access_service import (
    SectionAccessService,
)
from vocabpath.domain.progression.entities.section_progress import LearnerSectionProgress
from vocabpath.domain.progression.services.progression_state_machine import (
    ProgressionStateMachine,
)

logger = structlog.get_logger(__name__)

CompletableModuleType = Literal["introduction", "practice"]


class CompleteModuleUseCase:
    """Use case for marking the introduction or practice stage of a section as done."""

    def __init__(
        self,
        learner_access_service: LearnerAccessService,
        section_access_service: SectionAccessService,
        progress_repository: SectionProgressRepositoryProtocol,
        state_machine: ProgressionStateMachine,
        uow: UnitOfWork,
    ) -> None:
        self.learner_access_service = learner_access_service
        self.section_access_service = section_access_service
        self.progress_repository = progress_repository
        self.state_machine = state_machine
        self.uow = uow

    def complete(
        self,
        learner_id: int,
        section_id: int,
        module_type: CompletableModuleType,
        now: datetime | None = None,
    ) -> LearnerSectionProgress:
        """
        Mark a stage complete. Repeating the call changes nothing but updated_at.

        Args:
            learner_id: ID of the learner
            section_id: ID of the section
            module_type: "introduction" or "practice"
            now: Current time

        Returns:
            The saved progress row

        Raises:
            LearnerNotFoundError: If the learner does not exist
            SectionNotFoundError: If the section is outside the learner's scope
            AccessDeniedError: If the learner is blocked or the section is locked
        """
        now = now or datetime.now(UTC)
        context = self.learner_access_service.authorize(learner_id, now)
        unlocked = self.section_access_service.require_unlocked(context, section_id)
        section_id_vo = unlocked.entry.section.id

        with self.uow:
            if module_type == "introduction":
                progress = self.state_machine.complete_introduction(
                    context.learner_id, section_id_vo, unlocked.progress, now
                )
            else:
                progress = self.state_machine.complete_practice(
                    context.learner_id, section_id_vo, unlocked.progress, now
                )
            self.uow.track(progress)
            saved = self.progress_repository.save(progress)
            self.uow.commit()

        for event in self.uow.collect_events():
            logger.info("domain_event", **event.to_dict())
        logger.info(
            "module_completed",
            learner_id=learner_id,
            section_id=section_id,
            module_type=module_type,
        )
        return saved

"""Use case for grading and storing a practice or test submission."""

from collections.abc import Sequence
from datetime import UTC, datetime

import structlog

from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.common.unit_of_work import UnitOfWork
from vocabpath.application.curriculum.protocols.module_repository import ModuleRepositoryProtocol
from vocabpath.application.progression.protocols.attempt_repository import (
    AttemptRepositoryProtocol,
)
from vocabpath.application.progression.protocols.section_progress_repository import (
    SectionProgressRepositoryProtocol,
)
from vocabpath.application.progression.services.section_access_service import (
    SectionAccessService,
)
from vocabpath.application.progression.use_cases.dtos import AttemptOutcome, SubmittedAnswerInput
from vocabpath.domain.common.value_objects import AnswerId, ModuleId, OptionId, QuestionId
from vocabpath.domain.progression.entities.attempt import LearnerAnswer, LearnerAttempt
from vocabpath.domain.progression.exceptions import SubmissionRejectedError
from vocabpath.domain.progression.services.assessment_scorer import (
    AssessmentScorer,
    SubmittedAnswer,
)
from vocabpath.domain.progression.services.progression_state_machine import (
    ProgressionStateMachine,
)
from vocabpath.exceptions import MalformedSubmissionError, ModuleNotFoundError, SectionNotFoundError

logger = structlog.get_logger(__name__)


class SubmitAttemptUseCase:
    """
    Grades a batch of answers and applies the result in one transaction.

    The attempt, its answers, the section's progress row and, after a
    passed test, the next section's unlock are committed together.
    """

    def __init__(
        self,
        learner_access_service: LearnerAccessService,
        section_access_service: SectionAccessService,
        module_repository: ModuleRepositoryProtocol,
        attempt_repository: AttemptRepositoryProtocol,
        progress_repository: SectionProgressRepositoryProtocol,
        scorer: AssessmentScorer,
        state_machine: ProgressionStateMachine,
        uow: UnitOfWork,
    ) -> None:
        self.learner_access_service = learner_access_service
        self.section_access_service = section_access_service
        self.module_repository = module_repository
        self.attempt_repository = attempt_repository
        self.progress_repository = progress_repository
        self.scorer = scorer
        self.state_machine = state_machine
        self.uow = uow

    def submit(
        self,
        learner_id: int,
        module_id: int,
        answers: Sequence[SubmittedAnswerInput],
        now: datetime | None = None,
    ) -> AttemptOutcome:
        """
        Grade a submission and record its consequences.

        Args:
            learner_id: ID of the learner
            module_id: ID of the practice or test module
            answers: Submitted answers, at most one per question
            now: Current time

        Returns:
            AttemptOutcome with the stored attempt and counts

        Raises:
            LearnerNotFoundError: If the learner does not exist
            ModuleNotFoundError: If the module does not exist or is outside the learner's scope
            AccessDeniedError: If the learner is blocked or the section is locked
            MalformedSubmissionError: If the answers do not fit the module
            StorageError: If the store fails while writing; nothing is kept
        """
        now = now or datetime.now(UTC)
        context = self.learner_access_service.authorize(learner_id, now)

        module = self.module_repository.find_by_id(ModuleId(module_id))
        if module is None:
            raise ModuleNotFoundError(module_id)

        try:
            unlocked = self.section_access_service.require_unlocked(context, module.section_id.value)
        except SectionNotFoundError as e:
            raise ModuleNotFoundError(module_id) from e

        try:
            report = self.scorer.grade(module, [self._to_submitted(answer) for answer in answers])
        except SubmissionRejectedError as e:
            logger.info(
                "submission_rejected",
                learner_id=learner_id,
                module_id=module_id,
                reason=e.message,
            )
            raise MalformedSubmissionError(e.message, question_id=e.question_id) from e

        section_id = unlocked.entry.section.id
        unlocked_next = None

        with self.uow:
            attempt = LearnerAttempt.start(context.learner_id, module.id, now)
            attempt.complete(
                score=report.score,
                passed=report.passed,
                answers=[
                    LearnerAnswer(
                        id=AnswerId.generate(),
                        question_id=graded.question_id,
                        is_correct=graded.is_correct,
                        selected_option_id=graded.selected_option_id,
                        answer_text=graded.answer_text,
                    )
                    for graded in report.answers
                ],
                now=now,
            )
            saved_attempt = self.attempt_repository.add(attempt)
            attempt_number = self.attempt_repository.count_by_module(context.learner_id, module.id)

            if module.type == "test":
                next_entry = unlocked.path.next_after(section_id)
                next_progress = (
                    self.progress_repository.find_one(context.learner_id, next_entry.section.id)
                    if next_entry is not None
                    else None
                )
                outcome = self.state_machine.record_test(
                    unlocked.path,
                    context.learner_id,
                    section_id,
                    unlocked.progress,
                    next_progress,
                    report.score,
                    report.passed,
                    now,
                )
                progress = self.uow.track(outcome.progress)
                saved_progress = self.progress_repository.save(progress)
                if outcome.unlocked_next is not None:
                    unlocked_next = self.uow.track(outcome.unlocked_next)
                    self.progress_repository.save(unlocked_next)
            else:
                progress = self.state_machine.complete_practice(
                    context.learner_id, section_id, unlocked.progress, now
                )
                self.uow.track(progress)
                saved_progress = self.progress_repository.save(progress)

            self.uow.commit()

        for event in self.uow.collect_events():
            logger.info("domain_event", **event.to_dict())
        logger.info(
            "attempt_submitted",
            learner_id=learner_id,
            module_id=module_id,
            module_type=module.type,
            attempt_id=saved_attempt.id.value,
            attempt_number=attempt_number,
            score=report.score,
            passed=report.passed,
            correct_count=report.correct_count,
            total_count=report.total_count,
        )

        return AttemptOutcome(
            attempt=saved_attempt,
            module=module,
            correct_count=report.correct_count,
            total_count=report.total_count,
            progress=saved_progress,
            unlocked_section_id=unlocked_next.section_id if unlocked_next is not None else None,
        )

    @staticmethod
    def _to_submitted(answer: SubmittedAnswerInput) -> SubmittedAnswer:
        return SubmittedAnswer(
            question_id=QuestionId(answer.question_id),
            selected_option_id=(
                OptionId(answer.selected_option_id) if answer.selected_option_id is not None else None
            ),
            answer_text=answer.answer_text,
            pairs=answer.pairs,
        )

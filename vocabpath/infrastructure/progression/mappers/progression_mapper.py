"""Mappers for progression ORM ↔ Domain conversion."""

from vocabpath.domain.common.value_objects import (
    AnswerId,
    AttemptId,
    ModuleId,
    OptionId,
    QuestionId,
    SectionId,
    SectionProgressId,
    UserId,
)
from vocabpath.domain.progression.entities.attempt import LearnerAnswer, LearnerAttempt
from vocabpath.domain.progression.entities.section_progress import LearnerSectionProgress
from vocabpath.models import LearnerAnswer as LearnerAnswerORM
from vocabpath.models import LearnerAttempt as LearnerAttemptORM
from vocabpath.models import LearnerSectionProgress as LearnerSectionProgressORM
from vocabpath.utils import ensure_utc


class SectionProgressMapper:
    """Mapper for LearnerSectionProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LearnerSectionProgressORM) -> LearnerSectionProgress:
        """Convert ORM model to domain entity."""
        return LearnerSectionProgress(
            id=SectionProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            section_id=SectionId(orm_model.section_id),
            unlocked=orm_model.unlocked,
            unlocked_at=ensure_utc(orm_model.unlocked_at),
            intro_completed=orm_model.intro_completed,
            practice_completed=orm_model.practice_completed,
            test_score=orm_model.test_score,
            test_passed=orm_model.test_passed,
            updated_at=ensure_utc(orm_model.updated_at),
        )

    def to_orm(
        self,
        domain_entity: LearnerSectionProgress,
        orm_model: LearnerSectionProgressORM | None = None,
    ) -> LearnerSectionProgressORM:
        """Convert domain entity to ORM model."""
        if orm_model is None:
            orm_model = LearnerSectionProgressORM(
                user_id=domain_entity.user_id.value,
                section_id=domain_entity.section_id.value,
            )
        orm_model.unlocked = domain_entity.unlocked
        orm_model.unlocked_at = domain_entity.unlocked_at
        orm_model.intro_completed = domain_entity.intro_completed
        orm_model.practice_completed = domain_entity.practice_completed
        orm_model.test_score = domain_entity.test_score
        orm_model.test_passed = domain_entity.test_passed
        orm_model.updated_at = domain_entity.updated_at
        return orm_model


class AttemptMapper:
    """Mapper for LearnerAttempt ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LearnerAttemptORM) -> LearnerAttempt:
        """Convert ORM model (with answers loaded) to domain entity."""
        return LearnerAttempt(
            id=AttemptId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            module_id=ModuleId(orm_model.module_id),
            started_at=ensure_utc(orm_model.started_at),
            completed_at=ensure_utc(orm_model.completed_at),
            score=orm_model.score,
            passed=orm_model.passed,
            answers=[self.answer_to_domain(answer) for answer in orm_model.answers],
        )

    def answer_to_domain(self, orm_model: LearnerAnswerORM) -> LearnerAnswer:
        return LearnerAnswer(
            id=AnswerId(orm_model.id),
            attempt_id=AttemptId(orm_model.attempt_id),
            question_id=QuestionId(orm_model.question_id),
            is_correct=orm_model.is_correct,
            selected_option_id=(
                OptionId(orm_model.selected_option_id)
                if orm_model.selected_option_id is not None
                else None
            ),
            answer_text=orm_model.answer_text,
        )

    def to_orm(self, domain_entity: LearnerAttempt) -> LearnerAttemptORM:
        """Convert a new attempt and its answers to ORM models."""
        return LearnerAttemptORM(
            user_id=domain_entity.user_id.value,
            module_id=domain_entity.module_id.value,
            started_at=domain_entity.started_at,
            completed_at=domain_entity.completed_at,
            score=domain_entity.score,
            passed=domain_entity.passed,
            answers=[
                LearnerAnswerORM(
                    question_id=answer.question_id.value,
                    selected_option_id=(
                        answer.selected_option_id.value
                        if answer.selected_option_id is not None
                        else None
                    ),
                    answer_text=answer.answer_text,
                    is_correct=answer.is_correct,
                )
                for answer in domain_entity.answers
            ],
        )

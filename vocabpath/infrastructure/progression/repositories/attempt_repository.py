"""Repository for LearnerAttempt entities."""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from vocabpath.domain.common.value_objects import ModuleId, SectionId, UserId
from vocabpath.domain.progression.entities.attempt import LearnerAttempt
from vocabpath.infrastructure.progression.mappers.progression_mapper import AttemptMapper
from vocabpath.models import LearnerAttempt as LearnerAttemptORM
from vocabpath.models import Module as ModuleORM


class AttemptRepository:
    """Repository for LearnerAttempt entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AttemptMapper()

    def add(self, attempt: LearnerAttempt) -> LearnerAttempt:
        """
        Store a completed attempt together with its answers.

        Args:
            attempt: The completed attempt (ID 0)

        Returns:
            Saved attempt with database IDs
        """
        orm_model = self.mapper.to_orm(attempt)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def find_latest_completed(self, user_id: UserId, module_id: ModuleId) -> LearnerAttempt | None:
        stmt = (
            select(LearnerAttemptORM)
            .options(selectinload(LearnerAttemptORM.answers))
            .where(
                LearnerAttemptORM.user_id == user_id.value,
                LearnerAttemptORM.module_id == module_id.value,
                LearnerAttemptORM.completed_at.is_not(None),
            )
            .order_by(LearnerAttemptORM.completed_at.desc(), LearnerAttemptORM.id.desc())
            .limit(1)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def count_by_module(self, user_id: UserId, module_id: ModuleId) -> int:
        stmt = select(func.count(LearnerAttemptORM.id)).where(
            LearnerAttemptORM.user_id == user_id.value,
            LearnerAttemptORM.module_id == module_id.value,
        )
        return self.db.execute(stmt).scalar() or 0

    def count_recent_passes(
        self, section_ids: Sequence[SectionId], since: datetime
    ) -> dict[SectionId, int]:
        """
        Count passed attempts per section across all learners.

        Args:
            section_ids: Sections to count
            since: Oldest completion time included

        Returns:
            Counts keyed by section; sections without passes are absent
        """
        if not section_ids:
            return {}
        stmt = (
            select(ModuleORM.section_id, func.count(LearnerAttemptORM.id))
            .join(ModuleORM, ModuleORM.id == LearnerAttemptORM.module_id)
            .where(
                ModuleORM.section_id.in_([section_id.value for section_id in section_ids]),
                LearnerAttemptORM.passed.is_(True),
                LearnerAttemptORM.completed_at >= since,
            )
            .group_by(ModuleORM.section_id)
        )
        return {SectionId(section_id): count for section_id, count in self.db.execute(stmt).all()}

"""Repository for LearnerSectionProgress aggregates."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vocabpath.domain.common.value_objects import SectionId, UserId
from vocabpath.domain.progression.entities.section_progress import LearnerSectionProgress
from vocabpath.infrastructure.progression.mappers.progression_mapper import SectionProgressMapper
from vocabpath.models import LearnerSectionProgress as LearnerSectionProgressORM


class SectionProgressRepository:
    """Repository for LearnerSectionProgress aggregates."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SectionProgressMapper()

    def _find_orm(self, user_id: int, section_id: int) -> LearnerSectionProgressORM | None:
        stmt = select(LearnerSectionProgressORM).where(
            LearnerSectionProgressORM.user_id == user_id,
            LearnerSectionProgressORM.section_id == section_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def find_one(self, user_id: UserId, section_id: SectionId) -> LearnerSectionProgress | None:
        """
        Find the progress row of one learner for one section.

        Returns:
            Progress entity if the learner ever reached the section, None otherwise
        """
        orm_model = self._find_orm(user_id.value, section_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> dict[SectionId, LearnerSectionProgress]:
        stmt = select(LearnerSectionProgressORM).where(
            LearnerSectionProgressORM.user_id == user_id.value
        )
        return {
            SectionId(orm.section_id): self.mapper.to_domain(orm)
            for orm in self.db.execute(stmt).scalars().all()
        }

    def save(self, progress: LearnerSectionProgress) -> LearnerSectionProgress:
        """
        Insert or update a progress row, matched on (user, section).

        Args:
            progress: The progress entity to save

        Returns:
            Saved progress entity with database-generated values
        """
        orm_model = self._find_orm(progress.user_id.value, progress.section_id.value)
        if orm_model is None:
            orm_model = self._insert(progress)
        else:
            self.mapper.to_orm(progress, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def _insert(self, progress: LearnerSectionProgress) -> LearnerSectionProgressORM:
        # A savepoint keeps the rest of the transaction (the attempt) alive when
        # another transaction committed the same (user, section) row first.
        orm_model = self.mapper.to_orm(progress)
        try:
            with self.db.begin_nested():
                self.db.add(orm_model)
        except IntegrityError:
            stored = self._find_orm(progress.user_id.value, progress.section_id.value)
            if stored is None:
                raise
            progress.absorb(self.mapper.to_domain(stored))
            return self.mapper.to_orm(progress, stored)
        return orm_model

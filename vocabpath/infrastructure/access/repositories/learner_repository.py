"""Repository for Learner domain entities."""

from sqlalchemy.orm import Session

from vocabpath.domain.access.entities.learner import Learner
from vocabpath.domain.common.value_objects import UserId
from vocabpath.exceptions import LearnerNotFoundError
from vocabpath.infrastructure.access.mappers.learner_mapper import LearnerMapper
from vocabpath.models import User as UserORM


class LearnerRepository:
    """Repository for Learner domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LearnerMapper()

    def find_by_id(self, user_id: UserId) -> Learner | None:
        """
        Find a learner by ID.

        Args:
            user_id: The learner ID

        Returns:
            Learner entity if found, None otherwise
        """
        orm_model = self.db.get(UserORM, user_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, learner: Learner) -> Learner:
        """
        Persist billing state of an existing learner.

        Args:
            learner: The learner entity to save

        Returns:
            Saved learner entity

        Raises:
            LearnerNotFoundError: If the user row is gone
        """
        orm_model = self.db.get(UserORM, learner.id.value)
        if orm_model is None:
            raise LearnerNotFoundError(learner.id.value)
        self.mapper.to_orm(learner, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

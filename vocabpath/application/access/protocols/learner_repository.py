"""Protocols for learner and organization repositories."""

from typing import Protocol

from vocabpath.domain.access.entities.learner import Learner
from vocabpath.domain.common.value_objects import OrganizationId, UserId
from vocabpath.domain.curriculum.entities.organization import Organization


class LearnerRepositoryProtocol(Protocol):
    """Protocol for Learner repository operations."""

    def find_by_id(self, user_id: UserId) -> Learner | None:
        """
        Find a learner by ID.

        Args:
            user_id: The learner ID

        Returns:
            Learner entity if found, None otherwise
        """
        ...

    def save(self, learner: Learner) -> Learner:
        """
        Persist billing state of an existing learner.

        Args:
            learner: The learner entity to save

        Returns:
            Saved learner entity
        """
        ...


class OrganizationRepositoryProtocol(Protocol):
    """Protocol for Organization lookups."""

    def find_by_id(self, organization_id: OrganizationId) -> Organization | None:
        ...

"""Explicit per-request learner context."""

from dataclasses import dataclass

from vocabpath.domain.common.value_objects import OrganizationId, UserId


@dataclass(frozen=True)
class LearnerContext:
    """
    Who is asking, and for which tenant.

    Built once per request from the learner row and passed into every
    engine call instead of being read from ambient session state.
    """

    learner_id: UserId
    organization_id: OrganizationId | None = None
    organization_active: bool = True

    @property
    def is_tenanted(self) -> bool:
        return self.organization_id is not None

    @property
    def sees_content(self) -> bool:
        """Learners of a deactivated tenant get an empty path."""
        return not self.is_tenanted or self.organization_active

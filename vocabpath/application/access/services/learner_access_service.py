"""Application service resolving the learner context and enforcing the access gate."""

from datetime import datetime

import structlog

from vocabpath.application.access.protocols.learner_repository import (
    LearnerRepositoryProtocol,
    OrganizationRepositoryProtocol,
)
from vocabpath.application.common.learner_context import LearnerContext
from vocabpath.domain.access.entities.learner import Learner
from vocabpath.domain.access.services.access_gate import AccessDecision, AccessGate, PaymentStatus
from vocabpath.domain.common.value_objects import UserId
from vocabpath.exceptions import AccessDeniedError, LearnerNotFoundError

logger = structlog.get_logger(__name__)


class LearnerAccessService:
    """Loads learners and applies the access gate on learner-facing entry points."""

    def __init__(
        self,
        learner_repository: LearnerRepositoryProtocol,
        organization_repository: OrganizationRepositoryProtocol,
        access_gate: AccessGate,
    ) -> None:
        self.learner_repository = learner_repository
        self.organization_repository = organization_repository
        self.access_gate = access_gate

    def get_learner(self, learner_id: int) -> Learner:
        """
        Load a learner.

        Raises:
            LearnerNotFoundError: If the learner does not exist
        """
        learner = self.learner_repository.find_by_id(UserId(learner_id))
        if learner is None:
            raise LearnerNotFoundError(learner_id)
        return learner

    def context_for(self, learner: Learner) -> LearnerContext:
        """Build the explicit tenant context of a learner."""
        if learner.organization_id is None:
            return LearnerContext(learner_id=learner.id)

        organization = self.organization_repository.find_by_id(learner.organization_id)
        return LearnerContext(
            learner_id=learner.id,
            organization_id=learner.organization_id,
            organization_active=organization is not None and organization.is_active,
        )

    def evaluate(self, learner: Learner, now: datetime | None = None) -> AccessDecision:
        return self.access_gate.evaluate(learner, now)

    def payment_status(self, learner: Learner, now: datetime | None = None) -> PaymentStatus:
        return self.access_gate.payment_status(learner, now)

    def authorize(self, learner_id: int, now: datetime | None = None) -> LearnerContext:
        """
        Resolve a learner's context, failing when the access gate blocks them.

        Args:
            learner_id: ID of the learner making the request
            now: Current time

        Returns:
            The learner's context for the rest of the request

        Raises:
            LearnerNotFoundError: If the learner does not exist
            AccessDeniedError: With reason manual_block or payment_overdue
        """
        learner = self.get_learner(learner_id)
        decision = self.evaluate(learner, now)
        if not decision.has_access:
            logger.info("access_denied", learner_id=learner_id, reason=decision.reason)
            # Only the two blocking reasons can come out of a failed evaluation
            raise AccessDeniedError(
                "manual_block" if decision.reason == "manual_block" else "payment_overdue"
            )
        return self.context_for(learner)

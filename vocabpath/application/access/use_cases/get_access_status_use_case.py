"""Use case for evaluating a learner's access."""

from datetime import UTC, datetime

from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.access.use_cases.dtos import AccessStatus


class GetAccessStatusUseCase:
    """Use case for evaluating a learner's access."""

    def __init__(self, learner_access_service: LearnerAccessService) -> None:
        self.learner_access_service = learner_access_service

    def get_access_status(self, learner_id: int, now: datetime | None = None) -> AccessStatus:
        """
        Evaluate the access gate for a learner.

        Raises:
            LearnerNotFoundError: If the learner does not exist
        """
        now = now or datetime.now(UTC)
        service = self.learner_access_service
        learner = service.get_learner(learner_id)
        return AccessStatus(
            learner=learner,
            decision=service.evaluate(learner, now),
            payment_status=service.payment_status(learner, now),
        )

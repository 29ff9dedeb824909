"""Use case for listing a learner's payments."""

from datetime import datetime

from vocabpath.application.access.protocols.payment_repository import PaymentRepositoryProtocol
from vocabpath.application.access.services.learner_access_service import LearnerAccessService
from vocabpath.application.access.use_cases.dtos import PaymentHistory


class GetPaymentHistoryUseCase:
    """Use case for listing a learner's payments."""

    def __init__(
        self,
        learner_access_service: LearnerAccessService,
        payment_repository: PaymentRepositoryProtocol,
    ) -> None:
        self.learner_access_service = learner_access_service
        self.payment_repository = payment_repository

    def get_payments(self, learner_id: int, now: datetime | None = None) -> PaymentHistory:
        """
        Get the ledger with the derived payment status.

        Raises:
            LearnerNotFoundError: If the learner does not exist
        """
        learner = self.learner_access_service.get_learner(learner_id)
        return PaymentHistory(
            learner=learner,
            payments=self.payment_repository.find_by_user(learner.id),
            payment_status=self.learner_access_service.payment_status(learner, now),
        )

"""Use case for recording a learner payment."""

from datetime import UTC, datetime

import structlog

from vocabpath.application.access.protocols.learner_repository import LearnerRepositoryProtocol
from vocabpath.application.access.protocols.payment_repository import PaymentRepositoryProtocol
from vocabpath.application.common.unit_of_work import UnitOfWork
from vocabpath.domain.access.entities.learner import Learner
from vocabpath.domain.access.entities.payment import Payment
from vocabpath.domain.common.value_objects import UserId
from vocabpath.exceptions import LearnerNotFoundError

logger = structlog.get_logger(__name__)


class RecordPaymentUseCase:
    """Use case for recording a learner payment."""

    def __init__(
        self,
        learner_repository: LearnerRepositoryProtocol,
        payment_repository: PaymentRepositoryProtocol,
        uow: UnitOfWork,
        period_months: int = 1,
    ) -> None:
        self.learner_repository = learner_repository
        self.payment_repository = payment_repository
        self.uow = uow
        self.period_months = period_months

    def record_payment(
        self,
        learner_id: int,
        amount: float,
        note: str | None = None,
        now: datetime | None = None,
    ) -> tuple[Payment, Learner]:
        """
        Append a payment and extend the learner's paid period.

        The new due date is visible to the access gate on the next read.

        Args:
            learner_id: ID of the paying learner
            amount: Amount paid (non-negative)
            note: Optional note for the ledger
            now: Current time

        Returns:
            Tuple of (stored payment, updated learner)

        Raises:
            LearnerNotFoundError: If the learner does not exist
            ValidationError: If the amount is negative
        """
        now = now or datetime.now(UTC)
        learner = self.learner_repository.find_by_id(UserId(learner_id))
        if learner is None:
            raise LearnerNotFoundError(learner_id)

        with self.uow:
            payment = learner.record_payment(
                amount, note, period_months=self.period_months, now=now
            )
            learner = self.learner_repository.save(learner)
            payment = self.payment_repository.add(payment)
            self.uow.commit()

        logger.info(
            "payment_recorded",
            learner_id=learner_id,
            payment_id=payment.id.value,
            amount=amount,
            period_start=payment.period_start.isoformat(),
            period_end=payment.period_end.isoformat(),
        )
        return payment, learner

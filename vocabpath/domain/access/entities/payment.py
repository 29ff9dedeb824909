"""Payment ledger entry."""

from dataclasses import dataclass
from datetime import datetime

from vocabpath.domain.common.entity import Entity
from vocabpath.domain.common.exceptions import DomainError
from vocabpath.domain.common.value_objects import PaymentId, UserId


@dataclass
class Payment(Entity[PaymentId]):
    """
    Append-only record of money received from a learner.

    Business Rules:
    - Period end is after period start
    """

    id: PaymentId
    user_id: UserId
    amount: float
    paid_at: datetime
    period_start: datetime
    period_end: datetime
    note: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.period_end <= self.period_start:
            raise DomainError("Payment period must end after it starts")

    @classmethod
    def create(
        cls,
        user_id: UserId,
        amount: float,
        paid_at: datetime,
        period_start: datetime,
        period_end: datetime,
        note: str | None = None,
    ) -> "Payment":
        """Create a new payment (ID will be 0 until persisted)."""
        return cls(
            id=PaymentId.generate(),
            user_id=user_id,
            amount=amount,
            paid_at=paid_at,
            period_start=period_start,
            period_end=period_end,
            note=note.strip() if note and note.strip() else None,
        )

"""Protocol for Payment ledger repository."""

from typing import Protocol

from vocabpath.domain.access.entities.payment import Payment
from vocabpath.domain.common.value_objects import UserId


class PaymentRepositoryProtocol(Protocol):
    """Append-only access to the payment ledger."""

    def add(self, payment: Payment) -> Payment:
        """
        Append a payment.

        Args:
            payment: The new payment (ID 0)

        Returns:
            Payment entity with its database ID
        """
        ...

    def find_by_user(self, user_id: UserId) -> list[Payment]:
        """Get a learner's payments, newest first."""
        ...

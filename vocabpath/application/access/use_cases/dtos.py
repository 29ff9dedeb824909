"""DTOs for access use cases."""

from dataclasses import dataclass

from vocabpath.domain.access.entities.learner import Learner
from vocabpath.domain.access.entities.payment import Payment
from vocabpath.domain.access.services.access_gate import AccessDecision, PaymentStatus


@dataclass
class AccessStatus:
    """Access gate decision for a learner with the billing summary behind it."""

    learner: Learner
    decision: AccessDecision
    payment_status: PaymentStatus


@dataclass
class PaymentHistory:
    """A learner's payment ledger, newest first."""

    learner: Learner
    payments: list[Payment]
    payment_status: PaymentStatus

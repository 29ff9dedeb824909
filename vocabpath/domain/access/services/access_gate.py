"""Domain service deciding whether a learner may use the learning surface."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Literal

from vocabpath.domain.access.entities.learner import Learner

AccessReason = Literal[
    "manual_block",
    "manual_override",
    "free_trial",
    "payment_overdue",
    "payment_current",
]
PaymentStatus = Literal["free_trial", "settled", "past_due"]


@dataclass(frozen=True)
class AccessDecision:
    """Result of evaluating the access gate."""

    has_access: bool
    reason: AccessReason


class AccessGate:
    """Combines the administrative override with payment state.

    Decision order, first match wins:
    1. override "disabled"              -> blocked (manual_block)
    2. override "enabled"               -> allowed (manual_override)
    3. monthly_rate == 0                -> allowed (free_trial)
    4. due date missing or in the past  -> blocked (payment_overdue)
    5. otherwise                        -> allowed (payment_current)
    """

    def evaluate(self, learner: Learner, now: datetime | None = None) -> AccessDecision:
        """Evaluate the gate for a learner at the given moment."""
        now = now or datetime.now(UTC)

        if learner.access_override == "disabled":
            return AccessDecision(has_access=False, reason="manual_block")
        if learner.access_override == "enabled":
            return AccessDecision(has_access=True, reason="manual_override")
        if learner.monthly_rate == 0:
            return AccessDecision(has_access=True, reason="free_trial")
        if learner.next_payment_due is None or learner.next_payment_due < now:
            return AccessDecision(has_access=False, reason="payment_overdue")
        return AccessDecision(has_access=True, reason="payment_current")

    def payment_status(self, learner: Learner, now: datetime | None = None) -> PaymentStatus:
        """Summarize billing state for administrators, ignoring the override."""
        now = now or datetime.now(UTC)
        if learner.monthly_rate == 0:
            return "free_trial"
        if learner.next_payment_due is not None and learner.next_payment_due >= now:
            return "settled"
        return "past_due"

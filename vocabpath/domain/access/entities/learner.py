"""Learner entity for access and payment tracking."""

import calendar
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Literal

from vocabpath.domain.access.entities.payment import Payment
from vocabpath.domain.common.entity import Entity
from vocabpath.domain.common.exceptions import ValidationError
from vocabpath.domain.common.value_objects import OrganizationId, UserId

AccessOverride = Literal["enabled", "disabled"]
ACCESS_OVERRIDES: tuple[AccessOverride, ...] = ("enabled", "disabled")


def add_months(moment: datetime, months: int) -> datetime:
    """Shift a datetime by whole calendar months, clamping the day to the month length."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


@dataclass
class Learner(Entity[UserId]):
    """
    Learner account as seen by the access gate.

    Business Rules:
    - monthly_rate is never negative; 0 means free trial
    - access_override is None, "enabled" or "disabled"
    - a payment extends next_payment_due by one period from the later of
      now and the current due date
    """

    id: UserId
    organization_id: OrganizationId | None = None
    display_name: str = ""
    monthly_rate: float = 0.0
    next_payment_due: datetime | None = None
    last_payment_date: datetime | None = None
    access_override: AccessOverride | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.monthly_rate < 0:
            raise ValidationError(
                "Monthly rate cannot be negative", field="monthly_rate", value=self.monthly_rate
            )
        if self.access_override is not None and self.access_override not in ACCESS_OVERRIDES:
            raise ValidationError(
                "Unknown access override", field="access_override", value=self.access_override
            )

    def record_payment(
        self,
        amount: float,
        note: str | None = None,
        *,
        period_months: int = 1,
        now: datetime | None = None,
    ) -> Payment:
        """
        Record a payment and extend the paid period.

        Args:
            amount: Amount paid
            note: Optional free-form note
            period_months: Length of the period the payment covers
            now: Current time (defaults to datetime.now(UTC))

        Returns:
            The new payment ledger entry (ID will be 0 until persisted)

        Raises:
            ValidationError: If amount is negative
        """
        if amount < 0:
            raise ValidationError("Payment amount cannot be negative", field="amount", value=amount)

        now = now or datetime.now(UTC)
        period_start = now
        if self.next_payment_due is not None and self.next_payment_due > now:
            period_start = self.next_payment_due
        period_end = add_months(period_start, period_months)

        self.next_payment_due = period_end
        self.last_payment_date = now

        return Payment.create(
            user_id=self.id,
            amount=amount,
            note=note,
            paid_at=now,
            period_start=period_start,
            period_end=period_end,
        )

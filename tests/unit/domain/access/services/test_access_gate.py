"""Tests for AccessGate domain service."""

from datetime import UTC, datetime, timedelta

import pytest

from vocabpath.domain.access.entities.learner import Learner
from vocabpath.domain.access.services.access_gate import AccessGate
from vocabpath.domain.common.value_objects import UserId

NOW = datetime(2026, 3, 15, 9, 30, tzinfo=UTC)


def _make_learner(
    monthly_rate: float = 0.0,
    next_payment_due: datetime | None = None,
    access_override: str | None = None,
) -> Learner:
    return Learner(
        id=UserId(1),
        monthly_rate=monthly_rate,
        next_payment_due=next_payment_due,
        access_override=access_override,  # type: ignore[arg-type]
    )


class TestAccessGate:
    def test_disabled_override_blocks(self) -> None:
        decision = AccessGate().evaluate(_make_learner(access_override="disabled"), NOW)
        assert decision.has_access is False
        assert decision.reason == "manual_block"

    def test_enabled_override_bypasses_overdue_payment(self) -> None:
        learner = _make_learner(
            monthly_rate=50, next_payment_due=NOW - timedelta(days=3), access_override="enabled"
        )
        decision = AccessGate().evaluate(learner, NOW)
        assert decision.has_access is True
        assert decision.reason == "manual_override"

    def test_same_learner_without_override_is_overdue(self) -> None:
        learner = _make_learner(monthly_rate=50, next_payment_due=NOW - timedelta(days=3))
        decision = AccessGate().evaluate(learner, NOW)
        assert decision.has_access is False
        assert decision.reason == "payment_overdue"

    @pytest.mark.parametrize(
        "next_payment_due",
        [None, NOW - timedelta(days=365), NOW + timedelta(days=30)],
    )
    def test_free_trial_ignores_due_date(self, next_payment_due: datetime | None) -> None:
        decision = AccessGate().evaluate(_make_learner(next_payment_due=next_payment_due), NOW)
        assert decision.has_access is True
        assert decision.reason == "free_trial"

    def test_missing_due_date_is_overdue(self) -> None:
        decision = AccessGate().evaluate(_make_learner(monthly_rate=10), NOW)
        assert decision.has_access is False
        assert decision.reason == "payment_overdue"

    def test_due_date_in_future_is_current(self) -> None:
        learner = _make_learner(monthly_rate=10, next_payment_due=NOW + timedelta(minutes=1))
        decision = AccessGate().evaluate(learner, NOW)
        assert decision.has_access is True
        assert decision.reason == "payment_current"

    def test_due_exactly_now_is_current(self) -> None:
        decision = AccessGate().evaluate(_make_learner(monthly_rate=10, next_payment_due=NOW), NOW)
        assert decision.has_access is True

    def test_payment_status_ignores_override(self) -> None:
        gate = AccessGate()
        overdue = _make_learner(
            monthly_rate=10, next_payment_due=NOW - timedelta(days=1), access_override="enabled"
        )
        settled = _make_learner(monthly_rate=10, next_payment_due=NOW + timedelta(days=1))

        assert gate.payment_status(overdue, NOW) == "past_due"
        assert gate.payment_status(settled, NOW) == "settled"
        assert gate.payment_status(_make_learner(), NOW) == "free_trial"

"""Mappers for Learner and Payment ORM ↔ Domain conversion."""

from typing import cast

from vocabpath.domain.access.entities.learner import AccessOverride, Learner
from vocabpath.domain.access.entities.payment import Payment
from vocabpath.domain.common.value_objects import OrganizationId, PaymentId, UserId
from vocabpath.models import Payment as PaymentORM
from vocabpath.models import User as UserORM
from vocabpath.utils import ensure_utc


class LearnerMapper:
    """Mapper for User ORM ↔ Learner conversion."""

    def to_domain(self, orm_model: UserORM) -> Learner:
        """Convert ORM model to domain entity."""
        return Learner(
            id=UserId(orm_model.id),
            organization_id=(
                OrganizationId(orm_model.organization_id)
                if orm_model.organization_id is not None
                else None
            ),
            display_name=orm_model.display_name,
            monthly_rate=orm_model.monthly_rate,
            next_payment_due=ensure_utc(orm_model.next_payment_due),
            last_payment_date=ensure_utc(orm_model.last_payment_date),
            access_override=cast(AccessOverride | None, orm_model.access_override),
        )

    def to_orm(self, domain_entity: Learner, orm_model: UserORM) -> UserORM:
        """Copy billing state onto an existing user row. Learners are never created here."""
        orm_model.next_payment_due = domain_entity.next_payment_due
        orm_model.last_payment_date = domain_entity.last_payment_date
        return orm_model


class PaymentMapper:
    """Mapper for Payment ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: PaymentORM) -> Payment:
        """Convert ORM model to domain entity."""
        return Payment(
            id=PaymentId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            amount=orm_model.amount,
            paid_at=ensure_utc(orm_model.paid_at),
            period_start=ensure_utc(orm_model.period_start),
            period_end=ensure_utc(orm_model.period_end),
            note=orm_model.note,
        )

    def to_orm(self, domain_entity: Payment) -> PaymentORM:
        """Convert domain entity to a new ORM model."""
        return PaymentORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            amount=domain_entity.amount,
            note=domain_entity.note,
            paid_at=domain_entity.paid_at,
            period_start=domain_entity.period_start,
            period_end=domain_entity.period_end,
        )

"""Repository for the payment ledger."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from vocabpath.domain.access.entities.payment import Payment
from vocabpath.domain.common.value_objects import UserId
from vocabpath.infrastructure.access.mappers.learner_mapper import PaymentMapper
from vocabpath.models import Payment as PaymentORM


class PaymentRepository:
    """Repository for Payment domain entities. Payments are never updated."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = PaymentMapper()

    def add(self, payment: Payment) -> Payment:
        orm_model = self.mapper.to_orm(payment)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def find_by_user(self, user_id: UserId) -> list[Payment]:
        """Get a learner's payments, newest first."""
        stmt = (
            select(PaymentORM)
            .where(PaymentORM.user_id == user_id.value)
            .order_by(PaymentORM.paid_at.desc(), PaymentORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

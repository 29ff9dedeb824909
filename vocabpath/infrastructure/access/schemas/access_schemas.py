"""Pydantic schemas for access status and payments."""

from datetime import datetime

from pydantic import BaseModel, Field


class AccessStatusResponse(BaseModel):
    """Schema for the access gate decision of a learner."""

    learner_id: int
    has_access: bool
    reason: str = Field(
        ...,
        description="manual_block, manual_override, free_trial, payment_overdue or payment_current",
    )
    payment_status: str = Field(..., description="free_trial, settled or past_due")
    monthly_rate: float
    next_payment_due: datetime | None
    access_override: str | None


class PaymentCreateRequest(BaseModel):
    """Schema for recording a payment."""

    amount: float = Field(..., ge=0, description="Amount received")
    note: str | None = Field(None, max_length=1000, description="Optional ledger note")


class PaymentSchema(BaseModel):
    """Ledger entry."""

    id: int
    amount: float
    note: str | None
    paid_at: datetime
    period_start: datetime
    period_end: datetime


class PaymentCreateResponse(BaseModel):
    """Schema for the recorded payment and the new due date."""

    payment: PaymentSchema
    next_payment_due: datetime | None
    last_payment_date: datetime | None


class PaymentHistoryResponse(BaseModel):
    """Schema for a learner's payment ledger."""

    learner_id: int
    payment_status: str
    monthly_rate: float
    next_payment_due: datetime | None
    last_payment_date: datetime | None
    payments: list[PaymentSchema] = Field(..., description="Newest first")

"""Access API schemas."""

from .access_schemas import (
    AccessStatusResponse,
    PaymentCreateRequest,
    PaymentCreateResponse,
    PaymentHistoryResponse,
    PaymentSchema,
)

__all__ = [
    "AccessStatusResponse",
    "PaymentCreateRequest",
    "PaymentCreateResponse",
    "PaymentHistoryResponse",
    "PaymentSchema",
]

"""API routes for learner access status and payments."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from vocabpath.application.access.use_cases.get_access_status_use_case import (
    GetAccessStatusUseCase,
)
from vocabpath.application.access.use_cases.get_payment_history_use_case import (
    GetPaymentHistoryUseCase,
)
from vocabpath.application.access.use_cases.record_payment_use_case import RecordPaymentUseCase
from vocabpath.core import container
from vocabpath.domain.access.entities.payment import Payment
from vocabpath.domain.common.exceptions import DomainError
from vocabpath.exceptions import ValidationError, VocabPathError
from vocabpath.infrastructure.access.schemas import (
    AccessStatusResponse,
    PaymentCreateRequest,
    PaymentCreateResponse,
    PaymentHistoryResponse,
    PaymentSchema,
)
from vocabpath.infrastructure.common.di import inject_use_case
from vocabpath.infrastructure.common.schemas import COMMON_ERROR_RESPONSES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learners", tags=["access"], responses=COMMON_ERROR_RESPONSES)


def _payment_schema(payment: Payment) -> PaymentSchema:
    return PaymentSchema(
        id=payment.id.value,
        amount=payment.amount,
        note=payment.note,
        paid_at=payment.paid_at,
        period_start=payment.period_start,
        period_end=payment.period_end,
    )


@router.get(
    "/{learner_id}/access",
    response_model=AccessStatusResponse,
    status_code=status.HTTP_200_OK,
)
def get_access_status(
    learner_id: int,
    use_case: GetAccessStatusUseCase = Depends(
        inject_use_case(container.get_access_status_use_case)
    ),
) -> AccessStatusResponse:
    """
    Evaluate whether the learner may use the learning surface.

    Args:
        learner_id: ID of the learner
        use_case: GetAccessStatusUseCase injected via dependency container

    Returns:
        Gate decision with its reason and the payment summary
    """
    try:
        access = use_case.get_access_status(learner_id)
        return AccessStatusResponse(
            learner_id=access.learner.id.value,
            has_access=access.decision.has_access,
            reason=access.decision.reason,
            payment_status=access.payment_status,
            monthly_rate=access.learner.monthly_rate,
            next_payment_due=access.learner.next_payment_due,
            access_override=access.learner.access_override,
        )
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to evaluate access for learner {learner_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{learner_id}/payments",
    response_model=PaymentCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def record_payment(
    learner_id: int,
    request: PaymentCreateRequest,
    use_case: RecordPaymentUseCase = Depends(inject_use_case(container.record_payment_use_case)),
) -> PaymentCreateResponse:
    """
    Record a payment and extend the learner's paid period.

    Args:
        learner_id: ID of the paying learner
        request: Amount and optional note
        use_case: RecordPaymentUseCase injected via dependency container

    Returns:
        The ledger entry and the new due date
    """
    try:
        payment, learner = use_case.record_payment(learner_id, request.amount, request.note)
        return PaymentCreateResponse(
            payment=_payment_schema(payment),
            next_payment_due=learner.next_payment_due,
            last_payment_date=learner.last_payment_date,
        )
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to record payment for learner {learner_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{learner_id}/payments",
    response_model=PaymentHistoryResponse,
    status_code=status.HTTP_200_OK,
)
def get_payment_history(
    learner_id: int,
    use_case: GetPaymentHistoryUseCase = Depends(
        inject_use_case(container.get_payment_history_use_case)
    ),
) -> PaymentHistoryResponse:
    """
    List the learner's payments, newest first.

    Args:
        learner_id: ID of the learner
        use_case: GetPaymentHistoryUseCase injected via dependency container

    Returns:
        Ledger entries with the derived payment status
    """
    try:
        history = use_case.get_payments(learner_id)
        return PaymentHistoryResponse(
            learner_id=history.learner.id.value,
            payment_status=history.payment_status,
            monthly_rate=history.learner.monthly_rate,
            next_payment_due=history.learner.next_payment_due,
            last_payment_date=history.learner.last_payment_date,
            payments=[_payment_schema(payment) for payment in history.payments],
        )
    except (VocabPathError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to list payments for learner {learner_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

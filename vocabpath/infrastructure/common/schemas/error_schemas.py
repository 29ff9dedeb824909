"""Error response schemas shared by every router."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    detail: str = Field(..., description="Human readable error message")


class AccessDeniedResponse(ErrorResponse):
    """403 body, with the reason the caller should render."""

    reason: str = Field(
        ..., description="One of manual_block, payment_overdue, section_locked"
    )


COMMON_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    404: {"model": ErrorResponse, "description": "Learner, section or module not found"},
    403: {"model": AccessDeniedResponse, "description": "Access denied"},
}

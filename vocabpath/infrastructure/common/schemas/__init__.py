"""Shared API schemas."""

from .error_schemas import COMMON_ERROR_RESPONSES, AccessDeniedResponse, ErrorResponse

__all__ = ["COMMON_ERROR_RESPONSES", "AccessDeniedResponse", "ErrorResponse"]

"""Custom exception hierarchy for the vocabpath application."""

from typing import Literal

AccessDeniedReason = Literal["manual_block", "payment_overdue", "section_locked"]


class VocabPathError(Exception):
    """Base exception for all vocabpath errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(VocabPathError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class LearnerNotFoundError(NotFoundError):
    """Learner not found error."""

    def __init__(self, learner_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with learner ID or custom message."""
        self.learner_id = learner_id
        if message:
            super().__init__(message)
        elif learner_id is not None:
            super().__init__(f"Learner with id {learner_id} not found")
        else:
            super().__init__("Learner not found")


class SectionNotFoundError(NotFoundError):
    """Section not found error."""

    def __init__(self, section_id: int) -> None:
        """Initialize with section ID."""
        self.section_id = section_id
        super().__init__(f"Section with id {section_id} not found")


class ModuleNotFoundError(NotFoundError):  # noqa: A001
    """Module not found error."""

    def __init__(self, module_id: int) -> None:
        """Initialize with module ID."""
        self.module_id = module_id
        super().__init__(f"Module with id {module_id} not found")


class AccessDeniedError(VocabPathError):
    """The learner may not perform this operation.

    The reason is kept separate from the message so callers can pick the
    screen to show (locked section, payment page, blocked account).
    """

    def __init__(self, reason: AccessDeniedReason, message: str | None = None) -> None:
        """Initialize with the denial reason and 403 status code."""
        self.reason = reason
        super().__init__(message or _DEFAULT_DENIAL_MESSAGES[reason], status_code=403)


_DEFAULT_DENIAL_MESSAGES: dict[str, str] = {
    "manual_block": "Access to this account has been disabled",
    "payment_overdue": "Payment is overdue",
    "section_locked": "Section is locked",
}


class ValidationError(VocabPathError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize with message and 400 status code by default."""
        super().__init__(message, status_code=status_code)


class MalformedSubmissionError(ValidationError):
    """Answer submission does not fit the target module.

    Raised before anything is persisted.
    """

    def __init__(self, message: str, question_id: int | None = None) -> None:
        """Initialize with message and the offending question, if any."""
        self.question_id = question_id
        super().__init__(message, status_code=422)


class StorageError(VocabPathError):
    """The backing store failed while applying a unit of work."""

    def __init__(self, message: str = "Storage failure, please retry") -> None:
        """Initialize with a generic message and 500 status code."""
        super().__init__(message, status_code=500)

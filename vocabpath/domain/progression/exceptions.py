"""Progression domain exceptions."""

from vocabpath.domain.common.exceptions import DomainError


class SubmissionRejectedError(DomainError):
    """Raised when submitted answers do not fit the module being graded."""

    def __init__(self, message: str, question_id: int | None = None) -> None:
        details: dict[str, object] = {}
        if question_id is not None:
            details["question_id"] = question_id
        super().__init__(message, details)
        self.question_id = question_id


class AttemptAlreadyCompletedError(DomainError):
    """Raised when a completed attempt would be changed."""

    def __init__(self, attempt_id: int) -> None:
        super().__init__(f"Attempt {attempt_id} is already completed")

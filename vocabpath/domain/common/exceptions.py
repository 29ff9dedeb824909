"""Errors raised by domain objects that would otherwise enter an invalid state."""


class DomainError(Exception):
    """Root of domain errors; the API renders them as 400 responses."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} ({', '.join(f'{k}={v!r}' for k, v in self.details.items())})"


class ValidationError(DomainError):
    """A single attribute value is out of range, e.g. a negative monthly rate."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvariantViolationError(DomainError):
    """Stored content breaks a rule its aggregate relies on, e.g. unparseable matching pairs."""

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(
            f"{aggregate} invariant violated: {invariant}",
            {"aggregate": aggregate, "invariant": invariant},
        )
        self.aggregate = aggregate
        self.invariant = invariant

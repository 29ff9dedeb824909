"""Transaction port shared by every use case that writes."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self, TypeVar

from vocabpath.domain.common import AggregateRoot, DomainEvent

AggregateT = TypeVar("AggregateT", bound=AggregateRoot)


class UnitOfWork(ABC):
    """
    One learner action, one transaction.

    A graded test stores its attempt, its answers, the section's progress
    and the next section's unlock in a single unit of work. Leaving the
    ``with`` block through an exception rolls all of it back; a clean exit
    changes nothing until ``commit`` is called.

    Aggregates passed to ``track`` have their domain events drained by
    ``collect_events`` once the commit went through.
    """

    def __init__(self) -> None:
        self._tracked: list[AggregateRoot] = []

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None:
        """Undo pending writes. Implementations must also call ``discard_events``."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()

    def track(self, aggregate: AggregateT) -> AggregateT:
        if all(tracked is not aggregate for tracked in self._tracked):
            self._tracked.append(aggregate)
        return aggregate

    def collect_events(self) -> list[DomainEvent]:
        """Events of tracked aggregates, in the order the aggregates were tracked."""
        events = [event for aggregate in self._tracked for event in aggregate.collect_events()]
        self._tracked.clear()
        return events

    def discard_events(self) -> None:
        for aggregate in self._tracked:
            aggregate.collect_events()
        self._tracked.clear()

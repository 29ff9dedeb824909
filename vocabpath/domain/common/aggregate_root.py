"""Aggregate roots record domain events while their state changes."""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Consistency boundary that buffers the events it raises.

    A unit of work drains the buffer after commit; a rollback drops it.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Return buffered events and empty the buffer."""
        events, self._events = self._events, []
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        return list(self._events)

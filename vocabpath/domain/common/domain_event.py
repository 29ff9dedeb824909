"""Domain events: facts about learner progress that already happened."""

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base for frozen, past-tense event records such as SectionUnlocked.

    ``to_dict`` flattens the event into log-friendly key/value pairs.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"event_type": self.event_type}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, UUID):
                value = str(value)
            elif hasattr(value, "to_primitive"):
                value = value.to_primitive()
            payload[f.name] = value
        return payload

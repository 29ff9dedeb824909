"""Domain events raised by learner section progress."""

from dataclasses import dataclass

from vocabpath.domain.common.domain_event import DomainEvent


@dataclass(frozen=True)
class SectionUnlocked(DomainEvent):
    user_id: int = 0
    section_id: int = 0


@dataclass(frozen=True)
class SectionTestPassed(DomainEvent):
    user_id: int = 0
    section_id: int = 0
    score: float = 0.0


@dataclass(frozen=True)
class SectionTestFailed(DomainEvent):
    user_id: int = 0
    section_id: int = 0
    score: float = 0.0

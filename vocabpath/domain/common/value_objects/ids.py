from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class OrganizationId(EntityId):
    """Strongly-typed organization (tenant) identifier."""


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed learner identifier."""


@dataclass(frozen=True)
class AreaId(EntityId):
    """Strongly-typed area identifier."""


@dataclass(frozen=True)
class SectionId(EntityId):
    """Strongly-typed section identifier."""


@dataclass(frozen=True)
class ModuleId(EntityId):
    """Strongly-typed module identifier."""


@dataclass(frozen=True)
class QuestionId(EntityId):
    """Strongly-typed question identifier."""


@dataclass(frozen=True)
class OptionId(EntityId):
    """Strongly-typed question option identifier."""


@dataclass(frozen=True)
class VocabularyId(EntityId):
    """Strongly-typed vocabulary entry identifier."""


@dataclass(frozen=True)
class SectionProgressId(EntityId):
    """Strongly-typed learner section progress identifier."""


@dataclass(frozen=True)
class AttemptId(EntityId):
    """Strongly-typed learner attempt identifier."""


@dataclass(frozen=True)
class AnswerId(EntityId):
    """Strongly-typed learner answer identifier."""


@dataclass(frozen=True)
class PaymentId(EntityId):
    """Strongly-typed payment identifier."""

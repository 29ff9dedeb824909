"""Area and Section entities."""

from dataclasses import dataclass
from typing import Literal

from vocabpath.domain.common.entity import Entity
from vocabpath.domain.common.exceptions import InvariantViolationError
from vocabpath.domain.common.value_objects import AreaId, OrganizationId, SectionId

ScopeType = Literal["global", "org"]


@dataclass
class Area(Entity[AreaId]):
    """
    Top-level topic grouping of sections.

    Business Rules:
    - scope_type "org" requires an organization, "global" forbids one
    - sort_order is the baseline order shared by every tenant
    """

    id: AreaId
    scope_type: ScopeType
    organization_id: OrganizationId | None
    sort_order: int
    name: str = ""
    description: str | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.scope_type == "org" and self.organization_id is None:
            raise InvariantViolationError("Area", "org-scoped area requires an organization")
        if self.scope_type == "global" and self.organization_id is not None:
            raise InvariantViolationError("Area", "global area cannot belong to an organization")

    def is_global(self) -> bool:
        """Check if the area is shared by every tenant."""
        return self.scope_type == "global"

    def is_eligible_for(self, organization_id: OrganizationId | None) -> bool:
        """Check whether learners of the given tenant (or none) may see this area at all."""
        if not self.is_active:
            return False
        if self.is_global():
            return True
        return organization_id is not None and self.organization_id == organization_id


@dataclass
class Section(Entity[SectionId]):
    """
    Curriculum unit inside an area.

    organization_id mirrors the owning area's tenant and is only set for
    sections of org-scoped areas. sort_order is scoped to the area.
    """

    id: SectionId
    area_id: AreaId
    sort_order: int
    title: str = ""
    description: str | None = None
    organization_id: OrganizationId | None = None
    is_active: bool = True

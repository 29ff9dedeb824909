"""Protocol for curriculum structure repository."""

from collections.abc import Sequence
from typing import Protocol

from vocabpath.domain.common.value_objects import AreaId, OrganizationId, SectionId
from vocabpath.domain.curriculum.entities.area import Area, Section
from vocabpath.domain.curriculum.entities.content_override import ContentOverride


class CurriculumRepositoryProtocol(Protocol):
    """Read access to areas, sections and per-tenant overrides."""

    def find_candidate_areas(self, organization_id: OrganizationId | None) -> list[Area]:
        """
        Get areas a tenant could see before overrides apply.

        Args:
            organization_id: The tenant, or None for untenanted learners

        Returns:
            Global areas plus the tenant's own areas, inactive ones included
        """
        ...

    def find_sections_by_areas(self, area_ids: Sequence[AreaId]) -> list[Section]:
        """Get every section of the given areas."""
        ...

    def find_area(self, area_id: AreaId) -> Area | None:
        ...

    def find_section(self, section_id: SectionId) -> Section | None:
        ...

    def find_area_overrides(self, organization_id: OrganizationId) -> dict[AreaId, ContentOverride]:
        """Get the tenant's OrganizationAreaConfig rows keyed by area."""
        ...

    def find_section_overrides(
        self, organization_id: OrganizationId
    ) -> dict[SectionId, ContentOverride]:
        """Get the tenant's OrganizationSectionConfig rows keyed by section."""
        ...

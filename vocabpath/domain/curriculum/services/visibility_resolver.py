"""Domain service resolving which areas and sections a tenant sees, and in what order."""

from collections.abc import Iterable, Mapping

from vocabpath.domain.common.value_objects import AreaId, OrganizationId, SectionId
from vocabpath.domain.curriculum.entities.area import Area, Section
from vocabpath.domain.curriculum.entities.content_override import (
    ContentOverride,
    EffectivePlacement,
)
from vocabpath.domain.curriculum.entities.learning_path import (
    AreaPlacement,
    LearningPath,
    PathEntry,
)


class ContentVisibilityResolver:
    """Overlays tenant configuration on globally authored content.

    Resolution:
    1. Areas that are global, or owned by the tenant, are eligible
    2. Tenant override decides visibility (absent override: visible)
    3. Tenant override sort_order replaces the baseline when present
    4. The same two steps run for the sections of each visible area
    5. Sections are concatenated in area order

    Equal effective orders keep creation order (ascending id).
    Overrides only ever apply when a tenant is given.
    """

    def resolve(
        self,
        organization_id: OrganizationId | None,
        areas: Iterable[Area],
        sections: Iterable[Section],
        area_overrides: Mapping[AreaId, ContentOverride] | None = None,
        section_overrides: Mapping[SectionId, ContentOverride] | None = None,
    ) -> LearningPath:
        """Build the learner-visible path for a tenant (or for untenanted learners)."""
        if organization_id is None:
            area_overrides = {}
            section_overrides = {}
        else:
            area_overrides = area_overrides or {}
            section_overrides = section_overrides or {}

        visible_areas: list[AreaPlacement] = []
        for area in sorted(areas, key=lambda a: a.id.value):
            if not area.is_eligible_for(organization_id):
                continue
            placement = EffectivePlacement.resolve(area.sort_order, area_overrides.get(area.id))
            if placement.is_visible:
                visible_areas.append(AreaPlacement(area, placement.sort_order))
        visible_areas.sort(key=lambda placed_area: placed_area.sort_order)

        sections_by_area: dict[AreaId, list[Section]] = {}
        for section in sorted(sections, key=lambda s: s.id.value):
            if section.is_active:
                sections_by_area.setdefault(section.area_id, []).append(section)

        entries: list[PathEntry] = []
        for area_placement in visible_areas:
            area = area_placement.area
            placed: list[tuple[Section, int]] = []
            for section in sections_by_area.get(area.id, []):
                placement = EffectivePlacement.resolve(
                    section.sort_order, section_overrides.get(section.id)
                )
                if placement.is_visible:
                    placed.append((section, placement.sort_order))
            placed.sort(key=lambda item: item[1])
            entries.extend(
                PathEntry(
                    section=section,
                    area=area,
                    area_sort_order=area_placement.sort_order,
                    sort_order=sort_order,
                )
                for section, sort_order in placed
            )

        return LearningPath(entries=tuple(entries), areas=tuple(visible_areas))

    def is_in_scope(self, organization_id: OrganizationId | None, area: Area, section: Section) -> bool:
        """Check whether a section could be shown to the tenant before overrides apply."""
        return section.is_active and section.area_id == area.id and area.is_eligible_for(organization_id)

"""Repository for areas, sections and tenant overrides."""

from collections.abc import Sequence

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from vocabpath.domain.common.value_objects import AreaId, OrganizationId, SectionId
from vocabpath.domain.curriculum.entities.area import Area, Section
from vocabpath.domain.curriculum.entities.content_override import ContentOverride
from vocabpath.domain.curriculum.entities.organization import Organization
from vocabpath.infrastructure.curriculum.mappers.curriculum_mapper import (
    AreaMapper,
    ContentOverrideMapper,
    OrganizationMapper,
)
from vocabpath.models import Area as AreaORM
from vocabpath.models import Organization as OrganizationORM
from vocabpath.models import OrganizationAreaConfig as OrganizationAreaConfigORM
from vocabpath.models import OrganizationSectionConfig as OrganizationSectionConfigORM
from vocabpath.models import Section as SectionORM


class CurriculumRepository:
    """Read-only repository over the curriculum tables. Nothing is cached between calls."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AreaMapper()
        self.override_mapper = ContentOverrideMapper()

    def find_candidate_areas(self, organization_id: OrganizationId | None) -> list[Area]:
        """
        Get global areas plus the tenant's own areas.

        Args:
            organization_id: The tenant, or None for untenanted learners

        Returns:
            List of area entities ordered by id
        """
        stmt = select(AreaORM)
        if organization_id is None:
            stmt = stmt.where(AreaORM.scope_type == "global")
        else:
            stmt = stmt.where(
                or_(
                    AreaORM.scope_type == "global",
                    AreaORM.organization_id == organization_id.value,
                )
            )
        orm_models = self.db.execute(stmt.order_by(AreaORM.id)).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_sections_by_areas(self, area_ids: Sequence[AreaId]) -> list[Section]:
        if not area_ids:
            return []
        stmt = (
            select(SectionORM)
            .where(SectionORM.area_id.in_([area_id.value for area_id in area_ids]))
            .order_by(SectionORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.section_to_domain(orm) for orm in orm_models]

    def find_area(self, area_id: AreaId) -> Area | None:
        orm_model = self.db.get(AreaORM, area_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_section(self, section_id: SectionId) -> Section | None:
        orm_model = self.db.get(SectionORM, section_id.value)
        return self.mapper.section_to_domain(orm_model) if orm_model else None

    def find_area_overrides(self, organization_id: OrganizationId) -> dict[AreaId, ContentOverride]:
        stmt = select(OrganizationAreaConfigORM).where(
            OrganizationAreaConfigORM.organization_id == organization_id.value
        )
        return {
            AreaId(orm.area_id): self.override_mapper.to_domain(orm)
            for orm in self.db.execute(stmt).scalars().all()
        }

    def find_section_overrides(
        self, organization_id: OrganizationId
    ) -> dict[SectionId, ContentOverride]:
        stmt = select(OrganizationSectionConfigORM).where(
            OrganizationSectionConfigORM.organization_id == organization_id.value
        )
        return {
            SectionId(orm.section_id): self.override_mapper.to_domain(orm)
            for orm in self.db.execute(stmt).scalars().all()
        }


class OrganizationRepository:
    """Repository for Organization lookups."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = OrganizationMapper()

    def find_by_id(self, organization_id: OrganizationId) -> Organization | None:
        orm_model = self.db.get(OrganizationORM, organization_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

"""Application service loading curriculum data and resolving a learner's path."""

from vocabpath.application.common.learner_context import LearnerContext
from vocabpath.application.curriculum.protocols.curriculum_repository import (
    CurriculumRepositoryProtocol,
)
from vocabpath.domain.common.value_objects import SectionId
from vocabpath.domain.curriculum.entities.area import Area, Section
from vocabpath.domain.curriculum.entities.learning_path import LearningPath
from vocabpath.domain.curriculum.services.visibility_resolver import ContentVisibilityResolver


class LearningPathService:
    """Feeds the visibility resolver with fresh data on every call."""

    def __init__(
        self,
        curriculum_repository: CurriculumRepositoryProtocol,
        visibility_resolver: ContentVisibilityResolver,
    ) -> None:
        self.curriculum_repository = curriculum_repository
        self.visibility_resolver = visibility_resolver

    def resolve(self, context: LearnerContext) -> LearningPath:
        """
        Resolve the ordered, visible sections for a learner's tenant.

        An inactive tenant yields an empty path.
        """
        if not context.sees_content:
            return LearningPath()

        organization_id = context.organization_id
        areas = self.curriculum_repository.find_candidate_areas(organization_id)
        sections = self.curriculum_repository.find_sections_by_areas([area.id for area in areas])

        if organization_id is None:
            return self.visibility_resolver.resolve(None, areas, sections)

        return self.visibility_resolver.resolve(
            organization_id,
            areas,
            sections,
            area_overrides=self.curriculum_repository.find_area_overrides(organization_id),
            section_overrides=self.curriculum_repository.find_section_overrides(organization_id),
        )

    def find_in_scope(self, context: LearnerContext, section_id: int) -> tuple[Area, Section] | None:
        """
        Look up a section the learner's tenant could see before overrides apply.

        Returns:
            (area, section) if the section exists, is active and belongs to a
            global area or one of the tenant's areas; None otherwise
        """
        section = self.curriculum_repository.find_section(SectionId(section_id))
        if section is None:
            return None
        area = self.curriculum_repository.find_area(section.area_id)
        if area is None:
            return None
        if not self.visibility_resolver.is_in_scope(context.organization_id, area, section):
            return None
        return area, section

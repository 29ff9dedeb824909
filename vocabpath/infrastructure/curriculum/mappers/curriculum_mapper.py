"""Mappers for curriculum ORM ↔ Domain conversion."""

from typing import cast

from vocabpath.domain.common.value_objects import (
    AreaId,
    ModuleId,
    OptionId,
    OrganizationId,
    QuestionId,
    SectionId,
    VocabularyId,
)
from vocabpath.domain.curriculum.entities.area import Area, ScopeType, Section
from vocabpath.domain.curriculum.entities.content_override import ContentOverride
from vocabpath.domain.curriculum.entities.module import (
    Module,
    ModuleType,
    Question,
    QuestionOption,
    QuestionType,
    VocabularyEntry,
)
from vocabpath.domain.curriculum.entities.organization import Organization
from vocabpath.models import Area as AreaORM
from vocabpath.models import Module as ModuleORM
from vocabpath.models import Organization as OrganizationORM
from vocabpath.models import OrganizationAreaConfig as OrganizationAreaConfigORM
from vocabpath.models import OrganizationSectionConfig as OrganizationSectionConfigORM
from vocabpath.models import Question as QuestionORM
from vocabpath.models import Section as SectionORM
from vocabpath.models import SectionVocabulary as SectionVocabularyORM


def _organization_id(value: int | None) -> OrganizationId | None:
    return OrganizationId(value) if value is not None else None


class OrganizationMapper:
    """Mapper for Organization ORM → Domain conversion."""

    def to_domain(self, orm_model: OrganizationORM) -> Organization:
        return Organization(
            id=OrganizationId(orm_model.id),
            name=orm_model.name,
            slug=orm_model.slug,
            is_active=orm_model.is_active,
        )


class AreaMapper:
    """Mapper for Area and Section ORM → Domain conversion."""

    def to_domain(self, orm_model: AreaORM) -> Area:
        return Area(
            id=AreaId(orm_model.id),
            scope_type=cast(ScopeType, orm_model.scope_type),
            organization_id=_organization_id(orm_model.organization_id),
            sort_order=orm_model.sort_order,
            name=orm_model.name,
            description=orm_model.description,
            is_active=orm_model.is_active,
        )

    def section_to_domain(self, orm_model: SectionORM) -> Section:
        return Section(
            id=SectionId(orm_model.id),
            area_id=AreaId(orm_model.area_id),
            sort_order=orm_model.sort_order,
            title=orm_model.title,
            description=orm_model.description,
            organization_id=_organization_id(orm_model.organization_id),
            is_active=orm_model.is_active,
        )


class ContentOverrideMapper:
    """Mapper for tenant config rows → ContentOverride."""

    def to_domain(
        self, orm_model: OrganizationAreaConfigORM | OrganizationSectionConfigORM
    ) -> ContentOverride:
        return ContentOverride(is_visible=orm_model.is_visible, sort_order=orm_model.sort_order)


class ModuleMapper:
    """Mapper for Module, Question and Vocabulary ORM → Domain conversion."""

    def to_domain(self, orm_model: ModuleORM) -> Module:
        """Convert a module with its questions and their options."""
        return Module(
            id=ModuleId(orm_model.id),
            section_id=SectionId(orm_model.section_id),
            type=cast(ModuleType, orm_model.type),
            content=orm_model.content,
            questions=[self.question_to_domain(q) for q in orm_model.questions],
        )

    def question_to_domain(self, orm_model: QuestionORM) -> Question:
        return Question(
            id=QuestionId(orm_model.id),
            module_id=ModuleId(orm_model.module_id),
            type=cast(QuestionType, orm_model.type),
            prompt=orm_model.prompt,
            correct_answer=orm_model.correct_answer,
            options=[
                QuestionOption(
                    id=OptionId(option.id),
                    question_id=QuestionId(option.question_id),
                    option_text=option.option_text,
                    is_correct=option.is_correct,
                    sort_order=option.sort_order,
                )
                for option in orm_model.options
            ],
            sort_order=orm_model.sort_order,
        )

    def vocabulary_to_domain(self, orm_model: SectionVocabularyORM) -> VocabularyEntry:
        vocabulary = orm_model.vocabulary
        return VocabularyEntry(
            id=VocabularyId(vocabulary.id),
            word=vocabulary.word,
            definition=vocabulary.definition,
            translation=vocabulary.translation,
            example=vocabulary.example,
            sort_order=orm_model.sort_order,
        )

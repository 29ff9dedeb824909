"""Repository for modules, questions and section vocabulary."""

from sqlalchemy import Select, case, select
from sqlalchemy.orm import Session, selectinload

from vocabpath.domain.common.value_objects import ModuleId, SectionId
from vocabpath.domain.curriculum.entities.module import Module, ModuleType, VocabularyEntry
from vocabpath.infrastructure.curriculum.mappers.curriculum_mapper import ModuleMapper
from vocabpath.models import Module as ModuleORM
from vocabpath.models import Question as QuestionORM
from vocabpath.models import SectionVocabulary as SectionVocabularyORM

_MODULE_TYPE_ORDER = case(
    {"introduction": 0, "practice": 1, "test": 2},
    value=ModuleORM.type,
    else_=3,
)


class ModuleRepository:
    """Repository for Module domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ModuleMapper()

    def _select_modules(self) -> Select[tuple[ModuleORM]]:
        return select(ModuleORM).options(
            selectinload(ModuleORM.questions).selectinload(QuestionORM.options)
        )

    def find_by_id(self, module_id: ModuleId) -> Module | None:
        """
        Find a module with its questions and options.

        Args:
            module_id: The module ID

        Returns:
            Module entity if found, None otherwise
        """
        stmt = self._select_modules().where(ModuleORM.id == module_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_section(self, section_id: SectionId) -> list[Module]:
        stmt = (
            self._select_modules()
            .where(ModuleORM.section_id == section_id.value)
            .order_by(_MODULE_TYPE_ORDER)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_section_and_type(self, section_id: SectionId, module_type: ModuleType) -> Module | None:
        stmt = self._select_modules().where(
            ModuleORM.section_id == section_id.value,
            ModuleORM.type == module_type,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_vocabulary(self, section_id: SectionId) -> list[VocabularyEntry]:
        stmt = (
            select(SectionVocabularyORM)
            .options(selectinload(SectionVocabularyORM.vocabulary))
            .where(SectionVocabularyORM.section_id == section_id.value)
            .order_by(SectionVocabularyORM.sort_order, SectionVocabularyORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.vocabulary_to_domain(orm) for orm in orm_models]

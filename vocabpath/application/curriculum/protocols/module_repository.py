"""Protocol for module and section content repository."""

from typing import Protocol

from vocabpath.domain.common.value_objects import ModuleId, SectionId
from vocabpath.domain.curriculum.entities.module import Module, ModuleType, VocabularyEntry


class ModuleRepositoryProtocol(Protocol):
    """Read access to modules, their questions and section vocabulary."""

    def find_by_id(self, module_id: ModuleId) -> Module | None:
        """
        Find a module with its questions and options loaded.

        Args:
            module_id: The module ID

        Returns:
            Module entity if found, None otherwise
        """
        ...

    def find_by_section(self, section_id: SectionId) -> list[Module]:
        """Get the modules of a section in introduction, practice, test order."""
        ...

    def find_by_section_and_type(self, section_id: SectionId, module_type: ModuleType) -> Module | None:
        ...

    def find_vocabulary(self, section_id: SectionId) -> list[VocabularyEntry]:
        """Get the words taught by a section in display order."""
        ...

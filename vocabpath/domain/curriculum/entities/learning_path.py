"""The ordered list of sections a learner can see."""

from collections.abc import Iterator
from dataclasses import dataclass

from vocabpath.domain.common.value_objects import AreaId, SectionId
from vocabpath.domain.curriculum.entities.area import Area, Section


@dataclass(frozen=True)
class PathEntry:
    """A visible section tagged with its owning area and effective orders."""

    section: Section
    area: Area
    area_sort_order: int
    sort_order: int


@dataclass(frozen=True)
class AreaPlacement:
    """A visible area with its effective order for one tenant."""

    area: Area
    sort_order: int


@dataclass(frozen=True)
class LearningPath:
    """
    Visible sections concatenated in area order, then section order.

    Progression asks this object for "first" and "next" so unlocking
    follows exactly what the learner sees.

    `areas` lists every visible area in order, including areas whose
    sections are all hidden.
    """

    entries: tuple[PathEntry, ...] = ()
    areas: tuple[AreaPlacement, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PathEntry]:
        return iter(self.entries)

    @property
    def section_ids(self) -> list[SectionId]:
        return [entry.section.id for entry in self.entries]

    def first(self) -> PathEntry | None:
        """Return the first section of the path, if any."""
        return self.entries[0] if self.entries else None

    def index_of(self, section_id: SectionId) -> int | None:
        """Return the position of a section in the path, or None if it is not visible."""
        for index, entry in enumerate(self.entries):
            if entry.section.id == section_id:
                return index
        return None

    def contains(self, section_id: SectionId) -> bool:
        return self.index_of(section_id) is not None

    def next_after(self, section_id: SectionId) -> PathEntry | None:
        """
        Return the section right after the given one.

        None when the section is last or not part of this path.
        """
        index = self.index_of(section_id)
        if index is None or index + 1 >= len(self.entries):
            return None
        return self.entries[index + 1]

    def entries_in(self, area_id: AreaId) -> list[PathEntry]:
        return [entry for entry in self.entries if entry.area.id == area_id]

"""Domain service summarizing visible areas and ranking them by recent activity."""

from collections.abc import Mapping
from dataclasses import dataclass

from vocabpath.constants import HOT_AREA_MIN_COMPLETIONS
from vocabpath.domain.common.value_objects import SectionId
from vocabpath.domain.curriculum.entities.area import Area
from vocabpath.domain.curriculum.entities.learning_path import LearningPath


@dataclass(frozen=True)
class AreaSummary:
    """One visible area with its section count and recent pass count."""

    area: Area
    sort_order: int
    unit_count: int
    recent_completions: int

    @property
    def is_hot(self) -> bool:
        return self.recent_completions >= HOT_AREA_MIN_COMPLETIONS


class AreaRanker:
    """Puts hot areas first, keeping path order inside each group."""

    def rank(
        self, path: LearningPath, completions: Mapping[SectionId, int]
    ) -> list[AreaSummary]:
        """
        Summarize every visible area of a path.

        Args:
            path: The tenant's resolved path
            completions: Recent passed attempts per section

        Returns:
            Hot areas, then the rest, each group in effective area order
        """
        summaries = []
        for placement in path.areas:
            entries = path.entries_in(placement.area.id)
            summaries.append(
                AreaSummary(
                    area=placement.area,
                    sort_order=placement.sort_order,
                    unit_count=len(entries),
                    recent_completions=sum(
                        completions.get(entry.section.id, 0) for entry in entries
                    ),
                )
            )
        # sorted() is stable, so ties keep the resolver's order
        return sorted(summaries, key=lambda summary: not summary.is_hot)

"""Domain service computing and advancing a learner's section states."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from vocabpath.domain.common.value_objects import SectionId, UserId
from vocabpath.domain.curriculum.entities.learning_path import LearningPath, PathEntry
from vocabpath.domain.progression.entities.section_progress import (
    LearnerSectionProgress,
    SectionState,
)


@dataclass(frozen=True)
class SectionStatus:
    """A path entry with the learner's state for it."""

    entry: PathEntry
    state: SectionState
    progress: LearnerSectionProgress | None


@dataclass(frozen=True)
class GradedTestOutcome:
    """Progress rows touched by a test result."""

    progress: LearnerSectionProgress
    unlocked_next: LearnerSectionProgress | None


class ProgressionStateMachine:
    """Per (learner, section) states: locked, unlocked_incomplete, unlocked_complete.

    The first section of the learner's path counts as unlocked even without
    a progress row. "Next section" always means the next entry of the same
    resolved path the learner sees, never a raw sort_order lookup.
    """

    def is_unlocked(
        self,
        path: LearningPath,
        section_id: SectionId,
        progress: LearnerSectionProgress | None,
    ) -> bool:
        """Check if the learner may open a section of their path."""
        if not path.contains(section_id):
            return False
        first = path.first()
        if first is not None and first.section.id == section_id:
            return True
        return progress is not None and progress.unlocked

    def state_of(
        self,
        path: LearningPath,
        section_id: SectionId,
        progress: LearnerSectionProgress | None,
    ) -> SectionState:
        if not self.is_unlocked(path, section_id, progress):
            return "locked"
        if progress is not None and progress.test_passed:
            return "unlocked_complete"
        return "unlocked_incomplete"

    def statuses(
        self,
        path: LearningPath,
        progress_by_section: Mapping[SectionId, LearnerSectionProgress],
    ) -> list[SectionStatus]:
        """Annotate every entry of the path with the learner's state."""
        result = []
        for entry in path:
            progress = progress_by_section.get(entry.section.id)
            result.append(
                SectionStatus(
                    entry=entry,
                    state=self.state_of(path, entry.section.id, progress),
                    progress=progress,
                )
            )
        return result

    def reach(
        self,
        user_id: UserId,
        section_id: SectionId,
        progress: LearnerSectionProgress | None,
        now: datetime | None = None,
    ) -> LearnerSectionProgress:
        """
        Return the progress row of a section the learner is working in.

        Creates the row on first contact; the caller has already checked the
        section is unlocked, so the row is stored as unlocked.
        """
        if progress is None:
            return LearnerSectionProgress.create_unlocked(user_id, section_id, now)
        progress.unlock(now)
        return progress

    def complete_introduction(
        self,
        user_id: UserId,
        section_id: SectionId,
        progress: LearnerSectionProgress | None,
        now: datetime | None = None,
    ) -> LearnerSectionProgress:
        progress = self.reach(user_id, section_id, progress, now)
        progress.complete_introduction(now)
        return progress

    def complete_practice(
        self,
        user_id: UserId,
        section_id: SectionId,
        progress: LearnerSectionProgress | None,
        now: datetime | None = None,
    ) -> LearnerSectionProgress:
        progress = self.reach(user_id, section_id, progress, now)
        progress.complete_practice(now)
        return progress

    def record_test(
        self,
        path: LearningPath,
        user_id: UserId,
        section_id: SectionId,
        progress: LearnerSectionProgress | None,
        next_progress: LearnerSectionProgress | None,
        score: float,
        passed: bool,
        now: datetime | None = None,
    ) -> GradedTestOutcome:
        """
        Apply a test result: last attempt wins, a pass unlocks the next section.

        Args:
            path: The learner's current resolved path
            user_id: The learner
            section_id: Section whose test was taken
            progress: Existing progress row for that section, if any
            next_progress: Existing progress row for the next section in the path, if any
            score: Score of the attempt (0-100)
            passed: Whether the attempt passed
            now: Current time

        Returns:
            The updated progress row and, on a pass, the next section's row
        """
        progress = self.reach(user_id, section_id, progress, now)
        progress.record_test_result(score, passed, now)

        if not passed:
            return GradedTestOutcome(progress=progress, unlocked_next=None)

        next_entry = path.next_after(section_id)
        if next_entry is None:
            return GradedTestOutcome(progress=progress, unlocked_next=None)

        unlocked_next = self.reach(user_id, next_entry.section.id, next_progress, now)
        return GradedTestOutcome(progress=progress, unlocked_next=unlocked_next)

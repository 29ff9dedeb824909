"""Tests for ProgressionStateMachine domain service."""

from datetime import UTC, datetime, timedelta

from vocabpath.domain.common.value_objects import AreaId, SectionId, UserId
from vocabpath.domain.curriculum.entities.area import Area, Section
from vocabpath.domain.curriculum.entities.learning_path import LearningPath, PathEntry
from vocabpath.domain.progression.entities.section_progress import LearnerSectionProgress
from vocabpath.domain.progression.events import SectionTestPassed, SectionUnlocked
from vocabpath.domain.progression.services.progression_state_machine import (
    ProgressionStateMachine,
)

LEARNER = UserId(3)
NOW = datetime(2026, 4, 1, 8, 0, tzinfo=UTC)


def _make_path(*section_ids: int) -> LearningPath:
    area = Area(id=AreaId(1), scope_type="global", organization_id=None, sort_order=1)
    return LearningPath(
        entries=tuple(
            PathEntry(
                section=Section(id=SectionId(sid), area_id=area.id, sort_order=index),
                area=area,
                area_sort_order=1,
                sort_order=index,
            )
            for index, sid in enumerate(section_ids, start=1)
        )
    )


def _unlocked(section_id: int) -> LearnerSectionProgress:
    return LearnerSectionProgress.create_unlocked(LEARNER, SectionId(section_id), NOW)


class TestSectionStates:
    def test_first_section_unlocked_without_row(self) -> None:
        machine = ProgressionStateMachine()
        path = _make_path(1, 2)

        assert machine.state_of(path, SectionId(1), None) == "unlocked_incomplete"
        assert machine.state_of(path, SectionId(2), None) == "locked"

    def test_unlocked_row_opens_section(self) -> None:
        machine = ProgressionStateMachine()
        path = _make_path(1, 2)

        assert machine.is_unlocked(path, SectionId(2), _unlocked(2)) is True

    def test_passed_section_is_complete(self) -> None:
        machine = ProgressionStateMachine()
        progress = _unlocked(1)
        progress.record_test_result(90, True, NOW)

        assert machine.state_of(_make_path(1, 2), SectionId(1), progress) == "unlocked_complete"

    def test_section_outside_path_is_locked_even_with_row(self) -> None:
        machine = ProgressionStateMachine()

        assert machine.is_unlocked(_make_path(1, 2), SectionId(9), _unlocked(9)) is False

    def test_first_section_of_empty_path(self) -> None:
        machine = ProgressionStateMachine()

        assert machine.is_unlocked(LearningPath(), SectionId(1), None) is False

    def test_statuses_follow_path_order(self) -> None:
        machine = ProgressionStateMachine()
        path = _make_path(5, 3, 4)

        statuses = machine.statuses(path, {SectionId(3): _unlocked(3)})

        assert [s.entry.section.id.value for s in statuses] == [5, 3, 4]
        assert [s.state for s in statuses] == [
            "unlocked_incomplete",
            "unlocked_incomplete",
            "locked",
        ]
        assert statuses[0].progress is None


class TestRecordTest:
    def test_pass_unlocks_next_section(self) -> None:
        machine = ProgressionStateMachine()
        path = _make_path(1, 2, 3)

        outcome = machine.record_test(path, LEARNER, SectionId(1), None, None, 85, True, NOW)

        assert outcome.progress.test_passed is True
        assert outcome.progress.test_score == 85
        assert outcome.unlocked_next is not None
        assert outcome.unlocked_next.section_id == SectionId(2)
        assert outcome.unlocked_next.unlocked is True
        assert outcome.unlocked_next.unlocked_at == NOW

    def test_fail_unlocks_nothing(self) -> None:
        machine = ProgressionStateMachine()

        outcome = machine.record_test(
            _make_path(1, 2), LEARNER, SectionId(1), None, None, 50, False, NOW
        )

        assert outcome.progress.test_passed is False
        assert outcome.progress.test_score == 50
        assert outcome.unlocked_next is None

    def test_pass_on_last_section_unlocks_nothing(self) -> None:
        machine = ProgressionStateMachine()

        outcome = machine.record_test(
            _make_path(1, 2), LEARNER, SectionId(2), _unlocked(2), None, 100, True, NOW
        )

        assert outcome.unlocked_next is None

    def test_failing_retake_clears_pass(self) -> None:
        machine = ProgressionStateMachine()
        path = _make_path(1, 2)
        first = machine.record_test(path, LEARNER, SectionId(1), None, None, 90, True, NOW)

        retake = machine.record_test(
            path, LEARNER, SectionId(1), first.progress, first.unlocked_next, 40, False, NOW
        )

        assert retake.progress.test_passed is False
        assert retake.progress.test_score == 40
        assert first.unlocked_next is not None
        assert first.unlocked_next.unlocked is True

    def test_existing_next_row_keeps_first_unlock_time(self) -> None:
        machine = ProgressionStateMachine()
        earlier = NOW - timedelta(days=2)
        next_progress = LearnerSectionProgress.create_unlocked(LEARNER, SectionId(2), earlier)
        next_progress.collect_events()

        outcome = machine.record_test(
            _make_path(1, 2), LEARNER, SectionId(1), None, next_progress, 100, True, NOW
        )

        assert outcome.unlocked_next is next_progress
        assert next_progress.unlocked_at == earlier
        assert next_progress.collect_events() == []

    def test_events_record_pass_and_unlock(self) -> None:
        machine = ProgressionStateMachine()

        outcome = machine.record_test(
            _make_path(1, 2), LEARNER, SectionId(1), None, None, 80, True, NOW
        )

        progress_events = outcome.progress.collect_events()
        assert [type(e) for e in progress_events] == [SectionUnlocked, SectionTestPassed]
        assert outcome.unlocked_next is not None
        next_events = outcome.unlocked_next.collect_events()
        assert len(next_events) == 1
        assert isinstance(next_events[0], SectionUnlocked)
        assert next_events[0].section_id == 2


class TestStageCompletion:
    def test_complete_introduction_creates_unlocked_row(self) -> None:
        progress = ProgressionStateMachine().complete_introduction(LEARNER, SectionId(1), None, NOW)

        assert progress.unlocked is True
        assert progress.intro_completed is True
        assert progress.practice_completed is False

    def test_complete_practice_is_idempotent(self) -> None:
        machine = ProgressionStateMachine()
        progress = machine.complete_practice(LEARNER, SectionId(1), None, NOW)
        later = NOW + timedelta(hours=1)

        again = machine.complete_practice(LEARNER, SectionId(1), progress, later)

        assert again is progress
        assert again.practice_completed is True
        assert again.unlocked_at == NOW
        assert again.updated_at == later

"""Tests for the LearnerSectionProgress aggregate."""

from datetime import UTC, datetime

import pytest

from vocabpath.domain.common.exceptions import ValidationError
from vocabpath.domain.common.value_objects import SectionId, UserId
from vocabpath.domain.progression.entities.section_progress import LearnerSectionProgress
from vocabpath.domain.progression.events import SectionTestFailed, SectionUnlocked

NOW = datetime(2026, 4, 1, tzinfo=UTC)


def _make_progress() -> LearnerSectionProgress:
    return LearnerSectionProgress.create(UserId(1), SectionId(2))


class TestLearnerSectionProgress:
    def test_new_row_is_locked(self) -> None:
        progress = _make_progress()
        assert progress.state == "locked"
        assert progress.unlocked_at is None

    def test_unlock_once(self) -> None:
        progress = _make_progress()
        progress.unlock(NOW)
        progress.unlock(datetime(2026, 5, 1, tzinfo=UTC))

        assert progress.state == "unlocked_incomplete"
        assert progress.unlocked_at == NOW
        events = progress.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], SectionUnlocked)
        assert events[0].to_dict()["section_id"] == 2

    def test_failed_result_records_event(self) -> None:
        progress = _make_progress()
        progress.record_test_result(20, False, NOW)

        assert progress.test_score == 20
        assert progress.test_passed is False
        assert isinstance(progress.pending_events[-1], SectionTestFailed)

    @pytest.mark.parametrize("score", [-1, 100.5])
    def test_score_out_of_range_rejected(self, score: float) -> None:
        with pytest.raises(ValidationError):
            _make_progress().record_test_result(score, False, NOW)

    def test_introduction_completion_is_idempotent(self) -> None:
        progress = _make_progress()
        progress.complete_introduction(NOW)
        progress.complete_introduction(NOW)

        assert progress.intro_completed is True
        assert progress.collect_events() == []

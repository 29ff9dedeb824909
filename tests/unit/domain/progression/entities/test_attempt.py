"""Tests for the LearnerAttempt entity."""

from datetime import UTC, datetime

import pytest

from vocabpath.domain.common.value_objects import AnswerId, ModuleId, QuestionId, UserId
from vocabpath.domain.progression.entities.attempt import LearnerAnswer, LearnerAttempt
from vocabpath.domain.progression.exceptions import AttemptAlreadyCompletedError

NOW = datetime(2026, 4, 1, 9, 30, tzinfo=UTC)


def _make_answer(question_id: int, is_correct: bool = True) -> LearnerAnswer:
    return LearnerAnswer(
        id=AnswerId.generate(), question_id=QuestionId(question_id), is_correct=is_correct
    )


class TestLearnerAttempt:
    def test_unsaved_answers_have_no_attempt(self) -> None:
        attempt = LearnerAttempt.start(UserId(1), ModuleId(2), NOW)
        answers = [_make_answer(1), _make_answer(2, is_correct=False)]

        attempt.complete(score=50.0, passed=False, answers=answers, now=NOW)

        assert attempt.is_completed is True
        assert attempt.completed_at == NOW
        assert [answer.attempt_id for answer in attempt.answers] == [None, None]

    def test_completed_attempt_cannot_be_graded_again(self) -> None:
        attempt = LearnerAttempt.start(UserId(1), ModuleId(2), NOW)
        attempt.complete(score=100.0, passed=True, answers=[_make_answer(1)], now=NOW)

        with pytest.raises(AttemptAlreadyCompletedError):
            attempt.complete(score=0.0, passed=False, answers=[], now=NOW)
        assert attempt.score == 100.0

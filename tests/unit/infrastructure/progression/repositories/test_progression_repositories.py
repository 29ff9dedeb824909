"""Tests for the progression repositories against a real session."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.orm import Session

from vocabpath import models
from vocabpath.domain.common.value_objects import AnswerId, ModuleId, QuestionId, SectionId, UserId
from vocabpath.domain.progression.entities.attempt import LearnerAnswer, LearnerAttempt
from vocabpath.domain.progression.entities.section_progress import LearnerSectionProgress
from vocabpath.infrastructure.progression.repositories.attempt_repository import (
    AttemptRepository,
)
from vocabpath.infrastructure.progression.repositories.section_progress_repository import (
    SectionProgressRepository,
)

NOW = datetime(2026, 4, 1, 12, 0, tzinfo=UTC)
EARLIER = NOW - timedelta(days=1)


class TestSectionProgressRepository:
    def test_row_stored_by_concurrent_request_is_updated(
        self,
        db_session: Session,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        learner = make_learner()
        section = make_section(make_area())
        stored = models.LearnerSectionProgress(
            user_id=learner.id,
            section_id=section.id,
            unlocked=True,
            unlocked_at=EARLIER,
            intro_completed=True,
            updated_at=EARLIER,
        )
        db_session.add(stored)
        db_session.flush()

        repository = SectionProgressRepository(db_session)
        real_find = repository._find_orm
        lookups: list[int] = []

        # The first lookup runs before the other request's row is visible
        def find_missing_first(
            user_id: int, section_id: int
        ) -> models.LearnerSectionProgress | None:
            lookups.append(section_id)
            if len(lookups) == 1:
                return None
            return real_find(user_id, section_id)

        monkeypatch.setattr(repository, "_find_orm", find_missing_first)

        progress = LearnerSectionProgress.create_unlocked(
            UserId(learner.id), SectionId(section.id), NOW
        )
        progress.record_test_result(60.0, False, NOW)

        saved = repository.save(progress)

        assert saved.id.value == stored.id
        assert saved.intro_completed is True
        assert saved.unlocked_at == EARLIER
        assert saved.test_score == 60.0
        assert saved.test_passed is False
        assert db_session.query(models.LearnerSectionProgress).count() == 1

    def test_first_save_inserts_row(
        self,
        db_session: Session,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        learner = make_learner()
        section = make_section(make_area())
        repository = SectionProgressRepository(db_session)

        saved = repository.save(
            LearnerSectionProgress.create_unlocked(UserId(learner.id), SectionId(section.id), NOW)
        )

        assert saved.id.value > 0
        assert repository.find_one(UserId(learner.id), SectionId(section.id)) is not None


class TestAttemptRepository:
    def test_stored_answers_point_at_their_attempt(
        self,
        db_session: Session,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        module_of: Callable[[models.Section, str], models.Module],
    ) -> None:
        learner = make_learner()
        module = module_of(make_section(make_area()), "practice")
        question = module.questions[0]
        attempt = LearnerAttempt.start(UserId(learner.id), ModuleId(module.id), NOW)
        attempt.complete(
            score=100.0,
            passed=True,
            answers=[
                LearnerAnswer(
                    id=AnswerId.generate(), question_id=QuestionId(question.id), is_correct=True
                )
            ],
            now=NOW,
        )

        saved = AttemptRepository(db_session).add(attempt)

        assert saved.id.value > 0
        assert [answer.attempt_id for answer in saved.answers] == [saved.id]

    def test_count_recent_passes_groups_by_section(
        self,
        db_session: Session,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        module_of: Callable[[models.Section, str], models.Module],
    ) -> None:
        area = make_area()
        first = make_section(area, title="Greetings")
        second = make_section(area, title="Numbers", sort_order=2)
        untouched = make_section(area, title="Colors", sort_order=3)
        rows = [
            (module_of(first, "test"), NOW, True),
            (module_of(first, "practice"), NOW, True),
            (module_of(first, "test"), NOW, False),
            (module_of(second, "test"), EARLIER, True),
            (module_of(second, "test"), NOW - timedelta(days=8), True),
        ]
        for module, completed_at, passed in rows:
            db_session.add(
                models.LearnerAttempt(
                    user_id=make_learner().id,
                    module_id=module.id,
                    started_at=completed_at,
                    completed_at=completed_at,
                    score=100.0 if passed else 0.0,
                    passed=passed,
                )
            )
        db_session.flush()

        counts = AttemptRepository(db_session).count_recent_passes(
            [SectionId(first.id), SectionId(second.id), SectionId(untouched.id)],
            since=NOW - timedelta(days=7),
        )

        assert counts == {SectionId(first.id): 2, SectionId(second.id): 1}

    def test_count_recent_passes_without_sections(self, db_session: Session) -> None:
        assert AttemptRepository(db_session).count_recent_passes([], since=NOW) == {}

"""Tests for stage completion and test review endpoints."""

from collections.abc import Callable

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from vocabpath import models


class TestCompleteModule:
    """Test suite for POST /learners/:id/sections/:section_id/progress endpoint."""

    def test_complete_introduction(
        self,
        client: TestClient,
        db_session: Session,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        """Test marking the introduction of the first section as read."""
        learner = make_learner()
        section = make_section(make_area())

        response = client.post(
            f"/api/v1/learners/{learner.id}/sections/{section.id}/progress",
            json={"module_type": "introduction"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["section_id"] == section.id
        assert data["state"] == "unlocked_incomplete"
        assert data["unlocked"] is True
        assert data["unlocked_at"] is not None
        assert data["intro_completed"] is True
        assert data["practice_completed"] is False

        db_progress = (
            db_session.query(models.LearnerSectionProgress)
            .filter_by(user_id=learner.id, section_id=section.id)
            .one()
        )
        assert db_progress.intro_completed is True

    def test_completion_is_idempotent(
        self,
        client: TestClient,
        db_session: Session,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        """Test that repeating a completion keeps a single row and the first unlock time."""
        learner = make_learner()
        section = make_section(make_area())
        url = f"/api/v1/learners/{learner.id}/sections/{section.id}/progress"

        first = client.post(url, json={"module_type": "practice"})
        second = client.post(url, json={"module_type": "practice"})

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_200_OK
        assert second.json()["practice_completed"] is True
        assert second.json()["unlocked_at"] == first.json()["unlocked_at"]
        assert db_session.query(models.LearnerSectionProgress).count() == 1

    def test_locked_section_is_denied(
        self,
        client: TestClient,
        db_session: Session,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        """Test that a locked section's stages cannot be completed."""
        learner = make_learner()
        area = make_area()
        make_section(area, title="First", sort_order=1)
        second = make_section(area, title="Second", sort_order=2)

        response = client.post(
            f"/api/v1/learners/{learner.id}/sections/{second.id}/progress",
            json={"module_type": "introduction"},
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["reason"] == "section_locked"
        assert db_session.query(models.LearnerSectionProgress).count() == 0

    def test_test_stage_is_not_completable(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        """Test that the test stage can only be completed by submitting answers."""
        learner = make_learner()
        section = make_section(make_area())

        response = client.post(
            f"/api/v1/learners/{learner.id}/sections/{section.id}/progress",
            json={"module_type": "test"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestGetTestReview:
    """Test suite for GET /learners/:id/sections/:section_id/test-review endpoint."""

    def test_review_latest_attempt(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        module_of: Callable[[models.Section, str], models.Module],
        choice_answers: Callable[[models.Module, int], list[dict[str, int]]],
    ) -> None:
        """Test that the review shows the newest attempt with expected answers."""
        learner = make_learner()
        section = make_section(make_area())
        test_module = module_of(section, "test")
        submit_url = f"/api/v1/learners/{learner.id}/attempts"
        client.post(
            submit_url,
            json={"module_id": test_module.id, "answers": choice_answers(test_module, 5)},
        )
        latest = client.post(
            submit_url,
            json={"module_id": test_module.id, "answers": choice_answers(test_module, 4)[:4]},
        )

        response = client.get(f"/api/v1/learners/{learner.id}/sections/{section.id}/test-review")

        assert response.status_code == status.HTTP_200_OK
        attempt = response.json()["attempt"]
        assert attempt["attempt_id"] == latest.json()["attempt_id"]
        assert attempt["module_id"] == test_module.id
        assert attempt["score"] == 80.0
        assert attempt["passed"] is True
        questions = attempt["questions"]
        assert len(questions) == 5
        assert questions[0]["learner_answer"] == "right"
        assert questions[0]["expected_answer"] == "right"
        assert questions[0]["is_correct"] is True
        assert questions[4]["learner_answer"] is None
        assert questions[4]["expected_answer"] == "right"
        assert questions[4]["is_correct"] is False

    def test_review_matching_question(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        module_of: Callable[[models.Section, str], models.Module],
        add_question: Callable[..., models.Question],
    ) -> None:
        """Test that matching answers are reviewed as term to definition mappings."""
        learner = make_learner()
        section = make_section(make_area(), test_questions=0)
        test_module = module_of(section, "test")
        question = add_question(
            test_module,
            "matching",
            [{"term": "one", "definition": "uno"}, {"term": "two", "definition": "dos"}],
        )
        client.post(
            f"/api/v1/learners/{learner.id}/attempts",
            json={
                "module_id": test_module.id,
                "answers": [{"question_id": question.id, "pairs": {"one": "dos", "two": "uno"}}],
            },
        )

        response = client.get(f"/api/v1/learners/{learner.id}/sections/{section.id}/test-review")

        reviewed = response.json()["attempt"]["questions"][0]
        assert reviewed["learner_answer"] == {"one": "dos", "two": "uno"}
        assert reviewed["expected_answer"] == {"one": "uno", "two": "dos"}
        assert reviewed["is_correct"] is False

    def test_review_without_attempt(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        """Test that a never-taken test has an empty review."""
        learner = make_learner()
        section = make_section(make_area())

        response = client.get(f"/api/v1/learners/{learner.id}/sections/{section.id}/test-review")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"attempt": None}

    def test_review_locked_section(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        """Test that a locked section cannot be reviewed."""
        learner = make_learner()
        area = make_area()
        make_section(area, title="First", sort_order=1)
        second = make_section(area, title="Second", sort_order=2)

        response = client.get(f"/api/v1/learners/{learner.id}/sections/{second.id}/test-review")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["reason"] == "section_locked"

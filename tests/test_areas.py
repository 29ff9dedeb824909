"""Tests for the area catalogue endpoint."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from vocabpath import models


@pytest.fixture
def record_passes(
    db_session: Session,
    make_learner: Callable[..., models.User],
    module_of: Callable[[models.Section, str], models.Module],
) -> Callable[..., None]:
    """Store passed test attempts by fresh learners, completed some days ago."""

    def _record(
        section: models.Section, count: int, days_ago: float = 1, passed: bool = True
    ) -> None:
        test_module = module_of(section, "test")
        completed_at = datetime.now(UTC) - timedelta(days=days_ago)
        for _ in range(count):
            db_session.add(
                models.LearnerAttempt(
                    user_id=make_learner().id,
                    module_id=test_module.id,
                    started_at=completed_at,
                    completed_at=completed_at,
                    score=100.0 if passed else 20.0,
                    passed=passed,
                )
            )
        db_session.commit()

    return _record


def _area_ids(response_json: dict) -> list[int]:
    return [area["area_id"] for area in response_json["areas"]]


class TestGetAreas:
    """Test suite for GET /learners/:id/areas endpoint."""

    def test_lists_areas_in_sort_order_with_unit_counts(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        """Test that quiet areas follow area order and count their visible sections."""
        learner = make_learner()
        travel = make_area(name="Travel", sort_order=2)
        basics = make_area(name="Basics", sort_order=1)
        make_section(travel, title="Airports")
        make_section(travel, title="Hotels", sort_order=2)
        make_section(travel, title="Draft", sort_order=3, is_active=False)
        make_section(basics, title="Greetings")

        response = client.get(f"/api/v1/learners/{learner.id}/areas")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["learner_id"] == learner.id
        assert _area_ids(data) == [basics.id, travel.id]
        assert [area["unit_count"] for area in data["areas"]] == [1, 2]
        assert [area["is_hot"] for area in data["areas"]] == [False, False]

    def test_three_recent_passes_make_an_area_hot(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        record_passes: Callable[..., None],
    ) -> None:
        """Test that an area with three passes this week is hot and listed first."""
        learner = make_learner()
        basics = make_area(name="Basics", sort_order=1)
        travel = make_area(name="Travel", sort_order=2)
        make_section(basics)
        airports = make_section(travel, title="Airports")
        hotels = make_section(travel, title="Hotels", sort_order=2)
        record_passes(airports, 2)
        record_passes(hotels, 1)

        response = client.get(f"/api/v1/learners/{learner.id}/areas")

        data = response.json()
        assert _area_ids(data) == [travel.id, basics.id]
        assert data["areas"][0]["recent_completions"] == 3
        assert data["areas"][0]["is_hot"] is True
        assert data["areas"][1]["recent_completions"] == 0

    def test_two_recent_passes_are_below_threshold(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        record_passes: Callable[..., None],
    ) -> None:
        """Test that two passes are counted but do not make an area hot."""
        learner = make_learner()
        basics = make_area(name="Basics", sort_order=1)
        travel = make_area(name="Travel", sort_order=2)
        make_section(basics)
        record_passes(make_section(travel, title="Airports"), 2)

        data = client.get(f"/api/v1/learners/{learner.id}/areas").json()

        assert _area_ids(data) == [basics.id, travel.id]
        assert data["areas"][1]["recent_completions"] == 2
        assert data["areas"][1]["is_hot"] is False

    def test_old_and_failed_attempts_are_not_counted(
        self,
        client: TestClient,
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        record_passes: Callable[..., None],
    ) -> None:
        """Test that passes older than a week and failed attempts are ignored."""
        learner = make_learner()
        section = make_section(make_area())
        record_passes(section, 3, days_ago=8)
        record_passes(section, 3, passed=False)
        record_passes(section, 1)

        data = client.get(f"/api/v1/learners/{learner.id}/areas").json()

        assert data["areas"][0]["recent_completions"] == 1
        assert data["areas"][0]["is_hot"] is False

    def test_hidden_sections_do_not_count(
        self,
        client: TestClient,
        make_organization: Callable[..., models.Organization],
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
        configure_area: Callable[..., models.OrganizationAreaConfig],
        configure_section: Callable[..., models.OrganizationSectionConfig],
        record_passes: Callable[..., None],
    ) -> None:
        """Test that tenant overrides hide areas and drop hidden sections from the counts."""
        tenant = make_organization()
        learner = make_learner(organization=tenant)
        area = make_area(name="Basics", sort_order=1)
        hidden_area = make_area(name="Slang", sort_order=2)
        visible = make_section(area, title="Greetings")
        hidden = make_section(area, title="Numbers", sort_order=2)
        make_section(hidden_area)
        configure_area(tenant, hidden_area, is_visible=False)
        configure_section(tenant, hidden, is_visible=False)
        record_passes(hidden, 3)
        record_passes(visible, 1)

        data = client.get(f"/api/v1/learners/{learner.id}/areas").json()

        assert _area_ids(data) == [area.id]
        assert data["organization_id"] == tenant.id
        assert data["areas"][0]["unit_count"] == 1
        assert data["areas"][0]["recent_completions"] == 1

    def test_inactive_tenant_has_no_areas(
        self,
        client: TestClient,
        make_organization: Callable[..., models.Organization],
        make_learner: Callable[..., models.User],
        make_area: Callable[..., models.Area],
        make_section: Callable[..., models.Section],
    ) -> None:
        """Test that learners of an inactive tenant get an empty catalogue."""
        learner = make_learner(organization=make_organization(is_active=False))
        make_section(make_area())

        response = client.get(f"/api/v1/learners/{learner.id}/areas")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["areas"] == []

    def test_learner_not_found(self, client: TestClient) -> None:
        """Test that an unknown learner is a 404."""
        response = client.get("/api/v1/learners/999/areas")

        assert response.status_code == status.HTTP_404_NOT_FOUND

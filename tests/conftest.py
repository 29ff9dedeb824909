"""Pytest configuration and fixtures."""

import itertools
import json
from collections.abc import Callable, Generator
from datetime import datetime
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from vocabpath import models
from vocabpath.database import Base, build_engine, get_db
from vocabpath.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection, so the request thread sees the rows a test created
test_engine = build_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_QUESTION_COUNT = 5


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_organization(db_session: Session) -> Callable[..., models.Organization]:
    """Factory for tenants."""
    counter = itertools.count(1)

    def _make(name: str = "Acme Academy", is_active: bool = True) -> models.Organization:
        organization = models.Organization(
            name=name, slug=f"org-{next(counter)}", is_active=is_active
        )
        db_session.add(organization)
        db_session.commit()
        db_session.refresh(organization)
        return organization

    return _make


@pytest.fixture
def make_learner(db_session: Session) -> Callable[..., models.User]:
    """Factory for learner accounts. Defaults to an untenanted free-trial learner."""
    counter = itertools.count(1)

    def _make(
        organization: models.Organization | None = None,
        monthly_rate: float = 0.0,
        next_payment_due: datetime | None = None,
        access_override: str | None = None,
    ) -> models.User:
        number = next(counter)
        learner = models.User(
            username=f"learner{number}",
            display_name=f"Learner {number}",
            organization_id=organization.id if organization else None,
            monthly_rate=monthly_rate,
            next_payment_due=next_payment_due,
            access_override=access_override,
        )
        db_session.add(learner)
        db_session.commit()
        db_session.refresh(learner)
        return learner

    return _make


@pytest.fixture
def make_area(db_session: Session) -> Callable[..., models.Area]:
    """Factory for areas. Passing an organization makes the area org-scoped."""

    def _make(
        name: str = "Everyday English",
        sort_order: int = 1,
        organization: models.Organization | None = None,
        is_active: bool = True,
    ) -> models.Area:
        area = models.Area(
            name=name,
            sort_order=sort_order,
            scope_type="org" if organization else "global",
            organization_id=organization.id if organization else None,
            is_active=is_active,
        )
        db_session.add(area)
        db_session.commit()
        db_session.refresh(area)
        return area

    return _make


@pytest.fixture
def make_section(db_session: Session) -> Callable[..., models.Section]:
    """
    Factory for sections with their three modules.

    The introduction carries a reading payload, practice has one
    multiple-choice question and the test has five. Every choice question
    has a correct first option and a wrong second one.
    """

    def _add_choice_question(module: models.Module, number: int) -> None:
        question = models.Question(
            type="multiple_choice",
            prompt=f"Question {number}",
            sort_order=number,
            options=[
                models.QuestionOption(option_text="right", is_correct=True, sort_order=1),
                models.QuestionOption(option_text="wrong", is_correct=False, sort_order=2),
            ],
        )
        module.questions.append(question)

    def _make(
        area: models.Area,
        title: str = "Greetings",
        sort_order: int = 1,
        is_active: bool = True,
        test_questions: int = TEST_QUESTION_COUNT,
    ) -> models.Section:
        section = models.Section(
            area_id=area.id,
            organization_id=area.organization_id,
            title=title,
            sort_order=sort_order,
            is_active=is_active,
        )
        introduction = models.Module(type="introduction", content={"text": f"About {title}"})
        practice = models.Module(type="practice")
        _add_choice_question(practice, 1)
        test = models.Module(type="test")
        for number in range(1, test_questions + 1):
            _add_choice_question(test, number)
        section.modules.extend([introduction, practice, test])

        db_session.add(section)
        db_session.commit()
        db_session.refresh(section)
        return section

    return _make


@pytest.fixture
def configure_area(db_session: Session) -> Callable[..., models.OrganizationAreaConfig]:
    """Factory for tenant area overrides."""

    def _make(
        organization: models.Organization,
        area: models.Area,
        is_visible: bool = True,
        sort_order: int | None = None,
    ) -> models.OrganizationAreaConfig:
        config = models.OrganizationAreaConfig(
            organization_id=organization.id,
            area_id=area.id,
            is_visible=is_visible,
            sort_order=sort_order,
        )
        db_session.add(config)
        db_session.commit()
        return config

    return _make


@pytest.fixture
def configure_section(db_session: Session) -> Callable[..., models.OrganizationSectionConfig]:
    """Factory for tenant section overrides."""

    def _make(
        organization: models.Organization,
        section: models.Section,
        is_visible: bool = True,
        sort_order: int | None = None,
    ) -> models.OrganizationSectionConfig:
        config = models.OrganizationSectionConfig(
            organization_id=organization.id,
            section_id=section.id,
            is_visible=is_visible,
            sort_order=sort_order,
        )
        db_session.add(config)
        db_session.commit()
        return config

    return _make


@pytest.fixture
def module_of(db_session: Session) -> Callable[[models.Section, str], models.Module]:
    """Look up a section's module by type."""

    def _find(section: models.Section, module_type: str) -> models.Module:
        module = (
            db_session.query(models.Module)
            .filter_by(section_id=section.id, type=module_type)
            .one()
        )
        return module

    return _find


@pytest.fixture
def choice_answers() -> Callable[[models.Module, int], list[dict[str, int]]]:
    """Build answers to a choice module with the first `correct` questions answered right."""

    def _build(module: models.Module, correct: int) -> list[dict[str, int]]:
        answers = []
        for index, question in enumerate(module.questions):
            wanted = index < correct
            option = next(o for o in question.options if o.is_correct is wanted)
            answers.append({"question_id": question.id, "selected_option_id": option.id})
        return answers

    return _build


@pytest.fixture
def add_question(db_session: Session) -> Callable[..., models.Question]:
    """Add a non-choice question to a module."""

    def _add(
        module: models.Module,
        question_type: str,
        correct_answer: str | list[dict[str, str]],
        prompt: str = "Extra question",
        sort_order: int = 100,
    ) -> models.Question:
        if not isinstance(correct_answer, str):
            correct_answer = json.dumps(correct_answer)
        question = models.Question(
            module_id=module.id,
            type=question_type,
            prompt=prompt,
            correct_answer=correct_answer,
            sort_order=sort_order,
        )
        db_session.add(question)
        db_session.commit()
        db_session.refresh(question)
        db_session.refresh(module)
        return question

    return _add


@pytest.fixture
def add_vocabulary(db_session: Session) -> Callable[..., models.Vocabulary]:
    """Attach a vocabulary entry to a section."""

    def _add(
        section: models.Section,
        word: str,
        definition: str,
        sort_order: int = 0,
        translation: str | None = None,
    ) -> models.Vocabulary:
        vocabulary = models.Vocabulary(word=word, definition=definition, translation=translation)
        db_session.add(vocabulary)
        db_session.flush()
        db_session.add(
            models.SectionVocabulary(
                section_id=section.id, vocabulary_id=vocabulary.id, sort_order=sort_order
            )
        )
        db_session.commit()
        return vocabulary

    return _add

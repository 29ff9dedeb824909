"""Database models."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vocabpath.database import Base


class Organization(Base):
    """Tenant that owns learners and private content."""

    __tablename__ = "organizations"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Organization."""
        return f"<Organization(id={self.id}, slug='{self.slug}')>"


class User(Base):
    """Learner account with billing and access state."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    role: Mapped[str] = mapped_column(String(20), default="learner", nullable=False)
    organization_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    monthly_rate: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    next_payment_due: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_payment_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    access_override: Mapped[str | None] = mapped_column(String(16), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (
        CheckConstraint(
            "access_override IS NULL OR access_override IN ('enabled', 'disabled')",
            name="ck_users_access_override",
        ),
        CheckConstraint("monthly_rate >= 0", name="ck_users_monthly_rate"),
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, username='{self.username}')>"


class Area(Base):
    """Top-level topic grouping, shared (global) or private to one tenant."""

    __tablename__ = "areas"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    scope_type: Mapped[str] = mapped_column(String(16), default="global", nullable=False)
    organization_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    sections: Mapped[list["Section"]] = relationship(back_populates="area")

    __table_args__ = (
        CheckConstraint(
            "(scope_type = 'global' AND organization_id IS NULL)"
            " OR (scope_type = 'org' AND organization_id IS NOT NULL)",
            name="ck_areas_scope_organization",
        ),
    )

    def __repr__(self) -> str:
        """String representation of Area."""
        return f"<Area(id={self.id}, name='{self.name}', scope='{self.scope_type}')>"


class Section(Base):
    """Curriculum unit within an area."""

    __tablename__ = "sections"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    area_id: Mapped[int] = mapped_column(
        ForeignKey("areas.id", ondelete="CASCADE"), nullable=False, index=True
    )
    organization_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    area: Mapped["Area"] = relationship(back_populates="sections")
    modules: Mapped[list["Module"]] = relationship(
        back_populates="section", cascade="all, delete-orphan"
    )
    section_vocabulary: Mapped[list["SectionVocabulary"]] = relationship(
        back_populates="section",
        cascade="all, delete-orphan",
        order_by="SectionVocabulary.sort_order",
    )

    def __repr__(self) -> str:
        """String representation of Section."""
        return f"<Section(id={self.id}, title='{self.title}')>"


class OrganizationAreaConfig(Base):
    """Tenant override of an area's visibility and order."""

    __tablename__ = "organization_area_configs"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    area_id: Mapped[int] = mapped_column(
        ForeignKey("areas.id", ondelete="CASCADE"), nullable=False, index=True
    )
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    sort_order: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        UniqueConstraint("organization_id", "area_id", name="uq_org_area_config"),
    )


class OrganizationSectionConfig(Base):
    """Tenant override of a section's visibility and order."""

    __tablename__ = "organization_section_configs"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    section_id: Mapped[int] = mapped_column(
        ForeignKey("sections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    sort_order: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        UniqueConstraint("organization_id", "section_id", name="uq_org_section_config"),
    )


class Module(Base):
    """Introduction, practice or test stage of a section."""

    __tablename__ = "modules"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    section_id: Mapped[int] = mapped_column(
        ForeignKey("sections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    content: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    section: Mapped["Section"] = relationship(back_populates="modules")
    questions: Mapped[list["Question"]] = relationship(
        back_populates="module",
        cascade="all, delete-orphan",
        order_by="Question.sort_order",
    )

    __table_args__ = (
        UniqueConstraint("section_id", "type", name="uq_module_section_type"),
        CheckConstraint("type IN ('introduction', 'practice', 'test')", name="ck_modules_type"),
    )


class Question(Base):
    """Gradable question of a practice or test module."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    module_id: Mapped[int] = mapped_column(
        ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    # Literal answer for fill_blank, JSON list of pairs for matching
    correct_answer: Mapped[str | None] = mapped_column(Text, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    module: Mapped["Module"] = relationship(back_populates="questions")
    options: Mapped[list["QuestionOption"]] = relationship(
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="QuestionOption.sort_order",
    )


class QuestionOption(Base):
    """Selectable option of a choice-style question."""

    __tablename__ = "question_options"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    option_text: Mapped[str] = mapped_column(Text, nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    question: Mapped["Question"] = relationship(back_populates="options")


class Vocabulary(Base):
    """A word with its definition and translation."""

    __tablename__ = "vocabulary"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    word: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    definition: Mapped[str] = mapped_column(Text, nullable=False)
    translation: Mapped[str | None] = mapped_column(String(200), nullable=True)
    example: Mapped[str | None] = mapped_column(Text, nullable=True)


class SectionVocabulary(Base):
    """Vocabulary taught by a section, in display order."""

    __tablename__ = "section_vocabulary"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    section_id: Mapped[int] = mapped_column(
        ForeignKey("sections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    vocabulary_id: Mapped[int] = mapped_column(
        ForeignKey("vocabulary.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    section: Mapped["Section"] = relationship(back_populates="section_vocabulary")
    vocabulary: Mapped["Vocabulary"] = relationship()

    __table_args__ = (
        UniqueConstraint("section_id", "vocabulary_id", name="uq_section_vocabulary"),
    )


class LearnerSectionProgress(Base):
    """A learner's unlock and completion state for one section."""

    __tablename__ = "learner_section_progress"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    section_id: Mapped[int] = mapped_column(
        ForeignKey("sections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    unlocked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    unlocked_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    intro_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    practice_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    test_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    test_passed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "section_id", name="uq_learner_section_progress"),
    )


class LearnerAttempt(Base):
    """One graded submission of a module."""

    __tablename__ = "learner_attempts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    module_id: Mapped[int] = mapped_column(
        ForeignKey("modules.id", ondelete="CASCADE"), nullable=False, index=True
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    score: Mapped[float | None] = mapped_column(Float, nullable=True)
    passed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    answers: Mapped[list["LearnerAnswer"]] = relationship(
        back_populates="attempt", cascade="all, delete-orphan", order_by="LearnerAnswer.id"
    )


class LearnerAnswer(Base):
    """One answered question of an attempt, graded at submission time."""

    __tablename__ = "learner_answers"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    attempt_id: Mapped[int] = mapped_column(
        ForeignKey("learner_attempts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    selected_option_id: Mapped[int | None] = mapped_column(
        ForeignKey("question_options.id", ondelete="SET NULL"), nullable=True
    )
    answer_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_correct: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    attempt: Mapped["LearnerAttempt"] = relationship(back_populates="answers")


class Payment(Base):
    """Append-only ledger entry of a learner payment."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    paid_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    period_start: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    period_end: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

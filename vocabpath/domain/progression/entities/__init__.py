"""Progression entities."""

from .attempt import LearnerAnswer, LearnerAttempt
from .section_progress import LearnerSectionProgress, SectionState

__all__ = ["LearnerAnswer", "LearnerAttempt", "LearnerSectionProgress", "SectionState"]

"""Progression bounded context: section unlocks, attempts and grading."""

"""Curriculum domain services."""

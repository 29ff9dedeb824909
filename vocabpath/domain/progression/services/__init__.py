"""Progression domain services."""

"""Curriculum bounded context: areas, sections, modules and tenant overrides."""

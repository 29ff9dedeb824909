"""Tenant-aware vocabulary learning engine."""

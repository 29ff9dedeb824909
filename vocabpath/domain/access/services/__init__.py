"""Access domain services."""

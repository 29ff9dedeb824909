"""
Application layer.

Orchestrates domain objects for each operation offered to learners and
administrators. Use cases depend on repository protocols, never on the
ORM, and run writes inside a UnitOfWork.
"""

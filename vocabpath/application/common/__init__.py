"""
Application common module.

- UnitOfWork: transaction boundary port with domain event collection
- LearnerContext: explicit learner/tenant context of a request
"""

from .learner_context import LearnerContext
from .unit_of_work import UnitOfWork

__all__ = ["LearnerContext", "UnitOfWork"]

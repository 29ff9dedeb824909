"""FastAPI glue for building use cases out of the container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from vocabpath.core import container
from vocabpath.database import DatabaseSession

UseCaseT = TypeVar("UseCaseT")


def inject_use_case(provider: Provider[UseCaseT]) -> Callable[[DatabaseSession], UseCaseT]:
    """Route dependency that builds a use case bound to the request's session.

    Repositories and the unit of work created for one request all share
    that session, so a use case's writes commit or roll back together.
    """

    def build(db: DatabaseSession) -> UseCaseT:
        with container.db.override(db):
            return provider()

    return build

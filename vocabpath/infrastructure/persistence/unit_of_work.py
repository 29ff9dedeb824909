"""SQLAlchemy implementation of the UnitOfWork port."""

from types import TracebackType

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vocabpath.application.common.unit_of_work import UnitOfWork
from vocabpath.exceptions import StorageError

logger = structlog.get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work over the request-scoped session.

    Repositories only flush. The session is committed here, and any
    failure inside the block rolls back everything written since the
    last commit. Store failures surface as StorageError.
    """

    def __init__(self, db: Session) -> None:
        super().__init__()
        self.db = db

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.rollback()
            logger.error("unit_of_work_commit_failed", error=str(e))
            raise StorageError from e

    def rollback(self) -> None:
        self.db.rollback()
        self.discard_events()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        super().__exit__(exc_type, exc_val, exc_tb)
        if isinstance(exc_val, SQLAlchemyError):
            logger.error("unit_of_work_failed", error=str(exc_val))
            raise StorageError from exc_val

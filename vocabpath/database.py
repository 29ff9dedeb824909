"""Engine, session factory and the per-request session dependency."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vocabpath.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base of every ORM model in vocabpath.models."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _on_sqlite_connect(dbapi_connection: Any, _record: Any) -> None:
    # SQLAlchemy emits BEGIN itself (see _on_sqlite_begin) so savepoints nest correctly
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _on_sqlite_begin(connection: Any) -> None:
    connection.exec_driver_sql("BEGIN")


def build_engine(database_url: str) -> Engine:
    """SQLite shares one connection across threads; other backends get a checked pool."""
    if not database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _on_sqlite_connect)
    event.listen(engine, "begin", _on_sqlite_begin)
    return engine


def initialize_database(settings: Settings) -> None:
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        return
    _engine = build_engine(settings.DATABASE_URL)
    _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)


def dispose_engine() -> None:
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Session factory is not available")
    return _session_factory


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """One session per request, closed when the response is done."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]

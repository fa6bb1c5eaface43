"""Engine and session handling for the analyses database.

A single engine is kept per process. The CLI opens it right before saving an
analysis and disposes of it afterwards; tests point it at a scratch SQLite
file.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import Session, sessionmaker

from jobmatch.logging import get_logger

from .exceptions import DatabaseConnectionError

_engine: Engine | None = None
_session_factory: sessionmaker | None = None

logger = get_logger(__name__, component="database")


def init_database(database_url: str) -> None:
    """Open the analyses database and create its tables if needed.

    Calling it again replaces the current engine.

    Args:
        database_url: SQLAlchemy URL, e.g. "sqlite:///./data/jobmatch.db"

    Raises:
        DatabaseConnectionError: If the URL is invalid or the database cannot
            be reached
    """
    global _engine, _session_factory

    if not database_url or not isinstance(database_url, str):
        raise DatabaseConnectionError("Database URL must be a non-empty string")

    safe_url = _redact_url(database_url)
    logger.info(
        "Opening analyses database",
        extra={"event": "database.initializing", "database_url": safe_url},
    )

    try:
        url = make_url(database_url)
        if _is_sqlite_file(url):
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(url, pool_pre_ping=True, **_engine_options(url))
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

        from .schema import create_schema

        create_schema(engine)
    except Exception as e:
        message = f"Failed to initialize database: {e}"
        logger.error(message, extra={"event": "database.init_failed", "database_url": safe_url})
        raise DatabaseConnectionError(message) from e

    close_database()
    _engine = engine
    _session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    logger.info(
        "Analyses database ready",
        extra={"event": "database.initialized", "database_url": safe_url},
    )


def _is_sqlite_file(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:")


def _engine_options(url: URL) -> Dict[str, Any]:
    if url.get_backend_name() == "sqlite":
        return {"connect_args": {"timeout": 30}}
    return {}


def _redact_url(database_url: str) -> str:
    """Return database_url with any password masked."""
    try:
        return make_url(database_url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<unparseable database url>"


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Yield a session that commits on success and rolls back on error.

    Raises:
        DatabaseConnectionError: If init_database() has not been called

    Example:
        >>> with get_session() as session:
        ...     AnalysisRepository(session).save(record)
    """
    if _session_factory is None:
        raise DatabaseConnectionError(
            "Database not initialized. Call init_database() before using get_session()"
        )

    session = _session_factory()
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.warning(
            f"Rolled back analyses session: {e}",
            extra={"event": "database.session.rolled_back", "error_type": type(e).__name__},
        )
        raise
    finally:
        session.close()


def get_engine() -> Engine:
    """Return the current engine.

    Raises:
        DatabaseConnectionError: If init_database() has not been called
    """
    if _engine is None:
        raise DatabaseConnectionError(
            "Database not initialized. Call init_database() before using get_engine()"
        )
    return _engine


def close_database() -> None:
    """Dispose of the engine; safe to call when nothing is open."""
    global _engine, _session_factory

    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None

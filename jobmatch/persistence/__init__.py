"""Persistence layer for stored analyses using SQLAlchemy.

Public API:
    # Database initialization and session management
    - init_database(database_url: str) -> None
    - get_session() -> ContextManager[Session]
    - close_database() -> None
    - get_engine() -> Engine

    # Repository classes
    - AnalysisRepository: save and query analysis records

    # Exceptions
    - PersistenceError: Base exception for all persistence errors
    - DatabaseConnectionError: Database connection/initialization failures
    - DataIntegrityError: Constraint violations

Example usage:
    >>> from jobmatch.persistence import init_database, get_session, AnalysisRepository
    >>> init_database("sqlite:///./data/jobmatch.db")
    >>> with get_session() as session:
    ...     repo = AnalysisRepository(session)
    ...     latest = repo.get_latest("acme", "staff-engineer", "tarun")
"""

from .database import close_database, get_engine, get_session, init_database
from .exceptions import DatabaseConnectionError, DataIntegrityError, PersistenceError
from .repositories import AnalysisRepository

__all__ = [
    # Database functions
    "init_database",
    "get_session",
    "close_database",
    "get_engine",
    # Repositories
    "AnalysisRepository",
    # Exceptions
    "PersistenceError",
    "DatabaseConnectionError",
    "DataIntegrityError",
]

"""Data access layer (repositories) for stored analyses.

Repositories encapsulate database operations and return domain models rather
than ORM models.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.domain.models import AnalysisRecord

from .exceptions import DataIntegrityError, PersistenceError
from .schema import AnalysisRecordModel

logger = logging.getLogger(__name__)


class AnalysisRepository:
    """Repository for analysis record database operations."""

    def __init__(self, session: Session):
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def save(self, record: AnalysisRecord) -> AnalysisRecord:
        """Insert a new analysis record.

        Args:
            record: AnalysisRecord to persist (its id is ignored)

        Returns:
            The stored AnalysisRecord with its database id

        Raises:
            DataIntegrityError: If a constraint is violated
            PersistenceError: If another database error occurs
        """
        try:
            model = AnalysisRecordModel.from_domain(record)
            self.session.add(model)
            self.session.flush()

            logger.info(
                f"Saved {record.kind} analysis for {record.user_id}",
                extra={
                    "event": "persistence.analysis.saved",
                    "analysis_id": model.id,
                    "company": record.company,
                    "job_id": record.job_id,
                    "user_id": record.user_id,
                    "kind": record.kind,
                },
            )
            return model.to_domain()

        except IntegrityError as e:
            logger.error(f"Integrity error saving analysis: {e}", exc_info=True)
            raise DataIntegrityError(
                f"Failed to save analysis due to constraint violation: {e}"
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Error saving analysis: {e}", exc_info=True)
            raise PersistenceError(f"Failed to save analysis: {e}") from e

    def get_latest(
        self, company: str, job_id: str, user_id: str, kind: Optional[str] = None
    ) -> Optional[AnalysisRecord]:
        """Return the most recent analysis for (company, job_id, user_id).

        Args:
            company: Company identifier
            job_id: Job identifier
            user_id: User identifier
            kind: Optional filter, "match" or "suggestions"

        Returns:
            AnalysisRecord if found, None otherwise

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            stmt = select(AnalysisRecordModel).where(
                AnalysisRecordModel.company == company,
                AnalysisRecordModel.job_id == job_id,
                AnalysisRecordModel.user_id == user_id,
            )
            if kind is not None:
                stmt = stmt.where(AnalysisRecordModel.kind == kind.lower())
            stmt = stmt.order_by(
                AnalysisRecordModel.analysis_date.desc(), AnalysisRecordModel.id.desc()
            ).limit(1)

            model = self.session.execute(stmt).scalar_one_or_none()
            return model.to_domain() if model is not None else None

        except SQLAlchemyError as e:
            logger.error(
                f"Error retrieving analysis for {user_id} {company}/{job_id}: {e}", exc_info=True
            )
            raise PersistenceError(f"Failed to retrieve analysis: {e}") from e

    def list_for_user(self, user_id: str) -> List[AnalysisRecord]:
        """Return all analyses for a user, newest first.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            stmt = (
                select(AnalysisRecordModel)
                .where(AnalysisRecordModel.user_id == user_id)
                .order_by(AnalysisRecordModel.analysis_date.desc(), AnalysisRecordModel.id.desc())
            )
            return [model.to_domain() for model in self.session.execute(stmt).scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Error listing analyses for {user_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to list analyses: {e}") from e

    def count(self) -> int:
        """Return the total number of stored analyses."""
        try:
            stmt = select(func.count()).select_from(AnalysisRecordModel)
            return self.session.execute(stmt).scalar_one()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to count analyses: {e}") from e

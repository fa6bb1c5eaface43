"""Database schema definition and ORM models.

This module defines the SQLAlchemy ORM model for stored analyses and the
conversions between it and the AnalysisRecord domain model.
"""

import json
import logging

from sqlalchemy import Column, Index, Integer, String, Text, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from jobmatch.domain.models import AnalysisRecord
from jobmatch.utils.timestamps import format_timestamp, parse_iso_datetime

logger = logging.getLogger(__name__)

Base = declarative_base()


class AnalysisRecordModel(Base):
    """ORM model for the analyses table.

    One row per analysis run; a user re-running the same job adds a new row.
    """

    __tablename__ = "analyses"

    id = Column(Integer, primary_key=True, autoincrement=True)

    company = Column(String(255), nullable=False)
    job_id = Column(String(255), nullable=False)
    user_id = Column(String(255), nullable=False)
    kind = Column(String(20), nullable=False)

    # Fixed-width ISO 8601 UTC string, so text ordering is chronological
    analysis_date = Column(String(50), nullable=False)

    # score for "match", overallMatch for "suggestions"
    score = Column(Integer, nullable=True)
    payload = Column(Text, nullable=False)

    __table_args__ = (
        Index("idx_analyses_lookup", "user_id", "company", "job_id"),
        Index("idx_analyses_date", "analysis_date"),
    )

    def to_domain(self) -> AnalysisRecord:
        """Convert ORM model to domain model."""
        return AnalysisRecord(
            id=self.id,
            company=self.company,
            job_id=self.job_id,
            user_id=self.user_id,
            kind=self.kind,
            analysis_date=parse_iso_datetime(self.analysis_date),
            payload=json.loads(self.payload),
        )

    @classmethod
    def from_domain(cls, record: AnalysisRecord) -> "AnalysisRecordModel":
        """Create ORM model from domain model."""
        payload = record.payload
        score = payload.get("score", payload.get("overallMatch"))
        return cls(
            company=record.company,
            job_id=record.job_id,
            user_id=record.user_id,
            kind=record.kind,
            analysis_date=format_timestamp(record.analysis_date, include_microseconds=True),
            score=score if isinstance(score, int) else None,
            payload=json.dumps(payload, ensure_ascii=False),
        )


def create_schema(engine: Engine) -> None:
    """Create all tables and indexes if they don't exist (idempotent)."""
    logger.debug("Creating database schema if not exists")

    try:
        Base.metadata.create_all(engine, checkfirst=True)
        tables = inspect(engine).get_table_names()
        logger.debug(f"Database schema ready. Tables: {', '.join(tables)}")
    except Exception as e:
        logger.error(f"Failed to create database schema: {e}", exc_info=True)
        raise

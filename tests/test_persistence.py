"""Unit tests for persistence layer."""

import json
import logging
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import text

from jobmatch.domain.models import AnalysisRecord
from jobmatch.persistence import (
    AnalysisRepository,
    DatabaseConnectionError,
    PersistenceError,
    close_database,
    get_engine,
    get_session,
    init_database,
)
from jobmatch.persistence.database import _redact_url
from jobmatch.persistence.schema import AnalysisRecordModel


@pytest.fixture
def db(tmp_path):
    """Initialize a file-backed SQLite database for one test."""
    init_database(f"sqlite:///{tmp_path / 'test.db'}")
    yield
    close_database()


def make_record(user_id="tarun", kind="match", minutes=0, score=42, **overrides):
    payload = (
        {"score": score, "matchedKeywords": ["java"], "missingKeywords": ["python"]}
        if kind == "match"
        else {"overallMatch": score, "strengthAreas": [], "keywordRecommendations": []}
    )
    fields = dict(
        company="acme",
        job_id="director-engineering",
        user_id=user_id,
        kind=kind,
        analysis_date=datetime(2025, 11, 4, 12, 0, tzinfo=timezone.utc) + timedelta(minutes=minutes),
        payload=payload,
    )
    fields.update(overrides)
    return AnalysisRecord(**fields)


class TestDatabaseInitialization:
    """Tests for database initialization."""

    def test_init_database_success(self, tmp_path):
        """Test successful database initialization."""
        db_file = tmp_path / "test.db"

        init_database(f"sqlite:///{db_file}")

        assert db_file.exists()
        with get_session() as session:
            assert session is not None

        close_database()

    def test_init_database_creates_parent_directories(self, tmp_path):
        """Test initialization creates parent directories if missing."""
        db_file = tmp_path / "subdir" / "nested" / "test.db"

        init_database(f"sqlite:///{db_file}")

        assert db_file.parent.exists()
        assert db_file.exists()

        close_database()

    def test_init_database_in_memory(self):
        """Test initialization with in-memory database."""
        init_database("sqlite:///:memory:")

        with get_session() as session:
            assert session is not None

        close_database()

    def test_init_database_invalid_url_raises_error(self):
        """Test initialization with invalid URL raises DatabaseConnectionError."""
        with pytest.raises(DatabaseConnectionError):
            init_database("")

        with pytest.raises(DatabaseConnectionError):
            init_database(None)

    def test_unknown_dialect_raises_error(self):
        with pytest.raises(DatabaseConnectionError, match="Failed to initialize database"):
            init_database("nosuchdialect://localhost/db")

    def test_schema_creation_is_idempotent(self, tmp_path):
        """Test schema creation can run multiple times."""
        db_url = f"sqlite:///{tmp_path / 'test.db'}"

        init_database(db_url)
        init_database(db_url)

        with get_session() as session:
            tables = session.execute(
                text("SELECT name FROM sqlite_master WHERE type='table'")
            ).fetchall()
            assert "analyses" in [t[0] for t in tables]

        close_database()

    def test_session_before_init_raises(self):
        close_database()

        with pytest.raises(DatabaseConnectionError, match="not initialized"):
            with get_session():
                pass

        with pytest.raises(DatabaseConnectionError):
            get_engine()

    def test_redact_url(self):
        assert _redact_url("postgresql://user:secret@db:5432/jobs") == "postgresql://user:***@db:5432/jobs"
        assert _redact_url("sqlite:///./data/jobmatch.db") == "sqlite:///./data/jobmatch.db"


class TestAnalysisRepository:
    """Tests for AnalysisRepository."""

    def test_save_assigns_id(self, db):
        with get_session() as session:
            saved = AnalysisRepository(session).save(make_record())

        assert saved.id is not None
        assert saved.payload["score"] == 42
        assert saved.analysis_date == datetime(2025, 11, 4, 12, 0, tzinfo=timezone.utc)

    def test_score_column_populated(self, db):
        with get_session() as session:
            repo = AnalysisRepository(session)
            repo.save(make_record(kind="match", score=42))
            repo.save(make_record(kind="suggestions", score=67, minutes=1))

        with get_session() as session:
            rows = session.query(AnalysisRecordModel).order_by(AnalysisRecordModel.id).all()
            assert [(r.kind, r.score) for r in rows] == [("match", 42), ("suggestions", 67)]
            assert json.loads(rows[0].payload)["matchedKeywords"] == ["java"]

    def test_get_latest(self, db):
        with get_session() as session:
            repo = AnalysisRepository(session)
            repo.save(make_record(score=10, minutes=0))
            repo.save(make_record(score=30, minutes=10))
            repo.save(make_record(score=20, minutes=5))

        with get_session() as session:
            latest = AnalysisRepository(session).get_latest("acme", "director-engineering", "tarun")

        assert latest.payload["score"] == 30

    def test_get_latest_filters_kind(self, db):
        with get_session() as session:
            repo = AnalysisRepository(session)
            repo.save(make_record(kind="match", minutes=0))
            repo.save(make_record(kind="suggestions", minutes=5))

        with get_session() as session:
            repo = AnalysisRepository(session)
            assert repo.get_latest("acme", "director-engineering", "tarun", kind="MATCH").kind == "match"
            assert repo.get_latest("acme", "director-engineering", "tarun").kind == "suggestions"

    def test_get_latest_not_found(self, db):
        with get_session() as session:
            assert AnalysisRepository(session).get_latest("acme", "cto", "tarun") is None

    def test_list_for_user_newest_first(self, db):
        with get_session() as session:
            repo = AnalysisRepository(session)
            repo.save(make_record(minutes=0, job_id="a"))
            repo.save(make_record(minutes=20, job_id="b"))
            repo.save(make_record(minutes=10, job_id="c"))
            repo.save(make_record(user_id="alex", job_id="d"))

        with get_session() as session:
            records = AnalysisRepository(session).list_for_user("tarun")

        assert [r.job_id for r in records] == ["b", "c", "a"]

    def test_count(self, db):
        with get_session() as session:
            repo = AnalysisRepository(session)
            assert repo.count() == 0
            repo.save(make_record())
            assert repo.count() == 1

    def test_rollback_on_error(self, db):
        with pytest.raises(RuntimeError):
            with get_session() as session:
                AnalysisRepository(session).save(make_record())
                raise RuntimeError("boom")

        with get_session() as session:
            assert AnalysisRepository(session).count() == 0

    def test_missing_table_raises_persistence_error(self, tmp_path):
        init_database(f"sqlite:///{tmp_path / 'test.db'}")
        with get_session() as session:
            session.execute(text("DROP TABLE analyses"))

        with pytest.raises(PersistenceError):
            with get_session() as session:
                AnalysisRepository(session).save(make_record())

        close_database()

    def test_logs_saved_event(self, db, caplog):
        with caplog.at_level(logging.INFO, logger="jobmatch.persistence.repositories"):
            with get_session() as session:
                AnalysisRepository(session).save(make_record())

        records = [r for r in caplog.records if getattr(r, "event", None) == "persistence.analysis.saved"]
        assert len(records) == 1
        assert records[0].kind == "match"

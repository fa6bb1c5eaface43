"""Shared fixtures for the test suite."""

import json
import logging
from pathlib import Path

import pytest

from jobmatch.logging.context import clear_log_context

ENV_VARS = ("LOG_LEVEL", "DATABASE_URL", "JOBMATCH_DATA_DIR", "ENVIRONMENT")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the app reads."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clean_log_context():
    """Clear logging context before and after a test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Put back root handlers and level replaced by configure_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def director_job():
    """Director of Engineering posting, as loaded from JSON."""
    return {
        "jobId": "director-engineering",
        "metadata": {
            "title": "Director of Engineering",
            "level": "Director",
            "department": "Technology",
        },
        "technicalStack": {
            "languages": ["Java", "Python"],
            "databases": ["PostgreSQL", "MongoDB"],
            "cloud": ["AWS", "Kubernetes"],
        },
        "requirements": {
            "essential": [
                "10+ years building distributed systems",
                "Experience leading agile teams",
            ],
            "preferred": ["Machine learning exposure"],
        },
        "responsibilities": [
            "Own microservices architecture and API standards",
            "Drive DevOps and CI/CD adoption",
        ],
    }


@pytest.fixture
def engineer_resume():
    """Resume covering part of the director posting."""
    return {
        "basics": {"name": "Tarun Rao", "label": "Engineering Manager"},
        "skills": [
            {"name": "Programming Languages", "keywords": ["Java", "JavaScript"]},
            {"name": "Database Systems", "keywords": ["PostgreSQL", "Redis"]},
        ],
        "work": [
            {
                "name": "Initech",
                "position": "Engineering Manager",
                "summary": "Ran agile delivery for a platform group.",
                "highlights": [
                    "Moved services to Kubernetes and Docker",
                    "Built distributed systems for payments",
                ],
            }
        ],
    }


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def catalog_dir(tmp_path, director_job, engineer_resume):
    """Catalog directory with one company, two jobs and one user."""
    root = tmp_path / "catalog"
    jobs = root / "companies" / "acme" / "job-descriptions"
    write_json(jobs / "director-engineering.json", director_job)
    write_json(
        jobs / "backend-engineer.json",
        {
            "metadata": {"title": "Backend Engineer", "level": "Senior"},
            "technicalStack": {"languages": ["Python", "Go"]},
            "requirements": {"essential": ["Python services on AWS"]},
            "responsibilities": ["Build REST API endpoints"],
        },
    )
    (root / "companies" / "globex" / "job-descriptions").mkdir(parents=True)
    write_json(root / "users" / "tarun" / "resume.json", engineer_resume)
    return root

"""JSON catalog of job descriptions and resumes.

Layout under the data directory::

    companies/<company>/job-descriptions/<job_id>.json
    users/<user_id>/resume.json

The store does all file I/O and hands the matching engine validated models.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jobmatch.domain.models import JobDescription, JobSummary, Resume
from jobmatch.logging import get_logger
from jobmatch.matching.extractor import coerce_job, coerce_resume

from .exceptions import MalformedRecordError, RecordNotFoundError

logger = get_logger(__name__, component="catalog")

COMPANIES_DIR = "companies"
JOB_DESCRIPTIONS_DIR = "job-descriptions"
USERS_DIR = "users"
RESUME_FILENAME = "resume.json"


class CatalogStore:
    """Loads job descriptions and resumes from a directory tree.

    Responsibilities:
    - Resolve (company, job_id) and user_id to file paths
    - Parse JSON and wrap I/O and decode failures in catalog exceptions
    - Validate records into domain models
    - List companies and a company's job descriptions
    """

    def __init__(self, data_dir: Union[str, Path], logger_instance: Optional[logging.Logger] = None):
        """Initialize CatalogStore.

        Args:
            data_dir: Directory holding companies/ and users/
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.data_dir = Path(data_dir)
        self.logger = logger_instance or logger

    @property
    def companies_path(self) -> Path:
        return self.data_dir / COMPANIES_DIR

    @property
    def users_path(self) -> Path:
        return self.data_dir / USERS_DIR

    def job_description_path(self, company: str, job_id: str) -> Path:
        return self.companies_path / company / JOB_DESCRIPTIONS_DIR / f"{job_id}.json"

    def resume_path(self, user_id: str) -> Path:
        return self.users_path / user_id / RESUME_FILENAME

    def load_raw_job_description(self, company: str, job_id: str) -> Dict[str, Any]:
        """Load a job description as a plain dict, without shape validation.

        Raises:
            RecordNotFoundError: If the file does not exist
            MalformedRecordError: If the file is not a JSON object
        """
        return self._read_json(self.job_description_path(company, job_id), "Job description")

    def load_job_description(self, company: str, job_id: str) -> JobDescription:
        """Load and validate a job description.

        Raises:
            RecordNotFoundError: If the file does not exist
            MalformedRecordError: If the file is not a JSON object
            JobValidationError: If required fields are missing
        """
        raw = self.load_raw_job_description(company, job_id)
        raw.setdefault("jobId", job_id)
        job = coerce_job(raw)

        self.logger.debug(
            f"Loaded job description {company}/{job_id}",
            extra={"event": "catalog.job.loaded", "company": company, "job_id": job_id},
        )
        return job

    def load_resume(self, user_id: str) -> Resume:
        """Load and validate a user's resume.

        Raises:
            RecordNotFoundError: If the file does not exist
            MalformedRecordError: If the file is not a JSON object
            ResumeValidationError: If a resume section has the wrong shape
        """
        raw = self._read_json(self.resume_path(user_id), "User resume")
        resume = coerce_resume(raw)

        self.logger.debug(
            f"Loaded resume for {user_id}",
            extra={"event": "catalog.resume.loaded", "user_id": user_id},
        )
        return resume

    def list_companies(self) -> List[str]:
        """Return company directory names, sorted."""
        if not self.companies_path.is_dir():
            return []
        return sorted(p.name for p in self.companies_path.iterdir() if p.is_dir())

    def list_company_jobs(self, company: str) -> List[JobSummary]:
        """Summarize every job description file for a company.

        Files that cannot be parsed are skipped with a warning so one broken
        file does not hide the rest of the listing.

        Returns:
            JobSummary list sorted by filename (empty if the company has none)
        """
        jobs_path = self.companies_path / company / JOB_DESCRIPTIONS_DIR
        if not jobs_path.is_dir():
            return []

        summaries = []
        for path in sorted(jobs_path.glob("*.json")):
            try:
                data = self._read_json(path, "Job description")
            except MalformedRecordError as e:
                self.logger.warning(
                    f"Skipping unreadable job description {path.name}: {e}",
                    extra={"event": "catalog.job.skipped", "company": company, "file": path.name},
                )
                continue

            metadata = data.get("metadata") if isinstance(data.get("metadata"), dict) else {}
            summaries.append(
                JobSummary(
                    filename=path.name,
                    job_id=data.get("jobId") or path.stem,
                    title=metadata.get("title") or "",
                    level=metadata.get("level"),
                    department=metadata.get("department"),
                )
            )
        return summaries

    def count_jobs_by_company(self) -> Dict[str, int]:
        """Return company -> number of job description files."""
        return {company: len(self.list_company_jobs(company)) for company in self.list_companies()}

    @staticmethod
    def _read_json(path: Path, label: str) -> Dict[str, Any]:
        if not path.is_file():
            raise RecordNotFoundError(f"{label} not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedRecordError(f"{label} is not valid JSON: {path}: {e}") from e
        except OSError as e:
            raise MalformedRecordError(f"Failed to read {label.lower()} {path}: {e}") from e

        if not isinstance(data, dict):
            raise MalformedRecordError(f"{label} must be a JSON object: {path}")
        return data

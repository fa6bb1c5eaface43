"""Unit tests for domain models."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from jobmatch.domain.models import (
    AnalysisRecord,
    JobDescription,
    JobSummary,
    JobValidationReport,
    Resume,
)


class TestJobDescription:
    """Tests for JobDescription model."""

    def test_parses_camel_case_json(self, director_job):
        job = JobDescription.model_validate(director_job)

        assert job.job_id == "director-engineering"
        assert job.title == "Director of Engineering"
        assert job.metadata.level == "Director"
        assert job.technical_stack["languages"] == ["Java", "Python"]
        assert job.requirements.essential[0].startswith("10+ years")
        assert job.requirements.preferred == ["Machine learning exposure"]
        assert job.keywords is None

    def test_populate_by_field_name(self):
        job = JobDescription(
            job_id="j1",
            technical_stack={"cloud": ["AWS"]},
            requirements={"essential": []},
            responsibilities=[],
        )
        assert job.technical_stack == {"cloud": ["AWS"]}

    def test_metadata_optional(self, director_job):
        del director_job["metadata"]
        job = JobDescription.model_validate(director_job)
        assert job.title == ""

    def test_preferred_null_becomes_empty(self, director_job):
        director_job["requirements"]["preferred"] = None
        job = JobDescription.model_validate(director_job)
        assert job.requirements.preferred == []

    def test_unknown_fields_kept(self, director_job):
        director_job["benefits"] = ["remote"]
        job = JobDescription.model_validate(director_job)
        assert job.model_extra["benefits"] == ["remote"]

    def test_missing_technical_stack(self, director_job):
        del director_job["technicalStack"]
        with pytest.raises(ValidationError):
            JobDescription.model_validate(director_job)

    def test_immutable(self, director_job):
        job = JobDescription.model_validate(director_job)
        with pytest.raises(ValidationError):
            job.responsibilities = []


class TestResume:
    """Tests for Resume model."""

    def test_parses_json_resume(self, engineer_resume):
        resume = Resume.model_validate(engineer_resume)

        assert resume.basics.name == "Tarun Rao"
        assert resume.skills[0].name == "Programming Languages"
        assert resume.skills[1].keywords == ["PostgreSQL", "Redis"]
        assert resume.work[0].highlights[0].startswith("Moved services")

    def test_all_sections_optional(self):
        resume = Resume.model_validate({})

        assert resume.basics is None
        assert resume.skills == []
        assert resume.work == []

    def test_null_sections(self):
        resume = Resume.model_validate({"skills": None, "work": None})

        assert resume.skills == []
        assert resume.work == []

    def test_skill_without_name(self):
        resume = Resume.model_validate({"skills": [{"keywords": ["go"]}]})

        assert resume.skills[0].name == ""
        assert resume.skills[0].keywords == ["go"]


class TestJobSummary:
    """Tests for JobSummary model."""

    def test_serializes_job_id_alias(self):
        summary = JobSummary(filename="a.json", job_id="a", title="A")

        assert summary.model_dump(by_alias=True)["jobId"] == "a"


class TestJobValidationReport:
    """Tests for JobValidationReport model."""

    def test_valid_without_missing_fields(self):
        report = JobValidationReport(job_id="a", warnings=["Too many responsibilities (11, max 10)"])
        assert report.is_valid is True

    def test_invalid_with_missing_fields(self):
        report = JobValidationReport(job_id="a", missing_fields=["responsibilities"])
        assert report.is_valid is False


class TestAnalysisRecord:
    """Tests for AnalysisRecord model."""

    def test_valid_record(self):
        record = AnalysisRecord(
            company="acme",
            job_id="director-engineering",
            user_id="tarun",
            kind="MATCH",
            analysis_date=datetime(2025, 11, 4, 12, 0, tzinfo=timezone.utc),
            payload={"score": 42},
        )

        assert record.kind == "match"
        assert record.id is None

    def test_invalid_kind(self):
        with pytest.raises(ValidationError, match="kind must be one of"):
            AnalysisRecord(
                company="acme",
                job_id="j",
                user_id="u",
                kind="summary",
                analysis_date=datetime.now(timezone.utc),
            )

    def test_naive_datetime_treated_as_utc(self):
        record = AnalysisRecord(
            company="acme",
            job_id="j",
            user_id="u",
            kind="suggestions",
            analysis_date=datetime(2025, 11, 4, 12, 0),
        )

        assert record.analysis_date.tzinfo == timezone.utc
        assert record.analysis_date.hour == 12

    def test_aware_datetime_converted_to_utc(self):
        eastern = timezone(timedelta(hours=-5))
        record = AnalysisRecord(
            company="acme",
            job_id="j",
            user_id="u",
            kind="match",
            analysis_date=datetime(2025, 11, 4, 7, 0, tzinfo=eastern),
        )

        assert record.analysis_date.hour == 12

    def test_empty_user_id_rejected(self):
        with pytest.raises(ValidationError):
            AnalysisRecord(
                company="acme",
                job_id="j",
                user_id="",
                kind="match",
                analysis_date=datetime.now(timezone.utc),
            )

"""Unit tests for keyword extraction from job descriptions and resumes."""

import pytest

from jobmatch.domain.models import JobDescription, Resume
from jobmatch.matching import (
    JobValidationError,
    KeywordExtractor,
    KeywordVocabulary,
    ResumeValidationError,
    extract_keywords,
    extract_resume_keywords,
)
from jobmatch.matching.extractor import coerce_job, coerce_resume


@pytest.fixture
def extractor():
    return KeywordExtractor()


class TestExtractJobKeywords:
    """Tests for the job keyword set."""

    def test_director_job_keywords_in_order(self, extractor, director_job):
        assert extractor.extract_keywords(director_job) == [
            "java",
            "python",
            "postgresql",
            "mongodb",
            "aws",
            "kubernetes",
            "distributed systems",
            "agile",
            "microservices",
            "api",
            "devops",
            "ci/cd",
        ]

    def test_stack_values_lowercased_verbatim(self, extractor):
        """Stack entries are taken whole, even when not in the vocabulary."""
        job = {
            "technicalStack": {"frameworks": ["Spring Boot", "React"]},
            "requirements": {"essential": []},
            "responsibilities": [],
        }
        assert extractor.extract_keywords(job) == ["spring boot", "react"]

    def test_duplicates_removed_across_sources(self, extractor):
        job = {
            "technicalStack": {"languages": ["Python"], "cloud": ["AWS", "aws"]},
            "requirements": {"essential": ["Python on AWS"]},
            "responsibilities": ["More python"],
        }
        assert extractor.extract_keywords(job) == ["python", "aws"]

    def test_preferred_requirements_not_scanned(self, extractor):
        job = {
            "technicalStack": {},
            "requirements": {"essential": ["Docker"], "preferred": ["Blockchain"]},
            "responsibilities": [],
        }
        assert extractor.extract_keywords(job) == ["docker"]

    def test_explicit_keywords_appended(self, extractor):
        job = {
            "technicalStack": {"languages": ["Go"]},
            "requirements": {"essential": []},
            "responsibilities": [],
            "keywords": {"practices": ["Code Review", "go"]},
        }
        assert extractor.extract_keywords(job) == ["go", "code review"]

    def test_blank_stack_entries_kept(self, extractor):
        job = {
            "technicalStack": {"languages": ["", "  ", "Rust"]},
            "requirements": {"essential": []},
            "responsibilities": [],
        }
        assert extractor.extract_keywords(job) == ["", "  ", "rust"]

    def test_repeated_extraction_is_identical(self, extractor, director_job):
        assert extractor.extract_keywords(director_job) == extractor.extract_keywords(director_job)

    def test_result_is_subset_of_sources(self, extractor, director_job):
        stack = {t.lower() for techs in director_job["technicalStack"].values() for t in techs}
        scanned = set()
        for text in director_job["requirements"]["essential"] + director_job["responsibilities"]:
            scanned.update(extractor.extract_from_text(text))

        keywords = extractor.extract_keywords(director_job)
        assert set(keywords) <= stack | scanned
        assert len(keywords) == len(set(keywords))
        assert all(k == k.lower() for k in keywords)

    def test_accepts_model(self, extractor, director_job):
        job = JobDescription.model_validate(director_job)
        assert extractor.extract_keywords(job) == extractor.extract_keywords(director_job)

    def test_custom_vocabulary(self, director_job):
        extractor = KeywordExtractor(KeywordVocabulary(["leading"]))
        keywords = extractor.extract_keywords(director_job)
        assert "leading" in keywords
        assert "agile" not in keywords

    def test_module_level_function(self, director_job):
        assert extract_keywords(director_job)[:2] == ["java", "python"]


class TestJobValidation:
    """Tests for job shape errors."""

    @pytest.mark.parametrize("field", ["technicalStack", "requirements", "responsibilities"])
    def test_missing_required_field(self, extractor, director_job, field):
        del director_job[field]

        with pytest.raises(JobValidationError) as exc_info:
            extractor.extract_keywords(director_job)

        assert field in exc_info.value.missing_fields
        assert exc_info.value.user_message == "invalid job description: missing requirements"

    def test_missing_essential(self, extractor, director_job):
        director_job["requirements"] = {"preferred": ["Go"]}

        with pytest.raises(JobValidationError) as exc_info:
            extractor.extract_keywords(director_job)

        assert "requirements.essential" in exc_info.value.missing_fields

    def test_wrong_type_reported_as_error(self, extractor, director_job):
        director_job["responsibilities"] = "Lead teams"

        with pytest.raises(JobValidationError) as exc_info:
            extractor.extract_keywords(director_job)

        assert exc_info.value.errors
        assert exc_info.value.errors[0].startswith("responsibilities")

    def test_non_mapping_rejected(self):
        with pytest.raises(JobValidationError, match="must be a mapping"):
            coerce_job(["not", "a", "job"])


class TestExtractResumeKeywords:
    """Tests for the resume keyword set."""

    def test_engineer_resume_keywords(self, extractor, engineer_resume):
        assert extractor.extract_resume_keywords(engineer_resume) == [
            "java",
            "javascript",
            "postgresql",
            "redis",
            "kubernetes",
            "docker",
            "distributed systems",
            "agile",
        ]

    def test_highlights_scanned_before_summary(self, extractor):
        resume = {
            "work": [
                {"summary": "Python shop", "highlights": ["Shipped on AWS"]},
            ]
        }
        assert extractor.extract_resume_keywords(resume) == ["aws", "python"]

    def test_empty_resume(self, extractor):
        assert extractor.extract_resume_keywords({}) == []

    def test_null_sections_treated_as_empty(self, extractor):
        resume = {
            "skills": [{"name": None, "keywords": None}],
            "work": [{"summary": None, "highlights": None}],
        }
        assert extractor.extract_resume_keywords(resume) == []

    def test_blank_skill_keywords_kept(self, extractor):
        resume = {"skills": [{"name": "Misc", "keywords": ["", "Go"]}]}
        assert extractor.extract_resume_keywords(resume) == ["", "go"]

    def test_malformed_skills(self, extractor):
        with pytest.raises(ResumeValidationError) as exc_info:
            extractor.extract_resume_keywords({"skills": "python"})

        assert exc_info.value.errors

    def test_accepts_model(self, extractor, engineer_resume):
        resume = Resume.model_validate(engineer_resume)
        assert extractor.extract_resume_keywords(resume) == extractor.extract_resume_keywords(
            engineer_resume
        )

    def test_coerce_resume_passthrough(self, engineer_resume):
        resume = Resume.model_validate(engineer_resume)
        assert coerce_resume(resume) is resume

    def test_module_level_function(self, engineer_resume):
        assert extract_resume_keywords(engineer_resume)[0] == "java"

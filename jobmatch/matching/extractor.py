"""Keyword extraction from job descriptions and resumes.

Job side collects, lowercased and deduplicated:
1. Every technology in technicalStack (all categories, declared order)
2. Vocabulary terms found in each requirements.essential sentence
3. Vocabulary terms found in each responsibilities sentence
4. Every explicit keyword in job.keywords, if present

Resume side collects:
1. Every literal keyword in skills[].keywords
2. Vocabulary terms found in each work[].highlights entry, then work[].summary

Keywords keep first-seen order, so repeated extraction is byte-identical.
"""

from typing import Any, Dict, Iterable, List, Mapping, Union

from pydantic import ValidationError

from jobmatch.domain.models import JobDescription, Resume

from .exceptions import JobValidationError, ResumeValidationError
from .vocabulary import KeywordVocabulary

JobInput = Union[JobDescription, Mapping[str, Any]]
ResumeInput = Union[Resume, Mapping[str, Any]]


def coerce_job(job: JobInput) -> JobDescription:
    """Return job as a JobDescription, validating raw dicts.

    Raises:
        JobValidationError: If required fields are absent or malformed
    """
    if isinstance(job, JobDescription):
        return job
    if not isinstance(job, Mapping):
        raise JobValidationError(
            f"Job description must be a mapping, got {type(job).__name__}"
        )
    try:
        return JobDescription.model_validate(dict(job))
    except ValidationError as e:
        missing, errors = _split_validation_errors(e)
        raise JobValidationError(
            "Job description failed validation", missing_fields=missing, errors=errors
        ) from e


def coerce_resume(resume: ResumeInput) -> Resume:
    """Return resume as a Resume, validating raw dicts.

    Raises:
        ResumeValidationError: If a resume section has the wrong shape
    """
    if isinstance(resume, Resume):
        return resume
    if not isinstance(resume, Mapping):
        raise ResumeValidationError(f"Resume must be a mapping, got {type(resume).__name__}")
    try:
        return Resume.model_validate(dict(resume))
    except ValidationError as e:
        missing, errors = _split_validation_errors(e)
        raise ResumeValidationError(
            "Resume failed validation", missing_fields=missing, errors=errors
        ) from e


def _split_validation_errors(error: ValidationError) -> tuple[List[str], List[str]]:
    missing: List[str] = []
    errors: List[str] = []
    for item in error.errors():
        field_path = ".".join(str(loc) for loc in item["loc"])
        if item["type"] == "missing":
            missing.append(field_path)
        else:
            errors.append(f"{field_path}: {item['msg']}")
    return missing, errors


class _OrderedKeywordSet:
    """Insertion-ordered set of lowercase keywords; every entry is kept as given."""

    def __init__(self):
        self._items: Dict[str, None] = {}

    def add(self, keyword: str) -> None:
        self._items.setdefault(keyword.lower(), None)

    def update(self, keywords: Iterable[str]) -> None:
        for keyword in keywords:
            self.add(keyword)

    def to_list(self) -> List[str]:
        return list(self._items)


class KeywordExtractor:
    """Pulls normalized keyword sets out of job descriptions and resumes."""

    def __init__(self, vocabulary: KeywordVocabulary = None):
        self.vocabulary = vocabulary or KeywordVocabulary()

    def extract_from_text(self, text: str) -> List[str]:
        """Return vocabulary terms found in text (may contain repeats)."""
        return self.vocabulary.scan(text)

    def extract_keywords(self, job: JobInput) -> List[str]:
        """Extract the job keyword set.

        Args:
            job: JobDescription or the raw dict loaded from JSON

        Returns:
            Unique lowercase keywords in first-seen order

        Raises:
            JobValidationError: If required job fields are absent
        """
        job = coerce_job(job)
        keywords = _OrderedKeywordSet()

        for technologies in job.technical_stack.values():
            keywords.update(technologies)

        for requirement in job.requirements.essential:
            keywords.update(self.extract_from_text(requirement))

        for responsibility in job.responsibilities:
            keywords.update(self.extract_from_text(responsibility))

        if job.keywords:
            for explicit in job.keywords.values():
                keywords.update(explicit)

        return keywords.to_list()

    def extract_resume_keywords(self, resume: ResumeInput) -> List[str]:
        """Extract the candidate keyword set.

        Skill keywords are taken literally, blanks included. Under the
        substring predicate an empty keyword covers every job keyword.

        Args:
            resume: Resume or the raw dict loaded from JSON

        Returns:
            Unique lowercase keywords in first-seen order
        """
        resume = coerce_resume(resume)
        keywords = _OrderedKeywordSet()

        for skill in resume.skills:
            keywords.update(skill.keywords)

        for entry in resume.work:
            for highlight in entry.highlights:
                keywords.update(self.extract_from_text(highlight))
            if entry.summary:
                keywords.update(self.extract_from_text(entry.summary))

        return keywords.to_list()

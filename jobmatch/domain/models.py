"""Core domain models for job descriptions, resumes, and stored analyses.

This module defines the data structures used throughout the application:
- JobDescription: a company's posting with technical stack and requirements
- Resume: a candidate's skills and work history (JSON Resume shape)
- JobSummary: lightweight listing entry for a company's jobs
- JobValidationReport: outcome of checking a raw job description file
- AnalysisRecord: a match result or suggestion report stored for a user

Models accept the camelCase keys used in the JSON files (``technicalStack``,
``jobId``) and expose snake_case attributes.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_to_list(v: Any) -> Any:
    """JSON files often carry explicit nulls where a list is expected."""
    return [] if v is None else v


class JobMetadata(BaseModel):
    """Descriptive metadata for a job posting."""

    model_config = ConfigDict(extra="allow", frozen=True)

    title: str = Field("", description="Job title")
    level: Optional[str] = Field(None, description="Seniority level")
    department: Optional[str] = Field(None, description="Owning department")


class JobRequirements(BaseModel):
    """Requirement sentences; only the essential ones are scanned for keywords."""

    model_config = ConfigDict(extra="allow", frozen=True)

    essential: List[str] = Field(..., description="Must-have requirement sentences")
    preferred: List[str] = Field(default_factory=list, description="Nice-to-have requirements")

    @field_validator("preferred", mode="before")
    @classmethod
    def preferred_default(cls, v: Any) -> Any:
        return _none_to_list(v)


class JobDescription(BaseModel):
    """A job description loaded from the catalog.

    ``technicalStack``, ``requirements.essential`` and ``responsibilities`` are
    required; loading a record without them fails validation.
    """

    job_id: Optional[str] = Field(None, alias="jobId", description="Job identifier")
    metadata: JobMetadata = Field(default_factory=JobMetadata)
    technical_stack: Dict[str, List[str]] = Field(
        ..., alias="technicalStack", description="Category -> ordered technology names"
    )
    requirements: JobRequirements
    responsibilities: List[str] = Field(..., description="Responsibility sentences")
    keywords: Optional[Dict[str, List[str]]] = Field(
        None, description="Explicit keyword override, category -> terms"
    )

    @property
    def title(self) -> str:
        """Convenience accessor for the job title."""
        return self.metadata.title

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        frozen=True,
        json_schema_extra={"example": {
            "jobId": "director-engineering",
            "metadata": {"title": "Director of Engineering", "level": "Director",
                         "department": "Technology"},
            "technicalStack": {"languages": ["Java", "Python"], "cloud": ["AWS"]},
            "requirements": {"essential": ["10+ years building distributed systems"]},
            "responsibilities": ["Lead microservices platform teams"],
            "keywords": {"leadership": ["engineering management"]},
        }},
    )


class Skill(BaseModel):
    """A named skill group with its literal keywords."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = Field("", description="Skill group name, e.g. 'Programming Languages'")
    level: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def name_default(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("keywords", mode="before")
    @classmethod
    def keywords_default(cls, v: Any) -> Any:
        return _none_to_list(v)


class WorkEntry(BaseModel):
    """A position in the candidate's work history."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: Optional[str] = Field(None, description="Employer name")
    position: Optional[str] = None
    summary: Optional[str] = None
    highlights: List[str] = Field(default_factory=list)

    @field_validator("highlights", mode="before")
    @classmethod
    def highlights_default(cls, v: Any) -> Any:
        return _none_to_list(v)


class ResumeBasics(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: Optional[str] = None
    label: Optional[str] = None
    email: Optional[str] = None


class Resume(BaseModel):
    """Candidate resume. Every section is optional."""

    model_config = ConfigDict(extra="allow", frozen=True)

    basics: Optional[ResumeBasics] = None
    skills: List[Skill] = Field(default_factory=list)
    work: List[WorkEntry] = Field(default_factory=list)

    @field_validator("skills", "work", mode="before")
    @classmethod
    def sections_default(cls, v: Any) -> Any:
        return _none_to_list(v)


class JobSummary(BaseModel):
    """Listing entry for a job description file."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str
    job_id: Optional[str] = Field(None, alias="jobId")
    title: str = ""
    level: Optional[str] = None
    department: Optional[str] = None


class JobValidationReport(BaseModel):
    """Result of checking a raw job description against the catalog rules."""

    job_id: str
    missing_fields: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when every required field is present (warnings do not count)."""
        return not self.missing_fields


class AnalysisRecord(BaseModel):
    """A stored analysis of one user's resume against one job.

    ``kind`` is "match" for a MatchResult payload and "suggestions" for a
    SuggestionReport payload. ``payload`` holds the camelCase serialization.
    """

    company: str = Field(..., min_length=1)
    job_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    kind: str = Field(..., description="'match' or 'suggestions'")
    analysis_date: datetime = Field(..., description="When the analysis ran (UTC)")
    payload: Dict[str, Any] = Field(default_factory=dict)
    id: Optional[int] = Field(None, description="Database identifier once stored")

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        """Validate kind is one of the supported analysis kinds."""
        valid_kinds = {"match", "suggestions"}
        if v.lower() not in valid_kinds:
            raise ValueError(f"kind must be one of {sorted(valid_kinds)}, got: {v}")
        return v.lower()

    @field_validator("analysis_date")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Ensure datetime is timezone-aware and in UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

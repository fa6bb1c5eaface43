"""Domain models for the job/resume keyword matcher."""

from .models import (
    AnalysisRecord,
    JobDescription,
    JobMetadata,
    JobRequirements,
    JobSummary,
    JobValidationReport,
    Resume,
    ResumeBasics,
    Skill,
    WorkEntry,
)

__all__ = [
    "JobDescription",
    "JobMetadata",
    "JobRequirements",
    "Resume",
    "ResumeBasics",
    "Skill",
    "WorkEntry",
    "JobSummary",
    "JobValidationReport",
    "AnalysisRecord",
]

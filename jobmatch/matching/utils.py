"""Utility functions for presenting and storing match results.

This module provides helpers for formatting results as console text and for
building the payload the persistence layer stores. Nothing here prints; the
CLI decides where the text goes.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from jobmatch.domain.models import JobSummary, JobValidationReport
from jobmatch.utils.timestamps import format_timestamp

from .models import MatchResult, SuggestionReport

MAX_LISTED_KEYWORDS = 10


def build_analysis_payload(
    analysis: Union[MatchResult, SuggestionReport],
    company: str,
    job_id: str,
    user_id: str,
    analysis_date: datetime,
) -> Dict[str, Any]:
    """Build the record written by the persistence sink.

    Args:
        analysis: MatchResult or SuggestionReport
        company: Company identifier from the catalog
        job_id: Job identifier from the catalog
        user_id: User identifier from the catalog
        analysis_date: When the analysis ran

    Returns:
        Dict with company, jobId, userId, analysisDate followed by the
        camelCase fields of the analysis
    """
    return {
        "company": company,
        "jobId": job_id,
        "userId": user_id,
        "analysisDate": format_timestamp(analysis_date, include_microseconds=True),
        **analysis.to_payload(),
    }


def _bullets(items: Sequence[str], limit: Optional[int] = None) -> List[str]:
    shown = items if limit is None else items[:limit]
    lines = [f"  • {item}" for item in shown]
    if limit is not None and len(items) > limit:
        lines.append(f"  … and {len(items) - limit} more")
    return lines


def format_match_report(
    result: MatchResult,
    job_title: str = "",
    company: str = "",
    user_id: str = "",
    limit: int = MAX_LISTED_KEYWORDS,
) -> str:
    """Format a MatchResult for the console.

    Matched and missing keyword lists are truncated to limit entries.
    """
    lines = ["Job Match Analysis", "=" * 60]
    if user_id:
        lines.append(f"User: {user_id}")
    if job_title or company:
        position = f"{job_title} at {company}" if job_title and company else job_title or company
        lines.append(f"Position: {position}")
    lines.append(f"Match Score: {result.score}% ({result.match_quality})")
    lines.append("")

    lines.append(f"Matched Keywords ({result.total_matches}):")
    lines.extend(_bullets(result.matched_keywords, limit))
    lines.append("")

    lines.append(f"Missing Keywords ({len(result.missing_keywords)}):")
    lines.extend(_bullets(result.missing_keywords, limit))

    return "\n".join(lines)


def format_suggestion_report(report: SuggestionReport) -> str:
    """Format a SuggestionReport for the console."""
    lines = ["Resume Optimization Suggestions", "=" * 60]
    lines.append(f"Overall Match: {report.overall_match}%")
    lines.append("")

    lines.append("Strength Areas:")
    if not report.strength_areas:
        lines.append("  (none)")
    for area in report.strength_areas:
        lines.append(f"  • {area.category}: {area.percentage}% match")
        lines.append(f"    Matches: {', '.join(area.matches)}")
    lines.append("")

    lines.append("Improvement Areas:")
    if not report.keyword_recommendations:
        lines.append("  (none)")
    for rec in report.keyword_recommendations:
        lines.append(f"  • {rec.category}: Consider adding {', '.join(rec.missing)}")

    return "\n".join(lines)


def format_keyword_list(keywords: Sequence[str], job_title: str = "") -> str:
    """Format an extracted keyword set for the console."""
    header = f"Keywords for {job_title}" if job_title else "Keywords"
    lines = [header, "=" * 60, f"Total keywords: {len(keywords)}", ""]
    lines.extend(_bullets(keywords))
    return "\n".join(lines)


def format_job_listing(company: str, jobs: Sequence[JobSummary]) -> str:
    """Format a company's job listing for the console."""
    lines = [f"Jobs at {company}:"]
    if not jobs:
        lines.append("  (no job descriptions found)")
    for job in jobs:
        level = f" ({job.level})" if job.level else ""
        lines.append(f"  • {job.title or job.job_id}{level} - {job.filename}")
    return "\n".join(lines)


def format_company_listing(job_counts: Dict[str, int]) -> str:
    """Format the company -> job count overview for the console."""
    lines = ["Available companies:"]
    if not job_counts:
        lines.append("  (none)")
    for company, count in job_counts.items():
        lines.append(f"  {company}: {count} job{'s' if count != 1 else ''}")
    return "\n".join(lines)


def format_validation_report(report: JobValidationReport) -> str:
    """Format a JobValidationReport for the console."""
    lines = [f"Validation Results for {report.job_id}"]
    if report.is_valid:
        lines.append("✓ All required fields present")
    else:
        lines.append("✗ Missing required fields:")
        lines.extend(_bullets(report.missing_fields))
    for warning in report.warnings:
        lines.append(f"⚠ {warning}")
    return "\n".join(lines)

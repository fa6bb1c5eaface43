"""Structural checks for job description files."""

from typing import Any, Dict, Optional

from jobmatch.config.models import ValidationConfig
from jobmatch.domain.models import JobValidationReport


def validate_job_description(
    raw: Dict[str, Any],
    job_id: str,
    config: Optional[ValidationConfig] = None,
) -> JobValidationReport:
    """Check a raw job description for required fields and size limits.

    A field counts as missing when it is absent or falsy (empty list, empty
    dict, empty string). ``requirements`` without ``essential`` is reported as
    ``requirements.essential``.

    Args:
        raw: Job description as loaded from JSON
        job_id: Identifier used in the report
        config: Validation rules (defaults to ValidationConfig())

    Returns:
        JobValidationReport with missing fields and warnings
    """
    config = config or ValidationConfig()

    missing = [field for field in config.required_fields if not raw.get(field)]

    requirements = raw.get("requirements")
    if isinstance(requirements, dict) and "requirements" not in missing:
        if not isinstance(requirements.get("essential"), list):
            missing.append("requirements.essential")

    warnings = []
    responsibilities = raw.get("responsibilities")
    if isinstance(responsibilities, list) and len(responsibilities) > config.max_responsibilities:
        warnings.append(
            f"Too many responsibilities ({len(responsibilities)}, max {config.max_responsibilities})"
        )

    if isinstance(requirements, dict):
        essential = requirements.get("essential")
        if isinstance(essential, list) and len(essential) > config.max_essential_requirements:
            warnings.append(
                f"Too many essential requirements ({len(essential)}, "
                f"max {config.max_essential_requirements})"
            )

    return JobValidationReport(job_id=job_id, missing_fields=missing, warnings=warnings)

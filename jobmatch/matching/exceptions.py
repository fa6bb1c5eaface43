"""Matching engine exceptions.

Both error kinds are local and recoverable: callers catch them and present
``user_message`` instead of terminating.
"""

from typing import List, Optional


class MatchingError(Exception):
    """Base exception for all matching engine errors."""

    user_message = "matching failed"


class RecordValidationError(MatchingError):
    """Raised when an input record does not have the shape the extractor needs.

    Attributes:
        missing_fields: Dotted paths of required fields that were absent
        errors: Other field-level problems (wrong types and similar)
    """

    def __init__(
        self,
        message: str,
        missing_fields: Optional[List[str]] = None,
        errors: Optional[List[str]] = None,
    ):
        self.message = message
        self.missing_fields = missing_fields or []
        self.errors = errors or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.missing_fields:
            parts.append(f"missing fields: {', '.join(self.missing_fields)}")
        if self.errors:
            parts.append(f"errors: {'; '.join(self.errors)}")
        return " | ".join(parts)


class JobValidationError(RecordValidationError):
    """Job description lacks technicalStack, requirements.essential or responsibilities."""

    user_message = "invalid job description: missing requirements"


class ResumeValidationError(RecordValidationError):
    """Resume sections have the wrong shape (e.g. skills is not a list)."""

    user_message = "invalid resume: malformed skills or work history"


class NoJobKeywordsError(MatchingError, ZeroDivisionError):
    """Raised when a job yields no keywords, so no percentage can be computed."""

    user_message = "job description has no extractable keywords"

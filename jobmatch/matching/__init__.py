"""Keyword matching engine for scoring resumes against job descriptions.

This module provides:
- KeywordVocabulary: precompiled matcher over the technical term table
- KeywordExtractor: job and resume keyword extraction
- KeywordMatcher: match scoring and per-category suggestions
- MatchResult / SuggestionReport: result models
- Module-level functions using the default configuration
- Utility functions for formatting and persisting results
"""

from .engine import (
    DEFAULT_CATEGORY_ALIASES,
    KeywordMatcher,
    calculate_match_score,
    extract_keywords,
    extract_resume_keywords,
    generate_resume_suggestions,
)
from .exceptions import (
    JobValidationError,
    MatchingError,
    NoJobKeywordsError,
    RecordValidationError,
    ResumeValidationError,
)
from .extractor import KeywordExtractor
from .models import KeywordRecommendation, MatchResult, StrengthArea, SuggestionReport
from .predicates import exact_match, get_predicate, substring_match
from .utils import (
    build_analysis_payload,
    format_keyword_list,
    format_match_report,
    format_suggestion_report,
)
from .vocabulary import DEFAULT_TECHNICAL_TERMS, KeywordVocabulary

__all__ = [
    # Services
    "KeywordMatcher",
    "KeywordExtractor",
    "KeywordVocabulary",
    # Default-configuration functions
    "extract_keywords",
    "extract_resume_keywords",
    "calculate_match_score",
    "generate_resume_suggestions",
    # Configuration data
    "DEFAULT_TECHNICAL_TERMS",
    "DEFAULT_CATEGORY_ALIASES",
    # Predicates
    "substring_match",
    "exact_match",
    "get_predicate",
    # Models
    "MatchResult",
    "SuggestionReport",
    "StrengthArea",
    "KeywordRecommendation",
    # Exceptions
    "MatchingError",
    "RecordValidationError",
    "JobValidationError",
    "ResumeValidationError",
    "NoJobKeywordsError",
    # Utilities
    "build_analysis_payload",
    "format_match_report",
    "format_suggestion_report",
    "format_keyword_list",
]

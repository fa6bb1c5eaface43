"""Data models for the matching engine.

Results serialize with camelCase keys (``matchedKeywords``, ``overallMatch``)
so stored analyses and JSON output keep the established field names.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _ResultModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_payload(self) -> dict:
        """Serialize with camelCase keys for storage or JSON output."""
        return self.model_dump(by_alias=True)


class MatchResult(_ResultModel):
    """Result of scoring a resume against a job description.

    Attributes:
        score: Percentage of job keywords covered, 0-100
        matched_keywords: Job keywords covered by some resume keyword
        missing_keywords: Job keywords with no covering resume keyword
        total_job_keywords: Size of the job keyword set
        total_matches: Number of matched keywords
    """

    score: int = Field(..., ge=0, le=100)
    matched_keywords: List[str] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    total_job_keywords: int = Field(..., ge=1)
    total_matches: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_counts(self):
        """Matched and missing partition the job keyword set."""
        if self.total_matches != len(self.matched_keywords):
            raise ValueError("total_matches must equal the number of matched keywords")
        if len(self.matched_keywords) + len(self.missing_keywords) != self.total_job_keywords:
            raise ValueError("matched and missing keywords must cover every job keyword")
        return self

    @property
    def match_quality(self) -> str:
        """Return a coarse description of the score.

        Returns:
            "strong" (>= 75), "moderate" (>= 50), "weak" (> 0) or "none"
        """
        if self.score >= 75:
            return "strong"
        if self.score >= 50:
            return "moderate"
        if self.score > 0:
            return "weak"
        return "none"


class StrengthArea(_ResultModel):
    """A technology category where the resume covers at least one technology."""

    category: str
    matches: List[str]
    percentage: int = Field(..., ge=0, le=100)


class KeywordRecommendation(_ResultModel):
    """Technologies from one category the resume does not mention."""

    category: str
    missing: List[str]


class SuggestionReport(_ResultModel):
    """Per-category breakdown of how a resume covers a job's technical stack."""

    overall_match: int = Field(..., ge=0, le=100)
    strength_areas: List[StrengthArea] = Field(default_factory=list)
    keyword_recommendations: List[KeywordRecommendation] = Field(default_factory=list)

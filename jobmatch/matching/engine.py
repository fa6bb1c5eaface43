"""Keyword matching engine for scoring resumes against job descriptions.

This module implements the matching logic that:
1. Extracts keyword sets from the job and the resume
2. Scores the resume by the share of job keywords it covers
3. Breaks the job's technical stack down by category into strength areas
   and missing-keyword recommendations
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from jobmatch.logging import get_logger
from jobmatch.utils.percentages import percentage

from .exceptions import NoJobKeywordsError
from .extractor import JobInput, KeywordExtractor, ResumeInput, coerce_job, coerce_resume
from .models import KeywordRecommendation, MatchResult, StrengthArea, SuggestionReport
from .predicates import KeywordPredicate, substring_match
from .vocabulary import KeywordVocabulary

logger = get_logger(__name__, component="matching")

DEFAULT_CATEGORY_ALIASES: Dict[str, List[str]] = {
    "languages": ["programming", "language"],
    "frameworks": ["framework", "library"],
    "databases": ["database", "data"],
    "cloud": ["cloud", "platform"],
    "tools": ["tool", "software"],
}

DEFAULT_MAX_RECOMMENDATIONS = 3


class KeywordMatcher:
    """Scores resumes against job descriptions and suggests improvements.

    Responsibilities:
    - Extract job and resume keyword sets
    - Decide coverage of each job keyword through a single predicate
    - Compute the overall match percentage
    - Compute per-category strength areas and missing recommendations

    The matcher holds only immutable configuration and is safe to share
    across threads.
    """

    def __init__(
        self,
        vocabulary: Optional[KeywordVocabulary] = None,
        predicate: KeywordPredicate = substring_match,
        category_aliases: Optional[Mapping[str, Sequence[str]]] = None,
        max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize KeywordMatcher.

        Args:
            vocabulary: Term table for free-text scanning (defaults to the
                built-in technical vocabulary)
            predicate: Decides whether a resume keyword covers a job keyword
            category_aliases: Category -> search terms matched against skill
                names (defaults to DEFAULT_CATEGORY_ALIASES)
            max_recommendations: Missing technologies reported per category
            logger_instance: Optional logger instance (defaults to module logger)
        """
        if max_recommendations < 1:
            raise ValueError("max_recommendations must be at least 1")

        self.extractor = KeywordExtractor(vocabulary)
        self.predicate = predicate
        aliases = DEFAULT_CATEGORY_ALIASES if category_aliases is None else category_aliases
        self.category_aliases: Dict[str, List[str]] = {
            category.lower(): [term.lower() for term in terms]
            for category, terms in aliases.items()
        }
        self.max_recommendations = max_recommendations
        self.logger = logger_instance or logger

    @property
    def vocabulary(self) -> KeywordVocabulary:
        return self.extractor.vocabulary

    def extract_keywords(self, job: JobInput) -> List[str]:
        """Extract the job keyword set. See KeywordExtractor.extract_keywords."""
        return self.extractor.extract_keywords(job)

    def extract_resume_keywords(self, resume: ResumeInput) -> List[str]:
        """Extract the resume keyword set. See KeywordExtractor.extract_resume_keywords."""
        return self.extractor.extract_resume_keywords(resume)

    def calculate_match_score(self, resume: ResumeInput, job: JobInput) -> MatchResult:
        """Score a resume against a job description.

        Algorithm:
        1. Extract job keywords and resume keywords
        2. A job keyword is matched when the predicate accepts it against at
           least one resume keyword
        3. score = round(matched / total * 100), half up

        Args:
            resume: Resume model or raw dict
            job: JobDescription model or raw dict

        Returns:
            MatchResult with score and matched/missing keyword lists

        Raises:
            JobValidationError: If required job fields are absent
            NoJobKeywordsError: If the job yields no keywords
        """
        job = coerce_job(job)
        resume = coerce_resume(resume)

        job_keywords = self.extractor.extract_keywords(job)
        resume_keywords = self.extractor.extract_resume_keywords(resume)

        if not job_keywords:
            self.logger.warning(
                "Job description has no extractable keywords",
                extra={"event": "matching.score.no_keywords", "job_id": job.job_id},
            )
            raise NoJobKeywordsError(
                f"Job description {job.job_id or job.title!r} has no extractable keywords"
            )

        matched: List[str] = []
        missing: List[str] = []
        for job_keyword in job_keywords:
            if self._is_covered(job_keyword, resume_keywords):
                matched.append(job_keyword)
            else:
                missing.append(job_keyword)

        score = percentage(len(matched), len(job_keywords))

        self.logger.info(
            f"Match score calculated: {score}%",
            extra={
                "event": "matching.score.calculated",
                "job_id": job.job_id,
                "score": score,
                "total_job_keywords": len(job_keywords),
                "total_resume_keywords": len(resume_keywords),
                "total_matches": len(matched),
            },
        )

        return MatchResult(
            score=score,
            matched_keywords=matched,
            missing_keywords=missing,
            total_job_keywords=len(job_keywords),
            total_matches=len(matched),
        )

    def generate_resume_suggestions(self, resume: ResumeInput, job: JobInput) -> SuggestionReport:
        """Break the job's technical stack down by category.

        For each category, in declared order:
        - userTech: keywords of resume skills whose name contains one of the
          category's alias terms
        - matches: technologies some userTech entry contains (case-insensitive)
        - a StrengthArea is recorded when matches is non-empty
        - a KeywordRecommendation with the first max_recommendations missing
          technologies is recorded when any are missing

        Raises:
            JobValidationError: If required job fields are absent
            NoJobKeywordsError: If the job yields no keywords
        """
        job = coerce_job(job)
        resume = coerce_resume(resume)

        match_result = self.calculate_match_score(resume, job)

        strength_areas: List[StrengthArea] = []
        recommendations: List[KeywordRecommendation] = []

        for category, technologies in job.technical_stack.items():
            user_tech = self.get_user_technologies(resume, category)

            matches = [tech for tech in technologies if self._tech_in_user_skills(tech, user_tech)]
            missing = [tech for tech in technologies if not self._tech_in_user_skills(tech, user_tech)]

            if matches:
                strength_areas.append(
                    StrengthArea(
                        category=category,
                        matches=matches,
                        percentage=percentage(len(matches), len(technologies)),
                    )
                )

            if missing:
                recommendations.append(
                    KeywordRecommendation(
                        category=category,
                        missing=missing[: self.max_recommendations],
                    )
                )

        self.logger.info(
            "Resume suggestions generated",
            extra={
                "event": "matching.suggestions.generated",
                "job_id": job.job_id,
                "overall_match": match_result.score,
                "strength_area_count": len(strength_areas),
                "recommendation_count": len(recommendations),
            },
        )

        return SuggestionReport(
            overall_match=match_result.score,
            strength_areas=strength_areas,
            keyword_recommendations=recommendations,
        )

    def get_user_technologies(self, resume: ResumeInput, category: str) -> List[str]:
        """Return keywords of resume skills that belong to category.

        A skill belongs to a category when its lowercased name contains one of
        the category's alias terms. Unknown categories use their own lowercased
        name as the only alias.
        """
        resume = coerce_resume(resume)
        search_terms = self.category_aliases.get(category.lower(), [category.lower()])

        user_tech: List[str] = []
        for skill in resume.skills:
            skill_name = skill.name.lower()
            if any(term in skill_name for term in search_terms):
                user_tech.extend(skill.keywords)
        return user_tech

    def _is_covered(self, job_keyword: str, resume_keywords: Sequence[str]) -> bool:
        return any(self.predicate(job_keyword, resume_keyword) for resume_keyword in resume_keywords)

    @staticmethod
    def _tech_in_user_skills(tech: str, user_tech: Sequence[str]) -> bool:
        """One-directional check: a user skill keyword contains the technology."""
        tech_lower = tech.lower()
        return any(tech_lower in user_t.lower() for user_t in user_tech)


_default_matcher: Optional[KeywordMatcher] = None


def _get_default_matcher() -> KeywordMatcher:
    global _default_matcher
    if _default_matcher is None:
        _default_matcher = KeywordMatcher()
    return _default_matcher


def extract_keywords(job: JobInput) -> List[str]:
    """Extract job keywords with the default vocabulary."""
    return _get_default_matcher().extract_keywords(job)


def extract_resume_keywords(resume: ResumeInput) -> List[str]:
    """Extract resume keywords with the default vocabulary."""
    return _get_default_matcher().extract_resume_keywords(resume)


def calculate_match_score(resume: ResumeInput, job: JobInput) -> MatchResult:
    """Score resume against job with the default configuration."""
    return _get_default_matcher().calculate_match_score(resume, job)


def generate_resume_suggestions(resume: ResumeInput, job: JobInput) -> SuggestionReport:
    """Generate suggestions with the default configuration."""
    return _get_default_matcher().generate_resume_suggestions(resume, job)

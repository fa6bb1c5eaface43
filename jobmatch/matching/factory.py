"""Factory for building a KeywordMatcher from configuration."""

import logging
from typing import Optional

from jobmatch.config.models import MatchingConfig
from jobmatch.logging import get_logger

from .engine import KeywordMatcher
from .predicates import get_predicate
from .vocabulary import KeywordVocabulary

logger = get_logger(__name__, component="matching")


def create_matcher(
    config: Optional[MatchingConfig] = None,
    logger_instance: Optional[logging.Logger] = None,
) -> KeywordMatcher:
    """Build a KeywordMatcher from a MatchingConfig.

    Args:
        config: Matching configuration (defaults to MatchingConfig())
        logger_instance: Optional logger passed through to the matcher

    Returns:
        Configured KeywordMatcher

    Raises:
        ValueError: If the predicate name is unknown or the vocabulary is empty
    """
    config = config or MatchingConfig()

    matcher = KeywordMatcher(
        vocabulary=KeywordVocabulary(config.vocabulary),
        predicate=get_predicate(config.predicate),
        category_aliases=config.category_aliases,
        max_recommendations=config.max_recommendations,
        logger_instance=logger_instance,
    )

    logger.debug(
        "Keyword matcher created",
        extra={
            "event": "matching.matcher.created",
            "vocabulary_size": len(matcher.vocabulary),
            "predicate": config.predicate,
            "category_count": len(config.category_aliases),
        },
    )
    return matcher

"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

SHORT_TERM_LENGTH = 2


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    matching = config_dict.get("matching", {})
    if isinstance(matching, dict):
        vocabulary = matching.get("vocabulary", [])
        if isinstance(vocabulary, list):
            normalized = [term.strip().lower() for term in vocabulary if isinstance(term, str)]
            duplicates = sorted({term for term in normalized if normalized.count(term) > 1})
            if duplicates:
                warning_messages.append(
                    f"Duplicate vocabulary terms will be deduplicated: {', '.join(duplicates)}"
                )

            # Short terms match inside unrelated resume keywords ("ai" in "main")
            short_terms = sorted(
                {term for term in normalized if 0 < len(term) <= SHORT_TERM_LENGTH}
            )
            if short_terms and matching.get("predicate", "substring") == "substring":
                warning_messages.append(
                    f"Short vocabulary terms may cause substring false positives: "
                    f"{', '.join(short_terms)}"
                )

        max_recommendations = matching.get("max_recommendations")
        if isinstance(max_recommendations, int) and max_recommendations > 10:
            warning_messages.append(
                f"Large max_recommendations ({max_recommendations}) makes reports hard to read"
            )

    catalog = config_dict.get("catalog", {})
    if isinstance(catalog, dict) and "data_dir" not in catalog:
        warning_messages.append("catalog.data_dir not set; using the current directory")

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)

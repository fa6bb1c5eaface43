"""Keyword match predicates.

A predicate decides whether a single job keyword is covered by a single resume
keyword. Scoring only ever goes through a predicate, so swapping the matching
policy never touches the scorer.

Known precision issue with the default ``substring`` policy: containment is
checked in both directions, so short keywords produce false positives. The job
keyword "ai" is covered by a resume skill keyword "main", and a one-letter
resume keyword "c" covers any job keyword containing that letter. An empty
resume keyword covers every job keyword, and an empty technology name still
counts toward the job keyword total. This is kept for compatibility with
existing scores.
"""

from typing import Callable, Dict

KeywordPredicate = Callable[[str, str], bool]


def substring_match(job_keyword: str, resume_keyword: str) -> bool:
    """Bidirectional substring containment (resume-in-job OR job-in-resume).

    Example:
        >>> substring_match("java", "javascript")
        True
        >>> substring_match("javascript", "java")
        True
        >>> substring_match("python", "go")
        False
    """
    return job_keyword in resume_keyword or resume_keyword in job_keyword


def exact_match(job_keyword: str, resume_keyword: str) -> bool:
    """Exact string equality."""
    return job_keyword == resume_keyword


PREDICATES: Dict[str, KeywordPredicate] = {
    "substring": substring_match,
    "exact": exact_match,
}


def get_predicate(name: str) -> KeywordPredicate:
    """Look up a predicate by configured name.

    Raises:
        ValueError: If name is not a known predicate
    """
    try:
        return PREDICATES[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown match predicate: {name}. Must be one of: {', '.join(sorted(PREDICATES))}"
        ) from None

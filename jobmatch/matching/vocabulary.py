"""Fixed technical-term vocabulary used to scan free text for keywords.

Text scanning only ever finds terms in the vocabulary. A sentence like
"Experience with Kubernetes and Terraform" yields ["kubernetes"] because
"terraform" is not listed.
"""

import re
from typing import Iterable, List, Pattern, Sequence, Tuple

DEFAULT_TECHNICAL_TERMS: Tuple[str, ...] = (
    "java",
    "python",
    "javascript",
    "react",
    "angular",
    "aws",
    "azure",
    "kubernetes",
    "docker",
    "microservices",
    "agile",
    "scrum",
    "devops",
    "ci/cd",
    "sql",
    "nosql",
    "api",
    "rest",
    "graphql",
    "machine learning",
    "ai",
    "blockchain",
    "cloud",
    "distributed systems",
    "scalability",
    "performance",
    "security",
)


class KeywordVocabulary:
    """Precompiled case-insensitive whole-word matcher over a term table.

    Terms are normalized (stripped, lowercased, deduplicated) and joined into a
    single alternation that must not touch a word character on either side,
    so "ai" does not match inside "main" and "java" does not match inside
    "javascript". Longer terms are tried first, so "machine learning" wins over
    "machine" when both are configured.
    """

    def __init__(self, terms: Iterable[str] = DEFAULT_TECHNICAL_TERMS):
        normalized: List[str] = []
        for term in terms:
            cleaned = term.strip().lower()
            if cleaned and cleaned not in normalized:
                normalized.append(cleaned)

        if not normalized:
            raise ValueError("Keyword vocabulary must contain at least one term")

        self._terms: Tuple[str, ...] = tuple(normalized)
        self._pattern: Pattern[str] = self._compile(self._terms)

    @staticmethod
    def _compile(terms: Sequence[str]) -> Pattern[str]:
        ordered = sorted(terms, key=len, reverse=True)
        alternation = "|".join(re.escape(term) for term in ordered)
        return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)

    @property
    def terms(self) -> Tuple[str, ...]:
        return self._terms

    def scan(self, text: str) -> List[str]:
        """Return every vocabulary term found in text, lowercased, in order.

        Repeated occurrences are returned repeatedly; callers deduplicate.
        """
        if not text:
            return []
        return [match.lower() for match in self._pattern.findall(text)]

    def __contains__(self, term: str) -> bool:
        return term.strip().lower() in self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"KeywordVocabulary({len(self._terms)} terms)"

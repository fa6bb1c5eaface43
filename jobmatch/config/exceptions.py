"""Configuration errors."""

from typing import List, Optional


class ConfigurationError(Exception):
    """Invalid or unreadable configuration.

    ``str(error)`` is the full report printed by the CLI: the message, then a
    numbered list of individual problems, then suggested fixes.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        super().__init__(self.report())

    def report(self) -> str:
        lines = [self.message]
        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {n}. {error}" for n, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {hint}" for hint in self.suggestions)
        return "\n".join(lines)

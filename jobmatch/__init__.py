"""Job description to resume keyword matching, scoring, and suggestions."""

__version__ = "1.0.0"

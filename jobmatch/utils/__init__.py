"""Utility functions for time handling and percentage arithmetic."""

from .percentages import percentage, round_half_up
from .timestamps import ensure_utc, format_timestamp, parse_iso_datetime, utc_now

__all__ = [
    # Timestamps
    "utc_now",
    "ensure_utc",
    "parse_iso_datetime",
    "format_timestamp",
    # Percentages
    "round_half_up",
    "percentage",
]

"""Percentage helpers shared by scoring and suggestion generation."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up.

    Python's round() uses banker's rounding (round(12.5) == 12); scores are
    rounded half up so 1 of 8 keywords reports 13%.

    Example:
        >>> round_half_up(12.5)
        13
        >>> round_half_up(66.66)
        67
    """
    return int(math.floor(value + 0.5))


def percentage(part: int, total: int) -> int:
    """Return part/total as an integer percentage, rounded half up.

    Raises:
        ZeroDivisionError: If total is zero
    """
    return round_half_up(part / total * 100)

"""Shared helpers for the time and weekday predicates."""
from typing import Any

# Trailing argument that selects the UTC view of the clock
GMT = "GMT"


def is_gmt(value: Any) -> bool:
    """Case-sensitive match against the GMT marker."""
    return value == GMT


def value_in_range(start: float, value: float, finish: float) -> bool:
    """start <= value <= finish. Any NaN operand makes this False."""
    return start <= value <= finish

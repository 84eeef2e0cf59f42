"""Predicate registry for rule-evaluation hosts."""
from datetime import datetime
from typing import Any, Callable, Optional

from core.ranges import GMT, is_gmt
from core.time_range import time_range
from core.weekday_range import weekday_range

__all__ = ["GMT", "PREDICATES", "evaluate", "is_gmt", "time_range", "weekday_range"]

# Names as they appear in rule scripts
PREDICATES: dict[str, Callable[..., bool]] = {
    "timeRange": time_range,
    "weekdayRange": weekday_range,
}


def evaluate(name: str, *args: Any, now: Optional[datetime] = None, tz: Optional[str] = None) -> bool:
    """Run a predicate by its rule-script name. Raises KeyError for unknown names."""
    return PREDICATES[name](*args, now=now, tz=tz)

"""Weekday window predicate."""
from datetime import datetime
from typing import Any, Optional
import logging

from core.clock import ClockReading
from core.ranges import is_gmt, value_in_range

logger = logging.getLogger(__name__)

WEEKDAYS = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")


def is_weekday(value: Any) -> bool:
    return value in WEEKDAYS


def weekday_index(value: Any) -> int:
    """0=SUN ... 6=SAT, -1 for anything else."""
    return WEEKDAYS.index(value) if is_weekday(value) else -1


def weekday_range(
    wd1: Any,
    wd2: Any = None,
    gmt: Any = None,
    *,
    now: Optional[datetime] = None,
    tz: Optional[str] = None
) -> bool:
    """
    True on wd1, or from wd1 through wd2 inclusive.

    Order matters: ("MON", "FRI") is the working week while ("FRI", "MON")
    wraps over the weekend. "GMT" as the second or third argument selects
    the UTC clock. Unknown weekday names never match.

    Examples:
        weekday_range("MON", "FRI")
        weekday_range("MON", "FRI", "GMT")
        weekday_range("SAT")
        weekday_range("SAT", "GMT")
        weekday_range("FRI", "MON")
    """
    use_gmt = is_gmt(gmt) or is_gmt(wd2)

    wd1_index = weekday_index(wd1)
    wd2_index = weekday_index(wd2)
    if wd1_index < 0:
        logger.debug(f"weekday_range: unknown weekday {wd1!r}")

    today = ClockReading.read(now, tz).weekday(use_gmt)

    if wd2_index < 0:
        result = today == wd1_index
    elif wd1_index <= wd2_index:
        result = value_in_range(wd1_index, today, wd2_index)
    else:
        result = value_in_range(wd1_index, today, 6) or value_in_range(0, today, wd2_index)

    logger.debug(f"weekday_range({wd1!r}, {wd2!r}, {gmt!r}) ({'GMT' if use_gmt else 'local'}) -> {result}")
    return result

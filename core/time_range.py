"""Time-of-day window predicate."""
from datetime import datetime
from typing import Any, Optional
import logging
import re

from core.clock import ClockReading
from core.ranges import is_gmt, value_in_range

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> float:
    """
    Lenient base-10 integer parse.

    Reads an optional sign and the leading digits of the value's text form,
    so "12abc" gives 12 and "9.5" gives 9. Anything without leading digits
    gives NaN, which compares False against every bound.
    """
    match = _LEADING_INT.match(str(value))
    if not match:
        return float("nan")
    return int(match.group(1))


def seconds_elapsed_today(hh: float, mm: float, ss: float) -> float:
    return hh * 3600 + mm * 60 + ss


def time_range(*args: Any, now: Optional[datetime] = None, tz: Optional[str] = None) -> bool:
    """
    True during (or between) the given time(s).

    Shapes:
        time_range(hour)                               current hour == hour
        time_range(hour1, hour2)                       hour1 <= current hour < hour2
        time_range(hour1, min1, hour2, min2)           hour1:min1:00 .. hour2:min2:59
        time_range(hour1, min1, sec1, hour2, min2, sec2)

    Any shape may end with "GMT" to use the UTC clock instead of local time.
    Unsupported argument counts and non-numeric values give False.

    Args:
        now: Instant to evaluate instead of the current time.
        tz: IANA name for local time. None uses the system timezone.
    """
    values = list(args)
    use_gmt = bool(values) and is_gmt(values[-1])
    if use_gmt:
        values.pop()

    clock = ClockReading.read(now, tz)
    nums = [parse_int(v) for v in values]
    count = len(nums)

    if count == 1:
        result = clock.hour(use_gmt) == nums[0]
    elif count == 2:
        # Upper hour is exclusive here, unlike the 4 and 6 argument forms
        current_hour = clock.hour(use_gmt)
        result = nums[0] <= current_hour < nums[1]
    elif count == 4:
        # Current seconds are dropped so the whole end minute is inside
        result = value_in_range(
            seconds_elapsed_today(nums[0], nums[1], 0),
            seconds_elapsed_today(clock.hour(use_gmt), clock.minute(use_gmt), 0),
            seconds_elapsed_today(nums[2], nums[3], 59),
        )
    elif count == 6:
        result = value_in_range(
            seconds_elapsed_today(nums[0], nums[1], nums[2]),
            seconds_elapsed_today(clock.hour(use_gmt), clock.minute(use_gmt), clock.second(use_gmt)),
            seconds_elapsed_today(nums[3], nums[4], nums[5]),
        )
    else:
        logger.debug(f"time_range: unsupported argument count {count}")
        result = False

    logger.debug(f"time_range{tuple(args)} ({'GMT' if use_gmt else 'local'}) -> {result}")
    return result

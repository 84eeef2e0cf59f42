"""Wall-clock snapshot with local and UTC views."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import logging

import pytz

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockReading:
    """
    One read of the wall clock.

    Both views are projections of the same instant, so hour, minute and
    second always belong together no matter which view a predicate uses.
    """
    local: datetime
    utc: datetime

    @classmethod
    def read(cls, now: Optional[datetime] = None, tz: Optional[str] = None) -> "ClockReading":
        """
        Take a snapshot.

        Args:
            now: Instant to use instead of the current time. Naive values are taken as UTC.
            tz: IANA name for the local view. None uses the system timezone.
        """
        if now is None:
            now = datetime.now(pytz.utc)
        elif now.tzinfo is None:
            now = pytz.utc.localize(now)

        utc = now.astimezone(pytz.utc)
        local = utc.astimezone(pytz.timezone(tz)) if tz else utc.astimezone()
        return cls(local=local, utc=utc)

    def view(self, use_gmt: bool) -> datetime:
        return self.utc if use_gmt else self.local

    def hour(self, use_gmt: bool) -> int:
        return self.view(use_gmt).hour

    def minute(self, use_gmt: bool) -> int:
        return self.view(use_gmt).minute

    def second(self, use_gmt: bool) -> int:
        return self.view(use_gmt).second

    def weekday(self, use_gmt: bool) -> int:
        """Day of week with 0=Sunday ... 6=Saturday."""
        return self.view(use_gmt).isoweekday() % 7

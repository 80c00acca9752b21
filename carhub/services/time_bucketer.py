"""
Calendar-aligned trailing windows (months and days) anchored to a reference
instant, plus the keys used to match event timestamps against them.

All instants are placed in a single policy timezone before either windows are
built or events are matched, so an event lands in at most one bucket.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

import pytz

from carhub.utils.constants import DAYS_TRAILING, MONTH_LABELS, MONTHS_TRAILING
from carhub.utils.filters import to_zone


@dataclass(frozen=True)
class MonthWindow:
    label: str  # display only; repeats across years
    year: int
    month: int  # 1..12

    @property
    def key(self) -> tuple[int, int]:
        return self.year, self.month


@dataclass(frozen=True)
class DayWindow:
    label: str
    day: date

    @property
    def key(self) -> date:
        return self.day


def _calendar_date(value) -> date:
    return value.date() if isinstance(value, datetime) else value


class TimeBucketer:
    """Builds trailing windows and match keys in one timezone."""

    def __init__(self, tz=None):
        self.tz = tz or pytz.UTC

    def local_date(self, instant) -> Optional[date]:
        """Calendar date of `instant` in the policy timezone; None if missing."""
        if not isinstance(instant, (datetime, date)):
            return None
        return _calendar_date(to_zone(instant, self.tz))

    def month_key(self, instant) -> Optional[tuple[int, int]]:
        d = self.local_date(instant)
        return (d.year, d.month) if d is not None else None

    def day_key(self, instant) -> Optional[date]:
        return self.local_date(instant)

    def monthly_windows(self, reference, count: int = MONTHS_TRAILING) -> list[MonthWindow]:
        """
        `count` month windows from count-1 months before the reference month up
        to and including it, oldest first.
        """
        ref = self.local_date(reference)
        # months since year 0, so stepping back crosses year boundaries cleanly
        anchor = ref.year * 12 + (ref.month - 1)
        out = []
        for offset in range(count - 1, -1, -1):
            year, month0 = divmod(anchor - offset, 12)
            out.append(MonthWindow(label=MONTH_LABELS[month0], year=year, month=month0 + 1))
        return out

    def daily_windows(self, reference, count: int = DAYS_TRAILING) -> list[DayWindow]:
        """
        `count` single-day windows from count-1 days before the reference day
        up to and including it, oldest first.
        """
        ref = self.local_date(reference)
        out = []
        for offset in range(count - 1, -1, -1):
            d = ref - timedelta(days=offset)
            out.append(DayWindow(label=f"{MONTH_LABELS[d.month - 1]} {d.day}", day=d))
        return out

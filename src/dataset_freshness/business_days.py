"""Weekend and public-holiday arithmetic over inclusive date ranges.

Holiday data is never consulted directly: callers hand in an
``is_holiday(date) -> bool`` callable, normally built by ``holiday_lookup``
from the ``holidays`` package, or a plain set's ``__contains__`` in tests.
"""
from __future__ import annotations
from datetime import date as ddate, timedelta
from typing import Callable, NamedTuple
import holidays

from .errors import ConfigError

HolidayLookup = Callable[[ddate], bool]

WEEKEND = (5, 6)  # Sat, Sun


class DateRange(NamedTuple):
    start: ddate
    end: ddate

    def days(self):
        d = self.start
        while d <= self.end:
            yield d
            d += timedelta(days=1)


def no_holidays(d: ddate) -> bool:
    return False


def holiday_lookup(jurisdiction: str) -> HolidayLookup:
    """Build a lookup for a country code such as ``US`` or ``US-TX``."""
    country, _, subdiv = (jurisdiction or "").strip().upper().partition("-")
    try:
        cal = holidays.country_holidays(country, subdiv=subdiv or None)
    except NotImplementedError as e:
        raise ConfigError(f"unknown holiday jurisdiction: {jurisdiction!r}") from e
    return cal.__contains__


def is_business_day(d: ddate, is_holiday: HolidayLookup = no_holidays) -> bool:
    return d.weekday() not in WEEKEND and not is_holiday(d)


def count_non_business_days(date_range: DateRange, is_holiday: HolidayLookup = no_holidays) -> int:
    # an inverted range yields no days, so skew in fetched timestamps counts 0
    return sum(1 for d in date_range.days() if not is_business_day(d, is_holiday))

from __future__ import annotations
from datetime import datetime
from typing import NamedTuple

from .business_days import DateRange, HolidayLookup, count_non_business_days, no_holidays

SECS_PER_DAY = 24 * 60 * 60


class AgeMeasurement(NamedTuple):
    calendar_days: float
    business_days: float


def _local_date(dt: datetime):
    # naive datetimes are taken as local time, aware ones are converted to it
    return dt.astimezone().date()


def compute_age(last_updated: datetime, now: datetime, is_holiday: HolidayLookup = no_holidays) -> AgeMeasurement:
    """Age of ``last_updated`` as seen at ``now``, in calendar and business days.

    Every weekend day or holiday touched by the range counts as a whole day
    off, including the partial days at either end. Business days never go
    below zero.
    """
    calendar_days = (now - last_updated).total_seconds() / SECS_PER_DAY
    off = count_non_business_days(DateRange(_local_date(last_updated), _local_date(now)), is_holiday)
    business_days = max(calendar_days - off, 0.0)
    return AgeMeasurement(calendar_days, business_days)

from datetime import date

import pytest

from dataset_freshness.business_days import (
    DateRange,
    count_non_business_days,
    holiday_lookup,
    is_business_day,
)
from dataset_freshness.errors import ConfigError

# 2024-06-03 is a Monday
MON = date(2024, 6, 3)


def test_inverted_range_counts_nothing():
    assert count_non_business_days(DateRange(date(2024, 6, 9), date(2024, 6, 1))) == 0


@pytest.mark.parametrize(
    "start,end,expected",
    [
        (date(2024, 6, 3), date(2024, 6, 7), 0),  # Mon..Fri
        (date(2024, 6, 3), date(2024, 6, 8), 1),  # Mon..Sat
        (date(2024, 6, 3), date(2024, 6, 9), 2),  # Mon..Sun
        (date(2024, 6, 8), date(2024, 6, 8), 1),  # Sat only
        (date(2024, 6, 9), date(2024, 6, 12), 1),  # Sun..Wed
        (date(2024, 6, 5), date(2024, 6, 5), 0),
    ],
)
def test_weekends_within_a_week(start, end, expected):
    assert count_non_business_days(DateRange(start, end)) == expected


def test_injected_holidays_are_counted():
    holidays_ = {date(2024, 6, 5)}
    assert count_non_business_days(DateRange(MON, date(2024, 6, 7)), holidays_.__contains__) == 1
    # a holiday on a weekend is still one day off
    holidays_ = {date(2024, 6, 8)}
    assert count_non_business_days(DateRange(MON, date(2024, 6, 9)), holidays_.__contains__) == 2


def test_range_is_not_mutated():
    r = DateRange(MON, date(2024, 6, 9))
    count_non_business_days(r)
    assert r == DateRange(MON, date(2024, 6, 9))


def test_us_holidays():
    us = holiday_lookup("US")
    assert us(date(2024, 7, 4))
    assert not us(date(2024, 7, 3))
    # Mon Jul 1 .. Sun Jul 7: Independence Day plus the weekend
    assert count_non_business_days(DateRange(date(2024, 7, 1), date(2024, 7, 7)), us) == 3
    assert not is_business_day(date(2024, 12, 25), us)
    assert is_business_day(date(2024, 12, 23), us)


def test_subdivision_code():
    tx = holiday_lookup("us-tx")
    assert tx(date(2024, 7, 4))


def test_unknown_jurisdiction():
    with pytest.raises(ConfigError):
        holiday_lookup("XX")

# tests/test_observance.py

from datetime import date, timedelta

import pytest

import holical
from holical.core.types import ObservanceShift
from holical.engines.observance import apply_shift, is_weekend

SAT = date(2024, 8, 3)
SUN = date(2024, 8, 4)
WED = date(2024, 7, 31)


@pytest.mark.parametrize(
    "d,shift,expected",
    [
        (SAT, ObservanceShift.NONE, SAT),
        (SUN, ObservanceShift.NONE, SUN),
        (SAT, ObservanceShift.NEXT_MONDAY, date(2024, 8, 5)),
        (SUN, ObservanceShift.NEXT_MONDAY, date(2024, 8, 5)),
        (SAT, ObservanceShift.NEAREST_WEEKDAY, date(2024, 8, 2)),
        (SUN, ObservanceShift.NEAREST_WEEKDAY, date(2024, 8, 5)),
        (WED, ObservanceShift.NEXT_MONDAY, WED),
        (WED, ObservanceShift.NEAREST_WEEKDAY, WED),
    ],
)
def test_apply_shift(d, shift, expected):
    assert apply_shift(d, shift) == expected


def test_shifted_dates_are_weekdays():
    d = date(2024, 1, 1)
    for _ in range(14):
        for shift in (ObservanceShift.NEXT_MONDAY, ObservanceShift.NEAREST_WEEKDAY):
            out = apply_shift(d, shift)
            assert not is_weekend(out)
            assert abs((out - d).days) <= 2
        d += timedelta(days=1)


def test_is_weekend():
    assert is_weekend(SAT) and is_weekend(SUN)
    assert not is_weekend(WED)


def test_us_independence_day_observed():
    hs = holical.compute("US", 2026)         # Saturday
    h = hs.get("independenceDay")
    assert h.date == date(2026, 7, 3)
    assert h.actual_date == date(2026, 7, 4)
    assert h.observed

    h = holical.compute("US", 2027).get("independenceDay")   # Sunday
    assert h.date == date(2027, 7, 5)


def test_us_new_year_observed_in_prior_year():
    # 2022-01-01 is a Saturday; the observed day is reported under 2022.
    h = holical.compute("US", 2022).get("newYearsDay")
    assert h.date == date(2021, 12, 31)
    assert h.actual_date == date(2022, 1, 1)


def test_canada_day_next_monday():
    # 2023-07-01 is a Saturday
    assert holical.compute("CA", 2023).get("canadaDay").date == date(2023, 7, 3)
    assert holical.compute("CA", 2024).get("canadaDay").date == date(2024, 7, 1)

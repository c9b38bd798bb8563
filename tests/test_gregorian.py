# tests/test_gregorian.py

from datetime import date, timedelta

import pytest

from holical.core.errors import InvalidDateError, InvalidRuleError, RuleUnsatisfiableError
from holical.core.types import (
    FRIDAY,
    LAST,
    MONDAY,
    THURSDAY,
    FixedDate,
    NthWeekday,
    WeekdayRelative,
)
from holical.engines.gregorian import GregorianRuleEvaluator, weekdays_in_month

ev = GregorianRuleEvaluator()


def test_fixed_date():
    assert ev.evaluate(FixedDate(7, 1), 2024) == date(2024, 7, 1)


def test_fixed_date_leap_day():
    assert ev.evaluate(FixedDate(2, 29), 2024) == date(2024, 2, 29)
    with pytest.raises(InvalidDateError):
        ev.evaluate(FixedDate(2, 29), 2023)


def test_fixed_date_impossible_day():
    with pytest.raises(InvalidDateError):
        ev.evaluate(FixedDate(4, 31), 2024)


def test_nth_weekday_ordinal_property():
    for year in range(1990, 2031):
        for month in range(1, 13):
            for weekday in range(7):
                for ordinal in (1, 2, 3, 4):
                    d = ev.evaluate(NthWeekday(month, weekday, ordinal), year)
                    assert d.weekday() == weekday
                    assert (d.year, d.month) == (year, month)
                    assert (d.day - 1) // 7 + 1 == ordinal


def test_last_weekday_property():
    for year in range(2000, 2011):
        for month in range(1, 13):
            for weekday in range(7):
                d = ev.evaluate(NthWeekday(month, weekday, LAST), year)
                assert d.weekday() == weekday
                assert d.month == month
                assert (d + timedelta(days=7)).month != month


def test_known_nth_weekdays():
    assert ev.evaluate(NthWeekday(2, MONDAY, 3), 2009) == date(2009, 2, 16)
    assert ev.evaluate(NthWeekday(8, FRIDAY, 3), 2024) == date(2024, 8, 16)
    assert ev.evaluate(NthWeekday(11, THURSDAY, 4), 2024) == date(2024, 11, 28)
    assert ev.evaluate(NthWeekday(5, MONDAY, LAST), 2024) == date(2024, 5, 27)


def test_fifth_weekday_unsatisfiable():
    # February 2021 starts on a Monday and has exactly four Mondays
    assert len(weekdays_in_month(2021, 2, MONDAY)) == 4
    with pytest.raises(RuleUnsatisfiableError):
        ev.evaluate(NthWeekday(2, MONDAY, 5), 2021)


def test_fifth_weekday_when_present():
    # Leap February 2016 starts on a Monday: five Mondays
    assert ev.evaluate(NthWeekday(2, MONDAY, 5), 2016) == date(2016, 2, 29)


@pytest.mark.parametrize(
    "year,expected",
    [
        (2021, date(2021, 5, 24)),   # 24 May is a Monday
        (2024, date(2024, 5, 20)),
        (2025, date(2025, 5, 19)),
    ],
)
def test_weekday_on_or_before(year, expected):
    assert ev.evaluate(WeekdayRelative(5, 24, MONDAY, "on_or_before"), year) == expected


def test_weekday_on_or_after():
    assert ev.evaluate(WeekdayRelative(11, 22, THURSDAY, "on_or_after"), 2024) == date(2024, 11, 28)
    assert ev.evaluate(WeekdayRelative(11, 28, THURSDAY, "on_or_after"), 2024) == date(2024, 11, 28)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: FixedDate(13, 1),
        lambda: FixedDate(0, 1),
        lambda: FixedDate(1, 32),
        lambda: NthWeekday(1, 7, 1),
        lambda: NthWeekday(1, MONDAY, 0),
        lambda: NthWeekday(1, MONDAY, 6),
        lambda: WeekdayRelative(5, 24, MONDAY, "nearest"),
    ],
)
def test_rule_validation(factory):
    with pytest.raises(InvalidRuleError):
        factory()


def test_not_a_gregorian_rule():
    with pytest.raises(TypeError):
        ev.evaluate("third monday", 2024)

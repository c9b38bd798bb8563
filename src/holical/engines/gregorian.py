"""
holical.engines.gregorian
-------------------------
Fixed-date and weekday rules evaluated against a Gregorian year.
"""

from __future__ import annotations

import calendar as pycal
from datetime import date, timedelta
from typing import List, Optional, Union

from ..core.errors import InvalidDateError, RuleUnsatisfiableError
from ..core.time import TimezoneAnchor
from ..core.types import LAST, WEEKDAY_NAMES, FixedDate, NthWeekday, WeekdayRelative

GregorianRule = Union[FixedDate, NthWeekday, WeekdayRelative]


def _date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"{year:04d}-{month:02d}-{day:02d} is not a valid date: {e}") from e


def weekdays_in_month(year: int, month: int, weekday: int) -> List[date]:
    """All dates of (year, month) falling on `weekday` (0=Mon..6=Sun)."""
    first = _date(year, month, 1)
    n_days = pycal.monthrange(year, month)[1]
    offset = (weekday - first.weekday()) % 7
    return [first + timedelta(days=k) for k in range(offset, n_days, 7)]


def nth_weekday(year: int, month: int, weekday: int, ordinal: int) -> date:
    hits = weekdays_in_month(year, month, weekday)
    if ordinal == LAST:
        return hits[-1]
    if ordinal > len(hits):
        raise RuleUnsatisfiableError(
            f"No {ordinal}. {WEEKDAY_NAMES[weekday]} in {year:04d}-{month:02d} "
            f"(only {len(hits)} occurrences)"
        )
    return hits[ordinal - 1]


def weekday_on_or_before(d: date, weekday: int) -> date:
    return d - timedelta(days=(d.weekday() - weekday) % 7)


def weekday_on_or_after(d: date, weekday: int) -> date:
    return d + timedelta(days=(weekday - d.weekday()) % 7)


class GregorianRuleEvaluator:
    """Pure evaluator; holds no state."""

    def evaluate(self, rule: GregorianRule, year: int, anchor: Optional[TimezoneAnchor] = None) -> date:
        # Dates are civil dates in the anchor's zone, so the anchor does not
        # change the arithmetic.
        if isinstance(rule, FixedDate):
            return _date(year, rule.month, rule.day)
        if isinstance(rule, NthWeekday):
            return nth_weekday(year, rule.month, rule.weekday, rule.ordinal)
        if isinstance(rule, WeekdayRelative):
            ref = _date(year, rule.month, rule.day)
            if rule.direction == "on_or_before":
                return weekday_on_or_before(ref, rule.weekday)
            return weekday_on_or_after(ref, rule.weekday)
        raise TypeError(f"Not a Gregorian rule: {type(rule)}")

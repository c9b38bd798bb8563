"""
holical.engines.lunisolar
-------------------------
Gregorian-anchored conversion of lunisolar dates.

A lunisolar year straddles two Gregorian years, so "1 Tishrei in 2024" needs a
year resolution step before the calendar arithmetic can run:

  1. take the lunisolar year in effect on 1 January of the anchor year;
  2. convert the label in that year;
  3. under YearPolicy.REANCHOR, if the result precedes the anchor year,
     convert again in the following lunisolar year.

The result may still fall after the anchor year when the label does not occur
in it at all (e.g. 10 Tevet in 2024); callers decide how to report that.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.errors import InvalidCalendarDateError, UnsupportedYearError
from ..core.registry import CalendarRegistry
from ..core.time import MAX_YEAR, MIN_YEAR, from_jdn, to_jdn
from ..core.types import CalendarDate, LunisolarDate, YearPolicy
from .interfaces import LunisolarCalendar

logger = logging.getLogger(__name__)


class LunisolarCalendarConverter:
    def __init__(self, calendars: CalendarRegistry, *, policy: YearPolicy = YearPolicy.REANCHOR):
        self.calendars = calendars
        self.policy = policy

    def calendar(self, name: str) -> LunisolarCalendar:
        return self.calendars.get(name)

    def year_in_effect(self, calendar: str, d: date) -> int:
        """Lunisolar year containing the Gregorian date `d`."""
        return self.calendar(calendar).from_jdn(to_jdn(d))["year"]

    def convert(
        self,
        calendar: str,
        year: int,
        month: int,
        day: int,
        is_leap_month: bool = False,
        *,
        policy: Optional[YearPolicy] = None,
    ) -> date:
        """Gregorian date of (month, day) for the Gregorian anchor `year`."""
        if not (MIN_YEAR <= year <= MAX_YEAR):
            raise UnsupportedYearError(f"Gregorian year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
        policy = policy or self.policy
        cal = self.calendar(calendar)

        jan1 = to_jdn(date(year, 1, 1))
        lyear = self.year_in_effect(calendar, date(year, 1, 1))
        jdn = cal.to_jdn(lyear, month, day, is_leap_month)

        if jdn < jan1 and policy == YearPolicy.REANCHOR:
            logger.debug(
                "%s %d/%d of %d precedes %d; reanchoring to %d",
                calendar, month, day, lyear, year, lyear + 1,
            )
            lyear += 1
            jdn = cal.to_jdn(lyear, month, day, is_leap_month)

        return self._to_date(jdn)

    def evaluate(self, rule: LunisolarDate, year: int, *, policy: Optional[YearPolicy] = None) -> date:
        return self.convert(rule.calendar, year, rule.month, rule.day, rule.is_leap_month, policy=policy)

    def to_gregorian(self, calendar: str, lyear: int, month: int, day: int, is_leap_month: bool = False) -> date:
        """Direct conversion of a fully specified lunisolar date."""
        return self._to_date(self.calendar(calendar).to_jdn(lyear, month, day, is_leap_month))

    def from_gregorian(self, d: date, calendar: str = "hebrew") -> CalendarDate:
        cal = self.calendar(calendar)
        res = cal.from_jdn(to_jdn(d))
        return CalendarDate(
            calendar=calendar,
            year=res["year"],
            month=res["month"],
            day=res["day"],
            is_leap_month=res["is_leap_month"],
            month_name=cal.month_name(res["year"], res["month"], res["is_leap_month"]),
        )

    @staticmethod
    def _to_date(jdn: int) -> date:
        try:
            return from_jdn(jdn)
        except ValueError as e:
            raise InvalidCalendarDateError(f"JDN {jdn} is outside the Gregorian date range") from e

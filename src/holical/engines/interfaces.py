"""
holical.engines.interfaces
--------------------------
Boundary between the holiday engine and the calendar arithmetic behind it.

All calendars exchange days as Julian Day Numbers (JDN), so an
implementation never needs to know about `datetime.date` ranges or timezones.
"""

from __future__ import annotations

from typing import Any, Dict, List, Protocol, Tuple


class LunisolarCalendar(Protocol):
    """
    A lunisolar calendar with civil month labels 1..12 and at most one
    intercalary month per year, addressed by (month, is_leap_month=True).
    """
    name: str

    def months(self, year: int) -> List[Tuple[int, bool, int]]:
        """
        Chronological month table of `year`:
        [(month_label, is_leap_month, length_in_days), ...]
        """
        ...

    def to_jdn(self, year: int, month: int, day: int, is_leap_month: bool = False) -> int:
        """Lunisolar label -> JDN. Raises InvalidCalendarDateError on bad labels."""
        ...

    def from_jdn(self, jdn: int) -> Dict[str, Any]:
        """
        JDN -> label dict with keys 'year', 'month', 'day', 'is_leap_month'.
        """
        ...

    def month_name(self, year: int, month: int, is_leap_month: bool = False) -> str:
        ...

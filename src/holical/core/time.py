from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import UnknownTimezoneError

MIN_YEAR = 1
MAX_YEAR = 9999


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1

@dataclass(frozen=True)
class TimezoneAnchor:
    """A resolved IANA zone. Holiday dates are civil dates in this zone."""
    name: str
    tz: tzinfo

    def midnight(self, d: date) -> datetime:
        """Local start of the civil day `d`."""
        return datetime.combine(d, time(0, 0), tzinfo=self.tz)


UTC_ANCHOR = TimezoneAnchor(name="UTC", tz=timezone.utc)


@lru_cache(maxsize=None)
def resolve_timezone(name: str) -> TimezoneAnchor:
    if name == UTC_ANCHOR.name:
        return UTC_ANCHOR
    try:
        tz = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimezoneError(f"Unknown timezone '{name}'") from e
    return TimezoneAnchor(name=name, tz=tz)

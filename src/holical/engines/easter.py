"""
holical.engines.easter
----------------------
Gregorian computus (anonymous Meeus/Jones/Butcher congruences).
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict

from ..core.errors import UnsupportedYearError
from ..core.time import MAX_YEAR
from ..core.types import EasterOffset

# First year after the 1582 reform with a full Gregorian computus.
FIRST_GREGORIAN_YEAR = 1583


def _check_year(year: int) -> None:
    if year < FIRST_GREGORIAN_YEAR:
        raise UnsupportedYearError(
            f"Gregorian Easter is defined from {FIRST_GREGORIAN_YEAR}, got {year}"
        )
    if year > MAX_YEAR:
        raise UnsupportedYearError(f"Year {year} is beyond {MAX_YEAR}")


def computus(year: int) -> Dict[str, Any]:
    """Intermediate quantities of the computus, plus the resulting date."""
    _check_year(year)
    a = year % 19                       # golden number - 1
    b, c = divmod(year, 100)            # century, year of century
    d, e = divmod(b, 4)
    f = (b + 8) // 25                   # lunar (Metonic) correction
    g = (b - f + 1) // 3                # solar correction
    h = (19 * a + b - d - g + 15) % 30  # epact: days from equinox moon to full moon
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # days from full moon to Sunday
    m = (a + 11 * h + 22 * l) // 451      # 29/30 April exceptions
    month, day0 = divmod(h + l - 7 * m + 114, 31)
    return {
        "year": year,
        "golden_number": a + 1,
        "century": b,
        "epact": h,
        "sunday_offset": l,
        "correction": m,
        "date": date(year, month, day0 + 1),
    }


def easter_sunday(year: int) -> date:
    return computus(year)["date"]


class EasterComputer:
    def easter_sunday(self, year: int) -> date:
        return easter_sunday(year)

    def evaluate(self, rule: EasterOffset, year: int) -> date:
        return easter_sunday(year) + timedelta(days=rule.days)

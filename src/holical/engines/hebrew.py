"""
holical.engines.hebrew
----------------------
Arithmetic Hebrew calendar.

Years are Anno Mundi. Months use the civil numbering starting at Tishrei:

    1 Tishrei   4 Tevet    7 Nisan    10 Tammuz
    2 Cheshvan  5 Shevat   8 Iyar     11 Av
    3 Kislev    6 Adar     9 Sivan    12 Elul

In a leap year the intercalary month Adar I is labelled (6, is_leap_month=True)
and precedes Adar II, labelled (6, False). Holidays "in Adar" (Purim) are thus
kept in Adar II without special-casing.

The year start follows the molad of Tishrei counted in parts
(1 hour = 1080 parts) plus the four postponement rules; everything else is
integer day counting from the epoch 1 Tishrei AM 1 = JDN 347998.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Tuple

from ..core.errors import InvalidCalendarDateError

HEBREW_EPOCH_JDN = 347998

PARTS_PER_HOUR = 1080
PARTS_PER_DAY = 24 * PARTS_PER_HOUR                # 25920
# Mean lunation = 29d 12h 793p; beyond whole days: 13753 parts.
LUNATION_DAYS = 29
LUNATION_PARTS = 12 * PARTS_PER_HOUR + 793
# Molad of Tishrei AM 1 (BaHaRaD: 5h 204p) moved forward by 6h so that the
# molad zaken rule becomes a plain floor.
MOLAD_BEHARAD_SHIFTED = 5 * PARTS_PER_HOUR + 204 + 6 * PARTS_PER_HOUR  # 12084

# Mean year of the 19-year cycle: 235 lunations / 19 years, in days.
MEAN_YEAR_NUM = 35975351
MEAN_YEAR_DEN = 98496

TISHREI, CHESHVAN, KISLEV, TEVET, SHEVAT, ADAR = 1, 2, 3, 4, 5, 6
NISAN, IYAR, SIVAN, TAMMUZ, AV, ELUL = 7, 8, 9, 10, 11, 12

MONTH_NAMES = {
    1: "Tishrei", 2: "Cheshvan", 3: "Kislev", 4: "Tevet", 5: "Shevat", 6: "Adar",
    7: "Nisan", 8: "Iyar", 9: "Sivan", 10: "Tammuz", 11: "Av", 12: "Elul",
}

YEAR_KINDS = {353: "deficient", 354: "regular", 355: "complete",
              383: "deficient", 384: "regular", 385: "complete"}


def is_leap_year(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17, 19 of the 19-year cycle."""
    return (7 * year + 1) % 19 < 7


def months_elapsed(year: int) -> int:
    """Lunations from the epoch to Tishrei of `year`."""
    return (235 * year - 234) // 19


def elapsed_days(year: int) -> int:
    """Days from the epoch to the molad-based start of `year`, after the
    molad zaken and lo ADU Rosh postponements."""
    months = months_elapsed(year)
    parts = MOLAD_BEHARAD_SHIFTED + LUNATION_PARTS * months
    days = LUNATION_DAYS * months + parts // PARTS_PER_DAY
    # Rosh Hashanah may not fall on Sunday, Wednesday or Friday.
    if (3 * (days + 1)) % 7 < 3:
        days += 1
    return days


def year_length_correction(year: int) -> int:
    """GaTaRaD / BeTUTaKPaT postponements: keep year lengths legal."""
    ny0 = elapsed_days(year - 1)
    ny1 = elapsed_days(year)
    ny2 = elapsed_days(year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


@lru_cache(maxsize=4096)
def new_year_jdn(year: int) -> int:
    """JDN of 1 Tishrei of `year`."""
    return HEBREW_EPOCH_JDN + elapsed_days(year) + year_length_correction(year)


def days_in_year(year: int) -> int:
    return new_year_jdn(year + 1) - new_year_jdn(year)


def month_table(year: int) -> List[Tuple[int, bool, int]]:
    """Chronological [(month, is_leap_month, length)] for `year`."""
    n = days_in_year(year)
    cheshvan = 30 if n % 10 == 5 else 29
    kislev = 29 if n % 10 == 3 else 30
    table = [
        (TISHREI, False, 30),
        (CHESHVAN, False, cheshvan),
        (KISLEV, False, kislev),
        (TEVET, False, 29),
        (SHEVAT, False, 30),
    ]
    if is_leap_year(year):
        table.append((ADAR, True, 30))
    table += [
        (ADAR, False, 29),
        (NISAN, False, 30),
        (IYAR, False, 29),
        (SIVAN, False, 30),
        (TAMMUZ, False, 29),
        (AV, False, 30),
        (ELUL, False, 29),
    ]
    return table


@dataclass(frozen=True)
class HebrewCalendarParams:
    epoch_jdn: int = HEBREW_EPOCH_JDN
    min_year: int = 1

    def __post_init__(self) -> None:
        if self.min_year < 1:
            raise ValueError("min_year must be >= 1")


class HebrewCalendar:
    """
    Implements the LunisolarCalendar protocol for the Hebrew calendar.
    """
    name = "hebrew"

    def __init__(self, params: HebrewCalendarParams = HebrewCalendarParams()):
        self.p = params

    # ---------------------------------------------------------
    # Protocol Methods
    # ---------------------------------------------------------

    def months(self, year: int) -> List[Tuple[int, bool, int]]:
        self._check_year(year)
        return month_table(year)

    def month_name(self, year: int, month: int, is_leap_month: bool = False) -> str:
        if month == ADAR and is_leap_year(year):
            return "Adar I" if is_leap_month else "Adar II"
        return MONTH_NAMES[month]

    def to_jdn(self, year: int, month: int, day: int, is_leap_month: bool = False) -> int:
        self._check_year(year)
        offset = 0
        for m, leap, length in month_table(year):
            if (m, leap) == (month, is_leap_month):
                if not (1 <= day <= length):
                    raise InvalidCalendarDateError(
                        f"{self.month_name(year, month, is_leap_month)} {year} has {length} days, got day {day}"
                    )
                return new_year_jdn(year) + offset + day - 1
            offset += length
        if is_leap_month:
            raise InvalidCalendarDateError(f"Hebrew year {year} is not a leap year; month {month} has no leap instance")
        raise InvalidCalendarDateError(f"Invalid Hebrew month {month}")

    def from_jdn(self, jdn: int) -> Dict[str, Any]:
        if jdn < self.p.epoch_jdn:
            raise InvalidCalendarDateError(f"JDN {jdn} precedes the Hebrew epoch")
        # Estimate from the mean year, then correct by at most one year.
        year = (MEAN_YEAR_DEN * (jdn - self.p.epoch_jdn)) // MEAN_YEAR_NUM + 1
        while new_year_jdn(year) > jdn:
            year -= 1
        while new_year_jdn(year + 1) <= jdn:
            year += 1

        offset = jdn - new_year_jdn(year)
        for m, leap, length in month_table(year):
            if offset < length:
                return {"year": year, "month": m, "day": offset + 1, "is_leap_month": leap}
            offset -= length
        raise RuntimeError("unreachable")

    # ---------------------------------------------------------
    # Debug Helpers
    # ---------------------------------------------------------

    def debug_year(self, year: int) -> Dict[str, Any]:
        self._check_year(year)
        months = months_elapsed(year)
        parts = MOLAD_BEHARAD_SHIFTED - 6 * PARTS_PER_HOUR + LUNATION_PARTS * months
        molad_day = LUNATION_DAYS * months + parts // PARTS_PER_DAY
        molad_parts = parts % PARTS_PER_DAY
        n = days_in_year(year)
        return {
            "year": year,
            "leap": is_leap_year(year),
            "cycle_year": (year - 1) % 19 + 1,
            "months_elapsed": months,
            "molad": {
                "days_from_epoch": molad_day,
                "hours": molad_parts // PARTS_PER_HOUR,
                "parts": molad_parts % PARTS_PER_HOUR,
            },
            "elapsed_days": elapsed_days(year),
            "correction": year_length_correction(year),
            "new_year_jdn": new_year_jdn(year),
            "days_in_year": n,
            "kind": YEAR_KINDS[n],
            "months": [
                {"month": m, "is_leap_month": leap, "name": self.month_name(year, m, leap), "days": length}
                for m, leap, length in month_table(year)
            ],
        }

    def _check_year(self, year: int) -> None:
        if year < self.p.min_year:
            raise InvalidCalendarDateError(f"Hebrew year must be >= {self.p.min_year}, got {year}")

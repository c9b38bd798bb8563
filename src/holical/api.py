from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from .core.errors import UnsupportedYearError
from .core.registry import CalendarRegistry, RegionRegistry
from .core.time import MAX_YEAR, MIN_YEAR, TimezoneAnchor
from .core.time import resolve_timezone as _resolve_timezone
from .core.types import (
    CalendarDate,
    ComputedHoliday,
    EasterOffset,
    HolidayRule,
    HolidaySet,
    LunisolarDate,
    RegionProfile,
    YearPolicy,
)
from .engines.easter import easter_sunday as _easter_sunday
from .engines.holidays import EngineOptions, HolidayComputationEngine
from .engines.interfaces import LunisolarCalendar
from .engines.lunisolar import LunisolarCalendarConverter

_engine: Optional[HolidayComputationEngine] = None


def set_registries(
    regions: RegionRegistry,
    calendars: CalendarRegistry,
    *,
    options: EngineOptions = EngineOptions(),
) -> None:
    global _engine
    _engine = HolidayComputationEngine(
        regions, LunisolarCalendarConverter(calendars, policy=options.year_policy), options=options
    )


def set_options(options: EngineOptions) -> None:
    """Rebuild the default engine with new options over the same registries."""
    eng = _eng()
    set_registries(eng.regions, eng.lunisolar.calendars, options=options)


def _eng() -> HolidayComputationEngine:
    if _engine is None:
        raise RuntimeError("Holiday registries not initialized")
    return _engine


def engine() -> HolidayComputationEngine:
    return _eng()


# ============================================================
# Holidays
# ============================================================

def compute(region: str, year: int, *, locale: Optional[str] = None) -> HolidaySet:
    return _eng().compute(region, year, locale=locale)


def holidays_between(region: str, start: date, end: date, *, locale: Optional[str] = None) -> List[ComputedHoliday]:
    """All holidays of `region` dated within [start, end], in date order.

    A year's set may hold dates outside that year (observance shifts, lunisolar
    labels past 31 December), so the neighbouring years are scanned too.
    """
    if end < start:
        raise ValueError("end must not precede start")
    seen: Dict[Tuple[str, date], ComputedHoliday] = {}
    for year in range(max(MIN_YEAR, start.year - 1), min(MAX_YEAR, end.year + 1) + 1):
        try:
            hs = compute(region, year, locale=locale)
        except UnsupportedYearError:
            if start.year <= year <= end.year:
                raise
            continue
        for h in hs.between(start, end):
            seen.setdefault((h.key, h.date), h)
    return sorted(seen.values(), key=lambda h: (h.date, h.key))


def list_regions() -> List[str]:
    return _eng().regions.list()


def region_info(region: str) -> Dict[str, Any]:
    p = _eng().regions.get(region)
    return {
        "code": p.code,
        "name": p.name,
        "timezone": p.timezone,
        "default_locale": p.default_locale,
        "parent": p.parent,
        "holidays": p.keys(),
    }


def register_region(profile: RegionProfile, *, overwrite: bool = False) -> None:
    _resolve_timezone(profile.timezone)
    _eng().regions.register(profile, overwrite=overwrite)


# ============================================================
# Rules and calendars
# ============================================================

def easter_sunday(year: int) -> date:
    return _easter_sunday(year)


def evaluate_rule(rule: HolidayRule, year: int, *, timezone: str = "UTC") -> date:
    """Unshifted date of a single rule, outside any region."""
    eng = _eng()
    anchor = _resolve_timezone(timezone)
    if isinstance(rule, EasterOffset):
        return eng.easter.evaluate(rule, year)
    if isinstance(rule, LunisolarDate):
        return eng.lunisolar.evaluate(rule, year)
    return eng.gregorian.evaluate(rule, year, anchor)


def to_gregorian(
    calendar: str,
    year: int,
    month: int,
    day: int,
    *,
    is_leap_month: bool = False,
    policy: Optional[YearPolicy] = None,
) -> date:
    """Gregorian date of a lunisolar (month, day) in Gregorian anchor `year`."""
    return _eng().lunisolar.convert(calendar, year, month, day, is_leap_month, policy=policy)


def from_gregorian(d: date, *, calendar: str = "hebrew") -> CalendarDate:
    return _eng().lunisolar.from_gregorian(d, calendar)


def list_calendars() -> List[str]:
    return _eng().lunisolar.calendars.list()


def register_calendar(name: str, calendar: LunisolarCalendar, *, overwrite: bool = False) -> None:
    _eng().lunisolar.calendars.register(name, calendar, overwrite=overwrite)


def resolve_timezone(name: str) -> TimezoneAnchor:
    return _resolve_timezone(name)

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Dict, Iterator, List, Literal, Mapping, Optional, Tuple, Union

from .errors import DuplicateHolidayKeyError, InvalidRuleError, UnknownLocaleError
from .time import resolve_timezone

# Weekdays follow date.weekday(): 0=Mon..6=Sun
MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

LAST = -1
ORDINALS = (1, 2, 3, 4, 5, LAST)


def _check_month(month: int) -> None:
    if not (1 <= month <= 12):
        raise InvalidRuleError(f"month must be in 1..12, got {month}")


def _check_weekday(weekday: int) -> None:
    if not (0 <= weekday <= 6):
        raise InvalidRuleError(f"weekday must be in 0..6 (Mon..Sun), got {weekday}")


class ObservanceShift(str, Enum):
    NONE = "none"
    NEXT_MONDAY = "next_monday"
    NEAREST_WEEKDAY = "nearest_weekday"


class HolidayType(str, Enum):
    OFFICIAL = "official"
    OBSERVANCE = "observance"
    SEASONAL = "seasonal"
    BANK = "bank"
    OTHER = "other"


class YearPolicy(str, Enum):
    """How a Gregorian anchor year picks the lunisolar year of a date.

    IN_EFFECT: use the lunisolar year in effect on 1 January, as-is.
    REANCHOR:  same, but recompute in the next lunisolar year when the
               result precedes the anchor year.
    """
    IN_EFFECT = "in_effect"
    REANCHOR = "reanchor"


# ============================================================
# Rules
# ============================================================

@dataclass(frozen=True)
class FixedDate:
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_month(self.month)
        if not (1 <= self.day <= 31):
            raise InvalidRuleError(f"day must be in 1..31, got {self.day}")


@dataclass(frozen=True)
class NthWeekday:
    """`ordinal`-th `weekday` of `month`; ordinal LAST (-1) is the final one."""
    month: int
    weekday: int
    ordinal: int

    def __post_init__(self) -> None:
        _check_month(self.month)
        _check_weekday(self.weekday)
        if self.ordinal not in ORDINALS:
            raise InvalidRuleError(f"ordinal must be one of {ORDINALS}, got {self.ordinal}")


@dataclass(frozen=True)
class WeekdayRelative:
    """Nearest `weekday` on or before / on or after `month`-`day`."""
    month: int
    day: int
    weekday: int
    direction: Literal["on_or_before", "on_or_after"] = "on_or_after"

    def __post_init__(self) -> None:
        _check_month(self.month)
        _check_weekday(self.weekday)
        if not (1 <= self.day <= 31):
            raise InvalidRuleError(f"day must be in 1..31, got {self.day}")
        if self.direction not in ("on_or_before", "on_or_after"):
            raise InvalidRuleError("direction must be 'on_or_before' or 'on_or_after'")


@dataclass(frozen=True)
class EasterOffset:
    days: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            raise InvalidRuleError(f"days must be an int, got {self.days!r}")


@dataclass(frozen=True)
class LunisolarDate:
    """A date in a named lunisolar calendar (civil month numbering)."""
    calendar: str
    month: int
    day: int
    is_leap_month: bool = False

    def __post_init__(self) -> None:
        _check_month(self.month)
        if not (1 <= self.day <= 30):
            raise InvalidRuleError(f"lunar day must be in 1..30, got {self.day}")
        if not self.calendar:
            raise InvalidRuleError("calendar name must not be empty")


HolidayRule = Union[FixedDate, NthWeekday, WeekdayRelative, EasterOffset, LunisolarDate]


# ============================================================
# Names
# ============================================================

@dataclass(frozen=True)
class LocalizedNames:
    """Immutable locale -> name table.

    Lookup tries the exact tag, then its language subtag ("fr_CH" -> "fr").
    """
    entries: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def of(cls, names: Mapping[str, str]) -> "LocalizedNames":
        return cls(tuple(sorted(names.items())))

    def as_dict(self) -> Dict[str, str]:
        return dict(self.entries)

    def locales(self) -> List[str]:
        return [loc for loc, _ in self.entries]

    def __contains__(self, locale: str) -> bool:
        return self._find(locale) is not None

    def _find(self, locale: str) -> Optional[str]:
        table = self.as_dict()
        if locale in table:
            return table[locale]
        lang = locale.replace("-", "_").split("_", 1)[0]
        return table.get(lang)

    def get(self, locale: str) -> str:
        name = self._find(locale)
        if name is None:
            raise UnknownLocaleError(
                f"No name for locale '{locale}'. Available: {self.locales()}"
            )
        return name


# ============================================================
# Descriptors and results
# ============================================================

@dataclass(frozen=True)
class HolidayDescriptor:
    key: str
    names: LocalizedNames
    rule: HolidayRule
    valid_from: Optional[int] = None
    valid_until: Optional[int] = None
    shift: ObservanceShift = ObservanceShift.NONE
    kind: HolidayType = HolidayType.OFFICIAL

    def __post_init__(self) -> None:
        if not self.key:
            raise InvalidRuleError("holiday key must not be empty")
        if (
            self.valid_from is not None
            and self.valid_until is not None
            and self.valid_until < self.valid_from
        ):
            raise InvalidRuleError(f"{self.key}: valid_until precedes valid_from")

    def applies_to(self, year: int) -> bool:
        if self.valid_from is not None and year < self.valid_from:
            return False
        if self.valid_until is not None and year > self.valid_until:
            return False
        return True


@dataclass(frozen=True)
class ComputedHoliday:
    key: str
    name: str
    date: date
    timezone: str
    kind: HolidayType = HolidayType.OFFICIAL
    actual_date: Optional[date] = None
    names: LocalizedNames = field(default_factory=LocalizedNames, compare=False)

    @property
    def observed(self) -> bool:
        """True when an observance shift moved the holiday."""
        return self.actual_date is not None and self.actual_date != self.date

    @property
    def start(self) -> datetime:
        return resolve_timezone(self.timezone).midnight(self.date)

    def name_in(self, locale: str) -> str:
        return self.names.get(locale)

    def to_dict(self) -> Dict[str, object]:
        return {
            "key": self.key,
            "name": self.name,
            "date": self.date.isoformat(),
            "timezone": self.timezone,
            "kind": self.kind.value,
            "observed": self.observed,
        }


class HolidaySet:
    """Holidays of one region and year, keyed by `key`, iterated by date."""

    def __init__(self, region: str, year: int, timezone: str):
        self.region = region
        self.year = year
        self.timezone = timezone
        self._by_key: Dict[str, ComputedHoliday] = {}

    def add(self, holiday: ComputedHoliday) -> None:
        if holiday.key in self._by_key:
            raise DuplicateHolidayKeyError(
                f"Holiday '{holiday.key}' already defined for {self.region} {self.year}",
                key=holiday.key,
            )
        self._by_key[holiday.key] = holiday

    def contains(self, key: str) -> bool:
        return key in self._by_key

    def get(self, key: str) -> Optional[ComputedHoliday]:
        return self._by_key.get(key)

    def all(self) -> List[ComputedHoliday]:
        return sorted(self._by_key.values(), key=lambda h: (h.date, h.key))

    def keys(self) -> List[str]:
        return [h.key for h in self.all()]

    def on(self, d: date) -> List[ComputedHoliday]:
        return [h for h in self.all() if h.date == d]

    def is_holiday(self, d: date) -> bool:
        return any(h.date == d for h in self._by_key.values())

    def between(self, start: date, end: date) -> List[ComputedHoliday]:
        """Holidays with start <= date <= end."""
        return [h for h in self.all() if start <= h.date <= end]

    def of_kind(self, kind: HolidayType) -> List[ComputedHoliday]:
        return [h for h in self.all() if h.kind == kind]

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[ComputedHoliday]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._by_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidaySet):
            return NotImplemented
        return (self.region, self.year, self.all()) == (other.region, other.year, other.all())

    def __repr__(self) -> str:
        return f"HolidaySet(region={self.region!r}, year={self.year}, n={len(self)})"


# ============================================================
# Regions
# ============================================================

@dataclass(frozen=True)
class RegionProfile:
    code: str
    name: str
    timezone: str
    holidays: Tuple[HolidayDescriptor, ...] = ()
    default_locale: str = "en"
    parent: Optional[str] = None

    def keys(self) -> List[str]:
        return [h.key for h in self.holidays]

    def derive(
        self,
        *,
        code: str,
        name: str,
        timezone: Optional[str] = None,
        default_locale: Optional[str] = None,
        add: Tuple[HolidayDescriptor, ...] = (),
        replace_by_key: Tuple[HolidayDescriptor, ...] = (),
        remove: Tuple[str, ...] = (),
    ) -> "RegionProfile":
        """Child profile: inherit this profile's descriptors, then remove,
        replace (by key) and append."""
        swaps = {h.key: h for h in replace_by_key}
        own = set(self.keys())
        missing = [k for k in list(swaps) + list(remove) if k not in own]
        if missing:
            raise KeyError(f"{code}: cannot override unknown holidays {missing} of {self.code}")

        inherited = tuple(swaps.get(h.key, h) for h in self.holidays if h.key not in remove)
        return replace(
            self,
            code=code,
            name=name,
            timezone=timezone or self.timezone,
            default_locale=default_locale or self.default_locale,
            holidays=inherited + tuple(add),
            parent=self.code,
        )


@dataclass(frozen=True)
class CalendarDate:
    """A resolved lunisolar date (year, civil month, leap marker, day)."""
    calendar: str
    year: int
    month: int
    day: int
    is_leap_month: bool = False
    month_name: str = ""

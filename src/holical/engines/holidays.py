"""
holical.engines.holidays
------------------------
The Orchestrator. Walks a region's descriptors for one year, dispatches each
rule to its evaluator, applies observance shifts and assembles a HolidaySet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..core.errors import HolicalError, UnsupportedYearError
from ..core.registry import RegionRegistry
from ..core.time import MAX_YEAR, MIN_YEAR, TimezoneAnchor, resolve_timezone
from ..core.types import (
    ComputedHoliday,
    EasterOffset,
    FixedDate,
    HolidayDescriptor,
    HolidaySet,
    LunisolarDate,
    NthWeekday,
    WeekdayRelative,
    YearPolicy,
)
from .easter import EasterComputer
from .gregorian import GregorianRuleEvaluator
from .lunisolar import LunisolarCalendarConverter
from .observance import apply_shift

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineOptions:
    """
    year_policy: lunisolar year resolution (see YearPolicy).
    """
    year_policy: YearPolicy = YearPolicy.REANCHOR


class HolidayComputationEngine:
    def __init__(
        self,
        regions: RegionRegistry,
        lunisolar: LunisolarCalendarConverter,
        *,
        options: EngineOptions = EngineOptions(),
    ):
        self.regions = regions
        self.lunisolar = lunisolar
        self.options = options
        self.gregorian = GregorianRuleEvaluator()
        self.easter = EasterComputer()

    def info(self) -> Dict[str, Any]:
        return {
            "regions": self.regions.list(),
            "calendars": self.lunisolar.calendars.list(),
            "year_policy": self.options.year_policy.value,
        }

    # ---------------------------------------------------------
    # Rule dispatch
    # ---------------------------------------------------------

    def evaluate(self, descriptor: HolidayDescriptor, year: int, anchor: TimezoneAnchor) -> date:
        """Unshifted date of `descriptor` in `year`."""
        rule = descriptor.rule
        if isinstance(rule, (FixedDate, NthWeekday, WeekdayRelative)):
            return self.gregorian.evaluate(rule, year, anchor)
        if isinstance(rule, EasterOffset):
            return self.easter.evaluate(rule, year)
        if isinstance(rule, LunisolarDate):
            d = self.lunisolar.evaluate(rule, year, policy=self.options.year_policy)
            if d.year != year:
                # Reported under the requested year; the date itself is kept.
                logger.warning(
                    "%s: %s %d/%d falls on %s, outside %d",
                    descriptor.key, rule.calendar, rule.month, rule.day, d.isoformat(), year,
                )
            return d
        raise TypeError(f"Unknown rule type: {type(rule)}")

    # ---------------------------------------------------------
    # High-Level API
    # ---------------------------------------------------------

    def compute(self, region: str, year: int, *, locale: Optional[str] = None) -> HolidaySet:
        if not (MIN_YEAR <= year <= MAX_YEAR):
            raise UnsupportedYearError(f"Year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")

        profile = self.regions.get(region)
        anchor = resolve_timezone(profile.timezone)
        lang = locale or profile.default_locale
        out = HolidaySet(profile.code, year, profile.timezone)

        for desc in profile.holidays:
            if not desc.applies_to(year):
                logger.debug("%s %d: skipping %s (valid %s..%s)",
                             profile.code, year, desc.key, desc.valid_from, desc.valid_until)
                continue
            try:
                actual = self.evaluate(desc, year, anchor)
                out.add(
                    ComputedHoliday(
                        key=desc.key,
                        name=desc.names.get(lang),
                        date=apply_shift(actual, desc.shift),
                        timezone=anchor.name,
                        kind=desc.kind,
                        actual_date=actual,
                        names=desc.names,
                    )
                )
            except HolicalError as e:
                e.annotate(key=desc.key, rule=desc.rule)
                raise

        logger.debug("%s %d: %d holidays", profile.code, year, len(out))
        return out

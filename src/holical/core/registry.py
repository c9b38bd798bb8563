from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .errors import UnknownRegionError, UnsupportedCalendarError
from .types import RegionProfile
from ..engines.interfaces import LunisolarCalendar


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, LunisolarCalendar] = field(default_factory=dict)

    def get(self, name: str) -> LunisolarCalendar:
        if name not in self._calendars:
            raise UnsupportedCalendarError(
                f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}"
            )
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: LunisolarCalendar, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar


@dataclass
class RegionRegistry:
    """Read-only after bootstrap; `register` exists for catalog extensions."""
    _regions: Dict[str, RegionProfile] = field(default_factory=dict)

    def get(self, code: str) -> RegionProfile:
        if code not in self._regions:
            raise UnknownRegionError(f"Unknown region '{code}'. Available: {sorted(self._regions)}")
        return self._regions[code]

    def list(self) -> List[str]:
        return sorted(self._regions.keys())

    def register(self, profile: RegionProfile, *, overwrite: bool = False) -> None:
        if (not overwrite) and (profile.code in self._regions):
            raise KeyError(f"Region '{profile.code}' already exists. Use overwrite=True to replace.")
        self._regions[profile.code] = profile

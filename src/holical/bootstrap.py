from __future__ import annotations

from holical.catalog import ALL_REGIONS
from holical.core.registry import CalendarRegistry, RegionRegistry
from holical.engines.hebrew import HebrewCalendar


def build_calendars() -> CalendarRegistry:
    calendars = CalendarRegistry()
    calendars.register(HebrewCalendar.name, HebrewCalendar())
    return calendars


def build_regions() -> RegionRegistry:
    regions = RegionRegistry()
    for profile in ALL_REGIONS.values():
        regions.register(profile)
    return regions

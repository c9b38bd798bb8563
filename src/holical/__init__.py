"""holical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registries on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    compute,
    holidays_between,
    list_regions,
    region_info,
    register_region,
    easter_sunday,
    evaluate_rule,
    to_gregorian,
    from_gregorian,
    list_calendars,
    register_calendar,
    resolve_timezone,
    set_options,
)
from .core.errors import HolicalError
from .core.types import (
    ComputedHoliday,
    HolidayDescriptor,
    HolidaySet,
    HolidayType,
    ObservanceShift,
    RegionProfile,
    YearPolicy,
)
from .engines.holidays import EngineOptions

__all__ = [
    "compute",
    "holidays_between",
    "list_regions",
    "region_info",
    "register_region",
    "easter_sunday",
    "evaluate_rule",
    "to_gregorian",
    "from_gregorian",
    "list_calendars",
    "register_calendar",
    "resolve_timezone",
    "set_options",
    "HolicalError",
    "ComputedHoliday",
    "HolidayDescriptor",
    "HolidaySet",
    "HolidayType",
    "ObservanceShift",
    "RegionProfile",
    "YearPolicy",
    "EngineOptions",
]

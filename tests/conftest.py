import pytest

import holical
from holical.api import engine, set_options
from holical.bootstrap import build_calendars
from holical.core.registry import RegionRegistry
from holical.engines.holidays import EngineOptions, HolidayComputationEngine
from holical.engines.lunisolar import LunisolarCalendarConverter


@pytest.fixture
def make_engine():
    """Build an isolated engine over the given region profiles."""
    def _make(*profiles, options=EngineOptions()):
        regions = RegionRegistry()
        for p in profiles:
            regions.register(p)
        conv = LunisolarCalendarConverter(build_calendars(), policy=options.year_policy)
        return HolidayComputationEngine(regions, conv, options=options)
    return _make


@pytest.fixture
def default_options():
    """Restore the default engine options after a test changes them."""
    saved = engine().options
    yield holical
    set_options(saved)

# tests/test_api.py

from datetime import date

import pytest

import holical
from holical import api
from holical.catalog import fixed
from holical.core.errors import UnknownTimezoneError, UnsupportedCalendarError
from holical.core.types import EasterOffset, FixedDate, NthWeekday, MONDAY, RegionProfile, YearPolicy
from holical.engines.hebrew import HebrewCalendar
from holical.engines.holidays import EngineOptions


def test_evaluate_rule():
    assert holical.evaluate_rule(FixedDate(7, 1), 2024) == date(2024, 7, 1)
    assert holical.evaluate_rule(NthWeekday(9, MONDAY, 1), 2024, timezone="America/Toronto") == date(2024, 9, 2)
    assert holical.evaluate_rule(EasterOffset(-2), 2024) == date(2024, 3, 29)
    assert holical.easter_sunday(2024) == date(2024, 3, 31)


def test_set_options(default_options):
    holical.set_options(EngineOptions(year_policy=YearPolicy.IN_EFFECT))
    assert holical.compute("IL", 2024).get("roshHashanah").date == date(2023, 9, 16)
    assert api.engine().info()["year_policy"] == "in_effect"
    # Registries survive the rebuild
    assert holical.list_regions() == ["CA", "CA-PE", "CH", "CH-OW", "IL", "US"]


def test_register_region(monkeypatch, make_engine):
    monkeypatch.setattr(api, "_engine", make_engine())
    profile = RegionProfile(
        code="XX", name="Test", timezone="Europe/Berlin",
        holidays=(fixed("unityDay", {"en": "German Unity Day"}, 10, 3),),
    )
    holical.register_region(profile)
    assert holical.list_regions() == ["XX"]
    assert holical.compute("XX", 2024).get("unityDay").start.utcoffset().total_seconds() == 7200

    with pytest.raises(KeyError):
        holical.register_region(profile)
    holical.register_region(profile, overwrite=True)

    with pytest.raises(UnknownTimezoneError):
        holical.register_region(RegionProfile(code="YY", name="Bad", timezone="Mars/Olympus"))


def test_register_calendar(monkeypatch, make_engine):
    monkeypatch.setattr(api, "_engine", make_engine())
    assert holical.list_calendars() == ["hebrew"]
    holical.register_calendar("hebrew-alias", HebrewCalendar())
    assert holical.list_calendars() == ["hebrew", "hebrew-alias"]
    assert holical.to_gregorian("hebrew-alias", 2024, 1, 1) == date(2024, 10, 3)
    with pytest.raises(KeyError):
        holical.register_calendar("hebrew", HebrewCalendar())
    with pytest.raises(UnsupportedCalendarError):
        holical.to_gregorian("chinese", 2024, 1, 1)


def test_resolve_timezone_utc():
    assert holical.resolve_timezone("UTC").midnight(date(2024, 1, 1)).utcoffset().total_seconds() == 0

# tests/test_catalog.py

from datetime import date

import pytest

import holical
from holical.catalog import ALL_REGIONS, CANADA, PRINCE_EDWARD_ISLAND, fixed
from holical.core.errors import UnsupportedYearError
from holical.core.types import HolidayType


def _dates(region, year):
    return {h.key: h.date.isoformat() for h in holical.compute(region, year)}


EXPECTED_2024 = {
    "CA": {
        "newYearsDay": "2024-01-01",
        "goodFriday": "2024-03-29",
        "easterMonday": "2024-04-01",
        "canadaDay": "2024-07-01",
        "civicHoliday": "2024-08-05",
        "labourDay": "2024-09-02",
        "truthAndReconciliationDay": "2024-09-30",
        "thanksgivingDay": "2024-10-14",
        "remembranceDay": "2024-11-11",
        "christmasDay": "2024-12-25",
        "boxingDay": "2024-12-26",
    },
    "US": {
        "newYearsDay": "2024-01-01",
        "martinLutherKingDay": "2024-01-15",
        "washingtonsBirthday": "2024-02-19",
        "memorialDay": "2024-05-27",
        "juneteenth": "2024-06-19",
        "independenceDay": "2024-07-04",
        "laborDay": "2024-09-02",
        "columbusDay": "2024-10-14",
        "veteransDay": "2024-11-11",
        "thanksgivingDay": "2024-11-28",
        "christmasDay": "2024-12-25",
    },
    "IL": {
        "newYearsDay": "2024-01-01",
        "purim": "2024-03-24",
        "passover": "2024-04-23",
        "independenceDay": "2024-05-13",
        "shavuot": "2024-06-12",
        "roshHashanah": "2024-10-03",
        "yomKippur": "2024-10-12",
        "sukkot": "2024-10-17",
        "hanukkah": "2024-12-26",
        "tenthOfTevet": "2025-01-10",
    },
    "CH-OW": {
        "newYearsDay": "2024-01-01",
        "berchtoldsTag": "2024-01-02",
        "goodFriday": "2024-03-29",
        "easterMonday": "2024-04-01",
        "ascensionDay": "2024-05-09",
        "pentecostMonday": "2024-05-20",
        "corpusChristi": "2024-05-30",
        "swissNationalDay": "2024-08-01",
        "assumptionOfMary": "2024-08-15",
        "bruderKlausenFest": "2024-09-25",
        "allSaintsDay": "2024-11-01",
        "immaculateConception": "2024-12-08",
        "christmasDay": "2024-12-25",
        "stStephensDay": "2024-12-26",
    },
}


@pytest.mark.parametrize("region", sorted(EXPECTED_2024))
def test_catalog_2024(region):
    assert _dates(region, 2024) == EXPECTED_2024[region]


def test_every_region_computes():
    for code in ALL_REGIONS:
        for year in range(1990, 2041):
            hs = holical.compute(code, year)
            assert len(hs) > 0
            for h in hs:
                # Shifts move at most a day across the year boundary
                assert date(year - 1, 12, 30) <= h.date <= date(year + 1, 1, 31), (code, year, h)


def test_list_regions():
    assert holical.list_regions() == ["CA", "CA-PE", "CH", "CH-OW", "IL", "US"]


def test_prince_edward_island_profile():
    info = holical.region_info("CA-PE")
    assert info["parent"] == "CA"
    assert info["timezone"] == "America/Halifax"
    assert "civicHoliday" not in info["holidays"]
    assert {"islanderDay", "victoriaDay", "goldCupParadeDay"} <= set(info["holidays"])

    hs = holical.compute("CA-PE", 2024)
    assert hs.get("victoriaDay").date == date(2024, 5, 20)
    assert hs.get("goldCupParadeDay").date == date(2024, 8, 16)
    assert hs.timezone == "America/Halifax"


def test_dominion_day_becomes_canada_day():
    assert holical.compute("CA", 1982).contains("dominionDay")
    assert not holical.compute("CA", 1982).contains("canadaDay")
    assert holical.compute("CA", 1983).contains("canadaDay")
    assert not holical.compute("CA", 1983).contains("dominionDay")


def test_swiss_national_day_kind():
    assert holical.compute("CH", 1990).get("swissNationalDay").kind == HolidayType.OBSERVANCE
    assert holical.compute("CH", 2000).get("swissNationalDay").kind == HolidayType.OFFICIAL
    assert holical.compute("CH", 1898).get("swissNationalDay") is None


def test_swiss_default_locale():
    assert holical.compute("CH-OW", 2024).get("christmasDay").name == "Weihnachten"
    assert holical.compute("CH-OW", 2024, locale="fr_CH").get("christmasDay").name == "Noël"


def test_israel_hebrew_names():
    assert holical.compute("IL", 2024, locale="he").get("passover").name == "פסח"


def test_derive_replace_and_remove():
    child = CANADA.derive(
        code="XX",
        name="Test",
        replace_by_key=(fixed("boxingDay", {"en": "Boxing Day"}, 12, 27),),
        remove=("easterMonday",),
    )
    assert child.parent == "CA"
    assert child.timezone == CANADA.timezone
    assert "easterMonday" not in child.keys()
    assert child.keys().index("boxingDay") == CANADA.keys().index("boxingDay") - 1
    assert [h for h in child.holidays if h.key == "boxingDay"][0].rule.day == 27


def test_derive_unknown_key():
    with pytest.raises(KeyError):
        CANADA.derive(code="XX", name="Test", remove=("notAHoliday",))
    with pytest.raises(KeyError):
        PRINCE_EDWARD_ISLAND.derive(code="XX", name="Test", remove=("civicHoliday",))


def test_holidays_between_spans_years():
    hs = holical.holidays_between("US", date(2024, 12, 20), date(2025, 1, 25))
    assert [(h.key, h.date) for h in hs] == [
        ("christmasDay", date(2024, 12, 25)),
        ("newYearsDay", date(2025, 1, 1)),
        ("martinLutherKingDay", date(2025, 1, 20)),
    ]
    with pytest.raises(ValueError):
        holical.holidays_between("US", date(2025, 1, 1), date(2024, 1, 1))


def test_holidays_between_includes_neighbouring_sets():
    # 2022-01-01 is a Saturday; its observed day sits in the 2022 set
    hs = holical.holidays_between("US", date(2021, 12, 1), date(2021, 12, 31))
    assert [(h.key, h.date) for h in hs] == [
        ("christmasDay", date(2021, 12, 24)),
        ("newYearsDay", date(2021, 12, 31)),
    ]


def test_holidays_between_lunisolar_spill_listed_once():
    hs = holical.holidays_between("IL", date(2024, 1, 1), date(2025, 12, 31))
    assert [h.date for h in hs if h.key == "tenthOfTevet"] == [date(2025, 1, 10)]
    pairs = [(h.key, h.date) for h in hs]
    assert len(pairs) == len(set(pairs))
    assert all(date(2024, 1, 1) <= h.date <= date(2025, 12, 31) for h in hs)


def test_holidays_between_reanchor_gap():
    # Under REANCHOR, 10 Tevet 5784 (2023-12-22) belongs to no year's set
    hs = holical.holidays_between("IL", date(2023, 12, 1), date(2023, 12, 31))
    assert [(h.key, h.date) for h in hs] == [("hanukkah", date(2023, 12, 8))]


def test_holidays_between_first_gregorian_year():
    hs = holical.holidays_between("CA", date(1583, 1, 1), date(1583, 12, 31))
    assert "goodFriday" in [h.key for h in hs]
    with pytest.raises(UnsupportedYearError):
        holical.holidays_between("CA", date(1582, 12, 1), date(1583, 1, 31))

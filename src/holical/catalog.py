"""
holical.catalog
---------------
Static region catalog. Pure data: every region is a RegionProfile built from
the helpers below; nothing here computes dates.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .core.types import (
    FRIDAY,
    LAST,
    MONDAY,
    THURSDAY,
    EasterOffset,
    FixedDate,
    HolidayDescriptor,
    HolidayType,
    LocalizedNames,
    LunisolarDate,
    NthWeekday,
    ObservanceShift,
    RegionProfile,
    WeekdayRelative,
)
from .engines import hebrew as heb

OFFICIAL = HolidayType.OFFICIAL
OBSERVANCE = HolidayType.OBSERVANCE
OTHER = HolidayType.OTHER


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def _desc(
    key: str,
    names: Mapping[str, str],
    rule,
    *,
    since: Optional[int] = None,
    until: Optional[int] = None,
    shift: ObservanceShift = ObservanceShift.NONE,
    kind: HolidayType = OFFICIAL,
) -> HolidayDescriptor:
    return HolidayDescriptor(
        key=key,
        names=LocalizedNames.of(names),
        rule=rule,
        valid_from=since,
        valid_until=until,
        shift=shift,
        kind=kind,
    )


def fixed(key: str, names: Mapping[str, str], month: int, day: int, **kw) -> HolidayDescriptor:
    return _desc(key, names, FixedDate(month, day), **kw)


def nth_weekday(key: str, names: Mapping[str, str], month: int, weekday: int, ordinal: int, **kw) -> HolidayDescriptor:
    return _desc(key, names, NthWeekday(month, weekday, ordinal), **kw)


def weekday_relative(
    key: str, names: Mapping[str, str], month: int, day: int, weekday: int, direction: str, **kw
) -> HolidayDescriptor:
    return _desc(key, names, WeekdayRelative(month, day, weekday, direction), **kw)


def easter(key: str, names: Mapping[str, str], days: int, **kw) -> HolidayDescriptor:
    return _desc(key, names, EasterOffset(days), **kw)


def hebrew(key: str, names: Mapping[str, str], month: int, day: int, *, leap: bool = False, **kw) -> HolidayDescriptor:
    return _desc(key, names, LunisolarDate("hebrew", month, day, is_leap_month=leap), **kw)


# ============================================================
# CANADA
# ============================================================

CANADA = RegionProfile(
    code="CA",
    name="Canada",
    timezone="America/Toronto",
    default_locale="en",
    holidays=(
        fixed("newYearsDay", {"en": "New Year's Day", "fr": "Jour de l'An"}, 1, 1),
        easter("goodFriday", {"en": "Good Friday", "fr": "Vendredi saint"}, -2),
        easter("easterMonday", {"en": "Easter Monday", "fr": "Lundi de Pâques"}, 1, kind=OTHER),
        fixed("dominionDay", {"en": "Dominion Day", "fr": "Fête du Dominion"}, 7, 1,
              since=1879, until=1982),
        fixed("canadaDay", {"en": "Canada Day", "fr": "Fête du Canada"}, 7, 1,
              since=1983, shift=ObservanceShift.NEXT_MONDAY),
        nth_weekday("civicHoliday", {"en": "Civic Holiday", "fr": "Premier lundi d'août"}, 8, MONDAY, 1,
                    kind=OBSERVANCE),
        nth_weekday("labourDay", {"en": "Labour Day", "fr": "Fête du travail"}, 9, MONDAY, 1, since=1894),
        fixed("truthAndReconciliationDay",
              {"en": "National Day for Truth and Reconciliation",
               "fr": "Journée nationale de la vérité et de la réconciliation"}, 9, 30, since=2021),
        nth_weekday("thanksgivingDay", {"en": "Thanksgiving", "fr": "Action de grâce"}, 10, MONDAY, 2, since=1957),
        fixed("remembranceDay", {"en": "Remembrance Day", "fr": "Jour du Souvenir"}, 11, 11, since=1919),
        fixed("christmasDay", {"en": "Christmas Day", "fr": "Noël"}, 12, 25),
        fixed("boxingDay", {"en": "Boxing Day", "fr": "Lendemain de Noël"}, 12, 26),
    ),
)

PRINCE_EDWARD_ISLAND = CANADA.derive(
    code="CA-PE",
    name="Prince Edward Island",
    timezone="America/Halifax",
    remove=("civicHoliday",),
    add=(
        nth_weekday("islanderDay", {"en": "Islander Day", "fr": "Fête des Insulaires"}, 2, MONDAY, 3,
                    since=2009),
        weekday_relative("victoriaDay", {"en": "Victoria Day", "fr": "Fête de la Reine"}, 5, 24, MONDAY,
                         "on_or_before", since=1845),
        nth_weekday("goldCupParadeDay", {"en": "Gold Cup Parade Day", "fr": "Défilé de la Coupe d'or"},
                    8, FRIDAY, 3, since=1962),
    ),
)


# ============================================================
# SWITZERLAND
# ============================================================

_SWISS_NATIONAL_DAY = {
    "de": "Bundesfeiertag",
    "en": "Swiss National Day",
    "fr": "Fête nationale suisse",
    "it": "Festa nazionale",
}

SWITZERLAND = RegionProfile(
    code="CH",
    name="Switzerland",
    timezone="Europe/Zurich",
    default_locale="de",
    holidays=(
        # Observed since 1899, a federal public holiday since 1994.
        fixed("swissNationalDay", _SWISS_NATIONAL_DAY, 8, 1, since=1899, until=1993, kind=OBSERVANCE),
        fixed("swissNationalDay", _SWISS_NATIONAL_DAY, 8, 1, since=1994),
    ),
)

OBWALDEN = SWITZERLAND.derive(
    code="CH-OW",
    name="Obwalden",
    add=(
        fixed("newYearsDay", {"de": "Neujahr", "en": "New Year's Day", "fr": "Nouvel An"}, 1, 1, kind=OTHER),
        fixed("berchtoldsTag", {"de": "Berchtoldstag", "en": "Berchtold's Day", "fr": "Jour de la Saint-Berthold"},
              1, 2, kind=OTHER),
        easter("goodFriday", {"de": "Karfreitag", "en": "Good Friday", "fr": "Vendredi saint"}, -2, kind=OTHER),
        easter("easterMonday", {"de": "Ostermontag", "en": "Easter Monday", "fr": "Lundi de Pâques"}, 1,
               kind=OTHER),
        easter("ascensionDay", {"de": "Auffahrt", "en": "Ascension Day", "fr": "Ascension"}, 39, kind=OTHER),
        easter("pentecostMonday", {"de": "Pfingstmontag", "en": "Whit Monday", "fr": "Lundi de Pentecôte"}, 50,
               kind=OTHER),
        easter("corpusChristi", {"de": "Fronleichnam", "en": "Corpus Christi", "fr": "Fête-Dieu"}, 60,
               kind=OTHER),
        fixed("assumptionOfMary", {"de": "Mariä Himmelfahrt", "en": "Assumption of Mary", "fr": "Assomption"},
              8, 15, kind=OTHER),
        fixed("bruderKlausenFest", {"de": "Bruder-Klausen-Fest", "en": "Saint Nicholas of Flüe",
                                    "fr": "Fête de saint Nicolas de Flüe"}, 9, 25, since=1649, kind=OTHER),
        fixed("allSaintsDay", {"de": "Allerheiligen", "en": "All Saints' Day", "fr": "Toussaint"}, 11, 1,
              kind=OTHER),
        fixed("immaculateConception", {"de": "Mariä Empfängnis", "en": "Immaculate Conception",
                                       "fr": "Immaculée Conception"}, 12, 8, kind=OTHER),
        fixed("christmasDay", {"de": "Weihnachten", "en": "Christmas Day", "fr": "Noël"}, 12, 25, kind=OTHER),
        fixed("stStephensDay", {"de": "Stephanstag", "en": "St. Stephen's Day", "fr": "Saint-Étienne"}, 12, 26,
              kind=OTHER),
    ),
)


# ============================================================
# ISRAEL
# ============================================================

ISRAEL = RegionProfile(
    code="IL",
    name="Israel",
    timezone="Asia/Jerusalem",
    default_locale="en",
    holidays=(
        fixed("newYearsDay", {"en": "New Year's Day", "he": "ראש השנה האזרחית"}, 1, 1, kind=OBSERVANCE),
        hebrew("purim", {"en": "Purim", "he": "פורים"}, heb.ADAR, 14),
        hebrew("passover", {"en": "Passover", "he": "פסח"}, heb.NISAN, 15),
        hebrew("independenceDay", {"en": "Independence Day", "he": "יום העצמאות"}, heb.IYAR, 5, since=1949),
        hebrew("shavuot", {"en": "Shavuot", "he": "שבועות"}, heb.SIVAN, 6),
        hebrew("roshHashanah", {"en": "Rosh Hashanah", "he": "ראש השנה"}, heb.TISHREI, 1),
        hebrew("yomKippur", {"en": "Yom Kippur", "he": "יום כיפור"}, heb.TISHREI, 10),
        hebrew("sukkot", {"en": "Sukkot", "he": "סוכות"}, heb.TISHREI, 15),
        hebrew("hanukkah", {"en": "Hanukkah", "he": "חנוכה"}, heb.KISLEV, 25, kind=OBSERVANCE),
        # Can fall in early January or late December; see YearPolicy.
        hebrew("tenthOfTevet", {"en": "Tenth of Tevet", "he": "עשרה בטבת"}, heb.TEVET, 10, kind=OBSERVANCE),
    ),
)


# ============================================================
# UNITED STATES
# ============================================================

_NEAREST = ObservanceShift.NEAREST_WEEKDAY

UNITED_STATES = RegionProfile(
    code="US",
    name="United States",
    timezone="America/New_York",
    default_locale="en",
    holidays=(
        fixed("newYearsDay", {"en": "New Year's Day", "es": "Año Nuevo"}, 1, 1, shift=_NEAREST),
        nth_weekday("martinLutherKingDay", {"en": "Martin Luther King Jr. Day", "es": "Día de Martin Luther King Jr."},
                    1, MONDAY, 3, since=1986),
        nth_weekday("washingtonsBirthday", {"en": "Washington's Birthday", "es": "Natalicio de Washington"},
                    2, MONDAY, 3, since=1971),
        nth_weekday("memorialDay", {"en": "Memorial Day", "es": "Día de los Caídos"}, 5, MONDAY, LAST, since=1971),
        fixed("juneteenth", {"en": "Juneteenth National Independence Day", "es": "Juneteenth"}, 6, 19,
              since=2021, shift=_NEAREST),
        fixed("independenceDay", {"en": "Independence Day", "es": "Día de la Independencia"}, 7, 4, shift=_NEAREST),
        nth_weekday("laborDay", {"en": "Labor Day", "es": "Día del Trabajo"}, 9, MONDAY, 1, since=1894),
        nth_weekday("columbusDay", {"en": "Columbus Day", "es": "Día de la Raza"}, 10, MONDAY, 2, since=1971),
        fixed("veteransDay", {"en": "Veterans Day", "es": "Día de los Veteranos"}, 11, 11, since=1938,
              shift=_NEAREST),
        nth_weekday("thanksgivingDay", {"en": "Thanksgiving Day", "es": "Día de Acción de Gracias"},
                    11, THURSDAY, 4, since=1942),
        fixed("christmasDay", {"en": "Christmas Day", "es": "Navidad"}, 12, 25, shift=_NEAREST),
    ),
)


ALL_REGIONS: Dict[str, RegionProfile] = {
    p.code: p
    for p in (CANADA, PRINCE_EDWARD_ISLAND, SWITZERLAND, OBWALDEN, ISRAEL, UNITED_STATES)
}

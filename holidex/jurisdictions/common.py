"""Holidays shared by many jurisdictions.

Each factory returns a :class:`Holiday` for one year; the jurisdiction
builder decides the type and whether to register it at all.
"""

from datetime import date
from typing import Dict, Optional

from ..core.computus import EasterCalendar
from ..core.holiday import Holiday, HolidayType
from ..core.rules import easter_offset, fixed_date


COMMON_NAMES: Dict[str, Dict[str, str]] = {
    "newYearsDay": {
        "en_US": "New Year's Day", "fr": "Jour de l'An", "nl": "Nieuwjaar",
        "de": "Neujahr", "ro": "Anul Nou",
    },
    "internationalWorkersDay": {
        "en_US": "International Workers' Day", "fr": "Fête du Travail", "nl": "Dag van de Arbeid",
        "de": "Tag der Arbeit", "ro": "Ziua Muncii",
    },
    "goodFriday": {
        "en_US": "Good Friday", "fr": "Vendredi saint", "nl": "Goede Vrijdag",
        "de": "Karfreitag", "ro": "Vinerea Mare",
    },
    "easter": {
        "en_US": "Easter Sunday", "fr": "Pâques", "nl": "Eerste Paasdag",
        "de": "Ostersonntag", "ro": "Paștele",
    },
    "easterMonday": {
        "en_US": "Easter Monday", "fr": "Lundi de Pâques", "fr_CA": "Lundi de Pâques",
        "nl": "Paasmaandag", "de": "Ostermontag", "ro": "A doua zi de Paște",
    },
    "ascensionDay": {
        "en_US": "Ascension Day", "fr": "Ascension", "nl": "Hemelvaart",
        "de": "Christi Himmelfahrt", "ro": "Înălțarea Domnului",
    },
    "pentecost": {
        "en_US": "Whitsunday", "fr": "Pentecôte", "nl": "Pinksteren",
        "de": "Pfingstsonntag", "ro": "Rusaliile",
    },
    "pentecostMonday": {
        "en_US": "Whitmonday", "fr": "Lundi de Pentecôte", "nl": "Pinkstermaandag",
        "de": "Pfingstmontag", "ro": "A doua zi de Rusalii",
    },
    "assumptionOfMary": {
        "en_US": "Assumption of Mary", "fr": "Assomption", "nl": "Onze Lieve Vrouw hemelvaart",
        "de": "Mariä Himmelfahrt", "ro": "Adormirea Maicii Domnului",
    },
    "allSaintsDay": {
        "en_US": "All Saints' Day", "fr": "La Toussaint", "nl": "Allerheiligen",
        "de": "Allerheiligen", "ro": "Ziua tuturor sfinților",
    },
    "armisticeDay": {
        "en_US": "Armistice Day", "fr": "Armistice", "nl": "Wapenstilstand",
    },
    "christmasDay": {
        "en_US": "Christmas", "en_GB": "Christmas Day", "fr": "Noël", "nl": "Kerstmis",
        "de": "Weihnachten", "ro": "Crăciunul",
    },
    "secondChristmasDay": {
        "en_US": "Second Christmas Day", "en_CA": "Boxing Day", "fr_CA": "Lendemain de Noël",
        "nl": "Tweede Kerstdag", "de": "Zweiter Weihnachtsfeiertag", "ro": "A doua zi de Crăciun",
    },
    "boxingDay": {
        "en_US": "Boxing Day", "en_GB": "Boxing Day",
    },
}


def make_holiday(
    key: str,
    day: date,
    timezone: str,
    type: HolidayType = HolidayType.OFFICIAL,
    names: Optional[Dict[str, str]] = None,
) -> Holiday:
    """Holiday with the common names for `key`, extended (or overridden) by `names`."""
    merged = {**COMMON_NAMES.get(key, {}), **(names or {})}
    return Holiday(key=key, date=day, names=merged, type=type, timezone=timezone)


# Fixed dates

def new_years_day(year: int, timezone: str, type: HolidayType = HolidayType.OFFICIAL) -> Holiday:
    return make_holiday("newYearsDay", fixed_date(year, 1, 1), timezone, type)


def international_workers_day(year: int, timezone: str, type: HolidayType = HolidayType.OFFICIAL) -> Holiday:
    return make_holiday("internationalWorkersDay", fixed_date(year, 5, 1), timezone, type)


def assumption_of_mary(year: int, timezone: str, type: HolidayType = HolidayType.OFFICIAL) -> Holiday:
    return make_holiday("assumptionOfMary", fixed_date(year, 8, 15), timezone, type)


def all_saints_day(year: int, timezone: str, type: HolidayType = HolidayType.OFFICIAL) -> Holiday:
    return make_holiday("allSaintsDay", fixed_date(year, 11, 1), timezone, type)


def armistice_day(year: int, timezone: str, type: HolidayType = HolidayType.OFFICIAL) -> Holiday:
    return make_holiday("armisticeDay", fixed_date(year, 11, 11), timezone, type)


def christmas_day(year: int, timezone: str, type: HolidayType = HolidayType.OFFICIAL) -> Holiday:
    return make_holiday("christmasDay", fixed_date(year, 12, 25), timezone, type)


def second_christmas_day(year: int, timezone: str, type: HolidayType = HolidayType.OFFICIAL) -> Holiday:
    return make_holiday("secondChristmasDay", fixed_date(year, 12, 26), timezone, type)


def boxing_day(year: int, timezone: str, type: HolidayType = HolidayType.OFFICIAL) -> Holiday:
    return make_holiday("boxingDay", fixed_date(year, 12, 26), timezone, type)


# Easter based

def _easter_based(
    key: str,
    offset: int,
    year: int,
    timezone: str,
    type: HolidayType,
    calendar: EasterCalendar,
) -> Holiday:
    return make_holiday(key, easter_offset(year, offset, calendar), timezone, type)


def good_friday(
    year: int,
    timezone: str,
    type: HolidayType = HolidayType.OFFICIAL,
    calendar: EasterCalendar = EasterCalendar.GREGORIAN,
) -> Holiday:
    return _easter_based("goodFriday", -2, year, timezone, type, calendar)


def easter(
    year: int,
    timezone: str,
    type: HolidayType = HolidayType.OFFICIAL,
    calendar: EasterCalendar = EasterCalendar.GREGORIAN,
) -> Holiday:
    return _easter_based("easter", 0, year, timezone, type, calendar)


def easter_monday(
    year: int,
    timezone: str,
    type: HolidayType = HolidayType.OFFICIAL,
    calendar: EasterCalendar = EasterCalendar.GREGORIAN,
) -> Holiday:
    return _easter_based("easterMonday", 1, year, timezone, type, calendar)


def ascension_day(
    year: int,
    timezone: str,
    type: HolidayType = HolidayType.OFFICIAL,
    calendar: EasterCalendar = EasterCalendar.GREGORIAN,
) -> Holiday:
    return _easter_based("ascensionDay", 39, year, timezone, type, calendar)


def pentecost(
    year: int,
    timezone: str,
    type: HolidayType = HolidayType.OFFICIAL,
    calendar: EasterCalendar = EasterCalendar.GREGORIAN,
) -> Holiday:
    return _easter_based("pentecost", 49, year, timezone, type, calendar)


def pentecost_monday(
    year: int,
    timezone: str,
    type: HolidayType = HolidayType.OFFICIAL,
    calendar: EasterCalendar = EasterCalendar.GREGORIAN,
) -> Holiday:
    return _easter_based("pentecostMonday", 50, year, timezone, type, calendar)

"""Canada (federal) and its provinces."""

from datetime import timedelta

from ..core.calendar import HolidayRegistry
from ..core.holiday import HolidayType
from ..core.registry import register_jurisdiction
from ..core.rules import Direction, Weekday, adjacent_weekday, fixed_date, nth_weekday_of_month
from . import common


@register_jurisdiction("CA", "Canada", "America/Toronto")
def canada(registry: HolidayRegistry) -> None:
    year, tz = registry.year, registry.timezone

    registry.add(common.new_years_day(year, tz))
    registry.add(common.good_friday(year, tz))
    registry.add(common.christmas_day(year, tz))

    # Dominion Day from 1879, renamed Canada Day in 1982; moves to Monday when on a Sunday.
    if year >= 1879:
        canada_day = fixed_date(year, 7, 1)
        if canada_day.weekday() == Weekday.SUNDAY:
            canada_day += timedelta(days=1)
        registry.add(common.make_holiday("canadaDay", canada_day, tz, names={
            "en_US": "Canada Day", "fr_CA": "Fête du Canada",
        }))

    if year >= 1894:
        registry.add(common.make_holiday(
            "labourDay", nth_weekday_of_month(year, 9, Weekday.MONDAY, 1), tz,
            names={"en_US": "Labour Day", "fr_CA": "Fête du travail"},
        ))

    registry.add(common.easter_monday(year, tz, HolidayType.BANK))
    registry.add(common.second_christmas_day(year, tz, HolidayType.BANK))

    if year >= 1931:
        registry.add(common.make_holiday(
            "remembranceDay", fixed_date(year, 11, 11), tz, HolidayType.BANK,
            names={"en_US": "Remembrance Day", "fr_CA": "Jour du Souvenir"},
        ))

    # Second Monday of October since 1957.
    if year >= 1957:
        registry.add(common.make_holiday(
            "thanksgiving", nth_weekday_of_month(year, 10, Weekday.MONDAY, 2), tz, HolidayType.BANK,
            names={"en_US": "Thanksgiving", "fr_CA": "Action de grâce"},
        ))

    # Monday preceding May 25 since 1952.
    if year >= 1952:
        victoria = adjacent_weekday(fixed_date(year, 5, 25), Weekday.MONDAY, Direction.PREVIOUS)
        registry.add(common.make_holiday(
            "sovereignsBirthday", victoria, tz, HolidayType.OBSERVANCE,
            names={"en_US": "Sovereign's Birthday", "fr_CA": "Fête du souverain"},
        ))
        registry.add(common.make_holiday(
            "victoriaDay", victoria, tz, HolidayType.BANK,
            names={"en_US": "Victoria Day", "fr_CA": "La Fête de Victoria"},
        ))

    registry.add(common.make_holiday(
        "augustCivicHoliday", nth_weekday_of_month(year, 8, Weekday.MONDAY, 1), tz, HolidayType.BANK,
        names={"en_US": "Civic Holiday", "fr_CA": "Premier lundi d'août"},
    ))

    registry.add(common.easter(year, tz, HolidayType.OBSERVANCE))


@register_jurisdiction("CA-AB", "Alberta", "America/Edmonton", parent="CA")
def alberta(registry: HolidayRegistry) -> None:
    canada(registry)
    year, tz = registry.year, registry.timezone

    if year >= 1990:
        registry.add(common.make_holiday(
            "familyDay", nth_weekday_of_month(year, 2, Weekday.MONDAY, 3), tz, HolidayType.BANK,
            names={"en_US": "Family Day", "fr_CA": "Jour de la famille"},
        ))

    # Statutory in Alberta, bank holidays federally.
    for key in ("thanksgiving", "victoriaDay", "remembranceDay"):
        holiday = registry.find(key)
        if holiday is not None:
            registry.add(holiday.model_copy(update={"type": HolidayType.OFFICIAL}))

    registry.remove("augustCivicHoliday")
    if year >= 1974:
        registry.add(common.make_holiday(
            "heritageDay", nth_weekday_of_month(year, 8, Weekday.MONDAY, 1), tz, HolidayType.BANK,
            names={"en_US": "Heritage Day", "fr_CA": "Jour d'héritage"},
        ))

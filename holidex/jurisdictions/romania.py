"""Romania. Movable feasts follow the Orthodox (Julian) Easter."""

from ..core.calendar import HolidayRegistry
from ..core.computus import EasterCalendar
from ..core.holiday import HolidayType
from ..core.registry import register_jurisdiction
from ..core.rules import fixed_date
from . import common


ORTHODOX = EasterCalendar.JULIAN


@register_jurisdiction("RO", "Romania", "Europe/Bucharest")
def romania(registry: HolidayRegistry) -> None:
    year, tz = registry.year, registry.timezone

    registry.add(common.new_years_day(year, tz))
    registry.add(common.make_holiday(
        "dayAfterNewYearsDay", fixed_date(year, 1, 2), tz,
        names={"en_US": "Day after New Year's Day", "ro": "A doua zi după Anul Nou"},
    ))

    if year >= 2017:
        registry.add(common.make_holiday(
            "unitedPrincipalitiesDay", fixed_date(year, 1, 24), tz,
            names={"en_US": "Union Day / Small Union", "ro": "Unirea Principatelor Române / Mica Unire"},
        ))
        registry.add(common.make_holiday(
            "childrensDay", fixed_date(year, 6, 1), tz,
            names={"en_US": "International Children's Day", "ro": "Ziua Copilului"},
        ))
    elif year >= 1950:
        registry.add(common.make_holiday(
            "childrensDay", fixed_date(year, 6, 1), tz, HolidayType.OBSERVANCE,
            names={"en_US": "International Children's Day", "ro": "Ziua Copilului"},
        ))

    if year >= 2018:
        registry.add(common.good_friday(year, tz, calendar=ORTHODOX))
    registry.add(common.easter(year, tz, calendar=ORTHODOX))
    registry.add(common.easter_monday(year, tz, calendar=ORTHODOX))

    registry.add(common.international_workers_day(year, tz))

    if year >= 2008:
        registry.add(common.pentecost(year, tz, calendar=ORTHODOX))
        registry.add(common.pentecost_monday(year, tz, calendar=ORTHODOX))

    if year >= 2009:
        registry.add(common.assumption_of_mary(year, tz))

    if year >= 2012:
        registry.add(common.make_holiday(
            "stAndrewDay", fixed_date(year, 11, 30), tz,
            names={"en_US": "Saint Andrew's Day", "ro": "Sfântul Andrei"},
        ))

    if year >= 1990:
        registry.add(common.make_holiday(
            "nationalDay", fixed_date(year, 12, 1), tz,
            names={"en_US": "National Day", "ro": "Ziua Națională"},
        ))

    registry.add(common.christmas_day(year, tz))
    registry.add(common.second_christmas_day(year, tz))

"""Belgium."""

from ..core.calendar import HolidayRegistry
from ..core.registry import register_jurisdiction
from ..core.rules import fixed_date
from . import common


@register_jurisdiction("BE", "Belgium", "Europe/Brussels")
def belgium(registry: HolidayRegistry) -> None:
    year, tz = registry.year, registry.timezone

    registry.add(common.new_years_day(year, tz))
    registry.add(common.easter(year, tz))
    registry.add(common.easter_monday(year, tz))
    registry.add(common.international_workers_day(year, tz))
    registry.add(common.ascension_day(year, tz))
    registry.add(common.pentecost(year, tz))
    registry.add(common.pentecost_monday(year, tz))

    if year >= 1890:
        registry.add(common.make_holiday(
            "nationalDay", fixed_date(year, 7, 21), tz,
            names={"en_US": "Belgian National Day", "fr": "Fête nationale", "nl": "Nationale feestdag"},
        ))

    registry.add(common.assumption_of_mary(year, tz))
    registry.add(common.all_saints_day(year, tz))
    if year >= 1919:
        registry.add(common.armistice_day(year, tz))
    registry.add(common.christmas_day(year, tz))

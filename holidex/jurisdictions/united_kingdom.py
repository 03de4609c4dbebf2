"""United Kingdom bank holidays (England and Wales)."""

from ..core.calendar import HolidayRegistry
from ..core.holiday import HolidayType
from ..core.registry import register_jurisdiction
from ..core.rules import LAST, Weekday, fixed_date, nth_weekday_of_month
from ..core.substitution import SubstitutionStrategy
from . import common


# Years in which a bank holiday was moved by proclamation.
MAY_DAY_MOVED = {1995: (5, 8), 2020: (5, 8)}
SPRING_BANK_HOLIDAY_MOVED = {2002: (6, 4), 2012: (6, 4), 2022: (6, 2)}

ONE_OFF_HOLIDAYS = {
    2022: [
        ("queensPlatinumJubilee", (6, 3), "Queen's Platinum Jubilee"),
        ("stateFuneralQueenElizabeth", (9, 19), "State Funeral of Queen Elizabeth II"),
    ],
    2023: [
        ("coronationKingCharles", (5, 8), "Coronation of King Charles III"),
    ],
}


@register_jurisdiction("GB", "United Kingdom", "Europe/London")
def united_kingdom(registry: HolidayRegistry) -> None:
    year, tz = registry.year, registry.timezone

    if year >= 1974:
        registry.add(common.new_years_day(year, tz, HolidayType.BANK))
        registry.substitute("newYearsDay")

    registry.add(common.good_friday(year, tz))
    registry.add(common.easter_monday(year, tz, HolidayType.BANK))

    if year >= 1978:
        month, day = MAY_DAY_MOVED.get(year, (None, None))
        may_day = fixed_date(year, month, day) if month else nth_weekday_of_month(year, 5, Weekday.MONDAY, 1)
        registry.add(common.make_holiday(
            "mayDayBankHoliday", may_day, tz, HolidayType.BANK,
            names={"en_US": "May Day Bank Holiday"},
        ))

    if year >= 1971:
        month, day = SPRING_BANK_HOLIDAY_MOVED.get(year, (None, None))
        spring = fixed_date(year, month, day) if month else nth_weekday_of_month(year, 5, Weekday.MONDAY, LAST)
        registry.add(common.make_holiday(
            "springBankHoliday", spring, tz, HolidayType.BANK,
            names={"en_US": "Spring Bank Holiday"},
        ))
        registry.add(common.make_holiday(
            "summerBankHoliday", nth_weekday_of_month(year, 8, Weekday.MONDAY, LAST), tz, HolidayType.BANK,
            names={"en_US": "Summer Bank Holiday"},
        ))

    for key, (month, day), name in ONE_OFF_HOLIDAYS.get(year, []):
        registry.add(common.make_holiday(key, fixed_date(year, month, day), tz, HolidayType.BANK, names={"en_US": name}))

    # Christmas first: a substitute Boxing Day must skip Christmas' substitute.
    registry.add(common.christmas_day(year, tz))
    registry.add(common.boxing_day(year, tz, HolidayType.BANK))
    if year >= 1971:
        registry.substitute("christmasDay", SubstitutionStrategy.NEXT_WORKING_DAY)
        registry.substitute("boxingDay", SubstitutionStrategy.NEXT_WORKING_DAY)

"""Date rule resolvers.

Every resolver is a pure function of its arguments and returns a plain
``datetime.date``. Jurisdiction, classification and names are attached by
the caller building the :class:`~holidex.core.holiday.Holiday`.
"""

from datetime import date, timedelta
from enum import Enum, IntEnum
from typing import Optional
from calendar import isleap, monthrange

from .computus import EasterCalendar, easter
from .exceptions import InvalidArgumentError, InvalidDateError


LAST = -1


class Weekday(IntEnum):
    """Day of week, numbered like ``date.weekday()``."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class Direction(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"


def fixed_date(year: int, month: int, day: int) -> date:
    """Resolve ``year-month-day``; raises InvalidDateError if it is not a civil date."""
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(f"{year}-{month}-{day}", str(e)) from e


def fixed_date_or_none(year: int, month: int, day: int) -> Optional[date]:
    """Like fixed_date, but Feb 29 in a non-leap year yields None instead of failing."""
    if month == 2 and day == 29 and not isleap(year):
        return None
    return fixed_date(year, month, day)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        n: Which occurrence (1=first ... 5=fifth, LAST=last)
    """
    if n != LAST and not 1 <= n <= 5:
        raise InvalidArgumentError(f"Occurrence must be 1..5 or LAST; got {n}")
    if not 0 <= weekday <= 6:
        raise InvalidArgumentError(f"Weekday must be 0..6; got {weekday}")

    first_day = fixed_date(year, month, 1)
    if n == LAST:
        last_day = first_day.replace(day=monthrange(year, month)[1])
        return adjacent_weekday(last_day, weekday, Direction.PREVIOUS, inclusive=True)

    days_until_weekday = (weekday - first_day.weekday()) % 7
    target_date = first_day + timedelta(days=days_until_weekday, weeks=n - 1)

    # No fallback to the last occurrence: a 5th Monday that does not exist is an error.
    if target_date.month != month:
        raise InvalidDateError(
            f"{year}-{month:02d}",
            f"month has no occurrence #{n} of weekday {Weekday(weekday).name.title()}",
        )

    return target_date


def adjacent_weekday(anchor: date, weekday: int, direction: Direction, inclusive: bool = False) -> date:
    """Nearest date before (or after) `anchor` falling on `weekday`.

    With `inclusive` the anchor itself is returned when it already matches.
    """
    if not 0 <= weekday <= 6:
        raise InvalidArgumentError(f"Weekday must be 0..6; got {weekday}")

    if Direction(direction) is Direction.PREVIOUS:
        delta = (anchor.weekday() - weekday) % 7
        if delta == 0 and not inclusive:
            delta = 7
        return anchor - timedelta(days=delta)

    delta = (weekday - anchor.weekday()) % 7
    if delta == 0 and not inclusive:
        delta = 7
    return anchor + timedelta(days=delta)


def easter_offset(year: int, offset_days: int, calendar: EasterCalendar = EasterCalendar.GREGORIAN) -> date:
    """Easter Sunday shifted by a signed number of days (Good Friday = -2)."""
    return easter(year, calendar) + timedelta(days=offset_days)

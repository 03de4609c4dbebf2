"""Easter Sunday calculation (computus).

Gregorian dates use the anonymous Gregorian algorithm (Meeus/Jones/Butcher).
Julian dates use Meeus' Julian algorithm; the result is shifted onto the
civil (Gregorian) calendar so Orthodox Easter can be compared with any other
date. Years before 1583 are still computed, the result simply has no
historical meaning.
"""

from datetime import MAXYEAR, MINYEAR, date, timedelta
from enum import Enum

from .exceptions import InvalidDateError


class EasterCalendar(str, Enum):
    GREGORIAN = "gregorian"
    JULIAN = "julian"


def _check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateError(year, f"year must be within {MINYEAR}..{MAXYEAR}")


def gregorian_easter(year: int) -> date:
    _check_year(year)
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def julian_calendar_offset(year: int) -> int:
    """Days the Julian calendar lags the Gregorian one in March/April of `year`."""
    return year // 100 - year // 400 - 2


def orthodox_easter(year: int) -> date:
    """Julian Easter expressed as a Gregorian civil date."""
    _check_year(year)
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month = (d + e + 114) // 31
    day = ((d + e + 114) % 31) + 1
    # Julian March/April days always exist in the Gregorian calendar too.
    return date(year, month, day) + timedelta(days=julian_calendar_offset(year))


def easter(year: int, calendar: EasterCalendar = EasterCalendar.GREGORIAN) -> date:
    if EasterCalendar(calendar) is EasterCalendar.JULIAN:
        return orthodox_easter(year)
    return gregorian_easter(year)

"""Per-jurisdiction, per-year holiday registry.

A registry is filled by a jurisdiction builder (state ``building``) and is
queried afterwards (state ``queryable``). Iteration and all listings are
chronological; holidays sharing a date keep their insertion order.
"""

from datetime import MAXYEAR, MINYEAR, date, datetime
from enum import Enum
from typing import AbstractSet, Callable, Dict, Iterator, List, Optional, Union
from zoneinfo import ZoneInfo
import logging

from .exceptions import InvalidArgumentError, InvalidDateError, NotFoundError
from .holiday import Holiday, HolidayType, strip_substitute_prefix
from .substitution import SubstitutionStrategy, substitute_holiday, substitute_key
from .translations import DEFAULT_LOCALE, Translations
from .weekend import weekday_index, weekend_days


logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, Holiday, str]


class RegistryState(str, Enum):
    BUILDING = "building"
    QUERYABLE = "queryable"


class HolidayRegistry:
    """Holidays of one jurisdiction for one calendar year."""

    def __init__(
        self,
        code: str,
        year: int,
        locale: str = DEFAULT_LOCALE,
        timezone: str = "UTC",
        translations: Optional[Translations] = None,
        weekend: Optional[AbstractSet[int]] = None,
        factory: Optional[Callable[[int], "HolidayRegistry"]] = None,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        if not code:
            raise InvalidArgumentError("Jurisdiction code can not be blank.")
        if isinstance(year, bool) or not isinstance(year, int) or not MINYEAR <= year <= MAXYEAR:
            raise InvalidArgumentError(f"Year must be an integer within {MINYEAR}..{MAXYEAR}; got {year!r}")

        self.code = code.upper()
        self.year = year
        self.locale = locale
        self.timezone = timezone
        self.translations = translations
        self.default_locale = default_locale
        self.weekend = frozenset(weekend) if weekend is not None else weekend_days(self.code)

        # Rebuilds this jurisdiction for another year; used by next()/previous().
        self._factory = factory
        self._holidays: Dict[str, Holiday] = {}
        self._state = RegistryState.BUILDING

    # ── lifecycle ────────────────────────────────────────────────────────

    @property
    def state(self) -> RegistryState:
        return self._state

    def seal(self) -> None:
        """Mark the end of jurisdiction initialization."""
        self._state = RegistryState.QUERYABLE

    # ── mutation (rule authors) ──────────────────────────────────────────

    def add(self, holiday: Holiday) -> None:
        """Insert `holiday`, replacing any holiday with the same key."""
        if not isinstance(holiday, Holiday):
            raise InvalidArgumentError(f"Expected a Holiday; got {type(holiday).__name__}")

        holiday = holiday.bound(self.locale, self.translations, self.default_locale)

        if holiday.key in self._holidays:
            logger.debug("%s %d: replacing %s", self.code, self.year, holiday.key)
        self._holidays[holiday.key] = holiday

        # sorted() is stable, so equal dates keep their previous relative order.
        self._holidays = dict(sorted(self._holidays.items(), key=lambda item: item[1].date))

    def remove(self, key: str) -> None:
        """Remove a holiday; unknown keys are ignored."""
        if self._holidays.pop(key, None) is not None:
            logger.debug("%s %d: removed %s", self.code, self.year, key)

    def substitute(
        self,
        key: str,
        strategy: SubstitutionStrategy = SubstitutionStrategy.NEXT_WORKING_DAY,
        weekday: Optional[int] = None,
        keep_original: bool = True,
    ) -> Optional[Holiday]:
        """Register a substitute for `key` if it falls on a weekend day.

        Other registered holiday dates are not used as substitute dates.
        With `keep_original=False` the weekend occurrence is removed.
        """
        holiday = self.get(key)
        own_keys = {key, substitute_key(key)}
        taken = {h.date for h in self._holidays.values() if h.key not in own_keys}

        substitute = substitute_holiday(holiday, self.weekend, strategy, weekday, taken)
        if substitute is None:
            return None

        if not keep_original:
            self.remove(key)
        self.add(substitute)
        return self._holidays[substitute.key]

    # ── lookup ───────────────────────────────────────────────────────────

    def _check_key(self, key: str) -> None:
        if not key:
            raise InvalidArgumentError("Holiday name can not be blank.")

    def find(self, key: str) -> Optional[Holiday]:
        self._check_key(key)
        return self._holidays.get(key)

    def get(self, key: str) -> Holiday:
        holiday = self.find(key)
        if holiday is None:
            raise NotFoundError(f"No holiday {key!r} in {self.code} {self.year}")
        return holiday

    def when_is(self, key: str) -> str:
        """Date of the holiday as ``YYYY-MM-DD``."""
        return str(self.get(key))

    def what_weekday_is(self, key: str) -> int:
        """Weekday index of the holiday (0 = Sunday)."""
        return self.get(key).weekday_index

    def holiday_names(self) -> List[str]:
        return list(self._holidays)

    def holiday_dates(self) -> Dict[str, str]:
        return {key: str(holiday) for key, holiday in self._holidays.items()}

    def holidays(self) -> List[Holiday]:
        return list(self._holidays.values())

    # ── date queries ─────────────────────────────────────────────────────

    def _as_date(self, value: DateLike) -> date:
        if isinstance(value, Holiday):
            return value.date
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(ZoneInfo(self.timezone))
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return date.fromisoformat(value)
            except ValueError as e:
                raise InvalidDateError(value, str(e)) from e
        raise InvalidDateError(value)

    def is_holiday(self, value: DateLike) -> bool:
        day = self._as_date(value)
        return any(holiday.date == day for holiday in self._holidays.values())

    def is_working_day(self, value: DateLike) -> bool:
        """False on any registered holiday (whatever its type) and on weekend days."""
        day = self._as_date(value)
        if self.is_holiday(day):
            return False
        return weekday_index(day) not in self.weekend

    def on(self, value: DateLike) -> List[Holiday]:
        day = self._as_date(value)
        return [holiday for holiday in self._holidays.values() if holiday.date == day]

    def between(self, start: DateLike, end: DateLike, inclusive: bool = True) -> List[Holiday]:
        """Holidays dated within [start, end] (or (start, end) when not inclusive)."""
        start_day, end_day = self._as_date(start), self._as_date(end)
        if start_day > end_day:
            raise InvalidArgumentError("Start date must be a date before the end date.")

        if inclusive:
            return [h for h in self._holidays.values() if start_day <= h.date <= end_day]
        return [h for h in self._holidays.values() if start_day < h.date < end_day]

    def filter(self, *types: HolidayType) -> List[Holiday]:
        wanted = {HolidayType(t) for t in types}
        return [h for h in self._holidays.values() if h.type in wanted]

    def count(self) -> int:
        """Number of holidays; a substitute and its original count once."""
        return len({strip_substitute_prefix(key) for key in self._holidays})

    # ── other years ──────────────────────────────────────────────────────

    def _another_year(self, year: int, key: str) -> Holiday:
        self._check_key(key)
        if self._factory is None:
            raise NotFoundError(f"{self.code} has no rule set to compute {year}")
        return self._factory(year).get(key)

    def next(self, key: str) -> Holiday:
        """The holiday as computed for the following year."""
        return self._another_year(self.year + 1, key)

    def previous(self, key: str) -> Holiday:
        """The holiday as computed for the preceding year."""
        return self._another_year(self.year - 1, key)

    # ── container protocol / repr ────────────────────────────────────────

    def __iter__(self) -> Iterator[Holiday]:
        return iter(list(self._holidays.values()))

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return key in self._holidays

    def __repr__(self) -> str:
        return (
            f"HolidayRegistry(code={self.code!r}, "
            f"year={self.year}, "
            f"locale={self.locale!r}, "
            f"holidays={len(self._holidays)}, "
            f"state={self._state.value!r})"
        )

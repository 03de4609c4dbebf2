"""Substitute holidays for holidays falling on a weekend day.

The engine only offers the primitive: whether a jurisdiction substitutes a
holiday, and whether the original date stays registered, is decided by the
jurisdiction's rule set.
"""

from datetime import date, timedelta
from enum import Enum
from typing import AbstractSet, Callable, Optional
import logging

from .exceptions import InvalidArgumentError
from .holiday import SUBSTITUTE_PREFIX, Holiday
from .rules import Direction, adjacent_weekday
from .weekend import DEFAULT_WEEKEND, is_weekend


logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


class SubstitutionStrategy(str, Enum):
    NEXT_WORKING_DAY = "next_working_day"          # roll forward past the weekend
    NEXT_WEEKDAY = "next_weekday"                  # roll forward to a given weekday, e.g. Monday
    PREVIOUS_WORKING_DAY = "previous_working_day"  # roll back before the weekend
    OBSERVED = "observed"                          # first weekend day back, later ones forward


def substitute_key(key: str) -> str:
    return f"{SUBSTITUTE_PREFIX}{key}"


def _roll(day: date, step: timedelta, blocked: Callable[[date], bool]) -> date:
    while blocked(day):
        day += step
    return day


def substitute_date(
    day: date,
    weekend: AbstractSet[int] = DEFAULT_WEEKEND,
    strategy: SubstitutionStrategy = SubstitutionStrategy.NEXT_WORKING_DAY,
    weekday: Optional[int] = None,
    taken: AbstractSet[date] = frozenset(),
) -> Optional[date]:
    """Date on which a holiday falling on `day` is observed instead.

    Returns None when `day` is not a weekend day. Dates in `taken` (other
    holidays) are skipped like weekend days.

    Args:
        day: Date the holiday falls on
        weekend: Weekend weekday indices (0=Sunday, 6=Saturday)
        strategy: How to pick the substitute date
        weekday: Target weekday for NEXT_WEEKDAY (0=Monday, 6=Sunday)
        taken: Dates that can not host the substitute
    """
    if len(weekend) >= 7:
        raise InvalidArgumentError("A weekend covering every day leaves no substitute date")
    if not is_weekend(day, weekend):
        return None

    def blocked(candidate: date) -> bool:
        return is_weekend(candidate, weekend) or candidate in taken

    strategy = SubstitutionStrategy(strategy)
    if strategy is SubstitutionStrategy.NEXT_WORKING_DAY:
        return _roll(day + ONE_DAY, ONE_DAY, blocked)

    if strategy is SubstitutionStrategy.PREVIOUS_WORKING_DAY:
        return _roll(day - ONE_DAY, -ONE_DAY, blocked)

    if strategy is SubstitutionStrategy.NEXT_WEEKDAY:
        if weekday is None:
            raise InvalidArgumentError("NEXT_WEEKDAY substitution requires a weekday")
        return _roll(adjacent_weekday(day, weekday, Direction.NEXT), ONE_DAY, blocked)

    # OBSERVED: the first day of the weekend moves back, the others move forward.
    if is_weekend(day - ONE_DAY, weekend):
        return _roll(day + ONE_DAY, ONE_DAY, blocked)
    return _roll(day - ONE_DAY, -ONE_DAY, blocked)


def substitute_holiday(
    holiday: Holiday,
    weekend: AbstractSet[int] = DEFAULT_WEEKEND,
    strategy: SubstitutionStrategy = SubstitutionStrategy.NEXT_WORKING_DAY,
    weekday: Optional[int] = None,
    taken: AbstractSet[date] = frozenset(),
) -> Optional[Holiday]:
    """Substitute for `holiday`, or None if it does not fall on the weekend."""
    if holiday.is_substitute:
        raise InvalidArgumentError(f"{holiday.key} is already a substitute holiday")

    observed = substitute_date(holiday.date, weekend, strategy, weekday, taken)
    if observed is None:
        return None

    logger.debug("Substituting %s (%s) with %s", holiday.key, holiday.date, observed)
    return Holiday(
        key=substitute_key(holiday.key),
        date=observed,
        names=dict(holiday.names),
        type=holiday.type,
        timezone=holiday.timezone,
        locale=holiday.locale,
        substitute_of=holiday.key,
    )

"""Weekend-day profiles per jurisdiction.

Weekday indices here follow the 0 = Sunday ... 6 = Saturday convention.
Only jurisdictions deviating from the Saturday/Sunday weekend are listed.
"""

from datetime import date
from types import MappingProxyType
from typing import FrozenSet, Mapping


DEFAULT_WEEKEND: FrozenSet[int] = frozenset({0, 6})

WEEKEND_DATA: Mapping[str, FrozenSet[int]] = MappingProxyType({
    # Thursday and Friday
    "AF": frozenset({4, 5}),  # Afghanistan

    # Friday and Saturday
    "AE": frozenset({5, 6}),  # United Arab Emirates
    "BH": frozenset({5, 6}),  # Bahrain
    "DZ": frozenset({5, 6}),  # Algeria
    "EG": frozenset({5, 6}),  # Egypt
    "IL": frozenset({5, 6}),  # Israel
    "IQ": frozenset({5, 6}),  # Iraq
    "JO": frozenset({5, 6}),  # Jordan
    "KW": frozenset({5, 6}),  # Kuwait
    "LY": frozenset({5, 6}),  # Libya
    "MA": frozenset({5, 6}),  # Morocco
    "OM": frozenset({5, 6}),  # Oman
    "QA": frozenset({5, 6}),  # Qatar
    "SA": frozenset({5, 6}),  # Saudi Arabia
    "SD": frozenset({5, 6}),  # Sudan
    "SY": frozenset({5, 6}),  # Syria
    "TN": frozenset({5, 6}),  # Tunisia
    "YE": frozenset({5, 6}),  # Yemen

    # Friday
    "IR": frozenset({5}),  # Iran

    # Sunday
    "IN": frozenset({0}),  # India
})


def weekend_days(code: str) -> FrozenSet[int]:
    """Weekend days for a jurisdiction; sub-regions (``AE-DU``) inherit their country's."""
    code = code.upper()
    if code in WEEKEND_DATA:
        return WEEKEND_DATA[code]
    country = code.split("-", 1)[0]
    return WEEKEND_DATA.get(country, DEFAULT_WEEKEND)


def weekday_index(day: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return day.isoweekday() % 7


def is_weekend(day: date, weekend: FrozenSet[int] = DEFAULT_WEEKEND) -> bool:
    return weekday_index(day) in weekend

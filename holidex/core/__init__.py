"""Core holidex components - resolvers, entities and registries."""

from .calendar import HolidayRegistry
from .holiday import Holiday, HolidayType
from .registry import JurisdictionRegistry

__all__ = ["Holiday", "HolidayRegistry", "HolidayType", "JurisdictionRegistry"]

"""holidex - Holiday computation and registry engine."""

__version__ = "0.1.0"
__description__ = "Public, bank and observance holidays per jurisdiction and year"

from .core.calendar import HolidayRegistry
from .core.config import EngineConfig
from .core.exceptions import HolidexError, InvalidArgumentError, InvalidDateError, NotFoundError
from .core.holiday import Holiday, HolidayType
from .core.registry import JurisdictionRegistry, register_jurisdiction

__all__ = [
    "EngineConfig",
    "Holiday",
    "HolidayRegistry",
    "HolidayType",
    "HolidexError",
    "InvalidArgumentError",
    "InvalidDateError",
    "JurisdictionRegistry",
    "NotFoundError",
    "create",
    "register_jurisdiction",
]


def create(code, year, locale=None, translations=None, config=None) -> HolidayRegistry:
    """Holidays of jurisdiction `code` for `year`; see JurisdictionRegistry.create."""
    return JurisdictionRegistry.create(code, year, locale, translations, config)

"""Holiday entity: one computed, immutable occurrence of a holiday."""

from enum import Enum
from typing import Dict, Optional
from zoneinfo import ZoneInfo
import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidArgumentError
from .translations import DEFAULT_LOCALE, Translations, resolve_name
from .weekend import weekday_index


SUBSTITUTE_PREFIX = "substituteHoliday:"


class HolidayType(str, Enum):
    OFFICIAL = "official"
    BANK = "bank"
    OBSERVANCE = "observance"
    SEASON = "season"
    OTHER = "other"


def strip_substitute_prefix(key: str) -> str:
    if key.startswith(SUBSTITUTE_PREFIX):
        return key[len(SUBSTITUTE_PREFIX):]
    return key


class Holiday(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str = Field(..., description="Identifier, unique within a registry")
    date: dt.date = Field(..., description="Resolved calendar date")
    names: Dict[str, str] = Field(default_factory=dict, description="Locale -> display name")
    type: HolidayType = Field(default=HolidayType.OFFICIAL)
    timezone: str = Field(default="UTC", description="IANA zone the date is anchored to")
    locale: str = Field(default=DEFAULT_LOCALE, description="Locale used for `name`")
    default_locale: str = Field(default=DEFAULT_LOCALE, description="Fallback locale for `name`")
    substitute_of: Optional[str] = Field(default=None, description="Key of the substituted holiday")
    # Global table consulted after the holiday's own names; set by the registry.
    translations: Optional[Translations] = Field(default=None, exclude=True, repr=False)

    def __init__(self, **data) -> None:
        # Checked before pydantic runs so the error stays an InvalidArgumentError.
        if not data.get("key"):
            raise InvalidArgumentError("Holiday name can not be blank.")
        super().__init__(**data)

    @property
    def name(self) -> str:
        # Substitutes share the global entries of the holiday they replace.
        lookup_key = self.substitute_of or self.key
        name = resolve_name(lookup_key, self.locale, self.names, self.translations, self.default_locale)
        return self.key if name == lookup_key else name

    @property
    def is_substitute(self) -> bool:
        return self.substitute_of is not None

    @property
    def weekday_index(self) -> int:
        """Day of week with 0 = Sunday, 1 = Monday, ... 6 = Saturday."""
        return weekday_index(self.date)

    def as_datetime(self) -> dt.datetime:
        """Midnight of the holiday in its own timezone."""
        return dt.datetime.combine(self.date, dt.time(), tzinfo=ZoneInfo(self.timezone))

    def bound(
        self,
        locale: str,
        translations: Optional[Translations] = None,
        default_locale: str = DEFAULT_LOCALE,
    ) -> "Holiday":
        """Copy resolving its name in `locale`, falling back on `translations`.

        `names` is left untouched, so the holiday's own entries keep
        precedence over the global table at every step of the lookup.
        """
        if (self.locale, self.translations, self.default_locale) == (locale, translations, default_locale):
            return self
        return self.model_copy(
            update={"locale": locale, "translations": translations, "default_locale": default_locale}
        )

    def localized(self, locale: str) -> "Holiday":
        return self.model_copy(update={"locale": locale})

    def __str__(self) -> str:
        return self.date.isoformat()

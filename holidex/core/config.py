from datetime import MAXYEAR, MINYEAR
from functools import lru_cache
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator

from .exceptions import InvalidArgumentError
from .translations import DEFAULT_LOCALE, Translations, normalize_locale


def check_timezone(name: str) -> str:
    """Return `name` if it is a known IANA zone; raise InvalidArgumentError otherwise."""
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidArgumentError(f"Unknown timezone: {name!r}") from e
    return name


@lru_cache(maxsize=None)
def _load_translations(directory: str) -> Translations:
    # One load per directory and process; tables are read-only afterwards.
    return Translations.from_directory(directory)


class EngineConfig(BaseModel):
    # Display
    locale: str = Field(default=DEFAULT_LOCALE, description="Locale holiday names are rendered in")
    default_locale: str = Field(default=DEFAULT_LOCALE, description="Fallback locale for missing translations")
    strict_locale: bool = Field(default=False, description="Reject malformed or unknown locale tags")

    # Data
    translations_dir: Optional[Path] = Field(default=None, description="Directory of <holidayKey>.json translation files")
    timezone: Optional[str] = Field(default=None, description="Override the jurisdiction's timezone")

    # Supported years
    min_year: int = Field(default=MINYEAR, ge=MINYEAR, le=MAXYEAR)
    max_year: int = Field(default=MAXYEAR, ge=MINYEAR, le=MAXYEAR)

    @field_validator("locale", "default_locale")
    @classmethod
    def validate_locale_tag(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("locale can not be blank")
        return normalize_locale(v)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            check_timezone(v)
        return v

    @model_validator(mode="after")
    def validate_year_range(self) -> "EngineConfig":
        if self.min_year > self.max_year:
            raise ValueError("min_year must be <= max_year")
        return self

    def check_year(self, year: int) -> int:
        if isinstance(year, bool) or not isinstance(year, int):
            raise InvalidArgumentError(f"Year must be an integer; got {year!r}")
        if not self.min_year <= year <= self.max_year:
            raise InvalidArgumentError(f"Year must be within {self.min_year}..{self.max_year}; got {year}")
        return year

    def load_translations(self) -> Optional[Translations]:
        if self.translations_dir is None:
            return None
        return _load_translations(str(self.translations_dir))

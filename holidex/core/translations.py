"""Holiday name translations and display-name resolution.

Global translations are loaded once per process and are read-only afterwards;
registries and holidays only ever hold a reference to them.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Union
import json
import logging
import re

from .exceptions import InvalidArgumentError


logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"

_LOCALE_PATTERN = re.compile(r"^[a-z]{2,3}(?:_[A-Z][a-z]{3})?(?:_(?:[A-Z]{2}|\d{3}))?$")


def normalize_locale(locale: str) -> str:
    """Accept BCP 47 style separators: ``fr-CA`` becomes ``fr_CA``."""
    return locale.strip().replace("-", "_")


def base_language(locale: str) -> str:
    return normalize_locale(locale).split("_", 1)[0]


def validate_locale(locale: str, strict: bool = False, available: Optional[Iterable[str]] = None) -> str:
    """Normalize `locale`; in strict mode reject malformed or unavailable tags."""
    if not isinstance(locale, str) or not locale.strip():
        raise InvalidArgumentError("Locale can not be blank.")

    normalized = normalize_locale(locale)
    if not strict:
        return normalized

    if not _LOCALE_PATTERN.match(normalized):
        raise InvalidArgumentError(f"Malformed locale tag: {locale!r}")
    if available is not None:
        known = set(available)
        if known and normalized not in known and base_language(normalized) not in known:
            raise InvalidArgumentError(f"Unknown locale: {locale!r}")
    return normalized


class Translations:
    """Global translation table: locale -> (holiday key -> name)."""

    def __init__(self, tables: Optional[Mapping[str, Mapping[str, str]]] = None):
        self._tables: Dict[str, Mapping[str, str]] = {}
        for locale, entries in (tables or {}).items():
            self._tables[normalize_locale(locale)] = MappingProxyType(dict(entries))

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "Translations":
        """Load one JSON file per holiday key, each mapping locale -> name.

        ``goodFriday.json`` containing ``{"en_US": "Good Friday"}`` registers
        ``en_US -> goodFriday -> "Good Friday"``.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise InvalidArgumentError(f"Translations directory does not exist: {directory}")

        tables: Dict[str, Dict[str, str]] = {}
        for path in sorted(directory.glob("*.json")):
            try:
                names = json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                raise InvalidArgumentError(f"Malformed translation file {path.name}: {e}") from e
            if not isinstance(names, dict):
                raise InvalidArgumentError(f"Translation file {path.name} must hold a locale mapping")

            for locale, name in names.items():
                tables.setdefault(normalize_locale(locale), {})[path.stem] = str(name)

        logger.debug("Loaded translations for %d locales from %s", len(tables), directory)
        return cls(tables)

    @property
    def locales(self) -> List[str]:
        return sorted(self._tables)

    def get(self, locale: str, key: str) -> Optional[str]:
        table = self._tables.get(normalize_locale(locale))
        if table is None:
            return None
        return table.get(key)

    def for_key(self, key: str) -> Dict[str, str]:
        """All translations of one holiday, keyed by locale."""
        return {locale: table[key] for locale, table in self._tables.items() if key in table}

    def __contains__(self, locale: str) -> bool:
        return normalize_locale(locale) in self._tables

    def __len__(self) -> int:
        return len(self._tables)


def resolve_name(
    key: str,
    locale: str,
    own: Optional[Mapping[str, str]] = None,
    global_translations: Optional[Translations] = None,
    default_locale: str = DEFAULT_LOCALE,
) -> str:
    """Display name for holiday `key` in `locale`; never fails.

    Order: own exact locale, own base language, global exact locale, global
    base language, then the default locale (own, global) and finally the key.
    """
    own = own or {}
    locale = normalize_locale(locale) if locale else default_locale
    language = base_language(locale)

    candidates = [own.get(locale), own.get(language)]
    if global_translations is not None:
        candidates += [global_translations.get(locale, key), global_translations.get(language, key)]
    candidates.append(own.get(default_locale))
    if global_translations is not None:
        candidates.append(global_translations.get(default_locale, key))

    for name in candidates:
        if name:
            return name
    return key

from typing import Callable, Dict, List, Optional
import importlib
import logging
import pkgutil
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .calendar import HolidayRegistry
from .config import EngineConfig, check_timezone
from .exceptions import InvalidArgumentError, NotFoundError
from .translations import Translations, validate_locale


logger = logging.getLogger(__name__)

Builder = Callable[[HolidayRegistry], None]


class Jurisdiction(BaseModel):
    """A country or sub-region and the builder populating its registries."""
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    timezone: str
    builder: Callable[..., None]
    parent: Optional[str] = None


class JurisdictionRegistry:
    _instance: Optional["JurisdictionRegistry"] = None
    _jurisdictions: Dict[str, Jurisdiction] = {}
    _discovered: bool = False

    def __new__(cls) -> "JurisdictionRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def register(cls, jurisdiction: Jurisdiction) -> None:
        check_timezone(jurisdiction.timezone)
        code = jurisdiction.code.upper()
        if code in cls._jurisdictions:
            logger.warning("Jurisdiction %s registered twice; keeping the latest", code)
        cls._jurisdictions[code] = jurisdiction

    @classmethod
    def get_jurisdiction(cls, code: str) -> Optional[Jurisdiction]:
        return cls._jurisdictions.get(code.upper())

    @classmethod
    def list_jurisdictions(cls) -> List[str]:
        return sorted(cls._jurisdictions)

    @classmethod
    def regions_of(cls, code: str) -> List[str]:
        code = code.upper()
        return sorted(c for c, j in cls._jurisdictions.items() if j.parent and j.parent.upper() == code)

    @classmethod
    def create(
        cls,
        code: str,
        year: int,
        locale: Optional[str] = None,
        translations: Optional[Translations] = None,
        config: Optional[EngineConfig] = None,
    ) -> HolidayRegistry:
        """Build the holiday registry of `code` for `year`."""
        if not code:
            raise InvalidArgumentError("Jurisdiction code can not be blank.")
        config = config or EngineConfig()

        jurisdiction = cls.get_jurisdiction(code)
        if jurisdiction is None and not cls._discovered:
            cls.discover_jurisdictions()
            jurisdiction = cls.get_jurisdiction(code)
        if jurisdiction is None:
            raise NotFoundError(f"Unknown jurisdiction: {code}")

        config.check_year(year)
        if translations is None:
            translations = config.load_translations()
        locale = validate_locale(
            locale or config.locale,
            strict=config.strict_locale,
            available=translations.locales if translations is not None else None,
        )

        registry = HolidayRegistry(
            code=jurisdiction.code,
            year=year,
            locale=locale,
            timezone=config.timezone or jurisdiction.timezone,
            translations=translations,
            default_locale=config.default_locale,
            factory=lambda other_year: cls.create(code, other_year, locale, translations, config),
        )
        jurisdiction.builder(registry)
        registry.seal()

        logger.debug("Built %s %d with %d holidays", registry.code, year, registry.count())
        return registry

    @classmethod
    def discover_jurisdictions(cls, package_path: str = "holidex.jurisdictions") -> None:
        cls._discovered = True
        try:
            package = importlib.import_module(package_path)
        except ImportError:
            logger.warning("Jurisdiction package %s not found", package_path)
            return

        package_dir = Path(package.__file__).parent
        # Walk through all Python modules in the jurisdictions package
        for _, module_name, _ in pkgutil.iter_modules([str(package_dir)]):
            module_path = f"{package_path}.{module_name}"
            try:
                importlib.import_module(module_path)
            except ImportError as e:
                logger.warning("Skipping jurisdiction module %s: %s", module_path, e)


def register_jurisdiction(code: str, name: str, timezone: str, parent: Optional[str] = None):
    def decorator(builder: Builder) -> Builder:
        JurisdictionRegistry.register(Jurisdiction(
            code=code.upper(),
            name=name,
            timezone=timezone,
            builder=builder,
            parent=parent,
        ))
        return builder
    return decorator

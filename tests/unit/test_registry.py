import pytest
from datetime import date

from holidex.core.calendar import HolidayRegistry, RegistryState
from holidex.core.config import EngineConfig
from holidex.core.exceptions import InvalidArgumentError, NotFoundError
from holidex.core.holiday import Holiday
from holidex.core.registry import Jurisdiction, JurisdictionRegistry, register_jurisdiction
from holidex.core.translations import Translations


@pytest.fixture
def clean_registry(monkeypatch):
    monkeypatch.setattr(JurisdictionRegistry, "_jurisdictions", {})
    monkeypatch.setattr(JurisdictionRegistry, "_discovered", True)
    return JurisdictionRegistry


def founders(registry: HolidayRegistry) -> None:
    registry.add(Holiday(key="newYearsDay", date=date(registry.year, 1, 1), names={"en_US": "New Year's Day"}))
    if registry.year >= 2000:
        registry.add(Holiday(
            key="foundersDay",
            date=date(registry.year, 3, 1),
            names={"en_US": "Founders' Day", "fr": "Jour des fondateurs"},
        ))


def test_jurisdiction_registry_singleton():
    assert JurisdictionRegistry() is JurisdictionRegistry()


def test_register_jurisdiction_decorator(clean_registry):
    @register_jurisdiction("xx", "Exampleland", "UTC")
    def exampleland(registry):
        founders(registry)

    jurisdiction = clean_registry.get_jurisdiction("XX")
    assert jurisdiction.builder is exampleland
    assert jurisdiction.code == "XX"
    assert clean_registry.get_jurisdiction("xx") is jurisdiction


def test_registry_operations(clean_registry):
    clean_registry.register(Jurisdiction(code="XX", name="Exampleland", timezone="UTC", builder=founders))
    clean_registry.register(Jurisdiction(code="XX-N", name="North", timezone="UTC", builder=founders, parent="XX"))

    assert clean_registry.list_jurisdictions() == ["XX", "XX-N"]
    assert clean_registry.regions_of("XX") == ["XX-N"]
    assert clean_registry.regions_of("XX-N") == []


def test_register_rejects_unknown_timezone(clean_registry):
    with pytest.raises(InvalidArgumentError):
        clean_registry.register(Jurisdiction(code="XX", name="Exampleland", timezone="Mars/Olympus", builder=founders))


class TestCreate:

    @pytest.fixture(autouse=True)
    def exampleland(self, clean_registry):
        clean_registry.register(Jurisdiction(code="XX", name="Exampleland", timezone="Europe/Paris", builder=founders))

    def test_create_builds_and_seals(self):
        registry = JurisdictionRegistry.create("XX", 2024)
        assert registry.holiday_names() == ["newYearsDay", "foundersDay"]
        assert registry.state == RegistryState.QUERYABLE
        assert registry.timezone == "Europe/Paris"

    def test_unknown_jurisdiction(self):
        with pytest.raises(NotFoundError, match="Unknown jurisdiction"):
            JurisdictionRegistry.create("ZZ", 2024)

    def test_blank_code(self):
        with pytest.raises(InvalidArgumentError):
            JurisdictionRegistry.create("", 2024)

    def test_year_outside_configured_range(self):
        config = EngineConfig(min_year=1900, max_year=2100)
        with pytest.raises(InvalidArgumentError):
            JurisdictionRegistry.create("XX", 1899, config=config)

    def test_locale(self):
        registry = JurisdictionRegistry.create("XX", 2024, locale="fr-FR")
        assert registry.locale == "fr_FR"
        assert registry.get("foundersDay").name == "Jour des fondateurs"

    def test_config_locale_and_timezone(self):
        registry = JurisdictionRegistry.create("XX", 2024, config=EngineConfig(locale="fr_BE", timezone="Europe/Brussels"))
        assert registry.locale == "fr_BE"
        assert registry.timezone == "Europe/Brussels"

    def test_strict_locale(self):
        config = EngineConfig(strict_locale=True)
        with pytest.raises(InvalidArgumentError):
            JurisdictionRegistry.create("XX", 2024, locale="French", config=config)

    def test_strict_locale_checks_available_translations(self):
        config = EngineConfig(strict_locale=True)
        translations = Translations({"en_US": {}, "fr": {}})
        assert JurisdictionRegistry.create("XX", 2024, "fr_CA", translations, config).locale == "fr_CA"
        with pytest.raises(InvalidArgumentError):
            JurisdictionRegistry.create("XX", 2024, "de_DE", translations, config)

    def test_translations_flow_into_holidays(self):
        translations = Translations({"nl": {"newYearsDay": "Nieuwjaar"}})
        registry = JurisdictionRegistry.create("XX", 2024, "nl_BE", translations)
        assert registry.get("newYearsDay").name == "Nieuwjaar"

    def test_own_base_language_beats_global_exact_locale(self):
        translations = Translations({"fr_FR": {"foundersDay": "Fête globale"}})
        registry = JurisdictionRegistry.create("XX", 2024, "fr_FR", translations)
        assert registry.get("foundersDay").name == "Jour des fondateurs"
        # No own entry for newYearsDay in fr, so the global table is used
        translations = Translations({"fr_FR": {"newYearsDay": "Jour de l'An"}})
        registry = JurisdictionRegistry.create("XX", 2024, "fr_FR", translations)
        assert registry.get("newYearsDay").name == "Jour de l'An"

    def test_config_default_locale_is_the_fallback(self):
        registry = JurisdictionRegistry.create("XX", 2024, "de_DE", config=EngineConfig(default_locale="fr"))
        assert registry.default_locale == "fr"
        assert registry.get("foundersDay").name == "Jour des fondateurs"
        # Nothing in fr or de for newYearsDay: the key is returned
        assert registry.get("newYearsDay").name == "newYearsDay"

    def test_next_and_previous_rebuild_the_jurisdiction(self):
        registry = JurisdictionRegistry.create("XX", 2024, locale="fr_FR")
        assert registry.next("foundersDay").date == date(2025, 3, 1)
        assert registry.previous("foundersDay").date == date(2023, 3, 1)
        assert registry.next("foundersDay").name == "Jour des fondateurs"

    def test_previous_before_establishment_year(self):
        with pytest.raises(NotFoundError):
            JurisdictionRegistry.create("XX", 2000).previous("foundersDay")
        assert str(JurisdictionRegistry.create("XX", 2001).previous("foundersDay")) == "2000-03-01"

    def test_independent_instances(self):
        first = JurisdictionRegistry.create("XX", 2024)
        second = JurisdictionRegistry.create("XX", 2024)
        first.remove("foundersDay")
        assert "foundersDay" in second


def test_discover_missing_package(clean_registry):
    clean_registry.discover_jurisdictions("holidex.no_such_package")
    assert clean_registry.list_jurisdictions() == []

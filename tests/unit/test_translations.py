import json
import pytest

from holidex.core.exceptions import InvalidArgumentError
from holidex.core.translations import (
    Translations, base_language, normalize_locale, resolve_name, validate_locale
)


THANKSGIVING = {"fr_CA": "Action de grâce", "en_US": "Thanksgiving"}


class TestResolveName:
    """Precedence: own exact, own language, global exact, global language, default."""

    def test_own_exact_locale(self):
        assert resolve_name("thanksgiving", "fr_CA", THANKSGIVING) == "Action de grâce"

    def test_own_base_language(self):
        own = {"fr": "Action de grâces", "en_US": "Thanksgiving"}
        assert resolve_name("thanksgiving", "fr_FR", own) == "Action de grâces"

    def test_sibling_locale_is_not_a_match(self):
        # fr_CA does not serve fr_FR; falls through to the default locale
        assert resolve_name("thanksgiving", "fr_FR", THANKSGIVING) == "Thanksgiving"

    def test_global_exact_locale(self):
        global_translations = Translations({
            "fr_FR": {"thanksgiving": "Jour de l'Action de grâce"},
            "fr": {"thanksgiving": "Action de grâces"},
        })
        assert resolve_name("thanksgiving", "fr_FR", THANKSGIVING, global_translations) == "Jour de l'Action de grâce"

    def test_global_base_language(self):
        global_translations = Translations({"fr": {"thanksgiving": "Action de grâces"}})
        assert resolve_name("thanksgiving", "fr_FR", THANKSGIVING, global_translations) == "Action de grâces"

    def test_own_entries_win_over_global(self):
        global_translations = Translations({"fr_CA": {"thanksgiving": "Autre nom"}})
        assert resolve_name("thanksgiving", "fr_CA", THANKSGIVING, global_translations) == "Action de grâce"

    def test_global_default_locale(self):
        global_translations = Translations({"en_US": {"thanksgiving": "Thanksgiving Day"}})
        assert resolve_name("thanksgiving", "de_DE", {"fr_CA": "Action de grâce"}, global_translations) == "Thanksgiving Day"

    def test_key_is_the_last_resort(self):
        assert resolve_name("thanksgiving", "fr_FR", {}) == "thanksgiving"
        assert resolve_name("thanksgiving", "fr_FR", None, Translations()) == "thanksgiving"

    def test_custom_default_locale(self):
        assert resolve_name("thanksgiving", "de_DE", THANKSGIVING, default_locale="fr_CA") == "Action de grâce"

    def test_bcp47_separator(self):
        assert resolve_name("thanksgiving", "fr-CA", THANKSGIVING) == "Action de grâce"


class TestTranslations:

    def test_lookup(self):
        translations = Translations({"nl": {"easter": "Pasen"}})
        assert translations.get("nl", "easter") == "Pasen"
        assert translations.get("nl", "christmasDay") is None
        assert translations.get("de", "easter") is None
        assert "nl" in translations
        assert len(translations) == 1

    def test_tables_are_read_only(self):
        translations = Translations({"nl": {"easter": "Pasen"}})
        with pytest.raises(TypeError):
            translations._tables["nl"]["easter"] = "Paasdag"

    def test_source_mapping_is_copied(self):
        source = {"nl": {"easter": "Pasen"}}
        translations = Translations(source)
        source["nl"]["easter"] = "Paasdag"
        assert translations.get("nl", "easter") == "Pasen"

    def test_for_key(self):
        translations = Translations({"nl": {"easter": "Pasen"}, "de": {"easter": "Ostern"}})
        assert translations.for_key("easter") == {"nl": "Pasen", "de": "Ostern"}
        assert translations.for_key("christmasDay") == {}

    def test_from_directory(self, tmp_path):
        (tmp_path / "easter.json").write_text(json.dumps({"nl_BE": "Pasen", "de": "Ostern"}), encoding="utf-8")
        (tmp_path / "christmasDay.json").write_text(json.dumps({"nl-BE": "Kerstmis"}), encoding="utf-8")

        translations = Translations.from_directory(tmp_path)
        assert translations.locales == ["de", "nl_BE"]
        assert translations.get("nl_BE", "christmasDay") == "Kerstmis"
        assert translations.get("de", "easter") == "Ostern"

    def test_from_missing_directory(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            Translations.from_directory(tmp_path / "missing")

    def test_from_directory_with_malformed_file(self, tmp_path):
        (tmp_path / "easter.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidArgumentError):
            Translations.from_directory(tmp_path)


class TestLocales:

    def test_normalize(self):
        assert normalize_locale("fr-CA") == "fr_CA"
        assert base_language("fr_CA") == "fr"
        assert base_language("ro") == "ro"

    def test_lenient_validation_accepts_anything_non_blank(self):
        assert validate_locale("whatever") == "whatever"

    def test_blank_locale_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            validate_locale("  ")

    @pytest.mark.parametrize("locale", ["en_US", "fr", "zh_Hant_TW", "es_419"])
    def test_strict_validation_accepts_well_formed_tags(self, locale):
        assert validate_locale(locale, strict=True) == locale

    @pytest.mark.parametrize("locale", ["EN_us", "english", "fr_CA_", "12"])
    def test_strict_validation_rejects_malformed_tags(self, locale):
        with pytest.raises(InvalidArgumentError):
            validate_locale(locale, strict=True)

    def test_strict_validation_against_available_locales(self):
        available = ["en_US", "fr"]
        assert validate_locale("fr_BE", strict=True, available=available) == "fr_BE"
        with pytest.raises(InvalidArgumentError):
            validate_locale("de_DE", strict=True, available=available)

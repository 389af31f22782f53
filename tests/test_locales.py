"""
Unit tests for locale parsing and locale-tailored case mapping.
"""
import pytest

from string_renderer import config
from string_renderer.formatting import InvalidLocaleError, LocaleId, parse_locale
from string_renderer.formatting.locales import lower, upper


class TestParseLocale:
    """Tests for parse_locale function"""

    def test_language_only(self):
        loc = parse_locale("en")
        assert loc.language == "en"
        assert loc.territory is None
        assert loc.tag == "en"

    def test_language_and_territory(self):
        loc = parse_locale("en_US")
        assert (loc.language, loc.territory) == ("en", "US")

    def test_hyphen_separator_and_case_normalized(self):
        loc = parse_locale("TR-tr")
        assert loc.tag == "tr_TR"

    def test_encoding_suffix_ignored(self):
        assert parse_locale("de_DE.UTF-8").tag == "de_DE"

    def test_modifier_becomes_variant(self):
        loc = parse_locale("sr_RS@latin")
        assert loc.variant == "latin"
        assert str(loc) == "sr_RS_latin"

    def test_numeric_region(self):
        assert parse_locale("es_419").territory == "419"

    def test_locale_id_passed_through(self):
        loc = LocaleId(language="lt")
        assert parse_locale(loc) is loc

    def test_none_uses_default(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_LOCALE", "az")
        assert parse_locale(None).language == "az"

    @pytest.mark.parametrize("value", ["", "   ", "e", "en_USA_", "en US", "12_34"])
    def test_malformed_rejected(self, value):
        with pytest.raises(InvalidLocaleError):
            parse_locale(value)

    def test_turkic_flags(self):
        assert parse_locale("tr").is_turkic is True
        assert parse_locale("az_AZ").is_turkic is True
        assert parse_locale("en").is_turkic is False


class TestUpper:
    """Tests for locale-tailored uppercase"""

    def test_default_mapping(self):
        assert upper("istanbul", "en") == "ISTANBUL"

    def test_turkish_dotted_capital(self):
        assert upper("istanbul", "tr") == "İSTANBUL"

    def test_turkish_dotless_i(self):
        assert upper("ı", "tr") == "I"

    def test_lithuanian_drops_dot_after_soft_dotted(self):
        assert upper("i\u0307x", "lt") == "IX"

    def test_lithuanian_keeps_dot_after_other_letters(self):
        assert upper("a\u0307", "lt") == "A\u0307"

    def test_lithuanian_dot_after_accent_kept(self):
        """An intervening accent above blocks the removal"""
        assert upper("i\u0301\u0307", "lt") == "I\u0301\u0307"

    def test_dot_kept_outside_lithuanian(self):
        assert upper("i\u0307x", "en") == "I\u0307X"


class TestLower:
    """Tests for locale-tailored lowercase"""

    def test_default_mapping(self):
        assert lower("TITLE", "en") == "title"

    def test_turkish_capital_i_is_dotless(self):
        assert lower("TITLE", "tr") == "tıtle"

    def test_turkish_dotted_capital(self):
        assert lower("İZMİR", "tr") == "izmir"

    def test_turkish_i_with_combining_dot(self):
        assert lower("I\u0307", "tr") == "i"

    def test_lithuanian_keeps_dot_before_accent(self):
        assert lower("\u00cd", "lt") == "i\u0307\u0301"

    def test_lithuanian_combining_accent(self):
        assert lower("I\u0301", "lt") == "i\u0307\u0301"

    def test_lithuanian_without_accent(self):
        assert lower("I", "lt") == "i"

    def test_lithuanian_precomposed_grave(self):
        assert lower("\u00cc", "lt") == "i\u0307\u0300"

    def test_precomposed_grave_outside_lithuanian(self):
        assert lower("\u00cc", "en") == "\u00ec"

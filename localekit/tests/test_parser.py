"""Tests for the translation document parser."""

import pytest

from localekit.core.localization.parser import TranslationParseError, parse_translation_xml


class TestParseTranslationXml:
    """Document -> table conversion."""

    def test_entries_and_languages(self):
        """Each non-Key child becomes a language tag."""
        table = parse_translation_xml(
            "<Localization><Entry><Key>welcome</Key>"
            "<English>Hello!</English><Spanish>¡Hola!</Spanish>"
            "</Entry></Localization>"
        )
        assert list(table) == ["welcome"]
        assert dict(table["welcome"]) == {"English": "Hello!", "Spanish": "¡Hola!"}

    def test_case_insensitive_keys_and_tags(self):
        """Both lookup levels ignore case."""
        table = parse_translation_xml(
            "<Localization><Entry><Key>welcome</Key><English>Hi</English></Entry></Localization>"
        )
        assert table["WELCOME"]["english"] == "Hi"

    def test_missing_or_empty_key_is_skipped(self):
        """Entries without a usable key are dropped silently."""
        table = parse_translation_xml(
            "<Localization>"
            "<Entry><English>orphan</English></Entry>"
            "<Entry><Key></Key><English>empty</English></Entry>"
            "<Entry><Key>ok</Key><English>kept</English></Entry>"
            "</Localization>"
        )
        assert list(table) == ["ok"]

    def test_empty_document(self):
        """A root with no entries parses to an empty table."""
        assert len(parse_translation_xml("<Localization/>")) == 0

    def test_arbitrary_language_sets(self):
        """Entries need not share language coverage."""
        table = parse_translation_xml(
            "<Localization>"
            "<Entry><Key>a</Key><English>A</English></Entry>"
            "<Entry><Key>b</Key><Klingon>B</Klingon><French></French></Entry>"
            "</Localization>"
        )
        assert dict(table["a"]) == {"English": "A"}
        assert dict(table["b"]) == {"Klingon": "B", "French": ""}

    def test_duplicate_key_last_wins(self):
        table = parse_translation_xml(
            "<Localization>"
            "<Entry><Key>k</Key><English>first</English></Entry>"
            "<Entry><Key>K</Key><English>second</English></Entry>"
            "</Localization>"
        )
        assert len(table) == 1
        assert table["k"]["English"] == "second"

    def test_declaration_and_comments(self):
        """XML declarations and comments are ignored."""
        table = parse_translation_xml(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            "<Localization><!-- note --><Entry><Key>k</Key>"
            "<!-- pending --><English>v</English></Entry></Localization>"
        )
        assert dict(table["k"]) == {"English": "v"}

    def test_non_entry_children_ignored(self):
        table = parse_translation_xml(
            "<Localization><Meta>x</Meta><Entry><Key>k</Key><English>v</English></Entry></Localization>"
        )
        assert list(table) == ["k"]

    @pytest.mark.parametrize(
        "xml_text",
        ["", "<Localization>", "<Localization><Entry></Localization>", "not xml"],
    )
    def test_malformed_raises(self, xml_text):
        """Malformed markup raises TranslationParseError."""
        with pytest.raises(TranslationParseError):
            parse_translation_xml(xml_text)

    def test_parse_error_is_value_error(self):
        assert issubclass(TranslationParseError, ValueError)

    def test_lone_surrogate_raises_parse_error(self):
        """Text that cannot be encoded is reported like malformed markup."""
        with pytest.raises(TranslationParseError):
            parse_translation_xml("<Localization>\udcff</Localization>")

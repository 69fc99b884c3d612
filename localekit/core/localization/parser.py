#!/usr/bin/env python3
"""Translation document parser.

Document layout::

    <Localization>
      <Entry>
        <Key>welcome</Key>
        <English>Hello!</English>
        <Spanish>¡Hola!</Spanish>
      </Entry>
    </Localization>

Every ``Entry`` child other than ``Key`` is a language tag. Entries may carry
any set of languages.
"""

import xml.etree.ElementTree as ET

from requests.structures import CaseInsensitiveDict

__all__ = [
    "ENTRY_TAG",
    "KEY_TAG",
    "LanguageMap",
    "TranslationParseError",
    "TranslationTable",
    "parse_translation_xml",
]

ENTRY_TAG = "Entry"
KEY_TAG = "Key"

# Both levels match case-insensitively: key -> (language tag -> text)
LanguageMap = CaseInsensitiveDict
TranslationTable = CaseInsensitiveDict


class TranslationParseError(ValueError):
    """Raised when a translation document is not well-formed XML."""


def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _text_of(element: ET.Element) -> str:
    """Full text content of an element, including nested children."""
    return "".join(element.itertext())


def parse_translation_xml(xml_text: str) -> TranslationTable:
    """Parse a translation document into a fresh table.

    Entries without a ``Key`` child, or with an empty key, are skipped.
    A repeated key or language tag replaces the earlier one.

    Args:
        xml_text: Document text

    Returns:
        TranslationTable mapping key -> LanguageMap

    Raises:
        TranslationParseError: If the document is malformed
    """
    try:
        root = ET.fromstring(xml_text)
    except (ET.ParseError, ValueError) as e:
        # ValueError covers UnicodeError from unencodable text (lone surrogates)
        raise TranslationParseError(str(e)) from e

    table = TranslationTable()

    for entry in root:
        if not isinstance(entry.tag, str) or _local_name(entry.tag) != ENTRY_TAG:
            continue

        key = None
        languages = LanguageMap()
        for child in entry:
            if not isinstance(child.tag, str):
                continue
            name = _local_name(child.tag)
            if name == KEY_TAG:
                if key is None:
                    key = _text_of(child)
                continue
            languages[name] = _text_of(child)

        if not key:
            continue

        table[key] = languages

    return table

"""Localization package.

Structure:
    - parser.py: XML document -> translation table
    - store.py: TranslationStore (lookup, language switching, change events)
    - sources.py: read documents from files or URLs
"""

from .parser import LanguageMap, TranslationParseError, TranslationTable, parse_translation_xml
from .sources import TranslationSourceError, fetch_xml, read_xml_file
from .store import DEFAULT_LANGUAGE, PREF_KEY, LoadResult, TranslationStore

__all__ = [
    "DEFAULT_LANGUAGE",
    "PREF_KEY",
    "LanguageMap",
    "LoadResult",
    "TranslationParseError",
    "TranslationSourceError",
    "TranslationStore",
    "TranslationTable",
    "fetch_xml",
    "parse_translation_xml",
    "read_xml_file",
]

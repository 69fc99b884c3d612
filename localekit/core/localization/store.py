#!/usr/bin/env python3
"""Translation store with event-driven language switching.

The store owns two independent pieces of state:
- the translation table, rebuilt on every ``load_xml``
- the current language, persisted through a ``PreferenceStore``

Listeners subscribe to ``EventType.LOCALIZATION_CHANGED`` and re-query the
store with ``get`` when it fires. The event carries no payload.

Only one store should exist per process. ``localekit.app_context`` builds it;
everything else receives it as a constructor argument.
"""

from collections.abc import Callable
from dataclasses import dataclass

from localekit.core.event_bus import Event, EventBus, Subscription
from localekit.core.events import EventType
from localekit.core.localization.parser import (
    TranslationParseError,
    TranslationTable,
    parse_translation_xml,
)
from localekit.core.logging_utils import log_event, setup_logger
from localekit.core.preferences import PreferenceStore

logger = setup_logger(__name__)

DEFAULT_LANGUAGE = "English"
PREF_KEY = "Loc_SelectedLanguage"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of ``TranslationStore.load_xml``."""

    ok: bool
    entry_count: int = 0
    error: str | None = None

    def __bool__(self) -> bool:
        return self.ok


class TranslationStore:
    """Serves translated strings for the current language."""

    def __init__(
        self,
        preferences: PreferenceStore,
        event_bus: EventBus | None = None,
        default_language: str = DEFAULT_LANGUAGE,
        preference_key: str = PREF_KEY,
    ):
        """Initialize the store and restore the saved language.

        Args:
            preferences: Where the language selection is persisted
            event_bus: Bus used for change notifications (a private one if omitted)
            default_language: Second lookup step and initial selection
            preference_key: Preference identifier for the selection
        """
        self._preferences = preferences
        self._event_bus = event_bus or EventBus()
        self._default_language = default_language
        self._preference_key = preference_key

        self._entries: TranslationTable = TranslationTable()
        self._xml_loaded = False
        self._current_language = preferences.get_string(preference_key, default_language)

    @property
    def current_language(self) -> str:
        """Currently selected language tag (e.g. "English")."""
        return self._current_language

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def is_loaded(self) -> bool:
        """True once a document has been parsed successfully (reset by a failed load)."""
        return self._xml_loaded

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self._xml_loaded and key in self._entries

    def __getitem__(self, key: str) -> str:
        """Quick access: ``store["welcome"]``, falling back to the key itself."""
        return self.get(key, fallback=key)

    def load_xml(self, xml_text: str) -> LoadResult:
        """Replace the translation table with the contents of ``xml_text``.

        On success the change event fires, even if the table is unchanged.
        On a malformed document the table is left empty, ``is_loaded`` turns
        False and no event fires. The error is logged, not raised.

        Args:
            xml_text: Translation document

        Returns:
            LoadResult describing the outcome
        """
        self._entries = TranslationTable()
        self._xml_loaded = False

        try:
            entries = parse_translation_xml(xml_text)
        except TranslationParseError as e:
            logger.error(f"Failed to parse translation XML: {e}")
            return LoadResult(ok=False, error=str(e))

        self._entries = entries
        self._xml_loaded = True
        logger.info(f"Loaded {len(entries):,} translation entries")
        self._notify("load_xml")
        return LoadResult(ok=True, entry_count=len(entries))

    def set_language(self, language: str) -> bool:
        """Switch the current language.

        Selecting the current language again (case-insensitively) does nothing.
        Otherwise the selection is saved, and the change event fires if a
        document has been loaded. Languages absent from the table are accepted;
        lookups then fall back to the default language.

        Args:
            language: Language tag (e.g. "Spanish")

        Returns:
            True if the selection changed
        """
        if self._current_language.lower() == language.lower():
            return False

        old_language = self._current_language
        self._current_language = language
        self._preferences.set_string(self._preference_key, language)
        self._preferences.save()

        if self._xml_loaded:
            self._notify("set_language")
        log_event(logger, "language_switched", {"from": old_language, "to": language})
        return True

    def get(self, key: str, fallback: str = "") -> str:
        """Look up ``key`` for the current language.

        Order: current language, then the default language, then ``fallback``.
        Empty translations are skipped.

        Args:
            key: Translation key (case-insensitive)
            fallback: Returned when nothing better is available

        Returns:
            Translated string or ``fallback``
        """
        if not self._xml_loaded:
            return fallback

        languages = self._entries.get(key)
        if languages is None:
            return fallback

        value = languages.get(self._current_language)
        if value:
            return value

        default_value = languages.get(self._default_language)
        if default_value:
            return default_value

        return fallback

    def languages(self) -> list[str]:
        """Distinct language tags present in the table, sorted case-insensitively."""
        seen: dict[str, str] = {}
        for language_map in self._entries.values():
            for tag in language_map:
                seen.setdefault(tag.lower(), tag)
        return sorted(seen.values(), key=str.lower)

    def subscribe(self, handler: Callable[[Event], None]) -> Subscription:
        """Register a change listener.

        Args:
            handler: Callback function(event)

        Returns:
            Subscription token for ``unsubscribe``
        """
        return self._event_bus.subscribe(EventType.LOCALIZATION_CHANGED, handler)

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove a change listener registered with ``subscribe``."""
        return self._event_bus.unsubscribe(subscription)

    def _notify(self, reason: str):
        self._event_bus.emit(EventType.LOCALIZATION_CHANGED, source=f"translation_store.{reason}")

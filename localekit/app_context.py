#!/usr/bin/env python3
"""Application composition: builds the one TranslationStore and its collaborators.

``build_app_context`` is the only place a TranslationStore is constructed.
Call it once per process and pass ``ctx.store`` to whatever needs lookups.
"""

from typing import Any

from localekit.core.config_loader import resolve_path
from localekit.core.event_bus import EventBus
from localekit.core.events import EventType
from localekit.core.localization import (
    LoadResult,
    TranslationStore,
    fetch_xml,
    read_xml_file,
)
from localekit.core.logging_utils import log_event, setup_logger
from localekit.core.preferences import JsonPreferenceStore, PreferenceStore

logger = setup_logger(__name__)


class AppContext:
    """Central context object containing all app-level dependencies."""

    def __init__(self, config, event_bus, preferences, store):
        """Initialize app context with all dependencies.

        Args:
            config: Application configuration dict
            event_bus: EventBus instance
            preferences: PreferenceStore instance
            store: TranslationStore instance
        """
        self.config = config
        self.event_bus = event_bus
        self.preferences = preferences
        self.store = store


def build_app_context(
    config: dict[str, Any],
    preferences: PreferenceStore | None = None,
    event_bus: EventBus | None = None,
) -> AppContext:
    """Create the event bus, preference store and translation store.

    Args:
        config: Validated configuration dict
        preferences: Preference store override (default: JSON file from config)
        event_bus: Event bus override

    Returns:
        AppContext
    """
    loc_config = config.get("localization", {})

    if preferences is None:
        prefs_path = resolve_path(config.get("preferences", {}).get("path", "runtime/preferences.json"))
        preferences = JsonPreferenceStore(prefs_path)

    event_bus = event_bus or EventBus()
    store = TranslationStore(
        preferences,
        event_bus=event_bus,
        default_language=loc_config.get("default_language", "English"),
        preference_key=loc_config.get("preference_key", "Loc_SelectedLanguage"),
    )
    logger.info(f"Translation store ready, language={store.current_language}")

    return AppContext(config, event_bus, preferences, store)


def load_translations(ctx: AppContext) -> LoadResult:
    """Load the configured translation document into the store.

    ``localization.source_url`` wins over ``localization.source`` when both are set.

    Args:
        ctx: Application context

    Returns:
        LoadResult from the store

    Raises:
        TranslationSourceError: If the document cannot be read or downloaded
        ValueError: If no source is configured
    """
    loc_config = ctx.config.get("localization", {})
    url = loc_config.get("source_url")
    source = loc_config.get("source")

    if url:
        xml_text = fetch_xml(
            url,
            timeout=loc_config.get("fetch_timeout", 5.0),
            tries=loc_config.get("fetch_retries", 3),
        )
    elif source:
        xml_text = read_xml_file(resolve_path(source))
    else:
        raise ValueError("No translation source configured (localization.source or source_url)")

    return ctx.store.load_xml(xml_text)


def shutdown_app(ctx: AppContext):
    """Announce shutdown, log bus metrics and stop the event bus.

    Subscribers to ``EventType.SHUTDOWN`` run before the bus drops them.
    Nothing is delivered afterwards.
    """
    ctx.event_bus.emit(EventType.SHUTDOWN, source="app")
    log_event(logger, "event_bus_metrics", ctx.event_bus.get_metrics())
    ctx.event_bus.shutdown()
    logger.info("localekit stopped")

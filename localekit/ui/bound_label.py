#!/usr/bin/env python3
"""Keep a text widget in sync with one translation key.

Usage:
    label = TextLabel("Play")
    binding = BoundLabel(store, "menu.play")
    binding.attach(label)      # label.text now follows the current language
    ...
    binding.detach()
"""

import weakref
from typing import Protocol

from localekit.core.event_bus import Event, EventBus, Subscription
from localekit.core.localization.store import TranslationStore
from localekit.core.logging_utils import setup_logger

logger = setup_logger(__name__)


class TextSurface(Protocol):
    """Anything with a writable ``text`` attribute."""

    text: str


class BoundLabel:
    """Binds a display surface to a translation key.

    The text a surface shows when first attached is kept as the fallback for
    keys the store cannot resolve. The store is held weakly; once it is gone
    the binding stops touching the surface.
    """

    def __init__(self, store: TranslationStore | None, key: str = ""):
        """Initialize binding.

        Args:
            store: Translation store (may be None)
            key: Translation key as it appears in the document's <Key> element
        """
        self._store_ref = weakref.ref(store) if store is not None else None
        self._key = key
        self._surface: TextSurface | None = None
        self._original_text = ""
        self._subscription: Subscription | None = None
        self._bus_ref: weakref.ref[EventBus] | None = None

    @property
    def key(self) -> str:
        return self._key

    @property
    def surface(self) -> TextSurface | None:
        return self._surface

    @property
    def original_text(self) -> str:
        """Text the surface had when it was first attached."""
        return self._original_text

    @property
    def is_attached(self) -> bool:
        return self._subscription is not None

    def _store(self) -> TranslationStore | None:
        return self._store_ref() if self._store_ref is not None else None

    def attach(self, surface: TextSurface):
        """Start following the store's change events.

        The surface's current text is captured the first time it is attached.
        Re-attaching the same surface after ``detach`` keeps the original capture.

        Args:
            surface: Widget whose ``text`` this binding controls
        """
        if surface is not self._surface:
            self._surface = surface
            self._original_text = surface.text

        store = self._store()
        if store is None:
            return

        if self._subscription is None:
            self._subscription = store.subscribe(self._on_localization_changed)
            self._bus_ref = weakref.ref(store.event_bus)
        self._refresh()

    def detach(self):
        """Stop following change events. Safe to call repeatedly."""
        if self._subscription is None:
            return

        # The bus may be shared and outlive the store
        bus = self._bus_ref() if self._bus_ref is not None else None
        if bus is not None:
            bus.unsubscribe(self._subscription)
        self._subscription = None
        self._bus_ref = None

    def set_key(self, key: str):
        """Change the key at runtime and refresh."""
        self._key = key
        self._refresh()

    def _refresh(self):
        """Write the current translation into the surface.

        Leaves the surface untouched if there is no store, no surface or no key.
        """
        store = self._store()
        if store is None or self._surface is None or not self._key:
            return

        self._surface.text = store.get(self._key, self._original_text)

    def _on_localization_changed(self, event: Event):
        logger.debug(f"Refreshing '{self._key}' ({event.source})")
        self._refresh()

    def __repr__(self) -> str:
        state = "attached" if self.is_attached else "detached"
        return f"BoundLabel(key={self._key!r}, {state})"

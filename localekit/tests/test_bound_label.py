"""Tests for BoundLabel attach/detach/refresh behavior."""

import gc

import pytest

from localekit.core.event_bus import EventBus
from localekit.core.events import EventType
from localekit.core.localization import TranslationStore
from localekit.core.preferences import MemoryPreferenceStore
from localekit.ui.bound_label import BoundLabel
from localekit.ui.components import TextLabel

from conftest import QUIT_XML


class FakeSurface:
    """Minimal display surface that records every write."""

    def __init__(self, text=""):
        self._text = text
        self.writes = []

    @property
    def text(self):
        return self._text

    @text.setter
    def text(self, value):
        self._text = value
        self.writes.append(value)


class TestAttach:
    """Attaching a surface."""

    def test_attach_refreshes_immediately(self, loaded_store):
        surface = FakeSurface("Exit")
        binding = BoundLabel(loaded_store, "quit")
        binding.attach(surface)

        assert binding.is_attached
        assert binding.original_text == "Exit"
        assert surface.text == "Quit"

    def test_attach_before_load_keeps_design_text(self, store):
        surface = FakeSurface("Exit")
        BoundLabel(store, "quit").attach(surface)
        assert surface.text == "Exit"

    def test_follows_language_switch(self, loaded_store):
        surface = FakeSurface("Exit")
        BoundLabel(loaded_store, "quit").attach(surface)

        loaded_store.set_language("Spanish")
        assert surface.text == "Salir"

        loaded_store.set_language("French")
        assert surface.text == "Quit"

    def test_follows_later_load(self, store):
        surface = FakeSurface("Exit")
        BoundLabel(store, "quit").attach(surface)

        store.set_language("Spanish")
        store.load_xml(QUIT_XML)
        assert surface.text == "Salir"

    def test_missing_key_uses_captured_text(self, loaded_store):
        surface = FakeSurface("Play")
        BoundLabel(loaded_store, "missing_key").attach(surface)
        assert surface.text == "Play"

        loaded_store.set_language("Spanish")
        loaded_store.load_xml(QUIT_XML)
        assert surface.text == "Play"

    def test_attach_twice_subscribes_once(self, loaded_store, event_bus):
        surface = FakeSurface("Exit")
        binding = BoundLabel(loaded_store, "quit")
        binding.attach(surface)
        binding.attach(surface)
        assert event_bus.subscriber_count(EventType.LOCALIZATION_CHANGED) == 1
        surface.writes.clear()

        loaded_store.set_language("Spanish")
        assert surface.writes == ["Salir"]

    def test_reattach_keeps_original_capture(self, loaded_store):
        surface = FakeSurface("Exit")
        binding = BoundLabel(loaded_store, "quit")
        binding.attach(surface)
        binding.detach()
        binding.attach(surface)
        assert binding.original_text == "Exit"

    def test_works_with_text_label(self, loaded_store):
        label = TextLabel("Exit")
        BoundLabel(loaded_store, "quit").attach(label)
        assert label.text == "Quit"


class TestDetach:
    """Detaching a surface."""

    def test_detach_stops_updates(self, loaded_store):
        surface = FakeSurface("Exit")
        binding = BoundLabel(loaded_store, "quit")
        binding.attach(surface)
        binding.detach()

        assert not binding.is_attached
        loaded_store.set_language("Spanish")
        assert surface.text == "Quit"

    def test_detach_never_attached(self, loaded_store):
        binding = BoundLabel(loaded_store, "quit")
        binding.detach()
        binding.detach()
        assert not binding.is_attached

    def test_detach_is_idempotent(self, loaded_store):
        binding = BoundLabel(loaded_store, "quit")
        binding.attach(FakeSurface())
        binding.detach()
        binding.detach()
        assert not binding.is_attached

    def test_detach_during_dispatch(self, loaded_store):
        """A binding detached by an earlier listener is not refreshed."""
        surface = FakeSurface("Exit")
        binding = BoundLabel(loaded_store, "quit")
        loaded_store.subscribe(lambda event: binding.detach())
        binding.attach(surface)
        surface.writes.clear()

        loaded_store.set_language("Spanish")
        assert surface.writes == []
        assert not binding.is_attached


class TestSetKey:
    """Changing the key at runtime."""

    def test_set_key_refreshes(self, store):
        store.load_xml(
            "<Localization>"
            "<Entry><Key>play</Key><English>Play</English></Entry>"
            "<Entry><Key>quit</Key><English>Quit</English></Entry>"
            "</Localization>"
        )
        surface = FakeSurface("?")
        binding = BoundLabel(store, "play")
        binding.attach(surface)
        assert surface.text == "Play"

        binding.set_key("quit")
        assert binding.key == "quit"
        assert surface.text == "Quit"

    def test_empty_key_leaves_surface_untouched(self, loaded_store):
        surface = FakeSurface("Exit")
        binding = BoundLabel(loaded_store, "quit")
        binding.attach(surface)
        surface.writes.clear()

        binding.set_key("")
        assert surface.writes == []
        assert surface.text == "Quit"

    def test_set_key_without_surface(self, loaded_store):
        binding = BoundLabel(loaded_store)
        binding.set_key("quit")
        assert binding.surface is None


class TestNoStore:
    """Bindings without a live store are inert."""

    def test_none_store(self):
        surface = FakeSurface("Exit")
        binding = BoundLabel(None, "quit")
        binding.attach(surface)
        binding.set_key("other")
        binding.detach()

        assert surface.writes == []
        assert not binding.is_attached
        assert binding.original_text == "Exit"

    def test_store_released(self):
        store = TranslationStore(MemoryPreferenceStore())
        store.load_xml(QUIT_XML)
        surface = FakeSurface("Exit")
        binding = BoundLabel(store, "quit")
        binding.attach(surface)
        assert surface.text == "Quit"

        del store
        gc.collect()
        surface.writes.clear()

        binding.set_key("quit")
        binding.detach()
        assert surface.writes == []
        assert not binding.is_attached

    def test_store_released_detach_leaves_shared_bus(self):
        """Detach unsubscribes from a bus that outlives the store."""
        bus = EventBus()
        store = TranslationStore(MemoryPreferenceStore(), event_bus=bus)
        store.load_xml(QUIT_XML)
        binding = BoundLabel(store, "quit")
        binding.attach(FakeSurface("Exit"))
        assert bus.subscriber_count(EventType.LOCALIZATION_CHANGED) == 1

        del store
        gc.collect()

        binding.detach()
        assert not binding.is_attached
        assert bus.subscriber_count(EventType.LOCALIZATION_CHANGED) == 0


class TestRefreshIsInternal:
    """Refreshing happens through attach, set_key and store events only."""

    def test_no_public_refresh(self, loaded_store):
        binding = BoundLabel(loaded_store, "quit")
        with pytest.raises(AttributeError):
            binding.refresh()

    def test_set_key_after_detach_still_writes(self, loaded_store):
        surface = FakeSurface("Exit")
        binding = BoundLabel(loaded_store, "quit")
        binding.attach(surface)
        binding.detach()
        surface.writes.clear()

        loaded_store.set_language("Spanish")
        assert surface.writes == []

        binding.set_key("quit")
        assert surface.writes == ["Salir"]

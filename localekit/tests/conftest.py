"""Pytest configuration."""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from localekit.core.event_bus import EventBus  # noqa: E402
from localekit.core.localization import TranslationStore  # noqa: E402
from localekit.core.preferences import MemoryPreferenceStore  # noqa: E402

QUIT_XML = """
<Localization>
  <Entry>
    <Key>quit</Key>
    <English>Quit</English>
    <Spanish>Salir</Spanish>
  </Entry>
</Localization>
"""


@pytest.fixture
def preferences():
    return MemoryPreferenceStore()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def store(preferences, event_bus):
    return TranslationStore(preferences, event_bus=event_bus)


@pytest.fixture
def loaded_store(store):
    assert store.load_xml(QUIT_XML).ok
    return store

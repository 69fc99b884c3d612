#!/usr/bin/env python3
"""Key-value preference persistence.

The translation store keeps its language selection here. ``get_string`` is read
once at startup; ``set_string`` + ``save`` run on every language switch.
"""

import json
from pathlib import Path

from localekit.core.logging_utils import setup_logger

logger = setup_logger(__name__)


class PreferenceStore:
    """String preferences held in memory; subclasses decide how ``save`` persists."""

    def __init__(self, values: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(values or {})

    def get_string(self, key: str, default: str = "") -> str:
        """Get a stored string, or ``default`` when absent."""
        value = self._values.get(key)
        return value if isinstance(value, str) else default

    def set_string(self, key: str, value: str):
        """Set a string value (call ``save`` to persist)."""
        self._values[key] = value

    def has_key(self, key: str) -> bool:
        return key in self._values

    def delete_key(self, key: str):
        self._values.pop(key, None)

    def save(self):
        """Persist pending changes."""
        raise NotImplementedError


class MemoryPreferenceStore(PreferenceStore):
    """Ephemeral preferences, for tests and one-shot CLI runs."""

    def __init__(self, values: dict[str, str] | None = None):
        super().__init__(values)
        self.save_count = 0

    def save(self):
        self.save_count += 1


class JsonPreferenceStore(PreferenceStore):
    """Preferences persisted as a flat JSON object on disk."""

    def __init__(self, path: str | Path):
        """Load preferences from ``path``.

        A missing file starts empty. An unreadable or corrupt file is logged
        and also starts empty; it is overwritten on the next ``save``.

        Args:
            path: JSON file location
        """
        self.path = Path(path)
        super().__init__(self._read())

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: expected a JSON object")
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def save(self):
        """Write all preferences to disk.

        Raises:
            OSError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except OSError as e:
            logger.error(f"Failed to save preferences to {self.path}: {e}")
            raise

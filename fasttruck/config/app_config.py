"""
Application-level configuration (UI theme preference).

Built once by the composition root and passed down explicitly:

    store = JsonPreferenceStore(settings.PREFERENCES_PATH)
    config = AppConfig.init(store)   # reads the persisted preference once
    config.update(Theme.LIGHT)       # mutates in memory and persists
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class PreferenceStore(Protocol):
    """Small persistent key-value store for user preferences."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class JsonPreferenceStore:
    """PreferenceStore backed by a JSON object on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class AppConfig:
    """In-memory app configuration bound to the store it persists to."""

    def __init__(self, store: PreferenceStore, theme: Theme = Theme.DARK):
        self._store = store
        self.theme = theme

    @classmethod
    def init(cls, store: PreferenceStore) -> "AppConfig":
        """Read the persisted theme. Only an explicit "light" selects light mode."""
        saved = store.get(THEME_KEY)
        theme = Theme.LIGHT if saved == Theme.LIGHT.value else Theme.DARK
        return cls(store, theme)

    @property
    def dark(self) -> bool:
        return self.theme is Theme.DARK

    def update(self, theme: Theme) -> None:
        self.theme = Theme(theme)
        self._store.set(THEME_KEY, self.theme.value)
        logger.info(f"Theme set to {self.theme.value}")

    def toggle(self) -> Theme:
        self.update(Theme.LIGHT if self.dark else Theme.DARK)
        return self.theme

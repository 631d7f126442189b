"""Persistent key/value settings and the player's display preferences."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any

MASCOT_KEY = "settings/mascotEnabled"
MUSIC_KEY = "settings/musicEnabled"


class SettingsStore:
    """A flat mapping of string keys to JSON values.

    With a path, every change is written to that file at once; without one,
    the settings live in memory only.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._values: dict[str, Any] = self._read()

    def _read(self) -> dict[str, Any]:
        if self.path is None:
            return {}
        try:
            with self.path.open(encoding="utf-8") as handle:
                data = json.load(handle)
        except (FileNotFoundError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temporary = self.path.with_name(self.path.name + ".tmp")
        with temporary.open("w", encoding="utf-8") as handle:
            json.dump(self._values, handle, indent=2, sort_keys=True)
        os.replace(temporary, self.path)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` and persist it."""
        self._values[key] = value
        self._write()


def default_settings_path() -> Path:
    """Return the per-user location of the settings file."""
    if sys.platform == "win32":
        base: str | Path = os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Preferences"
    else:
        base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "NomCool" / "NomCool.json"


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "1", "yes", "on"):
            return True
        if text in ("false", "0", "no", "off", ""):
            return False
        return default
    if value is None:
        return default
    return bool(value)


def mascot_enabled(store: SettingsStore) -> bool:
    """Whether the mascot is shown; on unless turned off."""
    return _as_bool(store.get(MASCOT_KEY, True), True)


def music_enabled(store: SettingsStore) -> bool:
    """Whether background music plays; off unless turned on."""
    return _as_bool(store.get(MUSIC_KEY, False), False)


def set_mascot_enabled(store: SettingsStore, enabled: bool) -> None:
    store.set(MASCOT_KEY, bool(enabled))


def set_music_enabled(store: SettingsStore, enabled: bool) -> None:
    store.set(MUSIC_KEY, bool(enabled))
"""Settings file management with validation and change notifications."""

from __future__ import annotations

import logging
import os
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any

from jsonschema import ValidationError
from PySide6.QtCore import QObject, Signal

from ..config import API_KEY_ENV_VAR
from ..errors import SettingsLoadError, SettingsValidationError
from ..utils.jsonio import read_json, write_json
from .schema import DEFAULT_SETTINGS, merge_with_defaults

_logger = logging.getLogger(__name__)

_APP_DIR = "CineFeed"


def default_settings_path() -> Path:
    """Return the per-user settings.json location for the current platform."""

    if os.name == "nt":
        root = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
        return root / _APP_DIR / "settings.json"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / _APP_DIR / "settings.json"
    root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / _APP_DIR.lower() / "settings.json"


def _lookup(data: dict[str, Any], dotted: str) -> tuple[bool, Any]:
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict) or part not in node:
            return False, None
        node = node[part]
    return True, node


def _assign(data: dict[str, Any], dotted: str, value: Any) -> None:
    *parents, leaf = dotted.split(".")
    node = data
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = node[part] = {}
        node = child
    node[leaf] = value


class SettingsManager(QObject):
    """Own the API, feed and collection settings of the application.

    Every ``set`` validates a candidate copy before it replaces the live
    data, so a rejected value leaves both memory and disk untouched.
    """

    settingsChanged = Signal(str, object)

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self._path = path
        self._data: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = default_settings_path()
        return self._path

    def load(self) -> None:
        """Read settings from disk, filling in defaults and writing them back."""

        payload = None
        if self.path.exists():
            try:
                payload = read_json(self.path)
            except (OSError, ValueError) as exc:
                raise SettingsLoadError(f"{self.path}: {exc}") from exc
            if not isinstance(payload, dict):
                raise SettingsLoadError(f"{self.path}: expected a JSON object")
        try:
            self._data = merge_with_defaults(payload)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        _logger.debug("Loaded settings from %s", self.path)
        write_json(self.path, self._data)

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return the value at dotted *key* (``"api.language"``) or *default*."""

        found, value = _lookup(self._data, key)
        return value if found else default

    def set(self, key: str, value: Any) -> None:
        """Validate, store and persist *value* at dotted *key*."""

        candidate = deepcopy(self._data)
        _assign(candidate, key, str(value) if isinstance(value, Path) else value)
        try:
            self._data = merge_with_defaults(candidate)
        except ValidationError as exc:
            raise SettingsValidationError(f"{key}: {exc.message}") from exc
        write_json(self.path, self._data)
        self.settingsChanged.emit(key, value)

    def api_key(self) -> str:
        """Return ``api.key``, falling back to the ``TMDB_API_KEY`` environment variable."""

        return self.get("api.key") or os.environ.get(API_KEY_ENV_VAR, "")


__all__ = ["SettingsManager", "default_settings_path"]

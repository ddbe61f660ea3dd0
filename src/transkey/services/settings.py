"""Settings — optional JSON file overriding the library defaults."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

log = logging.getLogger(__name__)

DEFAULTS: dict[str, Any] = {
    # Locale used when a request names none, or names one that is not loaded
    "default_locale": "en_US",

    # Reading
    "encoding": "utf-8",
    "skip_hidden_files": True,

    # Resolving
    "line_separator": "\n",
    "placeholder_prefix": "{",
    "placeholder_suffix": "}",
}


class Settings:
    """Library settings, optionally backed by a JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None, **overrides: Any):
        self._path = Path(path) if path else None
        self._data: dict[str, Any] = dict(DEFAULTS)
        if self._path is not None:
            self._load()
        self._data.update(overrides)

    # ── Public API ────────────────────────────────────────────────

    def __getitem__(self, key: str) -> Any:
        return self._data.get(key, DEFAULTS.get(key))

    def __setitem__(self, key: str, value: Any):
        self._data[key] = value

    def get_value(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default if default is not None else DEFAULTS.get(key))

    def set_value(self, key: str, value: Any):
        self._data[key] = value

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def exists(self) -> bool:
        return self._path is not None and self._path.exists()

    def save(self, path: Optional[Union[str, Path]] = None):
        target = Path(path) if path else self._path
        if target is None:
            raise ValueError("No settings file to save to")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            json.dumps(self._data, ensure_ascii=False, indent=2), "utf-8"
        )
        self._path = target

    # ── Private ───────────────────────────────────────────────────

    def _load(self):
        if not self._path.exists():
            log.debug("Settings file %s not found, using defaults", self._path)
            return
        stored = json.loads(self._path.read_text("utf-8"))
        if not isinstance(stored, dict):
            raise ValueError(f"Settings file {self._path} must hold a JSON object")
        self._data.update(stored)

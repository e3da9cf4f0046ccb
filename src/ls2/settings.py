"""JSON-backed output settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ls2.models.output import INDENT_WIDTH
from ls2.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "ls2"
_SETTINGS_FILE = "settings.json"


class Settings:
    """Read-only settings backed by a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("output.indent_width")  # reads data["output"]["indent_width"]
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    @property
    def indent_width(self) -> int:
        """Spaces per depth level; falls back to 4 on bad values."""
        value = self.get("output.indent_width", INDENT_WIDTH)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            log.warning("Ignoring invalid output.indent_width %r in %s", value, self._path)
            return INDENT_WIDTH
        return value

    @property
    def human_sizes(self) -> bool:
        return bool(self.get("output.human_sizes", False))

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Could not load settings from %s: top level is not an object", self._path)
            return
        self._data = data

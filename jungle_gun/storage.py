# storage.py
# Tiny key-value save file (player name + high score).
#
# Bad or missing data never stops the game: it falls back to defaults and
# logs a warning. Writes are fire-and-forget; the last write wins.

from __future__ import annotations
import json
import logging
import math
import os
from typing import Any
from . import settings

logger = logging.getLogger(__name__)


def normalize_player_name(name: Any) -> str:
    """Trim, cap at MAX_PLAYER_NAME, and fall back to the default name."""
    trimmed = ("" if name is None else str(name)).strip()
    return trimmed[: settings.MAX_PLAYER_NAME] if trimmed else settings.DEFAULT_PLAYER_NAME


def coerce_high_score(raw: Any) -> int:
    """Turn a stored value into a safe non-negative int (0 when unusable)."""
    if raw is None or isinstance(raw, bool):
        return 0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value):
        return 0
    return max(0, math.floor(value))


class Storage:
    """
    JSON file backed store. With path=None everything stays in memory,
    which is what tests and throwaway sessions use.
    """
    def __init__(self, path: str | None = None):
        self.path = path
        self._data: dict[str, Any] = self._read()

    def _read(self) -> dict[str, Any]:
        if self.path is None or not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read save file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring save file %s: expected an object, got %s", self.path, type(data).__name__)
            return {}
        return data

    def _write(self) -> None:
        if self.path is None:
            return
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
        except OSError as exc:
            logger.warning("Could not write save file %s: %s", self.path, exc)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._write()

    # --------------------------
    # Player name
    # --------------------------

    def load_player_name(self) -> str:
        return normalize_player_name(self.get(settings.PLAYER_NAME_KEY))

    def save_player_name(self, name: Any) -> str:
        name = normalize_player_name(name)
        self.set(settings.PLAYER_NAME_KEY, name)
        return name

    # --------------------------
    # High score
    # --------------------------

    def load_high_score(self) -> int:
        return coerce_high_score(self.get(settings.HIGH_SCORE_KEY))

    def save_high_score(self, score: int) -> None:
        self.set(settings.HIGH_SCORE_KEY, int(score))

"""Read-only JSON config helpers.

Holds read timeouts, the END-key policy, and the log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lineview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

END_KEY_SCREEN = "screen"
END_KEY_ROW = "row"
END_KEY_MODES = (END_KEY_SCREEN, END_KEY_ROW)

DEFAULT_READ_TIMEOUT_MS = 100
DEFAULT_ESCAPE_TIMEOUT_MS = 100
DEFAULT_LOG_LEVEL = "WARNING"
_MAX_TIMEOUT_MS = 10_000


@dataclass(frozen=True)
class ViewerConfig:
    """Settings resolved once at startup."""

    read_timeout_ms: int = DEFAULT_READ_TIMEOUT_MS
    escape_timeout_ms: int = DEFAULT_ESCAPE_TIMEOUT_MS
    end_key: str = END_KEY_SCREEN
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_timeout_ms(data: dict[str, object], key: str, default: int) -> int:
    """Accept integers in ``[1, 10000]``; booleans and other types fall back."""
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < 1 or value > _MAX_TIMEOUT_MS:
        return default
    return value


def _load_end_key(data: dict[str, object]) -> str:
    value = data.get("end_key")
    return value if value in END_KEY_MODES else END_KEY_SCREEN


def _load_log_level(data: dict[str, object]) -> str:
    value = data.get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return DEFAULT_LOG_LEVEL
    return name


def load_viewer_config() -> ViewerConfig:
    data = load_config()
    return ViewerConfig(
        read_timeout_ms=_load_timeout_ms(data, "read_timeout_ms", DEFAULT_READ_TIMEOUT_MS),
        escape_timeout_ms=_load_timeout_ms(data, "escape_timeout_ms", DEFAULT_ESCAPE_TIMEOUT_MS),
        end_key=_load_end_key(data),
        log_level=_load_log_level(data),
    )

"""Find settings and read-only JSON config loading.

Settings are loaded from ``config.json`` under the platform config directory.
All access is defensive: malformed or missing config falls back to defaults,
and out-of-range numbers are clamped rather than rejected.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..search.limits import (
    DEFAULT_MATCH_CAP,
    DEFAULT_NODE_CAP,
    DEFAULT_SIZE_CAP,
    DEFAULT_TIME_BUDGET_MS,
)

logger = logging.getLogger(__name__)

APP_NAME = "findee"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

RESET_MS_RANGE = (100, 5_000)
MAX_BUFFER_RANGE = (10, 200)


@dataclass(frozen=True)
class FindSettings:
    """Immutable per-rebuild search configuration."""

    fold_diacritics: bool = True
    smart_case: bool = True
    whitespace_flexible: bool = True
    node_cap: int = DEFAULT_NODE_CAP
    size_cap: int = DEFAULT_SIZE_CAP
    match_cap: int = DEFAULT_MATCH_CAP
    time_budget_ms: int = DEFAULT_TIME_BUDGET_MS
    reset_ms: int = 900
    max_buffer: int = 80

    @property
    def time_budget_seconds(self) -> float:
        return self.time_budget_ms / 1000.0


DEFAULT_SETTINGS = FindSettings()


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _deep_merge(dst: dict[str, object], src: dict[str, object]) -> dict[str, object]:
    """Recursively overlay ``src`` onto ``dst``; nested dicts merge key-wise."""
    for key, value in src.items():
        if isinstance(value, dict):
            existing = dst.get(key)
            if not isinstance(existing, dict):
                existing = {}
                dst[key] = existing
            _deep_merge(existing, value)
        else:
            dst[key] = value
    return dst


def _defaults_mapping() -> dict[str, object]:
    return {
        "fold_diacritics": DEFAULT_SETTINGS.fold_diacritics,
        "smart_case": DEFAULT_SETTINGS.smart_case,
        "whitespace_flexible": DEFAULT_SETTINGS.whitespace_flexible,
        "reset_ms": DEFAULT_SETTINGS.reset_ms,
        "max_buffer": DEFAULT_SETTINGS.max_buffer,
        "limits": {
            "node_cap": DEFAULT_SETTINGS.node_cap,
            "size_cap": DEFAULT_SETTINGS.size_cap,
            "match_cap": DEFAULT_SETTINGS.match_cap,
            "time_budget_ms": DEFAULT_SETTINGS.time_budget_ms,
        },
    }


def _coerce_bool(value: object, default: bool, key: str) -> bool:
    """Only explicit booleans are accepted; anything else keeps the default."""
    if isinstance(value, bool):
        return value
    logger.debug("ignoring non-boolean config value for %s: %r", key, value)
    return default


def _coerce_int(value: object, default: int, key: str, low: int = 1, high: int | None = None) -> int:
    """Normalize a JSON number into ``[low, high]``.

    Booleans, non-numbers, and non-finite floats (JSON ``NaN``/``Infinity``)
    fall back to ``default``; finite floats are truncated.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.debug("ignoring non-numeric config value for %s: %r", key, value)
        return default
    if isinstance(value, float) and not math.isfinite(value):
        logger.debug("ignoring non-finite config value for %s: %r", key, value)
        return default
    parsed = max(low, int(value))
    if high is not None:
        parsed = min(high, parsed)
    return parsed


def settings_from_mapping(data: dict[str, object]) -> FindSettings:
    """Build settings from a config mapping merged over the defaults."""
    merged = _deep_merge(_defaults_mapping(), data if isinstance(data, dict) else {})
    limits = merged.get("limits")
    if not isinstance(limits, dict):
        limits = {}
    defaults = DEFAULT_SETTINGS
    return FindSettings(
        fold_diacritics=_coerce_bool(merged.get("fold_diacritics"), defaults.fold_diacritics, "fold_diacritics"),
        smart_case=_coerce_bool(merged.get("smart_case"), defaults.smart_case, "smart_case"),
        whitespace_flexible=_coerce_bool(
            merged.get("whitespace_flexible"),
            defaults.whitespace_flexible,
            "whitespace_flexible",
        ),
        node_cap=_coerce_int(limits.get("node_cap"), defaults.node_cap, "node_cap"),
        size_cap=_coerce_int(limits.get("size_cap"), defaults.size_cap, "size_cap"),
        match_cap=_coerce_int(limits.get("match_cap"), defaults.match_cap, "match_cap"),
        time_budget_ms=_coerce_int(limits.get("time_budget_ms"), defaults.time_budget_ms, "time_budget_ms"),
        reset_ms=_coerce_int(merged.get("reset_ms"), defaults.reset_ms, "reset_ms", *RESET_MS_RANGE),
        max_buffer=_coerce_int(merged.get("max_buffer"), defaults.max_buffer, "max_buffer", *MAX_BUFFER_RANGE),
    )


def load_settings() -> FindSettings:
    """Load settings from the config file, falling back to defaults."""
    return settings_from_mapping(load_config())

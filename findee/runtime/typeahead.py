"""Type-ahead query buffer.

Typing after a pause longer than ``reset_ms`` starts a new query. The buffer
keeps only its newest ``max_buffer`` characters. Both limits are clamped to
the same ranges the config loader enforces.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from .config import DEFAULT_SETTINGS, MAX_BUFFER_RANGE, RESET_MS_RANGE, FindSettings

NAV_IDLE_MS = 300

def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return min(high, max(low, int(value)))

class TypeaheadBuffer:
    def __init__(
        self,
        reset_ms: int = DEFAULT_SETTINGS.reset_ms,
        max_buffer: int = DEFAULT_SETTINGS.max_buffer,
        *,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.reset_ms = _clamp(reset_ms, RESET_MS_RANGE)
        self.max_buffer = _clamp(max_buffer, MAX_BUFFER_RANGE)
        self.text = ""
        self._monotonic = monotonic
        self._last_typed_at: float | None = None

    @classmethod
    def from_settings(
        cls,
        settings: FindSettings,
        *,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> TypeaheadBuffer:
        return cls(settings.reset_ms, settings.max_buffer, monotonic=monotonic)

    def configure(self, settings: FindSettings) -> None:
        """Adopt new limits; an over-long buffer is trimmed immediately."""
        self.reset_ms = _clamp(settings.reset_ms, RESET_MS_RANGE)
        self.max_buffer = _clamp(settings.max_buffer, MAX_BUFFER_RANGE)
        self.text = self.text[-self.max_buffer :]

    def _ms_since_typing(self) -> float | None:
        if self._last_typed_at is None:
            return None
        return (self._monotonic() - self._last_typed_at) * 1000.0

    def type_char(self, ch: str) -> str:
        """Append one typed character and return the resulting query."""
        elapsed_ms = self._ms_since_typing()
        if elapsed_ms is None or elapsed_ms > self.reset_ms:
            self.text = ""
        self._last_typed_at = self._monotonic()
        self.text = (self.text + ch)[-self.max_buffer :]
        return self.text

    def backspace(self) -> bool:
        """Drop the last character; return whether the buffer changed."""
        if not self.text:
            return False
        self.text = self.text[:-1]
        return True

    def clear(self) -> None:
        self.text = ""
        self._last_typed_at = None

    def navigation_idle(self, idle_ms: int = NAV_IDLE_MS) -> bool:
        """Return whether typing paused long enough for ``n``/``N`` to navigate."""
        if not self.text:
            return False
        elapsed_ms = self._ms_since_typing()
        return elapsed_ms is None or elapsed_ms > idle_ms

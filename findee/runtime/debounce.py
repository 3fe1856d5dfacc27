"""Single-deadline debounce for corpus mutation notifications.

The host loop owns time: ``notify`` arms one pending deadline, ``poll``
fires it once the window has elapsed. Notifications that arrive while a
deadline is pending are absorbed, so a burst yields exactly one trigger.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from ..search.limits import MUTATION_DEBOUNCE_SECONDS


class MutationDebouncer:
    def __init__(
        self,
        window_seconds: float = MUTATION_DEBOUNCE_SECONDS,
        *,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window_seconds = max(0.0, window_seconds)
        self._monotonic = monotonic
        self._deadline: float | None = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def notify(self) -> bool:
        """Record a mutation; return ``True`` only when a new deadline was armed."""
        if self._deadline is not None:
            return False
        self._deadline = self._monotonic() + self.window_seconds
        return True

    def poll(self) -> bool:
        """Return ``True`` once when the pending deadline has elapsed."""
        if self._deadline is None:
            return False
        if self._monotonic() < self._deadline:
            return False
        self._deadline = None
        return True

    def cancel(self) -> None:
        self._deadline = None

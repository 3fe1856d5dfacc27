"""Find-as-you-type engine: cache policy, rebuilds, and navigation.

One ``FindEngine`` owns everything that survives between keystrokes: the
active query and mode, the last compiled pattern, the match set, and the
navigator. All state changes happen synchronously inside the public methods.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..corpus import MODE_TEXT, CorpusProvider
from ..search.indexer import EMPTY_SCAN, Match, ScanResult, rebuild
from ..search.limits import MUTATION_DEBOUNCE_SECONDS
from ..search.pattern import CompiledPattern, compile_query
from .config import FindSettings
from .debounce import MutationDebouncer
from .navigation import MatchGeometry, Navigator
from .typeahead import TypeaheadBuffer

logger = logging.getLogger(__name__)


class FindEngine:
    def __init__(
        self,
        corpus: CorpusProvider,
        settings: FindSettings | None = None,
        geometry: MatchGeometry | None = None,
        *,
        monotonic: Callable[[], float] = time.monotonic,
        debounce_seconds: float = MUTATION_DEBOUNCE_SECONDS,
    ) -> None:
        self.corpus = corpus
        self.settings = settings if settings is not None else FindSettings()
        self.geometry = geometry
        self.mode = MODE_TEXT
        self.query = ""
        self.pattern: CompiledPattern | None = None
        self.scan: ScanResult = EMPTY_SCAN
        self.navigator = Navigator()
        self.rebuild_count = 0
        self._monotonic = monotonic
        self._debouncer = MutationDebouncer(debounce_seconds, monotonic=monotonic)
        self.typeahead = TypeaheadBuffer.from_settings(self.settings, monotonic=monotonic)
        self._dirty = True

    @property
    def matches(self) -> tuple[Match, ...]:
        return self.scan.matches

    @property
    def navigation(self) -> int:
        return self.navigator.index

    @property
    def current(self) -> Match | None:
        return self.navigator.current

    @property
    def truncation_reason(self) -> str | None:
        return self.scan.truncation_reason

    @property
    def mutation_pending(self) -> bool:
        return self._debouncer.pending

    def notify_mutation(self) -> None:
        """Record that the corpus may have changed; rebuilds are debounced."""
        self._debouncer.notify()

    def ensure_fresh(
        self,
        mode: str,
        query: str,
        settings: FindSettings | None = None,
        mutation_dirty: bool = False,
    ) -> tuple[tuple[Match, ...], int]:
        """Return current matches and selection, rebuilding only when needed.

        The cached result is reused iff nothing marked the engine dirty and
        both the cache key and the mode are unchanged.
        """
        settings = settings if settings is not None else self.settings
        if settings != self.settings:
            self._dirty = True
            self.typeahead.configure(settings)
        if query != self.query or mode != self.mode:
            self._dirty = True
        if self._debouncer.poll() or mutation_dirty:
            self._dirty = True

        pattern = compile_query(query, settings, mode)
        if (
            not self._dirty
            and self.pattern is not None
            and pattern.key == self.pattern.key
            and mode == self.mode
        ):
            return self.matches, self.navigation

        self.settings = settings
        self.mode = mode
        self.query = query
        self.pattern = pattern
        self._rebuild()
        return self.matches, self.navigation

    def poll(self) -> bool:
        """Fire an elapsed mutation debounce; return whether a rebuild ran."""
        if not self._debouncer.poll():
            return False
        self._dirty = True
        if self.pattern is None:
            return False
        self.ensure_fresh(self.mode, self.query, self.settings)
        return True

    def type_char(self, ch: str) -> tuple[tuple[Match, ...], int]:
        """Feed one typed character into the type-ahead query and refresh."""
        return self.ensure_fresh(self.mode, self.typeahead.type_char(ch))

    def backspace(self) -> tuple[tuple[Match, ...], int]:
        self.typeahead.backspace()
        return self.ensure_fresh(self.mode, self.typeahead.text)

    def step(self, direction: int) -> Match | None:
        """Select the next/previous match without touching the cache."""
        return self.navigator.step(direction)

    def clear(self) -> None:
        """Forget the active query and its results."""
        self.query = ""
        self.pattern = None
        self.typeahead.clear()
        self.scan = EMPTY_SCAN
        self.navigator.reset(())
        self._debouncer.cancel()
        self._dirty = True

    def _rebuild(self) -> None:
        assert self.pattern is not None
        self.scan = rebuild(
            self.corpus,
            self.pattern,
            self.settings,
            self.mode,
            monotonic=self._monotonic,
        )
        self.rebuild_count += 1
        self._dirty = False
        self._debouncer.cancel()
        self.navigator.reset(self.scan.matches, self.geometry)
        logger.debug(
            "rebuilt %r in mode %s: %d matches, truncation=%s",
            self.pattern.query,
            self.mode,
            len(self.scan.matches),
            self.scan.truncation_reason,
        )

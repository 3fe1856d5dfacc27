"""Budgeted match scan across corpus segments.

A rebuild folds each segment, runs the compiled pattern over the folded text,
and maps every hit back to raw offsets. Scanning stops early when a budget is
exhausted; truncation is a normal outcome reported through
``ScanResult.truncation_reason`` and never raises.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..corpus import MODE_TEXT, CorpusProvider, TextSegment
from .folding import FoldedText, fold
from .limits import (
    TRUNCATED_MATCH_CAP,
    TRUNCATED_NODE_CAP,
    TRUNCATED_SIZE_CAP,
    TRUNCATED_TIME_CAP,
)
from .pattern import CompiledPattern

if TYPE_CHECKING:
    from ..runtime.config import FindSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    segment: TextSegment
    start: int  # raw offset, inclusive
    end: int  # raw offset, exclusive

    @property
    def text(self) -> str:
        return self.segment.text[self.start : self.end]

    @property
    def handle(self) -> object:
        return self.segment.handle


@dataclass(frozen=True)
class ScanResult:
    matches: tuple[Match, ...] = ()
    truncation_reason: str | None = None
    segments_scanned: int = 0
    chars_scanned: int = 0
    elapsed_seconds: float = 0.0

    @property
    def truncated(self) -> bool:
        return self.truncation_reason is not None


EMPTY_SCAN = ScanResult()


def iter_folded_spans(regex: re.Pattern[str], text: str) -> Iterator[tuple[int, int]]:
    """Yield non-overlapping match spans, stepping past zero-length hits."""
    pos = 0
    limit = len(text)
    while pos <= limit:
        found = regex.search(text, pos)
        if found is None:
            return
        start, end = found.span()
        yield start, end
        pos = end + 1 if end == start else end


def fold_segment(segment: TextSegment, pattern: CompiledPattern) -> FoldedText:
    if pattern.fold_diacritics:
        return fold(segment.text, pattern.case_sensitive)
    return FoldedText.identity(segment.text)


def segment_matches(segment: TextSegment, pattern: CompiledPattern) -> Iterator[Match]:
    """Yield raw-coordinate matches for one segment in text order.

    Spans that collapse (``start >= end``) or overrun the raw text after
    boundary mapping are skipped.
    """
    folded = fold_segment(segment, pattern)
    raw_length = len(segment.text)
    for folded_start, folded_end in iter_folded_spans(pattern.regex, folded.text):
        start, end = folded.raw_span(folded_start, folded_end)
        if start >= end or end > raw_length:
            continue
        yield Match(segment=segment, start=start, end=end)


def rebuild(
    corpus: CorpusProvider,
    pattern: CompiledPattern,
    settings: FindSettings,
    mode: str = MODE_TEXT,
    *,
    monotonic: Callable[[], float] = time.monotonic,
) -> ScanResult:
    """Scan ``corpus`` for ``pattern`` within the configured budgets.

    Budgets are checked in priority order: node cap, size cap, and elapsed
    time before each segment, then the match cap after every collected match.
    Whatever was collected before a breach is returned.
    """
    if pattern.is_empty:
        return EMPTY_SCAN

    started = monotonic()
    time_budget = settings.time_budget_seconds
    matches: list[Match] = []
    segments_scanned = 0
    chars_scanned = 0
    reason: str | None = None

    for segment in corpus.segments(mode):
        if segments_scanned >= settings.node_cap:
            reason = TRUNCATED_NODE_CAP
            break
        if chars_scanned + len(segment.text) > settings.size_cap:
            reason = TRUNCATED_SIZE_CAP
            break
        if monotonic() - started > time_budget:
            reason = TRUNCATED_TIME_CAP
            break

        segments_scanned += 1
        chars_scanned += len(segment.text)
        for match in segment_matches(segment, pattern):
            matches.append(match)
            if len(matches) >= settings.match_cap:
                reason = TRUNCATED_MATCH_CAP
                break
        if reason is not None:
            break

    elapsed = monotonic() - started
    if reason is not None:
        logger.debug(
            "scan truncated (%s) after %d segments, %d chars, %d matches",
            reason,
            segments_scanned,
            chars_scanned,
            len(matches),
        )
    return ScanResult(
        matches=tuple(matches),
        truncation_reason=reason,
        segments_scanned=segments_scanned,
        chars_scanned=chars_scanned,
        elapsed_seconds=elapsed,
    )

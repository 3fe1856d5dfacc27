"""Text segments and the corpus-provider contract.

A corpus is whatever produces visible text runs in document order.
Visibility and liveness checks belong to the provider; the search core only
sees immutable ``TextSegment`` snapshots taken for one rebuild.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Protocol

MODE_TEXT = "text"
MODE_LINKS = "links"
SEARCH_MODES = (MODE_TEXT, MODE_LINKS)


@dataclass(frozen=True)
class TextSegment:
    """One contiguous run of raw text plus an opaque consumer handle."""

    text: str
    handle: object = None
    in_link: bool = False


class CorpusProvider(Protocol):
    def segments(self, mode: str) -> Iterable[TextSegment]:
        """Return a lazy, restartable, document-ordered segment sequence."""
        ...


def segment_in_mode(segment: TextSegment, mode: str) -> bool:
    """Return whether ``segment`` belongs to the corpus for ``mode``."""
    if mode == MODE_LINKS:
        return segment.in_link
    return True


class StaticCorpus:
    """In-memory provider over a fixed segment list.

    Segments are snapshotted on construction and on ``replace`` so callers
    mutating their own lists cannot change text under a running rebuild.
    """

    def __init__(self, segments: Iterable[TextSegment] = ()) -> None:
        self._segments: tuple[TextSegment, ...] = tuple(segments)

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> StaticCorpus:
        """Build a corpus whose handles are the segment positions."""
        return cls(TextSegment(text=text, handle=idx) for idx, text in enumerate(texts))

    def replace(self, segments: Iterable[TextSegment]) -> None:
        self._segments = tuple(segments)

    def __len__(self) -> int:
        return len(self._segments)

    def segments(self, mode: str) -> Iterator[TextSegment]:
        for segment in self._segments:
            if segment_in_mode(segment, mode):
                yield segment

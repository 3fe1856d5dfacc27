"""Match selection: initial on-screen pick and wraparound stepping.

This module intentionally has no rendering concerns. Geometry comes from an
external ``MatchGeometry`` and the navigator only reports which match is
selected; scrolling and highlighting stay with the caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..search.indexer import Match


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersects(self, other: Rect) -> bool:
        """Return whether both rects have area and overlap."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


class MatchGeometry(Protocol):
    def viewport(self) -> Rect:
        ...

    def match_rects(self, match: Match) -> Sequence[Rect]:
        ...


def initial_selection_index(matches: Sequence[Match], geometry: MatchGeometry | None = None) -> int:
    """Return the first match visible in the viewport, else ``0``, else ``-1``."""
    if not matches:
        return -1
    if geometry is None:
        return 0
    viewport = geometry.viewport()
    for idx, match in enumerate(matches):
        if any(rect.intersects(viewport) for rect in geometry.match_rects(match)):
            return idx
    return 0


class Navigator:
    """Current-selection index over one match set."""

    def __init__(self) -> None:
        self.matches: tuple[Match, ...] = ()
        self.index = -1

    def reset(self, matches: Sequence[Match], geometry: MatchGeometry | None = None) -> Match | None:
        """Adopt a fresh match set and pick its initial selection."""
        self.matches = tuple(matches)
        self.index = initial_selection_index(self.matches, geometry)
        return self.current

    @property
    def current(self) -> Match | None:
        if 0 <= self.index < len(self.matches):
            return self.matches[self.index]
        return None

    def step(self, direction: int) -> Match | None:
        """Move to the next (``+1``) or previous (``-1``) match with wraparound."""
        count = len(self.matches)
        if count == 0 or direction == 0:
            return None
        step = 1 if direction > 0 else -1
        self.index = (self.index + step + count) % count
        return self.current

"""Diacritic folding with raw-offset recovery.

Folding turns a raw text run into the form queries are compared against and
records, for every folded position, the raw offset it maps back to. Offsets
are only recoverable at character granularity: one raw character (a code
point plus the combining marks that follow it) may fold to zero, one, or
several code points, and all of them map to that character's raw boundary.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class FoldedText:
    """Folded comparison text plus its boundary map.

    ``boundaries[i]`` is the raw offset corresponding to folded offset ``i``;
    the map is one entry longer than ``text``.
    """

    text: str
    boundaries: tuple[int, ...]

    @classmethod
    def identity(cls, raw: str) -> FoldedText:
        """Return an unfolded view of ``raw`` whose map is the identity."""
        return cls(text=raw, boundaries=tuple(range(len(raw) + 1)))

    @property
    def raw_length(self) -> int:
        return self.boundaries[-1]

    def raw_span(self, start: int, end: int) -> tuple[int, int]:
        """Map a folded ``[start, end)`` span onto raw offsets."""
        return self.boundaries[start], self.boundaries[end]


def character_spans(raw: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` raw spans of base characters with trailing marks."""
    n = len(raw)
    start = 0
    while start < n:
        end = start + 1
        while end < n and unicodedata.combining(raw[end]):
            end += 1
        yield start, end
        start = end


def _fold_character(chunk: str, case_sensitive: bool) -> str:
    decomposed = unicodedata.normalize("NFD", chunk)
    if not case_sensitive:
        decomposed = decomposed.lower()
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold(raw: str, case_sensitive: bool = False) -> FoldedText:
    """Fold ``raw`` for diacritic-insensitive comparison.

    Each raw character is NFD-decomposed, stripped of combining marks, and
    lowercased unless ``case_sensitive``. Characters that fold to nothing
    still advance the raw cursor. The final boundary is forced to
    ``len(raw)`` whenever any folded text was produced.
    """
    pieces: list[str] = []
    boundaries: list[int] = [0]
    for start, end in character_spans(raw):
        kept = _fold_character(raw[start:end], case_sensitive)
        if not kept:
            continue
        pieces.append(kept)
        boundaries.extend([end] * len(kept))
    if len(boundaries) > 1:
        boundaries[-1] = len(raw)
    return FoldedText(text="".join(pieces), boundaries=tuple(boundaries))


def fold_query(query: str, case_sensitive: bool, fold_diacritics: bool) -> str:
    """Apply the corpus-side transform to a query string."""
    if fold_diacritics:
        return fold(query, case_sensitive).text
    return query if case_sensitive else query.lower()

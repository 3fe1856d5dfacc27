"""Query compilation: case policy, literal escaping, and whitespace runs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from ..corpus import MODE_TEXT
from .folding import fold_query

if TYPE_CHECKING:
    from ..runtime.config import FindSettings

WHITESPACE_RUN_PATTERN = r"[\s\u00a0]+"
_QUERY_WHITESPACE_RE = re.compile(r"\s+")


class CacheKey(NamedTuple):
    mode: str
    case_sensitive: bool
    fold_diacritics: bool
    whitespace_flexible: bool
    query: str


@dataclass(frozen=True)
class CompiledPattern:
    regex: re.Pattern[str]
    case_sensitive: bool
    fold_diacritics: bool
    whitespace_flexible: bool
    query: str  # normalized (folded/lowercased) query text
    key: CacheKey

    @property
    def is_empty(self) -> bool:
        return not self.query


def is_smart_case_sensitive(query: str) -> bool:
    """Return whether ``query`` contains an uppercase letter."""
    return any(ch.isupper() for ch in query)


def _escape_query(query: str, whitespace_flexible: bool) -> str:
    if not whitespace_flexible:
        return re.escape(query)
    parts = _QUERY_WHITESPACE_RE.split(query)
    return WHITESPACE_RUN_PATTERN.join(re.escape(part) for part in parts)


def compile_query(query: str, settings: FindSettings, mode: str = MODE_TEXT) -> CompiledPattern:
    """Compile ``query`` into a literal search pattern plus its cache key.

    The query is folded exactly like corpus text when diacritic folding is on.
    With folding off the raw query is escaped as-is and case-insensitivity is
    left entirely to ``re.IGNORECASE``.
    """
    case_sensitive = settings.smart_case and is_smart_case_sensitive(query)
    normalized = fold_query(query, case_sensitive, settings.fold_diacritics)
    source = normalized if settings.fold_diacritics else query
    flags = 0 if case_sensitive else re.IGNORECASE
    regex = re.compile(_escape_query(source, settings.whitespace_flexible), flags)
    key = CacheKey(
        mode=mode,
        case_sensitive=case_sensitive,
        fold_diacritics=settings.fold_diacritics,
        whitespace_flexible=settings.whitespace_flexible,
        query=normalized,
    )
    return CompiledPattern(
        regex=regex,
        case_sensitive=case_sensitive,
        fold_diacritics=settings.fold_diacritics,
        whitespace_flexible=settings.whitespace_flexible,
        query=normalized,
        key=key,
    )

"""Search core: folding, query compilation, and the budgeted match scan."""

from __future__ import annotations

from .folding import FoldedText, fold, fold_query
from .indexer import Match, ScanResult, rebuild
from .limits import TRUNCATION_REASONS
from .pattern import CacheKey, CompiledPattern, compile_query

__all__ = [
    "CacheKey",
    "CompiledPattern",
    "FoldedText",
    "Match",
    "ScanResult",
    "TRUNCATION_REASONS",
    "compile_query",
    "fold",
    "fold_query",
    "rebuild",
]

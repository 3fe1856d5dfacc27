"""Runtime state around the search core.

Groups settings loading, the mutation debounce, navigation, the type-ahead
buffer, and the ``FindEngine`` that ties them together.
"""

from __future__ import annotations


def __getattr__(name: str):
    if name == "FindEngine":
        from .engine import FindEngine

        return FindEngine
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["FindEngine"]

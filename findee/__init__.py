"""Public package surface for findee.

Exports the engine and settings for embedding, and ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .corpus import StaticCorpus, TextSegment
from .runtime.config import FindSettings
from .runtime.engine import FindEngine


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["FindEngine", "FindSettings", "StaticCorpus", "TextSegment", "main"]

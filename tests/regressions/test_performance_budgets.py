"""Performance budget tests for rebuilds over large corpora.

These tests use synthetic large inputs with conservative time budgets so
regressions are caught without depending on machine-specific microbenchmarks.
"""

from __future__ import annotations

import time
import unittest

from findee.corpus import MODE_TEXT, StaticCorpus
from findee.runtime.config import FindSettings
from findee.runtime.engine import FindEngine


def _large_corpus(segment_count: int) -> StaticCorpus:
    line = "P\u0159\u00edli\u0161 \u017elu\u0165ou\u010dk\u00fd k\u016f\u0148 \u00fap\u011bl \u010f\u00e1belsk\u00e9 \u00f3dy number {idx}"
    return StaticCorpus.from_texts(line.format(idx=idx) for idx in range(segment_count))


class PerformanceBudgetTests(unittest.TestCase):
    def test_time_budget_bounds_rebuild_over_huge_corpus(self) -> None:
        settings = FindSettings(
            node_cap=10_000_000,
            size_cap=1_000_000_000,
            match_cap=10_000_000,
            time_budget_ms=20,
        )
        engine = FindEngine(_large_corpus(300_000), settings)

        started = time.perf_counter()
        engine.ensure_fresh(MODE_TEXT, "kun upel")
        elapsed = time.perf_counter() - started

        self.assertEqual(engine.truncation_reason, "time cap")
        self.assertGreater(len(engine.matches), 0)
        self.assertLess(engine.scan.segments_scanned, 300_000)
        self.assertLess(elapsed, 1.0)

    def test_default_node_cap_bounds_rebuild(self) -> None:
        settings = FindSettings(time_budget_ms=60_000)
        engine = FindEngine(_large_corpus(25_000), settings)

        engine.ensure_fresh(MODE_TEXT, "odmakes-no-match")

        self.assertEqual(engine.truncation_reason, "node cap")
        self.assertEqual(engine.scan.segments_scanned, settings.node_cap)
        self.assertEqual(engine.matches, ())

    def test_navigation_steps_are_constant_time(self) -> None:
        settings = FindSettings(match_cap=5_000, time_budget_ms=60_000)
        engine = FindEngine(_large_corpus(2_000), settings)
        engine.ensure_fresh(MODE_TEXT, "u")
        total = len(engine.matches)

        started = time.perf_counter()
        for _ in range(total * 2):
            engine.step(1)
        elapsed = time.perf_counter() - started

        self.assertEqual(engine.rebuild_count, 1)
        self.assertEqual(engine.navigation, 0)
        self.assertLess(elapsed, 1.0)

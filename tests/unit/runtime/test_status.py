"""Tests for status-line text shown to the user."""

from __future__ import annotations

import unittest

from findee.corpus import TextSegment
from findee.runtime.status import describe_status
from findee.search.indexer import EMPTY_SCAN, Match, ScanResult


def _scan(count: int, reason: str | None = None) -> ScanResult:
    segment = TextSegment(text="x" * count)
    matches = tuple(Match(segment=segment, start=idx, end=idx + 1) for idx in range(count))
    return ScanResult(matches=matches, truncation_reason=reason, segments_scanned=1)


class DescribeStatusTests(unittest.TestCase):
    def test_empty_query_has_no_status(self) -> None:
        self.assertEqual(describe_status("", EMPTY_SCAN, -1), "")

    def test_no_match(self) -> None:
        self.assertEqual(describe_status("q", EMPTY_SCAN, -1), "no match")

    def test_position_and_total(self) -> None:
        self.assertEqual(describe_status("q", _scan(17), 2), "match 3/17")

    def test_previous_direction_label(self) -> None:
        self.assertEqual(describe_status("q", _scan(4), 0, direction=-1), "match (prev) 1/4")

    def test_truncation_reason_suffix(self) -> None:
        self.assertEqual(describe_status("q", _scan(300, "match cap"), 0), "match 1/300+ (match cap)")

    def test_truncated_scan_without_matches_names_reason(self) -> None:
        self.assertEqual(describe_status("q", _scan(0, "time cap"), -1), "no match (time cap)")

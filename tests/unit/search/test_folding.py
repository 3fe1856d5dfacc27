"""Tests for diacritic folding and boundary-map recovery.

Checks boundary-map invariants, character-granular clamping, and that
mapped ranges always cover whole original characters.
"""

from __future__ import annotations

import unittest

from findee.search.folding import FoldedText, character_spans, fold, fold_query

SAMPLES = [
    "",
    "plain ascii",
    "\u010cesk\u00fd jazyk",
    "\u017dlu\u0165ou\u010dk\u00fd k\u016f\u0148",
    "\u0301leading mark",
    "\ud55c\uad6d\uc5b4 mixed",
    "A\u030angstro\u0308m \u212b",
    "tail mark e\u0301",
]


class FoldBoundaryTests(unittest.TestCase):
    def test_boundary_map_invariants_hold_for_samples(self) -> None:
        for raw in SAMPLES:
            for case_sensitive in (False, True):
                with self.subTest(raw=raw, case_sensitive=case_sensitive):
                    folded = fold(raw, case_sensitive)
                    boundaries = folded.boundaries
                    self.assertEqual(len(boundaries), len(folded.text) + 1)
                    self.assertEqual(boundaries[0], 0)
                    if folded.text:
                        self.assertEqual(boundaries[-1], len(raw))
                    self.assertEqual(list(boundaries), sorted(boundaries))

    def test_boundaries_never_split_an_original_character(self) -> None:
        for raw in SAMPLES:
            with self.subTest(raw=raw):
                character_edges = {0, len(raw)}
                character_edges.update(end for _start, end in character_spans(raw))
                folded = fold(raw)
                for idx in range(len(folded.text)):
                    start, end = folded.raw_span(idx, idx + 1)
                    self.assertIn(start, character_edges)
                    self.assertIn(end, character_edges)

    def test_folds_czech_text_case_insensitively(self) -> None:
        folded = fold("\u010cesk\u00fd")

        self.assertEqual(folded.text, "cesky")
        self.assertEqual(folded.boundaries, (0, 1, 2, 3, 4, 5))

    def test_case_sensitive_fold_keeps_case(self) -> None:
        self.assertEqual(fold("\u010cesk\u00fd", case_sensitive=True).text, "Cesky")

    def test_decomposed_character_maps_to_its_full_raw_span(self) -> None:
        folded = fold("ae\u030cx")

        self.assertEqual(folded.text, "aex")
        self.assertEqual(folded.boundaries, (0, 1, 3, 4))
        self.assertEqual(folded.raw_span(1, 2), (1, 3))

    def test_multi_codepoint_expansion_clamps_to_character_boundary(self) -> None:
        folded = fold("\ud55c")

        self.assertEqual(len(folded.text), 3)
        self.assertEqual(folded.boundaries, (0, 1, 1, 1))

    def test_mark_only_character_advances_raw_cursor(self) -> None:
        folded = fold("\u0301a")

        self.assertEqual(folded.text, "a")
        self.assertEqual(folded.boundaries, (0, 2))

    def test_text_folding_to_nothing_has_single_entry_map(self) -> None:
        folded = fold("\u0301")

        self.assertEqual(folded.text, "")
        self.assertEqual(folded.boundaries, (0,))

    def test_fold_is_deterministic(self) -> None:
        for raw in SAMPLES:
            with self.subTest(raw=raw):
                self.assertEqual(fold(raw), fold(raw))
                self.assertEqual(fold(raw, True), fold(raw, True))

    def test_identity_map_when_folding_disabled(self) -> None:
        folded = FoldedText.identity("\u011bx")

        self.assertEqual(folded.text, "\u011bx")
        self.assertEqual(folded.boundaries, (0, 1, 2))
        self.assertEqual(folded.raw_length, 2)


class CharacterSpanTests(unittest.TestCase):
    def test_groups_base_character_with_trailing_marks(self) -> None:
        self.assertEqual(list(character_spans("ae\u030c\u0301x")), [(0, 1), (1, 4), (4, 5)])

    def test_empty_text_has_no_spans(self) -> None:
        self.assertEqual(list(character_spans("")), [])


class FoldQueryTests(unittest.TestCase):
    def test_query_gets_same_transform_as_corpus(self) -> None:
        self.assertEqual(fold_query("\u011aE", case_sensitive=False, fold_diacritics=True), "ee")
        self.assertEqual(fold_query("\u011aE", case_sensitive=True, fold_diacritics=True), "EE")

    def test_query_without_folding_only_lowercases(self) -> None:
        self.assertEqual(fold_query("\u011aE", case_sensitive=False, fold_diacritics=False), "\u011be")
        self.assertEqual(fold_query("\u011aE", case_sensitive=True, fold_diacritics=False), "\u011aE")

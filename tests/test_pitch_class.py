"""Tests for pitch class operations."""

import numpy as np
import pytest

from chord_symbol import parse_chord
from chord_symbol.pitch_class import (
    chord_pitch_similarity,
    chord_to_pitch_classes,
    chroma_similarity,
    chroma_vector,
    pitch_class_jaccard,
    roots_match,
)


class TestChordToPitchClasses:
    @pytest.mark.parametrize(
        ("symbol", "pitch_classes"),
        [
            ("C", {0, 4, 7}),
            ("Gm", {7, 10, 2}),
            ("G7", {7, 11, 2, 5}),
            ("Am7/G", {9, 0, 4, 7}),
            ("C/D", {0, 2, 4, 7}),
            ("Sol", {7, 11, 2}),
            ("Hes", {10, 2, 5}),
            ("C7(b9)", {0, 4, 7, 10, 1}),
        ],
    )
    def test_pitch_classes(self, symbol: str, pitch_classes: set[int]) -> None:
        assert chord_to_pitch_classes(parse_chord(symbol)) == frozenset(pitch_classes)


class TestChromaVector:
    def test_major_triad(self) -> None:
        expected = np.zeros(12)
        expected[[0, 4, 7]] = 1.0
        np.testing.assert_array_equal(chroma_vector(parse_chord("C")), expected)

    def test_shape(self) -> None:
        assert chroma_vector(parse_chord("Bbm7/Ab")).shape == (12,)

    def test_same_pitches_same_vector(self) -> None:
        np.testing.assert_array_equal(chroma_vector(parse_chord("C#")), chroma_vector(parse_chord("Reb")))


class TestSimilarity:
    def test_jaccard(self) -> None:
        assert pitch_class_jaccard(frozenset({0, 4, 7}), frozenset({0, 4, 7})) == 1.0
        assert pitch_class_jaccard(frozenset({0, 4, 7}), frozenset({0, 3, 7})) == 0.5
        assert pitch_class_jaccard(frozenset(), frozenset({0})) == 0.0

    def test_chord_pitch_similarity(self) -> None:
        assert chord_pitch_similarity(parse_chord("C"), parse_chord("Cm")) == 0.5
        assert chord_pitch_similarity(parse_chord("Cmaj7"), parse_chord("Do^")) == 1.0

    def test_invalid_chords_have_no_similarity(self) -> None:
        assert chord_pitch_similarity(parse_chord("C"), None) == 0.0
        assert chord_pitch_similarity(parse_chord("C"), parse_chord("Loop")) == 0.0
        assert chroma_similarity(None, parse_chord("C")) == 0.0

    def test_chroma_similarity(self) -> None:
        assert chroma_similarity(parse_chord("C"), parse_chord("C")) == pytest.approx(1.0)
        assert chroma_similarity(parse_chord("C"), parse_chord("Am")) == pytest.approx(2 / 3)
        assert chroma_similarity(parse_chord("C"), parse_chord("F#")) == 0.0


class TestRootsMatch:
    def test_enharmonic_roots(self) -> None:
        assert roots_match(parse_chord("C#"), parse_chord("Dbm"))
        assert roots_match(parse_chord("H7"), parse_chord("Si"))

    def test_different_roots(self) -> None:
        assert not roots_match(parse_chord("C"), parse_chord("D"))
        assert not roots_match(None, parse_chord("C"))

"""Pitch class operations for chord comparison.

This module provides absolute pitch class (0-11) representations of parsed
chords, so that chords can be compared on their actual note content rather
than on their names.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from chord_symbol.dictionaries.notes import NOTE_TO_SEMITONE

if TYPE_CHECKING:
    from chord_symbol.models import Chord


def chord_to_pitch_classes(chord: Chord) -> frozenset[int]:
    """Convert a parsed chord to a set of pitch classes.

    Parameters
    ----------
    chord : Chord
        A valid chord.

    Returns
    -------
    frozenset[int]
        Set of pitch classes (0-11, where C=0), bass note included.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> sorted(chord_to_pitch_classes(parse_chord("C")))
    [0, 4, 7]
    >>> sorted(chord_to_pitch_classes(parse_chord("Gm/F")))
    [2, 5, 7, 10]
    """
    normalized = chord.normalized
    root_pc = NOTE_TO_SEMITONE[normalized.root_note]
    pitch_classes = {(root_pc + semitones) % 12 for semitones in normalized.semitones}
    if normalized.bass_note:
        pitch_classes.add(NOTE_TO_SEMITONE[normalized.bass_note])
    return frozenset(pitch_classes)


def chroma_vector(chord: Chord) -> NDArray[np.float64]:
    """Convert a parsed chord to a 12-bin binary chroma vector.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> chroma_vector(parse_chord("C")).astype(int).tolist()
    [1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0]
    """
    chroma = np.zeros(12, dtype=np.float64)
    chroma[sorted(chord_to_pitch_classes(chord))] = 1.0
    return chroma


def pitch_class_jaccard(pc1: frozenset[int], pc2: frozenset[int]) -> float:
    """Compute Jaccard similarity between two pitch class sets.

    Examples
    --------
    >>> pitch_class_jaccard(frozenset({0, 4, 7}), frozenset({0, 3, 7}))
    0.5
    """
    if not pc1 or not pc2:
        return 0.0
    return len(pc1 & pc2) / len(pc1 | pc2)


def chord_pitch_similarity(chord1: Chord | None, chord2: Chord | None) -> float:
    """Compute pitch class Jaccard similarity between two chords.

    Invalid or missing chords have no similarity with anything.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> chord_pitch_similarity(parse_chord("C"), parse_chord("Cm"))
    0.5
    >>> chord_pitch_similarity(parse_chord("C#"), parse_chord("Reb"))
    1.0
    """
    if chord1 is None or chord2 is None or not chord1.is_valid or not chord2.is_valid:
        return 0.0
    return pitch_class_jaccard(chord_to_pitch_classes(chord1), chord_to_pitch_classes(chord2))


def chroma_similarity(chord1: Chord | None, chord2: Chord | None) -> float:
    """Compute the cosine similarity of the chroma vectors of two chords.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> round(chroma_similarity(parse_chord("C"), parse_chord("Am")), 3)
    0.667
    """
    if chord1 is None or chord2 is None or not chord1.is_valid or not chord2.is_valid:
        return 0.0
    v1 = chroma_vector(chord1)
    v2 = chroma_vector(chord2)
    return float(np.dot(v1, v2) / (np.linalg.norm(v1) * np.linalg.norm(v2)))


def roots_match(chord1: Chord | None, chord2: Chord | None) -> bool:
    """Check if two chords have the same root (enharmonic equivalence).

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> roots_match(parse_chord("C#"), parse_chord("Dbm"))
    True
    """
    if chord1 is None or chord2 is None or not chord1.is_valid or not chord2.is_valid:
        return False
    return NOTE_TO_SEMITONE[chord1.normalized.root_note] == NOTE_TO_SEMITONE[chord2.normalized.root_note]

"""Move and respell the root and bass notes of a chord."""

from __future__ import annotations

from dataclasses import replace

from chord_symbol.dictionaries.notes import FLATS, NOTE_TO_SEMITONE, SHARPS
from chord_symbol.models import Chord
from chord_symbol.parser.formatter import respell_notes
from chord_symbol.parser.normalizer import name_chord_notes


def transpose_note(note: str, transpose_value: int, use_flats: bool) -> str:
    """Shift a canonical note by a signed number of semitones.

    Examples
    --------
    >>> transpose_note("C", 3, use_flats=False)
    'D#'
    >>> transpose_note("C", -4, use_flats=True)
    'Ab'
    """
    scale = FLATS if use_flats else SHARPS
    return scale[(NOTE_TO_SEMITONE[note] + transpose_value) % 12]


def transpose(transpose_value: int, use_flats: bool, chord: Chord) -> Chord:
    """Transpose root and bass notes.

    The accidental of the root note, or else of the bass note, is kept
    when transposing. Natural notes fall back to ``use_flats``.

    Parameters
    ----------
    transpose_value : int
        Signed number of semitones.
    use_flats : bool
        Spell with flats when the chord has no accidental to follow.
    chord : Chord
        A valid chord.

    Returns
    -------
    Chord
        The transposed chord, spelled in the notation system of its symbol.
    """
    if transpose_value == 0:
        return chord

    normalized = chord.normalized
    prefer_flats = _prefers_flats(normalized.root_note, normalized.bass_note, use_flats)
    root_note = transpose_note(normalized.root_note, transpose_value, prefer_flats)
    bass_note = None
    if normalized.bass_note:
        bass_note = transpose_note(normalized.bass_note, transpose_value, prefer_flats)

    chord = move_notes(chord, root_note, bass_note)
    return respell_notes(chord, chord.input.notation_system)


def harmonize_notes(use_flats: bool, notation_system: str, chord: Chord) -> Chord:
    """Respell root and bass notes all with sharps, or all with flats.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> chord = harmonize_notes(True, "german", parse_chord("La#/Reb"))
    >>> chord.formatted.root_note, chord.formatted.bass_note
    ('Hes', 'Des')
    """
    normalized = chord.normalized
    root_note = transpose_note(normalized.root_note, 0, use_flats)
    bass_note = transpose_note(normalized.bass_note, 0, use_flats) if normalized.bass_note else None

    chord = move_notes(chord, root_note, bass_note)
    return respell_notes(chord, notation_system)


def move_notes(chord: Chord, root_note: str, bass_note: str | None) -> Chord:
    """Set new canonical root and bass notes, and spell the chord tones again."""
    normalized = replace(
        chord.normalized,
        root_note=root_note,
        bass_note=bass_note,
        notes=name_chord_notes(root_note, chord.normalized.intervals),
    )
    return replace(chord, normalized=normalized)


def _prefers_flats(root_note: str, bass_note: str | None, use_flats: bool) -> bool:
    for note in (root_note, bass_note):
        if note and len(note) > 1:
            return note.endswith("b")
    return use_flats

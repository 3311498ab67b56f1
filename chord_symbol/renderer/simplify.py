"""Drop the non-essential parts of a chord.

``core`` keeps the quality, the sevenths, the altered fifths, the
suspension and the omits, and drops every tension. ``max`` keeps nothing
but the triad, with a plain fifth and no bass note. Power and bass chords
are left as they are.
"""

from __future__ import annotations

from dataclasses import replace

from chord_symbol.dictionaries import intervals as iv
from chord_symbol.helpers import has_none_of
from chord_symbol.models import Chord
from chord_symbol.parser.formatter import format_symbol_parts
from chord_symbol.parser.normalizer import normalize_descriptor

TENSIONS: tuple[str, ...] = ("b9", "9", "#9", "11", "#11", "b13", "13")

INTERVALS_TO_REMOVE: dict[str, tuple[str, ...]] = {
    "core": ("4", *TENSIONS),
    "max": ("4", "b5", "#5", "b6", "6", "bb7", "b7", "7", *TENSIONS),
}


def simplify_chord(level: str, notation_system: str, chord: Chord) -> Chord:
    """Simplify a chord, then format it again.

    Parameters
    ----------
    level : str
        "none", "core" or "max".
    notation_system : str
        The notation system to format root and bass notes in.
    chord : Chord
        A valid chord.

    Returns
    -------
    Chord
        The simplified chord. Simplifying is idempotent.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> simplify_chord("core", "english", parse_chord("Ch(#11,b13)")).normalized.intervals
    ('1', 'b3', 'b5', 'b7')
    >>> simplify_chord("max", "english", parse_chord("C#m11/G")).normalized.intervals
    ('1', 'b3', '5')
    """
    normalized = chord.normalized
    if level not in INTERVALS_TO_REMOVE or normalized.quality in (iv.POWER, iv.BASS):
        return chord

    to_remove = INTERVALS_TO_REMOVE[level]
    keeps_suspension = level == "core" and normalized.is_suspended
    if keeps_suspension:
        to_remove = tuple(interval for interval in to_remove if interval != "4")
    intervals = [interval for interval in normalized.intervals if interval not in to_remove]
    bass_note = normalized.bass_note

    if level == "max":
        if has_none_of(intervals, ("b3", "3")):
            intervals.append("3" if normalized.intents.major else "b3")
        intervals.append("5")
        bass_note = None

    intervals = iv.sort_intervals(intervals)
    normalized = replace(
        normalized,
        bass_note=bass_note,
        intervals=intervals,
        semitones=iv.get_semitones(intervals),
        intents=replace(normalized.intents, eleventh=False, alt=False),
        is_suspended=keeps_suspension,
    )
    chord = normalize_descriptor(replace(chord, normalized=normalized))
    return format_symbol_parts(chord, notation_system)

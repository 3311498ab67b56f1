"""Chord notation converter to and from Harte notation, and to pychord.

Harte labels (e.g., "G:min7", "C:(1,3,5,9)/3") are the notation of chord
annotation datasets; ``pychord`` chords carry their own note model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_symbol.dictionaries.notes import NOTE_TO_SEMITONE, SHARPS
from chord_symbol.parser.parse import chord_parser_factory

if TYPE_CHECKING:
    from pychord import Chord as PyChord

    from chord_symbol.models import Chord

# Harte shorthand -> intervals, spelled the way the parser spells them
HARTE_SHORTHAND_INTERVALS: dict[str, tuple[str, ...]] = {
    "maj": ("1", "3", "5"),
    "min": ("1", "b3", "5"),
    "dim": ("1", "b3", "b5"),
    "aug": ("1", "3", "#5"),
    "sus4": ("1", "4", "5"),
    "sus2": ("1", "5", "9"),
    "maj6": ("1", "3", "5", "6"),
    "min6": ("1", "b3", "5", "6"),
    "7": ("1", "3", "5", "b7"),
    "maj7": ("1", "3", "5", "7"),
    "min7": ("1", "b3", "5", "b7"),
    "dim7": ("1", "b3", "b5", "bb7"),
    "hdim7": ("1", "b3", "b5", "b7"),
    "minmaj7": ("1", "b3", "5", "7"),
    "aug7": ("1", "3", "#5", "b7"),
    "7sus4": ("1", "4", "5", "b7"),
    "9": ("1", "3", "5", "b7", "9"),
    "maj9": ("1", "3", "5", "7", "9"),
    "min9": ("1", "b3", "5", "b7", "9"),
    "11": ("1", "3", "5", "b7", "9", "11"),
    "min11": ("1", "b3", "5", "b7", "9", "11"),
    "13": ("1", "3", "5", "b7", "9", "11", "13"),
    "maj13": ("1", "3", "5", "7", "9", "11", "13"),
    "min13": ("1", "b3", "5", "b7", "9", "11", "13"),
}

# Harte shorthand -> chord symbol descriptor; Harte "11" and "13" keep the
# 3rd and the 11th, which the bare "11" and "13" descriptors drop
HARTE_TO_DESCRIPTOR: dict[str, str] = {
    "maj": "",
    "min": "mi",
    "dim": "dim",
    "aug": "+",
    "sus4": "sus",
    "sus2": "sus2",
    "maj6": "6",
    "min6": "mi6",
    "7": "7",
    "maj7": "ma7",
    "min7": "mi7",
    "dim7": "dim7",
    "hdim7": "mi7(b5)",
    "minmaj7": "mi(ma7)",
    "aug7": "7(#5)",
    "7sus4": "7sus",
    "9": "9",
    "maj9": "ma9",
    "min9": "mi9",
    "11": "11(add3)",
    "min11": "mi11",
    "13": "13(add11)",
    "maj13": "ma13(add11)",
    "min13": "mi13",
}

# Harte shorthand -> pychord quality
HARTE_TO_PYCHORD_QUALITY: dict[str, str] = {
    "maj": "",
    "min": "m",
    "dim": "dim",
    "aug": "aug",
    "sus4": "sus4",
    "sus2": "sus2",
    "maj6": "6",
    "min6": "m6",
    "7": "7",
    "maj7": "maj7",
    "min7": "m7",
    "dim7": "dim7",
    "hdim7": "m7-5",
    "minmaj7": "mmaj7",
    "aug7": "7#5",
    "7sus4": "7sus4",
    "9": "9",
    "maj9": "maj9",
    "min9": "m9",
    "11": "11",
    "min11": "m11",
    "13": "13",
    "maj13": "maj13",
}

# Semitones from the root -> Harte degree, for bass notes
SEMITONES_TO_DEGREE: tuple[str, ...] = ("1", "b2", "2", "b3", "3", "4", "b5", "5", "b6", "6", "b7", "7")

MAJOR_SCALE_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

_parse_english = chord_parser_factory(notation_systems=("english",))


def get_harte_shorthand(chord: Chord) -> str | None:
    """Find the Harte shorthand holding exactly the intervals of a chord.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> get_harte_shorthand(parse_chord("Cm7"))
    'min7'
    >>> get_harte_shorthand(parse_chord("C7(#9)")) is None
    True
    """
    intervals = set(chord.normalized.intervals)
    for shorthand, shorthand_intervals in HARTE_SHORTHAND_INTERVALS.items():
        if intervals == set(shorthand_intervals):
            return shorthand
    return None


def to_harte(chord: Chord) -> str:
    """Convert a parsed chord to a Harte label.

    A shorthand is used when one holds exactly the intervals of the chord,
    an interval list otherwise. A bass note is written as a degree.

    Parameters
    ----------
    chord : Chord
        A valid chord.

    Returns
    -------
    str
        The Harte label.

    Raises
    ------
    ValueError
        If the chord is not valid.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> to_harte(parse_chord("Gm7"))
    'G:min7'
    >>> to_harte(parse_chord("C7(#9)/E"))
    'C:(1,3,5,b7,#9)/3'
    """
    if not chord.is_valid:
        msg = f"Cannot convert an invalid chord: {chord.input.symbol}"
        raise ValueError(msg)

    normalized = chord.normalized
    shorthand = get_harte_shorthand(chord)
    if shorthand is None:
        shorthand = "(" + ",".join(normalized.intervals) + ")"

    label = f"{normalized.root_note}:{shorthand}"
    if normalized.bass_note:
        semitones = NOTE_TO_SEMITONE[normalized.bass_note] - NOTE_TO_SEMITONE[normalized.root_note]
        label += "/" + SEMITONES_TO_DEGREE[semitones % 12]
    return label


def from_harte(label: str) -> Chord:
    """Parse a Harte label into a chord.

    Only the root, the shorthand and the bass degree are read.

    Parameters
    ----------
    label : str
        Chord in Harte notation (e.g., "G:min7", "C:maj/3").

    Returns
    -------
    Chord
        The parsed chord.

    Raises
    ------
    ValueError
        If the shorthand has no chord symbol equivalent.

    Examples
    --------
    >>> from_harte("G:min7").formatted.descriptor
    'mi7'
    >>> from_harte("C:maj/3").normalized.bass_note
    'E'
    """
    from harte.harte import Harte

    harte_chord = Harte(label)
    root_note = _canonical_note(harte_chord.get_root())
    shorthand = harte_chord.get_shorthand() or "maj"
    if shorthand not in HARTE_TO_DESCRIPTOR:
        msg = f"Unknown Harte shorthand: {shorthand}"
        raise ValueError(msg)

    symbol = root_note + HARTE_TO_DESCRIPTOR[shorthand]
    if "/" in label:
        degree = label.split("/")[-1]
        symbol += "/" + SHARPS[(NOTE_TO_SEMITONE[root_note] + _degree_to_semitones(degree)) % 12]
    return _parse_english(symbol)


def to_pychord(chord: Chord) -> PyChord:
    """Convert a parsed chord to a ``pychord.Chord``.

    Raises
    ------
    ValueError
        If the chord has no pychord equivalent.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> to_pychord(parse_chord("Bbm7/F")).chord
    'Bbm7/F'
    """
    from pychord import Chord as PyChord

    shorthand = get_harte_shorthand(chord) if chord.is_valid else None
    if shorthand not in HARTE_TO_PYCHORD_QUALITY:
        msg = f"No pychord equivalent for: {chord.input.symbol}"
        raise ValueError(msg)

    normalized = chord.normalized
    symbol = normalized.root_note + HARTE_TO_PYCHORD_QUALITY[shorthand]
    if normalized.bass_note:
        symbol += "/" + normalized.bass_note
    return PyChord(symbol)


def _canonical_note(note: str) -> str:
    """Map Harte roots such as "Cb" or "E#" to a canonical note."""
    if note in NOTE_TO_SEMITONE:
        return note
    letter, accidentals = note[0], note[1:]
    semitones = MAJOR_SCALE_SEMITONES["CDEFGAB".index(letter)]
    semitones += accidentals.count("#") - accidentals.count("b")
    return SHARPS[semitones % 12]


def _degree_to_semitones(degree: str) -> int:
    number = degree.lstrip("b#")
    accidentals = degree[: len(degree) - len(number)]
    semitones = MAJOR_SCALE_SEMITONES[(int(number) - 1) % 7]
    return semitones + accidentals.count("#") - accidentals.count("b")

"""Normalize the notes and the intervals of a parsed chord.

The descriptor analysis works from intervals alone: it finds the quality of
the chord, the extensions it implies, and classifies every remaining
interval as an alteration or an add. Chord tones are then spelled from the
root note.
"""

from __future__ import annotations

from dataclasses import replace

from chord_symbol.dictionaries import intervals as iv
from chord_symbol.dictionaries.notes import FLATS, NOTE_TO_SEMITONE, SHARPS, VARIANTS_TO_NOTES
from chord_symbol.helpers import has_all, has_exactly, has_none_of, has_one_of
from chord_symbol.models import Chord, NormalizedChord

LETTERS = "CDEFGAB"
NATURAL_SEMITONES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
ACCIDENTALS: dict[int, str] = {0: "", 1: "#", 11: "b"}

ANY_NINTH: tuple[str, ...] = ("b9", "9", "#9")


def normalize_notes(chord: Chord) -> Chord:
    """Map root and bass spellings to canonical notes.

    Raises
    ------
    KeyError
        If a spelling is unknown to the notation system it was matched in,
        which the tokenizer never lets happen.

    Examples
    --------
    >>> from chord_symbol.models import ChordInput
    >>> chord = Chord(input=ChordInput(symbol="Réb", root_note="Réb", notation_system="latin"))
    >>> normalize_notes(chord).normalized.root_note
    'Db'
    """
    variants = VARIANTS_TO_NOTES[chord.input.notation_system]
    bass_note = variants[chord.input.bass_note] if chord.input.bass_note else None
    normalized = replace(
        chord.normalized or NormalizedChord(),
        root_note=variants[chord.input.root_note],
        bass_note=bass_note,
    )
    return replace(chord, normalized=normalized)


def normalize_descriptor(chord: Chord) -> Chord:
    """Analyze the intervals of a chord into quality, extensions and changes.

    Parameters
    ----------
    chord : Chord
        A chord whose intervals, intents and suspension are normalized.

    Returns
    -------
    Chord
        The chord with its quality, extensions, alterations, adds, omits and
        spelled notes written in the ``normalized`` section.
    """
    normalized = chord.normalized
    intervals = normalized.intervals

    if has_exactly(intervals, ("1", "5")):
        analysis = {"quality": iv.POWER, "extensions": (), "alterations": (), "adds": (), "omits": ()}
    elif has_exactly(intervals, ("1",)):
        analysis = {"quality": iv.BASS, "extensions": (), "alterations": (), "adds": (), "omits": ()}
    else:
        analysis = _analyze(normalized)

    normalized = replace(
        normalized,
        notes=name_chord_notes(normalized.root_note, intervals),
        **analysis,
    )
    return replace(chord, normalized=normalized)


def _analyze(normalized: NormalizedChord) -> dict:
    intervals = normalized.intervals
    has_major_intent = normalized.intents.major
    is_suspended = normalized.is_suspended

    omits = _get_omits(intervals, has_major_intent, is_suspended)
    quality, quality_intervals = _get_quality(normalized)
    extensions = _get_extensions(intervals, quality)

    # The "straight" version of the chord, without any alteration/add/omit
    base_intervals = ("1", *quality_intervals, *extensions)
    adds, alterations = _get_adds_and_alterations(intervals, base_intervals, quality, is_suspended)

    return {
        "quality": quality,
        "extensions": extensions,
        "alterations": alterations,
        "adds": adds,
        "omits": omits,
    }


def _get_omits(intervals: tuple[str, ...], has_major_intent: bool, is_suspended: bool) -> tuple[str, ...]:
    omits = []
    has_implied_third = is_suspended or (has_major_intent and "11" in intervals)
    if has_none_of(intervals, ("b3", "3")) and not has_implied_third:
        omits.append("3" if has_major_intent else "b3")
    if has_none_of(intervals, ("b5", "5", "#5")):
        omits.append("5")
    return tuple(omits)


def _get_quality(normalized: NormalizedChord) -> tuple[str, tuple[str, ...]]:
    """Find the quality from a version of the chord with a plain third and fifth."""
    for_detection = list(normalized.intervals)
    if normalized.is_suspended:
        for_detection = [interval for interval in for_detection if interval != "4"]
    if has_none_of(for_detection, ("b3", "3")):
        for_detection.append("3" if normalized.intents.major else "b3")
    if normalized.intents.alt:
        for_detection = [interval for interval in for_detection if interval not in ("b5", "#5")]
        for_detection.append("5")

    candidates = sorted(iv.QUALITY_INTERVALS, key=lambda item: len(item[1]), reverse=True)
    for quality, quality_intervals in candidates:
        if has_all(for_detection, quality_intervals):
            return quality, quality_intervals

    # Unreachable: a third is always present for detection
    msg = f"No quality matches intervals: {normalized.intervals}"
    raise ValueError(msg)


def _get_extensions(intervals: tuple[str, ...], quality: str) -> tuple[str, ...]:
    if quality not in (iv.MA7, iv.DOM7, iv.MI7, iv.MI_MA7):
        return ()

    is_minor = quality in (iv.MI7, iv.MI_MA7)
    if is_minor and "13" in intervals and has_one_of(intervals, ("11", "#11")) and has_one_of(intervals, ANY_NINTH):
        return ("9", "11", "13")
    if not is_minor and "13" in intervals and has_one_of(intervals, ANY_NINTH):
        return ("9", "13")
    if "11" in intervals and has_one_of(intervals, ANY_NINTH):
        return ("9", "11")
    if "9" in intervals:
        return ("9",)
    return ()


def _get_adds_and_alterations(
    intervals: tuple[str, ...],
    base_intervals: tuple[str, ...],
    quality: str,
    is_suspended: bool,
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    adds = []
    alterations = []
    quality_alterations = iv.QUALITY_ALTERATIONS[quality]

    for interval in intervals:
        if interval == "5" or (interval == "4" and is_suspended) or interval in base_intervals:
            continue
        if interval in quality_alterations:
            alterations.append(interval)
        else:
            adds.append(interval)

    # a major "11" descriptor implies no 3rd
    has_eleventh_without_third = "11" in base_intervals and quality in (iv.MA7, iv.DOM7)
    if "3" in intervals and (is_suspended or has_eleventh_without_third):
        adds.append("3")

    return iv.sort_intervals(adds), iv.sort_intervals(alterations)


def name_chord_notes(root_note: str, intervals: tuple[str, ...]) -> tuple[str, ...]:
    """Spell the tones of a chord, index-aligned with its intervals.

    Each tone is spelled with the letter its scale degree calls for; when
    that would take a double accidental, the plain sharp or flat name of the
    pitch class is used instead.

    Examples
    --------
    >>> name_chord_notes("C#", ("1", "b3", "5"))
    ('C#', 'E', 'G#')
    >>> name_chord_notes("Ab", ("1", "3", "5", "b7"))
    ('Ab', 'C', 'Eb', 'Gb')
    """
    if not root_note:
        return ()
    root_semitone = NOTE_TO_SEMITONE[root_note]
    root_letter = LETTERS.index(root_note[0])

    notes = []
    for interval, semitones in zip(intervals, iv.get_semitones(intervals), strict=True):
        degree = int(interval.lstrip("b#")) - 1
        letter = LETTERS[(root_letter + degree) % 7]
        target = (root_semitone + semitones) % 12
        accidental = ACCIDENTALS.get((target - NATURAL_SEMITONES[letter]) % 12)
        if accidental is None:
            notes.append(FLATS[target] if "b" in root_note or interval.startswith("b") else SHARPS[target])
        else:
            notes.append(letter + accidental)
    return tuple(notes)

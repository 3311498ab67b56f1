"""Build the text projection of a normalized chord."""

from __future__ import annotations

from dataclasses import replace

from chord_symbol.dictionaries import intervals as iv
from chord_symbol.dictionaries.notes import spell_note
from chord_symbol.models import Chord, FormattedChord, NormalizedChord

QUALITY_DESCRIPTORS: dict[str, str] = {
    iv.MA: "",
    iv.MA6: "6",
    iv.MA7: "ma7",
    iv.DOM7: "7",
    iv.MI: "mi",
    iv.MI6: "mi6",
    iv.MI7: "mi7",
    iv.MI_MA7: "mi(ma7)",
    iv.AUG: "+",
    iv.DIM: "dim",
    iv.DIM7: "dim7",
    iv.POWER: "5",
    iv.BASS: " bass",
}


def format_symbol_parts(chord: Chord, notation_system: str | None = None) -> Chord:
    """Write the ``formatted`` section of a chord from its normalized form.

    Parameters
    ----------
    chord : Chord
        A chord with a complete ``normalized`` section.
    notation_system : str | None
        The notation system to spell root and bass notes in. Defaults to
        the system the symbol was written in.

    Returns
    -------
    Chord
        The chord with its ``formatted`` section written.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> parse_chord("Ch(#11,b13)").formatted.chord_changes
    ('b5', 'add #11', 'b13')
    """
    normalized = chord.normalized
    formatted = FormattedChord(
        root_note=normalized.root_note,
        bass_note=normalized.bass_note,
        descriptor=get_descriptor(normalized),
        chord_changes=get_chord_changes(normalized),
    )
    chord = replace(chord, formatted=formatted)
    return respell_notes(chord, notation_system or chord.input.notation_system)


def respell_notes(chord: Chord, notation_system: str) -> Chord:
    """Spell the formatted root and bass notes in a notation system."""
    normalized = chord.normalized
    bass_note = spell_note(normalized.bass_note, notation_system) if normalized.bass_note else None
    formatted = replace(
        chord.formatted,
        root_note=spell_note(normalized.root_note, notation_system),
        bass_note=bass_note,
    )
    return replace(chord, formatted=formatted)


def get_descriptor(normalized: NormalizedChord) -> str:
    """Format quality, highest extension and suspension.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> get_descriptor(parse_chord("Cmaj13").normalized)
    'ma13'
    >>> get_descriptor(parse_chord("C9sus").normalized)
    '9sus'
    """
    if normalized.intents.alt:
        return "7alt"

    descriptor = QUALITY_DESCRIPTORS[normalized.quality]
    if normalized.quality in (iv.MA6, iv.MI6) and "9" in normalized.adds:
        descriptor += "9"
    if normalized.extensions:
        descriptor = descriptor.replace("7", normalized.extensions[-1])
    if normalized.is_suspended:
        descriptor += "sus"
    return descriptor


def get_chord_changes(normalized: NormalizedChord) -> tuple[str, ...]:
    """Format alterations, adds and omits, in that order."""
    if normalized.intents.alt:
        return ()
    return (
        *normalized.alterations,
        *_format_adds(normalized.quality, normalized.adds),
        *_format_omits(normalized.omits),
    )


def _format_adds(quality: str, adds: tuple[str, ...]) -> list[str]:
    if quality in (iv.MA6, iv.MI6):
        # already part of the "69" descriptor
        adds = tuple(add for add in adds if add != "9")

    formatted = []
    for index, add in enumerate(adds):
        name = "ma7" if add == "7" else add
        if index == 0:
            name = ("add" if name.isdigit() else "add ") + name
        formatted.append(name)
    return formatted


def _format_omits(omits: tuple[str, ...]) -> list[str]:
    formatted = []
    for index, omitted in enumerate(omits):
        name = "3" if omitted == "b3" else omitted
        formatted.append("omit" + name if index == 0 else name)
    return formatted

"""Short namings for the formatted chord."""

from __future__ import annotations

from dataclasses import replace

from chord_symbol.models import Chord

DESCRIPTOR_NAMINGS: tuple[tuple[str, str], ...] = (
    ("dim", "°"),
    ("mi", "m"),
    ("ma", "M"),
)

CHANGES_NAMINGS: tuple[tuple[str, str], ...] = (
    ("omit", "no"),
    ("ma", "M"),
    (" ", ""),
)


def shorten_namings(chord: Chord) -> Chord:
    """Rewrite the formatted descriptor and chord changes with short namings.

    Only the ``formatted`` section changes.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> shorten_namings(parse_chord("Cdim7(add ma7)")).formatted.descriptor
    '°7'
    >>> shorten_namings(parse_chord("C(add9)")).formatted.descriptor
    '2'
    """
    formatted = chord.formatted
    descriptor = formatted.descriptor
    chord_changes = formatted.chord_changes

    if descriptor == "" and chord_changes == ("add9",):
        descriptor, chord_changes = "2", ()

    descriptor = _rename(descriptor, DESCRIPTOR_NAMINGS)
    chord_changes = tuple(_rename(change, CHANGES_NAMINGS) for change in chord_changes)
    return replace(chord, formatted=replace(formatted, descriptor=descriptor, chord_changes=chord_changes))


def _rename(text: str, namings: tuple[tuple[str, str], ...]) -> str:
    for long_naming, short_naming in namings:
        text = text.replace(long_naming, short_naming)
    return text

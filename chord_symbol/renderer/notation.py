"""Notation system of the rendered symbol."""

from __future__ import annotations

import logging

from chord_symbol.config import AUTO
from chord_symbol.dictionaries.notes import NOTATION_SYSTEMS
from chord_symbol.models import Chord
from chord_symbol.parser.formatter import respell_notes

logger = logging.getLogger(__name__)


def resolve_notation_system(notation_system: str, chord: Chord) -> str | None:
    """Resolve "auto" to the system the chord was written in.

    Returns None when the system is not recognized.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> resolve_notation_system("auto", parse_chord("H7"))
    'german'
    >>> resolve_notation_system("japanese", parse_chord("C")) is None
    True
    """
    if notation_system == AUTO:
        return chord.input.notation_system
    if notation_system not in NOTATION_SYSTEMS:
        logger.debug("Unknown notation system: %s", notation_system)
        return None
    return notation_system


def convert_notation_system(notation_system: str, chord: Chord) -> Chord:
    """Spell the formatted root and bass notes in another notation system."""
    return respell_notes(chord, notation_system)

"""Printers turn the rendered chord into the value returned to the caller."""

from __future__ import annotations

import logging
from dataclasses import replace

from chord_symbol.config import ParserConfiguration
from chord_symbol.models import Chord
from chord_symbol.parser.parse import chord_parser_factory

logger = logging.getLogger(__name__)


def print_text(chord: Chord) -> str:
    """Print the formatted chord as a symbol.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> print_text(parse_chord("C#m11/G"))
    'C#mi11/G'
    >>> print_text(parse_chord("Ch(#11,b13)"))
    'Cmi7(b5,add #11,b13)'
    """
    formatted = chord.formatted
    symbol = formatted.root_note + formatted.descriptor
    if formatted.chord_changes:
        symbol += "(" + ",".join(formatted.chord_changes) + ")"
    if formatted.bass_note:
        symbol += "/" + formatted.bass_note
    return symbol


def print_raw(notation_system: str, chord: Chord) -> Chord | None:
    """Return the rendered chord as a structure.

    The ``input`` section is rebuilt by parsing the printed symbol again,
    with the configuration the chord was first parsed with, so that the
    structure reads as if the rendered symbol had been parsed from scratch.

    Parameters
    ----------
    notation_system : str
        The notation system the chord was rendered in.
    chord : Chord
        The rendered chord.

    Returns
    -------
    Chord | None
        The rendered chord, with its ``input`` section rebuilt, or None when
        the printed symbol cannot be parsed again.
    """
    configuration = chord.parser_configuration or ParserConfiguration()
    parse = chord_parser_factory(
        replace(configuration, notation_systems=(notation_system,), custom_filters=())
    )
    symbol = print_text(chord)
    parsed = parse(symbol)
    if parsed is None or not parsed.is_valid:
        logger.debug("Rendered symbol %r cannot be parsed again", symbol)
        return None
    return replace(chord, input=parsed.input)

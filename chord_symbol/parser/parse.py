"""Chord parser factory.

Parsing runs an ordered chain of filters over a growing ``Chord`` record:

    parse base -> parse descriptor -> normalize notes
        -> normalize descriptor -> format symbol parts -> custom filters

The built-in chain is attempted once per notation system. The first system
yielding a valid chord wins; when none does, the returned chord carries one
error per attempted system.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from functools import partial

from chord_symbol.config import ChordFilter, ParserConfiguration
from chord_symbol.errors import ChordSymbolError
from chord_symbol.helpers import chain
from chord_symbol.models import Chord
from chord_symbol.parser.descriptor import parse_descriptor
from chord_symbol.parser.formatter import format_symbol_parts
from chord_symbol.parser.normalizer import normalize_descriptor, normalize_notes
from chord_symbol.parser.tokenizer import init_chord, parse_base

logger = logging.getLogger(__name__)

ParseChord = Callable[[str], "Chord | None"]


def chord_parser_factory(
    configuration: ParserConfiguration | None = None,
    *,
    alt_intervals: Mapping[str, bool] | None = None,
    notation_systems: Sequence[str] | None = None,
    custom_filters: Sequence[ChordFilter] = (),
) -> ParseChord:
    """Create a chord parsing function.

    Options can be given either as a ``ParserConfiguration`` or as keyword
    arguments, not both.

    Parameters
    ----------
    configuration : ParserConfiguration | None
        A complete parser configuration.
    alt_intervals : Mapping[str, bool] | None
        Toggles of the altered degrees held by "alt" chords.
    notation_systems : Sequence[str] | None
        Notation systems to try, in order.
    custom_filters : Sequence[ChordFilter]
        Chord -> Chord | None callables run after the built-in filters.

    Returns
    -------
    Callable[[str], Chord | None]
        The parsing function. It returns a Chord, carrying errors in its
        ``error`` field when the symbol cannot be parsed, or None when a
        custom filter stopped the chain.

    Raises
    ------
    ValueError
        If an option value is not recognized.

    Examples
    --------
    >>> parse = chord_parser_factory()
    >>> parse("C#m11/G").normalized.intervals
    ('1', 'b3', '5', 'b7', '9', '11')
    >>> parse("Loop").error[0].type
    'NoSymbolFoundError'
    """
    if configuration is None:
        configuration = ParserConfiguration(
            alt_intervals=alt_intervals,
            notation_systems=notation_systems,
            custom_filters=tuple(custom_filters),
        )

    all_alt_intervals = configuration.get_alt_intervals()
    all_notation_systems = configuration.get_notation_systems()
    user_filters = tuple(configuration.custom_filters)

    def parse_chord(symbol: str) -> Chord | None:
        errors: list[ChordSymbolError] = []

        for notation_system in all_notation_systems:
            filters = [
                partial(parse_base, notation_system),
                partial(parse_descriptor, all_alt_intervals),
                normalize_notes,
                normalize_descriptor,
                format_symbol_parts,
            ]
            try:
                chord = chain(filters, init_chord(symbol))
            except ChordSymbolError as error:
                logger.debug("%r is not a %s chord: %s", symbol, notation_system, error.message)
                errors.append(error)
                continue

            chord = Chord(
                input=chord.input,
                normalized=chord.normalized,
                formatted=chord.formatted,
                parser_configuration=configuration,
            )
            return chain(user_filters, chord)

        return Chord(
            input=init_chord(symbol).input,
            parser_configuration=configuration,
            error=tuple(errors),
        )

    return parse_chord


def parse_chord(symbol: str, **options) -> Chord | None:
    """Parse a single chord symbol.

    Parameters
    ----------
    symbol : str
        The chord symbol (e.g., "Cm7", "La#/Reb").
    **options
        Parser options, see ``chord_parser_factory``.

    Returns
    -------
    Chord | None
        The parsed chord.

    Examples
    --------
    >>> parse_chord("Cm7").formatted.descriptor
    'mi7'
    """
    return chord_parser_factory(**options)(symbol)

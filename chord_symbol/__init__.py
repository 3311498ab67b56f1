"""Chord symbol library for parsing and rendering chord symbols.

This library parses chord symbols written in english, german or latin
notation (e.g., "C#m11/G", "Ch(#11,b13)", "La#/Reb") into a normalized,
semitone-accurate representation, and renders them back to text with
optional transposition, notation system conversion, accidental
harmonization, simplification and short namings.

Examples
--------
>>> from chord_symbol import chord_parser_factory, chord_renderer_factory

>>> # Parse a symbol
>>> parse = chord_parser_factory()
>>> chord = parse("C#m11/G")
>>> chord.normalized.intervals
('1', 'b3', '5', 'b7', '9', '11')

>>> # Render it back
>>> render = chord_renderer_factory()
>>> render(chord)
'C#mi11/G'

>>> # Render it transposed, simplified, in latin notation
>>> render = chord_renderer_factory(
...     transpose_value=7,
...     harmonize_accidentals=True,
...     use_flats=True,
...     simplify="max",
...     use_short_namings=True,
...     notation_system="latin",
... )
>>> render(chord)
'Labm'

>>> # Failures are reported on the chord
>>> [error.type for error in parse("Loop").error]
['NoSymbolFoundError', 'NoSymbolFoundError', 'NoSymbolFoundError']
"""

from chord_symbol.config import ParserConfiguration, RendererConfiguration
from chord_symbol.converter import from_harte, to_harte, to_pychord
from chord_symbol.errors import (
    ChordSymbolError,
    InvalidIntervalsError,
    InvalidModifierError,
    NoSymbolFoundError,
)
from chord_symbol.models import Chord, ChordInput, FormattedChord, Intents, NormalizedChord
from chord_symbol.parser import chord_parser_factory, parse_chord
from chord_symbol.renderer import chord_renderer_factory, render_chord

__all__ = [
    "Chord",
    "ChordInput",
    "ChordSymbolError",
    "FormattedChord",
    "Intents",
    "InvalidIntervalsError",
    "InvalidModifierError",
    "NoSymbolFoundError",
    "NormalizedChord",
    "ParserConfiguration",
    "RendererConfiguration",
    "chord_parser_factory",
    "chord_renderer_factory",
    "from_harte",
    "parse_chord",
    "render_chord",
    "to_harte",
    "to_pychord",
]

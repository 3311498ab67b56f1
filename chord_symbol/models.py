"""Chord data models shared by the parser and the renderer.

A ``Chord`` is threaded through every pipeline stage. Each stage reads the
sections written by the previous ones and returns a new ``Chord`` with its
own section written, so records are never mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_symbol.config import ParserConfiguration
    from chord_symbol.errors import ChordSymbolError


@dataclass(frozen=True)
class ChordInput:
    """Raw substrings of the symbol, as isolated by the tokenizer.

    Parameters
    ----------
    symbol : str
        The symbol given to the parser (e.g., "C#m11/G").
    root_note : str
        Root note, as spelled in the symbol (e.g., "C#", "Do").
    bass_note : str | None
        Bass note as spelled in the symbol, for slash chords.
    descriptor : str
        Everything between the root and the bass note (e.g., "m11").
    parsable_descriptor : str
        The descriptor cleaned up for modifier matching.
    modifiers : tuple[str, ...]
        Modifiers recognized in the descriptor, in order of appearance.
    notation_system : str | None
        The notation system whose spellings matched the symbol.
    """

    symbol: str
    root_note: str = ""
    bass_note: str | None = None
    descriptor: str = ""
    parsable_descriptor: str = ""
    modifiers: tuple[str, ...] = ()
    notation_system: str | None = None


@dataclass(frozen=True)
class Intents:
    """What the chord symbol asked for, beyond its intervals."""

    major: bool = True
    eleventh: bool = False
    alt: bool = False


@dataclass(frozen=True)
class NormalizedChord:
    """Canonical, notation-independent representation of a chord.

    Parameters
    ----------
    root_note : str
        Canonical root note (e.g., "C#").
    bass_note : str | None
        Canonical bass note, for slash chords.
    intervals : tuple[str, ...]
        Scale degrees in canonical order (e.g., ("1", "b3", "5", "b7")).
    semitones : tuple[int, ...]
        Semitones from the root, index-aligned with ``intervals``.
    notes : tuple[str, ...]
        Spelled chord tones, index-aligned with ``intervals``.
    intents : Intents
        Flags recording the intent of the symbol.
    quality : str
        Quality code (see ``chord_symbol.dictionaries.intervals``).
    is_suspended : bool
        True when a suspension was requested.
    extensions, alterations, adds, omits : tuple[str, ...]
        Descriptor fragments, in canonical order.
    """

    root_note: str = ""
    bass_note: str | None = None
    intervals: tuple[str, ...] = ()
    semitones: tuple[int, ...] = ()
    notes: tuple[str, ...] = ()
    intents: Intents = field(default_factory=Intents)
    quality: str = ""
    is_suspended: bool = False
    extensions: tuple[str, ...] = ()
    alterations: tuple[str, ...] = ()
    adds: tuple[str, ...] = ()
    omits: tuple[str, ...] = ()


@dataclass(frozen=True)
class FormattedChord:
    """Text-oriented projection of the normalized chord.

    Parameters
    ----------
    root_note : str
        Root note, spelled in the rendering notation system.
    bass_note : str | None
        Bass note, spelled in the rendering notation system.
    descriptor : str
        Quality, extension and suspension (e.g., "mi7", "9sus").
    chord_changes : tuple[str, ...]
        Alterations, adds and omits (e.g., ("b5", "add #11", "b13")).
    """

    root_note: str
    bass_note: str | None = None
    descriptor: str = ""
    chord_changes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Chord:
    """A chord symbol, parsed.

    Parameters
    ----------
    input : ChordInput
        Raw parts of the symbol.
    normalized : NormalizedChord | None
        Canonical representation, None until the parser gets there.
    formatted : FormattedChord | None
        Text projection, None until the parser gets there.
    parser_configuration : ParserConfiguration | None
        The configuration the chord was parsed under, kept verbatim so the
        chord can be re-derived.
    error : tuple[ChordSymbolError, ...] | None
        Parsing errors, None on success.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> chord = parse_chord("Cm7")
    >>> chord.normalized.intervals
    ('1', 'b3', '5', 'b7')
    >>> chord.formatted.descriptor
    'mi7'
    """

    input: ChordInput
    normalized: NormalizedChord | None = None
    formatted: FormattedChord | None = None
    parser_configuration: ParserConfiguration | None = None
    error: tuple[ChordSymbolError, ...] | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the chord was fully parsed without errors."""
        return (
            not self.error
            and self.normalized is not None
            and self.formatted is not None
            and bool(self.normalized.root_note)
        )

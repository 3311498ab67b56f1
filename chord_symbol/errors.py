"""Errors raised while parsing a chord symbol.

The parser catches these and records them in ``Chord.error``; they only
escape to the caller when a pipeline filter is invoked directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_symbol.models import Chord


class ChordSymbolError(Exception):
    """Base class of every chord parsing error.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    chord : Chord
        The chord being built when the failure happened.
    """

    def __init__(self, message: str, chord: Chord) -> None:
        super().__init__(message)
        self.message = message
        self.chord = chord

    @property
    def type(self) -> str:
        """Name of the error kind (e.g., "NoSymbolFoundError")."""
        return type(self).__name__


class NoSymbolFoundError(ChordSymbolError):
    """The symbol does not look like a chord at all."""

    def __init__(self, chord: Chord) -> None:
        super().__init__(f'"{chord.input.symbol}" does not seems to be a chord', chord)


class InvalidModifierError(ChordSymbolError):
    """A root note was found but the descriptor has unknown leftovers."""

    def __init__(self, chord: Chord, remaining_chars: str) -> None:
        message = (
            f'The chord descriptor "{chord.input.descriptor}" contains unknown '
            f'or duplicated modifiers: "{remaining_chars}"'
        )
        super().__init__(message, chord)
        self.remaining_chars = remaining_chars


class InvalidIntervalsError(ChordSymbolError):
    """The descriptor asks for intervals that cannot coexist."""

    def __init__(self, chord: Chord, forbidden_combo: tuple[str, str]) -> None:
        message = (
            f'The chord descriptor "{chord.input.descriptor}" contains an invalid '
            f"intervals combination: {forbidden_combo[0]} and {forbidden_combo[1]}"
        )
        super().__init__(message, chord)
        self.forbidden_combo = forbidden_combo

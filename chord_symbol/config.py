"""Parser and renderer configuration.

Configurations are plain frozen records. The parser configuration is stored
verbatim on every parsed chord, so only the options the caller actually
gave are set; defaults are resolved when the pipelines are built.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from chord_symbol.dictionaries.notes import NOTATION_SYSTEMS

if TYPE_CHECKING:
    from chord_symbol.models import Chord

ChordFilter = Callable[["Chord"], "Chord | None"]

SimplifyLevel = Literal["none", "core", "max"]
PrinterName = Literal["text", "raw"]

AUTO = "auto"

# Which altered degrees an "alt" chord holds, unless configured otherwise
DEFAULT_ALT_INTERVALS: dict[str, bool] = {
    "fifth_flat": True,
    "fifth_sharp": False,
    "ninth_flat": True,
    "ninth_sharp": True,
    "eleventh_sharp": False,
    "thirteenth_flat": True,
}

SIMPLIFY_LEVELS: tuple[str, ...] = ("none", "core", "max")
PRINTERS: tuple[str, ...] = ("text", "raw")


@dataclass(frozen=True)
class ParserConfiguration:
    """Options of the parsing pipeline.

    Parameters
    ----------
    alt_intervals : Mapping[str, bool] | None
        Toggles of the altered degrees held by "alt" chords. Missing keys
        fall back to ``DEFAULT_ALT_INTERVALS``.
    notation_systems : Sequence[str] | None
        Notation systems tried by the tokenizer, in order. Defaults to all
        of them (english, german, latin).
    custom_filters : Sequence[ChordFilter]
        Chord -> Chord | None callables run after the built-in filters.
    """

    alt_intervals: Mapping[str, bool] | None = None
    notation_systems: Sequence[str] | None = None
    custom_filters: Sequence[ChordFilter] = ()

    def get_alt_intervals(self) -> dict[str, bool]:
        """Return the alt toggles merged over the defaults.

        Raises
        ------
        ValueError
            If a toggle name is not recognized.

        Examples
        --------
        >>> ParserConfiguration(alt_intervals={"fifth_sharp": True}).get_alt_intervals()["fifth_sharp"]
        True
        """
        alt_intervals = dict(self.alt_intervals or {})
        unknown = sorted(set(alt_intervals) - set(DEFAULT_ALT_INTERVALS))
        if unknown:
            msg = f"Unknown alt intervals: {', '.join(unknown)}"
            raise ValueError(msg)
        return {**DEFAULT_ALT_INTERVALS, **alt_intervals}

    def get_notation_systems(self) -> tuple[str, ...]:
        """Return the notation systems to try, validated.

        Raises
        ------
        ValueError
            If a notation system is not recognized.
        """
        if self.notation_systems is None:
            return NOTATION_SYSTEMS
        for system in self.notation_systems:
            if system not in NOTATION_SYSTEMS:
                msg = f"Unknown notation system: {system}"
                raise ValueError(msg)
        return tuple(self.notation_systems)


@dataclass(frozen=True)
class RendererConfiguration:
    """Options of the rendering pipeline.

    Parameters
    ----------
    use_short_namings : bool
        Use short descriptor namings ("M7" instead of "ma7", "°" instead of "dim").
    simplify : str
        "none", "core" or "max"; any other value behaves as "none".
    transpose_value : int
        Signed number of semitones to transpose by.
    harmonize_accidentals : bool
        Respell root and bass notes with sharps, or with flats when ``use_flats``.
    use_flats : bool
        Prefer flats over sharps when a note has to be respelled.
    notation_system : str
        "english", "german", "latin", or "auto" for the system of the input symbol.
    printer : str
        "text" or "raw"; any other value falls back to "text".
    custom_filters : Sequence[ChordFilter]
        Chord -> Chord | None callables run after the built-in filters.
    """

    use_short_namings: bool = False
    simplify: str = "none"
    transpose_value: int = 0
    harmonize_accidentals: bool = False
    use_flats: bool = False
    notation_system: str = "english"
    printer: str = "text"
    custom_filters: Sequence[ChordFilter] = ()

    def get_simplify_level(self) -> str:
        """Return the simplify level, "none" when the value is not recognized."""
        return self.simplify if self.simplify in SIMPLIFY_LEVELS else "none"

    def get_printer(self) -> str:
        """Return the printer name, "text" when the value is not recognized."""
        return self.printer if self.printer in PRINTERS else "text"

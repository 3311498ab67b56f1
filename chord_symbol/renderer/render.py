"""Chord renderer factory.

Rendering runs an ordered chain of filters over a copy of a parsed chord:

    transpose -> convert notation system -> harmonize accidentals
        -> simplify -> short namings -> custom filters -> printer

Disabled stages are left out of the chain. The chord given by the caller
is never modified.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Sequence
from functools import partial
from typing import Any

from chord_symbol.config import ChordFilter, RendererConfiguration
from chord_symbol.helpers import chain
from chord_symbol.models import Chord
from chord_symbol.renderer.notation import convert_notation_system, resolve_notation_system
from chord_symbol.renderer.printers import print_raw, print_text
from chord_symbol.renderer.short_namings import shorten_namings
from chord_symbol.renderer.simplify import simplify_chord
from chord_symbol.renderer.transpose import harmonize_notes, transpose

logger = logging.getLogger(__name__)

RenderChord = Callable[[Any], "str | Chord | None"]


def chord_renderer_factory(
    configuration: RendererConfiguration | None = None,
    *,
    use_short_namings: bool = False,
    simplify: str = "none",
    transpose_value: int = 0,
    harmonize_accidentals: bool = False,
    use_flats: bool = False,
    notation_system: str = "english",
    printer: str = "text",
    custom_filters: Sequence[ChordFilter] = (),
) -> RenderChord:
    """Create a chord rendering function.

    Options can be given either as a ``RendererConfiguration`` or as
    keyword arguments, see ``RendererConfiguration`` for their meaning.

    Returns
    -------
    Callable[[Chord], str | Chord | None]
        The rendering function. It returns a symbol with the "text"
        printer, a Chord with the "raw" printer, and None when the chord is
        not valid, the notation system is unknown, or a custom filter
        stopped the chain.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> render = chord_renderer_factory(transpose_value=3, use_flats=True)
    >>> render(parse_chord("C/E"))
    'Eb/G'
    >>> chord_renderer_factory(use_short_namings=True)(parse_chord("Cm7"))
    'Cm7'
    """
    if configuration is None:
        configuration = RendererConfiguration(
            use_short_namings=use_short_namings,
            simplify=simplify,
            transpose_value=transpose_value,
            harmonize_accidentals=harmonize_accidentals,
            use_flats=use_flats,
            notation_system=notation_system,
            printer=printer,
            custom_filters=tuple(custom_filters),
        )

    simplify_level = configuration.get_simplify_level()
    printer_name = configuration.get_printer()

    def render_chord(chord: Any) -> str | Chord | None:
        if not isinstance(chord, Chord) or not chord.is_valid:
            logger.debug("Cannot render %r, it is not a valid chord", chord)
            return None

        target_system = resolve_notation_system(configuration.notation_system, chord)
        if target_system is None:
            return None

        filters: list[Callable[[Any], Any]] = [
            partial(transpose, configuration.transpose_value, configuration.use_flats),
            partial(convert_notation_system, target_system),
        ]
        if configuration.harmonize_accidentals:
            filters.append(partial(harmonize_notes, configuration.use_flats, target_system))
        if simplify_level != "none":
            filters.append(partial(simplify_chord, simplify_level, target_system))
        if configuration.use_short_namings:
            filters.append(shorten_namings)
        filters.extend(configuration.custom_filters)

        if printer_name == "raw":
            filters.append(partial(print_raw, target_system))
        else:
            filters.append(print_text)

        return chain(filters, copy.deepcopy(chord))

    return render_chord


def render_chord(chord: Chord, **options) -> str | Chord | None:
    """Render a single parsed chord.

    Parameters
    ----------
    chord : Chord
        A chord returned by the parser.
    **options
        Renderer options, see ``chord_renderer_factory``.

    Returns
    -------
    str | Chord | None
        The rendered chord.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> render_chord(parse_chord("B"), notation_system="german")
    'H'
    """
    return chord_renderer_factory(**options)(chord)

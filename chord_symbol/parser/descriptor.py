"""Turn a chord descriptor into modifiers, then into intervals.

Modifiers are matched greedily from left to right against every known
spelling, longest spelling first. Any character left unmatched, as well as
any spelling repeating a modifier already seen, is reported.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import replace

from chord_symbol.dictionaries import modifiers as m
from chord_symbol.dictionaries.intervals import FORBIDDEN_COMBOS, get_semitones, sort_intervals
from chord_symbol.errors import InvalidIntervalsError, InvalidModifierError, NoSymbolFoundError
from chord_symbol.helpers import has_all
from chord_symbol.models import Chord, Intents, NormalizedChord

logger = logging.getLogger(__name__)

MODIFIERS_RE = re.compile("|".join(re.escape(variant) for variant in m.ALL_VARIANTS))

# alt toggle -> altered degree, in canonical order
ALT_TOGGLES: tuple[tuple[str, str], ...] = (
    ("fifth_flat", "b5"),
    ("fifth_sharp", "#5"),
    ("ninth_flat", "b9"),
    ("ninth_sharp", "#9"),
    ("eleventh_sharp", "#11"),
    ("thirteenth_flat", "b13"),
)

# add modifier -> degree it adds; "add7" also spells plain major sevenths
ADDED_DEGREES: tuple[tuple[str, str], ...] = (
    (m.ADD3, "3"),
    (m.ADD4, "4"),
    (m.ADD_B6, "b6"),
    (m.ADD6, "6"),
    (m.ADD9, "9"),
    (m.ADD11, "11"),
    (m.ADD13, "13"),
)


def parse_descriptor(alt_intervals: Mapping[str, bool], chord: Chord) -> Chord:
    """Parse the descriptor of a chord into its intervals.

    Parameters
    ----------
    alt_intervals : Mapping[str, bool]
        Toggles of the altered degrees held by "alt" chords.
    chord : Chord
        A chord with its ``input`` section written.

    Returns
    -------
    Chord
        The chord with its modifiers recorded, and its intervals, semitones,
        intents and suspension written in the ``normalized`` section.

    Raises
    ------
    NoSymbolFoundError
        If no modifier at all is recognized in a non-empty descriptor.
    InvalidModifierError
        If part of the descriptor is not recognized, or is a duplicate.
    InvalidIntervalsError
        If the descriptor yields intervals that cannot coexist, or adds a
        degree it already has.
    """
    modifiers: tuple[str, ...] = ()
    if chord.input.parsable_descriptor:
        modifiers = get_modifiers(chord)
    chord = replace(chord, input=replace(chord.input, modifiers=modifiers))

    intervals = get_intervals(modifiers, alt_intervals)
    check_intervals_consistency(chord, intervals)
    check_added_degrees(chord, modifiers, alt_intervals)

    is_alt = m.ALT in modifiers
    normalized = chord.normalized or NormalizedChord()
    normalized = replace(
        normalized,
        intervals=intervals,
        semitones=get_semitones(intervals),
        intents=Intents(
            major=is_alt or not _has_minor_intent(modifiers),
            eleventh=m.ELEVENTH in modifiers,
            alt=is_alt,
        ),
        is_suspended=m.SUS in modifiers and not is_alt,
    )
    return replace(chord, normalized=normalized)


def get_modifiers(chord: Chord) -> tuple[str, ...]:
    """Match the parsable descriptor against all modifier spellings.

    Raises
    ------
    NoSymbolFoundError
        If no modifier at all is recognized.
    InvalidModifierError
        If unrecognized or duplicated spellings remain.
    """
    parsable_descriptor = chord.input.parsable_descriptor
    modifiers: list[str] = []
    remaining: list[str] = []
    position = 0

    for match in MODIFIERS_RE.finditer(parsable_descriptor):
        remaining.append(parsable_descriptor[position : match.start()])
        position = match.end()

        new_modifiers = [modifier for modifier in m.SPELLINGS[match.group(0)] if modifier not in modifiers]
        if new_modifiers:
            modifiers.extend(new_modifiers)
        else:
            remaining.append(match.group(0))
    remaining.append(parsable_descriptor[position:])

    if not modifiers:
        raise NoSymbolFoundError(chord)

    remaining_chars = "".join(remaining).replace(" ", "")
    if remaining_chars:
        raise InvalidModifierError(chord, remaining_chars)

    return tuple(modifiers)


def get_intervals(modifiers: tuple[str, ...], alt_intervals: Mapping[str, bool]) -> tuple[str, ...]:
    """Derive the intervals of a chord from its modifiers.

    Examples
    --------
    >>> get_intervals(("mi", "seventh"), {})
    ('1', 'b3', '5', 'b7')
    >>> get_intervals(("alt",), {"ninth_sharp": True})
    ('1', '3', '5', 'b7', '#9')
    """
    if m.ALT in modifiers:
        return _get_alt_intervals(alt_intervals)
    if m.POWER in modifiers:
        return ("1", "5")
    if m.BASS in modifiers:
        return ("1",)

    return sort_intervals(
        [
            "1",
            *_get_third(modifiers),
            *_get_fourth(modifiers),
            *_get_fifths(modifiers),
            *_get_sixth(modifiers),
            *_get_sevenths(modifiers),
            *_get_ninths(modifiers),
            *_get_elevenths(modifiers),
            *_get_thirteenths(modifiers),
        ]
    )


def check_intervals_consistency(chord: Chord, intervals: tuple[str, ...]) -> None:
    """Reject interval combinations that cannot coexist.

    Raises
    ------
    InvalidIntervalsError
        On the first forbidden combination found.
    """
    for combo in FORBIDDEN_COMBOS:
        if has_all(intervals, combo):
            raise InvalidIntervalsError(chord, combo)


def check_added_degrees(chord: Chord, modifiers: tuple[str, ...], alt_intervals: Mapping[str, bool]) -> None:
    """Reject adds of a degree the rest of the descriptor already supplies.

    Raises
    ------
    InvalidIntervalsError
        On the first redundant add found.
    """
    if m.ALT in modifiers or m.POWER in modifiers or m.BASS in modifiers:
        return
    for modifier, degree in ADDED_DEGREES:
        if modifier not in modifiers:
            continue
        others = tuple(other for other in modifiers if other != modifier)
        if degree in get_intervals(others, alt_intervals):
            raise InvalidIntervalsError(chord, (degree, modifier))


def _get_alt_intervals(alt_intervals: Mapping[str, bool]) -> tuple[str, ...]:
    altered = [degree for toggle, degree in ALT_TOGGLES if alt_intervals.get(toggle)]
    fifths = [degree for degree in altered if degree in ("b5", "#5")] or ["5"]
    return sort_intervals(["1", "3", *fifths, "b7", *altered])


def _has_minor_intent(modifiers: tuple[str, ...]) -> bool:
    return m.MI in modifiers or m.DIM in modifiers or m.HALF_DIM in modifiers


def _has_extension(modifiers: tuple[str, ...]) -> bool:
    return m.NINTH in modifiers or m.ELEVENTH in modifiers or m.THIRTEENTH in modifiers


def _get_third(modifiers: tuple[str, ...]) -> list[str]:
    third = []
    if m.OMIT3 in modifiers or m.SUS in modifiers or m.SUS2 in modifiers:
        pass
    elif m.ELEVENTH in modifiers and not _has_minor_intent(modifiers):
        # a major eleventh chord has its 3rd replaced by the 11th
        pass
    elif _has_minor_intent(modifiers):
        third.append("b3")
    else:
        third.append("3")

    if m.ADD3 in modifiers:
        third.append("3")
    return third


def _get_fourth(modifiers: tuple[str, ...]) -> list[str]:
    if m.SUS in modifiers or m.ADD4 in modifiers:
        return ["4"]
    return []


def _get_fifths(modifiers: tuple[str, ...]) -> list[str]:
    if m.OMIT5 in modifiers:
        return []

    fifths = []
    if m.FIFTH_FLAT in modifiers or m.DIM in modifiers or m.HALF_DIM in modifiers:
        fifths.append("b5")
    if m.FIFTH_SHARP in modifiers or m.AUG in modifiers:
        fifths.append("#5")
    return fifths or ["5"]


def _get_sixth(modifiers: tuple[str, ...]) -> list[str]:
    sixth = []
    if m.ADD6 in modifiers or m.ADD69 in modifiers:
        sixth.append("6")
    if m.ADD_B6 in modifiers:
        sixth.append("b6")
    return sixth


def _get_sevenths(modifiers: tuple[str, ...]) -> list[str]:
    sevenths = []
    if m.ADD7 in modifiers:
        sevenths.append("7")

    if m.SEVENTH in modifiers or m.HALF_DIM in modifiers or _has_extension(modifiers):
        if m.DIM in modifiers and m.HALF_DIM not in modifiers:
            sevenths.append("bb7")
        elif m.MA in modifiers:
            sevenths.append("7")
        else:
            sevenths.append("b7")
    return sevenths


def _get_ninths(modifiers: tuple[str, ...]) -> list[str]:
    ninths = []
    if m.NINTH_FLAT in modifiers:
        ninths.append("b9")
    if m.NINTH_SHARP in modifiers:
        ninths.append("#9")

    if m.ADD9 in modifiers or m.ADD69 in modifiers or m.SUS2 in modifiers:
        ninths.append("9")
    elif _has_extension(modifiers) and not ninths:
        ninths.append("9")
    return ninths


def _get_elevenths(modifiers: tuple[str, ...]) -> list[str]:
    elevenths = []
    if m.ELEVENTH_SHARP in modifiers:
        elevenths.append("#11")

    if m.ADD11 in modifiers:
        elevenths.append("11")
    elif m.ELEVENTH_SHARP in modifiers:
        pass
    elif m.ELEVENTH in modifiers:
        elevenths.append("11")
    elif m.THIRTEENTH in modifiers and _has_minor_intent(modifiers):
        elevenths.append("11")
    return elevenths


def _get_thirteenths(modifiers: tuple[str, ...]) -> list[str]:
    thirteenths = []
    if m.THIRTEENTH_FLAT in modifiers:
        thirteenths.append("b13")

    if m.ADD13 in modifiers:
        thirteenths.append("13")
    elif m.THIRTEENTH in modifiers and not thirteenths:
        thirteenths.append("13")
    return thirteenths

"""Split a chord symbol into root note, descriptor and bass note.

Root and bass notes are matched against the spellings of one notation
system at a time, longest spelling first, so that "Sol" wins over "So..."
and "Reb" over "Re". Whatever sits between the root note and an optional
"/bass" suffix is the descriptor.
"""

from __future__ import annotations

import re
from dataclasses import replace
from functools import lru_cache

from chord_symbol.dictionaries.notes import VARIANTS_TO_NOTES
from chord_symbol.errors import NoSymbolFoundError
from chord_symbol.models import Chord, ChordInput

# Uppercase letters, except M which means "major"
UPPERCASE_EXCEPT_M_RE = re.compile(r"[A-LN-Z]+")
PARENTHESIS_RE = re.compile(r"\((.*?)\)")

VERBS: tuple[str, ...] = ("add", "omit", "no")

# Spaces that keep adjacent modifiers from being read as a longer one
DISAMBIGUATORS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(7?dim)(alt|add)"), r"\1 \2"),
    (re.compile(r"([mM])(alt|add)"), r"\1 \2"),
    (re.compile(r"i(no[35])"), r"i \1"),
    (re.compile(r"([b♭#♯]9)6"), r"\1 6"),
    (re.compile(r"(9/?6)"), r" \1"),
)


@lru_cache(maxsize=None)
def _symbol_regex(notation_system: str) -> re.Pattern[str]:
    """Build the root/descriptor/bass regex of a notation system."""
    variants = sorted(VARIANTS_TO_NOTES[notation_system], key=len, reverse=True)
    notes = "|".join(re.escape(variant) for variant in variants)
    return re.compile(rf"^({notes})(.*?)(/({notes}))?$")


def init_chord(symbol: str) -> Chord:
    """Create the chord record of a symbol, with only the symbol set."""
    return Chord(input=ChordInput(symbol=symbol))


def parse_base(notation_system: str, chord: Chord) -> Chord:
    """Isolate root note, bass note and descriptor.

    Parameters
    ----------
    notation_system : str
        The notation system whose spellings are matched.
    chord : Chord
        A chord holding only its symbol.

    Returns
    -------
    Chord
        The chord with its ``input`` section written.

    Raises
    ------
    NoSymbolFoundError
        If the symbol does not start with a known note.

    Examples
    --------
    >>> chord = parse_base("latin", init_chord("DoMaj7/Mi"))
    >>> chord.input.root_note, chord.input.descriptor, chord.input.bass_note
    ('Do', 'Maj7', 'Mi')
    """
    symbol = chord.input.symbol
    match = _symbol_regex(notation_system).match(symbol)
    if match is None:
        raise NoSymbolFoundError(chord)

    root_note, descriptor, _, bass_note = match.groups()
    chord_input = replace(
        chord.input,
        root_note=root_note,
        bass_note=bass_note,
        descriptor=descriptor,
        parsable_descriptor=get_parsable_descriptor(descriptor),
        notation_system=notation_system,
    )
    return replace(chord, input=chord_input)


def get_parsable_descriptor(descriptor: str) -> str:
    """Clean a descriptor up so that it can be matched against modifiers.

    Examples
    --------
    >>> get_parsable_descriptor("Maj7")
    'Maj7'
    >>> get_parsable_descriptor("madd9")
    'm add9'
    >>> get_parsable_descriptor("7(b9,13)")
    '7 b9 13 '
    """
    descriptor = _to_lower_case_except_major_m(descriptor)
    descriptor = descriptor.replace(" ", "")
    descriptor = _add_disambiguators(descriptor)
    return _add_missing_verbs(descriptor)


def _to_lower_case_except_major_m(descriptor: str) -> str:
    descriptor = UPPERCASE_EXCEPT_M_RE.sub(lambda match: match.group(0).lower(), descriptor)
    return descriptor.replace("oMit", "omit").replace("diM", "dim").replace("augMented", "augmented")


def _add_disambiguators(descriptor: str) -> str:
    for pattern, replacement in DISAMBIGUATORS:
        descriptor = pattern.sub(replacement, descriptor)
    return descriptor


def _add_missing_verbs(descriptor: str) -> str:
    """Unwrap parenthesized lists, repeating the last verb on each item.

    "(add9,11)" becomes " add9 add11 ", "(b5,#9)" becomes " b5 #9 ".
    """

    def with_verbs(match: re.Match[str]) -> str:
        tokens: list[str] = []
        current_verb = ""
        for token in match.group(1).split(","):
            verb = next((verb for verb in VERBS if token.startswith(verb)), None)
            if verb is None:
                tokens.append(current_verb + token)
            else:
                current_verb = verb
                tokens.append(token)
        return " " + " ".join(tokens) + " "

    return PARENTHESIS_RE.sub(with_verbs, descriptor)

"""Note spellings for every supported notation system.

Canonical notes are spelled the english way ("C", "C#", "Db", ...). Each
notation system maps every canonical note to the spellings it accepts; the
first spelling of each list is the one used when rendering.
"""

from __future__ import annotations

A = "A"
A_SHARP = "A#"
B_FLAT = "Bb"
B = "B"
C = "C"
C_SHARP = "C#"
D_FLAT = "Db"
D = "D"
D_SHARP = "D#"
E_FLAT = "Eb"
E = "E"
F = "F"
F_SHARP = "F#"
G_FLAT = "Gb"
G = "G"
G_SHARP = "G#"
A_FLAT = "Ab"

ENGLISH = "english"
GERMAN = "german"
LATIN = "latin"

NOTATION_SYSTEMS: tuple[str, ...] = (ENGLISH, GERMAN, LATIN)

SHARPS: tuple[str, ...] = (C, C_SHARP, D, D_SHARP, E, F, F_SHARP, G, G_SHARP, A, A_SHARP, B)
FLATS: tuple[str, ...] = (C, D_FLAT, D, E_FLAT, E, F, G_FLAT, G, A_FLAT, A, B_FLAT, B)

NOTE_TO_SEMITONE: dict[str, int] = {
    **{note: index for index, note in enumerate(SHARPS)},
    **{note: index for index, note in enumerate(FLATS)},
}

NOTE_SPELLINGS: dict[str, dict[str, tuple[str, ...]]] = {
    ENGLISH: {
        A: ("A",),
        A_SHARP: ("A#", "A♯"),
        B_FLAT: ("Bb", "B♭"),
        B: ("B",),
        C: ("C",),
        C_SHARP: ("C#", "C♯"),
        D_FLAT: ("Db", "D♭"),
        D: ("D",),
        D_SHARP: ("D#", "D♯"),
        E_FLAT: ("Eb", "E♭"),
        E: ("E",),
        F: ("F",),
        F_SHARP: ("F#", "F♯"),
        G_FLAT: ("Gb", "G♭"),
        G: ("G",),
        G_SHARP: ("G#", "G♯"),
        A_FLAT: ("Ab", "A♭"),
    },
    GERMAN: {
        A: ("A",),
        A_SHARP: ("Ais",),
        B_FLAT: ("Hes", "B"),
        B: ("H",),
        C: ("C",),
        C_SHARP: ("Cis",),
        D_FLAT: ("Des",),
        D: ("D",),
        D_SHARP: ("Dis",),
        E_FLAT: ("Es",),
        E: ("E",),
        F: ("F",),
        F_SHARP: ("Fis",),
        G_FLAT: ("Ges",),
        G: ("G",),
        G_SHARP: ("Gis",),
        A_FLAT: ("As",),
    },
    LATIN: {
        A: ("La",),
        A_SHARP: ("La#", "La♯"),
        B_FLAT: ("Sib", "Si♭"),
        B: ("Si",),
        C: ("Do",),
        C_SHARP: ("Do#", "Do♯"),
        D_FLAT: ("Reb", "Réb", "Re♭", "Ré♭"),
        D: ("Re", "Ré"),
        D_SHARP: ("Re#", "Ré#", "Re♯", "Ré♯"),
        E_FLAT: ("Mib", "Mi♭"),
        E: ("Mi",),
        F: ("Fa",),
        F_SHARP: ("Fa#", "Fa♯"),
        G_FLAT: ("Solb", "Sol♭"),
        G: ("Sol",),
        G_SHARP: ("Sol#", "Sol♯"),
        A_FLAT: ("Lab", "La♭"),
    },
}

# Spelling -> canonical note, per notation system
VARIANTS_TO_NOTES: dict[str, dict[str, str]] = {
    system: {variant: note for note, variants in spellings.items() for variant in variants}
    for system, spellings in NOTE_SPELLINGS.items()
}

ALL_VARIANTS: tuple[str, ...] = tuple(
    dict.fromkeys(variant for variants in VARIANTS_TO_NOTES.values() for variant in variants)
)


def spell_note(note: str, notation_system: str) -> str:
    """Spell a canonical note in the given notation system.

    Parameters
    ----------
    note : str
        Canonical (english) note name, e.g. "Bb".
    notation_system : str
        One of ``NOTATION_SYSTEMS``.

    Returns
    -------
    str
        The rendering spelling of the note in that system.

    Raises
    ------
    ValueError
        If the note or the notation system is not recognized.

    Examples
    --------
    >>> spell_note("Bb", "german")
    'Hes'
    >>> spell_note("A", "latin")
    'La'
    """
    if notation_system not in NOTE_SPELLINGS:
        msg = f"Unknown notation system: {notation_system}"
        raise ValueError(msg)
    spellings = NOTE_SPELLINGS[notation_system]
    if note not in spellings:
        msg = f"Unknown note: {note}"
        raise ValueError(msg)
    return spellings[note][0]

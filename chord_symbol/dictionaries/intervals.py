"""Scale degrees, their semitone values and chord quality codes."""

from __future__ import annotations

# Canonical ordering of every scale degree a chord can hold
INTERVALS: tuple[str, ...] = (
    "1",
    "b3",
    "3",
    "4",
    "b5",
    "5",
    "#5",
    "b6",
    "6",
    "bb7",
    "b7",
    "7",
    "b9",
    "9",
    "#9",
    "11",
    "#11",
    "b13",
    "13",
)

# Scale degree -> semitones from the root, folded into 0..11
INTERVAL_TO_SEMITONES: dict[str, int] = {
    "1": 0,
    "b3": 3,
    "3": 4,
    "4": 5,
    "b5": 6,
    "5": 7,
    "#5": 8,
    "b6": 8,
    "6": 9,
    "bb7": 9,
    "b7": 10,
    "7": 11,
    "b9": 1,
    "9": 2,
    "#9": 3,
    "11": 5,
    "#11": 6,
    "b13": 8,
    "13": 9,
}

# Degrees that can never appear together in the same chord
FORBIDDEN_COMBOS: tuple[tuple[str, str], ...] = (
    ("b3", "3"),
    ("4", "11"),
    ("b7", "7"),
    ("b9", "9"),
    ("#9", "9"),
    ("11", "#11"),
    ("b13", "13"),
)

# Quality codes
MA = "major"
MA6 = "major6"
MA7 = "major7"
DOM7 = "dominant7"
MI = "minor"
MI6 = "minor6"
MI7 = "minor7"
MI_MA7 = "minorMajor7"
AUG = "aug"
DIM = "dim"
DIM7 = "dim7"
POWER = "power"
BASS = "bass"

# Intervals defining each quality; longer definitions are tried first,
# ties are resolved by the order of this table: sevenths before sixths, so
# that "C7(add6)" stays a seventh chord.
QUALITY_INTERVALS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (MI, ("b3",)),
    (MI_MA7, ("b3", "7")),
    (MI7, ("b3", "b7")),
    (MI6, ("b3", "6")),
    (MA, ("3",)),
    (MA7, ("3", "7")),
    (DOM7, ("3", "b7")),
    (MA6, ("3", "6")),
    (AUG, ("3", "#5")),
    (DIM, ("b3", "b5")),
    (DIM7, ("b3", "b5", "bb7")),
)

# Intervals that count as alterations (rather than adds) for each quality
QUALITY_ALTERATIONS: dict[str, tuple[str, ...]] = {
    MA: ("b5", "#5", "#11", "b13"),
    MA6: ("b5", "#5", "#11", "b13"),
    MA7: ("b5", "#5", "#11", "b13"),
    DOM7: ("b5", "#5", "b9", "#9", "#11", "b13"),
    MI: ("b5", "#5"),
    MI6: ("b5", "#5"),
    MI7: ("b5", "#5"),
    MI_MA7: ("b5", "#5"),
    AUG: ("b5",),
    DIM: ("#5",),
    DIM7: ("#5",),
}


def sort_intervals(intervals: set[str] | list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Deduplicate intervals and sort them in canonical order.

    Examples
    --------
    >>> sort_intervals(["b7", "3", "1", "5", "3"])
    ('1', '3', '5', 'b7')
    """
    return tuple(sorted(set(intervals), key=INTERVALS.index))


def get_semitones(intervals: tuple[str, ...]) -> tuple[int, ...]:
    """Map scale degrees to semitones, index-aligned with the input.

    Examples
    --------
    >>> get_semitones(("1", "3", "b5", "b7", "b9"))
    (0, 4, 6, 10, 1)
    """
    return tuple(INTERVAL_TO_SEMITONES[interval] for interval in intervals)

"""Chord descriptor modifiers and all their known spellings.

A modifier is one elementary instruction found in a chord descriptor
("minor", "seventh", "flat fifth", "add 9", ...). Several spellings usually
map to the same modifier, and a few spellings stand for more than one
modifier at once ("^" means major *and* added major seventh).
"""

from __future__ import annotations

# Qualities
MA = "ma"
MI = "mi"
DIM = "dim"
HALF_DIM = "halfDim"
AUG = "aug"
SEVENTH = "seventh"

# Suspensions
SUS = "sus"
SUS2 = "sus2"

# Extensions
NINTH = "ninth"
ELEVENTH = "eleventh"
THIRTEENTH = "thirteenth"

# Alterations
FIFTH_FLAT = "b5"
FIFTH_SHARP = "#5"
NINTH_FLAT = "b9"
NINTH_SHARP = "#9"
ELEVENTH_SHARP = "#11"
THIRTEENTH_FLAT = "b13"

# Added intervals
ADD3 = "add3"
ADD4 = "add4"
ADD_B6 = "addb6"
ADD6 = "add6"
ADD69 = "add69"
ADD7 = "add7"
ADD9 = "add9"
ADD11 = "add11"
ADD13 = "add13"

# Special
BASS = "bass"
OMIT3 = "omit3"
OMIT5 = "omit5"
POWER = "power"
ALT = "alt"

MAJOR_SPELLINGS: dict[str, tuple[str, ...]] = {
    "^": (MA, ADD7),
    "Δ": (MA, ADD7),
    "M": (MA,),
    "Ma": (MA,),
    "Maj": (MA,),
    "Major": (MA,),
    "ma": (MA,),
    "maj": (MA,),
    "major": (MA,),
}

# "maj7", "M7", "^7"... and "addmaj7", "addM7"...
MAJOR_SEVENTH_SPELLINGS: dict[str, tuple[str, ...]] = {
    **{f"{spelling}7": (ADD7,) for spelling in MAJOR_SPELLINGS},
    **{f"add{spelling}7": (ADD7,) for spelling in MAJOR_SPELLINGS},
}

SPELLINGS: dict[str, tuple[str, ...]] = {
    **MAJOR_SPELLINGS,
    **MAJOR_SEVENTH_SPELLINGS,
    # minor
    "-": (MI,),
    "m": (MI,),
    "Mi": (MI,),
    "Min": (MI,),
    "Minor": (MI,),
    "mi": (MI,),
    "min": (MI,),
    "minor": (MI,),
    # diminished / augmented
    "°": (DIM,),
    "o": (DIM,),
    "dim": (DIM,),
    "dim.": (DIM,),
    "diminished": (DIM,),
    "ø": (HALF_DIM,),
    "Ø": (HALF_DIM,),
    "h": (HALF_DIM,),
    "+": (AUG,),
    "aug": (AUG,),
    "augmented": (AUG,),
    # seventh
    "7": (SEVENTH,),
    # suspended
    "4": (SUS,),
    "sus": (SUS,),
    "sus4": (SUS,),
    "suspended": (SUS,),
    "suspended4": (SUS,),
    "sus2": (SUS2,),
    "suspended2": (SUS2,),
    # extensions
    "9": (NINTH,),
    "11": (ELEVENTH,),
    "13": (THIRTEENTH,),
    # alterations
    "b5": (FIFTH_FLAT,),
    "♭5": (FIFTH_FLAT,),
    "-5": (FIFTH_FLAT,),
    "#5": (FIFTH_SHARP,),
    "♯5": (FIFTH_SHARP,),
    "+5": (FIFTH_SHARP,),
    "b9": (NINTH_FLAT,),
    "♭9": (NINTH_FLAT,),
    "-9": (NINTH_FLAT,),
    "addb9": (NINTH_FLAT,),
    "add♭9": (NINTH_FLAT,),
    "#9": (NINTH_SHARP,),
    "♯9": (NINTH_SHARP,),
    "+9": (NINTH_SHARP,),
    "add#9": (NINTH_SHARP,),
    "add♯9": (NINTH_SHARP,),
    "#11": (ELEVENTH_SHARP,),
    "♯11": (ELEVENTH_SHARP,),
    "+11": (ELEVENTH_SHARP,),
    "add#11": (ELEVENTH_SHARP,),
    "add♯11": (ELEVENTH_SHARP,),
    "b13": (THIRTEENTH_FLAT,),
    "♭13": (THIRTEENTH_FLAT,),
    "addb13": (THIRTEENTH_FLAT,),
    "add♭13": (THIRTEENTH_FLAT,),
    # added
    "2": (ADD9,),
    "add2": (ADD9,),
    "add3": (ADD3,),
    "add4": (ADD4,),
    "b6": (ADD_B6,),
    "addb6": (ADD_B6,),
    "6": (ADD6,),
    "add6": (ADD6,),
    "6/9": (ADD69,),
    "69": (ADD69,),
    "96": (ADD69,),
    "9/6": (ADD69,),
    "add9": (ADD9,),
    "add11": (ADD11,),
    "add13": (ADD13,),
    # special
    "bass": (BASS,),
    "omit3": (OMIT3,),
    "no3": (OMIT3,),
    "omit5": (OMIT5,),
    "no5": (OMIT5,),
    "5": (POWER,),
    "alt": (ALT,),
    "alt.": (ALT,),
    "altered": (ALT,),
}

# Longest first, so that a spelling never shadows a longer one it prefixes
ALL_VARIANTS: tuple[str, ...] = tuple(sorted(SPELLINGS, key=len, reverse=True))

"""
Static key tables for 12-tone equal temperament.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from enum import Enum
from typing import Dict, Tuple


class KeyColor(Enum):
    """Piano key color."""
    WHITE = "white"
    BLACK = "black"


# (name, color) indexed by semitone in octave
KEYS_IN_OCTAVE: Tuple[Tuple[str, KeyColor], ...] = (
    ("C", KeyColor.WHITE),
    ("C#", KeyColor.BLACK),
    ("D", KeyColor.WHITE),
    ("D#", KeyColor.BLACK),
    ("E", KeyColor.WHITE),
    ("F", KeyColor.WHITE),
    ("F#", KeyColor.BLACK),
    ("G", KeyColor.WHITE),
    ("G#", KeyColor.BLACK),
    ("A", KeyColor.WHITE),
    ("A#", KeyColor.BLACK),
    ("B", KeyColor.WHITE),
)

# Spelling -> semitone in octave. Sharps and flats alias the same key.
NAME_IN_OCTAVE: Dict[str, int] = {
    "C": 0, "C#": 1, "Db": 1,
    "D": 2, "D#": 3, "Eb": 3,
    "E": 4,
    "F": 5, "F#": 6, "Gb": 6,
    "G": 7, "G#": 8, "Ab": 8,
    "A": 9, "A#": 10, "Bb": 10,
    "B": 11,
}

# Movable-do syllables, empty on black keys
SOLFEGES: Tuple[str, ...] = (
    "do", "", "re", "", "mi", "fa", "", "sol", "", "la", "", "ti",
)

# Numbered (jianpu) notation, empty on black keys
NUMBERED_NOTATIONS: Tuple[str, ...] = (
    "1", "", "2", "", "3", "4", "", "5", "", "6", "", "7",
)

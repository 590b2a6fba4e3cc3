"""
Tone number <-> key name conversion.

Names are only synthesized under 12-tone equal temperament. Every other
division count (including 0, the custom-tuning sentinel) renders and parses
plain tone numbers.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from tonegrid.keys import (
    KeyColor,
    KEYS_IN_OCTAVE,
    NAME_IN_OCTAVE,
    NUMBERED_NOTATIONS,
    SOLFEGES,
)

STANDARD_TEMPERAMENT = 12


def tone_to_name(tone: int, equal_temperament: int = STANDARD_TEMPERAMENT) -> str:
    """
    Render a tone number as a key name.
    
    Args:
        tone: Tone number (60 = C4 in 12-ET)
        equal_temperament: Divisions per octave
    
    Returns:
        "C4"-style name in 12-ET ("" for negative tones), otherwise
        the tone number as a string.
    
    Example:
        >>> tone_to_name(60)
        'C4'
        >>> tone_to_name(0)
        'C-1'
        >>> tone_to_name(60, 19)
        '60'
    """
    if equal_temperament == STANDARD_TEMPERAMENT:
        if tone < 0:
            return ""
        return KEYS_IN_OCTAVE[tone % 12][0] + str(tone // 12 - 1)
    return str(tone)


def name_to_tone(name: str, equal_temperament: int = STANDARD_TEMPERAMENT) -> int:
    """
    Parse a key name back into a tone number.
    
    In 12-ET the name is a one or two character spelling ("C", "C#", "Db")
    followed by an integer octave. Otherwise the name must be a plain
    integer.
    
    Args:
        name: Key name or tone number string
        equal_temperament: Divisions per octave
    
    Returns:
        Tone number, or -1 if the name cannot be parsed
    
    Example:
        >>> name_to_tone("A4")
        69
        >>> name_to_tone("Db-1")
        1
        >>> name_to_tone("H4")
        -1
    """
    # int() would accept digit separators such as "C4_0"
    if "_" in name:
        return -1
    if equal_temperament == STANDARD_TEMPERAMENT:
        if len(name) < 2:
            return -1
        spelling = name[:2] if name[1] in ("#", "b") else name[:1]
        try:
            octave = int(name[len(spelling):])
        except ValueError:
            return -1
        in_octave = NAME_IN_OCTAVE.get(spelling)
        if in_octave is None:
            return -1
        return 12 * (octave + 1) + in_octave
    try:
        return int(name)
    except ValueError:
        return -1


def is_black_key(tone: int, equal_temperament: int = STANDARD_TEMPERAMENT) -> bool:
    """True for sharps/flats in 12-ET. Always False in other temperaments."""
    if equal_temperament == STANDARD_TEMPERAMENT:
        return KEYS_IN_OCTAVE[tone % 12][1] == KeyColor.BLACK
    return False


def is_center_key(tone: int, equal_temperament: int = STANDARD_TEMPERAMENT) -> bool:
    """
    True if the tone is the first step of an octave (C in 12-ET).
    
    A non-positive division count (custom tuning) has no octave grid,
    so no tone is a center key.
    """
    if equal_temperament <= 0:
        return False
    return tone % equal_temperament == 0


def tone_to_solfege(tone: int, equal_temperament: int = STANDARD_TEMPERAMENT) -> str:
    """Solfege syllable for a white key in 12-ET, else ""."""
    if equal_temperament != STANDARD_TEMPERAMENT or tone < 0:
        return ""
    return SOLFEGES[tone % 12]


def tone_to_numbered_notation(
    tone: int, equal_temperament: int = STANDARD_TEMPERAMENT
) -> str:
    """Numbered-notation digit for a white key in 12-ET, else ""."""
    if equal_temperament != STANDARD_TEMPERAMENT or tone < 0:
        return ""
    return NUMBERED_NOTATIONS[tone % 12]

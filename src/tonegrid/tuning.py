"""
Tone <-> frequency resolution.

A tone resolves through the project's frequency map when the call's
temperament parameters are exactly the project's and the tone falls
inside the map. Everything else uses closed-form equal temperament.

freq_to_tone() is formula-only, even when a map is installed: an
arbitrary table has no general inverse.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

import math
from typing import Optional

from tonegrid.logger import get_logger
from tonegrid.temperament import EqualTemperament
from tonegrid.tuning_config import (
    DEFAULT_CONCERT_PITCH,
    DEFAULT_CONCERT_PITCH_NOTE,
    DEFAULT_EQUAL_TEMPERAMENT,
    TuningConfig,
)

logger = get_logger(__name__)

# Fractions below this snap to the lower table entry
FRACTION_EPSILON = 1e-6


def _formula_temperament(equal_temperament: int) -> EqualTemperament:
    # Imported tunings (equal_temperament 0) are laid out on a 100-cent grid
    if equal_temperament < 1:
        return EqualTemperament(DEFAULT_EQUAL_TEMPERAMENT)
    return EqualTemperament(equal_temperament)


def _formula_freq(
    tone: float,
    equal_temperament: int,
    concert_pitch: float,
    concert_pitch_note: int,
) -> float:
    temperament = _formula_temperament(equal_temperament)
    return float(temperament.pitch_to_freq(tone, concert_pitch_note, concert_pitch))


def _active_map(
    config: Optional[TuningConfig],
    equal_temperament: int,
    concert_pitch: float,
    concert_pitch_note: int,
):
    if config is None or not config.has_map:
        return None
    if not config.matches(equal_temperament, concert_pitch, concert_pitch_note):
        return None
    return config.tone_to_freq_map


def tone_to_freq(
    tone: int,
    config: Optional[TuningConfig] = None,
    equal_temperament: int = DEFAULT_EQUAL_TEMPERAMENT,
    concert_pitch: float = DEFAULT_CONCERT_PITCH,
    concert_pitch_note: int = DEFAULT_CONCERT_PITCH_NOTE,
) -> float:
    """
    Frequency in Hz of an integer tone.

    Args:
        tone: Tone number
        config: The project's tuning snapshot, if any
        equal_temperament: Divisions per octave
        concert_pitch: Frequency of concert_pitch_note in Hz
        concert_pitch_note: Reference tone

    Returns:
        The map entry when the config applies and 0 <= tone < 128,
        otherwise concert_pitch * (2 ** (1 / equal_temperament)) **
        (tone - concert_pitch_note).

    Example:
        >>> tone_to_freq(69)
        440.0
        >>> tone_to_freq(69, imported, 0, imported.concert_pitch, 69)
        440.0
    """
    table = _active_map(config, equal_temperament, concert_pitch, concert_pitch_note)
    if table is not None and 0 <= tone < len(table):
        return float(table[tone])
    return _formula_freq(tone, equal_temperament, concert_pitch, concert_pitch_note)


def fractional_tone_to_freq(
    tone: float,
    config: Optional[TuningConfig] = None,
    equal_temperament: int = DEFAULT_EQUAL_TEMPERAMENT,
    concert_pitch: float = DEFAULT_CONCERT_PITCH,
    concert_pitch_note: int = DEFAULT_CONCERT_PITCH_NOTE,
) -> float:
    """
    Frequency in Hz of a fractional tone.

    Between two map entries the frequency is interpolated geometrically,
    f_lo * (f_hi / f_lo) ** frac, which keeps pitch spacing even in cents.
    A tone whose upper neighbour is outside the map, or whose neighbours
    are not both positive, falls back to the formula.

    Args:
        tone: Tone number, possibly fractional (pitch bends, vibrato)
        config: The project's tuning snapshot, if any
        equal_temperament: Divisions per octave
        concert_pitch: Frequency of concert_pitch_note in Hz
        concert_pitch_note: Reference tone

    Returns:
        Frequency in Hz
    """
    table = _active_map(config, equal_temperament, concert_pitch, concert_pitch_note)
    if table is not None and 0 <= tone < len(table) - 1:
        lo = int(math.floor(tone))
        frac = tone - lo
        if frac < FRACTION_EPSILON:
            return float(table[lo])
        f1 = float(table[lo])
        f2 = float(table[lo + 1])
        if f1 > 0 and f2 > 0:
            return f1 * (f2 / f1) ** frac
        logger.debug(
            "Non-positive map entries around tone %s (%s, %s), using formula",
            tone, f1, f2,
        )
    return _formula_freq(tone, equal_temperament, concert_pitch, concert_pitch_note)


def freq_to_tone(
    freq: float,
    equal_temperament: int = DEFAULT_EQUAL_TEMPERAMENT,
    concert_pitch: float = DEFAULT_CONCERT_PITCH,
    concert_pitch_note: int = DEFAULT_CONCERT_PITCH_NOTE,
) -> float:
    """
    Fractional tone of a frequency under equal temperament.

    This never consults a frequency map, so with a custom tuning installed
    freq_to_tone(tone_to_freq(t)) is not guaranteed to return t.

    Example:
        >>> freq_to_tone(440.0)
        69.0
        >>> freq_to_tone(880.0, 19)
        88.0
    """
    temperament = _formula_temperament(equal_temperament)
    return float(temperament.freq_to_pitch(freq, concert_pitch_note, concert_pitch))

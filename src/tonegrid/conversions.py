"""
Tempo, level and pan conversion utility functions.

Decibel conversions are vectorized and work with numpy arrays or scalars.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

# Ticks per quarter note
RESOLUTION = 480

MS_PER_MINUTE = 60.0 * 1000.0


def tempo_ms_to_tick(tempo: float, ms: float) -> float:
    """
    Convert milliseconds to ticks at a constant tempo.

    Args:
        tempo: Beats (quarter notes) per minute
        ms: Duration in milliseconds

    Returns:
        Duration in ticks (float, caller may want to round)

    Example:
        >>> tempo_ms_to_tick(120, 500)
        480.0
    """
    return (tempo * RESOLUTION * ms) / MS_PER_MINUTE


def tempo_tick_to_ms(tempo: float, tick: int) -> float:
    """
    Convert ticks to milliseconds at a constant tempo.

    Example:
        >>> tempo_tick_to_ms(120, 480)
        500.0
    """
    return (MS_PER_MINUTE * tick) / (tempo * RESOLUTION)


def linear_to_decibel(ratio: ArrayLike) -> np.ndarray:
    """
    Convert linear amplitude ratio to decibels.

    Uses the formula: dB = 20 * log10(ratio)

    Args:
        ratio: Linear amplitude ratio. Must be positive.
               1.0 = 0 dB, 2.0 ≈ 6.02 dB, 0.5 ≈ -6.02 dB

    Returns:
        Value in decibels

    Example:
        >>> linear_to_decibel(1.0)
        0.0
        >>> linear_to_decibel(10.0)
        20.0
    """
    ratio = np.asarray(ratio, dtype=np.float64)
    # Only non-positive input is floored, at -200 dB
    ratio = np.where(ratio > 0, ratio, 1e-10)
    return 20.0 * np.log10(ratio)


def decibel_to_linear(db: ArrayLike) -> np.ndarray:
    """
    Convert decibels to linear amplitude ratio.

    Uses the formula: ratio = 10^(dB / 20)

    Example:
        >>> decibel_to_linear(0.0)
        1.0
        >>> decibel_to_linear(-6.0)
        0.5011...
    """
    db = np.asarray(db, dtype=np.float64)
    return 10.0 ** (db / 20.0)


def pan_to_channel_volumes(pan: float) -> Tuple[float, float]:
    """
    Split a pan position into per-channel attenuation.

    Args:
        pan: -100 (hard left) to 100 (hard right)

    Returns:
        (left, right), each in [-1, 0]. Both are -1 at center; hard right
        raises left to 0 and hard left raises right to 0.

    Example:
        >>> pan_to_channel_volumes(0)
        (-1.0, -1.0)
        >>> pan_to_channel_volumes(100)
        (0.0, -1.0)
    """
    left = (max(pan, 0) - 100) / 100
    right = (min(pan, 0) + 100) / -100
    return float(left), float(right)

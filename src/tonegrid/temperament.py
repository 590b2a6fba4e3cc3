"""
Closed-form equal temperament.

This is the formula every tuning lookup falls back to when no frequency
table applies.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

import numpy as np
from numpy.typing import ArrayLike


class EqualTemperament:
    """
    Equal temperament with configurable divisions per octave.
    
    The octave is split into `divisions` equal logarithmic steps, so one
    step is a frequency ratio of 2 ** (1 / divisions). 12-ET is the
    standard; 1200-ET steps are cents.
    
    Args:
        divisions: Number of equal divisions per octave (default: 12)
    
    Example:
        >>> et12 = EqualTemperament(12)
        >>> et12.pitch_to_freq(69)  # A4
        440.0
        >>> et12.freq_to_pitch(880.0)
        81.0
        >>> EqualTemperament(1200).interval_to_ratio(700)  # cents
        1.4983...
    """
    
    def __init__(self, divisions: int = 12):
        if divisions < 1:
            raise ValueError(f"Divisions must be positive, got {divisions}")
        self._divisions = divisions
    
    @property
    def divisions(self) -> int:
        """Number of equal divisions per octave."""
        return self._divisions
    
    def pitch_to_freq(
        self,
        pitch: ArrayLike,
        reference_pitch: float = 69.0,
        reference_freq: float = 440.0
    ) -> np.ndarray:
        """
        Convert tone number(s) to frequency in Hz.
        
        Args:
            pitch: Tone number(s). Can be fractional.
            reference_pitch: Tone carrying the reference frequency
            reference_freq: Frequency of reference_pitch in Hz
        """
        pitch = np.asarray(pitch, dtype=np.float64)
        step = 2.0 ** (1.0 / self._divisions)
        return reference_freq * step ** (pitch - reference_pitch)
    
    def freq_to_pitch(
        self,
        freq: ArrayLike,
        reference_pitch: float = 69.0,
        reference_freq: float = 440.0
    ) -> np.ndarray:
        """Convert frequency in Hz to (fractional) tone number(s)."""
        freq = np.asarray(freq, dtype=np.float64)
        freq = np.where(freq > 0, freq, 1e-10)  # non-positive only
        return reference_pitch + self._divisions * np.log2(freq / reference_freq)
    
    def interval_to_ratio(self, interval: ArrayLike) -> np.ndarray:
        """Convert an interval in steps to a frequency ratio."""
        interval = np.asarray(interval, dtype=np.float64)
        return 2.0 ** (interval / self._divisions)
    
    def name(self) -> str:
        """Return name of this temperament."""
        return f"{self._divisions}-tone Equal Temperament ({self._divisions}-ET)"
    
    def __repr__(self) -> str:
        return f"EqualTemperament(divisions={self._divisions})"

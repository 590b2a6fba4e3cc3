"""
Tuning configuration snapshots and the reversible change that installs them.

A TuningConfig is immutable. The project that owns it swaps the whole
snapshot in one assignment, so readers never see a half-applied tuning.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from tonegrid.config import handle_error
from tonegrid.logger import get_logger

logger = get_logger(__name__)

# Number of absolute tones covered by a frequency map
TONE_COUNT = 128

DEFAULT_EQUAL_TEMPERAMENT = 12
DEFAULT_CONCERT_PITCH = 440.0
DEFAULT_CONCERT_PITCH_NOTE = 69

# equal_temperament value marking an imported, non-equal tuning
CUSTOM_TEMPERAMENT = 0


class TuningConfig:
    """
    Read-only tuning parameters of a project.
    
    Args:
        equal_temperament: Divisions per octave. 12 enables key names;
            0 marks a custom (imported) tuning.
        concert_pitch: Frequency in Hz of concert_pitch_note
        concert_pitch_note: Reference tone number
        tone_to_freq_map: Optional 128 frequencies, one per tone. Copied
            and stored read-only. Any other length is an error; in
            LENIENT mode the map is dropped and the formula is used.
    
    Example:
        >>> cfg = TuningConfig.default()
        >>> cfg.has_map
        False
        >>> cfg.matches(12, 440.0, 69)
        True
    """
    
    def __init__(
        self,
        equal_temperament: int = DEFAULT_EQUAL_TEMPERAMENT,
        concert_pitch: float = DEFAULT_CONCERT_PITCH,
        concert_pitch_note: int = DEFAULT_CONCERT_PITCH_NOTE,
        tone_to_freq_map: Optional[ArrayLike] = None,
    ):
        self._equal_temperament = int(equal_temperament)
        self._concert_pitch = float(concert_pitch)
        self._concert_pitch_note = int(concert_pitch_note)
        self._tone_to_freq_map = self._freeze_map(tone_to_freq_map)
    
    @staticmethod
    def _freeze_map(tone_to_freq_map: Optional[ArrayLike]) -> Optional[np.ndarray]:
        if tone_to_freq_map is None:
            return None
        table = np.array(tone_to_freq_map, dtype=np.float64).ravel()
        if len(table) != TONE_COUNT:
            handle_error(
                f"Tone-to-frequency map must have {TONE_COUNT} entries, "
                f"got {len(table)}. Using formula instead.",
                exception_class=ValueError,
            )
            return None
        table.flags.writeable = False
        return table
    
    @classmethod
    def default(cls) -> TuningConfig:
        """12-ET, A4 = 440 Hz, no frequency map."""
        return cls()
    
    @property
    def equal_temperament(self) -> int:
        return self._equal_temperament
    
    @property
    def concert_pitch(self) -> float:
        return self._concert_pitch
    
    @property
    def concert_pitch_note(self) -> int:
        return self._concert_pitch_note
    
    @property
    def tone_to_freq_map(self) -> Optional[np.ndarray]:
        """The read-only frequency map, or None for formula tuning."""
        return self._tone_to_freq_map
    
    @property
    def has_map(self) -> bool:
        return self._tone_to_freq_map is not None
    
    def matches(
        self,
        equal_temperament: int,
        concert_pitch: float,
        concert_pitch_note: int,
    ) -> bool:
        """True if the given parameters are exactly this config's."""
        return (
            self._equal_temperament == equal_temperament
            and self._concert_pitch == concert_pitch
            and self._concert_pitch_note == concert_pitch_note
        )
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TuningConfig):
            return NotImplemented
        if not other.matches(
            self._equal_temperament, self._concert_pitch, self._concert_pitch_note
        ):
            return False
        if self._tone_to_freq_map is None or other._tone_to_freq_map is None:
            return self._tone_to_freq_map is other._tone_to_freq_map
        return bool(np.array_equal(self._tone_to_freq_map, other._tone_to_freq_map))
    
    def __hash__(self) -> int:
        return hash((
            self._equal_temperament,
            self._concert_pitch,
            self._concert_pitch_note,
            self.has_map,
        ))
    
    def __repr__(self) -> str:
        return (
            f"TuningConfig(equal_temperament={self._equal_temperament}, "
            f"concert_pitch={self._concert_pitch}, "
            f"concert_pitch_note={self._concert_pitch_note}, "
            f"has_map={self.has_map})"
        )


class TuningChange:
    """
    Reversible replacement of one tuning snapshot by another.
    
    execute() and unexecute() only hand back the snapshot to install;
    the owner of the project assigns it, which keeps the swap atomic.
    
    Example:
        >>> change = TuningChange(project.tuning, imported)
        >>> project.tuning = change.execute()
        >>> project.tuning = change.unexecute()  # undo
    """
    
    def __init__(self, old: TuningConfig, new: TuningConfig):
        self._old = old
        self._new = new
    
    @property
    def old(self) -> TuningConfig:
        return self._old
    
    @property
    def new(self) -> TuningConfig:
        return self._new
    
    def execute(self) -> TuningConfig:
        return self._new
    
    def unexecute(self) -> TuningConfig:
        return self._old
    
    def __str__(self) -> str:
        return "Configure project"
    
    def __repr__(self) -> str:
        return f"TuningChange(old={self._old!r}, new={self._new!r})"


def configure_tuning(
    current: TuningConfig,
    equal_temperament: int,
    concert_pitch: float,
    concert_pitch_note: int,
    tone_to_freq_map: Optional[ArrayLike] = None,
) -> Optional[TuningChange]:
    """
    Build the change that applies new tuning settings to a project.
    
    A supplied map (from a tuning import) is installed as-is. Without one
    the new snapshot has no map and tones resolve through the formula.
    
    Args:
        current: The snapshot currently installed
        equal_temperament: New divisions per octave
        concert_pitch: New reference frequency in Hz
        concert_pitch_note: New reference tone
        tone_to_freq_map: Optional new 128-entry frequency map
    
    Returns:
        A TuningChange, or None if nothing would change
    """
    if tone_to_freq_map is None and current.matches(
        equal_temperament, concert_pitch, concert_pitch_note
    ):
        return None
    new = TuningConfig(
        equal_temperament=equal_temperament,
        concert_pitch=concert_pitch,
        concert_pitch_note=concert_pitch_note,
        tone_to_freq_map=tone_to_freq_map,
    )
    logger.debug("Configuring tuning: %r -> %r", current, new)
    return TuningChange(current, new)

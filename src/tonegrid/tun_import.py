"""
Import of custom tunings from .tun-style text files.

The format is line oriented:

    ; comment
    basefreq = 8.1757989156
    note0 = 0
    note69 = 6900.0

Each `noteN` gives tone N's offset in cents above `basefreq`; tones
without an entry keep the 12-ET offset N * 100. Unknown keys and
malformed lines are skipped.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional, Union

import numpy as np

from tonegrid.errors import TuningImportError
from tonegrid.logger import get_logger
from tonegrid.temperament import EqualTemperament
from tonegrid.tuning_config import (
    CUSTOM_TEMPERAMENT,
    DEFAULT_CONCERT_PITCH,
    DEFAULT_CONCERT_PITCH_NOTE,
    TONE_COUNT,
    TuningConfig,
)

logger = get_logger(__name__)

COMMENT_PREFIX = ";"
NOTE_KEY_PREFIX = "note"
BASE_FREQ_KEY = "basefreq"

# basefreq value meaning "not given in the file"
NO_BASE_FREQ = -1.0

# Offsets are cents, i.e. steps of 1200-ET
_CENTS = EqualTemperament(1200)


def _parse_float(value: str) -> Optional[float]:
    # float() accepts digit separators, .tun readers do not
    if "_" in value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _parse_note_index(key: str) -> Optional[int]:
    digits = key[len(NOTE_KEY_PREFIX):]
    if "_" in digits:
        return None
    try:
        index = int(digits)
    except ValueError:
        return None
    if 0 <= index < TONE_COUNT:
        return index
    return None


def parse_tun(lines: Iterable[str]) -> TuningConfig:
    """
    Build a custom tuning from the lines of a .tun file.

    Without `basefreq` the tuning is anchored so tone 69 sounds at 440 Hz.
    With it, the concert pitch becomes basefreq raised by tone 69's offset.
    The result always has equal_temperament 0 (custom tuning) and
    concert_pitch_note 69.

    Args:
        lines: Text lines, with or without trailing newlines

    Returns:
        A TuningConfig carrying a 128-entry frequency map

    Raises:
        TuningImportError: If the input cannot be read as text lines

    Example:
        >>> cfg = parse_tun(["basefreq=220"])
        >>> float(cfg.tone_to_freq_map[12])
        440.0
    """
    cents = np.arange(TONE_COUNT, dtype=np.float64) * 100.0
    base_freq = NO_BASE_FREQ
    parsed_notes = 0

    try:
        for line in lines:
            if line.startswith(COMMENT_PREFIX) or not line.strip():
                continue
            if "=" not in line:
                continue
            parts = line.split("=")
            if len(parts) != 2:
                continue
            key = parts[0].strip()
            value = parts[1].strip()
            if key.startswith(NOTE_KEY_PREFIX):
                index = _parse_note_index(key)
                offset = _parse_float(value)
                if index is not None and offset is not None:
                    cents[index] = offset
                    parsed_notes += 1
            elif key == BASE_FREQ_KEY:
                freq = _parse_float(value)
                if freq is not None:
                    base_freq = freq
    except (AttributeError, TypeError) as exc:
        raise TuningImportError(f"Unreadable tuning line: {exc}") from exc

    concert_pitch_note = DEFAULT_CONCERT_PITCH_NOTE
    reference_ratio = float(_CENTS.interval_to_ratio(cents[concert_pitch_note]))
    if base_freq < 0:
        concert_pitch = DEFAULT_CONCERT_PITCH
        base_freq = concert_pitch / reference_ratio
    else:
        concert_pitch = base_freq * reference_ratio

    tone_to_freq_map = base_freq * _CENTS.interval_to_ratio(cents)
    logger.debug(
        "Parsed tuning: %d note offsets, basefreq %s Hz, concert pitch %s Hz",
        parsed_notes, base_freq, concert_pitch,
    )
    return TuningConfig(
        equal_temperament=CUSTOM_TEMPERAMENT,
        concert_pitch=concert_pitch,
        concert_pitch_note=concert_pitch_note,
        tone_to_freq_map=tone_to_freq_map,
    )


def load_tun(
    path: Union[str, Path],
    on_error: Optional[Callable[[Exception], None]] = None,
) -> Optional[TuningConfig]:
    """
    Read and parse a .tun file.

    The file is read as UTF-8 with an optional byte-order mark; bytes that
    do not decode are replaced rather than rejected.

    Failures never propagate: the error is logged and handed to `on_error`
    (e.g. to show a notification), and None is returned so the caller keeps
    its current tuning.

    Args:
        path: Path to the tuning file
        on_error: Optional callback receiving the exception

    Returns:
        The imported TuningConfig, or None if the import failed
    """
    try:
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            lines = f.read().splitlines()
        config = parse_tun(lines)
    except Exception as exc:
        logger.error("Failed to import tuning from %s: %s", path, exc)
        if on_error is not None:
            on_error(exc)
        return None
    logger.info("Imported tuning from %s", path)
    return config

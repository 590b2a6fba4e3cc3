"""
Error modes for tonegrid.

Some bad input has a sensible fallback (a frequency table of the wrong
length can be dropped so tones resolve through the formula); some does
not (a beat unit outside 2/4/8/16 has no zoom level). handle_error()
decides, per the current mode, whether the first kind raises or warns.
The second kind always raises.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from enum import Enum
from typing import Type, Optional
from tonegrid.logger import get_logger

logger = get_logger(__name__)


class ErrorMode(Enum):
    """
    How recoverable tuning and grid errors are reported.

    STRICT: raise (default, so a bad project setting is noticed at once)
    LENIENT: log a warning and let the caller fall back
    """
    STRICT = "strict"
    LENIENT = "lenient"


# Mode used when a call does not pass its own
DEFAULT_ERROR_MODE: ErrorMode = ErrorMode.STRICT


def set_error_mode(mode: ErrorMode) -> None:
    """Switch every tonegrid call that does not override it to `mode`."""
    global DEFAULT_ERROR_MODE
    DEFAULT_ERROR_MODE = mode


def get_error_mode() -> ErrorMode:
    return DEFAULT_ERROR_MODE


def handle_error(
    message: str,
    fatal: bool = False,
    error_mode: Optional[ErrorMode] = None,
    exception_class: Type[Exception] = RuntimeError,
) -> bool:
    """
    Report a bad tuning or grid parameter.

    Args:
        message: What was wrong, shown in the exception or the warning
        fatal: Raise even in LENIENT mode (no fallback exists)
        error_mode: Use this mode instead of the module default
        exception_class: Exception type raised (default: RuntimeError)

    Returns:
        True when the caller should apply its fallback

    Raises:
        exception_class: In STRICT mode, or whenever fatal is set

    Example:
        # TuningConfig: a short table raises, or is dropped in LENIENT mode
        if len(table) != TONE_COUNT:
            if handle_error("Bad table length.", exception_class=ValueError):
                table = None

        # get_zoom_ratio: no fallback for an unknown beat unit
        if beat_unit not in BEAT_UNIT_LEVELS:
            handle_error("Invalid beat unit.", fatal=True,
                         exception_class=InvalidParameterError)
    """
    mode = error_mode if error_mode is not None else DEFAULT_ERROR_MODE

    if fatal or mode == ErrorMode.STRICT:
        raise exception_class(message)
    logger.warning(message)
    return True

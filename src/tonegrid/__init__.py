"""
tonegrid - pitch, tuning, curve and timeline-grid math for piano-roll editors.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from tonegrid.config import ErrorMode, set_error_mode, get_error_mode, handle_error
from tonegrid.errors import TonegridError, InvalidParameterError, TuningImportError
from tonegrid.keys import (
    KeyColor,
    KEYS_IN_OCTAVE,
    NAME_IN_OCTAVE,
    SOLFEGES,
    NUMBERED_NOTATIONS,
)
from tonegrid.tone_codec import (
    tone_to_name,
    name_to_tone,
    is_black_key,
    is_center_key,
    tone_to_solfege,
    tone_to_numbered_notation,
)
from tonegrid.temperament import EqualTemperament
from tonegrid.tuning_config import (
    TONE_COUNT,
    CUSTOM_TEMPERAMENT,
    TuningConfig,
    TuningChange,
    configure_tuning,
)
from tonegrid.tuning import tone_to_freq, fractional_tone_to_freq, freq_to_tone
from tonegrid.tun_import import parse_tun, load_tun
from tonegrid.curves import (
    PitchPointShape,
    linear,
    linear_x,
    sin_easing_in,
    sin_easing_in_x,
    sin_easing_out,
    sin_easing_out_x,
    sin_easing_in_out,
    sin_easing_in_out_x,
    interpolate_shape,
    interpolate_shape_x,
)
from tonegrid.grid import ZOOM_RATIOS, get_snap_divs, get_snap_unit, get_zoom_ratio
from tonegrid.conversions import (
    RESOLUTION,
    tempo_ms_to_tick,
    tempo_tick_to_ms,
    decibel_to_linear,
    linear_to_decibel,
    pan_to_channel_volumes,
)
from tonegrid.logger import set_global_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ErrorMode",
    "set_error_mode",
    "get_error_mode",
    "handle_error",
    "set_global_logging",
    "get_logger",
    # Errors
    "TonegridError",
    "InvalidParameterError",
    "TuningImportError",
    # Keys and names
    "KeyColor",
    "KEYS_IN_OCTAVE",
    "NAME_IN_OCTAVE",
    "SOLFEGES",
    "NUMBERED_NOTATIONS",
    "tone_to_name",
    "name_to_tone",
    "is_black_key",
    "is_center_key",
    "tone_to_solfege",
    "tone_to_numbered_notation",
    # Tuning
    "EqualTemperament",
    "TONE_COUNT",
    "CUSTOM_TEMPERAMENT",
    "TuningConfig",
    "TuningChange",
    "configure_tuning",
    "tone_to_freq",
    "fractional_tone_to_freq",
    "freq_to_tone",
    "parse_tun",
    "load_tun",
    # Curves
    "PitchPointShape",
    "linear",
    "linear_x",
    "sin_easing_in",
    "sin_easing_in_x",
    "sin_easing_out",
    "sin_easing_out_x",
    "sin_easing_in_out",
    "sin_easing_in_out_x",
    "interpolate_shape",
    "interpolate_shape_x",
    # Grid
    "ZOOM_RATIOS",
    "get_snap_divs",
    "get_snap_unit",
    "get_zoom_ratio",
    # Conversions
    "RESOLUTION",
    "tempo_ms_to_tick",
    "tempo_tick_to_ms",
    "decibel_to_linear",
    "linear_to_decibel",
    "pan_to_channel_volumes",
]

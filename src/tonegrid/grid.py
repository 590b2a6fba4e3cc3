"""
Timeline grid planning: snap divisions and zoom levels.

A division `div` splits a whole note into `div` parts, so at `resolution`
ticks per quarter note one grid step is resolution * 4 // div ticks.
Straight divisions start at 4 (quarter notes), triplet divisions at 6.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from typing import List, Tuple

from tonegrid.config import handle_error
from tonegrid.errors import InvalidParameterError

STRAIGHT_DIV = 4
TRIPLET_DIV = 6

# Width of each grid level as a fraction of a quarter note's width
ZOOM_RATIOS: Tuple[float, ...] = (
    4.0, 2.0, 1.0, 1.0 / 2, 1.0 / 4, 1.0 / 8, 1.0 / 16, 1.0 / 32, 1.0 / 64,
)

# Beat unit -> index of its level in ZOOM_RATIOS
BEAT_UNIT_LEVELS = {2: 0, 4: 1, 8: 2, 16: 3}


def _check_resolution(resolution: int) -> None:
    if resolution <= 0:
        handle_error(
            f"Resolution must be positive, got {resolution}",
            fatal=True,
            exception_class=InvalidParameterError,
        )


def _division_chain(resolution: int, div: int) -> List[int]:
    ticks = resolution * 4 // div
    chain = [div]
    while ticks > 0 and ticks % 2 == 0:
        ticks //= 2
        div *= 2
        chain.append(div)
    return chain


def get_snap_divs(resolution: int) -> List[int]:
    """
    All snap divisions that land on whole ticks.

    Args:
        resolution: Ticks per quarter note

    Returns:
        The straight chain (4, 8, 16, ...) followed by the triplet chain
        (6, 12, 24, ...). Each chain doubles while the step stays even.

    Example:
        >>> get_snap_divs(480)
        [4, 8, 16, 32, 64, 128, 6, 12, 24, 48, 96, 192, 384]
    """
    _check_resolution(resolution)
    return _division_chain(resolution, STRAIGHT_DIV) + _division_chain(
        resolution, TRIPLET_DIV
    )


def get_snap_unit(
    resolution: int, min_ticks: float, triplet: bool = False
) -> Tuple[int, int]:
    """
    Finest snap step that is still at least min_ticks long.

    Args:
        resolution: Ticks per quarter note
        min_ticks: Shortest acceptable step, in ticks
        triplet: Use the triplet chain

    Returns:
        (ticks, div)

    Example:
        >>> get_snap_unit(480, 60)
        (60, 32)
    """
    _check_resolution(resolution)
    div = TRIPLET_DIV if triplet else STRAIGHT_DIV
    ticks = resolution * 4 // div
    while ticks > 0 and ticks % 2 == 0 and ticks // 2 >= min_ticks:
        ticks //= 2
        div *= 2
    return ticks, div


def _ratio_at(level: int) -> float:
    # Levels above the table keep doubling
    if level < 0:
        return ZOOM_RATIOS[0] * 2.0 ** -level
    return ZOOM_RATIOS[level]


def get_zoom_ratio(
    quarter_width: float,
    beats_per_bar: int,
    beat_unit: int,
    min_width: float,
) -> float:
    """
    Finest grid level whose cells are wider than min_width pixels.

    Args:
        quarter_width: Screen width of a quarter note
        beats_per_bar: Time signature numerator
        beat_unit: Time signature denominator, one of 2, 4, 8, 16
        min_width: Narrowest grid cell worth drawing

    Returns:
        Grid cell width as a multiple of a quarter note. When even a
        whole bar is too narrow, the bar length beats_per_bar / beat_unit * 4.

    Raises:
        InvalidParameterError: For any other beat unit
    """
    if beat_unit not in BEAT_UNIT_LEVELS:
        handle_error(
            f"Invalid beat unit: {beat_unit}",
            fatal=True,
            exception_class=InvalidParameterError,
        )
    level = BEAT_UNIT_LEVELS[beat_unit]
    if beats_per_bar % 4 == 0:
        level -= 1  # level below the bar is half a bar, not one beat

    if quarter_width * beats_per_bar * 4 <= min_width * beat_unit:
        return beats_per_bar / beat_unit * 4
    while level + 1 < len(ZOOM_RATIOS) and quarter_width * _ratio_at(level + 1) > min_width:
        level += 1
    return _ratio_at(level)

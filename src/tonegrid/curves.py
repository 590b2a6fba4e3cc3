"""
Shaped segment interpolation for pitch and automation curves.

Each shape maps a segment (x0, y0) -> (x1, y1) forward (value at x) and
inverse (x at value). Forward evaluators return y1 on segments narrower
than DEGENERATE_WIDTH. Inverse evaluators assume a segment wider than
that with y0 != y1; on anything else the result is undefined (nan/inf).

All evaluators are vectorized over x / y.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and tonegrid contributors

MIT License
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

DEGENERATE_WIDTH = 0.001


class PitchPointShape(Enum):
    """Shape of the curve leaving a pitch point. Values are project-file codes."""

    EASE_IN_OUT = "io"  # half cosine, slow at both ends
    LINEAR = "l"
    EASE_IN = "i"  # quarter cosine, slow start
    EASE_OUT = "o"  # quarter sine, slow end


def _degenerate(x0: float, x1: float) -> bool:
    return x1 - x0 < DEGENERATE_WIDTH


def _position(x0: float, x1: float, x: ArrayLike) -> np.ndarray:
    """Normalized position of x in the segment, 0 at x0 and 1 at x1."""
    x = np.asarray(x, dtype=np.float64)
    return (x - x0) / (x1 - x0)


def _normalized(y0: float, y1: float, y: ArrayLike) -> np.ndarray:
    y = np.asarray(y, dtype=np.float64)
    return (y - y0) / (y1 - y0)


def linear(x0: float, x1: float, y0: float, y1: float, x: ArrayLike) -> np.ndarray:
    """Straight line through both endpoints."""
    if _degenerate(x0, x1):
        return np.full_like(np.asarray(x, dtype=np.float64), y1)
    return y0 + (y1 - y0) * _position(x0, x1, x)


def linear_x(x0: float, x1: float, y0: float, y1: float, y: ArrayLike) -> np.ndarray:
    """Inverse of linear()."""
    return _normalized(y0, y1, y) * (x1 - x0) + x0


def sin_easing_in(x0: float, x1: float, y0: float, y1: float, x: ArrayLike) -> np.ndarray:
    """Quarter cosine: flat at x0, steepest at x1."""
    if _degenerate(x0, x1):
        return np.full_like(np.asarray(x, dtype=np.float64), y1)
    t = _position(x0, x1, x)
    return y0 + (y1 - y0) * (1.0 - np.cos(t * np.pi / 2.0))


def sin_easing_in_x(x0: float, x1: float, y0: float, y1: float, y: ArrayLike) -> np.ndarray:
    """Inverse of sin_easing_in()."""
    u = _normalized(y0, y1, y)
    return np.arccos(1.0 - u) / np.pi * 2.0 * (x1 - x0) + x0


def sin_easing_out(x0: float, x1: float, y0: float, y1: float, x: ArrayLike) -> np.ndarray:
    """Quarter sine: steepest at x0, flat at x1."""
    if _degenerate(x0, x1):
        return np.full_like(np.asarray(x, dtype=np.float64), y1)
    t = _position(x0, x1, x)
    return y0 + (y1 - y0) * np.sin(t * np.pi / 2.0)


def sin_easing_out_x(x0: float, x1: float, y0: float, y1: float, y: ArrayLike) -> np.ndarray:
    """Inverse of sin_easing_out()."""
    u = _normalized(y0, y1, y)
    return np.arcsin(u) / np.pi * 2.0 * (x1 - x0) + x0


def sin_easing_in_out(
    x0: float, x1: float, y0: float, y1: float, x: ArrayLike
) -> np.ndarray:
    """Half cosine: flat at both ends, steepest in the middle."""
    if _degenerate(x0, x1):
        return np.full_like(np.asarray(x, dtype=np.float64), y1)
    t = _position(x0, x1, x)
    return y0 + (y1 - y0) * (1.0 - np.cos(t * np.pi)) / 2.0


def sin_easing_in_out_x(
    x0: float, x1: float, y0: float, y1: float, y: ArrayLike
) -> np.ndarray:
    """Inverse of sin_easing_in_out()."""
    u = _normalized(y0, y1, y)
    return np.arccos(1.0 - u * 2.0) / np.pi * (x1 - x0) + x0


Evaluator = Callable[[float, float, float, float, ArrayLike], np.ndarray]

_SHAPES: Dict[PitchPointShape, Tuple[Evaluator, Evaluator]] = {
    PitchPointShape.EASE_IN_OUT: (sin_easing_in_out, sin_easing_in_out_x),
    PitchPointShape.LINEAR: (linear, linear_x),
    PitchPointShape.EASE_IN: (sin_easing_in, sin_easing_in_x),
    PitchPointShape.EASE_OUT: (sin_easing_out, sin_easing_out_x),
}


def _coerce_shape(shape: Union[PitchPointShape, str]) -> PitchPointShape:
    if isinstance(shape, PitchPointShape):
        return shape
    try:
        return PitchPointShape(str(shape).lower())
    except ValueError:
        return PitchPointShape.LINEAR


def interpolate_shape(
    x0: float,
    x1: float,
    y0: float,
    y1: float,
    x: ArrayLike,
    shape: Union[PitchPointShape, str],
) -> np.ndarray:
    """
    Value of a shaped segment at x.

    Args:
        x0, x1: Segment start and end positions
        y0, y1: Values at x0 and x1
        x: Position(s) to evaluate
        shape: PitchPointShape or its code ("io", "l", "i", "o").
               Unknown codes evaluate as LINEAR.

    Example:
        >>> float(interpolate_shape(0, 100, 0, 10, 50, PitchPointShape.EASE_IN_OUT))
        5.0...
    """
    forward, _ = _SHAPES[_coerce_shape(shape)]
    return forward(x0, x1, y0, y1, x)


def interpolate_shape_x(
    x0: float,
    x1: float,
    y0: float,
    y1: float,
    y: ArrayLike,
    shape: Union[PitchPointShape, str],
) -> np.ndarray:
    """
    Position at which a shaped segment reaches y.

    Requires x1 - x0 >= DEGENERATE_WIDTH and y0 != y1.
    """
    _, inverse = _SHAPES[_coerce_shape(shape)]
    return inverse(x0, x1, y0, y1, y)

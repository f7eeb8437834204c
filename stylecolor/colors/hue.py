"""Hue interpolation along the shorter arc of the color wheel."""

import math

from boundednumbers.functions import cyclic_wrap_float


def shortest_hue_delta(h0: float, h1: float) -> float:
    """Signed angular distance from ``h0`` to ``h1`` in (-180, 180]."""
    delta = cyclic_wrap_float(h1, 0.0, 360.0) - cyclic_wrap_float(h0, 0.0, 360.0)
    if delta > 180:
        delta -= 360
    elif delta < -180:
        delta += 360
    return delta


def hue_lerp(h0: float, h1: float, t: float) -> float:
    """
    Interpolate two hues (degrees) along the shorter arc.

    An undefined (NaN) hue belongs to an achromatic color and is read as 0.

    Args:
        h0: Start hue
        h1: End hue
        t: Interpolation coefficient, not clamped

    Returns:
        Interpolated hue in [0, 360)
    """
    if math.isnan(h0):
        h0 = 0.0
    if math.isnan(h1):
        h1 = 0.0
    return cyclic_wrap_float(h0 + t * shortest_hue_delta(h0, h1), 0.0, 360.0)

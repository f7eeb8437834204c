"""
Color interpolation through a chosen color space.

The endpoints are converted once, when the interpolation function is built;
the returned function only blends coordinates, converts back to sRGB and
gamut-maps the result.
"""

from __future__ import annotations
import weakref

import numpy as np
from boundednumbers import clamp01

from .color import Color
from .hue import hue_lerp
from ..conversions.gamut import to_gamut
from ..conversions.spaces import SpaceDefinition, get_space
from ..types.color_types import ColorInterpolationFn, InterpolationColorSpace


def _lerp_coords(
    start: np.ndarray,
    end: np.ndarray,
    t: float,
    definition: SpaceDefinition,
) -> np.ndarray:
    coords = start + t * (end - start)
    if definition.has_hue:
        idx = definition.hue_index
        coords[idx] = hue_lerp(float(start[idx]), float(end[idx]), t)
    return coords


def get_interpolation_function(
    from_: Color,
    to: Color,
    space: InterpolationColorSpace | str = InterpolationColorSpace.RGB,
) -> ColorInterpolationFn:
    """
    Build a function interpolating ``from_`` → ``to`` in ``space``.

    Args:
        from_: Start color (t = 0)
        to: End color (t = 1)
        space: 'rgb', 'hcl' (LCH D65) or 'lab' (Lab D65)

    Returns:
        Callable mapping t (not clamped) to a new premultiplied Color.

    Raises:
        TypeError: If an endpoint is not a Color
        ValueError: If ``space`` is not a supported interpolation space
    """
    if not isinstance(from_, Color) or not isinstance(to, Color):
        raise TypeError(
            f"Expected Color endpoints, got {type(from_).__name__} and {type(to).__name__}"
        )
    definition = get_space(space)

    # Only coordinates are captured so cached functions do not keep `to` alive
    start = np.asarray(definition.from_srgb(np.array(from_.srgb)), dtype=np.float64)
    end = np.asarray(definition.from_srgb(np.array(to.srgb)), dtype=np.float64)
    alpha_start = from_.a
    alpha_end = to.a

    def interpolate(t: float) -> Color:
        coords = _lerp_coords(start, end, t, definition)
        r, g, b = to_gamut(definition.to_srgb(coords))
        alpha = clamp01(alpha_start + t * (alpha_end - alpha_start))
        return Color(r * alpha, g * alpha, b * alpha, alpha)

    return interpolate


def get_interpolation_fn(
    self: Color,
    to: Color,
    space: InterpolationColorSpace | str = InterpolationColorSpace.RGB,
) -> ColorInterpolationFn:
    """
    Cached variant of get_interpolation_function with ``self`` as start.

    Functions are cached per space and keyed on the identity of ``to``;
    entries vanish once ``to`` is garbage collected.
    """
    key = InterpolationColorSpace(space)
    cache = self._interpolation_cache.get(key)
    if cache is None:
        cache = self._interpolation_cache.setdefault(key, weakref.WeakKeyDictionary())

    interpolation_fn = cache.get(to)
    if interpolation_fn is None:
        interpolation_fn = get_interpolation_function(self, to, key)
        cache[to] = interpolation_fn
    return interpolation_fn


Color.get_interpolation_fn = get_interpolation_fn

"""
sRGB gamut mapping.

Implements the CSS Color 4 gamut mapping algorithm
(https://drafts.csswg.org/css-color-4/#gamut-mapping): chroma is reduced in
OKLCH by binary search until clipping the reduced color changes it by less
than one just-noticeable difference (deltaEOK).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ..types.color_types import RGBColor, triple_to_array
from .lab import srgb_to_linear, linear_to_srgb
from .oklab import (
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    delta_e_ok,
)

GAMUT_EPSILON = 0.000075
JND = 0.02
CHROMA_PRECISION = 0.0001


def in_gamut(rgb: RGBColor | NDArray, epsilon: float = GAMUT_EPSILON) -> bool:
    """Check whether all channels lie in [0, 1] within ``epsilon``."""
    arr = triple_to_array(rgb)
    return bool(np.all((arr >= -epsilon) & (arr <= 1 + epsilon)))


def clip(rgb: RGBColor | NDArray) -> NDArray[np.float64]:
    return np.clip(triple_to_array(rgb), 0.0, 1.0)


def _oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    return linear_to_srgb(oklab_to_linear_srgb(oklch_to_oklab(lch)))


def _srgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    return linear_srgb_to_oklab(srgb_to_linear(rgb))


def to_gamut(rgb: RGBColor | NDArray) -> RGBColor:
    """
    Map a possibly out-of-gamut sRGB color into the sRGB cube.

    Colors already inside the cube (within GAMUT_EPSILON) only have their
    rounding noise clipped away, so in-gamut colors round-trip unchanged.

    Args:
        rgb: (r, g, b) gamma-encoded sRGB, any real values

    Returns:
        RGBColor: (r, g, b) in [0, 1]
    """
    origin = triple_to_array(rgb)
    if not np.all(np.isfinite(origin)):
        origin = np.nan_to_num(origin, nan=0.0, posinf=1.0, neginf=0.0)

    if in_gamut(origin):
        return _as_triple(clip(origin))

    origin_lch = oklab_to_oklch(_srgb_to_oklab(origin))
    lightness = origin_lch[0]
    if lightness >= 1:
        return 1.0, 1.0, 1.0
    if lightness <= 0:
        return 0.0, 0.0, 0.0

    current = origin_lch.copy()
    clipped = clip(_oklch_to_srgb(current))
    error = delta_e_ok(_srgb_to_oklab(clipped), oklch_to_oklab(current))
    if error < JND:
        return _as_triple(clipped)

    low = 0.0
    high = float(origin_lch[1])
    low_in_gamut = True

    while high - low > CHROMA_PRECISION:
        chroma = (low + high) / 2
        current[1] = chroma
        candidate = _oklch_to_srgb(current)

        if low_in_gamut and in_gamut(candidate):
            low = chroma
            continue

        clipped = clip(candidate)
        error = delta_e_ok(_srgb_to_oklab(clipped), oklch_to_oklab(current))
        if error < JND:
            if JND - error < CHROMA_PRECISION:
                return _as_triple(clipped)
            low_in_gamut = False
            low = chroma
        else:
            high = chroma

    # low is always either in gamut or within one JND once clipped
    current[1] = low
    return _as_triple(clip(_oklch_to_srgb(current)))


def _as_triple(arr: NDArray[np.float64]) -> RGBColor:
    r, g, b = (float(v) for v in arr)
    return r, g, b

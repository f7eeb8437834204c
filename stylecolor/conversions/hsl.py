from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float

from ..types.color_types import RGBAColor


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return cyclic_wrap_float(h, 0.0, 360.0)

## HSL to RGB conversions

def hsl_to_rgb(hsla: tuple[float, float, float, float]) -> RGBAColor:
    """
    Convert HSL to RGB using the CSS Color 4 reference algorithm.
    Based on: https://drafts.csswg.org/css-color-4/#hsl-to-rgb

    Args:
        hsla: (hue in degrees, any real; saturation [0, 100];
               lightness [0, 100]; alpha [0, 1])

    Returns:
        RGBAColor: (r, g, b) in [0, 1] with alpha passed through
    """
    h, s, l, alpha = hsla
    h = normalize_hue(h)
    s /= 100
    l /= 100

    a = s * min(l, 1 - l)

    def channel(n: int) -> float:
        k = (n + h / 30) % 12
        return l - a * max(-1.0, min(k - 3, 9 - k, 1.0))

    return channel(0), channel(8), channel(4), alpha


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 reference algorithm.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float) / 100
    l = np.asarray(l, dtype=float) / 100

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    a = s * np.minimum(l, 1 - l)

    def channel(n: int) -> NDArray:
        k = (n + h / 30) % 12
        return l - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3, 9 - k), 1.0))

    return np.stack([channel(0), channel(8), channel(4)], axis=-1)

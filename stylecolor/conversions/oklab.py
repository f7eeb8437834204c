"""
OKLab / OKLCH conversions from linear sRGB.

Only used to measure perceptual distance while gamut mapping.

References:
- OKLab: https://bottosson.github.io/posts/oklab/
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_srgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    return np.einsum('...j,ij->...i', np.cbrt(lms), _M2)


def oklab_to_linear_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    lab = np.asarray(lab, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', lab, _M2_INV) ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """H is in degrees [0, 360)."""
    lab = np.asarray(lab, dtype=np.float64)
    a = lab[..., 1]
    b = lab[..., 2]
    C = np.sqrt(a ** 2 + b ** 2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    return np.stack([lab[..., 0], C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    lch = np.asarray(lch, dtype=np.float64)
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])
    return np.stack([lch[..., 0], C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


def delta_e_ok(lab1: NDArray[np.float64], lab2: NDArray[np.float64]) -> NDArray[np.float64]:
    """Euclidean distance in OKLab."""
    diff = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return np.sqrt(np.sum(diff ** 2, axis=-1))

"""
CIE Lab / LCH conversions referenced to the D65 white point.

Conversion chain: sRGB → linear sRGB → XYZ (D65) → Lab (D65) → LCH (D65)

All functions take and return arrays of shape (..., 3). The sRGB transfer
functions are sign-preserving so that out-of-gamut values coming back from
Lab survive the trip to the gamut mapper unchanged.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# D65 white point (CIE 1931 2°), Y normalized to 1
D65_WHITE = np.array([0.3127 / 0.3290, 1.0, (1.0 - 0.3127 - 0.3290) / 0.3290], dtype=np.float64)

# Lab constants
LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27
_LAB_EPSILON_CBRT = 24 / 116

# Below this a/b magnitude the hue is undefined
ACHROMATIC_EPSILON = 0.02

_LINEAR_SRGB_TO_XYZ = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
], dtype=np.float64)

_XYZ_TO_LINEAR_SRGB = np.array([
    [3.2409699419045226, -1.537383177570094, -0.4986107602930034],
    [-0.9692436362808796, 1.8759675015077202, 0.04155505740717559],
    [0.05563007969699366, -0.20397695888897652, 1.0569715142428786],
], dtype=np.float64)


# =============================================================================
# sRGB ↔ Linear sRGB
# =============================================================================

def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB to linear light.

    - |value| <= 0.04045: value / 12.92
    - otherwise: sign * ((|value| + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    return np.where(
        magnitude <= 0.04045,
        srgb / 12.92,
        np.sign(srgb) * np.power((magnitude + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """Inverse of srgb_to_linear. Values are not clipped."""
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    return np.where(
        magnitude > 0.0031308,
        np.sign(linear) * (1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055),
        linear * 12.92,
    )


# =============================================================================
# Linear sRGB ↔ XYZ (D65)
# =============================================================================

def linear_srgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _LINEAR_SRGB_TO_XYZ)


def xyz_to_linear_srgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_LINEAR_SRGB)


# =============================================================================
# XYZ (D65) ↔ Lab (D65)
# =============================================================================

def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ (D65) to CIE Lab referenced to D65.

    Returns:
        Array of shape (..., 3) with (L, a, b), L in [0, 100] for in-gamut input
    """
    scaled = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(
        scaled > LAB_EPSILON,
        np.cbrt(scaled),
        (LAB_KAPPA * scaled + 16) / 116,
    )
    L = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Inverse of xyz_to_lab."""
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    f1 = (L + 16) / 116
    f0 = lab[..., 1] / 500 + f1
    f2 = f1 - lab[..., 2] / 200

    x = np.where(f0 > _LAB_EPSILON_CBRT, f0 ** 3, (116 * f0 - 16) / LAB_KAPPA)
    y = np.where(L > LAB_KAPPA * LAB_EPSILON, f1 ** 3, L / LAB_KAPPA)
    z = np.where(f2 > _LAB_EPSILON_CBRT, f2 ** 3, (116 * f2 - 16) / LAB_KAPPA)
    return np.stack([x, y, z], axis=-1) * D65_WHITE


# =============================================================================
# Lab ↔ LCH
# =============================================================================

def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert Lab to cylindrical LCH.

    Hue is NaN when both a and b are within ACHROMATIC_EPSILON of zero,
    otherwise atan2(b, a) in degrees wrapped to [0, 360).
    """
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a ** 2 + b ** 2)
    achromatic = (np.abs(a) < ACHROMATIC_EPSILON) & (np.abs(b) < ACHROMATIC_EPSILON)
    H = np.where(achromatic, np.nan, np.degrees(np.arctan2(b, a)) % 360.0)
    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert LCH to Lab. Negative chroma is treated as 0 and a NaN hue as 0.
    """
    lch = np.asarray(lch, dtype=np.float64)
    L = lch[..., 0]
    C = np.maximum(lch[..., 1], 0.0)
    H_rad = np.radians(np.nan_to_num(lch[..., 2], nan=0.0))
    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ Lab / LCH (full chain)
# =============================================================================

def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    return xyz_to_lab(linear_srgb_to_xyz(srgb_to_linear(srgb)))


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    return linear_to_srgb(xyz_to_linear_srgb(lab_to_xyz(lab)))


def srgb_to_lch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    return lab_to_lch(srgb_to_lab(srgb))


def lch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    return lab_to_srgb(lch_to_lab(lch))

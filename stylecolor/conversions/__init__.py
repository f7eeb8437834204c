"""
stylecolor Color Space Conversions
==================================

Conversions used by the CSS parser and the interpolation engine.

Features
--------
- HSL → RGB using the CSS Color 4 reference algorithm (scalar and vectorized)
- sRGB ↔ linear sRGB ↔ XYZ (D65) ↔ Lab (D65) ↔ LCH (D65)
- OKLab / OKLCH for perceptual gamut mapping
- A read-only registry of interpolation spaces

Conversion Functions
-------------------

HSL → RGB:
    hsl_to_rgb((h, s, l, a))
        Scalar conversion, s and l in [0, 100]
    np_hsl_to_rgb(h, s, l)
        Vectorized conversion

sRGB ↔ Lab / LCH (arrays of shape (..., 3)):
    srgb_to_lab, lab_to_srgb, srgb_to_lch, lch_to_srgb
    lab_to_lch, lch_to_lab

Gamut:
    in_gamut(rgb), to_gamut(rgb)

Registry:
    INTERPOLATION_SPACES, get_space(space)

Examples
--------
>>> from stylecolor.conversions import hsl_to_rgb, srgb_to_lch
>>> hsl_to_rgb((120, 100, 50, 1))
(0.0, 1.0, 0.0, 1)
>>> srgb_to_lch([1.0, 0.0, 0.0])  # L, C, H of sRGB red
"""

from .hsl import hsl_to_rgb, np_hsl_to_rgb, normalize_hue

from .lab import (
    srgb_to_linear,
    linear_to_srgb,
    linear_srgb_to_xyz,
    xyz_to_linear_srgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    srgb_to_lab,
    lab_to_srgb,
    srgb_to_lch,
    lch_to_srgb,
    ACHROMATIC_EPSILON,
)

from .gamut import in_gamut, to_gamut

from .spaces import SpaceDefinition, INTERPOLATION_SPACES, get_space

__all__ = [
    # HSL → RGB
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'normalize_hue',

    # Lab / LCH
    'srgb_to_linear',
    'linear_to_srgb',
    'linear_srgb_to_xyz',
    'xyz_to_linear_srgb',
    'xyz_to_lab',
    'lab_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'srgb_to_lab',
    'lab_to_srgb',
    'srgb_to_lch',
    'lch_to_srgb',
    'ACHROMATIC_EPSILON',

    # Gamut
    'in_gamut',
    'to_gamut',

    # Registry
    'SpaceDefinition',
    'INTERPOLATION_SPACES',
    'get_space',
]

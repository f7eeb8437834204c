from .color_types import (
    InterpolationColorSpace,
    RGBAColor,
    RGBColor,
    ColorInterpolationFn,
    triple_to_array,
)

__all__ = [
    "InterpolationColorSpace",
    "RGBAColor",
    "RGBColor",
    "ColorInterpolationFn",
    "triple_to_array",
]

"""stylecolor: CSS color parsing and color-space interpolation."""

from .css_color import parse_css_color
from .named_colors import NAMED_COLORS
from .colors import Color, get_interpolation_function
from .conversions import hsl_to_rgb, to_gamut
from .types.color_types import InterpolationColorSpace, RGBAColor
from . import interpolate

__version__ = "1.0.0"

__all__ = [
    # parsing
    "parse_css_color",
    "NAMED_COLORS",
    "hsl_to_rgb",
    # color values
    "Color",
    "get_interpolation_function",
    "InterpolationColorSpace",
    "RGBAColor",
    "to_gamut",
    # generic interpolation
    "interpolate",
    "__version__",
]

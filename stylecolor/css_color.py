"""
CSS color literal parsing.

Supported:
- keyword, e.g. 'aquamarine' or 'steelblue', plus 'transparent'
- hex with 3, 4, 6 or 8 digits, e.g. '#f0f' or '#e9bebea9'
- rgb and rgba, e.g. 'rgb(0,240,120)', 'rgba(0%,94%,47%,0.1)' or 'rgb(0 240 120 / .3)'
- hsl and hsla, e.g. 'hsl(0,0%,83%)', 'hsla(0,0%,83%,.5)' or 'hsl(0 0% 83% / 20%)'

Hue only accepts the 'deg' unit; 'grad', 'rad' and 'turn' are rejected.
"""

from __future__ import annotations
import math
import re
from typing import Any, Optional, Tuple

from boundednumbers import clamp, clamp01

from .named_colors import NAMED_COLORS
from .conversions.hsl import hsl_to_rgb
from .types.color_types import RGBAColor

# Number building blocks
_int_or_decimal = r"-?(?:\d+\.)?\d+"
_number = r"-?(?:\d*\.)?\d+"
_alpha = r"(?:\d*\.)?\d+%?"
_sep = r"[\s,]+"
_alpha_tail = rf"(?:\s*[,/]\s*({_alpha}))?\s*\)"

HEX3_RE = re.compile(r"#[0-9a-f]{3,4}", re.ASCII)
HEX6_RE = re.compile(r"#[0-9a-f]{6}(?:[0-9a-f]{2})?", re.ASCII)

RGB_RE = re.compile(
    rf"rgba?\(({_int_or_decimal}){_sep}({_int_or_decimal}){_sep}({_int_or_decimal}){_alpha_tail}",
    re.ASCII,
)

RGB_PERCENT_RE = re.compile(
    rf"rgba?\(({_number})%{_sep}({_number})%{_sep}({_number})%{_alpha_tail}",
    re.ASCII,
)

HSL_RE = re.compile(
    rf"hsla?\(({_number})(?:deg)?{_sep}({_number})%{_sep}({_number})%{_alpha_tail}",
    re.ASCII,
)


def parse_css_color(color_to_parse: Any) -> Optional[RGBAColor]:
    """
    Parse a CSS color string.

    Args:
        color_to_parse: CSS color literal. Surrounding whitespace and case
            are ignored.

    Returns:
        Unpremultiplied (r, g, b, a) with every channel in [0, 1], or None
        if the input is not a supported color literal.
    """
    if not isinstance(color_to_parse, str):
        return None
    color_to_parse = color_to_parse.strip().lower()

    if color_to_parse == "transparent":
        return 0.0, 0.0, 0.0, 0.0

    named = NAMED_COLORS.get(color_to_parse)
    if named is not None:
        r, g, b = named
        return float(r), float(g), float(b), 1.0

    if HEX3_RE.fullmatch(color_to_parse):
        digits = color_to_parse[1:]
        r, g, b, a = (digits + "f")[:4]
        return _parse_hex(r), _parse_hex(g), _parse_hex(b), _parse_hex(a)

    if HEX6_RE.fullmatch(color_to_parse):
        r = color_to_parse[1:3]
        g = color_to_parse[3:5]
        b = color_to_parse[5:7]
        a = color_to_parse[7:9] or "ff"
        return _parse_hex(r), _parse_hex(g), _parse_hex(b), _parse_hex(a)

    match = RGB_RE.fullmatch(color_to_parse)
    if match:
        values = _parse_numbers(match)
        if values is None:
            return None
        r, g, b, a = values
        return clamp01(r / 255), clamp01(g / 255), clamp01(b / 255), clamp01(a)

    match = RGB_PERCENT_RE.fullmatch(color_to_parse)
    if match:
        values = _parse_numbers(match)
        if values is None:
            return None
        r, g, b, a = values
        return clamp01(r / 100), clamp01(g / 100), clamp01(b / 100), clamp01(a)

    match = HSL_RE.fullmatch(color_to_parse)
    if match:
        values = _parse_numbers(match)
        if values is None:
            return None
        h, s, l, a = values
        return hsl_to_rgb((h, clamp(s, 0.0, 100.0), clamp(l, 0.0, 100.0), clamp01(a)))

    return None


def _parse_hex(digits: str) -> float:
    """Parse one or two hex digits; a single digit is doubled ('f' -> 'ff')."""
    if len(digits) == 1:
        digits *= 2
    return int(digits, 16) / 255


def _parse_alpha(alpha: Optional[str]) -> float:
    if alpha is None:
        return 1.0
    if alpha.endswith("%"):
        return float(alpha[:-1]) / 100
    return float(alpha)


def _parse_numbers(match: re.Match) -> Optional[Tuple[float, float, float, float]]:
    """
    Read the three channel groups and the alpha group of a functional match.

    Returns None when a literal overflows to infinity, e.g. a 400-digit hue.
    """
    values = (float(match[1]), float(match[2]), float(match[3]), _parse_alpha(match[4]))
    if not all(math.isfinite(v) for v in values):
        return None
    return values

from __future__ import annotations
import math
import weakref
from typing import Any, Callable, ClassVar, Dict, Optional, TypeVar

import numpy as np
from boundednumbers import clamp

from ..conversions.lab import srgb_to_lab, lab_to_lch
from ..css_color import parse_css_color
from ..types.color_types import (
    ColorInterpolationFn,
    InterpolationColorSpace,
    RGBAColor,
    RGBColor,
)

T = TypeVar('T')


class Color:
    """
    Color defined in the sRGB color space and pre-blended with alpha.

    Instances are immutable. Derived representations (``rgb``, ``srgb``,
    ``lab``, ``lch``) are computed on first access and memoized.

    Args:
        r: Red component premultiplied by ``alpha``, 0..1
        g: Green component premultiplied by ``alpha``, 0..1
        b: Blue component premultiplied by ``alpha``, 0..1
        alpha: Alpha component, 0..1
        premultiplied: Whether r, g and b are already multiplied by alpha.
            If False they are multiplied here.

    Examples:
        >>> purple = Color.parse('purple')
        >>> str(purple)
        'rgba(128,0,128,1)'
        >>> str(Color.parse('rgba(26, 207, 26, .73)'))
        'rgba(26,207,26,0.73)'
    """
    __slots__ = ('r', 'g', 'b', 'a', '_cache', '_interpolation_cache', '_is_frozen', '__weakref__')

    r: float
    g: float
    b: float
    a: float

    black: ClassVar[Color]
    white: ClassVar[Color]
    transparent: ClassVar[Color]
    red: ClassVar[Color]

    # attached by stylecolor.colors.interpolation
    get_interpolation_fn: Callable[[Color, Color, InterpolationColorSpace | str], ColorInterpolationFn]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        r: float,
        g: float,
        b: float,
        alpha: float = 1.0,
        premultiplied: bool = True,
    ) -> None:
        cache: Dict[str, Any] = {}

        if not premultiplied:
            if not alpha:
                # alpha = 0 erases the channels; keep them for interpolation
                cache['rgb'] = (float(r), float(g), float(b), float(alpha))
            r *= alpha
            g *= alpha
            b *= alpha

        self.r = float(r)
        self.g = float(g)
        self.b = float(b)
        self.a = float(alpha)
        self._cache = cache
        self._interpolation_cache: Dict[InterpolationColorSpace, weakref.WeakKeyDictionary] = {}

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def parse(cls, input: Any) -> Optional[Color]:
        """
        Parse a CSS color string into a Color.

        Args:
            input: CSS color string, or a Color which is returned as is.

        Returns:
            A Color, or None if ``input`` is not a valid color string.
        """
        if isinstance(input, Color):
            return input

        parsed = parse_css_color(input)
        if parsed is None:
            return None

        r, g, b, a = parsed
        return cls(r, g, b, a, premultiplied=False)

    # ------------------ MEMOIZED PROPERTIES ------------------
    def _lazy(self, key: str, compute: Callable[[], T]) -> T:
        value = self._cache.get(key)
        if value is None:
            value = self._cache.setdefault(key, compute())
        return value

    @property
    def rgb(self) -> RGBAColor:
        """This color with alpha blending reversed, in sRGB."""
        return self._lazy('rgb', self._unpremultiply)

    def _unpremultiply(self) -> RGBAColor:
        f = self.a or math.inf
        return self.r / f, self.g / f, self.b / f, self.a

    @property
    def srgb(self) -> RGBColor:
        def compute() -> RGBColor:
            r, g, b, _ = self.rgb
            return r, g, b
        return self._lazy('srgb', compute)

    @property
    def lab(self) -> RGBColor:
        """(L, a, b) in CIE Lab referenced to D65."""
        return self._lazy('lab', lambda: _as_triple(srgb_to_lab(self.srgb)))

    @property
    def lch(self) -> RGBColor:
        """(L, C, H) over Lab D65. H is NaN for achromatic colors."""
        return self._lazy('lch', lambda: _as_triple(lab_to_lch(np.array(self.lab))))

    # ------------------ SERIALIZATION ------------------
    def to_string(self) -> str:
        """
        Serialize as ``rgba(r,g,b,a)`` where r, g, b are integers within
        0..255 and a is the unrounded alpha.
        """
        r, g, b, a = self.rgb
        channels = ",".join(str(_round_channel(c)) for c in (r, g, b))
        return f"rgba({channels},{_format_number(a)})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Color({self.r!r}, {self.g!r}, {self.b!r}, {self.a!r})"


def _as_triple(arr: np.ndarray) -> RGBColor:
    x, y, z = (float(v) for v in arr)
    return x, y, z


def _round_channel(value: float) -> int:
    # Round half up, like Math.round
    return int(math.floor(clamp(value * 255, 0.0, 255.0) + 0.5))


def _format_number(value: float) -> str:
    """Shortest round-tripping decimal, without a trailing '.0'."""
    return np.format_float_positional(value, trim='-')


Color.black = Color(0, 0, 0, 1)
Color.white = Color(1, 1, 1, 1)
Color.transparent = Color(0, 0, 0, 0)
Color.red = Color(1, 0, 0, 1)

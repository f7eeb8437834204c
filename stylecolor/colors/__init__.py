"""
stylecolor Color Values
=======================

Immutable premultiplied-alpha colors and their interpolation.

Usage
-----
>>> from stylecolor.colors import Color
>>>
>>> red = Color.parse('red')
>>> blue = Color.parse('#00f')
>>> print(red.rgb)  # (1.0, 0.0, 0.0, 1.0)
>>>
>>> # Interpolate in LCH (D65)
>>> fn = red.get_interpolation_fn(blue, 'hcl')
>>> print(fn(0.5))
>>>
>>> # Semi-transparent colors keep premultiplied channels
>>> teal = Color.parse('rgba(0, 128, 128, 0.5)')
>>> print(teal.r, teal.a)  # 0.0 0.5

Notes
-----
- ``r``, ``g`` and ``b`` are premultiplied by ``a``; ``rgb`` reverses it
- A color built from unpremultiplied channels with alpha 0 remembers them
- Interpolation functions are cached per start color, space and end color
"""

from .color import Color
from .interpolation import get_interpolation_function, get_interpolation_fn
from .hue import hue_lerp, shortest_hue_delta

__all__ = [
    'Color',
    'get_interpolation_function',
    'get_interpolation_fn',
    'hue_lerp',
    'shortest_hue_delta',
]

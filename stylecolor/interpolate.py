"""Interpolation helpers shared by numbers, numeric arrays and colors."""

from __future__ import annotations
import warnings
from typing import Callable, Sequence, List

from .colors import Color
from .types.color_types import InterpolationColorSpace

_SUPPORTED_SPACES = {space.value for space in InterpolationColorSpace}


def is_supported_interpolation_color_space(color_space: str) -> bool:
    """
    Check whether ``color_space`` names one of the interpolation color spaces.

    Args:
        color_space: Color space key, e.g. 'rgb', 'hcl' or 'lab'
    Returns:
        True if supported, False otherwise
    """
    return color_space in _SUPPORTED_SPACES


def number(from_: float, to: float, t: float) -> float:
    return from_ + t * (to - from_)


def color(
    from_: Color,
    to: Color,
    t: float,
    space: InterpolationColorSpace | str = InterpolationColorSpace.RGB,
) -> Color:
    return from_.get_interpolation_fn(to, space)(t)


def array(from_: Sequence[float], to: Sequence[float], t: float) -> List[float]:
    return [number(d, to[i], t) for i, d in enumerate(from_)]


_INTERPOLATORS: dict[str, Callable] = {
    'number': number,
    'color': color,
    'array': array,
}


def interpolate_factory(interpolation_type: str) -> Callable:
    """
    Return the interpolation function for a value type.

    Deprecated: use the module-level ``number``, ``color`` or ``array``.

    Raises:
        ValueError: For an unknown ``interpolation_type``
    """
    warnings.warn(
        "interpolate_factory is deprecated. Use stylecolor.interpolate.number, "
        "color or array instead.",
        DeprecationWarning,
        stacklevel=2
    )
    try:
        return _INTERPOLATORS[interpolation_type]
    except KeyError:
        raise ValueError(f"Invalid interpolation type: {interpolation_type}") from None

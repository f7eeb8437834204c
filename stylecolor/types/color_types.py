from __future__ import annotations
from enum import Enum
from typing import Callable, Tuple, TYPE_CHECKING
import numpy as np
from numpy import ndarray

if TYPE_CHECKING:
    from ..colors.color import Color

RGBAColor = Tuple[float, float, float, float]
RGBColor = Tuple[float, float, float]
ColorInterpolationFn = Callable[[float], "Color"]


class InterpolationColorSpace(str, Enum):
    RGB = "rgb"
    HCL = "hcl"  # LCH over Lab D65
    LAB = "lab"  # Lab D65


def triple_to_array(triple: RGBColor | ndarray) -> np.ndarray:
    """
    Convert a three-channel tuple to a float64 numpy array.

    Args:
        triple: Tuple of three channel values, or an ndarray of shape (..., 3)

    Returns:
        numpy array representation
    """
    if isinstance(triple, ndarray):
        return triple.astype(np.float64, copy=False)
    return np.array(triple, dtype=np.float64)

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

import numpy as np

from ..types.color_types import InterpolationColorSpace
from .lab import srgb_to_lab, lab_to_srgb, srgb_to_lch, lch_to_srgb

SpaceTransform = Callable[[np.ndarray], np.ndarray]


def _identity(color: np.ndarray) -> np.ndarray:
    return np.asarray(color, dtype=np.float64)


@dataclass(frozen=True)
class SpaceDefinition:
    """
    A coordinate space colors can be interpolated in.

    Attributes:
        space: Selector this definition is registered under
        from_srgb: Maps gamma-encoded sRGB (..., 3) into the space
        to_srgb: Maps coordinates (..., 3) back to (unclipped) sRGB
        hue_index: Channel holding an angle in degrees, if any
    """
    space: InterpolationColorSpace
    from_srgb: SpaceTransform
    to_srgb: SpaceTransform
    hue_index: Optional[int] = None

    @property
    def has_hue(self) -> bool:
        return self.hue_index is not None


def build_registry(*definitions: SpaceDefinition) -> Mapping[InterpolationColorSpace, SpaceDefinition]:
    return MappingProxyType({
        definition.space: definition
        for definition in definitions
    })


INTERPOLATION_SPACES = build_registry(
    SpaceDefinition(InterpolationColorSpace.RGB, _identity, _identity),
    SpaceDefinition(InterpolationColorSpace.LAB, srgb_to_lab, lab_to_srgb),
    SpaceDefinition(InterpolationColorSpace.HCL, srgb_to_lch, lch_to_srgb, hue_index=2),
)


def get_space(
    space: InterpolationColorSpace | str,
    registry: Mapping[InterpolationColorSpace, SpaceDefinition] = INTERPOLATION_SPACES,
) -> SpaceDefinition:
    """
    Look up a space definition.

    Raises:
        ValueError: If ``space`` is not a known interpolation space
    """
    key = InterpolationColorSpace(space)
    definition = registry.get(key)
    if definition is None:
        raise ValueError(f"Unsupported interpolation color space: {space!r}")
    return definition

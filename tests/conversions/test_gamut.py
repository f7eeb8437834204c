import numpy as np

from stylecolor.conversions import in_gamut, to_gamut, lch_to_srgb, srgb_to_lab
from stylecolor.conversions.gamut import GAMUT_EPSILON
from samples import samples_in_gamut


def test_in_gamut():
    assert in_gamut((0.0, 0.5, 1.0))
    assert in_gamut((-GAMUT_EPSILON / 2, 0.5, 1 + GAMUT_EPSILON / 2))
    assert not in_gamut((-0.01, 0.5, 0.5))
    assert not in_gamut((0.5, 0.5, 1.01))


def test_in_gamut_colors_are_unchanged():
    for rgb in samples_in_gamut:
        assert to_gamut(rgb) == rgb


def test_rounding_noise_is_clipped():
    assert to_gamut((1.00001, -0.00001, 0.5)) == (1.0, 0.0, 0.5)


def test_out_of_gamut_lands_in_unit_cube():
    for rgb in [
        (1.5, 0.2, 0.1),
        (-0.3, 0.8, 0.2),
        (0.2, 0.3, 1.8),
        (-2.0, -2.0, 3.0),
        (5.0, 5.0, 5.0),
        (-1.0, -1.0, -1.0),
    ]:
        out = to_gamut(rgb)
        assert len(out) == 3
        assert all(0.0 <= c <= 1.0 for c in out)


def test_light_and_dark_extremes():
    assert to_gamut((5.0, 5.0, 5.0)) == (1.0, 1.0, 1.0)
    assert to_gamut((-1.0, -1.0, -1.0)) == (0.0, 0.0, 0.0)


def test_chroma_reduction_keeps_hue_and_lightness_close():
    # Very saturated LCH red well outside sRGB
    origin = lch_to_srgb(np.array([55.0, 140.0, 40.0]))
    assert not in_gamut(origin)
    mapped = np.array(to_gamut(origin))
    L_origin = srgb_to_lab(origin)[0]
    L_mapped = srgb_to_lab(mapped)[0]
    assert abs(L_origin - L_mapped) < 10.0
    # stays red-dominant rather than collapsing to gray
    assert mapped[0] > mapped[1] and mapped[0] > mapped[2]


def test_non_finite_input_is_tamed():
    out = to_gamut((float("nan"), 0.5, float("inf")))
    assert all(0.0 <= c <= 1.0 for c in out)

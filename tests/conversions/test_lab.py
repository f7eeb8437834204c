import math

import numpy as np

from stylecolor.conversions import (
    srgb_to_lab,
    lab_to_srgb,
    srgb_to_lch,
    lch_to_srgb,
    lab_to_lch,
    lch_to_lab,
    srgb_to_linear,
    linear_to_srgb,
    ACHROMATIC_EPSILON,
)
from samples import samples_rgb_lab, samples_in_gamut

lab_tolerance = 0.1
round_trip_tolerance = 1e-4


def test_srgb_to_lab():
    for rgb, (L_exp, a_exp, b_exp) in samples_rgb_lab.items():
        L, a, b = srgb_to_lab(np.array(rgb))

        assert abs(L - L_exp) < lab_tolerance
        assert abs(a - a_exp) < lab_tolerance
        assert abs(b - b_exp) < lab_tolerance


def test_srgb_to_lab_numpy():
    the_matrix = np.array(list(samples_rgb_lab.keys()))
    expected = np.array(list(samples_rgb_lab.values()))
    assert np.allclose(srgb_to_lab(the_matrix), expected, atol=lab_tolerance)


def test_round_trip_rgb_lab():
    for rgb in samples_in_gamut:
        out = lab_to_srgb(srgb_to_lab(np.array(rgb)))
        assert np.allclose(out, rgb, atol=round_trip_tolerance)


def test_round_trip_rgb_lch():
    for rgb in samples_in_gamut:
        out = lch_to_srgb(srgb_to_lch(np.array(rgb)))
        assert np.allclose(out, rgb, atol=round_trip_tolerance)


def test_transfer_function_is_sign_preserving():
    values = np.array([-0.5, -0.01, 0.0, 0.01, 0.5, 1.0, 1.2])
    linear = srgb_to_linear(values)
    assert np.all(np.sign(linear) == np.sign(values))
    assert np.allclose(linear_to_srgb(linear), values, atol=1e-12)


def test_lch_hue_is_nan_for_achromatic():
    for gray in (0.0, 0.25, 0.5, 1.0):
        L, C, H = srgb_to_lch(np.array([gray, gray, gray]))
        assert math.isnan(H)
        assert C < ACHROMATIC_EPSILON


def test_lch_hue_threshold():
    _, _, H = lab_to_lch(np.array([50.0, 0.019, -0.019]))
    assert math.isnan(H)
    _, _, H = lab_to_lch(np.array([50.0, 0.021, 0.0]))
    assert H == 0.0
    _, _, H = lab_to_lch(np.array([50.0, 0.0, -0.021]))
    assert abs(H - 270.0) < 1e-9


def test_lch_values():
    L, C, H = lab_to_lch(np.array([50.0, 3.0, 4.0]))
    assert L == 50.0
    assert abs(C - 5.0) < 1e-12
    assert abs(H - math.degrees(math.atan2(4.0, 3.0))) < 1e-9
    assert 0 <= H < 360


def test_lch_to_lab_handles_nan_hue_and_negative_chroma():
    assert np.allclose(lch_to_lab(np.array([40.0, 10.0, np.nan])), [40.0, 10.0, 0.0])
    assert np.allclose(lch_to_lab(np.array([40.0, -10.0, 90.0])), [40.0, 0.0, 0.0])

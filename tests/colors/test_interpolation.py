import gc
import math

import pytest

from stylecolor import Color, InterpolationColorSpace, get_interpolation_function

SPACES = ["rgb", "hcl", "lab"]
TOL = 1e-3


def assert_rgba_close(actual, expected, tol=TOL):
    for x, y in zip(actual, expected):
        assert abs(x - y) < tol, (actual, expected)


@pytest.mark.parametrize("space", SPACES)
@pytest.mark.parametrize("pair", [
    ("red", "blue"),
    ("black", "white"),
    ("rgba(10,200,30,0.4)", "hsl(280 60% 40% / 0.9)"),
    ("steelblue", "gray"),
])
def test_endpoints(space, pair):
    start, end = (Color.parse(literal) for literal in pair)
    fn = get_interpolation_function(start, end, space)
    assert_rgba_close(fn(0).rgb, start.rgb)
    assert_rgba_close(fn(1).rgb, end.rgb)


@pytest.mark.parametrize("space", SPACES)
def test_self_interpolation_is_constant(space):
    color = Color.parse("coral")
    fn = get_interpolation_function(color, color, space)
    for t in (0.0, 0.3, 0.5, 0.9, 1.0):
        assert_rgba_close(fn(t).rgb, color.rgb)


def test_rgb_midpoint():
    fn = get_interpolation_function(Color.black, Color.white, "rgb")
    assert_rgba_close(fn(0.5).rgb, (0.5, 0.5, 0.5, 1.0), 1e-9)


def test_lab_midpoint_of_grays_is_gray():
    r, g, b, a = get_interpolation_function(Color.black, Color.white, "lab")(0.5).rgb
    assert abs(r - g) < TOL and abs(g - b) < TOL
    assert 0.4 < r < 0.55
    assert a == 1.0


def test_hcl_with_achromatic_endpoints_is_finite():
    fn = get_interpolation_function(Color.parse("white"), Color.parse("black"), "hcl")
    for t in (0.0, 0.25, 0.5, 0.75, 1.0):
        assert all(math.isfinite(c) for c in fn(t).rgb)
    fn = get_interpolation_function(Color.parse("gray"), Color.parse("red"), "hcl")
    assert all(math.isfinite(c) for c in fn(0.5).rgb)


def test_hcl_takes_shorter_hue_arc():
    # red to blue passes through magenta, not through green
    r, g, b, _ = get_interpolation_function(Color.red, Color.parse("blue"), "hcl")(0.5).rgb
    assert r > g
    assert b > g


def test_alpha_is_interpolated():
    fn = get_interpolation_function(Color.parse("rgba(0,0,0,0.2)"), Color.parse("rgba(0,0,0,0.6)"))
    assert abs(fn(0.5).a - 0.4) < 1e-9
    assert fn(-5).a == 0.0
    assert fn(5).a == 1.0


def test_transparent_endpoint_keeps_its_channels():
    fn = get_interpolation_function(Color.parse("rgba(255,0,0,0)"), Color.parse("blue"), "rgb")
    assert_rgba_close(fn(0.5).rgb, (0.5, 0.0, 0.5, 0.5), 1e-9)


def test_result_is_premultiplied():
    fn = get_interpolation_function(Color.parse("rgba(255,255,255,0.5)"), Color.parse("rgba(255,255,255,0.5)"))
    color = fn(0.5)
    assert_rgba_close((color.r, color.g, color.b, color.a), (0.5, 0.5, 0.5, 0.5), 1e-9)


@pytest.mark.parametrize("space", SPACES)
def test_extrapolation_stays_in_gamut(space):
    fn = get_interpolation_function(Color.parse("lime"), Color.parse("magenta"), space)
    for t in (-1.0, -0.5, 1.5, 2.0):
        color = fn(t)
        for c in color.rgb:
            assert 0.0 <= c <= 1.0


def test_invalid_endpoints():
    with pytest.raises(TypeError):
        get_interpolation_function("red", Color.red)
    with pytest.raises(TypeError):
        get_interpolation_function(Color.red, None)


def test_invalid_space():
    with pytest.raises(ValueError):
        get_interpolation_function(Color.red, Color.white, "hsl")
    with pytest.raises(ValueError):
        Color.red.get_interpolation_fn(Color.white, "xyz")


def test_cached_function_is_reused():
    start = Color.parse("orange")
    end = Color.parse("navy")
    fn = start.get_interpolation_fn(end, "lab")
    assert start.get_interpolation_fn(end, "lab") is fn
    assert start.get_interpolation_fn(end, InterpolationColorSpace.LAB) is fn
    assert start.get_interpolation_fn(end, "rgb") is not fn
    assert start.get_interpolation_fn(Color.parse("navy"), "lab") is not fn


def test_cache_does_not_keep_target_alive():
    start = Color.parse("orange")
    end = Color.parse("navy")
    fn = start.get_interpolation_fn(end, "hcl")
    cache = start._interpolation_cache[InterpolationColorSpace.HCL]
    assert len(cache) == 1

    del end
    gc.collect()
    assert len(cache) == 0
    # the function itself still works without its target
    assert fn(1.0).to_string() == "rgba(0,0,128,1)"

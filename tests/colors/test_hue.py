import math

from stylecolor.colors import hue_lerp, shortest_hue_delta


def test_shortest_hue_delta():
    assert shortest_hue_delta(10, 50) == 40
    assert shortest_hue_delta(350, 10) == 20
    assert shortest_hue_delta(10, 350) == -20
    assert shortest_hue_delta(0, 180) == 180
    assert shortest_hue_delta(-10, 10) == 20


def test_hue_lerp_takes_shorter_arc():
    assert abs(hue_lerp(350, 10, 0.5) - 0.0) < 1e-9 or abs(hue_lerp(350, 10, 0.5) - 360.0) < 1e-9
    assert abs(hue_lerp(340, 20, 0.25) - 350.0) < 1e-9
    assert abs(hue_lerp(20, 340, 0.25) - 10.0) < 1e-9
    assert abs(hue_lerp(0, 90, 0.5) - 45.0) < 1e-9


def test_hue_lerp_endpoints():
    assert hue_lerp(30, 300, 0) == 30
    assert abs(hue_lerp(30, 300, 1) - 300) < 1e-9


def test_hue_lerp_result_in_range():
    for t in (-2.0, -0.5, 0.0, 0.3, 1.0, 1.7, 3.0):
        h = hue_lerp(300, 60, t)
        assert 0 <= h < 360


def test_nan_hue_reads_as_zero():
    assert hue_lerp(math.nan, 90, 0.5) == 45
    assert hue_lerp(90, math.nan, 0.5) == 45
    assert hue_lerp(math.nan, math.nan, 0.5) == 0

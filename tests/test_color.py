import math

import pytest

from volrender.color import (
    CIE_LAMBDA,
    clamp,
    lerp,
    rgb_to_xyz,
    xyz_to_rgb,
)


@pytest.mark.parametrize("v1, v2", [(0.0, 1.0), (-3.5, 7.25), (10.0, 10.0)])
def test_lerp_endpoints(v1, v2):
    assert lerp(0.0, v1, v2) == v1
    assert lerp(1.0, v1, v2) == v2


def test_lerp_is_monotonic_between_endpoints():
    values = [lerp(t / 10.0, 2.0, 8.0) for t in range(11)]
    assert values == sorted(values)
    assert all(2.0 <= v <= 8.0 for v in values)


@pytest.mark.parametrize("v", [-5.0, 0.0, 0.3, 1.0, 42.0])
def test_clamp_stays_in_range(v):
    result = clamp(v, 0.0, 1.0)
    assert 0.0 <= result <= 1.0
    if 0.0 <= v <= 1.0:
        assert result == v


def test_clamp_returns_bounds_outside_range():
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(42.0, 0.0, 1.0) == 1.0


def test_rgb_to_xyz_red_column():
    assert rgb_to_xyz((1.0, 0.0, 0.0)) == pytest.approx((0.412453, 0.212671, 0.019334))


def test_xyz_to_rgb_x_column():
    assert xyz_to_rgb((1.0, 0.0, 0.0)) == pytest.approx((3.240479, -0.969256, 0.055648))


def test_black_maps_to_black():
    assert rgb_to_xyz((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)
    assert xyz_to_rgb([0.0, 0.0, 0.0]) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("rgb", [(1.0, 1.0, 1.0), (0.2, 0.5, 0.9), (0.7, 0.1, 0.3)])
def test_round_trip(rgb):
    back = xyz_to_rgb(rgb_to_xyz(rgb))
    for original, restored in zip(rgb, back):
        assert math.isclose(original, restored, abs_tol=1e-3)


def test_conversion_is_linear():
    a = rgb_to_xyz((0.2, 0.4, 0.6))
    b = rgb_to_xyz((0.1, 0.2, 0.3))
    assert a == pytest.approx(tuple(2.0 * v for v in b))


@pytest.mark.parametrize("bad", [(), (1.0, 2.0), (1.0, 2.0, 3.0, 4.0)])
def test_wrong_length_raises(bad):
    with pytest.raises(ValueError):
        xyz_to_rgb(bad)
    with pytest.raises(ValueError):
        rgb_to_xyz(bad)


def test_cie_lambda_spans_visible_range():
    assert lerp(0.0, CIE_LAMBDA[0], CIE_LAMBDA[-1]) == 405.0
    assert lerp(1.0, CIE_LAMBDA[0], CIE_LAMBDA[-1]) == 695.0
    assert lerp(0.5, CIE_LAMBDA[0], CIE_LAMBDA[-1]) == pytest.approx(550.0)
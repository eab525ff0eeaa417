import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from robomath.rotation2d import (
    Rotation2d,
    deg2rad,
    from_degrees,
    from_radians,
    from_revolutions,
    rad2deg,
    unwrapped_mean,
    wrap_degrees_180,
    wrap_degrees_360,
    wrap_radians_180,
    wrap_radians_360,
    wrap_revolutions_180,
    wrap_revolutions_360,
    wrapped_mean,
)

angles = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False, allow_infinity=False)


def test_default_rotation_is_zero():
    r = Rotation2d()
    assert r.radians() == 0.0
    assert r.f_cos() == 1.0
    assert r.f_sin() == 0.0


def test_half_turn_in_degrees():
    assert from_degrees(180).radians() == pytest.approx(math.pi)


@given(angles)
def test_degree_radian_round_trip(a):
    assert rad2deg(deg2rad(a)) == pytest.approx(a, abs=1e-9)
    assert from_degrees(a).degrees() == pytest.approx(a, abs=1e-9)


@given(angles)
def test_revolutions_round_trip(a):
    assert from_revolutions(a).revolutions() == pytest.approx(a, abs=1e-9)


@given(angles)
def test_wrap_ranges(a):
    assert -math.pi <= wrap_radians_180(a) < math.pi
    assert 0.0 <= wrap_radians_360(a) < 2 * math.pi
    assert -180.0 <= wrap_degrees_180(a) < 180.0
    assert 0.0 <= wrap_degrees_360(a) < 360.0
    assert -0.5 <= wrap_revolutions_180(a) < 0.5
    assert 0.0 <= wrap_revolutions_360(a) < 1.0


@given(angles)
def test_wrapping_keeps_the_same_direction(a):
    r = from_radians(a)
    assert from_radians(r.wrapped_radians_180()) == r
    assert from_radians(r.wrapped_radians_360()) == r
    assert from_degrees(r.wrapped_degrees_180()) == r
    assert from_degrees(r.wrapped_degrees_360()) == r
    assert from_revolutions(r.wrapped_revolutions_180()) == r
    assert from_revolutions(r.wrapped_revolutions_360()) == r


def test_tiny_negative_wraps_inside_range():
    assert 0.0 <= wrap_degrees_360(-1e-20) < 360.0


@given(angles)
def test_trig_accessors(a):
    r = from_radians(a)
    assert r.f_cos() == pytest.approx(math.cos(a))
    assert r.f_sin() == pytest.approx(math.sin(a))
    if abs(r.f_cos()) > 1e-3:
        assert r.f_tan() == pytest.approx(r.f_sin() / r.f_cos())


@given(angles)
def test_rotation_matrix_is_orthonormal(a):
    m = from_radians(a).rotation_matrix()
    assert m.shape == (2, 2)
    assert np.allclose(m @ m.T, np.eye(2))
    assert np.linalg.det(m) == pytest.approx(1.0)
    assert m[1, 0] == pytest.approx(math.sin(a))


@given(angles, angles)
def test_addition_matches_angle_sum(a, b):
    assert from_radians(a) + from_radians(b) == from_radians(a + b)


@given(angles, angles)
def test_subtraction_undoes_addition(a, b):
    ra, rb = from_radians(a), from_radians(b)
    assert (ra - rb) + rb == ra


@given(angles)
def test_negation_adds_half_turn(a):
    r = from_radians(a)
    assert -r == r + from_degrees(180)


@given(angles)
def test_scalar_multiplication_and_division(a):
    r = from_radians(a)
    assert (r * 2).radians() == pytest.approx(2 * a)
    assert (r / 4).radians() == pytest.approx(a / 4)


def test_equality_across_full_turn():
    assert from_radians(0.0) == from_radians(2 * math.pi)
    assert not (from_radians(0.0) == from_radians(0.1))


def test_equality_with_other_type_is_false():
    assert (Rotation2d(1.0) == 1.0) is False


@given(st.floats(min_value=-100, max_value=100), st.floats(min_value=-100, max_value=100))
def test_from_xy_points_along_vector(x, y):
    r = Rotation2d.from_xy(x, y)
    assert r.radians() == pytest.approx(math.atan2(y, x))


def test_repr_names_class():
    assert repr(Rotation2d(0.0)).startswith("Rotation2d[rad: ")


@given(st.lists(angles, min_size=1, max_size=10))
def test_unwrapped_mean_is_arithmetic(values):
    mean = unwrapped_mean(from_radians(v) for v in values)
    assert mean.radians() == pytest.approx(sum(values) / len(values))


def test_wrapped_mean_straddles_zero():
    mean = wrapped_mean([from_degrees(350), from_degrees(10)])
    assert mean == from_degrees(0)


@given(angles)
def test_wrapped_mean_of_single_is_itself(a):
    assert wrapped_mean([from_radians(a)]) == from_radians(a)


def test_means_of_nothing_raise():
    with pytest.raises(ValueError):
        unwrapped_mean([])
    with pytest.raises(ValueError):
        wrapped_mean([])
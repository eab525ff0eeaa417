import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from robomath.numerical_integration import (
    euler_time_variant,
    euler_with_input,
    euler_without_input,
    rk2_time_variant,
    rk2_with_input,
    rk2_without_input,
    rk4_time_variant,
    rk4_with_input,
    rk4_without_input,
)

finite = st.floats(min_value=-100, max_value=100, allow_nan=False)
step = st.floats(min_value=0.0, max_value=2.0, allow_nan=False)


def _input_only(state, inp):
    return inp


@given(x=finite, u=finite, h=step)
def test_constant_input_derivative_is_exact(x, u, h):
    expected = pytest.approx(x + h * u, abs=1e-9)
    assert euler_with_input(_input_only, x, u, h) == expected
    assert rk2_with_input(_input_only, x, u, h) == expected
    assert rk4_with_input(_input_only, x, u, h) == expected


@given(x=finite, h=step)
def test_zero_derivative_keeps_state(x, h):
    def f(state):
        return 0.0 * state

    assert euler_without_input(f, x, h) == pytest.approx(x)
    assert rk2_without_input(f, x, h) == pytest.approx(x)
    assert rk4_without_input(f, x, h) == pytest.approx(x)


@given(t=finite, y=finite)
def test_zero_step_returns_initial_state(t, y):
    def f(time, state):
        return time + state

    assert euler_time_variant(f, t, y, 0.0) == pytest.approx(y)
    assert rk2_time_variant(f, t, y, 0.0) == pytest.approx(y)
    assert rk4_time_variant(f, t, y, 0.0) == pytest.approx(y)


def test_euler_exponential_single_step():
    assert euler_without_input(lambda x: x, 1.0, 0.1) == pytest.approx(1.1)


@given(t=finite, y=finite, h=step)
def test_linear_in_time_is_exact(t, y, h):
    def f(time, state):
        return time

    exact = pytest.approx(y + ((t + h) ** 2 - t**2) / 2, rel=1e-9, abs=1e-6)
    assert rk2_time_variant(f, t, y, h) == exact
    assert rk4_time_variant(f, t, y, h) == exact


@given(t=st.floats(min_value=-5, max_value=5), y=finite, h=step)
def test_rk4_cubic_in_time_is_exact(t, y, h):
    result = rk4_time_variant(lambda time, state: 3 * time**2, t, y, h)
    exact = y + (t + h) ** 3 - t**3
    assert result == pytest.approx(exact, rel=1e-9, abs=1e-6)


def test_rk4_exponential_matches_analytic():
    result = rk4_without_input(lambda x: x, 1.0, 0.1)
    assert result == pytest.approx(math.exp(0.1), abs=1e-6)


def test_higher_order_is_more_accurate():
    exact = math.exp(0.5)
    euler_error = abs(euler_without_input(lambda x: x, 1.0, 0.5) - exact)
    rk2_error = abs(rk2_without_input(lambda x: x, 1.0, 0.5) - exact)
    rk4_error = abs(rk4_without_input(lambda x: x, 1.0, 0.5) - exact)
    assert euler_error > rk2_error > rk4_error


def test_vector_state_with_input_rotation():
    def f(x, u):
        return np.array([-x[1], x[0]]) * u[0]

    x0 = np.array([1.0, 0.0])
    u = np.array([1.0])
    state = x0
    steps = 100
    for _ in range(steps):
        state = rk4_with_input(f, state, u, math.pi / 2 / steps)
    np.testing.assert_allclose(state, [0.0, 1.0], atol=1e-8)
    assert np.linalg.norm(state) == pytest.approx(1.0, abs=1e-8)


def test_vector_state_list_input_is_converted():
    result = euler_without_input(lambda x: 2 * x, [1.0, 2.0], 0.5)
    np.testing.assert_allclose(result, [2.0, 4.0])


def test_rk2_time_variant_uses_midpoint_time():
    times = []

    def f(time, state):
        times.append(time)
        return time

    result = rk2_time_variant(f, 1.0, 0.0, 0.5)
    assert times == [1.0, 1.25]
    assert result == pytest.approx(0.5 * 1.25)
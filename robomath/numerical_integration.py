"""Explicit Runge-Kutta steps for ordinary differential equations.

Three orders are provided: Euler (first), explicit midpoint (second) and
the classic fourth-order Runge-Kutta method. Each order comes in three forms:

* ``*_with_input``: time-invariant ``dx/dt = f(x, u)``, with ``u`` held constant;
* ``*_without_input``: time-invariant ``dx/dt = f(x)``;
* ``*_time_variant``: time-variant ``dy/dt = f(t, y)``.

States may be floats or numpy arrays; each function returns the state
after integrating over a step of length ``h``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

State = Any
WithInputDerivative = Callable[[State, State], State]
WithoutInputDerivative = Callable[[State], State]
TimeVariantDerivative = Callable[[float, State], State]


def _state(value: State) -> State:
    if np.isscalar(value):
        return float(value)
    return np.asarray(value, dtype=float)


def euler_with_input(f: WithInputDerivative, x: State, u: State, h: float) -> State:
    """One Euler step of dx/dt = f(x, u)."""
    x = _state(x)
    k1 = f(x, u)
    return x + h * k1


def euler_without_input(f: WithoutInputDerivative, x: State, h: float) -> State:
    """One Euler step of dx/dt = f(x)."""
    x = _state(x)
    k1 = f(x)
    return x + h * k1


def euler_time_variant(f: TimeVariantDerivative, t: float, y: State, h: float) -> State:
    """One Euler step of dy/dt = f(t, y) starting at time t."""
    y = _state(y)
    k1 = f(t, y)
    return y + h * k1


def rk2_with_input(f: WithInputDerivative, x: State, u: State, h: float) -> State:
    """One explicit-midpoint step of dx/dt = f(x, u)."""
    x = _state(x)
    k1 = f(x, u)
    k2 = f(x + h * 0.5 * k1, u)
    return x + h * k2


def rk2_without_input(f: WithoutInputDerivative, x: State, h: float) -> State:
    """One explicit-midpoint step of dx/dt = f(x)."""
    x = _state(x)
    k1 = f(x)
    k2 = f(x + h * 0.5 * k1)
    return x + h * k2


def rk2_time_variant(f: TimeVariantDerivative, t: float, y: State, h: float) -> State:
    """One explicit-midpoint step of dy/dt = f(t, y) starting at time t."""
    y = _state(y)
    k1 = f(t, y)
    k2 = f(t + h * 0.5, y + h * 0.5 * k1)
    return y + h * k2


def rk4_with_input(f: WithInputDerivative, x: State, u: State, h: float) -> State:
    """One fourth-order Runge-Kutta step of dx/dt = f(x, u)."""
    x = _state(x)
    k1 = f(x, u)
    k2 = f(x + h * 0.5 * k1, u)
    k3 = f(x + h * 0.5 * k2, u)
    k4 = f(x + h * k3, u)
    return x + h / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def rk4_without_input(f: WithoutInputDerivative, x: State, h: float) -> State:
    """One fourth-order Runge-Kutta step of dx/dt = f(x)."""
    x = _state(x)
    k1 = f(x)
    k2 = f(x + h * 0.5 * k1)
    k3 = f(x + h * 0.5 * k2)
    k4 = f(x + h * k3)
    return x + h / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def rk4_time_variant(f: TimeVariantDerivative, t: float, y: State, h: float) -> State:
    """One fourth-order Runge-Kutta step of dy/dt = f(t, y) starting at time t."""
    y = _state(y)
    k1 = f(t, y)
    k2 = f(t + h * 0.5, y + h * 0.5 * k1)
    k3 = f(t + h * 0.5, y + h * 0.5 * k2)
    k4 = f(t + h, y + h * k3)
    return y + h / 6.0 * (k1 + 2.0 * k2 + 2.0 * k3 + k4)
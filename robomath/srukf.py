"""Square-root unscented Kalman filter with simplex sigma points."""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from robomath.unscented import (
    ScaledSphericalSimplexSigmaPoints,
    cholesky_rank_update,
    square_root_ut,
)

Vector = np.ndarray
Dynamics = Callable[[Vector, Vector], Vector]
Measurement = Callable[[Vector, Vector], Vector]
Integrator = Callable[[Dynamics, Vector, Vector, float], Vector]
MeanFunction = Callable[[np.ndarray, np.ndarray], Vector]
BinaryFunction = Callable[[Vector, Vector], Vector]


def _weighted_mean(sigmas: np.ndarray, weights: np.ndarray) -> Vector:
    return sigmas @ weights


def _subtract(a: Vector, b: Vector) -> Vector:
    return a - b


def _add(a: Vector, b: Vector) -> Vector:
    return a + b


def _vector(value) -> Vector:
    return np.asarray(value, dtype=float).reshape(-1)


def _diagonal_sum(matrix: np.ndarray) -> float:
    return float(np.diagonal(matrix).sum())


class SquareRootUnscentedKalmanFilter:
    """Nonlinear state estimator in square-root unscented form.

    ``f(x, u)`` gives the time derivative of the state and ``h(x, u)`` the
    expected measurement. ``integrator(f, x, u, dt)`` advances the state by
    ``dt`` seconds. Custom mean, residual and addition functions may be given,
    most often to wrap angles; they default to plain weighted sums,
    subtraction and addition.

    A correction is only kept if it makes the estimate more certain, measured
    by the sum of the diagonal of the square-root covariance.
    """

    def __init__(
        self,
        f: Dynamics,
        h: Measurement,
        integrator: Integrator,
        state_stddevs,
        measurement_stddevs,
        mean_func_x: MeanFunction | None = None,
        mean_func_y: MeanFunction | None = None,
        residual_func_x: BinaryFunction | None = None,
        residual_func_y: BinaryFunction | None = None,
        add_func_x: BinaryFunction | None = None,
    ) -> None:
        state_std = _vector(state_stddevs)
        if state_std.size < 1:
            raise ValueError("the state must have at least one dimension")
        self._states = state_std.size
        self._f = f
        self._h = h
        self._integrator = integrator
        self._sqrt_q = np.diag(state_std)
        self._measurement_stddevs = _vector(measurement_stddevs)
        self._mean_func_x = mean_func_x if mean_func_x is not None else _weighted_mean
        self._mean_func_y = mean_func_y if mean_func_y is not None else _weighted_mean
        self._residual_func_x = residual_func_x if residual_func_x is not None else _subtract
        self._residual_func_y = residual_func_y if residual_func_y is not None else _subtract
        self._add_func_x = add_func_x if add_func_x is not None else _add
        self._points = ScaledSphericalSimplexSigmaPoints(self._states)
        self.reset()

    @property
    def xhat(self) -> Vector:
        """The current state estimate."""
        return self._xhat.copy()

    @xhat.setter
    def xhat(self, value) -> None:
        state = _vector(value)
        if state.shape != (self._states,):
            raise ValueError("the state estimate does not match the number of states")
        self._xhat = state

    @property
    def sqrt_covariance(self) -> np.ndarray:
        """The square-root covariance matrix S."""
        return self._s.copy()

    @sqrt_covariance.setter
    def sqrt_covariance(self, value) -> None:
        root = np.array(value, dtype=float)
        if root.shape != (self._states, self._states):
            raise ValueError("the square-root covariance does not match the number of states")
        self._s = root

    def covariance(self) -> np.ndarray:
        """The covariance P = S S^T."""
        return self._s @ self._s.T

    def set_covariance(self, p) -> None:
        """Set S to the lower Cholesky factor of the covariance P."""
        matrix = np.asarray(p, dtype=float)
        if matrix.shape != (self._states, self._states):
            raise ValueError("the covariance does not match the number of states")
        self._s = np.linalg.cholesky(matrix)

    def reset(self) -> None:
        """Zero the state, the square-root covariance and the predicted sigma points.

        Set the covariance again before using the filter.
        """
        num_sigmas = self._points.num_sigmas()
        self._xhat = np.zeros(self._states)
        self._s = np.zeros((self._states, self._states))
        self._sigmas_f = np.zeros((self._states, num_sigmas))

    def predict(self, u, dt: float) -> None:
        """Project the state forward by ``dt`` seconds under control input ``u``."""
        q = self._sqrt_q * math.sqrt(dt)
        sigmas = self._points.square_root_sigma_points(self._xhat, self._s)
        self._sigmas_f = np.column_stack(
            [_vector(self._integrator(self._f, column, u, dt)) for column in sigmas.T]
        )
        self._xhat, self._s = square_root_ut(
            self._sigmas_f,
            self._points.wm(),
            self._points.wc(),
            self._mean_func_x,
            self._residual_func_x,
            np.tril(q),
        )

    def correct(
        self,
        u,
        y,
        h: Measurement | None = None,
        measurement_stddevs=None,
        mean_func_y: MeanFunction | None = None,
        residual_func_y: BinaryFunction | None = None,
        residual_func_x: BinaryFunction | None = None,
        add_func_x: BinaryFunction | None = None,
    ) -> None:
        """Correct the estimate with the measurement ``y``.

        Without ``h`` the filter's own measurement function, noise and
        arithmetic are used, unless overridden. With ``h`` its noise must be
        given, and arithmetic that is not given is plain subtraction and
        addition.
        """
        if h is None:
            h = self._h
            stddevs = self._measurement_stddevs if measurement_stddevs is None else _vector(measurement_stddevs)
            mean_func_y = mean_func_y if mean_func_y is not None else self._mean_func_y
            residual_func_y = residual_func_y if residual_func_y is not None else self._residual_func_y
            residual_func_x = residual_func_x if residual_func_x is not None else self._residual_func_x
            add_func_x = add_func_x if add_func_x is not None else self._add_func_x
        else:
            if measurement_stddevs is None:
                raise ValueError("a custom measurement function needs its measurement noise")
            stddevs = _vector(measurement_stddevs)
            mean_func_y = mean_func_y if mean_func_y is not None else _weighted_mean
            residual_func_y = residual_func_y if residual_func_y is not None else _subtract
            residual_func_x = residual_func_x if residual_func_x is not None else _subtract
            add_func_x = add_func_x if add_func_x is not None else _add

        measurement = _vector(y)
        if measurement.shape != stddevs.shape:
            raise ValueError("the measurement does not match its noise")
        sqrt_r = np.diag(stddevs)
        wm = self._points.wm()
        wc = self._points.wc()

        sigmas = self._points.square_root_sigma_points(self._xhat, self._s)
        sigmas_h = np.column_stack([_vector(h(column, u)) for column in sigmas.T])

        yhat, sy = square_root_ut(sigmas_h, wm, wc, mean_func_y, residual_func_y, np.tril(sqrt_r))

        pxy = sum(
            weight
            * np.outer(
                _vector(residual_func_x(state_point, self._xhat)),
                _vector(residual_func_y(measured_point, yhat)),
            )
            for weight, state_point, measured_point in zip(wc, self._sigmas_f.T, sigmas_h.T)
        )

        # K = (Sy^T \ (Sy \ Pxy^T))^T
        gain = np.linalg.solve(sy.T, np.linalg.solve(sy, pxy.T)).T

        xhat_dot = gain @ _vector(residual_func_y(measurement, yhat))
        xhat = _vector(add_func_x(self._xhat, xhat_dot))

        s = self._s.copy()
        downdate = gain @ sy
        for column in downdate.T:
            s = cholesky_rank_update(s, column, -1.0)

        if _diagonal_sum(self._s) > _diagonal_sum(s):
            self._xhat = xhat
            self._s = s


SRUKF = SquareRootUnscentedKalmanFilter
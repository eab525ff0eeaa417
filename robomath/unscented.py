"""Simplex sigma points and the square-root unscented transform.

Sigma points are placed at the vertices of a scaled spherical simplex around
the mean. This uses N + 2 points for an N-dimensional state instead of the
usual 2N + 1.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

MeanFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]
ResidualFunction = Callable[[np.ndarray, np.ndarray], np.ndarray]


def cholesky_rank_update(s, v, sigma: float) -> np.ndarray:
    """Rank-one update of a lower-triangular Cholesky factor.

    Returns a new factor ``L'`` with ``L' L'^T = S S^T + sigma * v v^T``.
    Only the lower triangle of ``s`` is read and changed. If a downdate would
    lose positive definiteness, the columns from that point on are left as
    they were.
    """
    mat = np.array(s, dtype=float, copy=True)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError("the factor must be a square matrix")
    temp = np.array(v, dtype=float).reshape(-1)
    size = mat.shape[0]
    if temp.shape != (size,):
        raise ValueError("the update vector must match the factor's size")

    beta = np.float64(1.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        for j in range(size):
            ljj = mat[j, j]
            dj = ljj * ljj
            wj = temp[j]
            swj2 = sigma * wj * wj
            gamma = dj * beta + swj2
            x = dj + swj2 / beta
            if x <= 0.0:
                break
            nljj = np.sqrt(x)
            mat[j, j] = nljj
            beta = beta + swj2 / dj
            if j + 1 < size:
                column = mat[j + 1 :, j]
                temp[j + 1 :] -= (wj / ljj) * column
                if gamma != 0:
                    mat[j + 1 :, j] = (nljj / ljj) * column + (nljj * sigma * wj / gamma) * temp[j + 1 :]
    return mat


class ScaledSphericalSimplexSigmaPoints:
    """Generator of N + 2 simplex sigma points and their weights.

    ``alpha`` sets the spread of the points around the mean (usually small);
    ``beta`` carries prior knowledge of the distribution (2 is optimal for
    Gaussians).
    """

    def __init__(self, states: int, alpha: float = 0.001, beta: float = 2.0) -> None:
        if states < 1:
            raise ValueError("the state must have at least one dimension")
        self._states = int(states)
        num_sigmas = self._states + 2

        c = 1.0 / (alpha * alpha * (self._states + 1))
        self._wm = np.full(num_sigmas, c)
        self._wc = np.full(num_sigmas, c)
        self._wm[0] = 1.0 - 1.0 / (alpha * alpha)
        self._wc[0] = 1.0 - 1.0 / (alpha * alpha) + (1.0 - alpha * alpha + beta)

        t = np.arange(1, self._states + 1, dtype=float)
        q = alpha * np.sqrt((t * (self._states + 1)) / (t + 1.0))

        rows = np.arange(self._states)[:, None]
        cols = np.arange(num_sigmas)[None, :]
        in_segment = (cols >= 1) & (cols <= rows + 1)
        coefficients = np.where(in_segment, (-q / (np.arange(self._states) + 1.0))[:, None], 0.0)
        diagonal = np.arange(self._states)
        coefficients[diagonal, diagonal + 2] = q
        self._coefficients = coefficients

    def num_sigmas(self) -> int:
        """The number of sigma points, N + 2."""
        return self._states + 2

    def square_root_sigma_points(self, x, s) -> np.ndarray:
        """Sigma points for mean ``x`` and square-root covariance ``s``.

        Each column is one point; the first column is the mean itself.
        """
        mean = np.asarray(x, dtype=float).reshape(-1)
        root = np.asarray(s, dtype=float)
        if mean.shape != (self._states,):
            raise ValueError("the mean does not match the number of states")
        if root.shape != (self._states, self._states):
            raise ValueError("the square-root covariance does not match the number of states")
        return root @ self._coefficients + mean[:, None]

    def wm(self) -> np.ndarray:
        """Weights of each sigma point for the mean."""
        return self._wm.copy()

    def wc(self) -> np.ndarray:
        """Weights of each sigma point for the covariance."""
        return self._wc.copy()


def square_root_ut(
    sigmas,
    wm,
    wc,
    mean_func: MeanFunction,
    residual_func: ResidualFunction,
    sqrt_r,
) -> tuple[np.ndarray, np.ndarray]:
    """Unscented transform of sigma points, in square-root form.

    Returns the mean and the lower-triangular square-root covariance of the
    points, with ``sqrt_r`` as the square root of the added noise covariance.
    All points after the first share the covariance weight ``wc[1]``.
    """
    points = np.asarray(sigmas, dtype=float)
    mean_weights = np.asarray(wm, dtype=float).reshape(-1)
    cov_weights = np.asarray(wc, dtype=float).reshape(-1)
    noise = np.asarray(sqrt_r, dtype=float)
    if points.ndim != 2:
        raise ValueError("sigma points must be a matrix with one point per column")
    cov_dim, num_sigmas = points.shape
    if mean_weights.shape != (num_sigmas,) or cov_weights.shape != (num_sigmas,):
        raise ValueError("there must be one weight per sigma point")
    if noise.shape != (cov_dim, cov_dim):
        raise ValueError("the noise square root must be square and match the points")

    x = np.asarray(mean_func(points, mean_weights), dtype=float).reshape(-1)

    scale = np.sqrt(cov_weights[1])
    deviations = [
        scale * np.asarray(residual_func(point, x), dtype=float).reshape(-1)
        for point in points.T[1:]
    ]
    s_bar = np.column_stack([*deviations, noise])

    r = np.linalg.qr(s_bar.T, mode="r")
    s = np.triu(r[:cov_dim, :cov_dim]).T

    first = np.asarray(residual_func(points[:, 0], x), dtype=float).reshape(-1)
    s = cholesky_rank_update(s, first, cov_weights[0])
    return x, s
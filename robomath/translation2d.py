"""Points and vectors in the plane."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from robomath.rotation2d import Rotation2d

_EQUALITY_TOLERANCE = 1e-9


class Translation2d:
    """A point in 2d space with x and y coordinates (+x right, +y up)."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._x = float(x)
        self._y = float(y)

    @classmethod
    def from_vector(cls, vector) -> Translation2d:
        """Build a translation from a two-element vector."""
        values = np.asarray(vector, dtype=float).reshape(-1)
        if values.shape != (2,):
            raise ValueError("a translation vector needs exactly two elements")
        return cls(values[0], values[1])

    @classmethod
    def from_polar(cls, r: float, theta: Rotation2d) -> Translation2d:
        """Build a translation from a magnitude and a direction."""
        return cls(r * theta.f_cos(), r * theta.f_sin())

    def x(self) -> float:
        return self._x

    def y(self) -> float:
        return self._y

    def theta(self) -> Rotation2d:
        """The angle of the vector from the x axis."""
        return Rotation2d.from_xy(self._x, self._y)

    def as_vector(self) -> np.ndarray:
        return np.array([self._x, self._y])

    def norm(self) -> float:
        return math.hypot(self._x, self._y)

    def normalize(self) -> Translation2d:
        """The unit vector in the same direction."""
        return self / self.norm()

    def distance(self, other: Translation2d) -> float:
        return (self - other).norm()

    def rotate_by(self, rotation: Rotation2d) -> Translation2d:
        """Rotate about the origin."""
        c, s = rotation.f_cos(), rotation.f_sin()
        return Translation2d(self._x * c - self._y * s, self._x * s + self._y * c)

    def rotate_around(self, other: Translation2d, rotation: Rotation2d) -> Translation2d:
        """Rotate about another point."""
        return (self - other).rotate_by(rotation) + other

    def __add__(self, other: Translation2d) -> Translation2d:
        if not isinstance(other, Translation2d):
            return NotImplemented
        return Translation2d(self._x + other._x, self._y + other._y)

    def __sub__(self, other: Translation2d) -> Translation2d:
        if not isinstance(other, Translation2d):
            return NotImplemented
        return Translation2d(self._x - other._x, self._y - other._y)

    def __neg__(self) -> Translation2d:
        return Translation2d(-self._x, -self._y)

    def __mul__(self, other):
        """Scale by a number, or take the dot product with another translation."""
        if isinstance(other, Translation2d):
            return self._x * other._x + self._y * other._y
        return Translation2d(self._x * other, self._y * other)

    def __truediv__(self, scalar: float) -> Translation2d:
        if isinstance(scalar, Translation2d):
            return NotImplemented
        return Translation2d(self._x / scalar, self._y / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Translation2d):
            return NotImplemented
        return (
            abs(self._x - other._x) < _EQUALITY_TOLERANCE
            and abs(self._y - other._y) < _EQUALITY_TOLERANCE
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Translation2d[x: {self._x}, y: {self._y}]"


def mean(translations: Iterable[Translation2d]) -> Translation2d:
    """Component-wise mean of the translations."""
    items = list(translations)
    if not items:
        raise ValueError("cannot take the mean of no translations")
    return Translation2d(
        sum(t.x() for t in items) / len(items),
        sum(t.y() for t in items) / len(items),
    )
"""Rotations in the plane, stored as an angle with its cosine and sine."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

_TAU = 2.0 * math.pi
_EQUALITY_TOLERANCE = 1e-9


def _wrap_zero_based(angle: float, period: float) -> float:
    result = angle % period
    # Tiny negative inputs can round up to exactly one period.
    if result >= period:
        result -= period
    return result


def _wrap_centered(angle: float, period: float) -> float:
    half = period / 2.0
    return _wrap_zero_based(angle + half, period) - half


def wrap_radians_180(angle: float) -> float:
    """Wrap a radian angle into [-pi, pi)."""
    return _wrap_centered(angle, _TAU)


def wrap_degrees_180(angle: float) -> float:
    """Wrap a degree angle into [-180, 180)."""
    return _wrap_centered(angle, 360.0)


def wrap_revolutions_180(angle: float) -> float:
    """Wrap a revolution angle into [-0.5, 0.5)."""
    return _wrap_centered(angle, 1.0)


def wrap_radians_360(angle: float) -> float:
    """Wrap a radian angle into [0, 2pi)."""
    return _wrap_zero_based(angle, _TAU)


def wrap_degrees_360(angle: float) -> float:
    """Wrap a degree angle into [0, 360)."""
    return _wrap_zero_based(angle, 360.0)


def wrap_revolutions_360(angle: float) -> float:
    """Wrap a revolution angle into [0, 1)."""
    return _wrap_zero_based(angle, 1.0)


def deg2rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180.0


def rad2deg(r: float) -> float:
    """Convert radians to degrees."""
    return r * 180.0 / math.pi


class Rotation2d:
    """A rotation in 2d space, stored continuously in radians.

    Wrapped accessors are available: "180" forms lie in [-pi, pi),
    [-180, 180) or [-0.5, 0.5); "360" forms lie in [0, 2pi), [0, 360) or [0, 1).
    """

    __slots__ = ("_radians", "_cos", "_sin")

    def __init__(self, radians: float = 0.0) -> None:
        self._radians = float(radians)
        self._cos = math.cos(self._radians)
        self._sin = math.sin(self._radians)

    @classmethod
    def from_xy(cls, x: float, y: float) -> Rotation2d:
        """The angle from the x axis to the point (x, y); need not be normalized."""
        return cls(math.atan2(y, x))

    def radians(self) -> float:
        return self._radians

    def degrees(self) -> float:
        return rad2deg(self._radians)

    def revolutions(self) -> float:
        return self._radians / _TAU

    def f_cos(self) -> float:
        return self._cos

    def f_sin(self) -> float:
        return self._sin

    def f_tan(self) -> float:
        return self._sin / self._cos

    def rotation_matrix(self) -> np.ndarray:
        """The 2x2 matrix [[cos, -sin], [sin, cos]]."""
        return np.array([[self._cos, -self._sin], [self._sin, self._cos]])

    def wrapped_radians_180(self) -> float:
        return wrap_radians_180(self._radians)

    def wrapped_degrees_180(self) -> float:
        return wrap_degrees_180(self.degrees())

    def wrapped_revolutions_180(self) -> float:
        return wrap_revolutions_180(self.revolutions())

    def wrapped_radians_360(self) -> float:
        return wrap_radians_360(self._radians)

    def wrapped_degrees_360(self) -> float:
        return wrap_degrees_360(self.degrees())

    def wrapped_revolutions_360(self) -> float:
        return wrap_revolutions_360(self.revolutions())

    def __add__(self, other: Rotation2d) -> Rotation2d:
        if not isinstance(other, Rotation2d):
            return NotImplemented
        new_cos = other._cos * self._cos - other._sin * self._sin
        new_sin = other._sin * self._cos + other._cos * self._sin
        return Rotation2d(math.atan2(new_sin, new_cos))

    def __sub__(self, other: Rotation2d) -> Rotation2d:
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return self + Rotation2d(-other._radians)

    def __neg__(self) -> Rotation2d:
        """Flip the rotation, equivalent to adding 180 degrees."""
        return Rotation2d(self._radians + math.pi)

    def __mul__(self, scalar: float) -> Rotation2d:
        if isinstance(scalar, Rotation2d):
            return NotImplemented
        return Rotation2d(self._radians * scalar)

    def __truediv__(self, scalar: float) -> Rotation2d:
        if isinstance(scalar, Rotation2d):
            return NotImplemented
        return Rotation2d(self._radians / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return abs(wrap_radians_180(self._radians - other._radians)) < _EQUALITY_TOLERANCE

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Rotation2d[rad: {self._radians}, deg: {self.degrees()}]"


def from_radians(radians: float) -> Rotation2d:
    """Build a rotation from radians."""
    return Rotation2d(radians)


def from_degrees(degrees: float) -> Rotation2d:
    """Build a rotation from degrees."""
    return Rotation2d(deg2rad(degrees))


def from_revolutions(revolutions: float) -> Rotation2d:
    """Build a rotation from revolutions."""
    return Rotation2d(revolutions * _TAU)


def unwrapped_mean(rotations: Iterable[Rotation2d]) -> Rotation2d:
    """Arithmetic mean of the raw angle values; inputs are not wrapped."""
    values = [rotation.radians() for rotation in rotations]
    if not values:
        raise ValueError("cannot take the mean of no rotations")
    return Rotation2d(sum(values) / len(values))


def wrapped_mean(rotations: Iterable[Rotation2d]) -> Rotation2d:
    """Circular mean of the rotations, taken through their unit vectors."""
    items = list(rotations)
    if not items:
        raise ValueError("cannot take the mean of no rotations")
    cos_sum = sum(rotation.f_cos() for rotation in items)
    sin_sum = sum(rotation.f_sin() for rotation in items)
    return Rotation2d.from_xy(cos_sum / len(items), sin_sum / len(items))
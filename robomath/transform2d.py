"""Linear differences between the components of two poses."""

from __future__ import annotations

import numbers

import numpy as np

from robomath.rotation2d import Rotation2d
from robomath.translation2d import Translation2d


def _as_rotation(rotation) -> Rotation2d:
    if isinstance(rotation, Rotation2d):
        return rotation
    return Rotation2d(rotation)


class Transform2d:
    """A change in pose: a translation and a rotation applied together.

    The rotation may be given as a Rotation2d or as a number of radians.
    """

    __slots__ = ("_translation", "_rotation")

    def __init__(self, translation: Translation2d | None = None, rotation=None) -> None:
        self._translation = translation if translation is not None else Translation2d()
        self._rotation = _as_rotation(rotation) if rotation is not None else Rotation2d()

    @classmethod
    def from_xy(cls, x: float, y: float, rotation) -> Transform2d:
        """Build a transform from x and y components and a rotation."""
        return cls(Translation2d(x, y), rotation)

    @classmethod
    def from_vector(cls, vector) -> Transform2d:
        """Build a transform from a vector of the form [x, y, theta]."""
        values = np.asarray(vector, dtype=float).reshape(-1)
        if values.shape != (3,):
            raise ValueError("a transform vector needs exactly three elements")
        return cls(Translation2d(values[0], values[1]), Rotation2d(values[2]))

    @classmethod
    def between(cls, start, end) -> Transform2d:
        """The component-wise difference that takes the start pose to the end pose."""
        return cls(
            end.translation() - start.translation(),
            end.rotation() - start.rotation(),
        )

    def translation(self) -> Translation2d:
        return self._translation

    def rotation(self) -> Rotation2d:
        return self._rotation

    def x(self) -> float:
        return self._translation.x()

    def y(self) -> float:
        return self._translation.y()

    def inverse(self) -> Transform2d:
        """The transform that undoes this one."""
        return Transform2d(-self._translation, Rotation2d(-self._rotation.radians()))

    def __mul__(self, scalar: float) -> Transform2d:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Transform2d(self._translation * scalar, self._rotation * scalar)

    def __truediv__(self, scalar: float) -> Transform2d:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Transform2d(self._translation / scalar, self._rotation / scalar)

    def __neg__(self) -> Transform2d:
        return self.inverse()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform2d):
            return NotImplemented
        return self._translation == other._translation and self._rotation == other._rotation

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Transform2d[dx: {self.x()}, dy: {self.y()}, "
            f"drad: {self._rotation.radians()}, ddeg: {self._rotation.degrees()}]"
        )
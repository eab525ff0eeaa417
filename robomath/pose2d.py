"""Poses in the plane: a position and a heading."""

from __future__ import annotations

import numbers
from collections.abc import Iterable

import numpy as np

from robomath.rotation2d import Rotation2d, wrapped_mean
from robomath.transform2d import Transform2d
from robomath.translation2d import Translation2d, mean


def _as_rotation(rotation) -> Rotation2d:
    if isinstance(rotation, Rotation2d):
        return rotation
    return Rotation2d(rotation)


class Pose2d:
    """A pose with x, y and rotational components.

    +x is right, +y is up and +theta is counterclockwise. The rotation may be
    given as a Rotation2d or as a number of radians.
    """

    __slots__ = ("_translation", "_rotation")

    def __init__(self, translation: Translation2d | None = None, rotation=None) -> None:
        self._translation = translation if translation is not None else Translation2d()
        self._rotation = _as_rotation(rotation) if rotation is not None else Rotation2d()

    @classmethod
    def from_xy(cls, x: float, y: float, rotation) -> Pose2d:
        """Build a pose from x and y components and a rotation."""
        return cls(Translation2d(x, y), rotation)

    @classmethod
    def from_vector(cls, vector) -> Pose2d:
        """Build a pose from a vector of the form [x, y, theta]."""
        values = np.asarray(vector, dtype=float).reshape(-1)
        if values.shape != (3,):
            raise ValueError("a pose vector needs exactly three elements")
        return cls(Translation2d(values[0], values[1]), Rotation2d(values[2]))

    def translation(self) -> Translation2d:
        return self._translation

    def rotation(self) -> Rotation2d:
        return self._rotation

    def x(self) -> float:
        return self._translation.x()

    def y(self) -> float:
        return self._translation.y()

    def with_rotation(self, rotation) -> Pose2d:
        """The same position with another rotation."""
        return Pose2d(self._translation, rotation)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pose2d):
            return NotImplemented
        return self._translation == other._translation and self._rotation == other._rotation

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self, scalar: float) -> Pose2d:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Pose2d(self._translation * scalar, self._rotation * scalar)

    def __truediv__(self, scalar: float) -> Pose2d:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Pose2d(self._translation / scalar, self._rotation / scalar)

    def __add__(self, transform: Transform2d) -> Pose2d:
        if not isinstance(transform, Transform2d):
            return NotImplemented
        return self.transform_by(transform)

    def __sub__(self, other: Pose2d) -> Transform2d:
        if not isinstance(other, Pose2d):
            return NotImplemented
        return Transform2d.between(other, self)

    def __repr__(self) -> str:
        return (
            f"Pose2d[x: {self.x()}, y: {self.y()}, "
            f"rad: {self._rotation.radians()}, deg: {self._rotation.degrees()}]"
        )

    def relative_to(self, other: Pose2d) -> Pose2d:
        """This pose expressed in the frame of another pose instead of the origin."""
        back = Rotation2d(-other._rotation.radians())
        return Pose2d(
            (self._translation - other._translation).rotate_by(back),
            self._rotation - other._rotation,
        )

    def transform_by(self, transform: Transform2d) -> Pose2d:
        """Add each component of the transform to this pose."""
        return Pose2d(
            self._translation + transform.translation(),
            self._rotation + transform.rotation(),
        )


def wrapped_pose_mean(poses: Iterable[Pose2d]) -> Pose2d:
    """Mean position and circular mean heading of the poses."""
    items = list(poses)
    if not items:
        raise ValueError("cannot take the mean of no poses")
    return Pose2d(
        mean(pose.translation() for pose in items),
        wrapped_mean(pose.rotation() for pose in items),
    )
"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from robomath.translation2d import Translation2d


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its minimum and maximum corners."""

    min_point: Translation2d
    max_point: Translation2d

    @classmethod
    def from_min_and_size(cls, min_point: Translation2d, size: Translation2d) -> Rect:
        return cls(min_point, min_point + size)

    def dimensions(self) -> Translation2d:
        return self.max_point - self.min_point

    def center(self) -> Translation2d:
        return (self.min_point + self.max_point) / 2

    def width(self) -> float:
        return self.max_point.x() - self.min_point.x()

    def height(self) -> float:
        return self.max_point.y() - self.min_point.y()

    def contains(self, point: Translation2d) -> bool:
        """Whether the point lies strictly inside the rectangle."""
        x_in = self.min_point.x() < point.x() < self.max_point.x()
        y_in = self.min_point.y() < point.y() < self.max_point.y()
        return x_in and y_in
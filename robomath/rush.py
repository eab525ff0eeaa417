"""Heading planning for a rush arm mounted on the side of the robot."""

from __future__ import annotations

import logging

from robomath.pose2d import Pose2d
from robomath.rotation2d import from_degrees
from robomath.translation2d import Translation2d

_log = logging.getLogger(__name__)

RUSH_ARM_OFFSET = 7.0
"""Distance from the robot's centre to the rush arm, along its right side."""


def rush_heading(toward_point: Translation2d, from_pose: Pose2d) -> float:
    """Heading in degrees, in [0, 360), that points the rush arm at a target.

    The arm sits RUSH_ARM_OFFSET to the right of the pose (90 degrees clockwise
    of its heading).
    """
    angle_to_arm = from_degrees(from_pose.rotation().degrees() - 90)
    arm_point = from_pose.translation() + Translation2d.from_polar(RUSH_ARM_OFFSET, angle_to_arm)
    delta = toward_point - arm_point
    heading = delta.theta().wrapped_degrees_360()
    _log.debug(
        "rush arm point: (%f, %f), angle to rush arm: %f",
        arm_point.x(),
        arm_point.y(),
        angle_to_arm.wrapped_degrees_360(),
    )
    _log.debug("rush arm delta: (%f, %f), rush heading: %f", delta.x(), delta.y(), heading)
    return heading


def last_rush_points(
    second_last_point: Translation2d,
    final_rush_point: Translation2d,
    toward_point: Translation2d,
    bank_radius: float,
) -> list[Translation2d]:
    """The last path points of a rush, with a point inserted to bank into the final heading."""
    approach = final_rush_point - second_last_point
    final_heading = rush_heading(toward_point, Pose2d(final_rush_point, approach.theta()))
    offset = Translation2d.from_polar(bank_radius, from_degrees(final_heading))
    inserted = final_rush_point - offset
    return [second_last_point, inserted, final_rush_point]
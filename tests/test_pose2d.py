import pytest
from hypothesis import given
from hypothesis import strategies as st

from robomath.pose2d import Pose2d, wrapped_pose_mean
from robomath.rotation2d import Rotation2d, from_degrees
from robomath.transform2d import Transform2d
from robomath.translation2d import Translation2d

coords = st.floats(min_value=-100, max_value=100, allow_nan=False)
angles = st.floats(min_value=-10, max_value=10, allow_nan=False)


def test_default_is_origin():
    assert Pose2d() == Pose2d.from_xy(0, 0, 0)


def test_components():
    pose = Pose2d.from_xy(19.4, 42.4, from_degrees(-10))
    assert pose.x() == 19.4
    assert pose.y() == 42.4
    assert pose.translation() == Translation2d(19.4, 42.4)
    assert pose.rotation() == from_degrees(-10)


def test_from_vector():
    assert Pose2d.from_vector([1.0, 2.0, 0.5]) == Pose2d.from_xy(1.0, 2.0, 0.5)
    with pytest.raises(ValueError):
        Pose2d.from_vector([1.0, 2.0, 3.0, 4.0])


def test_with_rotation_returns_new_pose():
    pose = Pose2d.from_xy(1, 2, 0)
    turned = pose.with_rotation(from_degrees(90))
    assert turned.translation() == pose.translation()
    assert turned.rotation() == from_degrees(90)
    assert pose.rotation() == Rotation2d(0)


@given(coords, coords, angles, coords, coords, angles)
def test_subtract_then_add_round_trip(x1, y1, r1, x2, y2, r2):
    a = Pose2d.from_xy(x1, y1, r1)
    b = Pose2d.from_xy(x2, y2, r2)
    assert b + (a - b) == a


@given(coords, coords, angles)
def test_add_matches_transform_by(x, y, r):
    pose = Pose2d.from_xy(1, -1, 0.2)
    t = Transform2d.from_xy(x, y, r)
    assert pose + t == pose.transform_by(t)


@given(coords, coords, angles)
def test_relative_to_self_is_origin(x, y, r):
    pose = Pose2d.from_xy(x, y, r)
    assert pose.relative_to(pose) == Pose2d()


@given(coords, coords, angles)
def test_relative_to_origin_is_identity(x, y, r):
    pose = Pose2d.from_xy(x, y, r)
    assert pose.relative_to(Pose2d()) == pose


@given(coords, coords, angles, coords, coords, angles)
def test_relative_to_maps_back(x1, y1, r1, x2, y2, r2):
    pose = Pose2d.from_xy(x1, y1, r1)
    frame = Pose2d.from_xy(x2, y2, r2)
    rel = pose.relative_to(frame)
    back = frame.translation() + rel.translation().rotate_by(frame.rotation())
    assert abs(back.x() - pose.x()) < 1e-6
    assert abs(back.y() - pose.y()) < 1e-6
    assert frame.rotation() + rel.rotation() == pose.rotation()


@given(coords, coords, st.floats(min_value=-1, max_value=1))
def test_scale_round_trip(x, y, r):
    pose = Pose2d.from_xy(x, y, r)
    assert (pose * 4) / 4 == pose


def test_mean_of_identical_poses():
    pose = Pose2d.from_xy(3, 4, from_degrees(30))
    assert wrapped_pose_mean([pose, pose, pose]) == pose


def test_mean_wraps_heading():
    result = wrapped_pose_mean(
        [Pose2d.from_xy(0, 0, from_degrees(350)), Pose2d.from_xy(2, 4, from_degrees(10))]
    )
    assert result.translation() == Translation2d(1, 2)
    assert result.rotation() == from_degrees(0)


def test_mean_of_nothing_raises():
    with pytest.raises(ValueError):
        wrapped_pose_mean([])


def test_comparison_with_other_type():
    assert (Pose2d() == 5) is False


def test_repr_prefix():
    assert repr(Pose2d.from_xy(1, 2, 0)).startswith("Pose2d[x: 1.0, y: 2.0")
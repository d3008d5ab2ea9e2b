import pytest

from hexscene.aabb import AABB2D
from hexscene.renderer import Vector3


def test_requires_four_corners():
    with pytest.raises(ValueError):
        AABB2D((Vector3(),) * 3)


def test_from_bounds_corners():
    box = AABB2D.from_bounds(-2.0, -3.0, 4.0, 5.0)
    assert box.corners[0] == Vector3(-2.0, 0.0, -3.0)
    assert box.corners[3] == Vector3(4.0, 0.0, 5.0)


def test_point_sharing_x_with_corner_is_inside():
    box = AABB2D((Vector3(1.0, 2.0), Vector3(3.0, 2.0), Vector3(1.0, 4.0), Vector3(3.0, 4.0)))
    points = [Vector3(9.0, 9.0)] * 5 + [Vector3(3.0, 9.0)]
    assert box.points_inside(points) is True


def test_point_sharing_y_with_corner_is_inside():
    box = AABB2D((Vector3(1.0, 2.0), Vector3(3.0, 2.0), Vector3(1.0, 4.0), Vector3(3.0, 4.0)))
    assert box.points_inside([Vector3(9.0, 4.0)]) is True


def test_points_sharing_nothing_are_outside():
    box = AABB2D((Vector3(1.0, 2.0), Vector3(3.0, 2.0), Vector3(1.0, 4.0), Vector3(3.0, 4.0)))
    assert box.points_inside([Vector3(2.0, 3.0)] * 6) is False


def test_only_first_six_points_are_checked():
    box = AABB2D((Vector3(1.0, 2.0), Vector3(3.0, 2.0), Vector3(1.0, 4.0), Vector3(3.0, 4.0)))
    points = [Vector3(2.0, 3.0)] * 6 + [Vector3(1.0, 2.0)]
    assert box.points_inside(points) is False
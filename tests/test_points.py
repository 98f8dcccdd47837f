import dataclasses

import pytest

from geoshapes.points import Point2D, Point3D


def test_point2d_accessors():
    p = Point2D(1.5, -2.0)
    assert p.x == 1.5
    assert p.y == -2.0
    assert tuple(p) == (1.5, -2.0)


def test_point3d_extends_point2d():
    p = Point3D(1, 2, 3)
    assert isinstance(p, Point2D)
    assert (p.x, p.y, p.z) == (1, 2, 3)
    assert tuple(p) == (1, 2, 3)


def test_point3d_projection_drops_z():
    assert Point3D(4, 5, 6).xy() == Point2D(4, 5)


def test_points_are_immutable():
    p = Point3D(0, 0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.z = 1


def test_points_accept_any_real():
    p = Point2D(float("-inf"), -1e300)
    assert p.x == float("-inf")
    assert Point2D(0, 0) != Point3D(0, 0, 0)

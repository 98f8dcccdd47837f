import dataclasses
from math import pi

import pytest

from geoshapes.points import Point2D, Point3D
from geoshapes.shapes import (
    Circle, Cube, InvalidDimension, Rectangle, Shape, Shape2D, Shape3D, Sphere, Square,
)

O2 = Point2D(0, 0)
O3 = Point3D(0, 0, 0)
SIZES = [0, 0.5, 1, 3, 3.5, 10, 1e3]


# ---------- формули ----------
@pytest.mark.parametrize("r", SIZES)
def test_circle(r):
    c = Circle(O2, r)
    assert c.area() == pytest.approx(pi * r ** 2)
    assert c.perimeter() == pytest.approx(2 * pi * r)


@pytest.mark.parametrize("w,h", [(0, 0), (1, 2), (3.5, 0.25), (10, 10)])
def test_rectangle(w, h):
    rect = Rectangle(O2, w, h)
    assert rect.area() == pytest.approx(w * h)
    assert rect.perimeter() == pytest.approx(2 * (w + h))


@pytest.mark.parametrize("s", SIZES)
def test_square(s):
    sq = Square(O2, s)
    assert sq.area() == pytest.approx(s ** 2)
    assert sq.perimeter() == pytest.approx(4 * s)
    assert sq.area() == pytest.approx(Rectangle(O2, s, s).area())


@pytest.mark.parametrize("r", SIZES)
def test_sphere(r):
    sp = Sphere(O3, r)
    assert sp.volume() == pytest.approx(4 / 3 * pi * r ** 3)
    assert sp.area() == pytest.approx(4 * pi * r ** 2)
    # периметр делеговано агрегованому колу
    assert sp.perimeter() == Circle(O2, r).perimeter()


@pytest.mark.parametrize("s", SIZES)
def test_cube(s):
    cb = Cube(O3, s)
    assert cb.volume() == pytest.approx(s ** 3)
    assert cb.area() == pytest.approx(6 * s ** 2)
    assert cb.perimeter() == 0


def test_reference_point_does_not_affect_measures():
    far = Point3D(-7, 100, 42)
    assert Sphere(far, 2).volume() == Sphere(O3, 2).volume()
    assert Cube(far, 2).area() == Cube(O3, 2).area()
    assert Circle(far.xy(), 2).area() == Circle(O2, 2).area()


# ---------- конкретні сценарії ----------
def test_scenario_circle():
    c = Circle(O2, 3.5)
    assert c.area() == pytest.approx(38.4845, abs=1e-4)
    assert c.perimeter() == pytest.approx(21.9911, abs=1e-4)


def test_scenario_square():
    sq = Square(O2, 3)
    assert sq.area() == 9
    assert sq.perimeter() == 12


def test_scenario_sphere():
    sp = Sphere(O3, 3.5)
    assert sp.area() == pytest.approx(153.938, abs=1e-3)
    assert sp.perimeter() == pytest.approx(21.9911, abs=1e-4)
    assert sp.volume() == pytest.approx(179.594, abs=1e-3)


def test_scenario_cube():
    cb = Cube(O3, 3)
    assert cb.area() == 54
    assert cb.perimeter() == 0
    assert cb.volume() == 27


# ---------- ієрархія / композиція ----------
def test_hierarchy():
    for s in (Circle(O2, 1), Rectangle(O2, 1, 2), Square(O2, 1)):
        assert isinstance(s, Shape2D) and isinstance(s, Shape)
        assert not isinstance(s, Shape3D)
    for s in (Sphere(O3, 1), Cube(O3, 1)):
        assert isinstance(s, Shape3D) and isinstance(s, Shape)


def test_abstract_shapes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Shape()
    with pytest.raises(TypeError):
        Shape3D()


def test_sphere_composes_circle_from_center_xy():
    sp = Sphere(Point3D(1, 2, 3), 4)
    assert sp.circle == Circle(Point2D(1, 2), 4)
    assert sp.radius == 4


def test_cube_composes_square_and_exposes_edge():
    cb = Cube(Point3D(1, 2, 3), 5)
    assert cb.square == Square(Point2D(1, 2), 5)
    assert cb.edge == 5


def test_shapes_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Circle(O2, 1).radius = 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        Cube(O3, 1).side = 2


def test_build_from_coordinates():
    assert Circle.at(1, 2, 3) == Circle(Point2D(1, 2), 3)
    assert Rectangle.at(0, 0, 2, 5) == Rectangle(O2, 2, 5)
    assert Square.at(-1, -1, 4).point == Point2D(-1, -1)


# ---------- розміри ----------
@pytest.mark.parametrize("make", [
    lambda v: Circle(O2, v),
    lambda v: Rectangle(O2, v, 1),
    lambda v: Rectangle(O2, 1, v),
    lambda v: Square(O2, v),
    lambda v: Sphere(O3, v),
    lambda v: Cube(O3, v),
])
@pytest.mark.parametrize("bad", [-1, -1e-12, float("nan"), float("inf"), float("-inf")])
def test_invalid_dimensions_rejected(make, bad):
    with pytest.raises(InvalidDimension):
        make(bad)


def test_invalid_dimension_is_value_error():
    with pytest.raises(ValueError, match="Sphere: radius"):
        Sphere(O3, -2)
    with pytest.raises(InvalidDimension) as exc_info:
        Rectangle(O2, 1, -3)
    e = exc_info.value
    assert (e.shape, e.name, e.value) == ("Rectangle", "height", -3)


def test_zero_dimensions_accepted():
    assert Circle(O2, 0).area() == 0
    assert Cube(O3, 0).volume() == 0
    assert Sphere(O3, 0).perimeter() == 0

"""
Ієрархія фігур: Shape -> Shape2D / Shape3D -> конкретні фігури.

Shape3D не прибирає perimeter() з інтерфейсу, а лише «знецінює» його до 0
і додає нову операцію volume(). Sphere перевизначає perimeter (довжина кола
агрегованого Circle), Cube — ні: периметр куба неоднозначний
(по ребрах? по ребрах і діагоналях?), тому лишається 0.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from math import isfinite, pi

from .points import Point2D, Point3D


class InvalidDimension(ValueError):
    """Від'ємний, нескінченний або NaN розмір фігури."""

    def __init__(self, shape: str, name: str, value: float):
        super().__init__(f"{shape}: {name} must be a finite non-negative number, got {value!r}")
        self.shape = shape
        self.name = name
        self.value = value


def _check_dimension(shape: str, name: str, value: float) -> None:
    # `not >=` ловить від'ємні й NaN, isfinite — нескінченність; нуль дозволено
    if not value >= 0 or not isfinite(value):
        raise InvalidDimension(shape, name, value)


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def perimeter(self) -> float:
        ...


class Shape2D(Shape):
    """Плоска фігура з опорною точкою Point2D (поле `point`)."""

    @classmethod
    def at(cls, x: float, y: float, *dims: float):
        """Побудова з координат замість готової точки: Circle.at(0, 0, 3.5)."""
        return cls(Point2D(x, y), *dims)


class Shape3D(Shape):
    """Тіло з опорною точкою Point3D (поле `point`)."""

    def perimeter(self) -> float:
        # периметр охоплює плоску фігуру — для тіла не має сенсу
        return 0.0

    @abstractmethod
    def volume(self) -> float:
        ...


# ---------------- 2D ----------------
@dataclass(frozen=True)
class Circle(Shape2D):
    point: Point2D
    radius: float

    def __post_init__(self):
        _check_dimension("Circle", "radius", self.radius)

    def area(self) -> float:
        """πr²"""
        return pi * self.radius * self.radius

    def perimeter(self) -> float:
        """Довжина кола: 2πr."""
        return 2 * pi * self.radius


@dataclass(frozen=True)
class Rectangle(Shape2D):
    point: Point2D
    width: float
    height: float

    def __post_init__(self):
        _check_dimension("Rectangle", "width", self.width)
        _check_dimension("Rectangle", "height", self.height)

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * self.width + 2 * self.height


@dataclass(frozen=True)
class Square(Shape2D):
    point: Point2D
    side: float

    def __post_init__(self):
        _check_dimension("Square", "side", self.side)

    def area(self) -> float:
        return self.side * self.side

    def perimeter(self) -> float:
        return self.side * 4


# ---------------- 3D ----------------
@dataclass(frozen=True)
class Sphere(Shape3D):
    """
    Куля з центром `point`. Агрегує Circle за значенням: центр кола — (x, y)
    центру кулі, радіус той самий.
    """
    point: Point3D
    radius: float
    circle: Circle = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        _check_dimension("Sphere", "radius", self.radius)
        object.__setattr__(self, "circle", Circle(self.point.xy(), self.radius))

    def area(self) -> float:
        """Площа поверхні: 4πr² (не через площу агрегованого кола)."""
        r = self.circle.radius
        return 4 * pi * r * r

    def perimeter(self) -> float:
        """Довжина кола агрегованого Circle."""
        return self.circle.perimeter()

    def volume(self) -> float:
        """4/3·πr³"""
        r = self.circle.radius
        return 4.0 / 3.0 * pi * r * r * r


@dataclass(frozen=True)
class Cube(Shape3D):
    """
    Куб з опорною точкою `point`, агрегує Square зі стороною `side`.
    perimeter() навмисно не перевизначено — лишається 0 від Shape3D.
    """
    point: Point3D
    side: float
    square: Square = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        _check_dimension("Cube", "side", self.side)
        object.__setattr__(self, "square", Square(self.point.xy(), self.side))

    @property
    def edge(self) -> float:
        """Ребро куба = сторона агрегованого квадрата."""
        return self.square.side

    def area(self) -> float:
        """Шість граней-квадратів: 6a²."""
        return self.square.area() * 6

    def volume(self) -> float:
        a = self.square.side
        return a * a * a

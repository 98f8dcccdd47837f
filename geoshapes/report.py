from __future__ import annotations
from typing import Iterable, List, Optional

from .points import Point2D, Point3D
from .shapes import Circle, Cube, Rectangle, Shape, Sphere, Square


def fmt(value: float) -> str:
    """Число як у std::ostream за замовчуванням: 6 значущих цифр (%g)."""
    return f"{value:g}"


def describe(shape: Shape) -> List[str]:
    """Підписані рядки для однієї фігури."""
    if isinstance(shape, Circle):
        return [
            f"A circle with radius {fmt(shape.radius)}",
            f" Circle's area is {fmt(shape.area())}",
            f" Circle's circumference is {fmt(shape.perimeter())}",
        ]
    if isinstance(shape, Rectangle):
        return [
            f"A rectangle with width {fmt(shape.width)} and height {fmt(shape.height)}",
            f" Rectangle's area is {fmt(shape.area())}",
            f" Rectangle's perimeter is {fmt(shape.perimeter())}",
        ]
    if isinstance(shape, Square):
        return [
            f"A square with side {fmt(shape.side)}",
            f" Square's area is {fmt(shape.area())}",
            f" Square's perimeter is {fmt(shape.perimeter())}",
        ]
    if isinstance(shape, Sphere):
        return [
            f"A sphere with radius {fmt(shape.radius)}",
            f" Sphere's surface area is {fmt(shape.area())}",
            f" Sphere's circumference is {fmt(shape.perimeter())}",
            f" Sphere's volume is {fmt(shape.volume())}",
        ]
    if isinstance(shape, Cube):
        return [
            f"A cube with edge {fmt(shape.edge)}",
            f" Cube's surface area is {fmt(shape.area())}",
            f" Cube's perimeter is {fmt(shape.perimeter())}",
            f" Cube's volume is {fmt(shape.volume())}",
        ]
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def demo_shapes() -> List[Shape]:
    """Фіксований набір: коло, квадрат, куля, куб з центрами в нулі."""
    p2d0 = Point2D(0, 0)
    p3d0 = Point3D(0, 0, 0)
    return [
        Circle(p2d0, 3.5),
        Square(p2d0, 3),
        Sphere(p3d0, 3.5),
        Cube(p3d0, 3),
    ]


def report(shapes: Optional[Iterable[Shape]] = None) -> List[str]:
    if shapes is None:
        shapes = demo_shapes()
    lines: List[str] = []
    for s in shapes:
        lines.extend(describe(s))
    return lines


def main() -> None:
    for line in report():
        print(line)


if __name__ == "__main__":
    main()

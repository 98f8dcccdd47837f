# examples/main.py
from __future__ import annotations

from geoshapes.points import Point2D, Point3D
from geoshapes.shapes import Circle, Square, Sphere, Cube
from geoshapes.report import describe


def main():
    # --- 1) Опорні точки ---
    p2d0 = Point2D(0, 0)
    p3d0 = Point3D(0, 0, 0)

    # --- 2) По одній фігурі кожного виду ---
    circle = Circle(p2d0, 3.5)
    square = Square(p2d0, 3)
    sphere = Sphere(p3d0, 3.5)
    cube = Cube(p3d0, 3)

    # --- 3) Поліморфний вивід ---
    for shape in (circle, square, sphere, cube):
        for line in describe(shape):
            print(line)


if __name__ == "__main__":
    main()

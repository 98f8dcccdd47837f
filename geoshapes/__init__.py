"""
geoshapes — проста ієрархія 2D/3D фігур (площа, периметр, об'єм)
через поліморфні виклики. Навчальний приклад до «structs vs objects».
"""

__version__ = "0.1.0"

from geoshapes.points import Point2D, Point3D
from geoshapes.shapes import (
    Shape, Shape2D, Shape3D, InvalidDimension,
    Circle, Rectangle, Square, Sphere, Cube,
)
from geoshapes.report import describe, report

__all__ = [
    "Point2D", "Point3D",
    "Shape", "Shape2D", "Shape3D", "InvalidDimension",
    "Circle", "Rectangle", "Square", "Sphere", "Cube",
    "describe", "report", "__version__",
]

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """Точка на площині. Жодної валідації — будь-які дійсні координати."""
    x: float
    y: float

    def __iter__(self):
        yield self.x; yield self.y


@dataclass(frozen=True)
class Point3D(Point2D):
    """Точка у просторі: Point2D + координата z."""
    z: float

    def __iter__(self):
        yield self.x; yield self.y; yield self.z

    def xy(self) -> Point2D:
        """Проєкція на площину XY (z відкидається)."""
        return Point2D(self.x, self.y)

"""
Чисельна перевірка формул: семплюємо межу фігури і будуємо опуклу оболонку
(SciPy ConvexHull, Qhull під капотом).

Для 2D-оболонки у SciPy `volume` — це площа, а `area` — периметр;
для 3D `area` — площа поверхні, `volume` — об'єм.
Багатокутні фігури (Rectangle, Square, Cube) відтворюються точно,
криволінійні (Circle, Sphere) — знизу, із ростом кількості точок.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from math import pi, sqrt
from typing import Optional

import numpy as np

from .shapes import Circle, Cube, Rectangle, Shape, Shape3D, Sphere, Square

logger = logging.getLogger(__name__)

CIRCLE_SAMPLES = 720     # точок на колі
SPHERE_SAMPLES = 2000    # точок на сфері (решітка Фібоначчі)
GOLDEN_ANGLE = pi * (3.0 - sqrt(5.0))


@dataclass(frozen=True)
class Measures:
    area: float
    perimeter: Optional[float]
    volume: Optional[float] = None


def exact(shape: Shape) -> Measures:
    """Значення за замкненими формулами — для порівняння з estimate()."""
    if isinstance(shape, Shape3D):
        perimeter = shape.perimeter() if isinstance(shape, Sphere) else None
        return Measures(shape.area(), perimeter, shape.volume())
    return Measures(shape.area(), shape.perimeter())


def rectangle_corners(cx: float, cy: float, w: float, h: float) -> np.ndarray:
    hw, hh = 0.5 * w, 0.5 * h
    return np.array([
        (cx - hw, cy - hh),
        (cx + hw, cy - hh),
        (cx + hw, cy + hh),
        (cx - hw, cy + hh),
    ], dtype=float)


def _fibonacci_sphere(n: int) -> np.ndarray:
    i = np.arange(n, dtype=float) + 0.5
    z = 1.0 - 2.0 * i / n
    r = np.sqrt(1.0 - z * z)
    phi = GOLDEN_ANGLE * i
    return np.column_stack((r * np.cos(phi), r * np.sin(phi), z))


def sample_boundary(shape: Shape, n: Optional[int] = None) -> np.ndarray:
    """
    Точки на межі фігури як масив (N, 2) для плоских фігур або (N, 3) для тіл.
    Опорна точка фігури трактується як центр. `n` стосується лише Circle/Sphere.
    """
    if isinstance(shape, Circle):
        n = CIRCLE_SAMPLES if n is None else n
        if n < 3:
            raise ValueError("Need at least 3 samples for a circle")
        t = np.linspace(0.0, 2.0 * pi, n, endpoint=False)
        p = shape.point
        return np.column_stack((p.x + shape.radius * np.cos(t), p.y + shape.radius * np.sin(t)))

    if isinstance(shape, Rectangle):
        return rectangle_corners(shape.point.x, shape.point.y, shape.width, shape.height)

    if isinstance(shape, Square):
        return rectangle_corners(shape.point.x, shape.point.y, shape.side, shape.side)

    if isinstance(shape, Sphere):
        n = SPHERE_SAMPLES if n is None else n
        if n < 4:
            raise ValueError("Need at least 4 samples for a sphere")
        return np.asarray(tuple(shape.point), dtype=float) + shape.radius * _fibonacci_sphere(n)

    if isinstance(shape, Cube):
        h = 0.5 * shape.edge
        offsets = np.array([(sx, sy, sz) for sx in (-h, h) for sy in (-h, h) for sz in (-h, h)], dtype=float)
        return np.asarray(tuple(shape.point), dtype=float) + offsets

    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def estimate(shape: Shape, samples: Optional[int] = None, backend: str = "scipy") -> Measures:
    """
    Оцінка площі/периметра/об'єму через опуклу оболонку семплів межі.
    Для Sphere периметр оцінюється на агрегованому колі з тією ж кількістю семплів; для Cube — None
    (периметр куба не визначено).
    """
    if backend.lower() != "scipy":
        raise ValueError(f"Unknown backend: {backend}")
    try:
        from scipy.spatial import ConvexHull, QhullError
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', but SciPy is not installed. "
            "Install scipy or use exact() instead."
        ) from e

    if shape.area() == 0.0:
        raise ValueError(f"Degenerate {type(shape).__name__}: zero-size shape has no hull")

    pts = sample_boundary(shape, samples)
    try:
        hull = ConvexHull(pts)
    except QhullError as e:
        # надто тонка фігура: Qhull не може побудувати початковий симплекс
        raise ValueError(f"Degenerate {type(shape).__name__}: samples span no hull") from e
    logger.debug("%s: %d samples, %d hull facets", type(shape).__name__, len(pts), len(hull.simplices))

    if pts.shape[1] == 2:
        return Measures(area=float(hull.volume), perimeter=float(hull.area))

    perimeter = None
    if isinstance(shape, Sphere):
        perimeter = estimate(shape.circle, samples).perimeter
    return Measures(area=float(hull.area), perimeter=perimeter, volume=float(hull.volume))

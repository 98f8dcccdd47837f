"""
Малювання фігур у matplotlib: плоскі — контуром на 2D-осях,
тіла — каркасом на осях з projection="3d".
"""

from __future__ import annotations
from math import pi
from typing import Iterable, List, Optional, Tuple

import numpy as np
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

from .numeric import rectangle_corners
from .shapes import Circle, Cube, Rectangle, Shape, Shape3D, Sphere, Square

OUTLINE_SAMPLES = 120
WIREFRAME_SAMPLES = 24
CUBE_EDGES = [(0, 1), (0, 2), (0, 4), (1, 3), (1, 5), (2, 3),
              (2, 6), (3, 7), (4, 5), (4, 6), (5, 7), (6, 7)]


def outline(shape: Shape, n: int = OUTLINE_SAMPLES) -> np.ndarray:
    """Замкнений контур плоскої фігури: масив (N+1, 2), остання точка = перша."""
    if isinstance(shape, Circle):
        t = np.linspace(0.0, 2.0 * pi, n + 1)
        return np.column_stack((shape.point.x + shape.radius * np.cos(t),
                                shape.point.y + shape.radius * np.sin(t)))
    if isinstance(shape, Rectangle):
        pts = rectangle_corners(shape.point.x, shape.point.y, shape.width, shape.height)
    elif isinstance(shape, Square):
        pts = rectangle_corners(shape.point.x, shape.point.y, shape.side, shape.side)
    else:
        raise TypeError(f"outline() needs a 2D shape, got {type(shape).__name__}")
    return np.vstack((pts, pts[:1]))


def _cube_vertices(cube: Cube) -> np.ndarray:
    h = 0.5 * cube.edge
    c = np.asarray(tuple(cube.point), dtype=float)
    # порядок індексів узгоджений з CUBE_EDGES: біт 2 -> x, біт 1 -> y, біт 0 -> z
    return c + np.array([(sx, sy, sz) for sx in (-h, h) for sy in (-h, h) for sz in (-h, h)], dtype=float)


def _bounds(shape: Shape) -> Tuple[np.ndarray, np.ndarray]:
    if isinstance(shape, Sphere):
        c = np.asarray(tuple(shape.point), dtype=float)
        return c - shape.radius, c + shape.radius
    if isinstance(shape, Cube):
        v = _cube_vertices(shape)
        return v.min(axis=0), v.max(axis=0)
    o = outline(shape)
    return o.min(axis=0), o.max(axis=0)


def draw(ax, shape: Shape, n: Optional[int] = None, **kwargs) -> List:
    """
    Намалювати фігуру на осях `ax`. Повертає список створених artists.
    `n` — точок на контурі (OUTLINE_SAMPLES) або меридіанів/паралелей кулі
    (WIREFRAME_SAMPLES); куб малюється по 12 ребрах незалежно від `n`.
    Тіло на 2D-осях — TypeError.
    """
    is_3d = getattr(ax, "name", "") == "3d"
    if isinstance(shape, Shape3D):
        if not is_3d:
            raise TypeError(f"{type(shape).__name__} needs a 3D axes (projection='3d')")
        if isinstance(shape, Sphere):
            n = WIREFRAME_SAMPLES if n is None else n
            u = np.linspace(0.0, 2.0 * pi, 2 * n)
            v = np.linspace(0.0, pi, n)
            c, r = shape.point, shape.radius
            xs = c.x + r * np.outer(np.cos(u), np.sin(v))
            ys = c.y + r * np.outer(np.sin(u), np.sin(v))
            zs = c.z + r * np.outer(np.ones_like(u), np.cos(v))
            return [ax.plot_wireframe(xs, ys, zs, linewidth=0.5, **kwargs)]
        vs = _cube_vertices(shape)
        artists = []
        for a, b in CUBE_EDGES:
            pa, pb = vs[a], vs[b]
            artists.extend(ax.plot([pa[0], pb[0]], [pa[1], pb[1]], [pa[2], pb[2]], **kwargs))
        return artists

    o = outline(shape, OUTLINE_SAMPLES if n is None else n)
    if is_3d:
        # плоска фігура на 3D-осях — у площині z = 0
        return ax.plot(o[:, 0], o[:, 1], np.zeros(len(o)), **kwargs)
    return ax.plot(o[:, 0], o[:, 1], **kwargs)


def set_equal_limits(ax, shapes: Iterable[Shape]) -> None:
    """Однаковий масштаб по всіх осях (куб/квадрат, що охоплює всі фігури)."""
    bounds = [_bounds(s) for s in shapes]
    if not bounds:
        return
    # плоскі фігури на 3D-осях мають лише (x, y) — порівнюємо по спільних осях
    dim = min(len(lo) for lo, _ in bounds)
    lo = np.min([b[0][:dim] for b in bounds], axis=0)
    hi = np.max([b[1][:dim] for b in bounds], axis=0)
    max_range = float(np.max(hi - lo))
    if max_range == 0:
        max_range = 1.0
    mid = 0.5 * (lo + hi)
    ax.set_xlim(mid[0] - max_range / 2, mid[0] + max_range / 2)
    ax.set_ylim(mid[1] - max_range / 2, mid[1] + max_range / 2)
    if ax.name == "3d":
        if dim > 2:
            ax.set_zlim(mid[2] - max_range / 2, mid[2] + max_range / 2)
        else:
            ax.set_zlim(-max_range / 2, max_range / 2)
    else:
        ax.set_aspect("equal")


def figure(shapes: Optional[Iterable[Shape]] = None) -> Figure:
    """
    Figure з двома осями: ліворуч плоскі фігури, праворуч тіла.
    Без pyplot — підходить і для вбудовування (FigureCanvasTkAgg), і для savefig.
    """
    if shapes is None:
        from .report import demo_shapes
        shapes = demo_shapes()
    shapes = list(shapes)
    flat = [s for s in shapes if not isinstance(s, Shape3D)]
    solids = [s for s in shapes if isinstance(s, Shape3D)]

    fig = Figure(figsize=(8, 4))
    ax2 = fig.add_subplot(121)
    ax3 = fig.add_subplot(122, projection="3d")

    for s in flat:
        draw(ax2, s, label=type(s).__name__)
    for s in solids:
        draw(ax3, s)
    set_equal_limits(ax2, flat)
    set_equal_limits(ax3, solids)

    ax2.set_xlabel("X")
    ax2.set_ylabel("Y")
    ax2.set_title("2D shapes")
    if flat:
        ax2.legend()
    ax3.set_xlabel("X")
    ax3.set_ylabel("Y")
    ax3.set_zlabel("Z")
    ax3.set_title("3D shapes")
    return fig

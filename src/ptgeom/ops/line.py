"""Line and segment geometry.

A line is a pair of points ``[a, b]``. The ``*_path_2d`` functions treat it as
infinite; the ``*_line_2d`` functions treat it as the bounded segment between
``a`` and ``b``. Operations with no geometric answer (vertical slope, parallel
lines, an intersection outside a segment) return ``None``.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..models import Intercept
from ..utils.points import GroupLike, PointLike, as_point, cross, magnitude, project
from .geom import interpolate, within_bound

logger = logging.getLogger(__name__)


def slope(p1: PointLike, p2: PointLike) -> Optional[float]:
    """Slope of the line through ``p1`` and ``p2``; ``None`` when vertical."""
    dx = p2[0] - p1[0]
    if dx == 0:
        return None
    return (p2[1] - p1[1]) / dx


def intercept(p1: PointLike, p2: PointLike) -> Optional[Intercept]:
    """Slope form of the line through ``p1`` and ``p2``.

    Returns ``None`` for a vertical line. A horizontal line has no
    ``x_intercept``.
    """
    m = slope(p1, p2)
    if m is None:
        return None
    c = p1[1] - m * p1[0]
    return Intercept(slope=m, y_intercept=c, x_intercept=None if m == 0 else -c / m)


def collinear(p1: PointLike, p2: PointLike, p3: PointLike) -> bool:
    """Exact test; round floating point inputs before calling."""
    a = as_point(p2) - as_point(p1)
    b = as_point(p1) - as_point(p3)
    return bool(np.all(cross(a, b) == 0))


def perpendicular_from_pt(
    pt: PointLike, line: GroupLike, as_projection: bool = False
) -> np.ndarray:
    """Foot of the perpendicular from ``pt`` onto the infinite ``line``.

    Args:
        pt: Target point.
        line: Two points defining the line.
        as_projection: Return the vector from ``pt`` to the foot instead.

    Returns:
        The foot point, or the perpendicular vector when ``as_projection``.
    """
    p = as_point(pt)
    a = as_point(line[0]) - as_point(line[1])
    b = as_point(line[1]) - p
    proj = b - project(b, a)
    return proj if as_projection else proj + p


def distance_from_pt(pt: PointLike, line: GroupLike) -> float:
    return magnitude(perpendicular_from_pt(pt, line, as_projection=True))


def intersect_path_2d(line_a: GroupLike, line_b: GroupLike) -> Optional[np.ndarray]:
    """Intersection of two infinite lines.

    Two vertical lines never intersect, even when they coincide. Coincident
    non-vertical lines "intersect" at the first point of ``line_a``.
    """
    a = intercept(line_a[0], line_a[1])
    b = intercept(line_b[0], line_b[1])
    pa = line_a[0]
    pb = line_b[0]

    if a is None:
        if b is None:
            logger.debug("Both lines are vertical; no intersection")
            return None
        y = -b.slope * (pb[0] - pa[0]) + pb[1]
        return np.array([pa[0], y], dtype=np.float64)

    if b is None:
        y = -a.slope * (pa[0] - pb[0]) + pa[1]
        return np.array([pb[0], y], dtype=np.float64)

    if b.slope != a.slope:
        px = (a.slope * pa[0] - b.slope * pb[0] + pb[1] - pa[1]) / (a.slope - b.slope)
        py = a.slope * (px - pa[0]) + pa[1]
        return np.array([px, py], dtype=np.float64)

    if a.y_intercept == b.y_intercept:
        logger.debug("Lines are coincident; using the first point of line_a")
        return np.array([pa[0], pa[1]], dtype=np.float64)
    logger.debug("Lines are parallel; no intersection")
    return None


def intersect_line_2d(line_a: GroupLike, line_b: GroupLike) -> Optional[np.ndarray]:
    """Intersection of two segments, judged by their bounding rectangles."""
    pt = intersect_path_2d(line_a, line_b)
    if pt is None:
        return None
    if within_bound(pt, line_a[0], line_a[1]) and within_bound(
        pt, line_b[0], line_b[1]
    ):
        return pt
    return None


def intersect_line_with_path_2d(
    line: GroupLike, path: GroupLike
) -> Optional[np.ndarray]:
    """Intersection of the segment ``line`` with the infinite ``path``."""
    pt = intersect_path_2d(line, path)
    if pt is None or not within_bound(pt, line[0], line[1]):
        return None
    return pt


def intersect_grid_2d(pt: PointLike, grid_pt: PointLike) -> np.ndarray:
    """Where the grid lines through ``grid_pt`` meet the axis lines through ``pt``.

    The first point is the horizontal intersection ``(grid_x, y)`` and the
    second the vertical one ``(x, grid_y)``.
    """
    return np.array([[grid_pt[0], pt[1]], [pt[0], grid_pt[1]]], dtype=np.float64)


def subpoints(line: GroupLike, num: int) -> np.ndarray:
    """``num`` evenly spaced points strictly between the ends of ``line``."""
    n = min(len(line[0]), len(line[1]))
    pts = [interpolate(line[0], line[1], i / (num + 1)) for i in range(1, num + 1)]
    if not pts:
        return np.empty((0, n), dtype=np.float64)
    return np.vstack(pts)


__all__ = [
    "slope",
    "intercept",
    "collinear",
    "perpendicular_from_pt",
    "distance_from_pt",
    "intersect_path_2d",
    "intersect_line_2d",
    "intersect_line_with_path_2d",
    "intersect_grid_2d",
    "subpoints",
]

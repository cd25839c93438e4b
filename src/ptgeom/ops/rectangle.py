"""Axis-aligned rectangles stored as their two diagonal corners ``[min, max]``."""

from __future__ import annotations

from typing import List

import numpy as np

from ..utils.points import GroupLike, PointLike, as_point


def _extent(p: np.ndarray, width: float, height: float, depth: float) -> np.ndarray:
    return np.array([width, height, depth][: p.size] + [0.0] * (p.size - 3))


def from_top_left(
    top_left: PointLike, width: float, height: float, depth: float = 0
) -> np.ndarray:
    """Rectangle spanning ``width`` × ``height`` (× ``depth`` for 3D corners)."""
    p = as_point(top_left)
    return np.vstack([p, p + _extent(p, width, height, depth)])


def from_center(
    center: PointLike, width: float, height: float, depth: float = 0
) -> np.ndarray:
    p = as_point(center)
    half = _extent(p, width, height, depth) / 2
    return np.vstack([p - half, p + half])


def corners(rect: GroupLike) -> np.ndarray:
    """Corners in order top-left, top-right, bottom-right, bottom-left.

    The order assumes a y-down frame; components beyond ``x`` and ``y`` are
    copied from the first corner.
    """
    p0 = as_point(rect[0])
    p2 = as_point(rect[1])
    top_right = p0.copy()
    top_right[0] = p2[0]
    bottom_right = p0.copy()
    bottom_right[:2] = p2[:2]
    bottom_left = p0.copy()
    bottom_left[1] = p2[1]
    return np.vstack([p0, top_right, bottom_right, bottom_left])


def sides(rect: GroupLike) -> List[np.ndarray]:
    """The four boundary segments: top, right, bottom, left."""
    c = corners(rect)
    return [np.vstack([c[i], c[(i + 1) % 4]]) for i in range(4)]


__all__ = ["from_top_left", "from_center", "corners", "sides"]

"""Builders for 2×3 affine matrices and the point transform applicator.

Every matrix has the layout ``[[a, b, tx], [c, d, ty]]`` and maps ``(x, y)``
to ``(a*x + b*y + tx, c*x + d*y + ty)``. The ``*_at_2d_matrix`` variants pivot
the same transform around an anchor instead of the origin.
"""

from __future__ import annotations

import numpy as np

from .points import PointLike, as_point


def _affine(a: float, b: float, c: float, d: float) -> np.ndarray:
    return np.array([[a, b, 0.0], [c, d, 0.0]], dtype=np.float64)


def _at(m: np.ndarray, anchor: PointLike) -> np.ndarray:
    """Conjugate ``m`` by a translation so it pivots at ``anchor``."""
    at = as_point(anchor)[:2]
    out = m.copy()
    out[:, 2] += at - m[:, :2] @ at
    return out


def rotate_2d_matrix(cos: float, sin: float) -> np.ndarray:
    return _affine(cos, -sin, sin, cos)


def rotate_at_2d_matrix(cos: float, sin: float, anchor: PointLike) -> np.ndarray:
    return _at(rotate_2d_matrix(cos, sin), anchor)


def scale_2d_matrix(sx: float, sy: float) -> np.ndarray:
    return _affine(sx, 0.0, 0.0, sy)


def scale_at_2d_matrix(sx: float, sy: float, anchor: PointLike) -> np.ndarray:
    return _at(scale_2d_matrix(sx, sy), anchor)


def shear_2d_matrix(tx: float, ty: float) -> np.ndarray:
    """Shear with ``x += tx * y`` and ``y += ty * x``."""
    return _affine(1.0, tx, ty, 1.0)


def shear_at_2d_matrix(tx: float, ty: float, anchor: PointLike) -> np.ndarray:
    return _at(shear_2d_matrix(tx, ty), anchor)


def reflect_2d_matrix(p1: PointLike, p2: PointLike) -> np.ndarray:
    """Reflection across the infinite line through ``p1`` and ``p2``."""
    a = as_point(p1)[:2]
    d = as_point(p2)[:2] - a
    length_sq = float(np.dot(d, d))
    if length_sq == 0.0:
        raise ValueError("Reflection line needs two distinct points")
    linear = 2.0 * np.outer(d, d) / length_sq - np.eye(2)
    m = np.zeros((2, 3), dtype=np.float64)
    m[:, :2] = linear
    m[:, 2] = a - linear @ a
    return m


def reflect_at_2d_matrix(
    p1: PointLike, p2: PointLike, anchor: PointLike
) -> np.ndarray:
    """Reflection across the line ``[p1, p2]`` given relative to ``anchor``."""
    return _at(reflect_2d_matrix(p1, p2), anchor)


def transform_2d(pt: PointLike, m: np.ndarray) -> np.ndarray:
    """Apply ``m`` to the first two components of ``pt``; returns a new 2D point."""
    xy = as_point(pt)[:2]
    return m[:, :2] @ xy + m[:, 2]


__all__ = [
    "rotate_2d_matrix",
    "rotate_at_2d_matrix",
    "scale_2d_matrix",
    "scale_at_2d_matrix",
    "shear_2d_matrix",
    "shear_at_2d_matrix",
    "reflect_2d_matrix",
    "reflect_at_2d_matrix",
    "transform_2d",
]

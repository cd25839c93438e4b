"""Point and group helpers backed by NumPy vectors.

A *point* is any 1-D sequence of numbers; the helpers here return fresh
``float64`` arrays unless they are explicitly in-place (:func:`assign`).
A *group* is a 2-D array or a sequence of points.
"""

from __future__ import annotations

import numbers
from typing import List, MutableSequence, Sequence, Tuple, Union

import numpy as np

from ..models import Axis

PointLike = Union[Sequence[float], np.ndarray]
GroupLike = Union[Sequence[PointLike], np.ndarray]
AxisLike = Union[Axis, Tuple[int, int], Sequence[int]]


def as_point(p: PointLike) -> np.ndarray:
    """Return a new ``float64`` vector copied from ``p``."""
    arr = np.array(p, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D point, got shape {arr.shape}")
    return arr


def as_group(pts: GroupLike) -> np.ndarray:
    """Return a new ``(n, d)`` array holding the points of ``pts``."""
    arr = np.array(pts, dtype=np.float64)
    if arr.ndim == 1 and arr.size == 0:
        return arr.reshape(0, 0)
    if arr.ndim != 2:
        raise ValueError(
            f"Expected a group of equal-length points, got shape {arr.shape}"
        )
    return arr


def clone(p: PointLike) -> np.ndarray:
    return as_point(p)


def fill(p: PointLike, value: float) -> np.ndarray:
    """Return a point shaped like ``p`` with every component set to ``value``."""
    return np.full(len(p), value, dtype=np.float64)


def add(a: PointLike, b: PointLike) -> np.ndarray:
    return as_point(a) + as_point(b)


def subtract(a: PointLike, b: PointLike) -> np.ndarray:
    return as_point(a) - as_point(b)


def cross(a: PointLike, b: PointLike) -> np.ndarray:
    """3D cross product; 2D inputs are lifted to ``z = 0``."""
    return np.cross(_lift3(a), _lift3(b))


def project(v: PointLike, onto: PointLike) -> np.ndarray:
    """Vector projection of ``v`` onto ``onto``.

    A zero-length ``onto`` has no direction; the projection is then the zero
    vector.
    """
    vv = as_point(v)
    oo = as_point(onto)
    denom = float(np.dot(oo, oo))
    if denom == 0.0:
        return np.zeros_like(oo)
    return oo * (float(np.dot(vv, oo)) / denom)


def magnitude(v: PointLike) -> float:
    return float(np.linalg.norm(as_point(v)))


def resolve_axis(axis: AxisLike) -> Tuple[int, int]:
    """Turn an :class:`Axis` or an explicit index pair into ``(i, j)``."""
    if isinstance(axis, Axis):
        return axis.value
    if isinstance(axis, str):
        raise ValueError(
            f"Axis must be an Axis member or an index pair, got {axis!r}"
        )
    pair = tuple(int(i) for i in axis)
    if len(pair) != 2 or pair[0] == pair[1] or min(pair) < 0:
        raise ValueError(
            f"Axis must name two distinct component indices, got {axis!r}"
        )
    return pair[0], pair[1]


def take(p: PointLike, axis: AxisLike) -> np.ndarray:
    """Extract the two components named by ``axis`` as a new 2D point."""
    i, j = resolve_axis(axis)
    return np.array([p[i], p[j]], dtype=np.float64)


def assign(p: MutableSequence, axis: AxisLike, values: PointLike) -> None:
    """Write ``values`` into the two components of ``p`` named by ``axis``."""
    i, j = resolve_axis(axis)
    p[i] = values[0]
    p[j] = values[1]


def is_point(ps: Union[PointLike, GroupLike]) -> bool:
    """True when ``ps`` is a single point rather than a group."""
    if isinstance(ps, np.ndarray):
        return ps.ndim == 1
    return len(ps) > 0 and isinstance(ps[0], numbers.Real)


def targets(ps: Union[PointLike, GroupLike]) -> List:
    """List the individual (mutable) points held by ``ps``."""
    if is_point(ps):
        return [ps]
    return list(ps)


def _lift3(p: PointLike) -> np.ndarray:
    arr = as_point(p)
    out = np.zeros(3, dtype=np.float64)
    n = min(3, arr.size)
    out[:n] = arr[:n]
    return out


__all__ = [
    "PointLike",
    "GroupLike",
    "AxisLike",
    "as_point",
    "as_group",
    "clone",
    "fill",
    "add",
    "subtract",
    "cross",
    "project",
    "magnitude",
    "resolve_axis",
    "take",
    "assign",
    "is_point",
    "targets",
]

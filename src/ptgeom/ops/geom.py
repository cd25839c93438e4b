"""Geometry helpers: angles, bounds, interpolation and 2D affine transforms.

The transform functions :func:`rotate_2d`, :func:`scale_2d`, :func:`shear_2d`
and :func:`reflect_2d` write their results back into the points they are
given, component by component, and return the same container. Callers hand
over write access to those points for the duration of the call. Float arrays
or lists should be passed; integer arrays would truncate the results. The
``*ed_2d`` variants (:func:`rotated_2d` etc.) work on a ``float64`` copy and
leave the input untouched.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import EmptyInputError
from ..models import Axis, TableParams
from ..utils.matrix import (
    reflect_2d_matrix,
    reflect_at_2d_matrix,
    rotate_2d_matrix,
    rotate_at_2d_matrix,
    scale_2d_matrix,
    scale_at_2d_matrix,
    shear_2d_matrix,
    shear_at_2d_matrix,
    transform_2d,
)
from ..utils.points import (
    AxisLike,
    GroupLike,
    PointLike,
    as_group,
    as_point,
    assign,
    is_point,
    resolve_axis,
    take,
    targets,
)
from .num import average, bound_value, lerp

logger = logging.getLogger(__name__)

Scale = Union[float, Sequence[float], np.ndarray]
Points = Union[PointLike, GroupLike]


def bound_angle(angle: float) -> float:
    return bound_value(angle, 0, 360)


def bound_radian(angle: float) -> float:
    return bound_value(angle, 0, 2 * math.pi)


def to_radian(angle: float) -> float:
    return math.radians(angle)


def to_degree(radian: float) -> float:
    return math.degrees(radian)


def bounding_box(pts: GroupLike) -> np.ndarray:
    """Return ``[min, max]`` corners enclosing every point of ``pts``."""
    if len(pts) == 0:
        raise EmptyInputError("Cannot compute the bounding box of no points")
    arr = as_group(pts)
    return np.vstack([arr.min(axis=0), arr.max(axis=0)])


def centroid(pts: GroupLike) -> np.ndarray:
    return average(pts)


def interpolate(a: PointLike, b: PointLike, t: float = 0.5) -> np.ndarray:
    """Point at ratio ``t`` from ``a`` to ``b``, over their shared components."""
    n = min(len(a), len(b))
    return np.array([lerp(a[i], b[i], t) for i in range(n)], dtype=np.float64)


def perpendicular(p: PointLike, axis: AxisLike = Axis.XY) -> np.ndarray:
    """The two vectors perpendicular to ``p`` within the plane of ``axis``.

    Returns a ``(2, d)`` group ``[(-y, x), (y, -x)]``; components outside the
    axis pair are copied from ``p``.
    """
    x, y = resolve_axis(axis)
    src = as_point(p)
    pa = src.copy()
    pa[x] = -src[y]
    pa[y] = src[x]
    pb = src.copy()
    pb[x] = src[y]
    pb[y] = -src[x]
    return np.vstack([pa, pb])


def _scale_pair(scale: Scale) -> Tuple[float, float]:
    if isinstance(scale, numbers.Real):
        return float(scale), float(scale)
    values = [float(v) for v in scale]
    if len(values) < 2:
        raise ValueError(f"Expected a number or a pair of numbers, got {scale!r}")
    return values[0], values[1]


def _plane(p: PointLike, ij: Tuple[int, int]) -> np.ndarray:
    """Coordinates of ``p`` in the transform plane."""
    arr = as_point(p)
    if arr.size > 2:
        return take(arr, ij)
    return arr[:2]


def _apply(ps: Points, m: np.ndarray, ij: Tuple[int, int]) -> None:
    for p in targets(ps):
        assign(p, ij, transform_2d(take(p, ij), m))


def _axis_pair(axis: Optional[AxisLike]) -> Tuple[int, int]:
    return Axis.XY.value if axis is None else resolve_axis(axis)


def rotate_2d(
    ps: Points,
    angle: float,
    anchor: Optional[PointLike] = None,
    axis: Optional[AxisLike] = None,
) -> Points:
    """Rotate in place by ``angle`` radians around ``anchor`` (or the origin).

    Args:
        ps: A point or a group of points; modified in place.
        angle: Counter-clockwise angle in radians.
        anchor: Pivot point. Defaults to the origin.
        axis: Restrict the rotation to this component pair.

    Returns:
        ``ps`` itself.
    """
    ij = _axis_pair(axis)
    cos = math.cos(angle)
    sin = math.sin(angle)
    if anchor is None:
        m = rotate_2d_matrix(cos, sin)
    else:
        m = rotate_at_2d_matrix(cos, sin, _plane(anchor, ij))
    _apply(ps, m, ij)
    return ps


def scale_2d(
    ps: Points,
    scale: Scale,
    anchor: Optional[PointLike] = None,
    axis: Optional[AxisLike] = None,
) -> Points:
    """Scale in place, uniformly for a number or per axis for a pair."""
    ij = _axis_pair(axis)
    sx, sy = _scale_pair(scale)
    if anchor is None:
        m = scale_2d_matrix(sx, sy)
    else:
        m = scale_at_2d_matrix(sx, sy, _plane(anchor, ij))
    _apply(ps, m, ij)
    return ps


def shear_2d(
    ps: Points,
    scale: Scale,
    anchor: Optional[PointLike] = None,
    axis: Optional[AxisLike] = None,
) -> Points:
    """Shear in place; ``scale`` holds shear angles in radians."""
    ij = _axis_pair(axis)
    sx, sy = _scale_pair(scale)
    tanx = math.tan(sx)
    tany = math.tan(sy)
    if anchor is None:
        m = shear_2d_matrix(tanx, tany)
    else:
        m = shear_at_2d_matrix(tanx, tany, _plane(anchor, ij))
    _apply(ps, m, ij)
    return ps


def reflect_2d(
    ps: Points,
    line: GroupLike,
    anchor: Optional[PointLike] = None,
    axis: Optional[AxisLike] = None,
) -> Points:
    """Reflect in place across ``line``.

    With an ``anchor`` the line is taken relative to the anchor.
    """
    ij = _axis_pair(axis)
    p1 = _plane(line[0], ij)
    p2 = _plane(line[1], ij)
    if anchor is None:
        m = reflect_2d_matrix(p1, p2)
    else:
        m = reflect_at_2d_matrix(p1, p2, _plane(anchor, ij))
    _apply(ps, m, ij)
    return ps


def _copy(ps: Points) -> np.ndarray:
    return as_point(ps) if is_point(ps) else as_group(ps)


def rotated_2d(
    ps: Points,
    angle: float,
    anchor: Optional[PointLike] = None,
    axis: Optional[AxisLike] = None,
) -> np.ndarray:
    return rotate_2d(_copy(ps), angle, anchor, axis)


def scaled_2d(
    ps: Points,
    scale: Scale,
    anchor: Optional[PointLike] = None,
    axis: Optional[AxisLike] = None,
) -> np.ndarray:
    return scale_2d(_copy(ps), scale, anchor, axis)


def sheared_2d(
    ps: Points,
    scale: Scale,
    anchor: Optional[PointLike] = None,
    axis: Optional[AxisLike] = None,
) -> np.ndarray:
    return shear_2d(_copy(ps), scale, anchor, axis)


def reflected_2d(
    ps: Points,
    line: GroupLike,
    anchor: Optional[PointLike] = None,
    axis: Optional[AxisLike] = None,
) -> np.ndarray:
    return reflect_2d(_copy(ps), line, anchor, axis)


def within_bound(pt: PointLike, bound_pt1: PointLike, bound_pt2: PointLike) -> bool:
    """Inclusive box test over the components all three points share."""
    for i in range(min(len(pt), len(bound_pt1), len(bound_pt2))):
        lo = min(bound_pt1[i], bound_pt2[i])
        hi = max(bound_pt1[i], bound_pt2[i])
        if not lo <= pt[i] <= hi:
            return False
    return True


@dataclass
class SinCosTable:
    """Precomputed sine/cosine values sampled evenly over a full turn.

    :meth:`sin` and :meth:`cos` floor the angle to the nearest lower sample,
    so results are approximate (1° steps with the default table).
    """

    sin_table: np.ndarray
    cos_table: np.ndarray

    def _index(self, rad: float) -> int:
        size = self.sin_table.size
        deg = bound_angle(to_degree(rad))
        return int(math.floor(deg * size / 360.0)) % size

    def sin(self, rad: float) -> float:
        return float(self.sin_table[self._index(rad)])

    def cos(self, rad: float) -> float:
        return float(self.cos_table[self._index(rad)])


def sin_cos_table(params: Optional[TableParams] = None) -> SinCosTable:
    """Build a :class:`SinCosTable` (360 entries unless ``params`` says otherwise)."""
    if params is None:
        params = TableParams()
    size = int(params.resolution)
    if size < 1:
        raise ValueError(f"Table resolution must be positive, got {size}")
    logger.debug("Building sin/cos table with %d entries", size)
    angles = np.arange(size, dtype=np.float64) * (2 * math.pi / size)
    return SinCosTable(sin_table=np.sin(angles), cos_table=np.cos(angles))


__all__ = [
    "Scale",
    "bound_angle",
    "bound_radian",
    "to_radian",
    "to_degree",
    "bounding_box",
    "centroid",
    "interpolate",
    "perpendicular",
    "rotate_2d",
    "scale_2d",
    "shear_2d",
    "reflect_2d",
    "rotated_2d",
    "scaled_2d",
    "sheared_2d",
    "reflected_2d",
    "within_bound",
    "SinCosTable",
    "sin_cos_table",
]

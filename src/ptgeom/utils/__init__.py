"""Low-level point and matrix helpers used by the kernel modules."""

from .matrix import (
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
from .points import (
    AxisLike,
    GroupLike,
    PointLike,
    add,
    as_group,
    as_point,
    assign,
    clone,
    cross,
    fill,
    is_point,
    magnitude,
    project,
    resolve_axis,
    subtract,
    take,
    targets,
)

__all__ = [
    "AxisLike",
    "GroupLike",
    "PointLike",
    "add",
    "as_group",
    "as_point",
    "assign",
    "clone",
    "cross",
    "fill",
    "is_point",
    "magnitude",
    "project",
    "resolve_axis",
    "subtract",
    "take",
    "targets",
    "reflect_2d_matrix",
    "reflect_at_2d_matrix",
    "rotate_2d_matrix",
    "rotate_at_2d_matrix",
    "scale_2d_matrix",
    "scale_at_2d_matrix",
    "shear_2d_matrix",
    "shear_at_2d_matrix",
    "transform_2d",
]

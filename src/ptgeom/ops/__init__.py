"""Kernel modules: scalar helpers, geometry, lines and rectangles."""

from . import rectangle
from .geom import (
    SinCosTable,
    bound_angle,
    bound_radian,
    bounding_box,
    centroid,
    interpolate,
    perpendicular,
    reflect_2d,
    reflected_2d,
    rotate_2d,
    rotated_2d,
    scale_2d,
    scaled_2d,
    shear_2d,
    sheared_2d,
    sin_cos_table,
    to_degree,
    to_radian,
    within_bound,
)
from .line import (
    collinear,
    distance_from_pt,
    intercept,
    intersect_grid_2d,
    intersect_line_2d,
    intersect_line_with_path_2d,
    intersect_path_2d,
    perpendicular_from_pt,
    slope,
    subpoints,
)
from .num import (
    average,
    bound_value,
    clamp,
    lerp,
    map_to_range,
    normalize_value,
    random_range,
    sum_points,
    within,
)

__all__ = [
    "rectangle",
    "SinCosTable",
    "bound_angle",
    "bound_radian",
    "bounding_box",
    "centroid",
    "interpolate",
    "perpendicular",
    "reflect_2d",
    "reflected_2d",
    "rotate_2d",
    "rotated_2d",
    "scale_2d",
    "scaled_2d",
    "shear_2d",
    "sheared_2d",
    "sin_cos_table",
    "to_degree",
    "to_radian",
    "within_bound",
    "collinear",
    "distance_from_pt",
    "intercept",
    "intersect_grid_2d",
    "intersect_line_2d",
    "intersect_line_with_path_2d",
    "intersect_path_2d",
    "perpendicular_from_pt",
    "slope",
    "subpoints",
    "average",
    "bound_value",
    "clamp",
    "lerp",
    "map_to_range",
    "normalize_value",
    "random_range",
    "sum_points",
    "within",
]

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.spatial.transform import Rotation

from ptgeom.errors import EmptyInputError
from ptgeom.models import Axis, TableParams
from ptgeom.ops import geom


def test_bound_angle_and_radian() -> None:
    assert geom.bound_angle(370) == 10
    assert geom.bound_angle(-90) == 270
    assert geom.bound_radian(-math.pi / 2) == pytest.approx(1.5 * math.pi)


def test_angle_conversions() -> None:
    assert geom.to_radian(180) == pytest.approx(math.pi)
    assert geom.to_degree(math.pi / 2) == pytest.approx(90)


def test_bounding_box() -> None:
    box = geom.bounding_box([[0, 5], [3, 1], [-2, 7]])
    assert_allclose(box, [[-2, 1], [3, 7]])


def test_bounding_box_of_negative_points() -> None:
    box = geom.bounding_box([[-1, -5, -2], [-3, -4, -9]])
    assert_allclose(box, [[-3, -5, -9], [-1, -4, -2]])


def test_bounding_box_rejects_empty_input() -> None:
    with pytest.raises(EmptyInputError):
        geom.bounding_box([])


def test_centroid() -> None:
    assert_allclose(geom.centroid([[0, 0], [4, 0], [4, 4], [0, 4]]), [2, 2])


def test_interpolate_truncates_to_shorter_point() -> None:
    assert_allclose(geom.interpolate([0, 0, 9], [10, 20]), [5, 10])
    assert_allclose(geom.interpolate([0, 0], [10, 20], 0.25), [2.5, 5])


def test_perpendicular() -> None:
    assert_allclose(geom.perpendicular([1, 2]), [[-2, 1], [2, -1]])


def test_perpendicular_in_other_plane_keeps_remaining_component() -> None:
    result = geom.perpendicular([1, 2, 3], Axis.YZ)
    assert_allclose(result, [[1, -3, 2], [1, 3, -2]])
    assert_allclose(geom.perpendicular([1, 2, 3], (0, 2)), [[-3, 2, 1], [3, 2, -1]])


def test_rotate_2d_mutates_points_in_place() -> None:
    pts = [[1.0, 0.0], [0.0, 1.0]]
    result = geom.rotate_2d(pts, math.pi / 2)
    assert result is pts
    assert_allclose(pts, [[0, 1], [-1, 0]], atol=1e-12)


def test_rotate_2d_accepts_a_single_point_array() -> None:
    p = np.array([2.0, 1.0])
    geom.rotate_2d(p, math.pi, anchor=[1, 1])
    assert_allclose(p, [0, 1], atol=1e-12)


def test_rotate_2d_writes_through_group_array_rows() -> None:
    arr = np.array([[1.0, 2.0], [-3.0, 4.0]])
    geom.rotate_2d(arr, math.pi)
    assert_allclose(arr, [[-1, -2], [3, -4]], atol=1e-12)


def test_rotate_2d_with_axis_leaves_other_components() -> None:
    p = [5.0, 1.0, 0.0]
    geom.rotate_2d(p, math.pi / 2, axis=Axis.YZ)
    assert_allclose(p, [5, 0, 1], atol=1e-12)


def test_rotate_2d_with_anchor_and_axis() -> None:
    p = [9.0, 2.0, 1.0]
    geom.rotate_2d(p, math.pi, anchor=[0, 1, 1], axis=(1, 2))
    assert p[0] == 9.0
    assert_allclose(p, [9, 0, 1], atol=1e-12)


def test_scale_2d_with_axis_and_anchor() -> None:
    p = [1.0, 2.0, 3.0]
    geom.scale_2d(p, 2, axis=Axis.XZ)
    assert_allclose(p, [2, 2, 6])
    q = [1.0, 2.0, 3.0]
    geom.scale_2d(q, (3, 2), anchor=[0, 1, 1], axis=Axis.YZ)
    assert_allclose(q, [1, 4, 5])


def test_shear_2d_with_scalar_angle() -> None:
    p = geom.shear_2d([1.0, 1.0], math.pi / 4)
    assert_allclose(p, [2, 2], atol=1e-12)


def test_shear_2d_with_axis() -> None:
    p = geom.shear_2d([1.0, 5.0, 2.0], (math.pi / 4, 0), axis=Axis.XZ)
    assert_allclose(p, [3, 5, 2], atol=1e-12)


def test_reflect_2d_with_axis_reads_line_in_that_plane() -> None:
    p = [2.0, 7.0, 0.0]
    geom.reflect_2d(p, [[0, 0, 0], [1, 5, 1]], axis=Axis.XZ)
    assert_allclose(p, [0, 7, 2], atol=1e-12)


@pytest.mark.parametrize("angle", [0.3, -1.2, 2.5, math.pi])
def test_rotated_2d_matches_scipy(angle: float) -> None:
    rng = np.random.default_rng(7)
    pts = rng.normal(size=(6, 2))
    expected = Rotation.from_euler("z", angle).apply(np.c_[pts, np.zeros(6)])
    assert_allclose(geom.rotated_2d(pts, angle), expected[:, :2], atol=1e-12)


def test_scale_2d() -> None:
    assert_allclose(geom.scale_2d([1.0, 1.0], (2, 3)), [2, 3])
    assert_allclose(geom.scale_2d([[2.0, 3.0]], 2, anchor=[1, 1]), [[3, 5]])


def test_scale_2d_rejects_short_scale() -> None:
    with pytest.raises(ValueError):
        geom.scale_2d([1.0, 1.0], [2])


def test_shear_2d_uses_tangent_of_angles() -> None:
    p = geom.shear_2d([1.0, 2.0], (math.pi / 4, 0))
    assert_allclose(p, [3, 2], atol=1e-12)
    q = geom.shear_2d([1.0, 2.0], (0, math.pi / 4), anchor=[1, 0])
    assert_allclose(q, [1, 2], atol=1e-12)


def test_reflect_2d() -> None:
    assert_allclose(geom.reflect_2d([2.0, 0.0], [[0, 0], [1, 1]]), [0, 2], atol=1e-12)
    assert_allclose(geom.reflect_2d([3.0, 5.0], [[1, 0], [1, 1]]), [-1, 5], atol=1e-12)


def test_reflect_2d_line_is_relative_to_anchor() -> None:
    p = geom.reflect_2d([2.0, 0.0], [[0, 0], [1, 1]], anchor=[0, 1])
    assert_allclose(p, [-1, 3], atol=1e-12)


def test_reflect_2d_twice_is_identity() -> None:
    pts = np.array([[0.5, -2.0], [3.0, 7.0]])
    line = [[-1, 2], [4, -3]]
    once = geom.reflected_2d(pts, line)
    assert_allclose(geom.reflected_2d(once, line), pts, atol=1e-12)


def test_pure_variants_leave_input_untouched() -> None:
    pts = [[1, 0], [0, 1]]
    out = geom.rotated_2d(pts, math.pi / 2)
    assert pts == [[1, 0], [0, 1]]
    assert_allclose(out, [[0, 1], [-1, 0]], atol=1e-12)
    assert_allclose(geom.scaled_2d([1, 2], 2), [2, 4])
    assert_allclose(geom.sheared_2d([[0, 1]], (math.pi / 4, 0)), [[1, 1]], atol=1e-12)


def test_transform_rejects_string_axis() -> None:
    with pytest.raises(ValueError):
        geom.rotate_2d([1.0, 0.0], 1.0, axis="xy")


def test_within_bound() -> None:
    assert geom.within_bound([1, 1], [0, 0], [2, 2])
    assert geom.within_bound([2, 0], [2, 2], [0, 0])
    assert not geom.within_bound([3, 1], [0, 0], [2, 2])
    assert geom.within_bound([1, 1, 99], [0, 0], [2, 2, 2])


def test_sin_cos_table_lookups() -> None:
    table = geom.sin_cos_table()
    assert table.sin_table.size == 360
    assert table.cos_table.size == 360
    assert table.sin(math.pi / 2) == pytest.approx(1.0)
    assert table.cos(math.pi) == pytest.approx(-1.0)
    assert table.sin(-math.pi / 2) == pytest.approx(-1.0)


@pytest.mark.parametrize("rad", [0.1, 1.234, 3.0, -2.2, 12.0, -1e-15])
def test_sin_cos_table_approximates_within_one_degree(rad: float) -> None:
    table = geom.sin_cos_table()
    step = math.radians(1.0)
    assert abs(table.sin(rad) - math.sin(rad)) <= step
    assert abs(table.cos(rad) - math.cos(rad)) <= step


def test_sin_cos_table_resolution() -> None:
    table = geom.sin_cos_table(TableParams(resolution=720))
    assert table.sin_table.size == 720
    half_degree = math.sin(math.radians(0.5))
    assert table.sin(math.radians(0.75)) == pytest.approx(half_degree)
    with pytest.raises(ValueError):
        geom.sin_cos_table(TableParams(resolution=0))

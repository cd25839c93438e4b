from numpy.testing import assert_allclose

from ptgeom.ops import rectangle


def test_from_top_left() -> None:
    assert_allclose(rectangle.from_top_left([1, 2], 3, 4), [[1, 2], [4, 6]])


def test_from_top_left_with_depth() -> None:
    rect = rectangle.from_top_left([1, 2, 3], 3, 4, depth=5)
    assert_allclose(rect, [[1, 2, 3], [4, 6, 8]])


def test_from_center() -> None:
    assert_allclose(rectangle.from_center([0, 0], 4, 2), [[-2, -1], [2, 1]])
    assert_allclose(rectangle.from_center([1, 1, 1], 2, 2), [[0, 0, 1], [2, 2, 1]])


def test_corners_winding() -> None:
    result = rectangle.corners([[0, 0], [4, 2]])
    assert_allclose(result, [[0, 0], [4, 0], [4, 2], [0, 2]])


def test_sides_top_right_bottom_left() -> None:
    top, right, bottom, left = rectangle.sides([[0, 0], [4, 2]])
    assert_allclose(top, [[0, 0], [4, 0]])
    assert_allclose(right, [[4, 0], [4, 2]])
    assert_allclose(bottom, [[4, 2], [0, 2]])
    assert_allclose(left, [[0, 2], [0, 0]])


def test_sides_copy_extra_components_from_first_corner() -> None:
    sides = rectangle.sides([[0, 0, 7], [1, 1, 9]])
    assert len(sides) == 4
    for seg in sides:
        assert seg.shape == (2, 3)
        assert_allclose(seg[:, 2], [7, 7])

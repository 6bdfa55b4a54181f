"""
Tests for AABB accumulation
"""

import math

import numpy as np
import pytest

from vec3.bounds import AABB
from vec3.vector import MAX_VAL, MIN_VAL, Vector3


class TestEmptyBox:
    """A fresh box is seeded with MAX_VAL / MIN_VAL"""

    def test_seeds(self) -> None:
        box = AABB()
        assert box.minimum == MAX_VAL
        assert box.maximum == MIN_VAL
        assert box.is_empty()

    def test_seeds_are_copies(self) -> None:
        box = AABB()
        box.extend(Vector3(1, 2, 3))
        assert MAX_VAL.x > 1e300
        assert MIN_VAL.x < -1e300

    def test_empty_measures(self) -> None:
        box = AABB()
        assert all(math.isnan(c) for c in box.center())
        assert box.extent() == Vector3(0, 0, 0)
        assert box.surface_area() == 0.0
        assert not box.contains(Vector3(0, 0, 0))


class TestExtend:
    """Growing a box point by point"""

    def test_first_point_snaps(self) -> None:
        box = AABB()
        assert box.extend(Vector3(1, 2, 3)) is box
        assert box.minimum == Vector3(1, 2, 3)
        assert box.maximum == Vector3(1, 2, 3)
        assert not box.is_empty()

    def test_from_points(self) -> None:
        box = AABB.from_points([Vector3(1, 5, -3), Vector3(4, 2, -3), Vector3(0, 3, 7)])
        assert box.minimum == Vector3(0, 2, -3)
        assert box.maximum == Vector3(4, 5, 7)

    def test_from_no_points(self) -> None:
        assert AABB.from_points([]).is_empty()

    def test_constructor_copies_corners(self) -> None:
        lo = Vector3(0, 0, 0)
        box = AABB(lo, Vector3(1, 1, 1))
        box.extend(Vector3(-1, 0, 0))
        assert lo == Vector3(0, 0, 0)


class TestFromArray:
    """numpy point clouds"""

    def test_point_cloud(self) -> None:
        points = np.array([[1.0, 5.0, -3.0], [4.0, 2.0, -3.0], [0.0, 3.0, 7.0]])
        box = AABB.from_array(points)
        assert box.minimum == Vector3(0, 2, -3)
        assert box.maximum == Vector3(4, 5, 7)

    def test_matches_from_points(self) -> None:
        rng = np.random.default_rng(7)
        points = rng.normal(size=(50, 3))
        a = AABB.from_array(points)
        b = AABB.from_points(Vector3(*p) for p in points)
        assert a.minimum == b.minimum
        assert a.maximum == b.maximum

    def test_empty_array(self) -> None:
        box = AABB.from_array(np.zeros((0, 3)))
        assert box.is_empty()
        assert box.minimum == MAX_VAL
        assert box.maximum == MIN_VAL

    @pytest.mark.parametrize("shape", [(3, 4), (4, 2), (3,), (0,), (2, 3, 1)])
    def test_wrong_shape_rejected(self, shape) -> None:
        with pytest.raises(ValueError, match=r"\(N, 3\)"):
            AABB.from_array(np.zeros(shape))

    def test_homogeneous_points_rejected(self) -> None:
        with pytest.raises(ValueError):
            AABB.from_array([[0, 0, 0, 1], [10, 20, 30, 1], [5, 5, 5, 1]])

    def test_nan_components_skipped_like_from_points(self) -> None:
        points = np.array([
            [1.0, np.nan, -3.0],
            [np.nan, 2.0, 7.0],
            [4.0, 5.0, np.nan],
        ])
        a = AABB.from_array(points)
        b = AABB.from_points(Vector3(*p) for p in points)
        assert a.minimum == b.minimum == Vector3(1, 2, -3)
        assert a.maximum == b.maximum == Vector3(4, 5, 7)

    def test_all_nan_axis_matches_from_points(self) -> None:
        points = np.array([[np.nan, 1.0, 2.0], [np.nan, 3.0, 4.0]])
        a = AABB.from_array(points)
        b = AABB.from_points(Vector3(*p) for p in points)
        assert a.minimum == b.minimum
        assert a.maximum == b.maximum
        assert a.is_empty()


class TestQueries:
    """center / extent / surface_area / contains / surrounding_box"""

    def test_unit_cube(self) -> None:
        box = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert box.center() == Vector3(0.5, 0.5, 0.5)
        assert box.extent() == Vector3(1, 1, 1)
        assert box.surface_area() == 6.0

    def test_surface_area(self) -> None:
        box = AABB(Vector3(-1, 0, 2), Vector3(1, 3, 6))
        assert box.surface_area() == pytest.approx(2 * (2 * 3 + 2 * 4 + 3 * 4))

    def test_contains_is_inclusive(self) -> None:
        box = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert box.contains(Vector3(0, 0, 0))
        assert box.contains(Vector3(1, 1, 1))
        assert box.contains(Vector3(0.5, 0.2, 0.9))
        assert not box.contains(Vector3(1.1, 0.5, 0.5))

    def test_surrounding_box(self) -> None:
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-2, 0.5, 0.5), Vector3(0.5, 3, 0.75))
        box = AABB.surrounding_box(a, b)
        assert box.minimum == Vector3(-2, 0, 0)
        assert box.maximum == Vector3(1, 3, 1)

    def test_surrounding_with_empty_box(self) -> None:
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        box = AABB.surrounding_box(a, AABB())
        assert box.minimum == a.minimum
        assert box.maximum == a.maximum

# vec3/bounds.py
import math
from typing import Iterable, Optional
import numpy as np
from vec3.vector import MAX_VAL, MIN_VAL, Vector3, maximum, minimum


class AABB:
    """
    Axis-aligned bounding box accumulated from points.

    An empty box has minimum = MAX_VAL and maximum = MIN_VAL, so the first
    extend() snaps both corners onto the point.
    """
    def __init__(self, minimum: Optional[Vector3] = None, maximum: Optional[Vector3] = None):
        self.minimum = MAX_VAL.copy() if minimum is None else minimum.copy()
        self.maximum = MIN_VAL.copy() if maximum is None else maximum.copy()

    @classmethod
    def from_points(cls, points: Iterable[Vector3]) -> "AABB":
        box = cls()
        for p in points:
            box.extend(p)
        return box

    @classmethod
    def from_array(cls, points) -> "AABB":
        """
        Builds a box from an (N, 3) array of points. N may be 0.

        Gives the same box as from_points(): the reductions start from the
        empty-box seeds and skip NaN components.
        """
        data = np.asarray(points, dtype=np.float64)
        if data.ndim != 2 or data.shape[1] != 3:
            raise ValueError(f"Expected an (N, 3) array of points, got shape {data.shape}")
        lo = np.fmin.reduce(data, axis=0, initial=MAX_VAL.x)
        hi = np.fmax.reduce(data, axis=0, initial=MIN_VAL.x)
        return cls(Vector3(*lo), Vector3(*hi))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(minimum(box0.minimum, box1.minimum),
                    maximum(box0.maximum, box1.maximum))

    def extend(self, point: Vector3) -> "AABB":
        self.minimum = minimum(self.minimum, point)
        self.maximum = maximum(self.maximum, point)
        return self

    def is_empty(self) -> bool:
        return (self.minimum.x > self.maximum.x or
                self.minimum.y > self.maximum.y or
                self.minimum.z > self.maximum.z)

    def center(self) -> Vector3:
        """Midpoint of the box. An empty box has no center, so every component is NaN."""
        if self.is_empty():
            return Vector3(math.nan, math.nan, math.nan)
        return (self.minimum + self.maximum) * 0.5

    def extent(self) -> Vector3:
        if self.is_empty():
            return Vector3()
        return self.maximum - self.minimum

    def surface_area(self) -> float:
        d = self.extent()
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    def contains(self, point: Vector3) -> bool:
        return (self.minimum.x <= point.x <= self.maximum.x and
                self.minimum.y <= point.y <= self.maximum.y and
                self.minimum.z <= point.z <= self.maximum.z)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

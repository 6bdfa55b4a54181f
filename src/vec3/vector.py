# vec3/vector.py
import logging
import math
import numbers
import re
import sys
from typing import Iterator, List

import numpy as np

from vec3.errors import ParseError, UnsupportedDimensionError
from vec3.generic import ArrayVector, GenericVector

logger = logging.getLogger(__name__)

# Number of fractional digits written by format_vector() / str()
DEFAULT_PRECISION = 6

_FLOAT_TOKEN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _component(value) -> float:
    # Text goes through parse(), which validates it
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Vector3 components must be numbers, got {value!r}; use parse() for text")
    return float(value)


class Vector3(GenericVector):
    """
    A 3D double precision vector.

    Mutating methods (scale, invert, normalize, add, sub, mul) change the
    vector in place and return it so calls can be chained. Their pure
    counterparts (scaled, inverted, normalized and the module level add, sub,
    mul functions) return a new vector and leave the operands untouched.

    Components are stored as Python floats. Strings are rejected, use parse().
    """
    # Keep numpy from treating a Vector3 as a sequence in mixed arithmetic
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = _component(x)
        self.y = _component(y)
        self.z = _component(z)

    @classmethod
    def from_generic(cls, other: GenericVector) -> "Vector3":
        return from_generic(other)

    @classmethod
    def from_array(cls, data) -> "Vector3":
        """
        Builds a vector from a flat array of 2, 3 or 4 numbers. A 2 element
        array gets z = 0, the fourth (homogeneous) element is dropped.
        """
        return from_generic(ArrayVector(data))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    # Generic vector interface
    def rows(self) -> int:
        return 3

    def cols(self) -> int:
        return 1

    def size(self) -> int:
        return 3

    def slice(self) -> List[float]:
        return [self.x, self.y, self.z]

    def get(self, col: int, row: int) -> float:
        return self[row]

    # Metric queries
    def is_zero(self) -> bool:
        """True if every component is exactly 0.0."""
        return self.x == 0 and self.y == 0 and self.z == 0

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    # In-place mutators
    def scale(self, f: float) -> "Vector3":
        f = float(f)
        self.x *= f
        self.y *= f
        self.z *= f
        return self

    def invert(self) -> "Vector3":
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    def normalize(self) -> "Vector3":
        """
        Scales the vector to unit length. Vectors whose squared length is
        exactly 0 or exactly 1 are left untouched.
        """
        sl = self.length_sqr()
        if sl == 0 or sl == 1:
            return self
        return self.scale(1 / math.sqrt(sl))

    def add(self, v: "Vector3") -> "Vector3":
        self.x += v.x
        self.y += v.y
        self.z += v.z
        return self

    def sub(self, v: "Vector3") -> "Vector3":
        self.x -= v.x
        self.y -= v.y
        self.z -= v.z
        return self

    def mul(self, v: "Vector3") -> "Vector3":
        """Multiplies each component by the matching component of v."""
        self.x *= v.x
        self.y *= v.y
        self.z *= v.z
        return self

    # Pure counterparts
    def scaled(self, f: float) -> "Vector3":
        f = float(f)
        return Vector3(self.x * f, self.y * f, self.z * f)

    def inverted(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def normalized(self) -> "Vector3":
        return self.copy().normalize()

    def dot(self, other: "Vector3") -> float:
        return dot(self, other)

    def cross(self, other: "Vector3") -> "Vector3":
        return cross(self, other)

    def normal(self) -> "Vector3":
        return normal(self)

    def isclose(self, other: "Vector3", rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        return (math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and
                math.isclose(self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol) and
                math.isclose(self.z, other.z, rel_tol=rel_tol, abs_tol=abs_tol))

    # Sequence protocol
    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __setitem__(self, index: int, value: float):
        setattr(self, "xyz"[index], _component(value))

    # Operators
    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # Mutable, so not hashable
    __hash__ = None

    def __neg__(self) -> "Vector3":
        return self.inverted()

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, other):
        # Scalar multiplication
        if isinstance(other, numbers.Real):
            return self.scaled(other)
        # Element-wise multiplication
        if isinstance(other, Vector3):
            return mul(self, other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        t = float(t)
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sub(other)

    def __imul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        if isinstance(other, Vector3):
            return self.mul(other)
        return NotImplemented

    def __itruediv__(self, t: float) -> "Vector3":
        if not isinstance(t, numbers.Real):
            return NotImplemented
        t = float(t)
        self.x /= t
        self.y /= t
        self.z /= t
        return self

    def __str__(self) -> str:
        return format_vector(self)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class _ConstVector3(Vector3):
    """
    A Vector3 that refuses every mutation. Used for the module constants so
    in-place operations cannot corrupt shared values.
    """
    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name: str, value):
        raise AttributeError(f"{self!r} is read-only")

    def __delattr__(self, name: str):
        raise AttributeError(f"{self!r} is read-only")


ZERO = _ConstVector3(0, 0, 0)

UNIT_X = _ConstVector3(1, 0, 0)
UNIT_Y = _ConstVector3(0, 1, 0)
UNIT_Z = _ConstVector3(0, 0, 1)

# Colors
RED = _ConstVector3(1, 0, 0)
GREEN = _ConstVector3(0, 1, 0)
BLUE = _ConstVector3(0, 0, 1)
BLACK = _ConstVector3(0, 0, 0)
WHITE = _ConstVector3(1, 1, 1)

# Seeds for running minimum / maximum accumulation
MIN_VAL = _ConstVector3(-sys.float_info.max, -sys.float_info.max, -sys.float_info.max)
MAX_VAL = _ConstVector3(sys.float_info.max, sys.float_info.max, sys.float_info.max)


def from_generic(other: GenericVector) -> Vector3:
    """
    Copies a Vector3 out of any object implementing size() and get(col, row).

    Size 2 sources get z = 0, size 4 sources lose their fourth component.
    Raises UnsupportedDimensionError for every other size.
    """
    size = other.size()
    if size == 2:
        return Vector3(other.get(0, 0), other.get(0, 1), 0.0)
    if size in (3, 4):
        return Vector3(other.get(0, 0), other.get(0, 1), other.get(0, 2))
    logger.debug("Cannot convert %r of size %s to Vector3", other, size)
    raise UnsupportedDimensionError(size)


def parse(text: str) -> Vector3:
    """
    Parses three whitespace separated floats, as written by format_vector().

    Anything after the third token is ignored. Raises ParseError when fewer
    than three tokens are present or a token is not a float literal; the
    error's `partial` attribute holds the components read so far.
    """
    tokens = text.split()
    components = [0.0, 0.0, 0.0]
    for i in range(3):
        if i >= len(tokens):
            reason = f"expected 3 components, got {i}"
        elif not _FLOAT_TOKEN.fullmatch(tokens[i]):
            reason = f"invalid float {tokens[i]!r} for component {i}"
        else:
            components[i] = float(tokens[i])
            continue
        logger.debug("Failed to parse %r: %s", text, reason)
        raise ParseError(f"Cannot parse Vector3 from {text!r}: {reason}", text, Vector3(*components))
    return Vector3(*components)


def format_vector(vec: Vector3, precision: int = DEFAULT_PRECISION) -> str:
    return f"{vec.x:.{precision}f} {vec.y:.{precision}f} {vec.z:.{precision}f}"


def add(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def mul(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise product."""
    return Vector3(a.x * b.x, a.y * b.y, a.z * b.z)


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x
    )


def angle(a: Vector3, b: Vector3) -> float:
    """
    Returns the angle in radians between two unit vectors.

    Inputs are not normalized here. If their dot product falls outside
    [-1, 1] the result is NaN.
    """
    d = dot(a, b)
    if not -1.0 <= d <= 1.0:
        return math.nan
    return math.acos(d)


def normal(vec: Vector3) -> Vector3:
    """
    Returns a unit vector orthogonal to vec. Vectors parallel to the Z axis
    (and the zero vector) get UNIT_X.
    """
    n = cross(vec, UNIT_Z)
    if n.is_zero():
        logger.debug("%r is parallel to the Z axis, using UNIT_X as normal", vec)
        return UNIT_X.copy()
    return n.normalize()


def minimum(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise minimum of two vectors."""
    result = a.copy()
    if b.x < result.x:
        result.x = b.x
    if b.y < result.y:
        result.y = b.y
    if b.z < result.z:
        result.z = b.z
    return result


def maximum(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise maximum of two vectors."""
    result = a.copy()
    if b.x > result.x:
        result.x = b.x
    if b.y > result.y:
        result.y = b.y
    if b.z > result.z:
        result.z = b.z
    return result

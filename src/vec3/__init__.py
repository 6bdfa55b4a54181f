"""
3D double precision vectors for geometry and graphics code.
"""
from vec3.errors import ParseError, UnsupportedDimensionError, Vec3Error
from vec3.generic import ArrayVector, GenericVector
from vec3.vector import (
    BLACK,
    BLUE,
    DEFAULT_PRECISION,
    GREEN,
    MAX_VAL,
    MIN_VAL,
    RED,
    UNIT_X,
    UNIT_Y,
    UNIT_Z,
    WHITE,
    ZERO,
    Vector3,
    add,
    angle,
    cross,
    dot,
    format_vector,
    from_generic,
    maximum,
    minimum,
    mul,
    normal,
    parse,
    sub,
)
from vec3.bounds import AABB

__version__ = "0.1.0"

__all__ = [
    "AABB",
    "ArrayVector",
    "GenericVector",
    "ParseError",
    "UnsupportedDimensionError",
    "Vec3Error",
    "Vector3",
    # Constants
    "BLACK",
    "BLUE",
    "DEFAULT_PRECISION",
    "GREEN",
    "MAX_VAL",
    "MIN_VAL",
    "RED",
    "UNIT_X",
    "UNIT_Y",
    "UNIT_Z",
    "WHITE",
    "ZERO",
    # Functions
    "add",
    "angle",
    "cross",
    "dot",
    "format_vector",
    "from_generic",
    "maximum",
    "minimum",
    "mul",
    "normal",
    "parse",
    "sub",
]

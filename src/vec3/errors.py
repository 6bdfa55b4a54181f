# vec3/errors.py


class Vec3Error(Exception):
    """Base class for errors raised by the vec3 package."""


class ParseError(Vec3Error, ValueError):
    """
    Raised when text cannot be scanned into three float components.

    `partial` holds whatever components were read before the failure, with the
    remaining ones left at zero. It is informational only.
    """
    def __init__(self, message: str, text: str, partial):
        super().__init__(message)
        self.text = text
        self.partial = partial


class UnsupportedDimensionError(Vec3Error, TypeError):
    """Raised when converting from a generic vector whose size is not 2, 3 or 4."""
    def __init__(self, size: int):
        super().__init__(f"Unsupported generic vector size: {size}")
        self.size = size

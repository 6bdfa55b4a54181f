# vec3/generic.py
from typing import List
import numpy as np


class GenericVector:
    """
    Abstract column vector. Anything exposing size() and get(col, row) can be
    converted into a Vector3 with vector.from_generic().
    """
    def rows(self) -> int:
        raise NotImplementedError("rows() must be implemented by subclasses.")

    def cols(self) -> int:
        raise NotImplementedError("cols() must be implemented by subclasses.")

    def size(self) -> int:
        raise NotImplementedError("size() must be implemented by subclasses.")

    def slice(self) -> List[float]:
        raise NotImplementedError("slice() must be implemented by subclasses.")

    def get(self, col: int, row: int) -> float:
        raise NotImplementedError("get() must be implemented by subclasses.")


class ArrayVector(GenericVector):
    """
    Exposes a flat numpy array (or any sequence of numbers) as a GenericVector.
    """
    def __init__(self, data):
        self.data = np.asarray(data, dtype=np.float64).ravel()

    def rows(self) -> int:
        return self.data.shape[0]

    def cols(self) -> int:
        return 1

    def size(self) -> int:
        return self.data.shape[0]

    def slice(self) -> List[float]:
        return self.data.tolist()

    def get(self, col: int, row: int) -> float:
        # Single column, so col is ignored
        return float(self.data[row])

    def __repr__(self) -> str:
        return f"ArrayVector({self.data.tolist()})"

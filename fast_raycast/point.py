"""
Immutable 3-component vector used for positions and directions alike.
"""
from typing import Callable, Iterable, NamedTuple

import numpy as np

from .errors import InvalidArgumentError


class Point(NamedTuple):
    x: float
    y: float
    z: float

    @classmethod
    def of(cls, values: Iterable[float]) -> "Point":
        """Coerce any length-3 iterable of reals into a Point."""
        if isinstance(values, cls):
            return values
        coords = tuple(float(v) for v in values)
        if len(coords) != 3:
            raise InvalidArgumentError(
                f"a point needs exactly 3 components, got {len(coords)}"
            )
        return cls(*coords)

    @classmethod
    def generate(cls, supplier: Callable[[], float]) -> "Point":
        """Build a point from three successive calls of *supplier*."""
        return cls(supplier(), supplier(), supplier())

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Point":
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float64)

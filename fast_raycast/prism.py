"""
Axis-aligned rectangular prism areas.

A prism is tested as six forward quad intersections in a fixed face order
(front, back, left, right, top, bottom) and reports the first face hit.
Face order decides ties, not distance: a ray travelling towards -z through
the whole box reports the front (min z) face although it enters through
the back one.
"""
from abc import abstractmethod
from typing import Any, Callable, Iterable, Optional

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from ._core import _prism_intersection
from .area import Area
from .intersection import _direction, _to_point, _vector
from .point import Point


class RectangularPrism(Area):
    """Box spanned by two opposite corners; either ordering per axis works."""

    @property
    @abstractmethod
    def min(self) -> Point:
        ...

    @property
    @abstractmethod
    def max(self) -> Point:
        ...

    def intersection(self, pos: Iterable[float],
                     direction: Iterable[float]) -> Optional[Point]:
        hit = _prism_intersection(
            _vector(pos, "pos"),
            _direction(direction),
            _vector(self.min, "min"),
            _vector(self.max, "max"),
        )
        return _to_point(hit)

    # ---------------------------------------------------------------------
    # Visualization
    # ---------------------------------------------------------------------
    def plot(
        self,
        ax: Optional[Axes3D] = None,
        facecolor: str = 'tab:blue',
        edgecolor: str = 'k',
        alpha: float = 0.25,
        set_limits: bool = True,
        show: bool = True,
    ) -> Axes3D:
        """Draw the six faces of the box with matplotlib."""
        bmin = np.asarray(self.min, dtype=np.float64)
        bmax = np.asarray(self.max, dtype=np.float64)
        (x0, y0, z0), (x1, y1, z1) = bmin, bmax
        faces = [
            [(x0, y0, z0), (x0, y1, z0), (x1, y1, z0), (x1, y0, z0)],  # front
            [(x0, y0, z1), (x0, y1, z1), (x1, y1, z1), (x1, y0, z1)],  # back
            [(x0, y0, z0), (x0, y1, z0), (x0, y1, z1), (x0, y0, z1)],  # left
            [(x1, y0, z0), (x1, y1, z0), (x1, y1, z1), (x1, y0, z1)],  # right
            [(x0, y1, z0), (x1, y1, z0), (x1, y1, z1), (x0, y1, z1)],  # top
            [(x0, y0, z0), (x1, y0, z0), (x1, y0, z1), (x0, y0, z1)],  # bottom
        ]

        if ax is None:
            fig = plt.figure()
            ax = fig.add_subplot(111, projection='3d')

        ax.add_collection3d(Poly3DCollection(
            faces, facecolors=facecolor, edgecolors=edgecolor, alpha=alpha))

        if set_limits:
            lo = np.minimum(bmin, bmax)
            hi = np.maximum(bmin, bmax)
            ax.set_xlim(lo[0], hi[0])
            ax.set_ylim(lo[1], hi[1])
            ax.set_zlim(lo[2], hi[2])

        if show:
            plt.show()
        return ax


class StaticRectangularPrism(RectangularPrism):
    """Prism with fixed corners."""

    def __init__(self, min: Iterable[float], max: Iterable[float]) -> None:
        self._min = Point.of(min)
        self._max = Point.of(max)

    @property
    def min(self) -> Point:
        return self._min

    @property
    def max(self) -> Point:
        return self._max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticRectangularPrism):
            return NotImplemented
        return (self._min, self._max) == (other._min, other._max)

    def __hash__(self) -> int:
        return hash((self._min, self._max))

    def __repr__(self) -> str:
        return f"StaticRectangularPrism(min={self._min!r}, max={self._max!r})"


class WrappedRectangularPrism(RectangularPrism):
    """
    Prism whose corners are read from another object on every test, so the
    box follows the object (e.g. an entity's bounding box) as it moves.
    """

    def __init__(self, obj: Any,
                 min_getter: Callable[[Any], Iterable[float]],
                 max_getter: Callable[[Any], Iterable[float]]) -> None:
        self.obj = obj
        self.min_getter = min_getter
        self.max_getter = max_getter

    @property
    def min(self) -> Point:
        return Point.of(self.min_getter(self.obj))

    @property
    def max(self) -> Point:
        return Point.of(self.max_getter(self.obj))


def rectangular_prism(min: Iterable[float], max: Iterable[float]) -> StaticRectangularPrism:
    return StaticRectangularPrism(min, max)


def wrapper(obj: Any,
            min_getter: Callable[[Any], Iterable[float]],
            max_getter: Callable[[Any], Iterable[float]]) -> WrappedRectangularPrism:
    """Wrap *obj* as a prism whose bounds come from the two getters."""
    return WrappedRectangularPrism(obj, min_getter, max_getter)

"""
Lazy traversal of the grid cells crossed by a ray.

Each step advances the position to the nearest grid boundary on any axis,
using ``(cell_size - |pos| mod cell_size) / |dir|`` per axis, and adds the
distance to the travelled length. Iteration ends once that length reaches
``max_length``.

Public API
----------
grid_iterator(start, direction, cell_size=1.0, max_length=inf)
    - yields the cell (position floored to the grid) after every crossing
exact_grid_iterator(start, direction, cell_size=1.0, max_length=inf)
    - yields the exact crossing points instead
"""
import logging
import math
from typing import Callable, Iterable, Iterator, List, Optional

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401

from ._core import _grid_step
from .errors import InvalidArgumentError
from .intersection import _direction, _vector
from .point import Point

logger = logging.getLogger(__name__)

DEFAULT_CELL_SIZE = 1.0
DEFAULT_MAX_LENGTH = math.inf

Emitter = Callable[[np.ndarray, float], Point]


# -------------------------------------------------------------------------
# Emission policies
# -------------------------------------------------------------------------
def snap_to_grid(pos: np.ndarray, cell_size: float) -> Point:
    """Position rounded down to the grid: the cell now entered."""
    return Point.from_array(np.floor(pos / cell_size) * cell_size)


def exact_position(pos: np.ndarray, cell_size: float) -> Point:
    """The unsnapped boundary crossing point."""
    return Point.from_array(pos)


class GridIterator(Iterator[Point]):
    """
    Forward-only iterator over grid crossings along a ray.

    Not safe for concurrent advancement; each iterator has one consumer.
    """

    def __init__(
        self,
        start: Iterable[float],
        direction: Iterable[float],
        cell_size: float = DEFAULT_CELL_SIZE,
        max_length: float = DEFAULT_MAX_LENGTH,
        emit: Emitter = snap_to_grid,
    ) -> None:
        cell_size = float(cell_size)
        max_length = float(max_length)
        if not (math.isfinite(cell_size) and cell_size > 0.0):
            raise InvalidArgumentError(f"cell_size must be positive, got {cell_size}")
        if not max_length >= 0.0:
            raise InvalidArgumentError(f"max_length must be non-negative, got {max_length}")

        # copy: the position is advanced in place
        self.position = np.array(_vector(start, "start"), dtype=np.float64)
        self.direction = _direction(direction)
        self.cell_size = cell_size
        self.max_length = max_length
        self.length = 0.0
        self._emit = emit
        logger.debug("grid traversal from %s along %s (cell %g, max %g)",
                     self.position, self.direction, cell_size, max_length)

    def has_next(self) -> bool:
        return self.length < self.max_length

    def __iter__(self) -> "GridIterator":
        return self

    def __next__(self) -> Point:
        if not self.has_next():
            raise StopIteration
        self.length += _grid_step(self.position, self.direction, self.cell_size)
        return self._emit(self.position, self.cell_size)


def grid_iterator(start: Iterable[float],
                  direction: Iterable[float],
                  cell_size: float = DEFAULT_CELL_SIZE,
                  max_length: float = DEFAULT_MAX_LENGTH) -> GridIterator:
    """
    Iterate over the grid cells entered by the ray, until the total length
    reaches *max_length*.
    """
    return GridIterator(start, direction, cell_size, max_length, snap_to_grid)


def exact_grid_iterator(start: Iterable[float],
                        direction: Iterable[float],
                        cell_size: float = DEFAULT_CELL_SIZE,
                        max_length: float = DEFAULT_MAX_LENGTH) -> GridIterator:
    """
    Iterate over the exact points where the ray crosses a grid boundary,
    until the total length reaches *max_length*.
    """
    return GridIterator(start, direction, cell_size, max_length, exact_position)


# -------------------------------------------------------------------------
# Visualization
# -------------------------------------------------------------------------
def plot_traversal(
    origin: Iterable[float],
    direction: Iterable[float],
    cells: List[Point],
    cell_size: float = DEFAULT_CELL_SIZE,
    ax: Optional[Axes3D] = None,
    cmap: str = 'viridis',
    edgecolor: str = 'k',
    set_limits: bool = True,
    show: bool = True,
) -> Axes3D:
    """Plot the cells visited by a snapped traversal and the ray through them."""
    o = _vector(origin, "origin")
    d = _vector(direction, "direction")
    if not cells:
        raise InvalidArgumentError("cells must not be empty")
    corners = np.array(cells, dtype=np.float64)

    # voxel index space spanning every visited cell
    lo = np.floor(corners.min(axis=0) / cell_size).astype(np.int64)
    idx = np.floor(corners / cell_size).astype(np.int64) - lo
    shape = tuple(int(n) for n in idx.max(axis=0) + 1)
    mask = np.zeros(shape, dtype=bool)
    order = np.full(shape, np.nan)
    for i, (ix, iy, iz) in enumerate(idx):
        mask[ix, iy, iz] = True
        order[ix, iy, iz] = i / max(len(cells) - 1, 1)

    xs = (lo[0] + np.arange(shape[0] + 1)) * cell_size
    ys = (lo[1] + np.arange(shape[1] + 1)) * cell_size
    zs = (lo[2] + np.arange(shape[2] + 1)) * cell_size
    xv, yv, zv = np.meshgrid(xs, ys, zs, indexing='ij')

    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection='3d')

    facecolors = plt.get_cmap(cmap)(np.nan_to_num(order))
    facecolors[..., 3] = 0.4
    ax.voxels(xv, yv, zv, mask, facecolors=facecolors, edgecolor=edgecolor)

    end = corners[-1] + cell_size
    t_end = np.max(np.abs(end - o)) / np.max(np.abs(d)) if np.any(d) else 0.0
    line = np.stack([o, o + d * t_end])
    ax.plot(line[:, 0], line[:, 1], line[:, 2], color='r')

    if set_limits:
        ax.set_xlim(xs[0], xs[-1])
        ax.set_ylim(ys[0], ys[-1])
        ax.set_zlim(zs[0], zs[-1])

    if show:
        plt.show()
    return ax

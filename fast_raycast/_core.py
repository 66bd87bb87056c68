"""
Low-level NumPy+Numba kernels for plane/quad intersection and grid stepping.

All kernels use ``error_model="numpy"`` so a zero divisor gives inf/NaN
instead of raising, and no ``fastmath`` so NaN comparisons stay false.
"""
import math
import numpy as np
from numba import njit

# Face order of a rectangular prism: front, back, left, right, top, bottom.
# Each row selects (min|max) per axis for the min, adjacent and max corners
# of that face; 0 picks the box min, 1 the box max.
_FACES = np.array([
    [[0, 0, 0], [0, 1, 0], [1, 1, 0]],  # front  (min z)
    [[0, 0, 1], [0, 1, 1], [1, 1, 1]],  # back   (max z)
    [[0, 0, 0], [0, 1, 0], [0, 1, 1]],  # left   (min x)
    [[1, 0, 0], [1, 1, 0], [1, 1, 1]],  # right  (max x)
    [[0, 1, 0], [1, 1, 0], [1, 1, 1]],  # top    (max y)
    [[0, 0, 0], [1, 0, 0], [1, 0, 1]],  # bottom (min y)
], dtype=np.int64)


@njit(cache=True, error_model="numpy")
def _plane_line_intersection(o: np.ndarray, d: np.ndarray,
                             p: np.ndarray, n: np.ndarray) -> np.ndarray:
    """Point where ``o + t*d`` meets the plane through *p* with normal *n*."""
    dot_a = n[0] * p[0] + n[1] * p[1] + n[2] * p[2]
    dot_b = n[0] * o[0] + n[1] * o[1] + n[2] * o[2]
    dot_c = n[0] * d[0] + n[1] * d[1] + n[2] * d[2]
    t = (dot_a - dot_b) / dot_c
    out = np.empty(3, dtype=np.float64)
    for k in range(3):
        out[k] = o[k] + d[k] * t
    return out


@njit(cache=True)
def _is_between_unordered(v: float, a: float, b: float) -> bool:
    if a > b:
        return v >= b and v <= a
    return v >= a and v <= b


@njit(cache=True, error_model="numpy")
def _quad_intersection(o: np.ndarray, d: np.ndarray,
                       qmin: np.ndarray, qadj: np.ndarray,
                       qmax: np.ndarray) -> np.ndarray:
    """
    Plane point of the quad, or all-NaN when fewer than two non-degenerate
    axes contain it.
    """
    v1x = qmin[0] - qadj[0]
    v1y = qmin[1] - qadj[1]
    v1z = qmin[2] - qadj[2]
    v2x = qmin[0] - qmax[0]
    v2y = qmin[1] - qmax[1]
    v2z = qmin[2] - qmax[2]
    n = np.empty(3, dtype=np.float64)
    n[0] = v1y * v2z - v2y * v1z
    n[1] = v1z * v2x - v2z * v1x
    n[2] = v1x * v2y - v2x * v1y

    hit = _plane_line_intersection(o, d, qmin, n)

    fits = 0
    for k in range(3):
        if qmin[k] != qmax[k] and _is_between_unordered(hit[k], qmin[k], qmax[k]):
            fits += 1
    if fits < 2:
        hit[:] = math.nan
    return hit


@njit(cache=True, error_model="numpy")
def _forward_quad_intersection(o: np.ndarray, d: np.ndarray,
                               qmin: np.ndarray, qadj: np.ndarray,
                               qmax: np.ndarray) -> np.ndarray:
    hit = _quad_intersection(o, d, qmin, qadj, qmax)
    if math.isnan(hit[0]):
        return hit
    dot = (d[0] * (hit[0] - o[0])
           + d[1] * (hit[1] - o[1])
           + d[2] * (hit[2] - o[2]))
    # strictly ahead of the origin
    if not dot > 0.0:
        hit[:] = math.nan
    return hit


@njit(cache=True, error_model="numpy")
def _prism_intersection(o: np.ndarray, d: np.ndarray,
                        bmin: np.ndarray, bmax: np.ndarray) -> np.ndarray:
    """First forward face hit in fixed face order, or all-NaN on miss."""
    corners = np.empty((3, 3), dtype=np.float64)
    hit = np.full(3, math.nan)
    for f in range(_FACES.shape[0]):
        for c in range(3):
            for k in range(3):
                corners[c, k] = bmax[k] if _FACES[f, c, k] else bmin[k]
        hit = _forward_quad_intersection(o, d, corners[0], corners[1], corners[2])
        if not math.isnan(hit[0]):
            return hit
    return hit


@njit(cache=True, error_model="numpy")
def _grid_step(pos: np.ndarray, d: np.ndarray, cell_size: float) -> float:
    """
    Advance *pos* in place to the next grid boundary crossing and return
    the travelled distance. A zero direction component never crosses.
    """
    lowest = math.inf
    for k in range(3):
        dist = (cell_size - abs(pos[k]) % cell_size) / abs(d[k])
        if dist < lowest:
            lowest = dist
    for k in range(3):
        pos[k] += d[k] * lowest
    return lowest

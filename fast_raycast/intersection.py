"""
Ray/plane and ray/quad intersection.

A quad is described by three corners ``min``, ``adjacent`` and ``max``.
Its plane normal is ``(min - adjacent) x (min - max)`` and a plane point
is accepted when it lies between ``min`` and ``max`` on at least two of
the axes where they differ. That containment rule only models
axis-aligned rectangles; it is kept as is because adjacent box faces
share edges and corners under it.

Public API
----------
plane_line_intersection(pos, dir, plane_point, plane_normal)
    - unbounded plane hit, inf/NaN components when parallel
quad_intersection(pos, dir, qmin, adjacent, qmax)
    - bounded hit or None
forward_quad_intersection(pos, dir, qmin, adjacent, qmax)
    - bounded hit strictly ahead of *pos*, or None
"""
import math
from typing import Iterable, List, Optional, Sequence

import numpy as np

from ._core import (
    _forward_quad_intersection,
    _is_between_unordered,
    _plane_line_intersection,
    _quad_intersection,
)
from .errors import InvalidArgumentError
from .point import Point


def _vector(values: Iterable[float], name: str = "point") -> np.ndarray:
    arr = np.asarray(tuple(values), dtype=np.float64)
    if arr.shape != (3,):
        raise InvalidArgumentError(f"{name} must have exactly 3 components")
    return arr


def _direction(values: Iterable[float]) -> np.ndarray:
    """Direction vector as an array; the zero vector is rejected."""
    arr = _vector(values, "direction")
    if not np.any(arr):
        raise InvalidArgumentError("direction must not be the zero vector")
    return arr


def _to_point(arr: np.ndarray) -> Optional[Point]:
    if math.isnan(arr[0]):
        return None
    return Point.from_array(arr)


def is_between_unordered(value: float, bound_a: float, bound_b: float) -> bool:
    """True if *value* lies in the closed interval spanned by the bounds."""
    return bool(_is_between_unordered(float(value), float(bound_a), float(bound_b)))


def plane_line_intersection(pos: Iterable[float],
                            direction: Iterable[float],
                            plane_point: Iterable[float],
                            plane_normal: Iterable[float]) -> Point:
    """
    Return where the infinite line ``pos + t*direction`` meets the plane.

    Never raises for a line parallel to the plane: the components of the
    result are then infinite or NaN and must be read as "no intersection".
    """
    hit = _plane_line_intersection(
        _vector(pos, "pos"),
        _vector(direction, "direction"),
        _vector(plane_point, "plane_point"),
        _vector(plane_normal, "plane_normal"),
    )
    return Point.from_array(hit)


def quad_intersection(pos: Iterable[float],
                      direction: Iterable[float],
                      qmin: Iterable[float],
                      adjacent: Iterable[float],
                      qmax: Iterable[float]) -> Optional[Point]:
    """Return the line's hit inside the quad, or None."""
    hit = _quad_intersection(
        _vector(pos, "pos"),
        _direction(direction),
        _vector(qmin, "qmin"),
        _vector(adjacent, "adjacent"),
        _vector(qmax, "qmax"),
    )
    return _to_point(hit)


def forward_quad_intersection(pos: Iterable[float],
                              direction: Iterable[float],
                              qmin: Iterable[float],
                              adjacent: Iterable[float],
                              qmax: Iterable[float]) -> Optional[Point]:
    """
    Like :func:`quad_intersection` but only accepts hits strictly ahead of
    *pos* along *direction*. A hit exactly at the origin is rejected.
    """
    hit = _forward_quad_intersection(
        _vector(pos, "pos"),
        _direction(direction),
        _vector(qmin, "qmin"),
        _vector(adjacent, "adjacent"),
        _vector(qmax, "qmax"),
    )
    return _to_point(hit)


def intersect_planes(pos: Iterable[float],
                     direction: Iterable[float],
                     planes: Sequence[Sequence[Iterable[float]]]) -> List[Point]:
    """
    Unbounded plane hits for a batch of ``(min, adjacent, max)`` quads.

    No containment test is applied; one Point is returned per plane, in
    order, with inf/NaN components for planes parallel to the line.
    """
    o = _vector(pos, "pos")
    d = _vector(direction, "direction")
    hits = []
    for plane in planes:
        if len(plane) != 3:
            raise InvalidArgumentError("each plane needs (min, adjacent, max)")
        qmin, qadj, qmax = (_vector(c, "plane corner") for c in plane)
        normal = np.cross(qmin - qadj, qmin - qmax)
        hits.append(Point.from_array(_plane_line_intersection(o, d, qmin, normal)))
    return hits

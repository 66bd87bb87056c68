"""
Ray intersection against arbitrary 3D areas and lazy grid traversal.

    >>> from fast_raycast import rectangular_prism
    >>> box = rectangular_prism((0, 0, 0), (2, 2, 2))
    >>> box.intersection((1, 1, -5), (0, 0, 1))
    Point(x=1.0, y=1.0, z=0.0)
"""
from .area import AREA_CONVERTER, Area, CombinedArea, combined
from .converter import Converter
from .errors import InvalidArgumentError, NoConverterRegisteredError, RaycastError
from .grid import (
    DEFAULT_CELL_SIZE,
    DEFAULT_MAX_LENGTH,
    GridIterator,
    exact_grid_iterator,
    exact_position,
    grid_iterator,
    plot_traversal,
    snap_to_grid,
)
from .intersection import (
    forward_quad_intersection,
    intersect_planes,
    is_between_unordered,
    plane_line_intersection,
    quad_intersection,
)
from .point import Point
from .prism import (
    RectangularPrism,
    StaticRectangularPrism,
    WrappedRectangularPrism,
    rectangular_prism,
    wrapper,
)

__all__ = [
    "AREA_CONVERTER",
    "Area",
    "CombinedArea",
    "combined",
    "Converter",
    "InvalidArgumentError",
    "NoConverterRegisteredError",
    "RaycastError",
    "DEFAULT_CELL_SIZE",
    "DEFAULT_MAX_LENGTH",
    "GridIterator",
    "exact_grid_iterator",
    "exact_position",
    "grid_iterator",
    "plot_traversal",
    "snap_to_grid",
    "forward_quad_intersection",
    "intersect_planes",
    "is_between_unordered",
    "plane_line_intersection",
    "quad_intersection",
    "Point",
    "RectangularPrism",
    "StaticRectangularPrism",
    "WrappedRectangularPrism",
    "rectangular_prism",
    "wrapper",
]

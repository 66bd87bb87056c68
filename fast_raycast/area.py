"""
The Area capability: any 3D volume that can report where a ray hits it.
"""
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional, Tuple

from .converter import Converter
from .point import Point


class Area(ABC):
    """Specifies an object that represents some arbitrary 3D area."""

    @abstractmethod
    def intersection(self, pos: Iterable[float],
                     direction: Iterable[float]) -> Optional[Point]:
        """Return the point where the ray hits this area, or None."""

    def intersects(self, pos: Iterable[float], direction: Iterable[float]) -> bool:
        """Return True if the ray hits this area."""
        return self.intersection(pos, direction) is not None


class CombinedArea(Area):
    """
    Ordered group of areas reporting the first child that is hit.

    This is a "first applicable" combinator, not a "closest" one: children
    after the first hit are not evaluated, whatever their distance.
    """

    def __init__(self, areas: Iterable[Area]) -> None:
        self.areas: Tuple[Area, ...] = tuple(areas)

    def intersection(self, pos: Iterable[float],
                     direction: Iterable[float]) -> Optional[Point]:
        # materialize once so generators survive every child
        pos = Point.of(pos)
        direction = Point.of(direction)
        for area in self.areas:
            hit = area.intersection(pos, direction)
            if hit is not None:
                return hit
        return None

    def __iter__(self) -> Iterator[Area]:
        return iter(self.areas)

    def __len__(self) -> int:
        return len(self.areas)

    def __repr__(self) -> str:
        return f"CombinedArea({list(self.areas)!r})"


def combined(*areas: Area) -> CombinedArea:
    """Combine *areas* into one, tested in the order given."""
    return CombinedArea(areas)


# Process-wide converter from domain objects (entities, blocks, ...) to areas.
AREA_CONVERTER: Converter[Area] = Converter()

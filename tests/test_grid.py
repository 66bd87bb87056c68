import itertools
import math

import matplotlib.pyplot as plt
import numpy as np
import pytest

from fast_raycast import (
    GridIterator,
    InvalidArgumentError,
    Point,
    exact_grid_iterator,
    exact_position,
    grid_iterator,
    plot_traversal,
    snap_to_grid,
)


def test_unit_steps_along_x():
    it = grid_iterator((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 1.0, 3.0)
    cells = []
    lengths = []
    while it.has_next():
        cells.append(next(it))
        lengths.append(it.length)

    assert cells == [Point(1.0, 0.0, 0.0), Point(2.0, 0.0, 0.0), Point(3.0, 0.0, 0.0)]
    assert lengths == pytest.approx([1.0, 2.0, 3.0])
    for prev, cur in zip([Point(0.0, 0.0, 0.0)] + cells, cells):
        assert np.allclose(np.subtract(cur, prev), [1.0, 0.0, 0.0])

    assert not it.has_next()
    with pytest.raises(StopIteration):
        next(it)


def test_iterator_protocol():
    cells = list(grid_iterator((0, 0, 0), (1, 0, 0), max_length=3.0))
    assert len(cells) == 3
    it = grid_iterator((0, 0, 0), (1, 0, 0), max_length=3.0)
    assert iter(it) is it


def test_diagonal_snapped_and_exact():
    start, direction = (0.5, 0.0, 0.0), (1.0, 1.0, 0.0)
    snapped = list(grid_iterator(start, direction, 1.0, 1.5))
    exact = list(exact_grid_iterator(start, direction, 1.0, 1.5))
    assert snapped == [Point(1.0, 0.0, 0.0), Point(1.0, 1.0, 0.0), Point(2.0, 1.0, 0.0)]
    assert exact == [Point(1.0, 0.5, 0.0), Point(1.5, 1.0, 0.0), Point(2.0, 1.5, 0.0)]


def test_exact_iterator_keeps_off_axis_coordinates():
    crossings = list(exact_grid_iterator((0.0, 0.5, 0.25), (1.0, 0.0, 0.0), 1.0, 2.0))
    assert crossings == [Point(1.0, 0.5, 0.25), Point(2.0, 0.5, 0.25)]


def test_negative_direction_exact():
    crossings = list(exact_grid_iterator((0.5, 0.5, 0.5), (-1.0, 0.0, 0.0), 1.0, 1.5))
    assert crossings == [Point(0.0, 0.5, 0.5), Point(-1.0, 0.5, 0.5)]


def test_larger_cell_size():
    cells = list(grid_iterator((0.0, 0.0, 0.0), (0.0, 0.0, 1.0), 2.0, 6.0))
    assert cells == [Point(0.0, 0.0, 2.0), Point(0.0, 0.0, 4.0), Point(0.0, 0.0, 6.0)]


def test_length_is_parametric_in_direction():
    it = grid_iterator((0.0, 0.0, 0.0), (2.0, 0.0, 0.0), 1.0, 1.0)
    assert list(it) == [Point(1.0, 0.0, 0.0), Point(2.0, 0.0, 0.0)]
    assert it.length == pytest.approx(1.0)


def test_default_length_is_unbounded():
    it = grid_iterator((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
    cells = list(itertools.islice(it, 100))
    assert len(cells) == 100
    assert it.has_next()
    assert math.isinf(it.max_length)
    assert it.cell_size == 1.0


def test_zero_max_length_is_empty():
    assert list(grid_iterator((0, 0, 0), (1, 0, 0), 1.0, 0.0)) == []


def test_start_is_not_mutated():
    start = np.zeros(3)
    list(grid_iterator(start, (1.0, 1.0, 0.0), 1.0, 4.0))
    assert not start.any()


@pytest.mark.parametrize("kwargs", [
    dict(direction=(0.0, 0.0, 0.0)),
    dict(cell_size=0.0),
    dict(cell_size=-1.0),
    dict(cell_size=math.nan),
    dict(cell_size=math.inf),
    dict(max_length=-1.0),
    dict(max_length=math.nan),
])
def test_invalid_arguments(kwargs):
    args = dict(start=(0.0, 0.0, 0.0), direction=(1.0, 0.0, 0.0))
    args.update(kwargs)
    with pytest.raises(InvalidArgumentError):
        GridIterator(**args)


def test_emission_policies():
    pos = np.array([1.5, -0.5, 2.0])
    assert snap_to_grid(pos, 1.0) == Point(1.0, -1.0, 2.0)
    assert snap_to_grid(pos, 2.0) == Point(0.0, -2.0, 2.0)
    assert exact_position(pos, 1.0) == Point(1.5, -0.5, 2.0)


def test_custom_emission_policy():
    it = GridIterator((0, 0, 0), (1, 0, 0), 1.0, 2.0,
                      emit=lambda pos, size: tuple(pos / size))
    assert list(it) == [(1.0, 0.0, 0.0), (2.0, 0.0, 0.0)]


def test_plot_traversal():
    origin, direction = (0.5, 0.5, 0.5), (1.0, 1.0, 0.0)
    cells = list(grid_iterator(origin, direction, max_length=3.0))
    assert cells[0] == Point(1.0, 1.0, 0.0)
    assert len(cells) == 4

    ax = plot_traversal(origin, direction, cells, show=False)
    lo, hi = ax.get_xlim()
    assert lo <= 1.0 and hi >= 5.0
    plt.close(ax.figure)

    with pytest.raises(InvalidArgumentError):
        plot_traversal(origin, direction, [], show=False)

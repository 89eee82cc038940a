# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for the breadth-first connectivity solver."""

from maze_runner_env.server.grid import GridModel
from maze_runner_env.server.solver import shortest_open_path, shortest_path


def _assert_valid_path(grid, path, source, dest):
    assert path[0] == grid.index_of(*source)
    assert path[-1] == grid.index_of(*dest)
    for a, b in zip(path, path[1:]):
        ax, ay = grid.position_of(a)
        bx, by = grid.position_of(b)
        assert abs(ax - bx) + abs(ay - by) == 1
    for index in path:
        assert grid.is_open(*grid.position_of(index))


def test_straight_corridor():
    grid = GridModel.from_rows(["....."])
    assert shortest_path(grid, (0, 0), (4, 0)) == [0, 1, 2, 3, 4]


def test_path_length_around_walls():
    grid = GridModel.from_rows([
        "....",
        ".##.",
        "....",
    ])
    path = shortest_path(grid, (0, 1), (3, 1))
    assert path is not None
    assert len(path) == 6
    _assert_valid_path(grid, path, (0, 1), (3, 1))


def test_unreachable_returns_none():
    grid = GridModel.from_rows([
        "..#..",
        "..#..",
    ])
    assert shortest_path(grid, (0, 0), (4, 1)) is None


def test_obstacles_block_the_search():
    grid = GridModel.from_rows([
        "..^..",
        "##.##",
    ])
    assert shortest_path(grid, (0, 0), (4, 0)) is None


def test_endpoint_that_is_not_open_has_no_path():
    grid = GridModel.from_rows(["..#"])
    assert shortest_path(grid, (0, 0), (2, 0)) is None
    assert shortest_path(grid, (2, 0), (0, 0)) is None


def test_source_equals_dest():
    grid = GridModel.from_rows(["..", ".."])
    assert shortest_path(grid, (1, 1), (1, 1)) == [3]


def test_shortest_among_several_routes():
    grid = GridModel.from_rows([
        ".......",
        ".#####.",
        ".......",
        ".#####.",
        ".......",
    ])
    path = shortest_path(grid, (0, 2), (6, 2))
    # Only the length is fixed; which corridor is taken is up to the search order.
    assert len(path) == 7
    _assert_valid_path(grid, path, (0, 2), (6, 2))


class TestShortestOpenPath:
    def test_plain_boolean_rows(self):
        open_rows = [
            [True, False, True],
            [True, True, True],
        ]
        assert shortest_open_path(open_rows, (0, 0), (2, 0)) == [0, 3, 4, 5, 2]

    def test_out_of_bounds_endpoint(self):
        assert shortest_open_path([[True, True]], (0, 0), (2, 0)) is None

    def test_empty_mask(self):
        assert shortest_open_path([], (0, 0), (0, 0)) is None

    def test_matches_grid_search(self):
        grid = GridModel.from_rows([
            "....",
            ".^#.",
            "....",
        ])
        open_rows = (grid.cells == 0).tolist()
        assert shortest_open_path(open_rows, (0, 1), (3, 1)) == shortest_path(grid, (0, 1), (3, 1))

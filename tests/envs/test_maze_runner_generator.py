# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for maze generation."""

from collections import Counter

import numpy as np
import pytest

from maze_runner_env.server import generator
from maze_runner_env.server.exceptions import ConfigurationError, MazeGenerationError
from maze_runner_env.server.generator import (
    dimensions_for_difficulty,
    generate,
    generate_for_difficulty,
    generate_undecorated,
)
from maze_runner_env.server.grid import CellState, GridModel
from maze_runner_env.server.solver import shortest_path

SEEDS = [0, 1, 2, 3, 42]


def _reference_cells(maze):
    return [maze.grid.position_of(i) for i in maze.reference_path]


# ============================================================================
# Difficulty and dimension validation
# ============================================================================


@pytest.mark.parametrize(
    "difficulty,expected",
    [(1, (20, 18)), (2, (25, 21)), (4, (35, 27)), (7, (50, 36))],
)
def test_dimensions_for_difficulty(difficulty, expected):
    assert dimensions_for_difficulty(difficulty) == expected


@pytest.mark.parametrize("difficulty", [0, 8, -1, True, "3", 2.0])
def test_invalid_difficulty_is_a_configuration_error(difficulty):
    with pytest.raises(ConfigurationError):
        dimensions_for_difficulty(difficulty)


@pytest.mark.parametrize("width,height", [(3, 10), (10, 2), (1, 1), (0, 5)])
def test_degenerate_grid_fails_fast(width, height):
    with pytest.raises(ConfigurationError):
        generate(width, height, rng=0)


def test_non_positive_attempt_budget_is_rejected():
    with pytest.raises(ConfigurationError):
        generate(10, 10, rng=0, max_attempts=0)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        dimensions_for_difficulty(9)


# ============================================================================
# Generated maze properties
# ============================================================================


@pytest.mark.parametrize("seed", SEEDS)
def test_undecorated_maze_is_solvable(seed):
    maze = generate_undecorated(20, 18, rng=seed)
    path = shortest_path(maze.grid, maze.start, maze.end)
    assert path is not None
    assert len(path) == len(maze.reference_path)
    assert maze.attempts >= 1


@pytest.mark.parametrize("seed", SEEDS)
def test_endpoints_are_open_and_placed_on_interior_rows(seed):
    maze = generate_for_difficulty(1, rng=seed)
    (sx, sy), (ex, ey) = maze.start, maze.end
    assert sx == 1
    assert ex == maze.grid.width - 2
    assert 1 <= sy <= maze.grid.height - 2
    assert 1 <= ey <= maze.grid.height - 2
    assert maze.grid.cell(*maze.start) is CellState.OPEN
    assert maze.grid.cell(*maze.end) is CellState.OPEN


@pytest.mark.parametrize("seed", SEEDS)
def test_obstacles_are_unique_per_row_and_column(seed):
    maze = generate_for_difficulty(1, rng=seed)
    obstacles = list(maze.grid.obstacles())
    assert obstacles
    assert max(Counter(x for x, _ in obstacles).values()) == 1
    assert max(Counter(y for _, y in obstacles).values()) == 1


@pytest.mark.parametrize("seed", SEEDS)
def test_reference_path_is_adjacent_and_wall_free(seed):
    maze = generate_for_difficulty(1, rng=seed)
    cells = _reference_cells(maze)
    assert cells[0] == maze.start
    assert cells[-1] == maze.end
    for (ax, ay), (bx, by) in zip(cells, cells[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1
    for x, y in cells:
        assert not maze.grid.is_wall(x, y)


def test_decoration_only_converts_open_cells():
    undecorated = generate_undecorated(20, 18, rng=5)
    decorated = generate(20, 18, rng=5)
    assert decorated.start == undecorated.start
    assert decorated.end == undecorated.end
    assert decorated.reference_path == undecorated.reference_path

    before = undecorated.grid.cells
    after = decorated.grid.cells
    changed = before != after
    assert (before[changed] == CellState.OPEN).all()
    assert (after[changed] == CellState.OBSTACLE).all()


def test_same_seed_same_maze():
    a = generate_for_difficulty(2, rng=123)
    b = generate_for_difficulty(2, rng=123)
    assert a.grid == b.grid
    assert a.start == b.start and a.end == b.end
    assert a.reference_path == b.reference_path


def test_accepts_numpy_generator():
    maze = generate(12, 8, rng=np.random.default_rng(9))
    assert maze.grid.width == 12 and maze.grid.height == 8


def test_smallest_grid_is_supported():
    maze = generate(4, 3, rng=0)
    assert maze.start == (1, 1)
    assert maze.end == (2, 1)
    assert len(maze.reference_path) == 2


# ============================================================================
# Retry budget
# ============================================================================


def test_retry_budget_exhaustion_raises(monkeypatch):
    calls = []

    def never_solvable(open_rows, source, dest):
        calls.append((source, dest))
        return None

    monkeypatch.setattr(generator, "shortest_open_path", never_solvable)

    with pytest.raises(MazeGenerationError) as excinfo:
        generate_undecorated(10, 8, rng=0, max_attempts=5)

    assert len(calls) == 5
    assert excinfo.value.attempts == 5
    assert isinstance(excinfo.value, ConfigurationError)


def test_retries_until_solvable(monkeypatch):
    real = generator.shortest_open_path
    calls = []

    def unsolvable_twice(open_rows, source, dest):
        calls.append((source, dest))
        if len(calls) <= 2:
            return None
        return real(open_rows, source, dest)

    monkeypatch.setattr(generator, "shortest_open_path", unsolvable_twice)

    maze = generate_undecorated(4, 3, rng=0)
    assert maze.attempts == len(calls)
    assert maze.attempts >= 3


def test_rejected_samples_are_not_wrapped_in_grid_models(monkeypatch):
    real = generator.shortest_open_path
    calls = []
    built = []

    def unsolvable_three_times(open_rows, source, dest):
        calls.append(source)
        if len(calls) <= 3:
            return None
        return real(open_rows, source, dest)

    class CountingGridModel(GridModel):
        def __init__(self, cells):
            built.append(cells)
            super().__init__(cells)

    monkeypatch.setattr(generator, "shortest_open_path", unsolvable_three_times)
    monkeypatch.setattr(generator, "GridModel", CountingGridModel)

    maze = generate_undecorated(4, 3, rng=1)
    assert maze.attempts == len(calls) >= 4
    assert len(built) == 1


def test_search_sees_the_forced_open_endpoints(monkeypatch):
    seen = []

    def record(open_rows, source, dest):
        seen.append((open_rows, source, dest))
        return None

    monkeypatch.setattr(generator, "shortest_open_path", record)
    with pytest.raises(MazeGenerationError):
        generate_undecorated(6, 5, rng=3, max_attempts=3)

    for open_rows, (sx, sy), (ex, ey) in seen:
        assert isinstance(open_rows, list)
        assert len(open_rows) == 5 and len(open_rows[0]) == 6
        assert open_rows[sy][sx] is True
        assert open_rows[ey][ex] is True

# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Random maze generation by rejection sampling.

Every cell is independently a wall or open with probability 1/2. The start
sits in column 1 and the end in column ``width - 2``, each on a random
interior row. Grids without an open path between them are thrown away and
resampled until one is found or the attempt budget runs out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from .exceptions import ConfigurationError, MazeGenerationError
from .grid import CellState, GridModel, Position, decorate
from .logging import get_logger
from .solver import shortest_open_path

logger = get_logger("generator")

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 7
BASE_WIDTH = 20
BASE_HEIGHT = 18
WIDTH_STEP = 5
HEIGHT_STEP = 3

# Start and end columns (1 and width - 2) must differ, and rows exclude the
# first and last.
MIN_WIDTH = 4
MIN_HEIGHT = 3

# At difficulty 7 only about one sampled grid in 16 000 is solvable.
DEFAULT_MAX_ATTEMPTS = 200_000

RandomSource = Union[np.random.Generator, int, None]


@dataclass(frozen=True)
class GeneratedMaze:
    """A solvable maze together with its endpoints and reference path."""

    grid: GridModel
    start: Position
    end: Position
    reference_path: Tuple[int, ...]
    attempts: int = 1


def dimensions_for_difficulty(difficulty: int) -> Tuple[int, int]:
    """
    Map a difficulty level to ``(width, height)``.

    Raises:
        ConfigurationError: If difficulty is not an integer in 1..7
    """
    if isinstance(difficulty, bool) or not isinstance(difficulty, int):
        raise ConfigurationError(f"Difficulty must be an integer, got {difficulty!r}")
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ConfigurationError(
            f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {difficulty}"
        )
    width = BASE_WIDTH + (difficulty - 1) * WIDTH_STEP
    height = BASE_HEIGHT + (difficulty - 1) * HEIGHT_STEP
    return width, height


def validate_max_attempts(max_attempts: int) -> None:
    """Raise ConfigurationError unless the attempt budget is a positive integer."""
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
        raise ConfigurationError(f"max_attempts must be a positive integer, got {max_attempts!r}")


def _validate_dimensions(width: int, height: int, max_attempts: int) -> None:
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        raise ConfigurationError(
            f"Maze must be at least {MIN_WIDTH}x{MIN_HEIGHT}, got {width}x{height}"
        )
    validate_max_attempts(max_attempts)


def _sample_grid(width: int, height: int, rng: np.random.Generator) -> np.ndarray:
    # 0 and 1 are CellState.OPEN and CellState.WALL
    return rng.integers(0, 2, size=(height, width), dtype=np.int8)


def _sample_endpoints(width: int, height: int, rng: np.random.Generator) -> Tuple[Position, Position]:
    start = (1, int(rng.integers(1, height - 1)))
    end = (width - 2, int(rng.integers(1, height - 1)))
    return start, end


def generate_undecorated(
    width: int,
    height: int,
    rng: RandomSource = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> GeneratedMaze:
    """
    Sample grids until one has an open path from start to end.

    Args:
        width: Number of columns
        height: Number of rows
        rng: numpy Generator, integer seed, or None for fresh entropy
        max_attempts: Upper bound on sampled grids

    Returns:
        GeneratedMaze without obstacles

    Raises:
        ConfigurationError: If the dimensions or attempt budget are invalid
        MazeGenerationError: If no solvable grid was found in time
    """
    _validate_dimensions(width, height, max_attempts)
    rng = np.random.default_rng(rng)

    for attempt in range(1, max_attempts + 1):
        cells = _sample_grid(width, height, rng)
        start, end = _sample_endpoints(width, height, rng)
        for x, y in (start, end):
            cells[y, x] = CellState.OPEN

        # Only the accepted sample is wrapped in a GridModel.
        path = shortest_open_path((cells == CellState.OPEN).tolist(), start, end)
        if path is not None:
            logger.debug(
                "Accepted %dx%d maze on attempt %d (path length %d)",
                width,
                height,
                attempt,
                len(path),
            )
            return GeneratedMaze(GridModel(cells), start, end, tuple(path), attempts=attempt)
        logger.debug("Attempt %d produced an unsolvable maze; retrying", attempt)

    logger.warning("Giving up on %dx%d maze after %d attempts", width, height, max_attempts)
    raise MazeGenerationError(width, height, max_attempts)


def generate(
    width: int,
    height: int,
    rng: RandomSource = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> GeneratedMaze:
    """
    Generate a solvable maze and decorate it with obstacles.

    The reference path is computed before obstacles are placed, so it may
    cross cells that end up as obstacles.
    """
    maze = generate_undecorated(width, height, rng, max_attempts)
    grid = decorate(maze.grid, protected=(maze.start, maze.end))
    return GeneratedMaze(grid, maze.start, maze.end, maze.reference_path, maze.attempts)


def generate_for_difficulty(
    difficulty: int,
    rng: RandomSource = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> GeneratedMaze:
    width, height = dimensions_for_difficulty(difficulty)
    return generate(width, height, rng, max_attempts)

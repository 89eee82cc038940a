# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Game sessions.

A session owns one generated maze, the agent navigating it and the score once
the goal is reached. Presentation layers drive it with ``apply_input`` and
read it through the query functions below; they never mutate it directly.
"""

from __future__ import annotations

from typing import FrozenSet, Optional, Tuple

from ..models import InputKind
from .exceptions import SessionNotCompletedError
from .generator import (
    DEFAULT_MAX_ATTEMPTS,
    GeneratedMaze,
    RandomSource,
    dimensions_for_difficulty,
    generate,
)
from .grid import CellState, GridModel, Position
from .logging import get_logger
from .navigation import Direction, InputMode, Navigator
from .scoring import score

logger = get_logger("session")

_DIRECTIONS = {
    InputKind.MOVE_UP: Direction.UP,
    InputKind.MOVE_DOWN: Direction.DOWN,
    InputKind.MOVE_LEFT: Direction.LEFT,
    InputKind.MOVE_RIGHT: Direction.RIGHT,
}


class Session:
    """State of one game, from generation to completion."""

    def __init__(self, maze: GeneratedMaze, difficulty: Optional[int] = None):
        self.maze = maze
        self.difficulty = difficulty
        self.navigator = Navigator(maze.grid, maze.start, maze.end)
        self._final_score: Optional[int] = None

    @property
    def grid(self) -> GridModel:
        return self.maze.grid

    @property
    def start(self) -> Position:
        return self.maze.start

    @property
    def end(self) -> Position:
        return self.maze.end

    @property
    def reference_path(self) -> Tuple[int, ...]:
        return self.maze.reference_path

    @property
    def agent_path(self) -> Tuple[int, ...]:
        return self.navigator.path

    @property
    def jump_armed(self) -> bool:
        return self.navigator.mode is InputMode.JUMP_ARMED

    def apply_input(self, kind: InputKind) -> bool:
        """
        Feed one input to the agent.

        Returns:
            True if the session changed (the agent moved or a jump was armed);
            False for rejected inputs and for any input after completion.
        """
        kind = InputKind(kind)
        if self.completed:
            logger.debug("Ignoring %s: session already completed", kind.value)
            return False
        if kind is InputKind.ARM_JUMP:
            return self.navigator.arm_jump()

        moved = self.navigator.press(_DIRECTIONS[kind])
        if self.navigator.completed and self._final_score is None:
            self._final_score = score(self.reference_path, self.agent_path)
            logger.info("Session completed with score %d", self._final_score)
        return moved

    def cell_state(self, x: int, y: int) -> CellState:
        return self.grid.cell(x, y)

    def agent_position(self) -> Position:
        return self.navigator.position

    def end_position(self) -> Position:
        return self.end

    @property
    def completed(self) -> bool:
        return self.navigator.completed

    def is_completed(self) -> bool:
        return self.completed

    def final_score(self) -> int:
        """
        Score of the finished game.

        Raises:
            SessionNotCompletedError: If the goal has not been reached yet
        """
        if not self.completed:
            raise SessionNotCompletedError("The final score is only available once the maze is completed")
        if self._final_score is None:
            self._final_score = score(self.reference_path, self.agent_path)
        return self._final_score

    def reference_path_cells(self) -> FrozenSet[int]:
        return frozenset(self.reference_path)

    def agent_path_cells(self) -> FrozenSet[int]:
        return frozenset(self.agent_path)


def new_session(
    difficulty: int,
    seed: RandomSource = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Session:
    """
    Start a new game at the given difficulty (1..7).

    Raises:
        ConfigurationError: If the difficulty is out of range
    """
    width, height = dimensions_for_difficulty(difficulty)
    maze = generate(width, height, seed, max_attempts)
    logger.info(
        "New %dx%d session at difficulty %d (start %s, end %s, %d attempts)",
        width,
        height,
        difficulty,
        maze.start,
        maze.end,
        maze.attempts,
    )
    return Session(maze, difficulty=difficulty)


def apply_input(session: Session, kind: InputKind) -> bool:
    return session.apply_input(kind)


def cell_state(session: Session, x: int, y: int) -> CellState:
    return session.cell_state(x, y)


def agent_position(session: Session) -> Position:
    return session.agent_position()


def end_position(session: Session) -> Position:
    return session.end_position()


def is_completed(session: Session) -> bool:
    return session.is_completed()


def final_score(session: Session) -> int:
    return session.final_score()


def reference_path_cells(session: Session) -> FrozenSet[int]:
    return session.reference_path_cells()


def agent_path_cells(session: Session) -> FrozenSet[int]:
    return session.agent_path_cells()

# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Agent movement rules.

A plain step may enter any in-bounds cell that is neither a wall nor an
obstacle. A jump covers the same single cell but is only legal when the agent
is leaving or entering an obstacle. Jumps are requested in two parts: an arm
signal, then the direction. The direction always disarms, whether or not the
jump succeeds.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .grid import GridModel, Position
from .logging import get_logger

logger = get_logger("navigation")


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value


class InputMode(Enum):
    """Whether the next directional input is a step or a jump."""

    IDLE = "idle"
    JUMP_ARMED = "jump_armed"


class Navigator:
    """
    Tracks the agent on a fixed grid.

    Args:
        grid: The decorated maze grid
        start: Starting position ``(x, y)``
        end: Goal position ``(x, y)``
    """

    def __init__(self, grid: GridModel, start: Position, end: Position):
        if not grid.in_bounds(*start) or not grid.in_bounds(*end):
            raise ValueError(f"Start {start} and end {end} must lie inside the grid")
        self.grid = grid
        self.start = start
        self.end = end
        self._position = start
        self._path: List[int] = [grid.index_of(*start)]
        self._mode = InputMode.IDLE
        self._completed = start == end

    @property
    def position(self) -> Position:
        return self._position

    @property
    def path(self) -> Tuple[int, ...]:
        """Canonical indices of every cell visited, start first."""
        return tuple(self._path)

    @property
    def mode(self) -> InputMode:
        return self._mode

    @property
    def completed(self) -> bool:
        return self._completed

    def _target(self, direction: Direction) -> Position:
        dx, dy = direction.offset
        x, y = self._position
        return x + dx, y + dy

    def can_step(self, direction: Direction) -> bool:
        tx, ty = self._target(direction)
        return (
            self.grid.in_bounds(tx, ty)
            and not self.grid.is_wall(tx, ty)
            and not self.grid.is_obstacle(tx, ty)
        )

    def can_jump(self, direction: Direction) -> bool:
        tx, ty = self._target(direction)
        if not self.grid.in_bounds(tx, ty) or self.grid.is_wall(tx, ty):
            return False
        return self.grid.is_obstacle(*self._position) or self.grid.is_obstacle(tx, ty)

    def arm_jump(self) -> bool:
        """Arm a jump for the next directional input. Returns True if the mode changed."""
        if self._completed or self._mode is InputMode.JUMP_ARMED:
            return False
        self._mode = InputMode.JUMP_ARMED
        return True

    def press(self, direction: Direction) -> bool:
        """
        Handle a directional input in the current mode.

        Returns:
            True if the agent moved
        """
        if self._completed:
            return False
        if self._mode is InputMode.JUMP_ARMED:
            self._mode = InputMode.IDLE
            return self.jump(direction)
        return self.step(direction)

    def step(self, direction: Direction) -> bool:
        if self._completed or not self.can_step(direction):
            logger.debug("Rejected step %s from %s", direction.name, self._position)
            return False
        self._move_to(self._target(direction))
        return True

    def jump(self, direction: Direction) -> bool:
        if self._completed or not self.can_jump(direction):
            logger.debug("Rejected jump %s from %s", direction.name, self._position)
            return False
        self._move_to(self._target(direction))
        return True

    def _move_to(self, target: Position) -> None:
        self._position = target
        self._path.append(self.grid.index_of(*target))
        if target == self.end:
            self._completed = True
            logger.info("Goal %s reached after %d cells", self.end, len(self._path))

    def legal_moves(self) -> List[Tuple[Direction, bool]]:
        """
        Directions that would move the agent in the current mode.

        Returns:
            ``(direction, is_jump)`` pairs
        """
        if self._completed:
            return []
        if self._mode is InputMode.JUMP_ARMED:
            return [(d, True) for d in Direction if self.can_jump(d)]
        return [(d, False) for d in Direction if self.can_step(d)]

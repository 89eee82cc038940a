# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Data models for the Maze Runner Environment.

The agent walks a random grid maze from a start cell in column 1 to an end
cell in column ``width - 2``. Walls never let it through; obstacles can only
be entered or left with a jump (``ARM_JUMP`` followed by a direction).
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from runner_core.env_server.types import Action, Observation, State


class InputKind(str, Enum):
    """Discrete inputs accepted by a session."""

    ARM_JUMP = "ARM_JUMP"
    MOVE_UP = "MOVE_UP"
    MOVE_DOWN = "MOVE_DOWN"
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"


class MazeRunnerAction(Action):
    """Action for the Maze Runner environment"""

    input: InputKind = Field(..., description="Arm a jump or move in a direction")


class MazeRunnerObservation(Observation):
    """
    Observation from the Maze Runner environment.

    Positions are ``[x, y]``; paths are canonical cell indices ``y * width + x``.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        grid: Cell names (``OPEN``, ``WALL``, ``OBSTACLE``) indexed ``[y][x]``.
        agent_position: Current agent position.
        start_position: Start cell.
        end_position: Goal cell.
        jump_armed: Whether the next direction will be taken as a jump.
        accepted: Whether the last input changed the session.
        completed: Whether the goal has been reached.
        score: Efficiency score, set once completed.
        agent_path: Every cell the agent has visited, in order.
        reference_path: Shortest open path, revealed once completed.
        legal_inputs: Inputs that would currently change the session.
        message: Human readable status line.
    """

    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    grid: List[List[str]] = Field(default_factory=list, description="Cell states by row")
    agent_position: List[int] = Field(default_factory=list)
    start_position: List[int] = Field(default_factory=list)
    end_position: List[int] = Field(default_factory=list)
    jump_armed: bool = False
    accepted: bool = True
    completed: bool = False
    score: Optional[int] = None
    agent_path: List[int] = Field(default_factory=list)
    reference_path: List[int] = Field(default_factory=list)
    legal_inputs: List[InputKind] = Field(default_factory=list)
    message: str = ""


class MazeRunnerState(State):
    """Episode metadata for the Maze Runner environment."""

    difficulty: int = 1
    seed: Optional[int] = None
    width: int = 0
    height: int = 0
    moves_accepted: int = 0
    moves_rejected: int = 0
    completed: bool = False
    score: Optional[int] = None

# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Server-side implementation for the Maze Runner environment."""

from .grid import CellState, GridModel, decorate
from .maze_runner_environment import MazeRunnerEnvironment
from .session import Session, new_session

__all__ = [
    "CellState",
    "GridModel",
    "MazeRunnerEnvironment",
    "Session",
    "decorate",
    "new_session",
]

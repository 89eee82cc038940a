# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Maze Runner Environment.

Random solvable grid mazes with obstacle jumps and path-efficiency scoring,
served through the runner_core Environment interface.
"""

from .client import MazeRunnerEnv
from .models import InputKind, MazeRunnerAction, MazeRunnerObservation, MazeRunnerState

__all__ = [
    "InputKind",
    "MazeRunnerAction",
    "MazeRunnerEnv",
    "MazeRunnerObservation",
    "MazeRunnerState",
]

# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Exceptions for the Maze Runner environment.

Illegal moves are not errors: a rejected step or jump is a normal
outcome and leaves the session unchanged.
"""

from runner_core.env_server.exceptions import OpenEnvError


class MazeRunnerError(OpenEnvError):
    """Base class for Maze Runner errors."""

    pass


class ConfigurationError(MazeRunnerError, ValueError):
    """Raised when a difficulty or grid size cannot produce a valid maze."""

    pass


class MazeGenerationError(ConfigurationError):
    """Raised when no solvable maze was found within the attempt budget."""

    def __init__(self, width: int, height: int, attempts: int):
        self.width = width
        self.height = height
        self.attempts = attempts
        super().__init__(
            f"No solvable {width}x{height} maze found after {attempts} attempts"
        )


class SessionNotCompletedError(MazeRunnerError):
    """Raised when the final score is requested before the goal was reached."""

    pass

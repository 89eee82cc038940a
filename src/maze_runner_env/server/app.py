# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
FastAPI application for the Maze Runner Environment.

This module creates an HTTP server that exposes the MazeRunnerEnvironment
over HTTP endpoints, making it compatible with HTTPEnvClient.

Usage:
    # Development (with auto-reload):
    uvicorn maze_runner_env.server.app:app --reload --host 0.0.0.0 --port 8000

    # Production:
    uvicorn maze_runner_env.server.app:app --host 0.0.0.0 --port 8000

    # Or run directly:
    python -m maze_runner_env.server.app --log-level debug

Variables:
    MAZE_RUNNER_DIFFICULTY: Default difficulty level, 1..7 (default: 1)
    MAZE_RUNNER_SEED: Seed for the environment's random source (default: unset)
    MAZE_RUNNER_MAX_ATTEMPTS: Upper bound on sampled grids per maze
    MAZE_RUNNER_LOG_LEVEL: Level of the ``maze_runner_env`` loggers
"""

import logging
import os
from typing import Optional

from runner_core.env_server.http_server import create_app

from ..models import MazeRunnerAction, MazeRunnerObservation, MazeRunnerState
from .exceptions import ConfigurationError
from .generator import DEFAULT_MAX_ATTEMPTS
from .logging import configure_logging
from .maze_runner_environment import MazeRunnerEnvironment

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from e


def build_environment() -> MazeRunnerEnvironment:
    """
    Create the environment from ``MAZE_RUNNER_*`` variables.

    Unset variables take their defaults; set ones are passed through as-is,
    so out-of-range values raise ConfigurationError here.
    """
    difficulty = _optional_int("MAZE_RUNNER_DIFFICULTY")
    seed = _optional_int("MAZE_RUNNER_SEED")
    max_attempts = _optional_int("MAZE_RUNNER_MAX_ATTEMPTS")
    return MazeRunnerEnvironment(
        difficulty=1 if difficulty is None else difficulty,
        seed=seed,
        max_attempts=DEFAULT_MAX_ATTEMPTS if max_attempts is None else max_attempts,
    )


configure_logging()

# Create the environment instance
env = build_environment()

app = create_app(
    env,
    MazeRunnerAction,
    MazeRunnerObservation,
    state_cls=MazeRunnerState,
    env_name="maze_runner_env",
)


def main(host: str = "0.0.0.0", port: int = 8000, log_level: Optional[str] = None):
    """
    Entry point for direct execution.

        python -m maze_runner_env.server.app
        python -m maze_runner_env.server.app --port 8001 --log-level info

    Args:
        host: Host address to bind to (default: "0.0.0.0")
        port: Port number to listen on (default: 8000)
        log_level: Level for the ``maze_runner_env`` loggers; overrides
            ``MAZE_RUNNER_LOG_LEVEL``
    """
    import uvicorn

    logging.basicConfig(format=LOG_FORMAT)
    configure_logging(log_level)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port number to listen on (default: 8000)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host address to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Level of the maze_runner_env loggers, e.g. debug or info "
        "(default: $MAZE_RUNNER_LOG_LEVEL or warning)"
    )
    args = parser.parse_args()
    main(port=args.port, host=args.host, log_level=args.log_level)

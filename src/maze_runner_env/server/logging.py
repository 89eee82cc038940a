# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Logger setup for the Maze Runner environment.

Every module logs under the ``maze_runner_env`` namespace. The server picks
the level from its ``--log-level`` flag, then ``MAZE_RUNNER_LOG_LEVEL``, then
falls back to WARNING.
"""

from __future__ import annotations

import logging
import os

from .exceptions import ConfigurationError

LOGGER_NAMESPACE = "maze_runner_env"
LOG_LEVEL_ENV = "MAZE_RUNNER_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING

_namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
if _namespace_logger.level == logging.NOTSET:
    _namespace_logger.setLevel(DEFAULT_LEVEL)


def resolve_level(level: str | int) -> int:
    """
    Turn ``"debug"``, ``"DEBUG"``, ``"10"`` or ``10`` into a numeric level.

    Raises:
        ConfigurationError: If the name is not a known logging level
    """
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ConfigurationError(f"Unknown log level {level!r}")
    return value


def configure_logging(log_level: str | int | None = None) -> int:
    """
    Set the level of the ``maze_runner_env`` loggers.

    Args:
        log_level: Explicit level; ``MAZE_RUNNER_LOG_LEVEL`` is read when omitted.

    Returns:
        The numeric level applied
    """
    if log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV) or DEFAULT_LEVEL
    level = resolve_level(log_level)
    _namespace_logger.setLevel(level)
    return level


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")

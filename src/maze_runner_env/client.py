# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
MazeRunnerEnv HTTP Client.

This module provides the client for connecting to a Maze Runner Environment
server over HTTP.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from runner_core.client_types import StepResult
from runner_core.http_env_client import HTTPEnvClient

from .models import MazeRunnerAction, MazeRunnerObservation, MazeRunnerState

_CELL_SYMBOLS = {"OPEN": ".", "WALL": "#", "OBSTACLE": "^"}


class MazeRunnerEnv(HTTPEnvClient[MazeRunnerAction, MazeRunnerObservation]):
    """
    HTTP client for the Maze Runner Environment.

    Example:
        >>> with MazeRunnerEnv(base_url="http://localhost:8000") as client:
        ...     result = client.reset(difficulty=2, seed=7)
        ...     print(client.render_ascii(result.observation))
        ...     result = client.step(MazeRunnerAction(input="MOVE_RIGHT"))
        ...     print(result.observation.message)
    """

    def reset(
        self,
        seed: Optional[int] = None,
        episode_id: Optional[str] = None,
        difficulty: Optional[int] = None,
    ) -> StepResult[MazeRunnerObservation]:
        """Start a new maze, optionally at a given difficulty and seed."""
        return super().reset(seed=seed, episode_id=episode_id, difficulty=difficulty)

    def _step_payload(self, action: MazeRunnerAction) -> Dict[str, Any]:
        """Prepare payload to send to the environment server."""
        payload: Dict[str, Any] = {"input": action.input.value}
        if action.metadata:
            payload["metadata"] = action.metadata
        return payload

    def _parse_result(self, payload: Dict[str, Any]) -> StepResult[MazeRunnerObservation]:
        """Parse the response from the server into MazeRunnerObservation + reward/done."""
        obs_data = dict(payload.get("observation", {}))
        obs_data["reward"] = payload.get("reward")
        obs_data["done"] = payload.get("done", False)
        observation = MazeRunnerObservation.model_validate(obs_data)

        return StepResult(
            observation=observation,
            reward=payload.get("reward"),
            done=payload.get("done", False),
        )

    def _parse_state(self, payload: Dict[str, Any]) -> MazeRunnerState:
        """Parse environment state from payload."""
        return MazeRunnerState.model_validate(payload)

    @staticmethod
    def render_ascii(observation: MazeRunnerObservation) -> str:
        """
        Render an observation as text.

        - ``#`` wall, ``.`` open, ``^`` obstacle
        - ``S`` start, ``E`` end, ``@`` agent
        - once completed: ``*`` reference path, ``+`` cells only the agent visited
        """
        width = observation.width
        reference = set(observation.reference_path) if observation.completed else set()
        visited = set(observation.agent_path) if observation.completed else set()
        agent = tuple(observation.agent_position)
        start = tuple(observation.start_position)
        end = tuple(observation.end_position)

        lines = []
        for y, row in enumerate(observation.grid):
            line = []
            for x, cell in enumerate(row):
                index = y * width + x
                if (x, y) == agent:
                    symbol = "@"
                elif (x, y) == end:
                    symbol = "E"
                elif (x, y) == start:
                    symbol = "S"
                elif index in reference:
                    symbol = "*"
                elif index in visited:
                    symbol = "+"
                else:
                    symbol = _CELL_SYMBOLS.get(cell, "?")
                line.append(symbol)
            lines.append(" ".join(line))
        return "\n".join(lines)

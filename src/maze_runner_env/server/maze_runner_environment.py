# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Maze Runner Environment Implementation.

Wraps a game ``Session`` in the runner_core Environment interface so it can
be served over HTTP and driven by agents one input at a time.
"""

from typing import Any, Dict, List, Optional
from uuid import uuid4

import numpy as np

from runner_core.env_server.exceptions import EnvironmentNotReadyError
from runner_core.env_server.interfaces import Environment

from ..models import (
    InputKind,
    MazeRunnerAction,
    MazeRunnerObservation,
    MazeRunnerState,
)
from .generator import DEFAULT_MAX_ATTEMPTS, dimensions_for_difficulty, validate_max_attempts
from .logging import get_logger
from .navigation import Direction
from .scoring import completion_message
from .session import Session, new_session

logger = get_logger("environment")

_INPUT_FOR_DIRECTION = {
    Direction.UP: InputKind.MOVE_UP,
    Direction.DOWN: InputKind.MOVE_DOWN,
    Direction.LEFT: InputKind.MOVE_LEFT,
    Direction.RIGHT: InputKind.MOVE_RIGHT,
}

WELCOME_MESSAGE = (
    "Reach the goal. Move with MOVE_UP/MOVE_DOWN/MOVE_LEFT/MOVE_RIGHT; "
    "send ARM_JUMP then a direction to jump onto or off an obstacle."
)


class MazeRunnerEnvironment(Environment):
    """
    Maze navigation environment with obstacle jumps and efficiency scoring.

    Each episode generates a fresh solvable maze. The episode ends when the
    agent reaches the goal; the terminal reward is the efficiency score
    divided by 100, every other step yields 0.0.

    Args:
        difficulty: Default difficulty level (1..7) for new episodes.
        seed: Seed for the environment's random source. Episodes reset
            without an explicit seed draw their mazes from it.
        max_attempts: Upper bound on sampled grids per maze.

    Example:
        >>> env = MazeRunnerEnvironment(difficulty=1, seed=7)
        >>> obs = env.reset()
        >>> obs = env.step(MazeRunnerAction(input=InputKind.MOVE_RIGHT))
    """

    def __init__(
        self,
        difficulty: int = 1,
        seed: Optional[int] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        super().__init__()
        # Fail fast on bad settings instead of on the first reset.
        dimensions_for_difficulty(difficulty)
        validate_max_attempts(max_attempts)
        self.difficulty = difficulty
        self.max_attempts = max_attempts
        self._rng = np.random.default_rng(seed)
        self._session: Optional[Session] = None
        self._state = MazeRunnerState(difficulty=difficulty)

    @property
    def session(self) -> Session:
        if self._session is None:
            raise EnvironmentNotReadyError("Call reset() before interacting with the maze")
        return self._session

    def reset(
        self,
        seed: Optional[int] = None,
        episode_id: Optional[str] = None,
        difficulty: Optional[int] = None,
        **kwargs: Any,
    ) -> MazeRunnerObservation:
        """
        Generate a new maze and place the agent on its start cell.

        Args:
            seed: Seed for this episode's maze; drawn from the environment's
                random source when omitted.
            episode_id: Custom episode identifier.
            difficulty: Difficulty for this and later episodes.

        Returns:
            MazeRunnerObservation of the fresh maze

        Raises:
            ConfigurationError: If the difficulty is invalid
        """
        if difficulty is None:
            difficulty = self.difficulty
        rng = np.random.default_rng(seed) if seed is not None else self._rng
        self._session = new_session(difficulty, seed=rng, max_attempts=self.max_attempts)
        self.difficulty = difficulty

        grid = self._session.grid
        self._state = MazeRunnerState(
            episode_id=episode_id or str(uuid4()),
            step_count=0,
            difficulty=difficulty,
            seed=seed,
            width=grid.width,
            height=grid.height,
        )
        logger.info("Episode %s started at difficulty %d", self._state.episode_id, difficulty)

        return self._create_observation(accepted=True, reward=None, message=WELCOME_MESSAGE)

    def step(
        self,
        action: MazeRunnerAction,
        timeout_s: Optional[float] = None,
        **kwargs: Any,
    ) -> MazeRunnerObservation:  # type: ignore[override]
        """
        Apply one input to the session.

        Args:
            action: MazeRunnerAction carrying the input kind

        Returns:
            MazeRunnerObservation after the input
        """
        session = self.session
        self._state.step_count += 1

        if session.completed:
            return self._create_observation(
                accepted=False,
                reward=0.0,
                message="Game already over",
                metadata={"info": "Game already over"},
            )

        accepted = session.apply_input(action.input)
        if accepted:
            self._state.moves_accepted += 1
        else:
            self._state.moves_rejected += 1

        if session.completed:
            final = session.final_score()
            self._state.completed = True
            self._state.score = final
            return self._create_observation(
                accepted=accepted,
                reward=final / 100.0,
                message=completion_message(final),
            )

        if not accepted:
            message = f"{action.input.value} rejected"
        elif action.input is InputKind.ARM_JUMP:
            message = "Jump armed"
        else:
            message = "Keep going..."
        return self._create_observation(accepted=accepted, reward=0.0, message=message)

    def _legal_inputs(self) -> List[InputKind]:
        session = self.session
        if session.completed:
            return []
        inputs = [_INPUT_FOR_DIRECTION[d] for d, _ in session.navigator.legal_moves()]
        if not session.jump_armed:
            inputs.insert(0, InputKind.ARM_JUMP)
        return inputs

    def _create_observation(
        self,
        accepted: bool,
        reward: Optional[float],
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> MazeRunnerObservation:
        session = self.session
        completed = session.completed
        return MazeRunnerObservation(
            width=session.grid.width,
            height=session.grid.height,
            grid=session.grid.to_rows(),
            agent_position=list(session.agent_position()),
            start_position=list(session.start),
            end_position=list(session.end_position()),
            jump_armed=session.jump_armed,
            accepted=accepted,
            completed=completed,
            score=session.final_score() if completed else None,
            agent_path=list(session.agent_path),
            reference_path=list(session.reference_path) if completed else [],
            legal_inputs=self._legal_inputs(),
            message=message,
            done=completed,
            reward=reward,
            metadata={
                "episode_id": self._state.episode_id,
                "step_count": self._state.step_count,
                **(metadata or {}),
            },
        )

    def close(self) -> None:
        """Drop the current session; the next episode needs a fresh reset()."""
        self._session = None

    @property
    def state(self) -> MazeRunnerState:
        """
        Get the current environment state.

        Returns:
            MazeRunnerState with episode metadata and progress counters
        """
        return self._state

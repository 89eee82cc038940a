# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
HTTP server wrapper for Environment instances.

This module builds a FastAPI application exposing an Environment over the
endpoints HTTPEnvClient talks to:

    POST /reset   -> {"observation": ..., "reward": ..., "done": ...}
    POST /step    -> {"observation": ..., "reward": ..., "done": ...}
    GET  /state   -> State model dump
    GET  /health  -> {"status": "healthy"}
    GET  /schema  -> JSON schemas for action, observation and state
"""

from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional, Type

from fastapi import Body, FastAPI, HTTPException, status
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from .exceptions import EnvironmentNotReadyError
from .interfaces import Environment
from .serialization import deserialize_action, serialize_observation
from .types import (
    Action,
    HealthResponse,
    Observation,
    ResetRequest,
    SchemaResponse,
    State,
    StepRequest,
)

logger = logging.getLogger(__name__)


class HTTPEnvServer:
    """
    Serves a single Environment instance over HTTP.

    Requests are processed one at a time: an internal lock guarantees that
    each reset/step runs to completion before the next one starts.

    Example:
        >>> from maze_runner_env.server import MazeRunnerEnvironment
        >>> env = MazeRunnerEnvironment()
        >>> server = HTTPEnvServer(env, MazeRunnerAction, MazeRunnerObservation)
        >>> app = FastAPI()
        >>> server.register_routes(app)
    """

    def __init__(
        self,
        env: Environment,
        action_cls: Type[Action],
        observation_cls: Type[Observation],
        state_cls: Optional[Type[State]] = None,
    ):
        self.env = env
        self.action_cls = action_cls
        self.observation_cls = observation_cls
        self.state_cls = state_cls or State
        self._lock = threading.Lock()

    def register_routes(self, app: FastAPI) -> None:
        """Register the environment endpoints on a FastAPI app."""

        @app.post("/reset")
        def reset(request: Optional[ResetRequest] = Body(default=None)) -> Dict[str, Any]:
            kwargs = (request or ResetRequest()).model_dump(exclude_none=True)
            with self._lock:
                try:
                    observation = self.env.reset(**kwargs)
                except ValueError as e:
                    logger.warning("Reset rejected: %s", e)
                    raise HTTPException(
                        status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
                    ) from e
            return serialize_observation(observation)

        @app.post("/step")
        def step(request: StepRequest) -> Dict[str, Any]:
            try:
                action = deserialize_action(request.action, self.action_cls)
            except ValidationError as e:
                raise HTTPException(
                    status_code=422,
                    detail=jsonable_encoder(e.errors(include_url=False)),
                ) from e

            with self._lock:
                try:
                    observation = self.env.step(action, timeout_s=request.timeout_s)
                except EnvironmentNotReadyError as e:
                    raise HTTPException(
                        status_code=status.HTTP_409_CONFLICT, detail=str(e)
                    ) from e
            return serialize_observation(observation)

        @app.get("/state")
        def get_state() -> Dict[str, Any]:
            with self._lock:
                try:
                    state = self.env.state
                except EnvironmentNotReadyError as e:
                    raise HTTPException(
                        status_code=status.HTTP_409_CONFLICT, detail=str(e)
                    ) from e
            return state.model_dump(mode="json")

        @app.get("/health", response_model=HealthResponse)
        def health() -> HealthResponse:
            return HealthResponse(status="healthy")

        @app.get("/schema", response_model=SchemaResponse)
        def schema() -> SchemaResponse:
            return SchemaResponse(
                action=self.action_cls.model_json_schema(),
                observation=self.observation_cls.model_json_schema(),
                state=self.state_cls.model_json_schema(),
            )


def create_fastapi_app(
    env: Environment,
    action_cls: Type[Action],
    observation_cls: Type[Observation],
    state_cls: Optional[Type[State]] = None,
    title: str = "Environment HTTP Server",
) -> FastAPI:
    """
    Create a FastAPI application exposing the given environment.

    Args:
        env: The Environment instance to serve
        action_cls: The Action subclass this environment expects
        observation_cls: The Observation subclass this environment returns
        state_cls: The State subclass reported by ``env.state``
        title: Title of the generated OpenAPI document

    Returns:
        FastAPI application instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Shutdown: release the environment
        logger.info("Closing %s", type(env).__name__)
        env.close()

    app = FastAPI(title=title, lifespan=lifespan)
    server = HTTPEnvServer(env, action_cls, observation_cls, state_cls)
    server.register_routes(app)

    return app


def create_app(
    env: Environment,
    action_cls: Type[Action],
    observation_cls: Type[Observation],
    state_cls: Optional[Type[State]] = None,
    env_name: Optional[str] = None,
) -> FastAPI:
    """
    Create the FastAPI app for an environment.

    Args:
        env: The Environment instance to serve
        action_cls: The Action subclass this environment expects
        observation_cls: The Observation subclass this environment returns
        state_cls: The State subclass reported by ``env.state``
        env_name: Optional environment name used in the OpenAPI title

    Returns:
        FastAPI application instance
    """
    title = f"{env_name} Environment HTTP Server" if env_name else "Environment HTTP Server"
    logger.info("Creating HTTP server for %s", env_name or type(env).__name__)
    return create_fastapi_app(env, action_cls, observation_cls, state_cls, title=title)

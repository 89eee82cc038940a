# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Base wire types shared by every environment served by runner_core."""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Action(BaseModel):
    """Base class for all environment actions."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    metadata: Dict[str, Any] = Field(
        default_factory=dict, description="Additional metadata for the action"
    )


class Observation(BaseModel):
    """Base class for all environment observations."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    done: bool = Field(default=False, description="Whether the episode has terminated")
    reward: Union[bool, int, float, None] = Field(
        default=None, description="Reward signal from the last action"
    )
    metadata: Dict[str, Any] = Field(
        default_factory=dict, description="Additional metadata for the observation"
    )


class State(BaseModel):
    """Base class for environment state."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    episode_id: Optional[str] = Field(
        default=None, description="Unique identifier for the current episode"
    )
    step_count: int = Field(
        default=0, ge=0, description="Number of steps taken in the current episode"
    )


class ResetRequest(BaseModel):
    """Body of a POST /reset request."""

    model_config = ConfigDict(extra="allow")

    seed: Optional[int] = Field(default=None, description="Random seed for the episode")
    episode_id: Optional[str] = Field(
        default=None, description="Custom episode identifier"
    )


class StepRequest(BaseModel):
    """Body of a POST /step request."""

    action: Dict[str, Any] = Field(..., description="Action payload for the environment")
    timeout_s: Optional[float] = Field(
        default=None, gt=0, description="Optional timeout in seconds"
    )


class HealthResponse(BaseModel):
    """Response of the GET /health endpoint."""

    status: str = "healthy"


class SchemaResponse(BaseModel):
    """JSON schemas for the action, observation and state models."""

    action: Dict[str, Any]
    observation: Dict[str, Any]
    state: Dict[str, Any]

# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Shared serialization and deserialization utilities for runner_core HTTP servers.

This module converts between JSON dictionaries and the Pydantic models
(Action/Observation) so the HTTP server and clients agree on one format.
"""

from typing import Any, Dict, Type

from .types import Action, Observation


def deserialize_action(action_data: Dict[str, Any], action_cls: Type[Action]) -> Action:
    """
    Convert JSON dict to Action instance using Pydantic validation.

    Args:
        action_data: Dictionary containing action data
        action_cls: The Action subclass to instantiate

    Returns:
        Action instance

    Raises:
        ValidationError: If action_data is invalid for the action class
    """
    return action_cls.model_validate(action_data)


def serialize_observation(observation: Observation) -> Dict[str, Any]:
    """
    Convert Observation instance to JSON-compatible dict using Pydantic.

    Args:
        observation: Observation instance

    Returns:
        Dictionary compatible with HTTPEnvClient._parse_result()

    The format matches what HTTPEnvClient expects:
    {
        "observation": {...},  # Observation fields
        "reward": float | None,
        "done": bool,
    }
    """
    obs_dict = observation.model_dump(
        mode="json",
        exclude={
            "reward",
            "done",
        },
    )

    return {
        "observation": obs_dict,
        "reward": observation.reward,
        "done": observation.done,
    }

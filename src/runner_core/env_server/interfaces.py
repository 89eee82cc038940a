# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from .types import Action, Observation, State

ActT = TypeVar("ActT", bound=Action)
ObsT = TypeVar("ObsT", bound=Observation)
StateT = TypeVar("StateT", bound=State)


class Environment(ABC, Generic[ActT, ObsT, StateT]):
    """
    Base class for all environment servers.

    Subclasses implement the episode lifecycle: ``reset()`` starts a new
    episode, ``step()`` applies one action and ``state`` reports episode
    metadata. The HTTP layer in ``http_server`` only ever talks to these
    three members.
    """

    @abstractmethod
    def reset(
        self,
        seed: Optional[int] = None,
        episode_id: Optional[str] = None,
        **kwargs: Any,
    ) -> ObsT:
        """Reset the environment and return the initial observation."""

    @abstractmethod
    def step(
        self,
        action: ActT,
        timeout_s: Optional[float] = None,
        **kwargs: Any,
    ) -> ObsT:
        """Take a step in the environment."""

    @property
    @abstractmethod
    def state(self) -> StateT:
        """Get the current environment state."""

    def close(self) -> None:
        """Release any resources held by the environment. Called on server shutdown."""

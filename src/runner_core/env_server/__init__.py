# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Core environment interfaces and types."""

from .exceptions import EnvironmentNotReadyError, OpenEnvError
from .http_server import create_app, create_fastapi_app, HTTPEnvServer
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

__all__ = [
    # Core interfaces
    "Environment",
    # Types
    "Action",
    "Observation",
    "State",
    "ResetRequest",
    "StepRequest",
    "HealthResponse",
    "SchemaResponse",
    # Exceptions
    "OpenEnvError",
    "EnvironmentNotReadyError",
    # Server
    "HTTPEnvServer",
    "create_app",
    "create_fastapi_app",
    # Serialization
    "deserialize_action",
    "serialize_observation",
]

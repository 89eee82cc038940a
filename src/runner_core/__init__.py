# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Core components for serving and consuming grid environments over HTTP."""

from .client_types import StepResult
from .http_env_client import HTTPEnvClient

__all__ = ["HTTPEnvClient", "StepResult"]

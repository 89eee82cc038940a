# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Exceptions raised by environment servers.
"""


class OpenEnvError(Exception):
    """Base class for all errors raised by runner_core environments."""

    pass


class EnvironmentNotReadyError(OpenEnvError):
    """Raised when step() or state is used before the first reset()."""

    pass

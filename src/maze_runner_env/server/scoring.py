# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Path efficiency scoring."""

import math
from typing import Sized


def score(reference_path: Sized, agent_path: Sized) -> int:
    """
    Efficiency of the agent's route as a percentage of the reference route.

    Both lengths count cells, start and end included. Halves round up, so a
    ratio of 233.33% scores 233 and 50.5% scores 51. The result exceeds 100
    when jumps let the agent beat the obstacle-blind reference path.
    An empty agent path scores 0.
    """
    if len(agent_path) == 0:
        return 0
    efficiency = len(reference_path) / len(agent_path) * 100
    return int(math.floor(efficiency + 0.5))


def completion_message(final_score: int) -> str:
    return f"Congratulations! You completed the maze! Score: {final_score}/100"

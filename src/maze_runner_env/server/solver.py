# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Breadth-first connectivity solver.

The search graph is implicit: two 4-adjacent cells are joined iff both are
``OPEN``. Walls and obstacles have no edges, so a path found here never
depends on jumps.

The search itself runs on a plain ``open_rows[y][x]`` boolean mask so the
generator can test raw samples without wrapping each one in a GridModel.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence

from .grid import CellState, GridModel, Position

_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def shortest_open_path(
    open_rows: Sequence[Sequence[bool]], source: Position, dest: Position
) -> Optional[List[int]]:
    """
    Find a shortest path through the ``True`` cells of a boolean mask.

    Args:
        open_rows: Rows of booleans, ``open_rows[y][x]`` is True for open cells
        source: Start position ``(x, y)``
        dest: Target position ``(x, y)``

    Returns:
        Canonical indices from source to dest inclusive, or None when dest is
        unreachable (including when either endpoint is not open).
    """
    height = len(open_rows)
    width = len(open_rows[0]) if height else 0

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < width and 0 <= y < height and bool(open_rows[y][x])

    if not (is_open(*source) and is_open(*dest)):
        return None

    start = source[1] * width + source[0]
    goal = dest[1] * width + dest[0]
    parents: Dict[int, Optional[int]] = {start: None}
    queue = deque([source])

    while queue:
        x, y = queue.popleft()
        current = y * width + x
        if current == goal:
            break
        for dx, dy in _OFFSETS:
            nx, ny = x + dx, y + dy
            if not is_open(nx, ny):
                continue
            nxt = ny * width + nx
            if nxt not in parents:
                parents[nxt] = current
                queue.append((nx, ny))

    if goal not in parents:
        return None

    path = []
    node: Optional[int] = goal
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def shortest_path(grid: GridModel, source: Position, dest: Position) -> Optional[List[int]]:
    """Shortest all-``OPEN`` path between two cells of ``grid``, or None."""
    return shortest_open_path((grid.cells == CellState.OPEN).tolist(), source, dest)

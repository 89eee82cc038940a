# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for agent stepping, jumping and goal detection."""

import pytest

from maze_runner_env.server.grid import GridModel
from maze_runner_env.server.navigation import Direction, InputMode, Navigator

#   x: 01234
LAYOUT = [
    ".....",  # y=0
    ".#^..",  # y=1
    "....#",  # y=2
]


@pytest.fixture
def grid():
    return GridModel.from_rows(LAYOUT)


@pytest.fixture
def nav(grid):
    return Navigator(grid, start=(0, 0), end=(3, 2))


def _snapshot(nav):
    return nav.position, nav.path, nav.mode, nav.completed


class TestStep:
    def test_step_onto_open_cell(self, nav, grid):
        assert nav.press(Direction.RIGHT) is True
        assert nav.position == (1, 0)
        assert nav.path == (0, grid.index_of(1, 0))

    def test_step_into_wall_is_rejected(self, grid):
        nav = Navigator(grid, start=(0, 1), end=(3, 2))
        assert nav.press(Direction.RIGHT) is False
        assert nav.position == (0, 1)
        assert nav.path == (grid.index_of(0, 1),)

    def test_step_into_obstacle_is_rejected(self, grid):
        nav = Navigator(grid, start=(2, 0), end=(3, 2))
        assert nav.press(Direction.DOWN) is False
        assert nav.position == (2, 0)

    def test_step_out_of_bounds_is_rejected(self, nav):
        assert nav.press(Direction.UP) is False
        assert nav.press(Direction.LEFT) is False
        assert nav.position == (0, 0)

    def test_step_off_an_obstacle_onto_open_cell(self, grid):
        nav = Navigator(grid, start=(2, 1), end=(3, 2))
        assert nav.press(Direction.RIGHT) is True
        assert nav.position == (3, 1)

    def test_illegal_input_is_idempotent(self, grid):
        nav = Navigator(grid, start=(0, 1), end=(3, 2))
        nav.press(Direction.RIGHT)
        first = _snapshot(nav)
        nav.press(Direction.RIGHT)
        assert _snapshot(nav) == first


class TestJump:
    def test_jump_onto_obstacle(self, grid):
        nav = Navigator(grid, start=(2, 0), end=(3, 2))
        nav.arm_jump()
        assert nav.press(Direction.DOWN) is True
        assert nav.position == (2, 1)
        assert nav.mode is InputMode.IDLE

    def test_jump_off_obstacle(self, grid):
        nav = Navigator(grid, start=(2, 1), end=(3, 2))
        nav.arm_jump()
        assert nav.press(Direction.UP) is True
        assert nav.position == (2, 0)

    def test_jump_between_open_cells_is_rejected(self, nav):
        nav.arm_jump()
        assert nav.press(Direction.RIGHT) is False
        assert nav.position == (0, 0)
        assert nav.path == (0,)

    def test_jump_into_wall_is_rejected_even_from_obstacle(self, grid):
        nav = Navigator(grid, start=(2, 1), end=(3, 2))
        nav.arm_jump()
        assert nav.press(Direction.LEFT) is False
        assert nav.position == (2, 1)

    def test_jump_out_of_bounds_is_rejected(self, grid):
        nav = Navigator(grid, start=(2, 0), end=(3, 2))
        nav.arm_jump()
        assert nav.press(Direction.UP) is False

    def test_failed_jump_disarms_and_next_input_is_a_step(self, nav):
        nav.arm_jump()
        assert nav.press(Direction.RIGHT) is False
        assert nav.mode is InputMode.IDLE
        assert nav.press(Direction.RIGHT) is True
        assert nav.position == (1, 0)

    def test_arming_twice_stays_armed(self, nav):
        assert nav.arm_jump() is True
        assert nav.arm_jump() is False
        assert nav.mode is InputMode.JUMP_ARMED

    def test_jump_covers_a_single_cell(self, grid):
        nav = Navigator(grid, start=(2, 0), end=(3, 2))
        nav.arm_jump()
        nav.press(Direction.DOWN)
        nav.arm_jump()
        nav.press(Direction.DOWN)
        assert nav.position == (2, 2)
        assert len(nav.path) == 3


class TestGoal:
    def test_reaching_the_end_completes(self, nav, grid):
        route = [Direction.DOWN, Direction.DOWN, Direction.RIGHT, Direction.RIGHT, Direction.RIGHT]
        for direction in route:
            assert nav.completed is False
            assert nav.press(direction) is True
        assert nav.completed is True
        assert nav.position == (3, 2)

    def test_no_input_is_accepted_after_completion(self, grid):
        nav = Navigator(grid, start=(3, 1), end=(3, 2))
        assert nav.press(Direction.DOWN) is True
        assert nav.completed
        before = _snapshot(nav)
        assert nav.press(Direction.UP) is False
        assert nav.arm_jump() is False
        assert _snapshot(nav) == before

    def test_backtracking_repeats_cells_in_path(self, nav, grid):
        nav.press(Direction.RIGHT)
        nav.press(Direction.LEFT)
        assert nav.path == (0, 1, 0)


class TestLegalMoves:
    def test_idle_moves_are_steps(self, grid):
        nav = Navigator(grid, start=(2, 0), end=(3, 2))
        moves = nav.legal_moves()
        assert moves == [(Direction.LEFT, False), (Direction.RIGHT, False)]

    def test_armed_moves_are_jumps(self, grid):
        nav = Navigator(grid, start=(2, 0), end=(3, 2))
        nav.arm_jump()
        assert nav.legal_moves() == [(Direction.DOWN, True)]


def test_start_outside_grid_is_rejected(grid):
    with pytest.raises(ValueError):
        Navigator(grid, start=(9, 9), end=(0, 0))

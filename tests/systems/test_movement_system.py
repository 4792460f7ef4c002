from dataclasses import replace
from typing import List, Tuple

import pytest

from grid_infinity.actions import Action
from grid_infinity.components import Position
from grid_infinity.systems.movement import movement_system
from tests.test_utils import assert_player_at, make_reference_state, make_state

# (action, expected column, expected row, expected left edge), replayed in
# order on the 3x3 reference board.
REFERENCE_WALK: List[Tuple[Action, int, int, int]] = [
    (Action.UP, 0, 0, 0),
    (Action.LEFT, 0, 0, 0),
    (Action.RIGHT, 1, 0, 0),
    (Action.RIGHT, 2, 0, 1),
    (Action.RIGHT, 3, 0, 2),
    (Action.DOWN, 3, 0, 2),
    (Action.UP, 3, 0, 2),
    (Action.LEFT, 2, 0, 1),
    (Action.DOWN, 2, 1, 1),
    (Action.DOWN, 2, 1, 1),
    (Action.LEFT, 1, 1, 0),
    (Action.LEFT, 1, 1, 0),
    (Action.UP, 1, 0, 0),
    (Action.DOWN, 1, 1, 0),
    (Action.DOWN, 1, 2, 0),
    (Action.DOWN, 1, 2, 0),
    (Action.RIGHT, 1, 2, 0),
    (Action.LEFT, 0, 2, 0),
    (Action.UP, 0, 2, 0),
]


def test_reference_walk() -> None:
    state = make_reference_state()
    for action, x, y, left_edge in REFERENCE_WALK:
        state = movement_system(state, action)
        assert_player_at(state, x, y, left_edge)


def test_scroll_right_generates_one_column() -> None:
    state = make_reference_state()
    state = movement_system(state, Action.RIGHT)
    assert state.num_columns == 4

    state = movement_system(state, Action.RIGHT)
    assert state.left_edge == 1
    assert state.num_columns == 5

    state = movement_system(state, Action.RIGHT)
    assert state.left_edge == 2
    assert state.num_columns == 6


def test_scroll_left_never_regenerates() -> None:
    state = make_reference_state()
    for action in [Action.RIGHT, Action.RIGHT, Action.RIGHT]:
        state = movement_system(state, action)
    columns = state.columns
    state = movement_system(state, Action.LEFT)
    assert state.left_edge == 1
    assert state.columns is columns


def test_blocked_move_returns_same_state() -> None:
    state = make_reference_state()
    assert movement_system(state, Action.UP) is state
    assert movement_system(state, Action.LEFT) is state
    # (0, 1) is a wall
    assert movement_system(state, Action.DOWN) is state


@pytest.mark.parametrize("action", [Action.SWAP_COLOR, Action.WAIT, Action.GRASS])
def test_non_move_actions_are_ignored(action: Action) -> None:
    state = make_reference_state()
    assert movement_system(state, action) is state


def test_cannot_move_left_of_window() -> None:
    state = make_state(width=4, height=1, wall_probability=0.0)
    state = replace(
        state, left_edge=2, player=state.player.moved_to(Position(2, 0))
    )
    assert movement_system(state, Action.LEFT) is state


def test_cannot_move_past_materialized_grid() -> None:
    state = make_state(width=4, height=1, wall_probability=0.0)
    last = state.num_columns - 1
    state = replace(state, player=state.player.moved_to(Position(last, 0)))
    assert movement_system(state, Action.RIGHT) is state


def test_no_scroll_at_threshold() -> None:
    state = make_state(width=12, height=1, wall_probability=0.0)
    # Exactly 25% of the width away from an edge does not scroll
    at_right = replace(
        state, left_edge=3, player=state.player.moved_to(Position(11, 0))
    )
    assert_player_at(movement_system(at_right, Action.RIGHT), 12, 0, 3)
    at_left = replace(
        state, left_edge=3, player=state.player.moved_to(Position(6, 0))
    )
    assert_player_at(movement_system(at_left, Action.LEFT), 5, 0, 3)


def test_scroll_inside_threshold() -> None:
    state = make_state(width=12, height=1, wall_probability=0.0)
    near_right = replace(state, player=state.player.moved_to(Position(9, 0)))
    moved = movement_system(near_right, Action.RIGHT)
    assert_player_at(moved, 10, 0, 1)
    assert moved.num_columns == state.num_columns + 1

    near_left = replace(
        state, left_edge=3, player=state.player.moved_to(Position(5, 0))
    )
    assert_player_at(movement_system(near_left, Action.LEFT), 4, 0, 2)


def test_player_stays_inside_window_on_long_walk() -> None:
    state = make_state(width=5, height=1, wall_probability=0.0)
    for _ in range(40):
        state = movement_system(state, Action.RIGHT)
        assert state.left_edge <= state.player.column < state.left_edge + state.width
        assert state.num_columns > state.left_edge + state.width
    assert state.player.column == 40
    for _ in range(40):
        state = movement_system(state, Action.LEFT)
        assert state.left_edge <= state.player.column < state.left_edge + state.width
    assert_player_at(state, 0, 0, 0)

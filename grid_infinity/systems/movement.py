"""Player movement and scrolling system.

Moves the player one cell for a directional ``Action``. A move is allowed
only if the destination is inside the materialized grid, not left of the
visible window, and walkable; otherwise the input ``State`` is returned
unchanged.

Horizontal moves also scroll the viewport when the player gets close to an
edge of the visible window: closer than ``SCROLL_THRESHOLD`` of the width, or
exactly one column away. Scrolling right materializes one new column, which
keeps one column of lookahead beyond the window at all times.
"""

import logging
from dataclasses import replace

from grid_infinity.actions import Action
from grid_infinity.components import Position
from grid_infinity.config import SCROLL_THRESHOLD
from grid_infinity.state import State
from grid_infinity.systems.generation import generate_column
from grid_infinity.utils.grid import is_walkable_at

logger = logging.getLogger(__name__)


def movement_system(state: State, action: Action) -> State:
    """Move the player one cell if allowed.

    Args:
        state (State): Current state.
        action (Action): One of the directional ``Action`` members.

    Returns:
        State: Same state if blocked, otherwise the state with the moved
        player (and possibly a scrolled viewport and a new column).
    """
    if action == Action.LEFT:
        return _move_left(state)
    if action == Action.RIGHT:
        return _move_right(state)
    if action == Action.UP:
        return _move_vertical(state, -1)
    if action == Action.DOWN:
        return _move_vertical(state, 1)
    return state


def _move_left(state: State) -> State:
    pos = state.player.position
    target = Position(pos.x - 1, pos.y)
    if pos.x <= state.left_edge or not is_walkable_at(state, target):
        return state

    distance = pos.x - state.left_edge
    if (
        distance / state.width < SCROLL_THRESHOLD or distance == 1
    ) and state.left_edge > 0:
        state = replace(state, left_edge=state.left_edge - 1)
        logger.debug("Scrolled left to column %d", state.left_edge)

    return replace(state, player=state.player.moved_to(target))


def _move_right(state: State) -> State:
    pos = state.player.position
    target = Position(pos.x + 1, pos.y)
    if pos.x >= state.num_columns - 1 or not is_walkable_at(state, target):
        return state

    distance = state.left_edge + state.width - 1 - pos.x
    if distance / state.width < SCROLL_THRESHOLD or distance == 1:
        state = replace(state, left_edge=state.left_edge + 1)
        state = generate_column(state)
        logger.debug("Scrolled right to column %d", state.left_edge)

    return replace(state, player=state.player.moved_to(target))


def _move_vertical(state: State, dy: int) -> State:
    pos = state.player.position
    target = Position(pos.x, pos.y + dy)
    # is_walkable_at bounds the row to [0, height - 1]
    if not is_walkable_at(state, target):
        return state
    return replace(state, player=state.player.moved_to(target))

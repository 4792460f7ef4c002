"""Action reducer.

:func:`step` maps one :class:`Action` to the system that handles it and
returns the resulting :class:`State`. It processes exactly one command per
call; a command that cannot be carried out (a blocked move, repainting a
wall) returns the input state unchanged rather than raising.

Wall edits are driven by pointer coordinates rather than discrete actions
and are called directly from :mod:`grid_infinity.systems.edit`.
"""

import logging

from grid_infinity.actions import FLOOR_ACTIONS, MOVE_ACTIONS, Action
from grid_infinity.state import State
from grid_infinity.systems.edit import change_floor_type_under_player
from grid_infinity.systems.movement import movement_system
from grid_infinity.systems.player import swap_color_system

logger = logging.getLogger(__name__)


def step(state: State, action: Action) -> State:
    """Apply one action.

    Args:
        state (State): Current state.
        action (Action): Action to apply.

    Returns:
        State: Next state; the same object if the action had no effect.

    Raises:
        ValueError: If the action is not recognized.
    """
    logger.debug("Step %s at %s", action, state.player.position)
    if action in MOVE_ACTIONS:
        return movement_system(state, action)
    if action in FLOOR_ACTIONS:
        state, _ = change_floor_type_under_player(state, FLOOR_ACTIONS[action])
        return state
    if action == Action.SWAP_COLOR:
        return swap_color_system(state)
    if action == Action.WAIT:
        return state
    raise ValueError("Action is not valid")

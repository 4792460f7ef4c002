"""Action enumerations.

Defines both the human readable :class:`Action` (string enum) used internally
and a stable integer :class:`GymAction` mapping for Gymnasium compatibility.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions and
``FLOOR_ACTIONS`` maps the floor-painting actions to the kind they paint;
checks like ``if action in MOVE_ACTIONS`` are preferred over enum name
comparisons.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict

from grid_infinity.types import FloorKind


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
        SWAP_COLOR: Exchange the player's main and alternate colours.
        GRASS, SAND, DIRT: Repaint the floor under the player.
        WAIT: Do nothing.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SWAP_COLOR = auto()
    GRASS = auto()
    SAND = auto()
    DIRT = auto()
    WAIT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

FLOOR_ACTIONS: Dict[Action, FloorKind] = {
    Action.GRASS: FloorKind.GRASS,
    Action.SAND: FloorKind.SAND,
    Action.DIRT: FloorKind.DIRT,
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SWAP_COLOR = auto()
    GRASS = auto()
    SAND = auto()
    DIRT = auto()
    WAIT = auto()

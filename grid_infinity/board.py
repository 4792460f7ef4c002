"""Board construction.

:func:`create_state` is the entry point for a new world: it normalizes the
configuration, seeds the generation stream and materializes enough columns
for the initial viewport.

Example
-------
>>> from grid_infinity.board import create_state
>>> state = create_state(width=2, height=3, seed=42, wall_probability=0.3)
>>> [tile.type.name for tile in state.columns[0]]
['FLOOR', 'WALL', 'FLOOR']
"""

import time
from typing import Mapping, Optional

from pyrsistent import pmap

from grid_infinity.components import Player, Position, Tile, floor
from grid_infinity.config import (
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_WALL_PROBABILITY,
    DEFAULT_WIDTH,
    BoardConfig,
)
from grid_infinity.rng import seeded_state
from grid_infinity.state import State
from grid_infinity.systems.generation import generate_board


def clamp_probability(value: float) -> float:
    """Clamp ``value`` into [0, 1]."""
    return max(0.0, min(float(value), 1.0))


def _positive_or(value: Optional[int], default: int) -> int:
    if value is None or value <= 0:
        return default
    return value


def create_state(
    width: Optional[int] = None,
    height: Optional[int] = None,
    cell_width: Optional[int] = None,
    cell_height: Optional[int] = None,
    seed: Optional[int] = None,
    wall_probability: Optional[float] = None,
    overlay: Optional[Mapping[Position, Tile]] = None,
    player: Optional[Player] = None,
) -> State:
    """Create a freshly generated board.

    Arguments:
        width: Visible columns; non-positive or ``None`` uses the default (30).
        height: Rows; non-positive or ``None`` uses the default (20).
        cell_width: Cell pixel width; non-positive or ``None`` uses 30.
        cell_height: Cell pixel height; non-positive or ``None`` uses 30.
        seed: Generation seed; ``None`` or 0 uses the current Unix time.
        wall_probability: Wall chance, clamped to [0, 1]; ``None`` uses 0.3.
        overlay: Pre-set cells. When empty or ``None`` the start cell (0, 0)
            is forced to a floor so the player never starts inside a wall.
        player: Initial player; defaults to (0, 0) with the default colours.

    Returns:
        State: Board with the initial viewport materialized.
    """
    if not seed:
        seed = int(time.time())
    if wall_probability is None:
        wall_probability = DEFAULT_WALL_PROBABILITY
    if not overlay:
        overlay = {Position(0, 0): floor()}

    state = State(
        width=_positive_or(width, DEFAULT_WIDTH),
        height=_positive_or(height, DEFAULT_HEIGHT),
        cell_width=_positive_or(cell_width, DEFAULT_CELL_WIDTH),
        cell_height=_positive_or(cell_height, DEFAULT_CELL_HEIGHT),
        seed=seed,
        wall_probability=clamp_probability(wall_probability),
        rng_state=seeded_state(seed),
        player=player or Player(),
        overlay=pmap(overlay),
    )
    return generate_board(state)


def create_state_from_config(
    config: BoardConfig, overlay: Optional[Mapping[Position, Tile]] = None
) -> State:
    """Create a board from a :class:`BoardConfig`."""
    return create_state(
        width=config.width,
        height=config.height,
        cell_width=config.cell_width,
        cell_height=config.cell_height,
        seed=config.seed,
        wall_probability=config.wall_probability,
        overlay=overlay,
    )

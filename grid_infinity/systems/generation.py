"""Procedural column generation system.

The world is generated one column at a time, left to right, from a single
seeded stream. Every cell consumes exactly one uniform draw in row order,
*including* cells whose value comes from the overlay store: the draw is taken
and thrown away. The stream seen by all other cells is therefore identical
whether or not any cell has been overridden, so an edit never changes what
the rest of the world generates into, and a save made of seed + overlay
always rebuilds the same world.

Contract:

* :func:`generate_column` appends exactly one column and advances the stream
    by exactly ``height`` draws.
* :func:`generate_board` re-seeds the stream and rebuilds the grid from
    column 0 until it covers the viewport, the player, and one column of
    lookahead.
"""

import logging
from dataclasses import replace

from pyrsistent import pvector

from grid_infinity.components import Position, Tile, floor, wall
from grid_infinity.rng import draw_uniform, make_rng, seeded_state
from grid_infinity.state import State

logger = logging.getLogger(__name__)


def generate_column(state: State) -> State:
    """Append one generated column to the right end of the grid.

    Args:
        state (State): Current state.

    Returns:
        State: New state with one more column and the advanced stream.
    """
    column = state.num_columns
    rng = make_rng(state.rng_state)
    tiles: list[Tile] = []
    for row in range(state.height):
        value = draw_uniform(rng)
        override = state.overlay.get(Position(column, row))
        if override is not None:
            tiles.append(override)
        elif value <= state.wall_probability:
            tiles.append(wall())
        else:
            tiles.append(floor())
    logger.debug("Generated column %d (seed %d)", column, state.seed)
    return replace(
        state,
        columns=state.columns.append(pvector(tiles)),
        rng_state=rng.getstate(),
    )


def required_columns(state: State) -> int:
    """Grid width needed for the viewport and player plus one column of lookahead."""
    return max(state.player.column, state.left_edge) + state.width + 1


def generate_board(state: State) -> State:
    """Rebuild the materialized grid from the seed and the overlay store.

    Args:
        state (State): State whose configuration, player and overlay are used.

    Returns:
        State: New state with a freshly generated grid.
    """
    state = replace(state, columns=pvector(), rng_state=seeded_state(state.seed))
    target = required_columns(state)
    while state.num_columns < target:
        state = generate_column(state)
    logger.debug(
        "Generated board of %d columns (seed %d, %d overlay cells)",
        target,
        state.seed,
        len(state.overlay),
    )
    return state

"""Grid lookup / write-through helpers.

Predicates and accessors used by the movement and edit systems and by the
renderer. Everything here reads the *materialized* grid; nothing triggers
generation.
"""

from dataclasses import replace
from typing import Iterator, Tuple

from grid_infinity.components import Position, Tile
from grid_infinity.state import State


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies inside the materialized grid."""
    return 0 <= pos.x < state.num_columns and 0 <= pos.y < state.height


def tile_at(state: State, pos: Position) -> Tile:
    """Tile at ``pos``; the caller guarantees ``pos`` is in bounds."""
    return state.columns[pos.x][pos.y]


def is_walkable_at(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is in bounds and its tile can be stood on."""
    return is_in_bounds(state, pos) and tile_at(state, pos).walkable


def set_tile(state: State, pos: Position, tile: Tile) -> State:
    """Write ``tile`` to both the grid and the overlay store.

    The two stores are updated in the same ``replace`` so they can never
    disagree about an edited cell.
    """
    column = state.columns[pos.x].set(pos.y, tile)
    return replace(
        state,
        columns=state.columns.set(pos.x, column),
        overlay=state.overlay.set(pos, tile),
    )


def visible_tiles(state: State) -> Iterator[Tuple[int, int, Tile]]:
    """Yield ``(screen_column, row, tile)`` for every cell of the visible window."""
    for screen_column in range(state.width):
        column = state.columns[state.left_edge + screen_column]
        for row in range(state.height):
            yield screen_column, row, column[row]


def player_screen_position(state: State) -> Position:
    """Player cell relative to the visible window."""
    return Position(state.player.column - state.left_edge, state.player.row)

"""Board edit systems.

Wall placement, removal and moves, plus repainting the floor under the
player. Wall edits take *pixel* coordinates of the visible window (what a
pointer reports) and convert them to world cells with
:func:`grid_infinity.utils.coords.pixel_to_position`.

Every edit returns ``(state, ok)``. On failure ``state`` is the input object
itself, so the grid and the overlay store are untouched; on success both
stores hold the new tiles (see :func:`grid_infinity.utils.grid.set_tile`).
"""

from typing import Tuple

from grid_infinity.components import floor, wall
from grid_infinity.state import State
from grid_infinity.types import FloorKind
from grid_infinity.utils.coords import pixel_to_position
from grid_infinity.utils.grid import is_in_bounds, set_tile, tile_at

EditResult = Tuple[State, bool]


def change_floor_type_under_player(state: State, kind: FloorKind) -> EditResult:
    """Repaint the floor the player stands on.

    Args:
        state (State): Current state.
        kind (FloorKind): New cosmetic floor kind.

    Returns:
        EditResult: ``(new_state, True)``, or ``(state, False)`` if the
        player is not standing on a floor.
    """
    pos = state.player.position
    if not tile_at(state, pos).is_floor:
        return state, False
    return set_tile(state, pos, floor(kind)), True


def move_wall(
    state: State, from_x: int, from_y: int, to_x: int, to_y: int
) -> EditResult:
    """Drag the wall under ``(from_x, from_y)`` to ``(to_x, to_y)``.

    Fails if either cell is outside the materialized grid, both are the same
    cell, the source is not a wall, the destination cannot be walked on, or
    the player stands on the destination. The source becomes a default
    floor.
    """
    source = pixel_to_position(state, from_x, from_y)
    target = pixel_to_position(state, to_x, to_y)

    if not is_in_bounds(state, source) or not is_in_bounds(state, target):
        return state, False
    if source == target:
        return state, False

    moved = tile_at(state, source)
    if not moved.is_wall:
        return state, False
    if not tile_at(state, target).walkable:
        return state, False
    if state.player.position == target:
        return state, False

    state = set_tile(state, source, floor())
    return set_tile(state, target, moved), True


def add_wall(state: State, pixel_x: int, pixel_y: int) -> EditResult:
    """Place a wall on a walkable cell that the player is not standing on."""
    target = pixel_to_position(state, pixel_x, pixel_y)
    if not is_in_bounds(state, target):
        return state, False
    if not tile_at(state, target).walkable:
        return state, False
    if state.player.position == target:
        return state, False
    return set_tile(state, target, wall()), True


def remove_wall(state: State, pixel_x: int, pixel_y: int) -> EditResult:
    """Replace a wall with a default floor."""
    target = pixel_to_position(state, pixel_x, pixel_y)
    if not is_in_bounds(state, target):
        return state, False
    if not tile_at(state, target).is_wall:
        return state, False
    return set_tile(state, target, floor()), True

from typing import Dict, List, Optional, Tuple

from grid_infinity.board import create_state
from grid_infinity.components import Position, Tile, floor
from grid_infinity.state import State
from grid_infinity.types import TileType

F = TileType.FLOOR
W = TileType.WALL

# Reference board used by the movement and edit tests: seed 42, p 0.3,
# three rows, with (1, 2) forced to floor. Columns 0..5 generate as
# FWF, FFF, FFW, FWF, FWF, FFW.
REFERENCE_SEED = 42
REFERENCE_PROBABILITY = 0.3


def make_state(
    width: int = 3,
    height: int = 3,
    cell_size: int = 1,
    seed: int = REFERENCE_SEED,
    wall_probability: float = REFERENCE_PROBABILITY,
    overlay: Optional[Dict[Tuple[int, int], Tile]] = None,
) -> State:
    """Board built from plain ``(x, y)`` overlay keys."""
    return create_state(
        width=width,
        height=height,
        cell_width=cell_size,
        cell_height=cell_size,
        seed=seed,
        wall_probability=wall_probability,
        overlay={Position(x, y): tile for (x, y), tile in (overlay or {}).items()},
    )


def make_reference_state(cell_size: int = 1) -> State:
    """3x3 reference board with (1, 2) forced to floor."""
    return make_state(cell_size=cell_size, overlay={(1, 2): floor()})


def column_types(state: State, x: int) -> List[TileType]:
    return [tile.type for tile in state.columns[x]]


def grid_types(state: State) -> List[List[TileType]]:
    return [column_types(state, x) for x in range(state.num_columns)]


def assert_player_at(state: State, x: int, y: int, left_edge: int) -> None:
    assert (state.player.column, state.player.row) == (x, y)
    assert state.left_edge == left_edge


def assert_cell(state: State, x: int, y: int, tile: Tile) -> None:
    """Cell holds ``tile`` in both the grid and the overlay store."""
    pos = Position(x, y)
    assert state.columns[x][y] == tile
    assert state.overlay[pos] == tile


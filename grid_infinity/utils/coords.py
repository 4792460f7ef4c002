"""Pixel / grid coordinate conversion.

Both directions are total: negative inputs clamp to 0 instead of failing, so
pointer coordinates from a front end can be passed straight through.
"""

from grid_infinity.components import Position
from grid_infinity.state import State


def vector_to_pixel(vector: int, cell_size: int) -> int:
    """Pixel offset of grid index ``vector`` (0 for negative input)."""
    if vector < 0:
        return 0
    return vector * cell_size


def pixel_to_vector(pixel: int, cell_size: int) -> int:
    """Grid index containing pixel offset ``pixel`` (0 for negative input)."""
    if pixel < 0:
        return 0
    return pixel // cell_size


def vector_x_to_pixel_x(state: State, vector_x: int) -> int:
    return vector_to_pixel(vector_x, state.cell_width)


def vector_y_to_pixel_y(state: State, vector_y: int) -> int:
    return vector_to_pixel(vector_y, state.cell_height)


def pixel_x_to_vector_x(state: State, pixel_x: int) -> int:
    return pixel_to_vector(pixel_x, state.cell_width)


def pixel_y_to_vector_y(state: State, pixel_y: int) -> int:
    return pixel_to_vector(pixel_y, state.cell_height)


def pixel_to_position(state: State, pixel_x: int, pixel_y: int) -> Position:
    """World cell under a point of the visible window.

    The column is offset by ``state.left_edge`` so the result addresses the
    whole world, not the screen.
    """
    return Position(
        pixel_x_to_vector_x(state, pixel_x) + state.left_edge,
        pixel_y_to_vector_y(state, pixel_y),
    )


def game_pixel_width(state: State) -> int:
    """Pixel width of the visible window."""
    return state.cell_width * state.width


def game_pixel_height(state: State) -> int:
    """Pixel height of the visible window."""
    return state.cell_height * state.height

from dataclasses import replace

import pytest

from grid_infinity.components import Position
from grid_infinity.utils.coords import (
    game_pixel_height,
    game_pixel_width,
    pixel_to_position,
    pixel_to_vector,
    pixel_x_to_vector_x,
    pixel_y_to_vector_y,
    vector_to_pixel,
    vector_x_to_pixel_x,
    vector_y_to_pixel_y,
)
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "vector, cell_size, pixel",
    [
        (0, 30, 0),
        (1, 30, 30),
        (7, 34, 238),
        (-1, 30, 0),
        (-50, 1, 0),
    ],
)
def test_vector_to_pixel(vector: int, cell_size: int, pixel: int) -> None:
    assert vector_to_pixel(vector, cell_size) == pixel


@pytest.mark.parametrize(
    "pixel, cell_size, vector",
    [
        (0, 30, 0),
        (29, 30, 0),
        (30, 30, 1),
        (89, 30, 2),
        (-1, 30, 0),
        (-100, 7, 0),
    ],
)
def test_pixel_to_vector(pixel: int, cell_size: int, vector: int) -> None:
    assert pixel_to_vector(pixel, cell_size) == vector


@pytest.mark.parametrize("cell_size", [1, 3, 30])
def test_vector_pixel_round_trip(cell_size: int) -> None:
    for v in range(50):
        assert pixel_to_vector(vector_to_pixel(v, cell_size), cell_size) == v


def test_axes_use_their_own_cell_size() -> None:
    state = make_state(width=2, height=3)
    state = replace(state, cell_width=34, cell_height=35)
    assert vector_x_to_pixel_x(state, 2) == 68
    assert vector_y_to_pixel_y(state, 2) == 70
    assert pixel_x_to_vector_x(state, 69) == 2
    assert pixel_y_to_vector_y(state, 69) == 1
    assert game_pixel_width(state) == 68
    assert game_pixel_height(state) == 105


def test_pixel_to_position_adds_left_edge() -> None:
    state = make_state(cell_size=10)
    assert pixel_to_position(state, 15, 25) == Position(1, 2)

    scrolled = replace(state, left_edge=4)
    assert pixel_to_position(scrolled, 15, 25) == Position(5, 2)
    assert pixel_to_position(scrolled, -5, -5) == Position(4, 0)

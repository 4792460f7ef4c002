from unittest import mock

from grid_infinity.board import (
    clamp_probability,
    create_state,
    create_state_from_config,
)
from grid_infinity.components import Player, Position, floor, wall
from grid_infinity.config import (
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_WALL_PROBABILITY,
    DEFAULT_WIDTH,
    BoardConfig,
    default_save_path,
)


def test_defaults_for_missing_or_non_positive_dimensions() -> None:
    state = create_state(width=0, height=-3, cell_width=None, cell_height=-1, seed=1)
    assert state.width == DEFAULT_WIDTH
    assert state.height == DEFAULT_HEIGHT
    assert state.cell_width == DEFAULT_CELL_WIDTH
    assert state.cell_height == DEFAULT_CELL_HEIGHT
    assert state.wall_probability == DEFAULT_WALL_PROBABILITY


def test_given_dimensions_are_kept() -> None:
    state = create_state(1, 2, 3, 4, seed=5, wall_probability=0.1)
    assert (state.width, state.height) == (1, 2)
    assert (state.cell_width, state.cell_height) == (3, 4)
    assert state.seed == 5
    assert state.wall_probability == 0.1


def test_missing_seed_uses_current_time() -> None:
    with mock.patch("grid_infinity.board.time.time", return_value=1700000000.5):
        assert create_state(seed=None).seed == 1700000000
        assert create_state(seed=0).seed == 1700000000


def test_probability_is_clamped() -> None:
    assert clamp_probability(-0.5) == 0.0
    assert clamp_probability(1.5) == 1.0
    assert clamp_probability(0.25) == 0.25
    assert create_state(seed=1, wall_probability=2.0).wall_probability == 1.0


def test_initial_viewport_is_materialized() -> None:
    state = create_state(width=4, height=3, seed=1)
    assert state.left_edge == 0
    assert state.num_columns == 4 + 1
    assert all(len(column) == 3 for column in state.columns)


def test_player_start_is_floor_when_no_overlay_given() -> None:
    # Every generated cell is a wall at p = 1
    state = create_state(width=3, height=3, seed=1, wall_probability=1.0)
    assert state.columns[0][0] == floor()
    assert dict(state.overlay) == {Position(0, 0): floor()}
    assert state.columns[1][0] == wall()


def test_given_overlay_is_used_as_is() -> None:
    overlay = {Position(2, 1): wall()}
    state = create_state(
        width=3, height=3, seed=1, wall_probability=0.0, overlay=overlay
    )
    assert dict(state.overlay) == overlay
    assert state.columns[2][1] == wall()


def test_player_can_be_given() -> None:
    player = Player(position=Position(6, 1))
    state = create_state(width=3, height=3, seed=1, wall_probability=0.0, player=player)
    assert state.player == player
    assert state.num_columns == 6 + 3 + 1


def test_create_from_config() -> None:
    config = BoardConfig(width=5, height=4, cell_width=8, cell_height=9, seed=11)
    state = create_state_from_config(config)
    assert (state.width, state.height) == (5, 4)
    assert (state.cell_width, state.cell_height) == (8, 9)
    assert state.seed == 11


def test_default_save_path() -> None:
    assert default_save_path(42) == "42.infinity.json"


def test_description_summarizes_state() -> None:
    state = create_state(width=3, height=2, seed=9)
    description = state.description
    assert description["seed"] == 9
    assert description["num_columns"] == state.num_columns
    assert description["overlay_size"] == 1
    assert "columns" not in description

import pytest

from grid_infinity.components import (
    DEFAULT_PLAYER_ALTERNATE_COLOR,
    DEFAULT_PLAYER_COLOR,
    FLOOR_COLORS,
    WALL_COLOR,
    Player,
    Position,
    Tile,
    floor,
    tile_color,
    to_rgb255,
    wall,
)
from grid_infinity.types import FloorKind, TileType


def test_floor_is_walkable() -> None:
    tile = floor()
    assert tile.walkable
    assert tile.is_floor and not tile.is_wall
    assert tile.floor_kind == FloorKind.GRASS


def test_wall_is_not_walkable() -> None:
    tile = wall()
    assert not tile.walkable
    assert tile.is_wall and not tile.is_floor
    assert tile.floor_kind is None


def test_tiles_are_values() -> None:
    assert floor(FloorKind.SAND) == Tile(TileType.FLOOR, FloorKind.SAND)
    assert floor(FloorKind.SAND) != floor(FloorKind.DIRT)
    assert wall() == wall()
    with pytest.raises(AttributeError):
        wall().type = TileType.FLOOR  # type: ignore[misc]


def test_discriminators_are_stable() -> None:
    assert int(TileType.FLOOR) == 1
    assert int(TileType.WALL) == 2
    assert [int(k) for k in FloorKind] == [1, 2, 3]


@pytest.mark.parametrize(
    "tile, rgb",
    [
        (floor(FloorKind.GRASS), (0, 123, 12)),
        (floor(FloorKind.SAND), (237, 201, 175)),
        (floor(FloorKind.DIRT), (120, 72, 0)),
        (wall(), (90, 90, 90)),
    ],
)
def test_tile_color(tile: Tile, rgb: tuple[int, int, int]) -> None:
    assert to_rgb255(tile_color(tile)) == rgb


def test_every_floor_kind_has_a_color() -> None:
    assert set(FLOOR_COLORS) == set(FloorKind)
    assert WALL_COLOR not in FLOOR_COLORS.values()


def test_player_defaults() -> None:
    player = Player()
    assert player.position == Position(0, 0)
    assert (player.column, player.row) == (0, 0)
    assert player.color == DEFAULT_PLAYER_COLOR
    assert player.alternate_color == DEFAULT_PLAYER_ALTERNATE_COLOR


def test_player_swapped_exchanges_colors() -> None:
    player = Player(color=(1.0, 0.0, 0.0), alternate_color=(0.0, 0.0, 1.0))
    swapped = player.swapped()
    assert swapped.color == (0.0, 0.0, 1.0)
    assert swapped.alternate_color == (1.0, 0.0, 0.0)
    assert swapped.swapped() == player


def test_player_moved_to_keeps_colors() -> None:
    player = Player(color=(0.5, 0.5, 0.5))
    moved = player.moved_to(Position(3, 2))
    assert (moved.column, moved.row) == (3, 2)
    assert moved.color == (0.5, 0.5, 0.5)
    assert player.position == Position(0, 0)


def test_positions_order_by_column_then_row() -> None:
    assert sorted([Position(1, 0), Position(0, 2), Position(0, 1)]) == [
        Position(0, 1),
        Position(0, 2),
        Position(1, 0),
    ]

"""Tile component.

A tile is one grid cell. The variant set is closed: a tile is either a
floor (walkable, with a cosmetic :class:`FloorKind`) or a wall (never
walkable). Tiles are frozen values, so the materialized grid and the overlay
store can hold the same instance without either being able to change the
other.
"""

from dataclasses import dataclass
from typing import Optional

from grid_infinity.types import FloorKind, TileType


@dataclass(frozen=True)
class Tile:
    """Grid cell value.

    Attributes:
        type: Variant tag.
        floor_kind: Cosmetic sub-kind; set for floors, ``None`` for walls.
    """

    type: TileType
    floor_kind: Optional[FloorKind] = None

    @property
    def walkable(self) -> bool:
        """Whether the player may stand on this tile."""
        return self.type == TileType.FLOOR

    @property
    def is_wall(self) -> bool:
        return self.type == TileType.WALL

    @property
    def is_floor(self) -> bool:
        return self.type == TileType.FLOOR


def floor(kind: FloorKind = FloorKind.GRASS) -> Tile:
    """Floor tile of the given kind (grass by default)."""
    return Tile(type=TileType.FLOOR, floor_kind=kind)


def wall() -> Tile:
    """Wall tile."""
    return Tile(type=TileType.WALL)

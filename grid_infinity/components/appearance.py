"""Tile colour policy.

Maps tiles to the fill colour used by the renderer. Colours are RGB triples
in [0, 1]; :func:`to_rgb255` converts them for Pillow.
"""

from typing import Dict, Tuple

from grid_infinity.components.tile import Tile
from grid_infinity.types import Color, FloorKind

FLOOR_COLORS: Dict[FloorKind, Color] = {
    FloorKind.GRASS: (0.0, 123 / 255, 12 / 255),
    FloorKind.SAND: (237 / 255, 201 / 255, 175 / 255),
    FloorKind.DIRT: (120 / 255, 72 / 255, 0.0),
}

WALL_COLOR: Color = (90 / 255, 90 / 255, 90 / 255)


def tile_color(tile: Tile) -> Color:
    """Fill colour for ``tile``."""
    if tile.is_wall:
        return WALL_COLOR
    return FLOOR_COLORS[tile.floor_kind or FloorKind.GRASS]


def to_rgb255(color: Color) -> Tuple[int, int, int]:
    r, g, b = color
    return round(r * 255), round(g * 255), round(b * 255)

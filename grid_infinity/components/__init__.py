"""grid_infinity.components
=================================

Aggregate import surface for the value objects that make up a board:
:class:`Tile` (with the ``floor`` / ``wall`` constructors), :class:`Player`
and :class:`Position`, plus the tile colour policy used by the renderer.

All components are frozen ``@dataclass`` values; systems express a change by
building a new value and storing it in a new :class:`grid_infinity.state.State`::

    from grid_infinity.components import Position, floor, wall

"""

from .appearance import FLOOR_COLORS, WALL_COLOR, tile_color, to_rgb255
from .player import DEFAULT_PLAYER_ALTERNATE_COLOR, DEFAULT_PLAYER_COLOR, Player
from .position import Position
from .tile import Tile, floor, wall

__all__ = [
    # Tiles
    "Tile",
    "floor",
    "wall",
    # Actors
    "Player",
    "Position",
    "DEFAULT_PLAYER_COLOR",
    "DEFAULT_PLAYER_ALTERNATE_COLOR",
    # Appearance
    "FLOOR_COLORS",
    "WALL_COLOR",
    "tile_color",
    "to_rgb255",
]

"""Common type aliases and enumerations.

``TileType`` and ``FloorKind`` are integer enums because their values are the
type discriminators written into save files; changing a value breaks every
save made before the change.
"""

from enum import IntEnum
from typing import Any, Tuple

# RGB triple with channels in [0, 1]
Color = Tuple[float, float, float]

# Snapshot returned by ``random.Random.getstate``
RngState = Tuple[Any, ...]


class TileType(IntEnum):
    """Closed set of tile variants (save-file ``type`` field)."""

    FLOOR = 1
    WALL = 2


class FloorKind(IntEnum):
    """Cosmetic floor sub-kind (save-file ``floorType`` field)."""

    GRASS = 1
    SAND = 2
    DIRT = 3

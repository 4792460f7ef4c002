"""Position component.

Immutable integer grid coordinates. Used for the player location and as the
key of the overlay store.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at the left end of the world).
        y: Row index (0 at top).
    """

    x: int
    y: int

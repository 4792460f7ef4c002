"""Player component.

Grid position plus a cosmetic colour pair. The pair can be swapped by the
``SWAP_COLOR`` action; neither colour affects gameplay.
"""

from dataclasses import dataclass, replace

from grid_infinity.components.position import Position
from grid_infinity.types import Color

DEFAULT_PLAYER_COLOR: Color = (30 / 255, 144 / 255, 1.0)
DEFAULT_PLAYER_ALTERNATE_COLOR: Color = (1.0, 215 / 255, 0.0)


@dataclass(frozen=True)
class Player:
    """Controlled actor.

    Attributes:
        position: Current grid cell.
        color: Main fill colour.
        alternate_color: Outline colour.
    """

    position: Position = Position(0, 0)
    color: Color = DEFAULT_PLAYER_COLOR
    alternate_color: Color = DEFAULT_PLAYER_ALTERNATE_COLOR

    @property
    def column(self) -> int:
        return self.position.x

    @property
    def row(self) -> int:
        return self.position.y

    def moved_to(self, position: Position) -> "Player":
        return replace(self, position=position)

    def swapped(self) -> "Player":
        """Return the player with main and alternate colours exchanged."""
        return replace(self, color=self.alternate_color, alternate_color=self.color)

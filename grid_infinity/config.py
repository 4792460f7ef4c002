"""Board defaults and construction parameters.

The module level constants are the fallback values used whenever a caller
passes a non-positive dimension (or no value at all) to
:func:`grid_infinity.board.create_state`. :class:`BoardConfig` groups the same
parameters for front ends that keep a configuration object around (the
Streamlit app and the Gymnasium environment).
"""

from dataclasses import dataclass
from typing import Optional

GAME_VERSION = "1.0.0"

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 20
DEFAULT_CELL_WIDTH = 30
DEFAULT_CELL_HEIGHT = 30
DEFAULT_WALL_PROBABILITY = 0.3

# Fraction of the visible width that triggers a scroll when the player gets
# closer than this to either edge of the window.
SCROLL_THRESHOLD = 0.25

SAVE_SUFFIX = ".infinity.json"
DEFAULT_LOAD_PATH = "game" + SAVE_SUFFIX


@dataclass(frozen=True)
class BoardConfig:
    """Construction parameters for a board.

    Attributes:
        width: Number of visible columns.
        height: Number of rows (fixed for the session).
        cell_width: Pixel width of one cell.
        cell_height: Pixel height of one cell.
        seed: Generation seed; ``None`` picks the current Unix time.
        wall_probability: Chance in [0, 1] that a generated cell is a wall.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cell_width: int = DEFAULT_CELL_WIDTH
    cell_height: int = DEFAULT_CELL_HEIGHT
    seed: Optional[int] = None
    wall_probability: float = DEFAULT_WALL_PROBABILITY


def default_save_path(seed: int) -> str:
    """Seed-derived save filename used when no explicit path was given."""
    return f"{seed}{SAVE_SUFFIX}"

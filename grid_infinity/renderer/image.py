"""Pillow renderer for the visible window of a board.

Each visible tile is drawn as a flat coloured cell at its pixel position, and
the player is drawn last as an inset square outlined in its alternate colour.
Frames are RGBA images sized ``width * cell_width`` by
``height * cell_height``, optionally scaled up with nearest-neighbour
resampling.
"""

from typing import Optional, Tuple

from PIL import Image, ImageDraw

from grid_infinity.components import tile_color, to_rgb255
from grid_infinity.state import State
from grid_infinity.utils.coords import (
    game_pixel_height,
    game_pixel_width,
    vector_x_to_pixel_x,
    vector_y_to_pixel_y,
)
from grid_infinity.utils.grid import player_screen_position, visible_tiles

BACKGROUND_COLOR: Tuple[int, int, int, int] = (128, 128, 128, 255)
DEFAULT_PLAYER_INSET_PERCENT = 0.15


def _cell_box(state: State, column: int, row: int) -> Tuple[int, int, int, int]:
    x0 = vector_x_to_pixel_x(state, column)
    y0 = vector_y_to_pixel_y(state, row)
    return x0, y0, x0 + state.cell_width - 1, y0 + state.cell_height - 1


def render(
    state: State,
    player_inset_percent: float = DEFAULT_PLAYER_INSET_PERCENT,
    scale: int = 1,
) -> Image.Image:
    """
    Renders the visible window of the board as a PIL Image, one filled cell per
    tile with the player drawn last, on top.
    """
    img = Image.new(
        "RGBA", (game_pixel_width(state), game_pixel_height(state)), BACKGROUND_COLOR
    )
    draw = ImageDraw.Draw(img)

    for column, row, tile in visible_tiles(state):
        draw.rectangle(_cell_box(state, column, row), fill=to_rgb255(tile_color(tile)))

    screen = player_screen_position(state)
    if 0 <= screen.x < state.width:
        x0, y0, x1, y1 = _cell_box(state, screen.x, screen.y)
        inset = int(min(state.cell_width, state.cell_height) * player_inset_percent)
        draw.rectangle(
            (x0 + inset, y0 + inset, x1 - inset, y1 - inset),
            fill=to_rgb255(state.player.color),
            outline=to_rgb255(state.player.alternate_color),
            width=max(1, inset // 2),
        )

    if scale != 1:
        img = img.resize(
            (img.width * scale, img.height * scale), Image.Resampling.NEAREST
        )
    return img


class ImageRenderer:
    player_inset_percent: float
    scale: int
    last_frame: Optional[Image.Image]

    def __init__(
        self,
        player_inset_percent: float = DEFAULT_PLAYER_INSET_PERCENT,
        scale: int = 1,
    ):
        self.player_inset_percent = player_inset_percent
        self.scale = scale
        self.last_frame = None

    def render(self, state: State) -> Image.Image:
        self.last_frame = render(
            state, player_inset_percent=self.player_inset_percent, scale=self.scale
        )
        return self.last_frame

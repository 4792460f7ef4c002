"""Core immutable board ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the whole
board at one moment: configuration, viewport, player, overlay store,
materialized grid and the position of the generation stream. Systems are
functions that take a ``State`` (plus an input such as an ``Action`` or pixel
coordinates) and return a *new* ``State``; nothing is mutated in place.

Design notes:

* ``overlay`` is a **persistent map** (``pyrsistent.PMap``) from
    :class:`Position` to :class:`Tile`. It holds every cell whose generated
    value was overridden, by a player edit or by a loaded save. Entries are
    only ever added or replaced.
* ``columns`` is a persistent vector of persistent vectors, indexed
    ``columns[x][y]``. It is the materialized part of the infinite world and
    only grows by whole columns at the right end.
* ``rng_state`` is the snapshot of the generation stream *after* the last
    materialized column. Generating column ``n`` always starts from the state
    left by column ``n - 1``, which is what makes the world reproducible from
    ``seed`` and ``overlay`` alone.
* Edits write the same tile value to ``columns`` and ``overlay`` in one
    ``replace`` call; a state where only one of them changed never exists.

See :mod:`grid_infinity.board` for construction and
:mod:`grid_infinity.step` for the action reducer.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import PMap, PVector, pmap, pvector

from grid_infinity.components import Player, Position, Tile
from grid_infinity.types import RngState


@dataclass(frozen=True)
class State:
    """Immutable board state.

    Attributes:
        width (int): Number of visible columns.
        height (int): Number of rows; fixed for the session.
        cell_width (int): Pixel width of one cell.
        cell_height (int): Pixel height of one cell.
        seed (int): Generation seed.
        wall_probability (float): Chance in [0, 1] that a generated cell is a wall.
        rng_state (RngState): Generation stream positioned after the last column.
        player (Player): The controlled actor.
        left_edge (int): Index of the leftmost visible column (>= 0).
        overlay (PMap[Position, Tile]): Overridden cells.
        columns (PVector[PVector[Tile]]): Materialized grid, ``columns[x][y]``.
        save_path (str | None): Path remembered for subsequent saves.
    """

    # Configuration
    width: int
    height: int
    cell_width: int
    cell_height: int
    seed: int
    wall_probability: float

    # RNG
    rng_state: RngState

    # Actors
    player: Player = Player()

    # Viewport
    left_edge: int = 0

    # Stores
    overlay: PMap[Position, Tile] = pmap()
    columns: PVector[PVector[Tile]] = pvector()

    # Persistence
    save_path: Optional[str] = None

    @property
    def num_columns(self) -> int:
        """Number of materialized columns."""
        return len(self.columns)

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary for diagnostics.

        Omits the grid and the stream snapshot, which are large and fully
        determined by the other fields.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        return pmap(
            {
                "width": self.width,
                "height": self.height,
                "cell_width": self.cell_width,
                "cell_height": self.cell_height,
                "seed": self.seed,
                "wall_probability": self.wall_probability,
                "left_edge": self.left_edge,
                "player": self.player.position,
                "overlay_size": len(self.overlay),
                "num_columns": self.num_columns,
            }
        )

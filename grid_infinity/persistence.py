"""Save / load of boards as ``*.infinity.json`` files.

A save holds only what cannot be regenerated: configuration, viewport
offset, seed, wall probability, the player and the overlay store. The
materialized grid is never written. Loading re-seeds the stream, installs the
saved overlay and regenerates exactly as many columns as the loaded viewport
and player need.

File layout (pretty printed, 4 space indent)::

    {
        "gameVersion": "1.0.0",
        "saveTime": 1700000000,
        "numBlocksWide": 30, "numBlocksHigh": 20,
        "blockWidth": 30, "blockHeight": 30,
        "leftDisplayEdge": 0,
        "seed": 42,
        "percentWall": 0.3,
        "player": {"column": 0, "row": 0,
                   "color": [r, g, b], "alternateColor": [r, g, b]},
        "changes": [{"type": 1, "floorType": 1, "column": 0, "row": 0}, ...]
    }

Loading is tolerant: each field group is parsed on its own, a group that
fails is logged, recorded in :attr:`LoadResult.failed` and keeps the value it
had before the load, and the remaining groups still load. A missing
``leftDisplayEdge`` means 0, and a display edge right of the player is
moved back to the player's column. Nothing here raises for bad input.
"""

import json
import logging
import time
from dataclasses import dataclass, replace
from enum import StrEnum, auto
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pyrsistent import pmap

from grid_infinity.board import clamp_probability
from grid_infinity.components import Player, Position, Tile, floor, wall
from grid_infinity.config import DEFAULT_LOAD_PATH, GAME_VERSION, default_save_path
from grid_infinity.state import State
from grid_infinity.systems.generation import generate_board
from grid_infinity.types import Color, FloorKind, TileType

logger = logging.getLogger(__name__)

JsonDict = Dict[str, Any]

# Errors a malformed field group can raise while being parsed
_FIELD_ERRORS = (KeyError, TypeError, ValueError)


class LoadSection(StrEnum):
    """Field groups reported when a load fails or partially fails."""

    FILE = auto()
    PARSE = auto()
    DIMENSIONS = auto()
    LEFT_EDGE = auto()
    SEED = auto()
    PROBABILITY = auto()
    PLAYER = auto()
    OVERLAY = auto()


@dataclass(frozen=True)
class LoadResult:
    """Outcome of :func:`load_game`.

    Attributes:
        state: Loaded state; the input state unchanged if the file could not
            be read or parsed at all.
        failed: Field groups that could not be loaded, in file order.
    """

    state: State
    failed: Tuple[LoadSection, ...] = ()

    @property
    def loaded(self) -> bool:
        """True when every field group loaded."""
        return not self.failed


# -------- Field helpers --------


def _get_int(obj: Mapping[str, Any], key: str) -> int:
    value = obj[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key!r} must be an integer, got {value!r}")
    return value


def _to_float(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {value!r}")
    try:
        return float(value)
    except OverflowError as e:
        # JSON integers are unbounded
        raise ValueError(f"{key!r} is out of range for a float") from e


def _get_float(obj: Mapping[str, Any], key: str) -> float:
    return _to_float(key, obj[key])


def _get_color(obj: Mapping[str, Any], key: str) -> Color:
    value = obj[key]
    if not isinstance(value, list) or len(value) != 3:
        raise TypeError(f"{key!r} must be a list of three numbers, got {value!r}")
    r, g, b = (_to_float(key, channel) for channel in value)
    return (r, g, b)


def _get_positive_int(obj: Mapping[str, Any], key: str) -> int:
    value = _get_int(obj, key)
    if value <= 0:
        raise ValueError(f"{key!r} must be positive, got {value}")
    return value


# -------- Component serialization --------


def tile_to_dict(tile: Tile) -> JsonDict:
    """Serialize a tile's own fields (type discriminator plus floor kind)."""
    data: JsonDict = {"type": int(tile.type)}
    if tile.is_floor:
        data["floorType"] = int(tile.floor_kind or FloorKind.GRASS)
    return data


def tile_from_dict(data: Mapping[str, Any]) -> Tile:
    """Build a tile from :func:`tile_to_dict` output.

    Raises:
        KeyError, TypeError, ValueError: On a missing field, a wrong type or
            an unknown discriminator.
    """
    tile_type = TileType(_get_int(data, "type"))
    if tile_type == TileType.WALL:
        return wall()
    return floor(FloorKind(_get_int(data, "floorType")))


def player_to_dict(player: Player) -> JsonDict:
    return {
        "column": player.column,
        "row": player.row,
        "color": list(player.color),
        "alternateColor": list(player.alternate_color),
    }


def player_from_dict(data: Mapping[str, Any], height: int) -> Player:
    """Build a player, checking the position against the board height."""
    column = _get_int(data, "column")
    row = _get_int(data, "row")
    if column < 0 or not 0 <= row < height:
        raise ValueError(f"Player position {(column, row)} is outside the board")
    return Player(
        position=Position(column, row),
        color=_get_color(data, "color"),
        alternate_color=_get_color(data, "alternateColor"),
    )


def overlay_to_list(state: State) -> List[JsonDict]:
    """Overlay store as a flat list of tiles tagged with ``column`` / ``row``."""
    changes: List[JsonDict] = []
    for pos, tile in sorted(state.overlay.items()):
        entry = tile_to_dict(tile)
        entry["column"] = pos.x
        entry["row"] = pos.y
        changes.append(entry)
    return changes


def overlay_from_list(changes: Any) -> Dict[Position, Tile]:
    if not isinstance(changes, list):
        raise TypeError(f"'changes' must be a list, got {type(changes).__name__}")
    overlay: Dict[Position, Tile] = {}
    for entry in changes:
        if not isinstance(entry, dict):
            raise TypeError(f"Change entry must be an object, got {entry!r}")
        column = _get_int(entry, "column")
        row = _get_int(entry, "row")
        if column < 0 or row < 0:
            raise ValueError(f"Change position {(column, row)} is negative")
        overlay[Position(column, row)] = tile_from_dict(entry)
    return overlay


# -------- State serialization --------


def state_to_dict(state: State) -> JsonDict:
    """Serialize everything needed to rebuild ``state`` (never the grid)."""
    return {
        "gameVersion": GAME_VERSION,
        "saveTime": int(time.time()),
        "numBlocksWide": state.width,
        "numBlocksHigh": state.height,
        "blockWidth": state.cell_width,
        "blockHeight": state.cell_height,
        "leftDisplayEdge": state.left_edge,
        "seed": state.seed,
        "percentWall": state.wall_probability,
        "player": player_to_dict(state.player),
        "changes": overlay_to_list(state),
    }


def state_from_dict(state: State, data: Mapping[str, Any]) -> LoadResult:
    """Load ``data`` on top of ``state`` and regenerate the grid.

    Every field group that fails keeps its value from ``state``.

    Args:
        state (State): State providing fallback values.
        data (Mapping[str, Any]): Parsed save file.

    Returns:
        LoadResult: Regenerated state plus the groups that failed.
    """
    failed: List[LoadSection] = []

    def section_failed(section: LoadSection, error: Exception) -> None:
        logger.warning(
            "Syntax invalid for save file... Error loading %s: %s", section, error
        )
        failed.append(section)

    width, height = state.width, state.height
    cell_width, cell_height = state.cell_width, state.cell_height
    try:
        width = _get_positive_int(data, "numBlocksWide")
        height = _get_positive_int(data, "numBlocksHigh")
        cell_width = _get_positive_int(data, "blockWidth")
        cell_height = _get_positive_int(data, "blockHeight")
    except _FIELD_ERRORS as e:
        width, height = state.width, state.height
        cell_width, cell_height = state.cell_width, state.cell_height
        section_failed(LoadSection.DIMENSIONS, e)

    left_edge = 0
    if "leftDisplayEdge" in data:
        try:
            left_edge = _get_int(data, "leftDisplayEdge")
            if left_edge < 0:
                raise ValueError(f"'leftDisplayEdge' is negative: {left_edge}")
        except _FIELD_ERRORS as e:
            left_edge = state.left_edge
            section_failed(LoadSection.LEFT_EDGE, e)

    seed = state.seed
    try:
        seed = _get_int(data, "seed")
    except _FIELD_ERRORS as e:
        section_failed(LoadSection.SEED, e)

    wall_probability = state.wall_probability
    try:
        wall_probability = clamp_probability(_get_float(data, "percentWall"))
    except _FIELD_ERRORS as e:
        section_failed(LoadSection.PROBABILITY, e)

    player = state.player
    try:
        player = player_from_dict(data["player"], height)
    except _FIELD_ERRORS as e:
        section_failed(LoadSection.PLAYER, e)
    if player.row >= height:
        # A kept player can be below a shrunken board
        player = player.moved_to(Position(player.column, height - 1))
    if player.column < left_edge:
        logger.warning(
            "Player column %d is left of the display edge %d; moving the edge",
            player.column,
            left_edge,
        )
        left_edge = player.column

    overlay = state.overlay
    try:
        overlay = pmap(overlay_from_list(data.get("changes", [])))
    except _FIELD_ERRORS as e:
        section_failed(LoadSection.OVERLAY, e)

    loaded = replace(
        state,
        width=width,
        height=height,
        cell_width=cell_width,
        cell_height=cell_height,
        left_edge=left_edge,
        seed=seed,
        wall_probability=wall_probability,
        player=player,
        overlay=overlay,
    )
    return LoadResult(state=generate_board(loaded), failed=tuple(failed))


# -------- Files --------


def save_game(state: State, filename: Optional[str] = None) -> Tuple[State, bool]:
    """Write ``state`` to a save file.

    Args:
        state (State): State to save.
        filename (str | None): Target path. When empty, the remembered
            ``state.save_path`` is used, or else ``"<seed>.infinity.json"``.

    Returns:
        Tuple[State, bool]: The state with the path remembered, and whether
        the file was written. On failure the input state is returned.
    """
    path = filename or state.save_path or default_save_path(state.seed)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state_to_dict(state), f, indent=4)
            f.write("\n")
    except OSError as e:
        logger.warning("Could not save game to %s: %s", path, e)
        return state, False

    logger.info("Saved game to %s (%d overlay cells)", path, len(state.overlay))
    if filename:
        return state, True
    return replace(state, save_path=path), True


def load_game(state: State, filename: Optional[str] = None) -> LoadResult:
    """Load a save file on top of ``state``.

    Args:
        state (State): Current state; supplies the value of every field group
            that fails to load.
        filename (str | None): Source path; defaults to ``game.infinity.json``.

    Returns:
        LoadResult: The loaded state (remembering ``filename`` for later
        saves) and the failed field groups. If the file cannot be read or is
        not a JSON object, ``state`` is returned unchanged.
    """
    path = filename or DEFAULT_LOAD_PATH
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        logger.warning("Could not open save file %s: %s", path, e)
        return LoadResult(state=state, failed=(LoadSection.FILE,))
    except UnicodeDecodeError as e:
        logger.warning("Save file %s is not valid UTF-8: %s", path, e)
        return LoadResult(state=state, failed=(LoadSection.PARSE,))

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Error converting file %s to json: %s", path, e)
        return LoadResult(state=state, failed=(LoadSection.PARSE,))
    if not isinstance(data, dict):
        logger.warning("Save file %s does not hold a JSON object", path)
        return LoadResult(state=state, failed=(LoadSection.PARSE,))

    result = state_from_dict(replace(state, save_path=path), data)
    if result.loaded:
        logger.info(
            "Loaded game from %s (seed %d, %d overlay cells)",
            path,
            result.state.seed,
            len(result.state.overlay),
        )
    return result

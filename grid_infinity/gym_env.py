"""Gymnasium wrapper around an infinite Grid Infinity board.

Each observation pairs an RGBA frame of the visible window with a small
structured summary of the board::

    {"image": np.ndarray(H, W, 4),
     "info": {"player": {...}, "viewport": {...}, "config": {...}}}

The agent is rewarded for every column it reaches further right than before,
so the only objective is exploration. The world never ends: ``terminated`` is
always False and episodes are cut only by ``max_steps``.

Example::

    env = GridInfinityEnv(width=10, height=8, seed=42, max_steps=500)
    obs, _ = env.reset()
    obs, reward, terminated, truncated, _ = env.step(GymAction.RIGHT)
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from grid_infinity.actions import Action, GymAction
from grid_infinity.board import create_state
from grid_infinity.config import DEFAULT_WALL_PROBABILITY
from grid_infinity.renderer.image import ImageRenderer
from grid_infinity.state import State
from grid_infinity.step import step

ObsType = Dict[str, Any]

# Upper bound used for unbounded integer fields (columns, seeds, counts)
_MAX_INDEX = 2**62


def _scalar(low: int, high: int) -> spaces.Box:
    return spaces.Box(low=low, high=high, shape=(), dtype=np.int64)


def observation_space(width: int, height: int, cell_size: int) -> spaces.Dict:
    """Observation space for a ``width`` x ``height`` window of square cells."""
    frame = spaces.Box(
        low=0,
        high=255,
        shape=(height * cell_size, width * cell_size, 4),
        dtype=np.uint8,
    )
    player = spaces.Dict(
        {"column": _scalar(0, _MAX_INDEX), "row": _scalar(0, height - 1)}
    )
    viewport = spaces.Dict(
        {
            "left_edge": _scalar(0, _MAX_INDEX),
            "num_columns": _scalar(1, _MAX_INDEX),
            "overlay_size": _scalar(0, _MAX_INDEX),
        }
    )
    config = spaces.Dict(
        {
            "seed": _scalar(0, _MAX_INDEX),
            "width": _scalar(width, width),
            "height": _scalar(height, height),
            "wall_probability": spaces.Box(0.0, 1.0, shape=(), dtype=np.float64),
        }
    )
    return spaces.Dict(
        {
            "image": frame,
            "info": spaces.Dict(
                {"player": player, "viewport": viewport, "config": config}
            ),
        }
    )


def board_summary(state: State) -> Dict[str, Dict[str, Any]]:
    """Structured part of an observation."""
    return {
        "player": {"column": state.player.column, "row": state.player.row},
        "viewport": {
            "left_edge": state.left_edge,
            "num_columns": state.num_columns,
            "overlay_size": len(state.overlay),
        },
        "config": {
            "seed": state.seed,
            "width": state.width,
            "height": state.height,
            "wall_probability": state.wall_probability,
        },
    }


def decode_action(action: int) -> Action:
    """Map a ``Discrete`` index to its :class:`Action`.

    Raises:
        ValueError: If ``action`` is not a valid index.
    """
    return Action[GymAction(int(action)).name]


class GridInfinityEnv(gym.Env[ObsType, np.integer]):
    """Exploration environment over an infinite board.

    Actions are indices into :class:`grid_infinity.actions.GymAction`.
    """

    metadata = {"render_modes": ["human", "image"]}

    def __init__(
        self,
        render_mode: str = "image",
        width: int = 10,
        height: int = 8,
        cell_size: int = 16,
        seed: Optional[int] = None,
        wall_probability: float = DEFAULT_WALL_PROBABILITY,
        max_steps: Optional[int] = None,
    ):
        """
        Arguments:
            render_mode: "image" returns frames from :meth:`render`, "human"
                shows them.
            width: Visible columns.
            height: Rows.
            cell_size: Side of one cell in pixels.
            seed: Board seed. When ``None`` every reset draws one from the
                environment's ``np_random``.
            wall_probability: Chance in [0, 1] that a generated cell is a wall.
            max_steps: Episode length before truncation; ``None`` never truncates.
        """
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.board_seed = seed
        self.wall_probability = wall_probability
        self.max_steps = max_steps
        self._render_mode = render_mode
        self._renderer = ImageRenderer()

        self.state: Optional[State] = None
        self._steps = 0
        self._furthest_column = 0

        self.observation_space = observation_space(width, height, cell_size)
        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Build a fresh board and return the first observation.

        ``seed`` seeds ``np_random``, which only matters when no board seed
        was fixed at construction.
        """
        super().reset(seed=seed)
        board_seed = self.board_seed
        if board_seed is None:
            board_seed = int(self.np_random.integers(1, 2**31))
        self.state = create_state(
            width=self.width,
            height=self.height,
            cell_width=self.cell_size,
            cell_height=self.cell_size,
            seed=board_seed,
            wall_probability=self.wall_probability,
        )
        self._steps = 0
        self._furthest_column = self.state.player.column
        return self._observe(), {}

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one action.

        Returns:
            (observation, reward, terminated, truncated, info); the reward is
            the number of columns gained beyond the furthest one reached.
        """
        assert self.state is not None
        self.state = step(self.state, decode_action(int(action)))
        self._steps += 1

        column = self.state.player.column
        reward = float(max(0, column - self._furthest_column))
        self._furthest_column = max(self._furthest_column, column)

        truncated = self.max_steps is not None and self._steps >= self.max_steps
        return self._observe(), reward, False, truncated, {}

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        assert self.state is not None
        mode = mode or self._render_mode
        if mode not in self.metadata["render_modes"]:
            raise NotImplementedError(f"Render mode '{mode}' not supported.")
        frame = self._renderer.render(self.state)
        if mode == "human":
            frame.show()
            return None
        return frame

    def _observe(self) -> ObsType:
        assert self.state is not None
        frame = self._renderer.render(self.state)
        return {
            "image": np.asarray(frame, dtype=np.uint8),
            "info": board_summary(self.state),
        }

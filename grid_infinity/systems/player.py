"""Cosmetic player systems."""

from dataclasses import replace

from grid_infinity.state import State


def swap_color_system(state: State) -> State:
    """Exchange the player's main and alternate colours."""
    return replace(state, player=state.player.swapped())

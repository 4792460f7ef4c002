import logging
from dataclasses import replace
from typing import Dict, List, Optional

import streamlit as st
from pyrsistent import thaw
from st_keyup import st_keyup  # type: ignore

from grid_infinity.actions import Action
from grid_infinity.board import create_state_from_config
from grid_infinity.config import (
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_LOAD_PATH,
    DEFAULT_WALL_PROBABILITY,
    DEFAULT_WIDTH,
    BoardConfig,
)
from grid_infinity.persistence import load_game, save_game
from grid_infinity.renderer.image import ImageRenderer
from grid_infinity.state import State
from grid_infinity.step import step
from grid_infinity.systems.edit import EditResult, add_wall, move_wall, remove_wall
from grid_infinity.utils.coords import game_pixel_height, game_pixel_width

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

st.set_page_config(layout="wide", page_title="Grid Infinity")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
        .stToastContainer {
            align-items: center;
        }
    </style>
""",
    unsafe_allow_html=True,
)

KEY_MAP: Dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "c": Action.SWAP_COLOR,
    "1": Action.GRASS,
    "2": Action.SAND,
    "3": Action.DIRT,
    "q": Action.WAIT,
}


def set_default_config() -> None:
    if "board_config" not in st.session_state:
        st.session_state["board_config"] = BoardConfig(
            width=DEFAULT_WIDTH,
            height=DEFAULT_HEIGHT,
            cell_width=DEFAULT_CELL_WIDTH,
            cell_height=DEFAULT_CELL_HEIGHT,
            seed=42,
            wall_probability=DEFAULT_WALL_PROBABILITY,
        )
        st.session_state["renderer"] = ImageRenderer()


def get_config_from_widgets() -> BoardConfig:
    board_config: BoardConfig = st.session_state["board_config"]

    st.subheader("Board")
    width: int = st.slider("Visible columns", 2, 60, board_config.width, key="width")
    height: int = st.slider("Rows", 2, 40, board_config.height, key="height")

    st.subheader("Cells")
    cell_width: int = st.number_input(
        "Cell width (px)", min_value=1, value=board_config.cell_width, key="cell_w"
    )
    cell_height: int = st.number_input(
        "Cell height (px)", min_value=1, value=board_config.cell_height, key="cell_h"
    )

    st.subheader("Generation")
    wall_probability: float = st.slider(
        "Wall probability",
        0.0,
        1.0,
        board_config.wall_probability,
        step=0.01,
        key="wall_probability",
    )
    seed: int = st.number_input(
        "Random seed", min_value=0, value=board_config.seed or 0, key="board_seed"
    )

    return BoardConfig(
        width=width,
        height=height,
        cell_width=cell_width,
        cell_height=cell_height,
        seed=seed or None,
        wall_probability=wall_probability,
    )


def make_board(config: BoardConfig) -> State:
    state = create_state_from_config(config)
    st.session_state["state"] = state
    return state


def get_keyboard_action() -> Optional[Action]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="board_key_input",
            placeholder="Type: WASD to move, c swap colour, 1/2/3 floor, q wait",
        )
        or ""
    )
    prev_value: str = st.session_state.get("board_key_input_prev", "")
    st.session_state["board_key_input_prev"] = value
    if value != prev_value:
        from collections import Counter

        new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
        if not new_values:
            return None
        return KEY_MAP.get(new_values[-1].lower())
    return None


def do_action(action: Action) -> None:
    st.session_state["state"] = step(st.session_state["state"], action)


def apply_edit(label: str, result: EditResult) -> None:
    state, ok = result
    st.session_state["state"] = state
    if ok:
        st.toast(f"{label}: done", icon="✅")
    else:
        st.toast(f"{label}: not allowed here", icon="🚫")


def wall_editor(state: State) -> None:
    max_x = game_pixel_width(state) - 1
    max_y = game_pixel_height(state) - 1

    st.subheader("Walls")
    x_col, y_col = st.columns(2)
    with x_col:
        px: int = st.number_input("x (px)", 0, max_x, 0, key="wall_x")
    with y_col:
        py: int = st.number_input("y (px)", 0, max_y, 0, key="wall_y")

    add_col, remove_col = st.columns(2)
    with add_col:
        if st.button("🧱 Add", key="add_wall_btn", use_container_width=True):
            apply_edit("Add wall", add_wall(state, px, py))
    with remove_col:
        if st.button("⛏️ Remove", key="remove_wall_btn", use_container_width=True):
            apply_edit("Remove wall", remove_wall(state, px, py))

    to_x_col, to_y_col = st.columns(2)
    with to_x_col:
        to_x: int = st.number_input("to x (px)", 0, max_x, 0, key="wall_to_x")
    with to_y_col:
        to_y: int = st.number_input("to y (px)", 0, max_y, 0, key="wall_to_y")
    if st.button("↔️ Move", key="move_wall_btn", use_container_width=True):
        apply_edit("Move wall", move_wall(state, px, py, to_x, to_y))


def save_load_panel(state: State) -> None:
    st.subheader("Save / Load")
    filename: str = st.text_input(
        "File", value=state.save_path or "", key="save_file", placeholder="auto"
    )
    save_col, load_col = st.columns(2)
    with save_col:
        if st.button("💾 Save", key="save_btn", use_container_width=True):
            saved, ok = save_game(state, filename or None)
            st.session_state["state"] = saved
            if ok:
                st.toast(f"Saved to {filename or saved.save_path}", icon="💾")
            else:
                st.toast("Could not save game", icon="🚫")
    with load_col:
        if st.button("📂 Load", key="load_btn", use_container_width=True):
            result = load_game(state, filename or DEFAULT_LOAD_PATH)
            st.session_state["state"] = result.state
            if result.loaded:
                st.toast("Game loaded", icon="📂")
            else:
                failed = ", ".join(result.failed)
                st.toast(f"Problems loading: {failed}", icon="⚠️")


# --------- Main App ---------
set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: BoardConfig = get_config_from_widgets()

    if st.button("🔄 Generate Board", key="save_config_btn", use_container_width=True):
        st.session_state["board_config"] = config
        make_board(config)
    st.divider()

with tab_game:
    if "state" not in st.session_state:
        make_board(st.session_state["board_config"])

    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        if st.button("🔄 Reseed", key="reseed_btn", use_container_width=True):
            board_config: BoardConfig = st.session_state["board_config"]
            st.session_state["board_config"] = replace(
                board_config, seed=(board_config.seed or 0) + 1
            )
            make_board(st.session_state["board_config"])

        st.divider()

        action: Optional[Action] = get_keyboard_action()
        if action is not None:
            do_action(action)

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                do_action(Action.UP)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                do_action(Action.LEFT)
        with down_btn:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                do_action(Action.DOWN)
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                do_action(Action.RIGHT)

        grass_btn, sand_btn, dirt_btn = st.columns([1, 1, 1])
        with grass_btn:
            if st.button("🌿 Grass", key="grass_btn", use_container_width=True):
                do_action(Action.GRASS)
        with sand_btn:
            if st.button("🏖️ Sand", key="sand_btn", use_container_width=True):
                do_action(Action.SAND)
        with dirt_btn:
            if st.button("🟫 Dirt", key="dirt_btn", use_container_width=True):
                do_action(Action.DIRT)

        if st.button("🎨 Swap colour", key="swap_btn", use_container_width=True):
            do_action(Action.SWAP_COLOR)

    state: State = st.session_state["state"]

    with left_col:
        st.info(
            f"**Player:** column {state.player.column}, row {state.player.row}",
            icon="🧍",
        )
        st.info(f"**Left edge:** {state.left_edge}", icon="🧭")
        st.info(f"**Seed:** {state.seed}", icon="🌱")
        wall_editor(state)
        save_load_panel(state)

    with middle_col:
        renderer: ImageRenderer = st.session_state["renderer"]
        img = renderer.render(st.session_state["state"])
        st.image(img, use_container_width=True)

with tab_state:
    st.json(thaw(st.session_state["state"].description), expanded=1)

"""Global sidebar controls: inventory status and floor filter."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional
from data.session_store import get_floors, get_total_rooms, get_undo_buffer, is_data_loaded
from config.defaults import MODES, DEFAULT_MODE


@dataclass
class SidebarState:
    mode: str
    floor_filter: Optional[int]


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Room Inventory")
        st.divider()

        mode = st.radio("Mode", MODES, index=MODES.index(DEFAULT_MODE), key="sidebar_mode")

        floors = get_floors()
        options = [None] + [f.floor_num for f in floors]
        floor_filter = st.selectbox(
            "Show floor",
            options=options,
            format_func=lambda x: "All floors" if x is None else f"{x}F",
            key="sidebar_floor",
        )

        st.divider()

        if is_data_loaded():
            st.success("Layout loaded")
            st.caption(f"Floors: {len(floors)}")
            st.caption(f"Total rooms: {get_total_rooms()}")
        else:
            st.warning("No layout loaded. Go to the Admin tab.")

        if not get_undo_buffer().is_empty:
            st.caption("A floor removal can be undone.")

    return SidebarState(mode=mode, floor_filter=floor_filter)

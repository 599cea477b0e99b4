"""Tab 1: Layout Editor, floors grid with per-room edits."""

import streamlit as st

from data.session_store import (
    get_floors, get_room_types, get_undo_buffer, is_data_loaded,
    set_inventory, set_floors, set_undo_buffer, add_audit_entry,
)
from engine.errors import NumberingExhaustedError
from engine.inventory import get_floor_summary
from engine.layout_ops import (
    add_floor, add_room_to_floor, remove_container, remove_floor, undo_remove_floor,
)
from engine.synchronizer import (
    all_containers, rebuild_room_types_from_containers,
    set_container_active, set_container_price, set_container_room_number,
    set_container_room_type,
)
from config.defaults import GRID_COLUMNS

UNASSIGNED_LABEL = "(unassigned)"


def _render_container(floor_num, container, type_names, editable):
    with st.container(border=True):
        st.markdown(f"**{container.room_number or '—'}**  \n{container.room_info or UNASSIGNED_LABEL}")
        if not editable:
            st.caption(f"{container.price:,.0f}" + ("" if container.is_active else " · inactive"))
            return

        options = [""] + type_names
        current = container.room_info if container.room_info in type_names else ""
        key = container.container_id
        selected = st.selectbox(
            "Type", options, index=options.index(current),
            format_func=lambda x: x or UNASSIGNED_LABEL, key=f"type_{key}",
        )
        if selected != current:
            try:
                floors, room_types = set_container_room_type(
                    get_floors(), get_room_types(), floor_num, key, selected,
                )
            except NumberingExhaustedError as e:
                st.error(e.message)
                return
            set_inventory(floors, room_types)
            add_audit_entry("set_room_type", "room_info", current, selected, floor_num, container.room_number)
            st.rerun()

        number = st.text_input("No.", value=container.room_number, key=f"num_{key}")
        if number.strip() != container.room_number:
            floors, room_types = set_container_room_number(
                get_floors(), get_room_types(), floor_num, key, number,
            )
            if floors is get_floors():
                st.warning(f"Room number '{number}' is not available on floor {floor_num}.")
            else:
                set_inventory(floors, room_types)
                add_audit_entry("set_room_number", "room_number", container.room_number, number.strip(), floor_num)
                st.rerun()

        price = st.number_input("Price", value=float(container.price), step=1000.0, key=f"price_{key}")
        if price != container.price:
            set_floors(set_container_price(get_floors(), floor_num, key, price))
            add_audit_entry("set_price", "price", f"{container.price:.0f}", f"{price:.0f}",
                            floor_num, container.room_number)

        active = st.checkbox("Active", value=container.is_active, key=f"active_{key}")
        if active != container.is_active:
            floors, room_types = set_container_active(get_floors(), get_room_types(), floor_num, key, active)
            set_inventory(floors, room_types)
            add_audit_entry("set_active", "is_active", str(container.is_active), str(active),
                            floor_num, container.room_number)
            st.rerun()

        if st.button("Remove", key=f"remove_{key}"):
            floors, room_types = remove_container(get_floors(), get_room_types(), floor_num, key)
            set_inventory(floors, room_types)
            add_audit_entry("remove_room", "container", container.room_number, "", floor_num, container.room_number)
            st.rerun()


def _render_floor_actions():
    col1, col2, col3 = st.columns(3)
    with col1:
        new_floor = st.number_input("New floor number", min_value=1, max_value=99, value=2, step=1)
        if st.button("Add floor"):
            set_floors(add_floor(get_floors(), int(new_floor)))
            add_audit_entry("add_floor", "floor", "", str(int(new_floor)), int(new_floor))
            st.rerun()
    with col3:
        if st.button("Undo floor removal", disabled=get_undo_buffer().is_empty):
            result = undo_remove_floor(get_undo_buffer(), get_floors())
            set_undo_buffer(result.undo_buffer)
            if result.restored:
                room_types = rebuild_room_types_from_containers(get_room_types(), all_containers(result.floors))
                set_inventory(result.floors, room_types)
                add_audit_entry("undo", "floors", "", "restored")
                st.rerun()
            else:
                st.info(result.message)


def render(sidebar_state):
    """Render the Layout Editor tab."""
    st.header("Layout Editor")

    if not is_data_loaded():
        st.info("No layout loaded. Load the default layout or upload settings in the Admin tab.")
        return

    editable = sidebar_state.mode == "Edit"
    if editable:
        _render_floor_actions()
        st.divider()

    type_names = [rt.room_info for rt in get_room_types()]
    summary = {s["floor_num"]: s for s in get_floor_summary(get_floors())}

    for floor in sorted(get_floors(), key=lambda f: f.floor_num, reverse=True):
        if sidebar_state.floor_filter is not None and floor.floor_num != sidebar_state.floor_filter:
            continue

        info = summary[floor.floor_num]
        header_col, add_col, remove_col = st.columns([4, 1, 1])
        header_col.subheader(f"{floor.floor_num}F")
        header_col.caption(
            f"{info['active_count']} active · {info['unassigned_count']} unassigned · "
            f"{info['inactive_count']} inactive"
        )

        if editable:
            if add_col.button("Add room", key=f"add_room_{floor.floor_num}"):
                try:
                    floors, room_types = add_room_to_floor(get_floors(), get_room_types(), floor.floor_num)
                except NumberingExhaustedError as e:
                    st.error(e.message)
                else:
                    set_inventory(floors, room_types)
                    add_audit_entry("add_room", "container", "", "", floor.floor_num)
                    st.rerun()
            if remove_col.button("Remove floor", key=f"remove_floor_{floor.floor_num}"):
                removal = remove_floor(get_floors(), get_room_types(), floor.floor_num, get_undo_buffer())
                set_inventory(removal.floors, removal.room_types)
                set_undo_buffer(removal.undo_buffer)
                add_audit_entry("remove_floor", "floor", str(floor.floor_num), "", floor.floor_num)
                st.rerun()

        if not floor.containers:
            st.caption("No rooms on this floor.")
            continue

        for start in range(0, len(floor.containers), GRID_COLUMNS):
            cols = st.columns(GRID_COLUMNS)
            for col, container in zip(cols, floor.containers[start:start + GRID_COLUMNS]):
                with col:
                    _render_container(floor.floor_num, container, type_names, editable)
        st.divider()

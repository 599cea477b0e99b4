"""Tab 2: Room Types: inventory summary panel and room-type catalog."""

import streamlit as st
import pandas as pd

from data.session_store import (
    get_floors, get_room_types, is_data_loaded, set_inventory, set_room_types, add_audit_entry,
)
from engine.inventory import get_floor_summary, get_room_type_summary, total_rooms
from engine.layout_ops import add_room_type, remove_room_type
from components.charts import floor_room_type_heatmap, room_type_share_donut, stock_by_room_type_bar
from components.metrics_cards import render_metric_row
from components.tables import render_stock_table


def render(sidebar_state):
    """Render the Room Types tab."""
    st.header("Room Types")

    if not is_data_loaded():
        st.info("No layout loaded. Load the default layout or upload settings in the Admin tab.")
        return

    room_types = get_room_types()
    summary = get_room_type_summary(room_types)

    render_metric_row([
        {"label": "Total Rooms", "value": f"{total_rooms(room_types):,}"},
        {"label": "Room Types", "value": len(room_types)},
        {"label": "Floors", "value": len(get_floors())},
        {"label": "Empty Types", "value": sum(1 for s in summary if s["stock"] == 0)},
    ])

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(stock_by_room_type_bar(summary), use_container_width=True)
    with col2:
        st.plotly_chart(room_type_share_donut(summary), use_container_width=True)

    if get_floors():
        fig = floor_room_type_heatmap(get_floor_summary(get_floors()), [rt.key for rt in room_types])
        st.plotly_chart(fig, use_container_width=True)

    st.divider()
    st.subheader("Inventory Summary")
    rows = [{
        "Room Type": s["room_info"],
        "Name (ENG)": s["name_eng"],
        "Name (KOR)": s["name_kor"],
        "Price": f"{s['price']:,.0f}",
        "Stock": s["stock"],
        "Share": f"{s['share_pct']:.0%}",
        "Floors": ", ".join(f"{f}F" for f in s["floors"]) or "—",
        "Room Numbers": ", ".join(s["room_numbers"]) or "—",
    } for s in summary]
    if rows:
        render_stock_table(pd.DataFrame(rows))

    if sidebar_state.mode != "Edit":
        return

    st.divider()
    st.subheader("Manage Room Types")
    col1, col2 = st.columns(2)
    with col1:
        with st.form("add_room_type"):
            name = st.text_input("Room type key (e.g. deluxe)")
            name_eng = st.text_input("Name (ENG)")
            name_kor = st.text_input("Name (KOR)")
            price = st.number_input("Default price", min_value=0.0, value=80000.0, step=1000.0)
            if st.form_submit_button("Add room type"):
                updated = add_room_type(room_types, name, price, name_kor=name_kor, name_eng=name_eng)
                if updated is room_types:
                    st.warning(f"'{name}' is blank or already defined.")
                else:
                    set_room_types(updated)
                    add_audit_entry("add_room_type", "room_type", "", name.strip())
                    st.rerun()
    with col2:
        names = [rt.room_info for rt in room_types]
        if names:
            target = st.selectbox("Room type to remove", names, key="remove_room_type")
            st.caption("Rooms of this type stay on their floors as unassigned.")
            if st.button("Remove room type"):
                floors, updated = remove_room_type(get_floors(), room_types, target)
                set_inventory(floors, updated)
                add_audit_entry("remove_room_type", "room_type", target, "")
                st.rerun()

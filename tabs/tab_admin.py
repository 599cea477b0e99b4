"""Tab 3: Admin: load/upload/export settings, save validation, health check, audit trail."""

import streamlit as st
import pandas as pd

from data.loader import (
    build_settings_payload, dump_settings_json, load_file, load_settings_json,
    parse_room_type_sheet,
)
from data.validator import check_inventory_invariants, validate_for_save, validate_room_type_sheet
from data.sample_data import generate_room_types_df
from data.session_store import (
    get_audit_log, get_floors, get_hotel_profile, get_room_types, is_data_loaded,
    reset_inventory, set_hotel_profile, set_inventory, set_undo_buffer, add_audit_entry,
)
from engine.errors import InventoryError
from engine.inventory import derive_floor_plan, total_rooms
from engine.layout_ops import FloorUndoBuffer, build_default_layout, generate_initial_layout
from engine.numbering import floor_of_room_number
from engine.synchronizer import all_containers, rebuild_room_types_from_containers, resync_room_types
from components.metrics_cards import render_validation_messages
from config.defaults import DEFAULT_FLOORS, DEFAULT_ROOM_TYPES


def _store_loaded(floors, room_types, action, source):
    set_inventory(floors, room_types)
    set_undo_buffer(FloorUndoBuffer())
    add_audit_entry(action, "all_data", "", source, rationale=f"{action} from {source}")
    st.success(f"Loaded {len(floors)} floors and {len(room_types)} room types "
               f"({total_rooms(room_types)} rooms).")


def _render_load_section():
    st.subheader("Load Layout")
    col1, col2 = st.columns(2)

    with col1:
        st.markdown("**Default template**")
        floors_text = st.text_input("Floors", value=", ".join(str(f) for f in DEFAULT_FLOORS))
        if st.button("Load default layout"):
            try:
                floor_numbers = [int(x) for x in floors_text.split(",") if x.strip()]
            except ValueError:
                st.error("Floors must be a comma-separated list of numbers.")
            else:
                floors, room_types = build_default_layout(DEFAULT_ROOM_TYPES, floor_numbers)
                _store_loaded(floors, room_types, "load_default", "template")

    with col2:
        st.markdown("**Room-type sheet (CSV / XLSX)**")
        uploaded = st.file_uploader("Room types", type=["csv", "xlsx"], key="room_type_upload")
        st.download_button(
            "Download sample sheet",
            generate_room_types_df().to_csv(index=False).encode("utf-8"),
            file_name="room_types.csv",
            mime="text/csv",
        )
        if uploaded is not None and st.button("Build layout from sheet"):
            try:
                df = load_file(uploaded)
            except ValueError as e:
                st.error(str(e))
                return
            result = validate_room_type_sheet(df)
            render_validation_messages(result)
            if result.is_valid:
                room_types = parse_room_type_sheet(df)
                floor_numbers = sorted({
                    f for rt in room_types for f in map(floor_of_room_number, rt.room_numbers) if f is not None
                })
                floors, room_types = generate_initial_layout(floor_numbers, room_types)
                _store_loaded(floors, room_types, "upload", uploaded.name)

    st.markdown("**Saved settings (JSON)**")
    settings_file = st.file_uploader("Hotel settings", type=["json"], key="settings_upload")
    if settings_file is not None and st.button("Import settings"):
        try:
            room_types, floors = load_settings_json(settings_file.getvalue())
        except InventoryError as e:
            st.error(e.message)
        else:
            room_types = rebuild_room_types_from_containers(room_types, all_containers(floors))
            _store_loaded(floors, room_types, "upload", settings_file.name)


def _render_save_section():
    st.subheader("Save Settings")
    profile = dict(get_hotel_profile())
    col1, col2 = st.columns(2)
    profile["hotel_id"] = col1.text_input("Hotel ID", value=profile.get("hotel_id", ""))
    profile["hotel_name"] = col2.text_input("Hotel name", value=profile.get("hotel_name", ""))
    profile["hotel_address"] = col1.text_input("Address", value=profile.get("hotel_address", ""))
    profile["email"] = col2.text_input("Email", value=profile.get("email", ""))
    profile["phone_number"] = col1.text_input("Phone", value=profile.get("phone_number", ""))
    set_hotel_profile(profile)

    if not st.button("Validate & prepare save"):
        return

    result = validate_for_save(get_room_types())
    if not profile["hotel_id"]:
        result.add_error("Hotel ID is required.")
    render_validation_messages(result)
    if not result.is_valid:
        return

    room_types = derive_floor_plan(get_room_types())
    payload = build_settings_payload(
        profile["hotel_id"], room_types, get_floors(),
        hotel_name=profile["hotel_name"],
        hotel_address=profile["hotel_address"],
        email=profile["email"],
        phone_number=profile["phone_number"],
    )
    set_inventory(get_floors(), room_types)
    add_audit_entry("save", "all_data", "", profile["hotel_id"], rationale="Settings prepared for save")
    st.success(f"Settings ready: {payload['totalRooms']} rooms.")
    st.download_button(
        "Download settings JSON",
        dump_settings_json(payload).encode("utf-8"),
        file_name=f"{profile['hotel_id']}_settings.json",
        mime="application/json",
    )


def _render_health_check():
    st.subheader("Inventory Health Check")
    result = check_inventory_invariants(get_room_types(), get_floors())
    render_validation_messages(result, success_message="Floors and room types are consistent.")
    if not result.is_valid and st.button("Resynchronize room types from floors"):
        room_types = resync_room_types(get_room_types(), all_containers(get_floors()))
        set_inventory(get_floors(), room_types)
        add_audit_entry("resync", "room_numbers", "", "rebuilt")
        st.rerun()


def _render_audit_log():
    st.subheader("Audit Log")
    log = get_audit_log()
    if not log:
        st.caption("No changes recorded yet.")
        return
    st.dataframe(pd.DataFrame([{
        "Time": e.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
        "Action": e.action,
        "Floor": e.floor_num if e.floor_num is not None else "",
        "Room": e.room_number or "",
        "Field": e.field_changed,
        "Old": e.old_value,
        "New": e.new_value,
        "Note": e.rationale,
    } for e in reversed(log)]), use_container_width=True, height=300)


def render(sidebar_state):
    """Render the Admin tab."""
    st.header("Admin")

    _render_load_section()
    st.divider()

    if not is_data_loaded():
        return

    _render_save_section()
    st.divider()
    _render_health_check()
    st.divider()
    _render_audit_log()

    st.divider()
    if st.button("Clear layout", type="secondary"):
        reset_inventory()
        add_audit_entry("reset", "all_data", "", "", rationale="Layout cleared")
        st.rerun()

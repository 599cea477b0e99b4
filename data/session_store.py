"""Typed wrapper around st.session_state for the editor's inventory state."""

import streamlit as st
from typing import List, Optional
from datetime import datetime
from models.room_type import RoomType
from models.floor import Floor
from models.audit import AuditEntry
from engine.layout_ops import FloorUndoBuffer
from engine.inventory import total_rooms
from config.defaults import DEFAULT_FLOORS, DEFAULT_MODE


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "room_types": [],
        "floors": [],
        "undo_buffer": FloorUndoBuffer(),
        "audit_log": [],
        "data_loaded": False,
        "hotel_profile": {
            "hotel_id": "",
            "hotel_name": "",
            "hotel_address": "",
            "email": "",
            "phone_number": "",
        },
        "sidebar_state": {
            "mode": DEFAULT_MODE,
            "floor_filter": None,
        },
        "default_floors": list(DEFAULT_FLOORS),
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_room_types() -> List[RoomType]:
    return st.session_state.get("room_types", [])


def get_floors() -> List[Floor]:
    return st.session_state.get("floors", [])


def get_undo_buffer() -> FloorUndoBuffer:
    return st.session_state.get("undo_buffer") or FloorUndoBuffer()


def get_total_rooms() -> int:
    return total_rooms(get_room_types())


def get_audit_log() -> List[AuditEntry]:
    return st.session_state.get("audit_log", [])


def get_hotel_profile() -> dict:
    return st.session_state.get("hotel_profile", {})


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_inventory(floors: List[Floor], room_types: List[RoomType]):
    """Replace both collections at once; edits are applied one at a time."""
    st.session_state["floors"] = floors
    st.session_state["room_types"] = room_types
    st.session_state["data_loaded"] = True


def set_floors(floors: List[Floor]):
    st.session_state["floors"] = floors


def set_room_types(room_types: List[RoomType]):
    st.session_state["room_types"] = room_types


def set_undo_buffer(buffer: FloorUndoBuffer):
    st.session_state["undo_buffer"] = buffer


def set_hotel_profile(profile: dict):
    st.session_state["hotel_profile"] = profile


def reset_inventory():
    st.session_state["floors"] = []
    st.session_state["room_types"] = []
    st.session_state["undo_buffer"] = FloorUndoBuffer()
    st.session_state["data_loaded"] = False


# --- Audit ---

def add_audit_entry(
    action: str,
    field_changed: str,
    old_value: str,
    new_value: str,
    floor_num: Optional[int] = None,
    room_number: Optional[str] = None,
    rationale: str = "",
):
    entry = AuditEntry(
        timestamp=datetime.now(),
        action=action,
        floor_num=floor_num,
        room_number=room_number,
        field_changed=field_changed,
        old_value=old_value,
        new_value=new_value,
        rationale=rationale,
    )
    st.session_state["audit_log"].append(entry)

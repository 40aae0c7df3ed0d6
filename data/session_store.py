"""Typed wrapper around st.session_state for the estimator session."""

import streamlit as st
from typing import List, Optional
from models.project import ProjectResult
from config.defaults import DEFAULT_UNIT_SYSTEM, DEFAULT_MATERIAL, DEFAULT_PATTERN


def new_room_entry(room_id: int) -> dict:
    """Blank room form row."""
    return {
        "room_id": room_id,
        "name": "",
        "length": "",
        "width": "",
        "material": DEFAULT_MATERIAL,
        "pattern": DEFAULT_PATTERN,
        "cost_per_unit": "",
        "package_coverage": "",
    }


def initialize_session_state():
    """Initialize all session state keys with defaults, starting with one room."""
    defaults = {
        "room_counter": 0,
        "rooms": [],
        "unit_system": DEFAULT_UNIT_SYSTEM,
        "last_result": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default
    if not st.session_state["rooms"] and st.session_state["room_counter"] == 0:
        add_room()


# --- Getters ---

def get_rooms() -> List[dict]:
    return st.session_state.get("rooms", [])


def get_unit_system() -> str:
    return st.session_state.get("unit_system", DEFAULT_UNIT_SYSTEM)


def get_last_result() -> Optional[ProjectResult]:
    return st.session_state.get("last_result")


def has_result() -> bool:
    return st.session_state.get("last_result") is not None


# --- Setters ---

def set_unit_system(unit_system: str):
    st.session_state["unit_system"] = unit_system


def set_last_result(result: Optional[ProjectResult]):
    """Replace the stored result. Results are never merged."""
    st.session_state["last_result"] = result


def update_room(room_id: int, **fields):
    for room in st.session_state["rooms"]:
        if room["room_id"] == room_id:
            room.update(fields)
            return


def set_rooms(entries: List[dict]):
    """Replace all room rows (e.g. after an import), renumbering from 1."""
    _clear_room_widgets()
    st.session_state["rooms"] = []
    st.session_state["room_counter"] = 0
    for entry in entries:
        room = add_room()
        room.update({k: v for k, v in entry.items() if k != "room_id"})
    set_last_result(None)


# --- Room Management ---

def add_room() -> dict:
    st.session_state["room_counter"] += 1
    room = new_room_entry(st.session_state["room_counter"])
    st.session_state["rooms"].append(room)
    return room


def remove_room(room_id: int):
    st.session_state["rooms"] = [r for r in st.session_state["rooms"] if r["room_id"] != room_id]


def reset_project():
    """Clear all rooms and results and start over with one fresh room."""
    _clear_room_widgets()
    st.session_state["rooms"] = []
    st.session_state["room_counter"] = 0
    set_last_result(None)
    add_room()


def room_widget_key(room_id: int, field_name: str) -> str:
    return f"room-{room_id}-{field_name}"


def _clear_room_widgets():
    for key in [k for k in st.session_state.keys() if str(k).startswith("room-")]:
        del st.session_state[key]

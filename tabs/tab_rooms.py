"""Tab 1: Rooms: enter room dimensions, flooring type and pattern, then calculate."""

import logging
import streamlit as st

from data.session_store import (
    get_rooms, update_room, add_room, remove_room, reset_project,
    set_last_result, room_widget_key,
)
from data.validator import validate_room_entries
from engine.estimator import compute_project, InvalidDimensions
from config.defaults import MATERIALS, PATTERNS, DEFAULT_MATERIAL, DEFAULT_PATTERN

logger = logging.getLogger(__name__)


def _option_index(options: dict, value: str, default: str) -> int:
    keys = list(options.keys())
    value = str(value or "").strip().lower()
    return keys.index(value) if value in keys else keys.index(default)


def _render_room_form(room: dict, labels: dict, can_remove: bool):
    room_id = room["room_id"]
    length_unit = labels["length_long"]
    area_unit = labels["area"]

    with st.container(border=True):
        header, action = st.columns([5, 1])
        with header:
            st.subheader(f"Room {room_id}")
        with action:
            if can_remove and st.button("Remove", key=room_widget_key(room_id, "remove")):
                remove_room(room_id)
                st.rerun()

        name = st.text_input(
            "Room Name (optional)",
            value=str(room["name"]),
            placeholder="e.g., Living Room, Kitchen",
            key=room_widget_key(room_id, "name"),
        )

        col1, col2 = st.columns(2)
        with col1:
            length = st.text_input(
                f"Length ({length_unit})", value=str(room["length"]),
                placeholder="12.5", key=room_widget_key(room_id, "length"),
            )
        with col2:
            width = st.text_input(
                f"Width ({length_unit})", value=str(room["width"]),
                placeholder="10.0", key=room_widget_key(room_id, "width"),
            )

        col1, col2 = st.columns(2)
        with col1:
            material = st.selectbox(
                "Flooring Type",
                options=list(MATERIALS.keys()),
                format_func=lambda x: MATERIALS[x],
                index=_option_index(MATERIALS, room["material"], DEFAULT_MATERIAL),
                key=room_widget_key(room_id, "material"),
            )
        with col2:
            pattern = st.selectbox(
                "Installation Pattern",
                options=list(PATTERNS.keys()),
                format_func=lambda x: PATTERNS[x],
                index=_option_index(PATTERNS, room["pattern"], DEFAULT_PATTERN),
                key=room_widget_key(room_id, "pattern"),
            )

        col1, col2 = st.columns(2)
        with col1:
            cost = st.text_input(
                f"Material Cost per {area_unit} ($)", value=str(room["cost_per_unit"]),
                placeholder="3.50", key=room_widget_key(room_id, "cost_per_unit"),
            )
        with col2:
            coverage = st.text_input(
                f"Box/Package Coverage ({area_unit})", value=str(room["package_coverage"]),
                placeholder="23.91", key=room_widget_key(room_id, "package_coverage"),
            )

    update_room(
        room_id, name=name, length=length, width=width, material=material,
        pattern=pattern, cost_per_unit=cost, package_coverage=coverage,
    )


def _calculate():
    """Validate every room and replace the stored estimate. Any bad room blocks the whole batch."""
    entries = [
        {**room, "name": str(room["name"]).strip() or f"Room {room['room_id']}"}
        for room in get_rooms()
    ]

    rooms, result = validate_room_entries(entries)
    if not result.is_valid:
        set_last_result(None)
        for e in result.errors:
            st.error(e)
        return

    for w in result.warnings:
        st.warning(w)

    try:
        project = compute_project(rooms)
    except InvalidDimensions as e:
        set_last_result(None)
        st.error(str(e))
        return

    set_last_result(project)
    st.success(f"Estimate ready for {len(project.rooms)} room{'s' if len(project.rooms) != 1 else ''}. "
               "Open the Results tab.")


def render(sidebar_state):
    """Render the Rooms tab."""
    st.header("Rooms")
    st.caption("Enter each room's dimensions and flooring choice. Cost and package coverage are optional.")

    rooms = get_rooms()
    for i, room in enumerate(rooms):
        # The first room stays so there is always one to fill in
        _render_room_form(room, sidebar_state.labels, can_remove=i > 0)

    col_add, col_calc, col_reset = st.columns(3)
    with col_add:
        if st.button("+ Add Room", key="btn_add_room"):
            add_room()
            st.rerun()
    with col_calc:
        calculate = st.button("Calculate Materials", type="primary", key="btn_calculate")
    with col_reset:
        if st.button("New Project", key="btn_reset"):
            st.session_state["confirm_reset"] = True

    if st.session_state.get("confirm_reset"):
        st.warning("This will clear all rooms and start a new project. Continue?")
        yes, no = st.columns(2)
        if yes.button("Yes, clear everything", key="btn_reset_yes"):
            st.session_state["confirm_reset"] = False
            reset_project()
            logger.info("Project reset")
            st.rerun()
        if no.button("Cancel", key="btn_reset_no"):
            st.session_state["confirm_reset"] = False
            st.rerun()

    if calculate:
        _calculate()

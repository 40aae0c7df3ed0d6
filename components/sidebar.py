"""Global sidebar controls for unit system selection and project actions."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import get_unit_system, set_unit_system, get_rooms, has_result
from config.defaults import UNIT_SYSTEMS


@dataclass
class SidebarState:
    unit_system: str

    @property
    def labels(self) -> dict:
        return UNIT_SYSTEMS[self.unit_system]


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Flooring Estimator")
        st.divider()

        # Imperial / metric toggle (labels only)
        unit_ids = list(UNIT_SYSTEMS.keys())
        current = get_unit_system()
        selected = st.radio(
            "Units",
            options=unit_ids,
            format_func=lambda x: UNIT_SYSTEMS[x]["name"],
            index=unit_ids.index(current) if current in unit_ids else 0,
            horizontal=True,
            key="sidebar_unit_system",
        )
        if selected != current:
            set_unit_system(selected)

        st.divider()

        rooms = get_rooms()
        st.caption(f"Rooms: {len(rooms)}")
        if has_result():
            st.success("Estimate ready. See the Results tab.")
        else:
            st.info("No estimate yet. Fill in rooms and calculate.")

    return SidebarState(unit_system=selected)

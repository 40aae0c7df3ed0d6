"""Tab 2: Results: per-room breakdown, project totals, auxiliary materials, share and print."""

import streamlit as st

from data.session_store import get_last_result
from data.loader import results_to_df
from components.metrics_cards import render_totals_row
from components.tables import render_results_table
from components.charts import area_by_room_bar, cost_donut
from engine.formatter import (
    format_area, format_currency, format_waste_pct, format_dimensions, format_room_type,
    explain_room, auxiliary_items, build_share_text, build_summary_text,
)
from config.defaults import PRO_TIPS, DISCLAIMER, AUXILIARY_NOTE


def _render_room_card(room, unit_system: str):
    def area(value):
        return format_area(value, unit_system, room.rounding)

    with st.container(border=True):
        st.subheader(room.name)
        rows = [
            ("Dimensions", format_dimensions(room.length, room.width, unit_system)),
            ("Floor Area", area(room.area)),
            ("Flooring Type", format_room_type(room)),
            ("Waste Factor", format_waste_pct(room.waste_factor)),
            ("Material Needed (with waste)", f"**{area(room.area_with_waste)}**"),
        ]
        if room.packages_needed > 0:
            rows.append((
                "Boxes/Packages Needed",
                f"**{room.packages_needed} boxes** ({area(room.actual_coverage)} total)",
            ))
        if room.cost > 0:
            rows.append(("Estimated Material Cost", f"**{format_currency(room.cost, room.rounding)}**"))

        for label, value in rows:
            left, right = st.columns([2, 3])
            left.markdown(f"{label}:")
            right.markdown(value)

        with st.expander("How this was calculated"):
            for step in explain_room(room, unit_system):
                st.write(step)


def render(sidebar_state):
    """Render the Results tab."""
    st.header("Results")

    result = get_last_result()
    if result is None:
        st.info("No estimate yet. Fill in your rooms and press Calculate Materials.")
        return

    unit_system = sidebar_state.unit_system

    # --- Room cards ---
    cols = st.columns(2)
    for i, room in enumerate(result.rooms):
        with cols[i % 2]:
            _render_room_card(room, unit_system)

    st.divider()

    # --- Project totals ---
    st.subheader("Project Totals")
    render_totals_row(result.totals, unit_system)

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(area_by_room_bar(result, unit_system), use_container_width=True)
    with col2:
        if result.totals.cost > 0:
            st.plotly_chart(cost_donut(result), use_container_width=True)

    render_results_table(results_to_df(result, unit_system))

    # --- Auxiliary materials ---
    if not result.auxiliary.is_empty:
        st.subheader("Additional Materials Needed")
        for label, quantity in auxiliary_items(result, unit_system):
            left, right = st.columns([2, 3])
            left.markdown(f"{label}:")
            right.markdown(quantity)
        st.caption(f"Note: {AUXILIARY_NOTE}")

    st.divider()

    # --- Tips & disclaimer ---
    st.info("**Pro Tips:**\n\n" + "\n".join(f"- {tip}" for tip in PRO_TIPS))
    st.warning(f"**Disclaimer:** {DISCLAIMER}")

    # --- Share / print ---
    col_share, col_print = st.columns(2)
    with col_share:
        with st.expander("Share Results"):
            st.caption("Copy the estimate below.")
            st.code(build_share_text(result, unit_system), language=None)
    with col_print:
        st.download_button(
            "Download Printable Summary",
            data=build_summary_text(result, unit_system),
            file_name="flooring_estimate.txt",
            mime="text/plain",
            key="btn_download_summary",
        )

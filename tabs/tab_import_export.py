"""Tab 3: Import & Export: load rooms from a file or sample data, download results."""

import streamlit as st
import pandas as pd

from data.loader import load_file, parse_room_entries, results_to_csv
from data.validator import validate_rooms_df, validate_room_entries
from data.sample_data import generate_rooms_df
from data.session_store import set_rooms, get_last_result


def _load_and_validate(df: pd.DataFrame) -> bool:
    """Validate a rooms sheet and replace the room list with its rows."""
    sheet_result = validate_rooms_df(df)
    if not sheet_result.is_valid:
        for e in sheet_result.errors:
            st.error(e)
        return False

    entries = parse_room_entries(df)
    _, rows_result = validate_room_entries(entries)
    for w in sheet_result.warnings + rows_result.warnings:
        st.warning(w)
    if not rows_result.is_valid:
        # Rows still load so they can be fixed in the Rooms tab
        for e in rows_result.errors:
            st.warning(e)

    set_rooms(entries)
    st.success(f"Loaded {len(entries)} room{'s' if len(entries) != 1 else ''}. "
               "Review them in the Rooms tab and press Calculate Materials.")
    return True


def render(sidebar_state):
    """Render the Import & Export tab."""
    st.header("Import & Export")

    # --- Import ---
    st.subheader("Import Rooms")
    st.caption(
        "Upload a `.csv` or `.xlsx` file with columns **Length**, **Width**, "
        "**Flooring Type**, **Pattern** and optionally **Room Name**, "
        "**Cost per Unit**, **Package Coverage**. This replaces the current room list."
    )
    rooms_file = st.file_uploader("Room list", type=["csv", "xlsx"], key="upload_rooms")

    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload_rooms"):
            if rooms_file:
                try:
                    _load_and_validate(load_file(rooms_file))
                except ValueError as e:
                    st.error(f"Error loading file: {e}")
            else:
                st.warning("Please upload a room file.")
    with col_sample:
        if st.button("Load Sample Rooms", key="btn_sample_rooms"):
            _load_and_validate(generate_rooms_df())

    st.download_button(
        "Download Room Template",
        data=generate_rooms_df().to_csv(index=False).encode("utf-8"),
        file_name="rooms_template.csv",
        mime="text/csv",
        key="btn_download_template",
    )

    st.divider()

    # --- Export ---
    st.subheader("Export Results")
    result = get_last_result()
    if result is None:
        st.info("No estimate to export yet.")
        return

    st.download_button(
        "Download Results (CSV)",
        data=results_to_csv(result, sidebar_state.unit_system),
        file_name="flooring_estimate.csv",
        mime="text/csv",
        key="btn_download_results",
    )

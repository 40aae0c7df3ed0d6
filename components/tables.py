"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd


def render_results_table(df: pd.DataFrame, waste_column: str = "Waste Factor"):
    """Room results table with waste factor shown as a percentage and high waste highlighted."""
    def color_waste(val):
        try:
            v = float(val)
            if v >= 0.20:
                return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
            elif v >= 0.13:
                return "background-color: #fff3cd; color: #856404"
        except (ValueError, TypeError):
            pass
        return ""

    if waste_column in df.columns:
        styled = df.style.map(color_waste, subset=[waste_column]).format(
            {waste_column: "{:.0%}"}
        )
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)

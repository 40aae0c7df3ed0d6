"""Reusable metric card widgets for estimate totals."""

import streamlit as st

from models.project import ProjectTotals
from engine.formatter import format_area, format_currency


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally help.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"], help=m.get("help"))


def render_totals_row(totals: ProjectTotals, unit_system: str):
    """Project totals; boxes and cost cards only appear when non-zero."""
    metrics = [
        {"label": "Total Floor Area", "value": format_area(totals.area, unit_system)},
        {"label": "Total Material with Waste", "value": format_area(totals.area_with_waste, unit_system)},
    ]
    if totals.packages_needed > 0:
        metrics.append({"label": "Total Boxes Needed", "value": f"{totals.packages_needed} boxes"})
    if totals.cost > 0:
        metrics.append({"label": "Total Material Cost", "value": format_currency(totals.cost)})
    render_metric_row(metrics)

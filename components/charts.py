"""Plotly chart builders for the Flooring Material Estimator."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd

from models.project import ProjectResult
from engine.formatter import unit_labels, format_currency


def area_by_room_bar(result: ProjectResult, unit_system: str) -> go.Figure:
    """Grouped bar comparing measured area and area with waste per room."""
    area_label = unit_labels(unit_system)["area"]
    df = pd.DataFrame([
        {"room": r.name, "Floor Area": r.area, "With Waste": r.area_with_waste}
        for r in result.rooms
    ])
    fig = px.bar(
        df, x="room", y=["Floor Area", "With Waste"],
        barmode="group",
        labels={"value": area_label, "room": "Room", "variable": ""},
        title="Material by Room",
        color_discrete_map={"Floor Area": "#4A90D9", "With Waste": "#489C49"},
    )
    fig.update_layout(legend_title_text="", height=400)
    fig.update_traces(hovertemplate="%{x}<br>%{y:.2f} " + area_label + "<extra></extra>")
    return fig


def cost_donut(result: ProjectResult, title: str = "Cost by Room") -> go.Figure:
    """Donut chart of material cost share per room (rooms without cost are left out)."""
    rooms = [r for r in result.rooms if r.cost > 0]
    total = sum(r.cost for r in rooms)
    fig = go.Figure(data=[go.Pie(
        labels=[r.name for r in rooms],
        values=[r.cost for r in rooms],
        hole=0.6,
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=format_currency(total), x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig

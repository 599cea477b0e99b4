"""Plotly chart builders for the Hotel Room Inventory Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List


def stock_by_room_type_bar(
    summary: List[dict],
    title: str = "Stock by Room Type",
) -> go.Figure:
    """Bar chart of room count per room type."""
    df = pd.DataFrame(summary, columns=["room_info", "stock"])
    fig = px.bar(
        df, x="room_info", y="stock",
        labels={"stock": "Rooms", "room_info": "Room Type"},
        title=title,
        color_discrete_sequence=["#4A90D9"],
    )
    fig.update_layout(height=400)
    fig.update_traces(texttemplate="%{y}", textposition="outside")
    return fig


def room_type_share_donut(summary: List[dict], title: str = "Room Type Mix") -> go.Figure:
    """Donut chart of each type's share of total rooms."""
    labels = [s["room_info"] for s in summary if s["stock"] > 0]
    values = [s["stock"] for s in summary if s["stock"] > 0]
    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=values,
        hole=0.6,
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{sum(values)} rooms", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def floor_room_type_heatmap(
    floor_summary: List[dict],
    room_type_names: List[str],
) -> go.Figure:
    """Heatmap: rows = floors, columns = room types, values = active rooms."""
    floors = sorted((f["floor_num"] for f in floor_summary), reverse=True)
    by_floor = {f["floor_num"]: f["room_types"] for f in floor_summary}
    z = [[by_floor[fn].get(name.lower(), 0) for name in room_type_names] for fn in floors]

    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=room_type_names,
        y=[f"{fn}F" for fn in floors],
        colorscale="Blues",
        text=z,
        texttemplate="%{text}",
        hovertemplate="Floor: %{y}<br>Type: %{x}<br>Rooms: %{z}<extra></extra>",
    ))
    fig.update_layout(
        title="Room Types by Floor",
        height=max(300, len(floors) * 40),
        xaxis_title="Room Type",
        yaxis_title="Floor",
        yaxis_type="category",
    )
    return fig

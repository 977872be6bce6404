"""Visualization utilities for Earnings Analyser."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from itertools import cycle
from typing import TypedDict

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

CHART_TITLE = "Total Earnings per Esports Title"
CHART_FILENAME = "esports_chart"
IMAGE_FORMATS = ("png", "jpeg")

PASTEL_PALETTE = (
    "rgba(255, 179, 186, 0.6)",
    "rgba(255, 223, 186, 0.6)",
    "rgba(255, 255, 186, 0.6)",
    "rgba(186, 255, 201, 0.6)",
    "rgba(186, 225, 255, 0.6)",
    "rgba(201, 186, 255, 0.6)",
    "rgba(255, 186, 229, 0.6)",
    "rgba(255, 210, 186, 0.6)",
    "rgba(210, 255, 186, 0.6)",
    "rgba(186, 255, 255, 0.6)",
)


class LegendEntry(TypedDict):
    name: str
    color: str
    label: str


def _empty_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        showarrow=False,
        x=0.5,
        y=0.5,
        xref="paper",
        yref="paper",
        font=dict(size=14, color="#6c757d"),
    )
    fig.update_layout(margin=dict(l=0, r=0, t=20, b=20))
    return fig


def slice_colors(count: int) -> list[str]:
    """Cycle through the palette so any number of slices gets a colour."""

    colors = cycle(PASTEL_PALETTE)
    return [next(colors) for _ in range(count)]


def legend_entries(summary: Iterable[Mapping[str, object]]) -> list[LegendEntry]:
    """Pair each summary row with its slice colour and a ``name - $x (y%)`` label."""

    rows = list(summary)
    return [
        {
            "name": str(row["name"]),
            "color": color,
            "label": f"{row['name']} - {row['amount_text']} ({row['percent']}%)",
        }
        for row, color in zip(rows, slice_colors(len(rows)))
    ]


def plot_category_donut(summary: Iterable[Mapping[str, object]], *, title: str = CHART_TITLE) -> go.Figure:
    """Return a donut chart of the filtered view, slices in view order."""

    data = list(summary)
    if not data:
        return _empty_figure("No valid data found.")

    df = pd.DataFrame(data)
    fig = px.pie(
        df,
        names="name",
        values="amount",
        hole=0.2,
        title=title,
        color_discrete_sequence=slice_colors(len(df)),
        custom_data=["amount_text"],
    )
    fig.update_traces(
        sort=False,
        direction="clockwise",
        marker=dict(line=dict(color="#fff", width=2)),
        hovertemplate="%{label}: %{customdata[0]}<extra></extra>",
    )
    fig.update_layout(
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h", yanchor="top", y=-0.05, xanchor="center", x=0.5, font=dict(size=14)),
        title_font=dict(size=18),
    )
    return fig


def image_export_config(image_format: str = "png") -> dict[str, object]:
    """Plotly chart config whose toolbar camera button saves ``png`` or ``jpeg``."""

    if image_format not in IMAGE_FORMATS:
        raise ValueError(f"Unsupported image format: {image_format!r}")
    return {"toImageButtonOptions": {"format": image_format, "filename": CHART_FILENAME}}

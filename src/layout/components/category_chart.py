"""
src/layout/components/category_chart.py
────────────────────────────────────────
Articles-per-category bar chart (Plotly).
"""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
from dash import dcc

from config.categories import CATEGORY_CONFIG

CARD_BG = "#161b22"
GRID_CLR = "#30363d"
MUTED = "#8b949e"


def category_chart(counts: pd.DataFrame, height: int = 260) -> dcc.Graph:
    """
    Args:
        counts: Output of `category_counts()` (columns: category, count)
        height: Figure height in px
    """
    labels = [
        CATEGORY_CONFIG[c].label if c in CATEGORY_CONFIG else c.capitalize()
        for c in counts["category"]
    ]
    colors = [
        CATEGORY_CONFIG[c].color if c in CATEGORY_CONFIG else MUTED
        for c in counts["category"]
    ]

    fig = go.Figure(go.Bar(
        x=labels,
        y=counts["count"],
        marker={"color": colors},
        text=counts["count"],
        textposition="outside",
    ))
    fig.update_layout(
        template="plotly_dark",
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin=dict(l=20, r=20, t=20, b=30),
        height=height,
        font=dict(color="#c9d1d9", size=11),
        yaxis=dict(gridcolor=GRID_CLR, rangemode="tozero"),
        xaxis=dict(showgrid=False),
    )

    return dcc.Graph(
        figure=fig,
        config={"displayModeBar": False},
        style={"height": f"{height}px"},
    )

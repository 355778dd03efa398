"""
src/pages/admin.py
───────────────────
Admin overview: article totals per category and backend status.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
import pandas as pd
from dash import html

from config.categories import CATEGORY_CONFIG
from src.layout.components.category_chart import category_chart
from src.layout.components.kpi_card import kpi_card
from src.pages.common import error_banner, page_header

OK = "#2ea44f"
ERROR = "#da3633"


def layout(
    counts: pd.DataFrame,
    total: int,
    error: str | None = None,
    backend_status: str = "unknown",
) -> html.Div:
    by_category = dict(zip(counts["category"], counts["count"], strict=True))

    cards = [dbc.Col(kpi_card("Total Articles", str(total), "#c9d1d9"), xs=6, md=3)]
    cards += [
        dbc.Col(
            kpi_card(cat.label, str(int(by_category.get(slug, 0))), cat.color, href=cat.path),
            xs=6, md=3,
        )
        for slug, cat in CATEGORY_CONFIG.items()
    ]
    status_color = OK if backend_status == "ok" else ERROR
    cards.append(dbc.Col(kpi_card("Backend", backend_status, status_color), xs=6, md=3))

    children = [page_header("Admin Overview", "Quick overview of content and shortcuts.")]
    if error:
        children.append(error_banner(f"{error} Showing whatever is available."))
    children += [
        dbc.Row(cards, className="g-3 mb-4"),
        html.Div(
            [
                html.Div("Articles per category", className="chart-title"),
                category_chart(counts),
            ],
            className="chart-card",
        ),
    ]
    return html.Div(children, style={"padding": "1.5rem"})

"""
src/pages/home.py
──────────────────
Front page: newest articles across every category.
"""
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from config.categories import CATEGORY_CONFIG
from src.data.models import Article
from src.layout.components.article_card import article_card
from src.pages.common import empty_state, error_banner, page_header

CARD_BG = "#161b22"
BORDER = "#30363d"


def _category_tiles() -> dbc.Row:
    return dbc.Row(
        [
            dbc.Col(
                dcc.Link(
                    html.Div(
                        [
                            html.Div(cat.label, style={"fontWeight": "700", "color": cat.color}),
                            html.Div(cat.subtitle, style={"fontSize": ".75rem", "color": "#8b949e"}),
                        ],
                        style={"backgroundColor": CARD_BG, "border": f"1px solid {BORDER}", "borderRadius": "8px", "padding": "14px"},
                    ),
                    href=cat.path,
                    style={"textDecoration": "none"},
                ),
                xs=12, md=4,
            )
            for cat in CATEGORY_CONFIG.values()
        ],
        className="g-3 mb-4",
    )


def layout(articles: list[Article], error: str | None = None) -> html.Div:
    body: list = []
    if error:
        body.append(error_banner(error))
    if articles:
        body.extend(article_card(a, i + 1) for i, a in enumerate(articles))
    elif not error:
        body.append(empty_state("No articles published yet."))

    return html.Div(
        [
            page_header("Latest Articles", "Stay informed with the latest stories from our editors."),
            _category_tiles(),
            html.Div(body, style={"display": "flex", "flexDirection": "column", "gap": "10px"}),
        ],
        style={"padding": "1.5rem", "maxWidth": "1100px", "margin": "0 auto"},
    )

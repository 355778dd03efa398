"""
src/pages/category.py
──────────────────────
Category listing page (Health, Technology, Sport).
"""
from __future__ import annotations

from dash import html

from config.categories import CategoryInfo
from src.data.models import Article
from src.layout.components.article_card import article_card
from src.pages.common import empty_state, error_banner, page_header


def layout(category: CategoryInfo, articles: list[Article], error: str | None = None) -> html.Div:
    body: list = []
    if error:
        body.append(error_banner(error))
    if articles:
        body.extend(article_card(a, i + 1) for i, a in enumerate(articles))
    elif not error:
        body.append(empty_state("No articles in this category yet."))

    return html.Div(
        [
            page_header(category.subtitle, f"Most popular in {category.label}"),
            html.Div(body, style={"display": "flex", "flexDirection": "column", "gap": "10px"}),
        ],
        style={"padding": "1.5rem", "maxWidth": "1100px", "margin": "0 auto"},
    )

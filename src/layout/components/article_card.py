"""
src/layout/components/article_card.py
──────────────────────────────────────
Numbered article row for list pages.

Article titles are left untranslated; descriptions and categories follow
the active language.
"""
from dash import dcc, html

from config.categories import CATEGORY_CONFIG
from src.data.models import Article

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"


def article_card(article: Article, position: int) -> html.Div:
    category = CATEGORY_CONFIG.get(article.category.lower())
    accent = category.color if category else MUTED

    thumbnail = (
        html.Img(src=article.image, alt=article.title, style={"width": "96px", "height": "64px", "objectFit": "cover", "borderRadius": "4px"})
        if article.image
        else html.Div(style={"width": "96px", "height": "64px", "backgroundColor": BORDER, "borderRadius": "4px"})
    )

    return html.Div(
        [
            html.Span(
                f"{position:02d}",
                style={"fontSize": "1.4rem", "fontWeight": "700", "color": accent, "minWidth": "40px"},
                **{"data-no-translate": True},
            ),
            dcc.Link(
                [
                    thumbnail,
                    html.Div(
                        [
                            html.H3(
                                article.title,
                                style={"fontSize": "1rem", "fontWeight": "600", "margin": "0 0 4px", "color": "#c9d1d9"},
                                **{"data-no-translate": True},
                            ),
                            html.P(article.summary, style={"fontSize": ".82rem", "color": MUTED, "margin": "0 0 4px"}),
                            html.P(article.category, style={"fontSize": ".68rem", "color": accent, "textTransform": "uppercase", "margin": 0}),
                        ]
                    ),
                ],
                href=f"/article/{article.id}",
                style={"display": "flex", "gap": "12px", "textDecoration": "none", "flex": 1},
            ),
        ],
        style={
            "display": "flex",
            "alignItems": "center",
            "gap": "12px",
            "backgroundColor": CARD_BG,
            "border": f"1px solid {BORDER}",
            "borderRadius": "8px",
            "padding": "12px 14px",
        },
    )

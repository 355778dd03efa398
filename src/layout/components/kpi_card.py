"""
src/layout/components/kpi_card.py
──────────────────────────────────
Stat card for the admin overview.
"""
from dash import dcc, html

CARD_BG = "#161b22"
MUTED = "#8b949e"
ACCENT = "#58a6ff"


def kpi_card(
    label: str,
    value: str,
    color: str = "#c9d1d9",
    href: str = "",
    border_color: str = "#30363d",
) -> html.Div:
    """
    Compact stat card.

    Args:
        label: Metric name (translatable, shown above value)
        value: Formatted value; never translated
        color: Value text color
        href: Optional "View →" link to the matching public listing
        border_color: Card border color
    """
    children = [
        html.Div(label, style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"}),
        html.Div(
            value,
            style={"fontSize": "1.6rem", "fontWeight": "700", "color": color, "lineHeight": "1.2", "marginTop": "2px"},
            **{"data-no-translate": True},
        ),
    ]
    if href:
        children.append(
            dcc.Link("View →", href=href, style={"fontSize": ".72rem", "color": ACCENT, "fontWeight": "600"})
        )

    return html.Div(
        children,
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {border_color}",
            "borderRadius": "8px",
            "padding": "14px 16px",
            "minWidth": "120px",
            "display": "flex",
            "flexDirection": "column",
            "gap": "6px",
        },
    )

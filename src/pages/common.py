"""
src/pages/common.py
────────────────────
Building blocks shared by the public pages.
"""
from dash import html

MUTED = "#8b949e"
ERROR = "#da3633"


def page_header(title: str, subtitle: str = "") -> html.Div:
    children = [html.H2(title, className="page-title")]
    if subtitle:
        children.append(html.P(subtitle, className="page-subtitle", style={"color": MUTED}))
    return html.Div(children, className="page-header", style={"marginBottom": "1.2rem"})


def error_banner(message: str) -> html.Div:
    return html.Div(
        message,
        style={
            "color": ERROR,
            "border": f"1px solid {ERROR}",
            "borderRadius": "6px",
            "padding": "10px 14px",
            "marginBottom": "1rem",
            "fontSize": ".85rem",
        },
    )


def empty_state(message: str) -> html.Div:
    return html.Div(message, style={"color": MUTED, "padding": "20px", "textAlign": "center"})


def not_found() -> html.Div:
    return html.Div(
        [
            page_header("Page not found", "The page you are looking for does not exist."),
        ],
        style={"padding": "1.5rem"},
    )

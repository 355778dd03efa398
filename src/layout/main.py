"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Location for routing
  - dcc.Store holding the visitor's language in browser localStorage
    (the per-visitor preference; re-triggers translated callbacks)
  - Navbar container + page content container
  - Footer (translated together with the navbar)
"""
from dash import dcc, html

from src.layout.navbar import create_navbar


def create_footer() -> html.Footer:
    return html.Footer(
        [
            html.Span("BlogInfo", **{"data-no-translate": True}),
            html.Span(" · "),
            html.Span("Health"),
            html.Span(" · "),
            html.Span("Technology"),
            html.Span(" · "),
            html.Span("Sport"),
        ],
        style={
            "textAlign": "center",
            "padding": ".7rem",
            "fontSize": ".72rem",
            "color": "#8b949e",
            "borderTop": "1px solid #30363d",
            "marginTop": "2rem",
        },
    )


def create_layout(current_language: str = "en") -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Client-side state ─────────────────────────────────────────────
            # `data` only seeds first visits; a stored choice wins
            dcc.Store(id="store-lang", storage_type="local", data=current_language),

            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=False),

            # ── Navigation bar (rendered + translated by callback) ────────────
            # Pre-rendered so the language toggle exists before the first callback
            html.Div(create_navbar(current_language), id="navbar-container"),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Div(create_footer(), id="footer-container"),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )

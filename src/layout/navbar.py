"""
src/layout/navbar.py
─────────────────────
Navigation bar with category links, search box and language toggle.

Pre-rendered in the root layout, then re-rendered by a callback (see
src/callbacks/navigation.py) in the visitor's language after every toggle.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from config.categories import CATEGORY_CONFIG
from src.layout.components.language_toggle import language_toggle

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"


def create_navbar(current_language: str) -> dbc.Navbar:
    links = [
        dbc.NavItem(dbc.NavLink(cat.label, href=cat.path, id=f"nav-{slug}", active="exact"))
        for slug, cat in CATEGORY_CONFIG.items()
    ]

    return dbc.Navbar(
        dbc.Container(
            [
                # Brand
                dbc.NavbarBrand(
                    html.Span("BlogInfo", style={"fontWeight": "700", "letterSpacing": ".04em"}),
                    href="/",
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(
                        [
                            *links,
                            dbc.NavItem(
                                html.Div(
                                    [
                                        dcc.Input(
                                            id="search-input",
                                            type="search",
                                            placeholder="Search...",
                                            debounce=True,
                                            style={"fontSize": ".78rem", "padding": "2px 8px", "borderRadius": "4px"},
                                        ),
                                        html.Div(id="search-suggestions", style={"position": "absolute", "zIndex": 20}),
                                    ],
                                    style={"position": "relative", "marginLeft": "12px"},
                                )
                            ),
                            dbc.NavItem(dbc.NavLink("Admin", href="/admin", id="nav-admin", active="exact")),
                            dbc.NavItem(language_toggle(current_language)),
                        ],
                        className="ms-auto",
                        navbar=True,
                    ),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )

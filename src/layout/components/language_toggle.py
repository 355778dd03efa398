"""
src/layout/components/language_toggle.py
─────────────────────────────────────────
English / Bangla toggle button.

The label names the language you switch *to*, so it is marked
`data-no-translate`. The button is always rendered enabled; page callbacks
disable it and show the spinner only while their translation pass runs
(pass `TOGGLE_BUSY` as their `running=` argument).
"""
from dash import Output, html

from config.languages import TOGGLE_LABELS, TOGGLE_TITLES, is_supported

TOGGLE_ID = "lang-toggle-btn"
SPINNER_ID = "lang-toggle-spinner"

SPINNER_HIDDEN = {"display": "none"}
SPINNER_SHOWN = {"display": "inline"}

# Property values while a translating callback runs, then after it returns
TOGGLE_BUSY = [
    (Output(TOGGLE_ID, "disabled"), True, False),
    (Output(SPINNER_ID, "style"), SPINNER_SHOWN, SPINNER_HIDDEN),
]


def language_toggle(current_language: str) -> html.Div:
    language = current_language if is_supported(current_language) else "en"
    return html.Div(
        html.Button(
            [
                html.Span(TOGGLE_LABELS[language]),
                html.Span(" ⟳", id=SPINNER_ID, className="loading-spinner", style=SPINNER_HIDDEN),
            ],
            id=TOGGLE_ID,
            n_clicks=0,
            disabled=False,
            title=TOGGLE_TITLES[language],
            style={
                "background": "rgba(88,166,255,0.15)",
                "border": "1px solid #30363d",
                "color": "#58a6ff",
                "borderRadius": "4px",
                "fontSize": ".78rem",
                "fontWeight": "700",
                "padding": "2px 10px",
                "cursor": "pointer",
            },
        ),
        style={"display": "flex", "alignItems": "center", "marginLeft": "12px"},
        **{"data-no-translate": True},
    )

"""
src/callbacks/navigation.py — Routing, navbar, language toggle and search callbacks.

Every page is built in English and then passed through `render_translated`,
which brings it into the visitor's language before it is sent to the browser.
The language comes from the `store-lang` store (browser localStorage), so
each visitor keeps their own choice.
"""
from __future__ import annotations

import logging

import httpx
from dash import Input, Output, State, ctx, dcc, html
from dash.exceptions import PreventUpdate

from config.categories import CATEGORY_CONFIG, MAX_ARTICLES_DISPLAY
from config.languages import SOURCE_LANGUAGE, is_supported, other_language
from config.settings import settings
from src.analytics.content_stats import category_counts, latest_articles
from src.data import content
from src.data.content import ApiError
from src.data.media import pick_video_id
from src.i18n.client import TranslationClient
from src.i18n.hook import render_translated
from src.layout.components.language_toggle import TOGGLE_BUSY, TOGGLE_ID
from src.layout.main import create_footer
from src.layout.navbar import create_navbar
from src.pages import admin, article, category, common, home

logger = logging.getLogger(__name__)

MUTED = "#8b949e"


def page_language(lang: str | None) -> str:
    """The visitor's stored language, or the configured default."""
    if is_supported(lang):
        return lang
    return settings.DEFAULT_LANG if is_supported(settings.DEFAULT_LANG) else SOURCE_LANGUAGE


def next_language(lang: str | None) -> str:
    return other_language(page_language(lang))


def _load_articles(category_slug: str | None = None) -> tuple[list, str | None]:
    try:
        return content.fetch_articles(category_slug), None
    except (ApiError, httpx.HTTPError) as exc:
        logger.warning("Could not load articles (category=%s): %s", category_slug, exc)
        return [], "Unable to load articles. Please try again later."


def _backend_status() -> str:
    try:
        health = content.fetch_health(settings.API_TOKEN or None)
    except (ApiError, httpx.HTTPError) as exc:
        logger.warning("Backend health check failed: %s", exc)
        return "unavailable"
    return str(health.get("status") or "ok")


def build_page(pathname: str | None, language: str) -> html.Div:
    """Route a path to its page layout (English source text)."""
    path = (pathname or "/").rstrip("/") or "/"

    if path == "/":
        articles, error = _load_articles()
        return home.layout(latest_articles(articles, MAX_ARTICLES_DISPLAY), error)

    slug = path.lstrip("/")
    if slug in CATEGORY_CONFIG:
        articles, error = _load_articles(slug)
        return category.layout(CATEGORY_CONFIG[slug], articles[:MAX_ARTICLES_DISPLAY], error)

    if path.startswith("/article/"):
        article_id = path.removeprefix("/article/")
        try:
            item = content.fetch_article(article_id, language)
        except (ApiError, httpx.HTTPError) as exc:
            logger.warning("Could not load article %s: %s", article_id, exc)
            message = str(exc) if isinstance(exc, ApiError) else None
            return article.layout(None, error=message)
        if item is None:
            return article.layout(None, error="Article not found.")
        return article.layout(item, pick_video_id(item))

    if path == "/admin":
        articles, error = _load_articles()
        return admin.layout(category_counts(articles), len(articles), error, _backend_status())

    return common.not_found()


def render_page(pathname: str | None, lang: str | None, client: TranslationClient | None = None):
    language = page_language(lang)
    return render_translated(build_page(pathname, language), language=language, client=client)


def render_chrome(lang: str | None, client: TranslationClient | None = None):
    """Navbar and footer in the visitor's language."""
    language = page_language(lang)
    navbar = render_translated(create_navbar(language), language=language, client=client)
    footer = render_translated(create_footer(), language=language, client=client)
    return navbar, footer


def suggestion_list(query: str | None, lang: str | None):
    suggestions = content.fetch_suggestions(query, lang=page_language(lang))
    if not suggestions:
        return None
    return html.Ul(
        [
            html.Li(
                dcc.Link(s.label, href=f"/article/{s.id}") if s.type == "articles" else s.label,
                style={"fontSize": ".78rem", "color": MUTED, "listStyle": "none"},
                **{"data-no-translate": True},
            )
            for s in suggestions
        ],
        style={"backgroundColor": "#161b22", "border": "1px solid #30363d", "borderRadius": "4px", "padding": "6px 10px", "margin": 0},
    )


def register(app) -> None:
    """Register routing, navbar and language callbacks."""

    # ── Page routing ──────────────────────────────────────────────────────────
    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
        Input("store-lang", "data"),
        running=TOGGLE_BUSY,
    )
    def display_page(pathname: str, lang: str):
        return render_page(pathname, lang)

    # ── Navbar + footer (re-translated on toggle) ─────────────────────────────
    @app.callback(
        Output("navbar-container", "children"),
        Output("footer-container", "children"),
        Input("store-lang", "data"),
    )
    def update_chrome(lang: str):
        return render_chrome(lang)

    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open

    # ── Language toggle ───────────────────────────────────────────────────────
    @app.callback(
        Output("store-lang", "data"),
        Input(TOGGLE_ID, "n_clicks"),
        State("store-lang", "data"),
        prevent_initial_call=True,
    )
    def update_lang(n_clicks: int, lang: str) -> str:
        if ctx.triggered_id != TOGGLE_ID or not n_clicks:
            raise PreventUpdate
        return next_language(lang)

    # ── Search suggestions ────────────────────────────────────────────────────
    @app.callback(
        Output("search-suggestions", "children"),
        Input("search-input", "value"),
        State("store-lang", "data"),
        prevent_initial_call=True,
    )
    def update_suggestions(query: str | None, lang: str):
        return suggestion_list(query, lang)

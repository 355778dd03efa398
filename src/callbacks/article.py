"""
src/callbacks/article.py
─────────────────────────
Article detail page callbacks: comment list and comment posting.

The comment list arrives after the page itself, so it is translated on its
own once loaded (and again whenever a new comment bumps `comments-version`
or the visitor switches language).
"""
from __future__ import annotations

import logging

import httpx
from dash import Input, Output, State, html

from config.settings import settings
from src.callbacks.navigation import page_language
from src.data import content
from src.data.content import ApiError
from src.i18n.client import TranslationClient
from src.i18n.hook import render_translated
from src.layout.components.language_toggle import TOGGLE_BUSY
from src.pages.article import comments_section

logger = logging.getLogger(__name__)

OK = "#2ea44f"
ERROR = "#da3633"


def render_comments(article_id: str, lang: str | None, client: TranslationClient | None = None):
    try:
        comments, error = content.fetch_comments(article_id), None
    except ValueError:
        # Non-numeric ids (e.g. video articles) have no comment thread
        comments, error = [], None
    except (ApiError, httpx.HTTPError) as exc:
        logger.warning("Could not load comments for %s: %s", article_id, exc)
        comments, error = [], "Unable to load comments."
    return render_translated(
        comments_section(comments, error), language=page_language(lang), client=client
    )


def submit_comment(
    text: str | None,
    article_id: str,
    version: int | None,
    lang: str | None,
    client: TranslationClient | None = None,
):
    """Post a comment; returns (status message, comments version, input value)."""
    language = page_language(lang)
    try:
        content.create_comment(article_id, text, settings.API_TOKEN)
    except (ValueError, ApiError) as exc:
        status = html.Span(str(exc), style={"color": ERROR})
        return render_translated(status, language=language, client=client), version, text
    except httpx.HTTPError as exc:
        logger.warning("Posting comment failed: %s", exc)
        status = html.Span("Failed to post comment.", style={"color": ERROR})
        return render_translated(status, language=language, client=client), version, text

    status = html.Span("Comment posted.", style={"color": OK})
    return render_translated(status, language=language, client=client), (version or 0) + 1, ""


def register(app) -> None:

    @app.callback(
        Output("article-comments", "children"),
        Input("article-id", "data"),
        Input("comments-version", "data"),
        Input("store-lang", "data"),
        running=TOGGLE_BUSY,
    )
    def load_comments(article_id: str, version: int, lang: str):
        return render_comments(article_id, lang)

    @app.callback(
        Output("comment-status", "children"),
        Output("comments-version", "data"),
        Output("comment-input", "value"),
        Input("comment-submit", "n_clicks"),
        State("comment-input", "value"),
        State("article-id", "data"),
        State("comments-version", "data"),
        State("store-lang", "data"),
        prevent_initial_call=True,
    )
    def post_comment(n_clicks: int, text: str | None, article_id: str, version: int, lang: str):
        return submit_comment(text, article_id, version, lang)

"""
src/pages/article.py
─────────────────────
Article detail page.

The article header and body come from the backend already in the requested
language, so they are marked `data-no-translate`. The comments block is
filled by its own callback once comments are loaded and is translated then.
"""
from __future__ import annotations

from dash import dcc, html

from config.settings import settings
from src.data.models import Article, Comment
from src.pages.common import empty_state, error_banner

CARD_BG = "#161b22"
BORDER = "#30363d"
MUTED = "#8b949e"
NO_TRANSLATE = {"data-no-translate": True}


def _header(article: Article) -> html.Div:
    meta = [article.author] if article.author else []
    if article.timestamp is not None:
        meta.append(article.timestamp.strftime("%d %b %Y"))
    return html.Div(
        [
            html.H1(article.title, style={"fontSize": "1.8rem", "fontWeight": "700"}),
            html.Div(" · ".join(meta), style={"color": MUTED, "fontSize": ".8rem"}),
        ],
        className="article-header",
        style={"marginBottom": "1rem"},
        **NO_TRANSLATE,
    )


def _video(video_id: str) -> html.Iframe:
    return html.Iframe(
        src=f"https://www.youtube.com/embed/{video_id}",
        title="YouTube video",
        style={"width": "100%", "aspectRatio": "16 / 9", "border": 0, "borderRadius": "8px", "marginBottom": "1rem"},
    )


def _body(article: Article) -> html.Div:
    paragraphs = [p for p in article.content.split("\n") if p.strip()]
    return html.Div(
        [html.P(p, style={"lineHeight": "1.7"}) for p in paragraphs],
        className="article-text",
        **NO_TRANSLATE,
    )


def _comment_form() -> html.Div:
    if not settings.API_TOKEN:
        return html.P("Please login to comment", style={"color": MUTED, "fontSize": ".85rem"})
    return html.Div(
        [
            dcc.Textarea(
                id="comment-input",
                placeholder="Write your comment...",
                style={"width": "100%", "minHeight": "80px", "backgroundColor": CARD_BG, "color": "#c9d1d9", "border": f"1px solid {BORDER}", "borderRadius": "6px"},
            ),
            html.Button("Post Comment", id="comment-submit", n_clicks=0, className="btn btn-primary btn-sm mt-2"),
            html.Div(id="comment-status", style={"fontSize": ".8rem", "marginTop": "6px"}),
        ]
    )


def comments_section(comments: list[Comment], error: str | None = None) -> html.Div:
    """The translatable comments block (title, list, empty-state text)."""
    items: list = []
    if error:
        items.append(error_banner(error))
    for c in comments:
        meta = [html.Span(c.author_display_name or "Anonymous", className="comment-author", style={"fontWeight": "600"}, **NO_TRANSLATE)]
        if c.created_at is not None:
            meta.append(
                html.Span(c.created_at.strftime("%d %b %Y %H:%M"), className="comment-time", style={"color": MUTED, "marginLeft": "8px", "fontSize": ".75rem"}, **NO_TRANSLATE)
            )
        if c.is_edited:
            meta.append(html.Span(" (edited)", className="comment-edited-flag", style={"color": MUTED, "fontSize": ".72rem"}))
        items.append(
            html.Div(
                [
                    html.Div(meta),
                    html.P(c.body, style={"margin": "4px 0 0"}, **NO_TRANSLATE),
                ],
                style={"borderBottom": f"1px solid {BORDER}", "padding": "10px 0"},
            )
        )
    if not comments and not error:
        items.append(empty_state("No comments yet. Be the first to comment!"))

    return html.Div([html.H3("Comments", style={"fontSize": "1.1rem"}), *items])


def layout(
    article: Article | None,
    video_id: str = "",
    error: str | None = None,
) -> html.Div:
    if article is None:
        return html.Div(
            [error_banner(error or "Unable to load this article.")],
            style={"padding": "1.5rem", "maxWidth": "900px", "margin": "0 auto"},
        )

    return html.Div(
        [
            dcc.Store(id="article-id", data=article.id),
            dcc.Store(id="comments-version", data=0),
            _header(article),
            _video(video_id) if video_id else html.Div(),
            _body(article),
            html.Div(
                [
                    html.Div(html.P("Loading..."), id="article-comments"),
                    _comment_form(),
                ],
                style={"backgroundColor": CARD_BG, "border": f"1px solid {BORDER}", "borderRadius": "8px", "padding": "14px", "marginTop": "1.5rem"},
            ),
        ],
        style={"padding": "1.5rem", "maxWidth": "900px", "margin": "0 auto"},
    )

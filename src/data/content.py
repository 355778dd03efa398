"""
src/data/content.py
───────────────────
Client for the content REST backend.

Provides:
  - fetch_articles()     : Article list, optionally filtered by category
  - fetch_article()      : One article in a given language (None if missing)
  - fetch_comments()     : Comments of an article ([] if the article is gone)
  - create_comment()     : Post a comment as an authenticated user
  - fetch_suggestions()  : Search-box suggestions ([] on any failure)
  - fetch_health()       : Backend liveness check

Non-2xx answers raise `ApiError`; bad input raises `ValueError` before any
request is made.
"""
from __future__ import annotations

import logging
import re

import httpx
from pydantic import ValidationError

from config.settings import settings
from src.data.models import Article, Comment, Suggestion, SuggestionType

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"^\d+$")
_DEFAULT_SUGGESTION_TYPES = (
    SuggestionType.ARTICLES.value,
    SuggestionType.CATEGORIES.value,
    SuggestionType.TAGS.value,
)

# Test hook: an httpx transport used instead of the network
_transport: httpx.BaseTransport | None = None


class ApiError(Exception):
    def __init__(self, message: str, status: int, details: dict | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.details = details or {}


# ── Plumbing ──────────────────────────────────────────────────────────────────

def _auth_headers(token: str | None) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token else {}


def _client() -> httpx.Client:
    return httpx.Client(
        base_url=settings.API_BASE_URL.rstrip("/"),
        timeout=settings.API_TIMEOUT_S,
        transport=_transport,
    )


def _body(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        return None


def _handle_json(response: httpx.Response, messages: dict[int, str] | None = None) -> object:
    """Return the decoded body, or raise ApiError with the server's message."""
    body = _body(response)
    if response.is_success:
        return {} if body is None else body

    payload = body if isinstance(body, dict) else {}
    message = (
        payload.get("error")
        or payload.get("message")
        or (messages or {}).get(response.status_code)
        or f"Server request failed. Please try again later. (Error {response.status_code})"
    )
    raise ApiError(message, response.status_code, payload)


def normalize_article_id(article_id: object) -> str:
    raw = str(article_id if article_id is not None else "").strip()
    if not raw or not _DIGITS.match(raw):
        raise ValueError("Invalid article ID for comments.")
    return raw


# ── Articles ──────────────────────────────────────────────────────────────────

def fetch_articles(category: str | None = None) -> list[Article]:
    params = {"category": category} if category else None
    with _client() as client:
        data = _handle_json(client.get("/articles", params=params))

    items = data if isinstance(data, list) else data.get("items", []) if isinstance(data, dict) else []
    articles = []
    for raw in items:
        try:
            articles.append(Article.from_api(raw))
        except (KeyError, TypeError, ValidationError) as exc:
            logger.warning("Skipping malformed article payload: %s", exc)
    return articles


def fetch_article(article_id: str, lang: str = "en") -> Article | None:
    with _client() as client:
        response = client.get(f"/articles/{article_id}/{lang}")
    if response.status_code == 404:
        return None
    data = _handle_json(
        response,
        {
            403: "You don't have permission to view this article.",
            500: "Server error occurred while loading the article. Please try again later.",
        },
    )
    return Article.from_api(data)


# ── Comments ──────────────────────────────────────────────────────────────────

def fetch_comments(article_id: object) -> list[Comment]:
    article = normalize_article_id(article_id)
    with _client() as client:
        response = client.get(f"/articles/{article}/comments")

    if response.status_code == 404:
        # Article not found or not published
        return []
    if not response.is_success:
        raise ApiError(
            f"Failed to load comments (status {response.status_code})", response.status_code
        )

    data = _body(response)
    if not isinstance(data, list):
        return []
    return [Comment.from_api(raw) for raw in data if raw]


def create_comment(article_id: object, text: str | None, token: str | None) -> Comment:
    body = (text or "").strip()
    article = normalize_article_id(article_id)
    if not body:
        raise ValueError("Comment text is required.")
    if not token:
        raise ValueError("You must be logged in to comment.")

    with _client() as client:
        response = client.post(
            f"/articles/{article}/comments",
            json={"body": body},
            headers=_auth_headers(token),
        )

    if not response.is_success:
        messages = {
            400: "Comment text is required.",
            401: "You must be logged in to comment.",
            404: "Article not found or not published.",
        }
        message = messages.get(
            response.status_code, f"Failed to create comment (status {response.status_code})"
        )
        raise ApiError(message, response.status_code)
    return Comment.from_api(response.json())


# ── Search ────────────────────────────────────────────────────────────────────

def fetch_suggestions(
    query: str | None,
    lang: str = "en",
    limit: int = 10,
    per_type_limit: int = 5,
    types: tuple[str, ...] = _DEFAULT_SUGGESTION_TYPES,
) -> list[Suggestion]:
    q = (query or "").strip()
    if not q:
        return []

    params = {
        "q": q,
        "limit": str(limit),
        "perTypeLimit": str(per_type_limit),
        "types": ",".join(types),
        "lang": lang,
    }
    try:
        with _client() as client:
            response = client.get("/search/suggestions", params=params)
    except httpx.HTTPError as exc:
        logger.error("Search suggestions request error: %s", exc)
        return []

    if not response.is_success:
        logger.error("Search suggestions request failed: %s", response.status_code)
        return []

    data = _body(response)
    raw_items = data.get("suggestions") if isinstance(data, dict) else None
    if not isinstance(raw_items, list):
        return []

    suggestions = []
    for raw in raw_items:
        try:
            suggestions.append(
                Suggestion(
                    type=raw.get("type"),
                    id=raw.get("id"),
                    label=raw.get("label") or raw.get("title") or raw.get("name") or "",
                )
            )
        except (AttributeError, ValidationError):
            continue
    return suggestions


# ── Health ────────────────────────────────────────────────────────────────────

def fetch_health(token: str | None = None) -> dict:
    with _client() as client:
        data = _handle_json(client.get("/health", headers=_auth_headers(token)))
    return data if isinstance(data, dict) else {"status": data}

"""
src/data/media.py
─────────────────
YouTube helpers for article pages.

Accepted inputs:
  - bare video id           dQw4w9WgXcQ
  - watch URL               https://www.youtube.com/watch?v=dQw4w9WgXcQ
  - short link / embed URL  https://youtu.be/dQw4w9WgXcQ
"""
from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from config.categories import CATEGORY_CONFIG, DEFAULT_VIDEO
from src.data.models import Article

_VIDEO_ID = re.compile(r"^[\w-]{11}$")


def extract_youtube_id(url_or_id: str | None) -> str:
    """Return the 11-character video id, or "" if none can be found."""
    if not url_or_id:
        return ""
    if _VIDEO_ID.match(url_or_id):
        return url_or_id

    parsed = urlparse(url_or_id)
    if not parsed.scheme or not parsed.netloc:
        return ""

    from_query = parse_qs(parsed.query).get("v", [""])[0]
    if _VIDEO_ID.match(from_query):
        return from_query

    parts = [p for p in parsed.path.split("/") if p]
    if parts and _VIDEO_ID.match(parts[-1]):
        return parts[-1]
    return ""


def pick_video_id(article: Article) -> str:
    """First usable video of the article, else its category's fallback video."""
    candidates = [
        article.youtube_id,
        *article.video_urls,
        *article.media_urls,
        article.video_url,
    ]
    for candidate in candidates:
        video_id = extract_youtube_id(candidate)
        if video_id:
            return video_id

    category = CATEGORY_CONFIG.get(article.category.lower())
    return category.fallback_video if category else DEFAULT_VIDEO

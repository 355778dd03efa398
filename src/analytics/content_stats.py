"""
src/analytics/content_stats.py
──────────────────────────────
Article statistics for the admin overview.

An article's category is its explicit `category` when set, otherwise it is
inferred from its tags; anything left over counts as "uncategorized".
"""
from __future__ import annotations

from datetime import UTC, datetime

import pandas as pd

from config.categories import CATEGORY_SLUGS, CATEGORY_TAG_ALIASES, UNCATEGORIZED
from src.data.models import Article


def infer_category(article: Article) -> str:
    explicit = article.category.strip().lower()
    if explicit:
        return explicit

    tags = {t.strip().lower() for t in article.tags}
    for slug, aliases in CATEGORY_TAG_ALIASES.items():
        if tags.intersection(aliases):
            return slug
    return UNCATEGORIZED


def articles_frame(articles: list[Article]) -> pd.DataFrame:
    """One row per article with its resolved category."""
    return pd.DataFrame(
        {
            "id": [a.id for a in articles],
            "title": [a.title for a in articles],
            "category": [infer_category(a) for a in articles],
            "timestamp": pd.to_datetime([a.timestamp for a in articles], utc=True),
        }
    )


def category_counts(articles: list[Article]) -> pd.DataFrame:
    """
    Article count per category.

    Known categories are always present (zero if empty) and come first, in
    site order; other categories follow alphabetically.

    Returns:
        DataFrame with columns `category` and `count`.
    """
    df = articles_frame(articles)
    counts = df.groupby("category").size() if not df.empty else pd.Series(dtype="int64")

    extra = sorted(c for c in counts.index if c not in CATEGORY_SLUGS)
    order = CATEGORY_SLUGS + extra
    counts = counts.reindex(order, fill_value=0).astype("int64")
    return pd.DataFrame({"category": order, "count": counts.to_numpy()})


def _aware(ts: datetime) -> datetime:
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=UTC)


def latest_articles(articles: list[Article], limit: int) -> list[Article]:
    """Newest first; articles without a timestamp go last."""
    dated = [a for a in articles if a.timestamp is not None]
    undated = [a for a in articles if a.timestamp is None]
    dated.sort(key=lambda a: _aware(a.timestamp), reverse=True)
    return (dated + undated)[:limit]

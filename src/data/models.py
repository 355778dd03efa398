"""
src/data/models.py
──────────────────
Pydantic v2 data models for articles, comments and search suggestions.

The REST backend speaks snake_case with string-or-number ids; `from_api`
normalises those payloads into these models.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class SuggestionType(str, Enum):
    ARTICLES = "articles"
    CATEGORIES = "categories"
    TAGS = "tags"


def _as_id(value: object) -> str | None:
    return None if value is None else str(value)


class Article(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    content: str = ""
    image: str | None = None
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    author: str = ""
    language: str | None = None
    timestamp: datetime | None = None
    youtube_id: str | None = None
    video_url: str | None = None
    video_urls: list[str] = Field(default_factory=list)
    media_urls: list[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: object) -> str:
        return str(v)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, v: object) -> list[str]:
        # Backend sends either a list or a comma-separated string
        if v is None:
            return []
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return [str(t) for t in v]

    @classmethod
    def from_api(cls, raw: dict) -> Article:
        return cls(
            id=raw["id"],
            title=raw.get("title") or "",
            description=raw.get("description") or raw.get("summary") or "",
            content=raw.get("content") or raw.get("body") or "",
            image=raw.get("image") or raw.get("image_url"),
            category=raw.get("category") or "",
            tags=raw.get("tags"),
            author=raw.get("author") or raw.get("author_display_name") or "",
            language=raw.get("language"),
            timestamp=raw.get("timestamp") or raw.get("published_at") or raw.get("created_at"),
            youtube_id=raw.get("youtubeId") or raw.get("youtube_id"),
            video_url=raw.get("video_url"),
            video_urls=raw.get("video_urls") or [],
            media_urls=raw.get("media_urls") or [],
        )

    @property
    def summary(self) -> str:
        """Description cut to 120 characters for list views."""
        if len(self.description) > 120:
            return self.description[:120] + "..."
        return self.description


class Comment(BaseModel):
    id: str
    article_id: str
    user_id: str | None = None
    author_display_name: str = ""
    body: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    edited_at: datetime | None = None
    edited_by_user_id: str | None = None
    deleted_at: datetime | None = None
    deleted_by_user_id: str | None = None

    @property
    def is_edited(self) -> bool:
        return self.edited_at is not None

    @classmethod
    def from_api(cls, raw: dict) -> Comment:
        return cls(
            id=str(raw["id"]),
            article_id=str(raw["article_id"]),
            user_id=_as_id(raw.get("user_id")),
            author_display_name=raw.get("author_display_name") or "",
            body=raw.get("body") or "",
            created_at=raw.get("created_at"),
            updated_at=raw.get("updated_at"),
            edited_at=raw.get("edited_at"),
            edited_by_user_id=_as_id(raw.get("edited_by_user_id")),
            deleted_at=raw.get("deleted_at"),
            deleted_by_user_id=_as_id(raw.get("deleted_by_user_id")),
        )


class Suggestion(BaseModel):
    type: SuggestionType
    id: str
    label: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: object) -> str:
        return str(v)

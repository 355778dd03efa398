"""
config/categories.py
────────────────────
Site content categories and their presentation settings.

Each category owns:
  - a public route (/health, /technology, /sport)
  - an accent colour used by cards and charts
  - a fallback YouTube video shown when an article has no usable video
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryInfo:
    slug: str
    label: str
    path: str
    color: str
    subtitle: str
    fallback_video: str  # 11-char YouTube id


# ── Category registry ─────────────────────────────────────────────────────────
CATEGORY_CONFIG: dict[str, CategoryInfo] = {
    "health": CategoryInfo(
        slug="health",
        label="Health",
        path="/health",
        color="#2ea44f",
        subtitle="Health & Wellness",
        fallback_video="ZToicYcHIOU",
    ),
    "technology": CategoryInfo(
        slug="technology",
        label="Technology",
        path="/technology",
        color="#58a6ff",
        subtitle="Latest in Technology",
        fallback_video="pxwm3sqAytE",
    ),
    "sport": CategoryInfo(
        slug="sport",
        label="Sport",
        path="/sport",
        color="#e8a020",
        subtitle="Sports News",
        fallback_video="ysz5S6PUM-U",
    ),
}

CATEGORY_SLUGS = list(CATEGORY_CONFIG.keys())

# Used when an article's category is unknown
DEFAULT_VIDEO = "pxwm3sqAytE"
UNCATEGORIZED = "uncategorized"

# Tag spellings that imply a category when none is set explicitly
CATEGORY_TAG_ALIASES: dict[str, tuple[str, ...]] = {
    "health": ("health",),
    "technology": ("technology", "tech"),
    "sport": ("sport", "sports"),
}

# Article lists are cut to this many items per page
MAX_ARTICLES_DISPLAY = 7

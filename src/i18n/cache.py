"""
src/i18n/cache.py
─────────────────
Process-wide translation memo.

Entries are keyed by (source text, target language) and are append-only:
once a translation is stored it is never replaced, so concurrent readers
always see either no entry or the final value.

Thread safety: a module-level lock guards the dict (Dash serves callbacks
from several worker threads).
"""
from __future__ import annotations

import threading

CacheKey = tuple[str, str]


class TranslationCache:
    def __init__(self) -> None:
        self._entries: dict[CacheKey, str] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(text: str, target: str) -> CacheKey:
        return (text, target)

    def get(self, text: str, target: str) -> str | None:
        with self._lock:
            return self._entries.get((text, target))

    def put(self, text: str, target: str, translated: str) -> str:
        """Store a translation unless one exists; return the stored value."""
        with self._lock:
            return self._entries.setdefault((text, target), translated)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


translation_cache = TranslationCache()

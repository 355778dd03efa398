"""
src/i18n/state.py
─────────────────
Process-wide language state.

Provides:
  - PreferenceStore      : JSON file holding the persisted language choice
  - LanguageState        : current language + "translation in progress" flag,
                           with synchronous change notifications
  - get_language_state() : lazily created shared instance

The in-memory value is authoritative. Storage problems are logged and the
feature degrades to a non-persistent toggle for the session.
"""
from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable
from pathlib import Path

from config.languages import SOURCE_LANGUAGE, is_supported, other_language
from config.settings import settings

logger = logging.getLogger(__name__)

LanguageListener = Callable[[str], None]


class PreferenceStore:
    """One durable key/value entry kept in a small JSON document."""

    def __init__(self, path: str | Path | None = None, key: str | None = None) -> None:
        self.path = Path(path or settings.LANG_STORAGE_PATH)
        self.key = key or settings.LANG_STORAGE_KEY

    def _read_document(self) -> dict:
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def load(self) -> str | None:
        try:
            value = self._read_document().get(self.key)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.warning("Could not read language preference from %s: %s", self.path, exc)
            return None
        return value if is_supported(value) else None

    def save(self, language: str) -> None:
        try:
            try:
                document = self._read_document()
            except (FileNotFoundError, ValueError):
                document = {}
            document[self.key] = language
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(document, f)
        except OSError as exc:
            logger.warning("Could not persist language preference to %s: %s", self.path, exc)


class LanguageState:
    def __init__(
        self,
        store: PreferenceStore | None = None,
        default: str | None = None,
    ) -> None:
        self._store = store
        self._lock = threading.RLock()
        self._listeners: list[LanguageListener] = []

        fallback = default if is_supported(default) else SOURCE_LANGUAGE
        saved = store.load() if store is not None else None
        self._language: str = saved or fallback
        self._is_translating = False

    # ── Reads ─────────────────────────────────────────────────────────────────

    @property
    def current_language(self) -> str:
        return self._language

    @property
    def is_translating(self) -> bool:
        return self._is_translating

    @property
    def is_english(self) -> bool:
        return self._language == "en"

    @property
    def is_bangla(self) -> bool:
        return self._language == "bn"

    # ── Mutations ─────────────────────────────────────────────────────────────

    def toggle_language(self) -> str:
        """Flip en ↔ bn, persist it, then notify every subscriber."""
        with self._lock:
            self._language = other_language(self._language)
            language = self._language
            listeners = list(self._listeners)

        if self._store is not None:
            self._store.save(language)

        for listener in listeners:
            try:
                listener(language)
            except Exception:
                logger.exception("Language listener %r failed", listener)
        return language

    def set_is_translating(self, value: bool) -> None:
        self._is_translating = bool(value)

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """Register `listener(language)`; returns a function that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe


# ── Shared instance ───────────────────────────────────────────────────────────

_state: LanguageState | None = None
_state_lock = threading.Lock()


def get_language_state() -> LanguageState:
    global _state
    with _state_lock:
        if _state is None:
            _state = LanguageState(store=PreferenceStore(), default=settings.DEFAULT_LANG)
        return _state


def reset_language_state(state: LanguageState | None = None) -> None:
    """Replace (or drop) the shared instance."""
    global _state
    with _state_lock:
        _state = state

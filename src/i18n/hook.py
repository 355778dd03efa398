"""
src/i18n/hook.py
────────────────
Per-view translation orchestrator.

A `TranslationHook` owns one component subtree. Whenever the language flips,
or the caller reports that the subtree's content changed, it runs a pass:

  en  → put back the captured English text, then re-capture it as the baseline
  bn  → capture the English text if nothing is captured yet, then translate
        every fragment in place

Originals are keyed by fragment ordinal, so restoration relies on the tree
keeping the same shape between capture and restore.

Triggers are debounced: a trigger inside the delay window replaces the
pending one. Running passes are never cancelled; if two overlap the later
write to a fragment wins, unless `discard_stale` is on.

Usage (inside a running event loop):
    hook = TranslationHook(deps=(comments_loaded,))
    hook.mount(comments_root)
    ...
    hook.update_deps(True)     # content arrived → re-capture/translate
    await hook.settle()
"""
from __future__ import annotations

import asyncio
import logging

from dash.development.base_component import Component

from config.languages import SOURCE_LANGUAGE
from config.settings import settings
from src.i18n.client import TranslationClient, translation_service
from src.i18n.extraction import get_text_fragments
from src.i18n.state import LanguageState, get_language_state

logger = logging.getLogger(__name__)


class TranslationHook:
    def __init__(
        self,
        deps: tuple | list = (),
        *,
        state: LanguageState | None = None,
        client: TranslationClient | None = None,
        delay_ms: int | None = None,
        discard_stale: bool | None = None,
    ) -> None:
        self._state = state if state is not None else get_language_state()
        self._client = client if client is not None else translation_service
        delay_ms = settings.TRANSLATE_DEBOUNCE_MS if delay_ms is None else delay_ms
        self.delay = max(delay_ms, 0) / 1000
        self.discard_stale = (
            settings.TRANSLATE_DISCARD_STALE if discard_stale is None else discard_stale
        )

        self._deps = tuple(deps)
        self._root: Component | None = None
        self._originals: dict[int, str] = {}

        self._loop: asyncio.AbstractEventLoop | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._passes: set[asyncio.Task] = set()
        self._pass_seq = 0
        self._unsubscribe = None

    # ── Root ("ref") ──────────────────────────────────────────────────────────

    @property
    def root(self) -> Component | None:
        return self._root

    @property
    def originals(self) -> dict[int, str]:
        return dict(self._originals)

    def attach(self, root: Component | None) -> None:
        self._root = root

    def detach(self) -> None:
        self._root = None

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def mount(self, root: Component | None = None) -> None:
        """Attach, follow language changes, and schedule the first pass."""
        self._loop = asyncio.get_running_loop()
        if root is not None:
            self.attach(root)
        if self._unsubscribe is None:
            self._unsubscribe = self._state.subscribe(self._on_language_change)
        self.schedule()

    def unmount(self) -> None:
        self._cancel_timer()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.detach()

    def update_deps(self, *deps) -> None:
        if deps == self._deps:
            return
        self._deps = deps
        self.schedule()

    # ── Scheduling ────────────────────────────────────────────────────────────

    def _on_language_change(self, language: str) -> None:
        if self._loop is None or self._loop.is_closed():
            return
        # Toggles may come from any thread
        self._loop.call_soon_threadsafe(self.schedule)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def schedule(self) -> None:
        """(Re)start the debounce timer; only the last trigger in a burst runs."""
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._cancel_timer()
        self._timer = self._loop.call_later(self.delay, self._fire)

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def _fire(self) -> None:
        self._timer = None
        task = self._loop.create_task(self.run_pass())
        self._passes.add(task)
        task.add_done_callback(self._passes.discard)

    async def settle(self) -> None:
        """Wait for the pending timer (if any) and every started pass."""
        while self._timer is not None or self._passes:
            if self._passes:
                await asyncio.gather(*list(self._passes), return_exceptions=True)
            else:
                await asyncio.sleep(self.delay / 2)

    # ── Capture / restore ─────────────────────────────────────────────────────

    def _capture(self, root: Component) -> None:
        self._originals.clear()
        for index, fragment in enumerate(get_text_fragments(root)):
            self._originals[index] = fragment.text

    def _restore(self, root: Component) -> None:
        for index, fragment in enumerate(get_text_fragments(root)):
            original = self._originals.get(index)
            if original is not None:
                fragment.text = original

    # ── Pass ──────────────────────────────────────────────────────────────────

    async def run_pass(self) -> None:
        root = self._root
        if root is None:
            return

        self._pass_seq += 1
        seq = self._pass_seq
        language = self._state.current_language

        def is_current() -> bool:
            return not self.discard_stale or seq == self._pass_seq

        self._state.set_is_translating(True)
        try:
            if language == SOURCE_LANGUAGE:
                self._restore(root)
                self._capture(root)
            else:
                if not self._originals:
                    self._capture(root)
                await self._client.translate_element(root, language, should_write=is_current)
        except Exception:
            logger.exception("Translation pass failed")
        finally:
            self._state.set_is_translating(False)


def render_translated(
    root: Component,
    *,
    language: str | None = None,
    state: LanguageState | None = None,
    client: TranslationClient | None = None,
) -> Component:
    """
    Bring a freshly built layout into the active language.

    For synchronous Dash callbacks: runs one immediate pass in a private
    event loop and returns `root` (modified in place).

    Args:
        root: Layout to translate in place
        language: Per-request language (the browser's choice). When given, the
            pass runs against a private state and the shared one is untouched;
            unsupported codes render English.
        state: Language state to read when `language` is not given
        client: Translation client (defaults to the shared service)
    """
    if language is not None:
        state = LanguageState(store=None, default=language)
    hook = TranslationHook(state=state, client=client, delay_ms=0)
    hook.attach(root)
    asyncio.run(hook.run_pass())
    return root
